"""SuperMercado Management Console - Main Application Entry Point."""
import logging

import streamlit as st

from core.constants import (
    APP_TITLE,
    LOG_LEVEL,
    MENU_CLIENTS,
    MENU_DASHBOARD,
    MENU_ORDERS,
    MENU_PRODUCTS,
    MENU_REPORTS,
    MENU_SALES,
    MENU_SETTINGS,
)
from core.mobile_styles import apply_mobile_styles
from core.services import init_stores
from core.simple_auth import login_form, require_auth
from ui.components import flush_notifications
from ui.sidebar import render_sidebar_menu

# Import page render functions
from page_modules import clients, dashboard, orders, products, reports, sales, settings

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Page configuration
st.set_page_config(
    page_title=APP_TITLE,
    page_icon="\U0001F6D2",
    layout="wide",
)

# Apply mobile-friendly styles
apply_mobile_styles()

# Check authentication
if not require_auth():
    login_form()
    st.stop()

# Seed the in-memory collections for this session
init_stores()

# Render sidebar menu
menu = render_sidebar_menu()

# Toasts queued by the previous run
flush_notifications()

# Page routing
pages = {
    MENU_DASHBOARD: dashboard.render,
    MENU_CLIENTS: clients.render,
    MENU_PRODUCTS: products.render,
    MENU_ORDERS: orders.render,
    MENU_SALES: sales.render,
    MENU_REPORTS: reports.render,
    MENU_SETTINGS: settings.render,
}

# Render selected page
if menu not in pages:
    menu = MENU_DASHBOARD
pages[menu]()
