# ---------- constants.py ----------
"""Project-wide constants and configuration helpers."""
import logging
import os
from pathlib import Path
from typing import List

import streamlit as st
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Local development reads overrides from a .env file at the project root
_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"
if _ENV_PATH.exists():
    load_dotenv(_ENV_PATH)


def _setting(name: str, default: str) -> str:
    """Read a setting from Streamlit secrets, then the environment."""
    try:
        if name in st.secrets:
            return str(st.secrets[name])
    except Exception:
        # No secrets.toml outside of a configured Streamlit deployment
        logger.debug("Streamlit secrets unavailable for %s", name)
    return os.getenv(name, default)


APP_TITLE = "SuperMercado"
APP_SUBTITLE = "Management Console"

APP_USERNAME: str = _setting("APP_USERNAME", "admin")
APP_PASSWORD: str = _setting("APP_PASSWORD", "123456")
LOG_LEVEL: str = _setting("LOG_LEVEL", "INFO").upper()

PRODUCT_CATEGORIES: List[str] = [
    "Alimentos",
    "Bebidas",
    "Higiene",
    "Limpeza",
    "Padaria",
    "Açougue",
    "Hortifruti",
    "Outros",
]

ORDER_STATUSES: List[str] = [
    "pending",
    "processing",
    "completed",
    "cancelled",
]

# Product cards warn below this stock level
LOW_STOCK_THRESHOLD_DEFAULT: int = 10

CURRENCY_SYMBOL = "R$"
DISPLAY_DATE_FORMAT = "%d/%m/%Y"

# Sidebar menu labels (keep in sync across app and sidebar)
MENU_DASHBOARD = "\U0001F4C8 Dashboard"
MENU_CLIENTS = "\U0001F465 Clients"
MENU_PRODUCTS = "\U0001F4E6 Products"
MENU_ORDERS = "\U0001F6D2 Orders"
MENU_SALES = "\U0001F4B5 Sales"
MENU_REPORTS = "\U0001F4CA Reports"
MENU_SETTINGS = "⚙️ Settings"

MENU_ITEMS: List[str] = [
    MENU_DASHBOARD,
    MENU_CLIENTS,
    MENU_PRODUCTS,
    MENU_ORDERS,
    MENU_SALES,
    MENU_REPORTS,
    MENU_SETTINGS,
]
