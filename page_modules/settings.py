"""Store settings page."""
from dataclasses import replace

import streamlit as st

from core.services import get_settings, save_settings
from ui.components import notify


def render():
    """Render the settings page."""
    st.header("⚙️ Settings")
    st.caption("Configure your store's information")
    current = get_settings()

    with st.form("settings_form"):
        st.subheader("\U0001F3EA Company")
        company_name = st.text_input("Company name", value=current.company_name)
        email = st.text_input("E-mail", value=current.email)
        phone = st.text_input("Phone", value=current.phone)
        address = st.text_input("Address", value=current.address)

        st.subheader("\U0001F514 Preferences")
        notifications = st.toggle("Notifications", value=current.notifications)
        backup_auto = st.toggle("Automatic backup", value=current.backup_auto)

        if st.form_submit_button("\U0001F4BE Save settings"):
            save_settings(
                replace(
                    current,
                    company_name=company_name.strip(),
                    email=email.strip(),
                    phone=phone.strip(),
                    address=address.strip(),
                    notifications=notifications,
                    backup_auto=backup_auto,
                )
            )
            notify("Settings saved", "Your settings were updated.")
            st.rerun()
