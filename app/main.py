# app/main.py

import streamlit as st
from dotenv import load_dotenv
from app.ui.login import login_page, logout
from app.ui.dashboard import dashboard_page


load_dotenv()


def main_page():
    st.sidebar.markdown("## 📋 Menu")
    st.sidebar.write(st.session_state.get("email", ""))

    if st.sidebar.button("🔓 Log out"):
        logout()
        st.session_state.clear()
        st.rerun()

    dashboard_page()


if "token" not in st.session_state:
    login_page()
else:
    main_page()
