# app/ui/login.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from app.services.api import login_user, register_user

load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD")

cookies = EncryptedCookieManager(password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def logout():
    for key in ("token", "name", "email"):
        if key in cookies:
            del cookies[key]
    cookies.save()


def login_page():
    st.title("🔐 Sign in")

    if "token" not in st.session_state:
        if "token" in cookies:
            st.session_state["token"] = cookies["token"]
            st.session_state["name"] = cookies.get("name", "")
            st.session_state["email"] = cookies.get("email", "")
            st.rerun()

    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form()
    else:
        show_login_form()


def show_login_form():
    with st.form("login_form"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Log in")

    if submitted:
        with st.spinner("Logging in..."):
            result = login_user(email, password)
            if result.get("error"):
                st.error(f"❌ Login failed: {result['error']}")
            else:
                st.session_state["token"] = result["token"]
                st.session_state["name"] = result["user"]["name"]
                st.session_state["email"] = result["user"]["email"]
                cookies["token"] = result["token"]
                cookies["name"] = result["user"]["name"]
                cookies["email"] = result["user"]["email"]
                cookies.save()

                st.success("✅ Logged in")
                st.rerun()

    if st.button("Create an account"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form():
    st.subheader("📝 Register")

    name = st.text_input("Name", key="new_name")
    email = st.text_input("Email", key="new_email")
    password = st.text_input("Password", type="password", key="new_pass")

    if st.button("Register"):
        with st.spinner("Creating account..."):
            result = register_user(name, email, password)
            if result.get("success"):
                st.success("🎉 Account created, please log in.")
                st.session_state["show_register"] = False
                st.rerun()
            else:
                st.error(f"❌ Registration failed: {result.get('error', 'unknown error')}")

    if st.button("← Back to login"):
        st.session_state["show_register"] = False
        st.rerun()
