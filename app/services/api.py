# app/services/api.py

import os
import requests
from dotenv import load_dotenv

load_dotenv()

# Base URL of the FastAPI backend
FASTAPI_URL = os.getenv("FASTAPI_URL", "http://localhost:3000")


def _error_from(response):
    try:
        return {"error": response.json().get("error", f"Status {response.status_code}")}
    except ValueError:
        return {"error": f"Status {response.status_code}"}


# -------------------------------
# Authentication-related functions
# -------------------------------

def register_user(name, email, password):
    """
    Creates an account. Returns {"success": True, "userId": ...} or {"error": ...}.
    """
    try:
        res = requests.post(
            f"{FASTAPI_URL}/api/register",
            json={"name": name, "email": email, "password": password},
        )
    except requests.RequestException as e:
        return {"error": str(e)}
    return res.json() if res.status_code == 200 else _error_from(res)


def login_user(email, password):
    """
    Logs in a user and returns {"token": ..., "user": {"name", "email"}} or {"error": ...}.
    """
    try:
        res = requests.post(
            f"{FASTAPI_URL}/api/login",
            json={"email": email, "password": password},
        )
    except requests.RequestException as e:
        return {"error": str(e)}
    return res.json() if res.status_code == 200 else _error_from(res)


def get_protected(token):
    """
    Calls the protected endpoint with the bearer token.
    """
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    try:
        res = requests.get(f"{FASTAPI_URL}/api/protected", headers=headers)
    except requests.RequestException as e:
        return {"error": str(e)}
    return res.json() if res.status_code == 200 else _error_from(res)


def get_chart_url():
    return f"{FASTAPI_URL}/chart"
