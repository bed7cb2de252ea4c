# app/ui/dashboard.py

import streamlit as st
from app.services.api import get_protected, get_chart_url


MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]
REVENUE = [12000, 19000, 15000, 25000, 22000, 42000]
EXPENSES = [8000, 12000, 10000, 15000, 13000, 18000]


def dashboard_page():
    st.title(f"Hello, {st.session_state.get('name', '')}!")

    if st.button("🔑 Check protected access"):
        result = get_protected(st.session_state.get("token"))
        if result.get("error"):
            st.error(f"❌ {result['error']}")
        else:
            st.success(f"{result['message']} (user id: {result['userId']})")

    st.subheader("📈 Revenue Overview")
    st.line_chart(
        {"Month": list(range(1, len(MONTHS) + 1)), "Revenue": REVENUE, "Expenses": EXPENSES},
        x="Month",
        y=["Revenue", "Expenses"],
    )
    st.caption("Months: " + ", ".join(f"{i} = {m}" for i, m in enumerate(MONTHS, start=1)))
    st.markdown(f"[Open the Chart.js version]({get_chart_url()})")
