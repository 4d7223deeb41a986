from datetime import datetime, timezone

import streamlit as st

from company_stocks.ui.components.api_client import check_gateway_connection
from company_stocks.ui.components.company_form import create_company_form
from company_stocks.ui.components.company_list import display_companies


def main():
    """
    Main entry point for the Streamlit Company Stocks application.
    """
    st.set_page_config(
        page_title="Company Stock Statistics",
        page_icon="📈",
        layout="wide",
    )
    st.title("Company Stock Statistics")
    st.sidebar.header("Controls")

    # Connection status indicator
    gateway_connected = check_gateway_connection()
    if gateway_connected:
        st.sidebar.success("✅ Gateway Connected")
    else:
        st.sidebar.error("❌ Gateway Disconnected")

    view_mode = st.sidebar.radio("View Mode", ["Companies", "Add Company"])

    st.sidebar.info(
        f"Last Updated: {datetime.now(timezone.utc).strftime('%H:%M:%S')} UTC"
    )

    if not gateway_connected:
        st.error("Gateway connection required to view or add companies")
    elif view_mode == "Companies":
        display_companies()
    elif view_mode == "Add Company":
        create_company_form()


if __name__ == "__main__":
    main()
