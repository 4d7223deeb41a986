import streamlit as st

from company_stocks.ui.components.api_client import create_company
from company_stocks.ui.components.utils import parse_prices


def create_company_form() -> None:
    """
    Creates a form for submitting a new company and its stock prices.
    """
    st.subheader("Add Company")

    with st.form("company_form"):
        name = st.text_input("Name", help="The company's name")
        raw_prices = st.text_area(
            "Stock Prices",
            help="Comma-separated prices in chronological order, e.g. 1.5, 2.25",
        )

        submitted = st.form_submit_button("Add Company", type="primary")

        if submitted:
            try:
                stock_prices = parse_prices(raw_prices)
            except ValueError as e:
                st.error(str(e))
                return

            with st.spinner("Saving company..."):
                response = create_company(
                    {"name": name, "stockPrices": stock_prices}
                )
            if response:
                st.success(
                    "Company saved successfully! "
                    f"Company ID: {response.get('id', 'N/A')}"
                )
                st.json(response)
            else:
                st.error("Failed to save company. Please try again.")
