import streamlit as st

from company_stocks.ui.components.api_client import get_companies
from company_stocks.ui.components.utils import (
    companies_to_dataframe,
    filter_companies_by_name,
    prices_to_dataframe,
)

CHART_TYPES = {
    "Line": "line_chart",
    "Bar": "bar_chart",
    "Scatter": "scatter_chart",
}


def display_companies() -> None:
    """
    Shows all companies with a name search and a price chart for the selected
    company.
    """
    st.subheader("Companies")

    companies = get_companies()
    # The API client has already reported the failure.
    if companies is None:
        return
    if not companies:
        st.info("No companies available")
        return

    search = st.text_input("Search company name...")
    matching = filter_companies_by_name(companies, search)
    if not matching:
        st.info("No companies match the search")
        return

    st.dataframe(companies_to_dataframe(matching), use_container_width=True)

    col1, col2 = st.columns(2)
    with col1:
        selected = st.selectbox(
            "Company",
            matching,
            format_func=lambda company: f"{company.get('name') or 'Unnamed'} "
            f"(#{company['id']})",
        )
    with col2:
        chart_type = st.selectbox("Chart Type", list(CHART_TYPES))

    if selected and selected.get("stockPrices"):
        draw_chart = getattr(st, CHART_TYPES[chart_type])
        draw_chart(prices_to_dataframe(selected))
    else:
        st.info("This company has no stock prices")
