import pandas as pd


def filter_companies_by_name(companies: list[dict], search: str) -> list[dict]:
    """
    Filters companies whose name contains the search text, ignoring case.

    Args:
        companies: Company dictionaries as returned by the API
        search: Text to look for; blank text keeps every company

    Returns:
        The matching companies in their original order
    """
    needle = search.strip().lower()
    if not needle:
        return companies
    return [
        company
        for company in companies
        if company.get("name") and needle in company["name"].lower()
    ]


def companies_to_dataframe(companies: list[dict]) -> pd.DataFrame:
    """Builds a table with one row per company."""
    return pd.DataFrame(
        [
            {
                "ID": company["id"],
                "Name": company.get("name") or "",
                "Prices": ", ".join(
                    f"{price:g}" for price in company.get("stockPrices", [])
                ),
            }
            for company in companies
        ],
        columns=["ID", "Name", "Prices"],
    )


def prices_to_dataframe(company: dict) -> pd.DataFrame:
    """Builds a chartable price series indexed by a 1-based point number."""
    prices = company.get("stockPrices", [])
    return pd.DataFrame(
        {"Point": range(1, len(prices) + 1), "Price": prices}
    ).set_index("Point")


def parse_prices(raw: str) -> list[float]:
    """
    Parses a comma-separated list of prices.

    Args:
        raw: Text such as "1.5, 2.25, 3"

    Returns:
        The prices in the order given; empty entries are skipped

    Raises:
        ValueError: If an entry is not a number.
    """
    prices = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            prices.append(float(part))
        except ValueError:
            raise ValueError(f"'{part}' is not a valid price")
    return prices
