import os

import requests
import streamlit as st

# Get gateway URL from environment variable
GATEWAY_URL = os.getenv("GATEWAY_URL", "http://gateway:8000")


def check_gateway_connection() -> bool:
    """
    Checks the connection to the gateway service.

    Returns:
        True if the connection is successful, otherwise False.
    """
    try:
        response = requests.get(f"{GATEWAY_URL}/health", timeout=2)
        return response.status_code == 200
    except requests.RequestException as e:
        st.error(f"Error checking gateway connection: {e}")
        return False


def get_companies() -> list[dict] | None:
    """
    Fetches every stored company.

    Returns:
        A list of company dictionaries or None if unavailable
    """
    try:
        response = requests.get(f"{GATEWAY_URL}/api/companies", timeout=5)
        if response.status_code == 200:
            return response.json()
        else:
            st.error(f"Failed to fetch companies: {response.status_code}")
            return None
    except requests.RequestException as e:
        st.error(f"Error fetching companies: {e}")
        return None


def create_company(company_data: dict) -> dict | None:
    """
    Submits a new company.

    Args:
        company_data: Dictionary with the company's name and stockPrices

    Returns:
        The saved company dictionary or None if submission failed
    """
    try:
        response = requests.post(
            f"{GATEWAY_URL}/api/companies", json=company_data, timeout=10
        )
        if response.status_code in (200, 201):
            return response.json()
        # Validation error
        elif response.status_code == 422:
            try:
                error_detail = response.json().get("detail", "Validation error")
            except ValueError:
                error_detail = f"Validation error (HTTP {response.status_code})"
            st.error(f"Company validation failed: {error_detail}")
            return None
        else:
            st.error(f"Failed to create company: {response.status_code}")
            return None
    except requests.RequestException as e:
        st.error(f"Error creating company: {e}")
        return None
