"""
Pytest configuration and shared fixtures

This file contains test fixtures that can be used across all tests.
Fixtures are reusable components that set up test preconditions.

Learn more: https://docs.pytest.org/en/stable/fixture.html
"""

import pytest


@pytest.fixture(scope="function")
def chick_fil_a_payload() -> dict:
    """
    Provide a place details payload for testing.

    This fixture returns a typical `result` object from a place details
    response, without needing to call the API.

    Scope: function (created fresh for each test)

    Returns:
        dict: Raw place payload
    """
    return {
        "place_id": "ChIJtb2UZgQzjoARpbGkf0wypoY",
        "name": "Chick-fil-A",
        "formatted_address": "1162 Blossom Hill Rd, San Jose, CA 95118, USA",
        "formatted_phone_number": "(408) 978-7705",
        "international_phone_number": "+1 408-978-7705",
        "website": "https://www.chick-fil-a.com/locations/ca/blossom-hill-almaden-expy",
        "business_status": "OPERATIONAL",
        "rating": 4.5,
        "user_ratings_total": 1630,
        "price_level": 1,
        "vicinity": "1162 Blossom Hill Road, San Jose",
        "geometry": {
            "location": {"lat": 37.24999539999999, "lng": -121.8777324},
            "viewport": {
                "northeast": {"lat": 37.25140623029149, "lng": -121.8764680697085},
                "southwest": {"lat": 37.24870826970849, "lng": -121.8791660302915},
            },
        },
        "current_opening_hours": {
            "open_now": True,
            "weekday_text": [
                "Monday: 6:30 AM – 11:00 PM",
                "Tuesday: 6:30 AM – 11:00 PM",
                "Wednesday: 6:30 AM – 11:00 PM",
                "Thursday: 6:30 AM – 11:00 PM",
                "Friday: 6:30 AM – 11:00 PM",
                "Saturday: 6:30 AM – 11:00 PM",
                "Sunday: Closed",
            ],
        },
        "delivery": True,
        "dine_in": True,
        "takeout": True,
        "serves_breakfast": True,
        "serves_lunch": True,
        "serves_dinner": True,
        "types": ["restaurant", "food", "point_of_interest", "establishment"],
    }


@pytest.fixture(scope="function")
def address_components() -> list[dict]:
    """
    Provide address components for a San Jose address.

    Scope: function (created fresh for each test)

    Returns:
        list[dict]: Raw address components, most specific first
    """
    return [
        {"long_name": "1162", "short_name": "1162", "types": ["street_number"]},
        {"long_name": "Blossom Hill Road", "short_name": "Blossom Hill Rd", "types": ["route"]},
        {"long_name": "San Jose", "short_name": "San Jose", "types": ["locality", "political"]},
        {"long_name": "California", "short_name": "CA", "types": ["administrative_area_level_1", "political"]},
        {"long_name": "United States", "short_name": "US", "types": ["country", "political"]},
    ]


# Mark tests based on their type for selective running
def pytest_configure(config):
    """
    Register custom pytest markers.

    This allows us to run specific test categories:
    - pytest -m unit        (run only unit tests)
    - pytest -m "not slow"  (skip slow tests)
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (isolated, fast)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (>1 second)"
    )
