from unittest.mock import MagicMock

import pytest
import requests

from app import create_app
from config import ProxyConfig


@pytest.fixture
def config():
    return ProxyConfig(api_key="TEST_KEY")


@pytest.fixture
def client(config):
    app = create_app(config)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def feed_json():
    """Trimmed NeoWs feed payload: two dates, extra fields that must be dropped."""
    return {
        "element_count": 3,
        "near_earth_objects": {
            "2025-01-02": [
                {
                    "name": "(2019 AA1)",
                    "is_potentially_hazardous_asteroid": False,
                    "estimated_diameter": {"kilometers": {"estimated_diameter_max": 0.1}},
                },
                {
                    "name": "433 Eros (A898 PA)",
                    "is_potentially_hazardous_asteroid": True,
                    "close_approach_data": [],
                },
            ],
            "2025-01-01": [
                {"name": "(2024 YZ4)", "is_potentially_hazardous_asteroid": False},
            ],
        },
    }


def make_response(status_code=200, json_data=None, text=""):
    r = MagicMock(spec=requests.Response)
    r.status_code = status_code
    r.text = text
    if isinstance(json_data, Exception):
        r.json.side_effect = json_data
    else:
        r.json.return_value = json_data
    return r
