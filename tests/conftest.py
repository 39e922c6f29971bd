"""Shared payloads for open-notify client tests."""
import json
from unittest.mock import MagicMock

import pytest
import requests


PEOPLE = [
    {"name": "Anton Shkaplerov", "craft": "ISS"},
    {"name": "Scott Tingle", "craft": "ISS"},
    {"name": "Norishige Kanai", "craft": "ISS"},
    {"name": "Oleg Artemyev", "craft": "Soyuz MS-08"},
    {"name": "Andrew Feustel", "craft": "Soyuz MS-08"},
    {"name": "Richard Arnold", "craft": "Soyuz MS-08"},
]

ISS_NOW = {
    "iss_position": {"longitude": "73.5964", "latitude": "-34.6445"},
    "message": "success",
    "timestamp": 1521971230,
}

ISS_PASS = {
    "message": "success",
    "request": {
        "altitude": 440,
        "datetime": 1521971230,
        "latitude": 51.0,
        "longitude": 13.5,
        "passes": 3,
    },
    "response": [
        {"duration": 620, "risetime": 1521993478},
        {"duration": 645, "risetime": 1521999254},
        {"duration": 566, "risetime": 1522005101},
    ],
}


def astros_json(message="success", number=6, people=None):
    return json.dumps(
        {
            "message": message,
            "number": number,
            "people": PEOPLE if people is None else people,
        }
    )


def make_response(text, status_error=None):
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.text = text
    response.ok = status_error is None
    response.status_code = 200 if status_error is None else 502
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    return response


@pytest.fixture
def iss_now_json():
    return json.dumps(ISS_NOW)


@pytest.fixture
def iss_pass_json():
    return json.dumps(ISS_PASS)


def http_response(status_code, body, url="http://api.open-notify.org/"):
    """Build a real requests.Response carrying the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.url = url
    return response
