"""
Shared test helpers.
"""

import json
from http import HTTPStatus

import requests
from requests.structures import CaseInsensitiveDict


def make_response(status_code=200, body=None, text=None, headers=None, url="http://example.com/"):
    """
    Build a real requests.Response without network.

    body is JSON-encoded; text is used verbatim.
    """
    response = requests.Response()
    response.status_code = status_code
    response.reason = HTTPStatus(status_code).phrase
    response.url = url
    response.encoding = "utf-8"
    response.headers = CaseInsensitiveDict(headers or {})

    if text is None:
        text = json.dumps(body) if body is not None else ""
    response._content = text.encode("utf-8")

    return response
