"""Shared test fixtures."""

import pytest


def build_event(uri="/index.html", **request_fields):
    request = {
        "clientIp": "203.0.113.178",
        "method": "GET",
        "querystring": "",
        "headers": {"host": [{"key": "Host", "value": "d111111abcdef8.cloudfront.net"}]},
        "uri": uri,
    }
    request.update(request_fields)
    return {
        "Records": [
            {
                "cf": {
                    "config": {"distributionId": "EDFDVBD6EXAMPLE", "eventType": "viewer-request"},
                    "request": request,
                }
            }
        ]
    }


@pytest.fixture
def make_event():
    return build_event


@pytest.fixture
def event():
    return build_event()
