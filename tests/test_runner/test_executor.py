"""Tests for the runner executor."""

import json

import pytest

from content_prefix_edge.runner.executor import Executor
from content_prefix_edge.runner.schema import CloudFrontEventSchema


@pytest.fixture
def executor():
    return Executor()


class TestExecuteJson:
    """Tests for Executor.execute_json()."""

    def test_rewrites_uri(self, executor, make_event):
        """Test that a valid event comes back with the prefixed uri."""
        output = executor.execute_json(json.dumps(make_event("/a/b?x=1")))

        assert output.success is True
        assert output.result["uri"] == "/content/a/b?x=1"
        assert output.error == ""

    def test_preserves_extra_request_fields(self, executor, event):
        """Test that fields outside the schema survive validation."""
        output = executor.execute_json(json.dumps(event))

        assert output.result["method"] == "GET"
        assert output.result["clientIp"] == "203.0.113.178"
        assert output.result["headers"]["host"][0]["value"] == "d111111abcdef8.cloudfront.net"

    def test_empty_records_rejected(self, executor):
        """Test that an event without records fails validation."""
        output = executor.execute_json('{"Records": []}')

        assert output.success is False
        assert output.error_type == "ValidationError"

    def test_non_string_uri_rejected(self, executor):
        """Test that a numeric uri fails validation."""
        output = executor.execute_json('{"Records": [{"cf": {"request": {"uri": 5}}}]}')

        assert output.success is False
        assert output.error_type == "ValidationError"

    def test_invalid_json(self, executor):
        """Test that unparseable input becomes an unsuccessful output."""
        output = executor.execute_json("not json")

        assert output.success is False
        assert output.error_type == "ValidationError"


class TestExecute:
    """Tests for Executor.execute() with already-parsed events."""

    def test_malformed_event_reported(self, executor):
        """Test that a handler-side malformed event is reported by name."""
        output = executor.execute({"Records": [{"cf": {}}]})

        assert output.success is False
        assert output.error_type == "MalformedEventError"
        assert "Records[0].cf.request" in output.error

    def test_success(self, executor, event):
        """Test a successful run on an already-parsed event."""
        output = executor.execute(event)

        assert output.success is True
        assert output.result == event["Records"][0]["cf"]["request"]
        assert output.result["uri"] == "/content/index.html"


def test_schema_round_trip_keeps_config_block(event):
    """Test that the record's config block is kept by the schema."""
    parsed = CloudFrontEventSchema.model_validate(event)
    assert parsed.to_event()["Records"][0]["cf"]["config"]["eventType"] == "viewer-request"
