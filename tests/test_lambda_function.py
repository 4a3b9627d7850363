"""Tests for the Lambda entry points."""

import importlib
from types import MappingProxyType
from unittest.mock import Mock

import pytest

from content_prefix_edge import MalformedEventError, handle, handler
from content_prefix_edge.settings import DeploySettings


class TestHandler:
    """Tests for handler(event, context)."""

    def test_returns_rewritten_request(self, event):
        """Test that the event's request comes back with the prefixed uri."""
        result = handler(event, None)
        assert result["uri"] == "/content/index.html"
        assert result is event["Records"][0]["cf"]["request"]

    def test_context_is_ignored(self, event):
        """Test that the context object is never touched."""
        context = Mock()
        handler(event, context)
        assert context.mock_calls == []

    def test_malformed_event_propagates(self):
        """Test that a malformed event raises to the host runtime."""
        with pytest.raises(MalformedEventError):
            handler({"Records": [{"cf": {}}]}, None)

    def test_configured_handler_path_resolves(self):
        """Test that the deployed handler string names this function."""
        module_name, _, attr = DeploySettings().handler.rpartition(".")
        assert getattr(importlib.import_module(module_name), attr) is handler

    def test_submodule_attribute_is_module(self):
        """Test that the package attribute still refers to the module."""
        import content_prefix_edge

        assert content_prefix_edge.lambda_function.handler is handler


class TestHandle:
    """Tests for handle(event, context, callback)."""

    def test_signals_success(self, make_event):
        """Test that success is signalled as (None, request)."""
        callback = Mock(return_value="ack")
        event = make_event("/a/b?x=1")

        assert handle(event, None, callback) == "ack"

        callback.assert_called_once()
        error, request = callback.call_args.args
        assert error is None
        assert request["uri"] == "/content/a/b?x=1"
        assert request["method"] == "GET"

    def test_signals_malformed_event(self):
        """Test that a malformed event is signalled, not raised."""
        callback = Mock()

        handle({"Records": []}, None, callback)

        callback.assert_called_once()
        error, request = callback.call_args.args
        assert isinstance(error, MalformedEventError)
        assert request is None

    def test_read_only_request_signalled_once(self):
        """Test that an immutable request still fires the callback exactly once."""
        callback = Mock()
        event = {"Records": [{"cf": {"request": MappingProxyType({"uri": "/x"})}}]}

        handle(event, None, callback)

        callback.assert_called_once()
        error, request = callback.call_args.args
        assert isinstance(error, MalformedEventError)
        assert request is None

    def test_callback_error_propagates_once(self, event):
        """Test that an exception from the callback propagates after one call."""
        callback = Mock(side_effect=RuntimeError("downstream"))

        with pytest.raises(RuntimeError):
            handle(event, None, callback)

        callback.assert_called_once()

    def test_twice_is_not_idempotent(self, event):
        """Test that handling the same event twice stacks the prefix."""
        results = []
        handle(event, None, lambda e, r: results.append(r["uri"]))
        handle(event, None, lambda e, r: results.append(r["uri"]))
        assert results == ["/content/index.html", "/content/content/index.html"]
