"""Tests for the single-shot completion handle."""

import pytest

from content_prefix_edge import Completion, CompletionError


def test_succeed():
    """Test that succeed signals (None, result)."""
    calls = []
    done = Completion(lambda err, res: calls.append((err, res)))
    assert done.done is False

    done.succeed({"uri": "/x"})

    assert done.done is True
    assert calls == [(None, {"uri": "/x"})]


def test_fail():
    """Test that fail signals (error, None)."""
    calls = []
    err = ValueError("boom")
    done = Completion(lambda e, r: calls.append((e, r)))

    done.fail(err)

    assert calls == [(err, None)]


def test_returns_callback_value():
    """Test that the callback's return value is passed back."""
    done = Completion(lambda e, r: "returned")
    assert done.succeed(1) == "returned"


def test_second_signal_raises():
    """Test that the callback never fires more than once."""
    calls = []
    done = Completion(lambda e, r: calls.append(r))
    done.succeed(1)

    with pytest.raises(CompletionError):
        done.succeed(2)
    with pytest.raises(CompletionError):
        done.fail(ValueError())
    assert calls == [1]


def test_raising_callback_still_counts():
    """Test that a callback which raises is not invoked again."""

    def callback(err, res):
        raise RuntimeError("callback failed")

    done = Completion(callback)
    with pytest.raises(RuntimeError):
        done.succeed(1)
    assert done.done is True
    with pytest.raises(CompletionError):
        done.succeed(1)
