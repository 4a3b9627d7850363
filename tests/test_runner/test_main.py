"""Tests for the runner's stdin/stdout entry point."""

import io
import json

from content_prefix_edge.runner.__main__ import main


def run(monkeypatch, capsys, stdin):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    code = main()
    return code, json.loads(capsys.readouterr().out)


def test_success(monkeypatch, capsys, make_event):
    """Test exit code 0 and the rewritten request on stdout."""
    code, output = run(monkeypatch, capsys, json.dumps(make_event("/")))

    assert code == 0
    assert output["success"] is True
    assert output["result"]["uri"] == "/content/"


def test_failure_still_prints_json(monkeypatch, capsys):
    """Test exit code 1 with a valid JSON error document."""
    code, output = run(monkeypatch, capsys, "{}")

    assert code == 1
    assert output["success"] is False
    assert output["result"] is None
    assert output["error_type"] == "ValidationError"
