# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Extraction of the request from a CloudFront Lambda@Edge event.

CloudFront delivers::

    {"Records": [{"cf": {"request": {"uri": "/index.html", ...}}}]}

Only the first record is read.  Anything else in the event is ignored.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from content_prefix_edge.exceptions import MalformedEventError


def _require_mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise MalformedEventError(path, f"expected an object, got {type(value).__name__}")
    return value


def _require_key(parent: Mapping[str, Any], key: str, path: str) -> Any:
    if key not in parent:
        raise MalformedEventError(path, "missing")
    return parent[key]


def extract_request(event: Any) -> dict[str, Any]:
    """Return the mutable request dict at ``Records[0].cf.request``.

    Args:
        event: The raw event handed to the function by the host runtime.

    Returns:
        The request object itself (not a copy), so callers mutate the
        same dict the runtime will read back.

    Raises:
        MalformedEventError: If any step of the path is absent or has
            the wrong type, the request is read-only, or it has no
            string ``uri``.
    """
    root = _require_mapping(event, "event")

    records = _require_key(root, "Records", "Records")
    if not isinstance(records, list):
        raise MalformedEventError("Records", f"expected a list, got {type(records).__name__}")
    if not records:
        raise MalformedEventError("Records", "no records")

    record = _require_mapping(records[0], "Records[0]")
    cf = _require_mapping(_require_key(record, "cf", "Records[0].cf"), "Records[0].cf")
    request = _require_mapping(
        _require_key(cf, "request", "Records[0].cf.request"), "Records[0].cf.request"
    )
    if not isinstance(request, MutableMapping):
        raise MalformedEventError("Records[0].cf.request", "expected a mutable object")

    uri = _require_key(request, "uri", "Records[0].cf.request.uri")
    if not isinstance(uri, str):
        raise MalformedEventError(
            "Records[0].cf.request.uri", f"expected a string, got {type(uri).__name__}"
        )

    return request  # type: ignore[return-value]
