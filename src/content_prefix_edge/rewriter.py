# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""URI rewriting: prefix every request path with ``/content``."""

from __future__ import annotations

import logging
from typing import Any

from content_prefix_edge.event import extract_request

logger = logging.getLogger(__name__)

CONTENT_PREFIX = "/content"


def prefix_uri(request: dict[str, Any], prefix: str = CONTENT_PREFIX) -> dict[str, Any]:
    """Prepend *prefix* to ``request["uri"]`` in place and return *request*.

    Plain concatenation: the query string, encoding and any existing
    prefix are left alone, so applying this twice yields
    ``/content/content/...``.
    """
    original = request["uri"]
    request["uri"] = prefix + original
    logger.debug("Rewrote uri %r -> %r", original, request["uri"])
    return request


def rewrite_event(event: Any) -> dict[str, Any]:
    """Extract the first record's request from *event* and prefix its uri."""
    return prefix_uri(extract_request(event))
