# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""content_prefix_edge — a CloudFront Lambda@Edge request hook.

Prepends ``/content`` to the viewer request URI and hands the request
back to CloudFront.  Only the standard library is imported from here so
the package can ship to the edge as a bare zip.
"""

from content_prefix_edge.completion import Completion
from content_prefix_edge.event import extract_request
from content_prefix_edge.exceptions import (
    CompletionError,
    ConfigurationError,
    DeployError,
    EdgeError,
    MalformedEventError,
)
from content_prefix_edge.lambda_function import handle, handler
from content_prefix_edge.rewriter import CONTENT_PREFIX, prefix_uri, rewrite_event

__all__ = [
    "CONTENT_PREFIX",
    "Completion",
    "CompletionError",
    "ConfigurationError",
    "DeployError",
    "EdgeError",
    "MalformedEventError",
    "extract_request",
    "handle",
    "handler",
    "prefix_uri",
    "rewrite_event",
]
