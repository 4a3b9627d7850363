# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Custom exceptions for the content_prefix_edge package."""

from __future__ import annotations


class EdgeError(Exception):
    """Base exception for all content_prefix_edge errors."""


class MalformedEventError(EdgeError):
    """Raised when a CloudFront event does not carry a usable request."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Malformed event at '{path}': {detail}")


class CompletionError(EdgeError):
    """Raised when a completion handle is signalled more than once."""


class ConfigurationError(EdgeError):
    """Raised when deployment settings are missing or invalid."""


class DeployError(EdgeError):
    """Raised when a deployment step fails."""

    def __init__(self, step: str, detail: str = "") -> None:
        self.step = step
        msg = f"Deploy failed during '{step}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
