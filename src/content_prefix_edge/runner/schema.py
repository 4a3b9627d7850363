# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

The input models mirror the CloudFront Lambda@Edge event just far enough
to reach the request.  Every model allows extra fields so headers,
method, query string and the record's ``config`` block survive the
round trip untouched.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RequestSchema(BaseModel):
    """The CloudFront request object.

    Attributes:
        uri: Request path, normally beginning with ``/``
    """

    model_config = ConfigDict(extra="allow")

    uri: str


class CloudFrontSchema(BaseModel):
    """The ``cf`` block of a record."""

    model_config = ConfigDict(extra="allow")

    request: RequestSchema


class CloudFrontRecordSchema(BaseModel):
    """One entry of ``Records``."""

    model_config = ConfigDict(extra="allow")

    cf: CloudFrontSchema


class CloudFrontEventSchema(BaseModel):
    """Complete event read from stdin.

    Attributes:
        Records: At least one record; only the first is used
    """

    model_config = ConfigDict(extra="allow")

    Records: list[CloudFrontRecordSchema] = Field(min_length=1)

    def to_event(self) -> dict[str, Any]:
        """Plain-dict event as the Lambda runtime would deliver it."""
        return self.model_dump(mode="json")


class RunnerOutput(BaseModel):
    """Complete output written to stdout.

    The runner always outputs valid JSON matching this schema, even on
    errors.

    Attributes:
        success: Whether the handler completed successfully
        result: The rewritten request (on success)
        error: Error message (on failure)
        error_type: Error class name (on failure)
    """

    success: bool
    result: dict[str, Any] | None = None
    error: str = ""
    error_type: str = ""
