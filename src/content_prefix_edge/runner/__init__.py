# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule for invoking the edge handler locally.

Usage:
    python -m content_prefix_edge.runner < event.json > output.json

Exports:
    Executor: Validates an event and runs it through the handler
    CloudFrontEventSchema: Input schema (a CloudFront event)
    RunnerOutput: Output schema
"""

from .executor import Executor
from .schema import (
    CloudFrontEventSchema,
    CloudFrontRecordSchema,
    CloudFrontSchema,
    RequestSchema,
    RunnerOutput,
)

__all__ = [
    "CloudFrontEventSchema",
    "CloudFrontRecordSchema",
    "CloudFrontSchema",
    "Executor",
    "RequestSchema",
    "RunnerOutput",
]
