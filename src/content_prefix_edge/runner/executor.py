# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for running the edge handler against a local event.

Orchestrates:
1. Validate the event JSON
2. Invoke the handler through the callback interface
3. Translate the completion into a RunnerOutput
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from content_prefix_edge.lambda_function import handle

from .schema import CloudFrontEventSchema, RunnerOutput

logger = logging.getLogger(__name__)


class Executor:
    """Runs a CloudFront event through ``handle`` and reports the outcome.

    Example:
        executor = Executor()
        output = executor.execute_json(sys.stdin.read())
    """

    def execute_json(self, raw: str) -> RunnerOutput:
        """Validate *raw* as a CloudFront event and execute it.

        Note:
            Never raises; validation and handler failures come back as
            unsuccessful RunnerOutput objects.
        """
        try:
            event = CloudFrontEventSchema.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Rejected event: %d validation error(s)", e.error_count())
            return RunnerOutput(
                success=False,
                error=str(e),
                error_type="ValidationError",
            )
        return self.execute(event.to_event())

    def execute(self, event: dict[str, Any]) -> RunnerOutput:
        """Invoke the handler with an already-parsed event."""
        try:
            return handle(event, None, self._to_output)
        except Exception as e:
            logger.exception("Handler raised")
            return RunnerOutput(
                success=False,
                error=str(e),
                error_type=type(e).__name__,
            )

    @staticmethod
    def _to_output(error: BaseException | None, result: Any) -> RunnerOutput:
        if error is not None:
            return RunnerOutput(
                success=False,
                error=str(error),
                error_type=type(error).__name__,
            )
        logger.info("Rewrote request to %s", result["uri"])
        return RunnerOutput(success=True, result=result)
