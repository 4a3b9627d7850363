# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Entry point for the local runner.

Usage:
    python -m content_prefix_edge.runner < event.json > output.json

Reads a CloudFront Lambda@Edge event from stdin, runs it through the
handler and writes a RunnerOutput JSON document to stdout.  Logs go to
stderr.

Exit codes:
    0: Success
    1: Failure (error details in JSON output)
"""

from __future__ import annotations

import logging
import sys

from .executor import Executor
from .schema import RunnerOutput


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        output = Executor().execute_json(sys.stdin.read())
    except Exception as e:
        # Ensure we always output valid JSON, even on unexpected errors
        output = RunnerOutput(
            success=False,
            error=str(e),
            error_type=type(e).__name__,
        )

    print(output.model_dump_json())
    return 0 if output.success else 1


if __name__ == "__main__":
    sys.exit(main())
