# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Single-shot completion handle for callback-style invocation."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from content_prefix_edge.exceptions import CompletionError

Callback = Callable[[BaseException | None, Any], Any]


class Completion:
    """Wraps a ``callback(error, result)`` so it fires exactly once.

    Example:
        done = Completion(callback)
        done.succeed(request)      # -> callback(None, request)
        done.fail(exc)             # raises CompletionError
    """

    def __init__(self, callback: Callback) -> None:
        self._callback = callback
        self._done = False

    @property
    def done(self) -> bool:
        """``True`` once the callback has been invoked, even if it raised."""
        return self._done

    def succeed(self, result: Any) -> Any:
        """Signal success as ``callback(None, result)``.

        Args:
            result: Success payload handed to the callback

        Returns:
            Whatever the callback returns

        Raises:
            CompletionError: If the handle was already signalled
        """
        return self._fire(None, result)

    def fail(self, error: BaseException) -> Any:
        """Signal failure as ``callback(error, None)``.

        Args:
            error: Exception describing the failure

        Returns:
            Whatever the callback returns

        Raises:
            CompletionError: If the handle was already signalled
        """
        return self._fire(error, None)

    def _fire(self, error: BaseException | None, result: Any) -> Any:
        if self._done:
            raise CompletionError("Completion already signalled")
        # Marked before the call so a raising callback is not retried.
        self._done = True
        return self._callback(error, result)
