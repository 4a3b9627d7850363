# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Lambda@Edge entry points.

Two invocation styles are supported:

- ``handler(event, context)``: the Python Lambda signature.  Returns the
  rewritten request; a malformed event raises ``MalformedEventError`` and
  the host runtime turns it into a failed invocation.
- ``handle(event, context, callback)``: callback style.  Signals
  ``callback(None, request)`` on success and ``callback(error, None)`` for
  a malformed event.  The callback fires exactly once.

``context`` is accepted to satisfy the runtime's signature and is not read.
"""

from __future__ import annotations

from typing import Any

from content_prefix_edge.completion import Callback, Completion
from content_prefix_edge.exceptions import MalformedEventError
from content_prefix_edge.rewriter import rewrite_event


def handler(event: Any, context: Any) -> dict[str, Any]:
    """Prefix the event's request uri and return the request.

    Args:
        event: CloudFront event carrying ``Records[0].cf.request``
        context: Lambda context object (unused)

    Returns:
        The request from the event, with ``uri`` rewritten in place

    Raises:
        MalformedEventError: If the event does not carry a mutable
            request with a string ``uri``
    """
    return rewrite_event(event)


def handle(event: Any, context: Any, callback: Callback) -> Any:
    """Prefix the event's request uri and report through *callback*.

    Args:
        event: CloudFront event carrying ``Records[0].cf.request``
        context: Lambda context object (unused)
        callback: Invoked once as ``callback(error, request)``

    Returns:
        Whatever the callback returns

    Note:
        A malformed event is reported to the callback, not raised.
        Exceptions raised by the callback itself propagate.
    """
    completion = Completion(callback)
    try:
        request = rewrite_event(event)
    except MalformedEventError as e:
        return completion.fail(e)
    return completion.succeed(request)
