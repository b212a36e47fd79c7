"""Small helpers shared by the REST client, fixtures and suites."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

logger = logging.getLogger(__name__)


def random_token(length: int = 8) -> str:
    """Return a random lowercase hex token used to build unique fixture names."""
    return uuid.uuid4().hex[:length]


def unique_name(prefix: str) -> str:
    """Build a collision-free fixture name such as ``folder-3fa85f64``."""
    return f"{prefix}-{random_token()}"


def run_concurrently(*calls: Callable[[], Any]) -> list[Any]:
    """
    Run independent zero-argument callables in parallel and join them.

    Every call is allowed to finish before the first failure is re-raised,
    so one failed cleanup step never abandons the others halfway.

    Args:
        *calls: Callables with no arguments (use ``functools.partial`` or a
            lambda to bind parameters).

    Returns:
        The results in the same order as ``calls``.

    Raises:
        Exception: The first exception raised by any call, in call order.
    """
    if not calls:
        return []

    with ThreadPoolExecutor(max_workers=len(calls)) as executor:
        futures = [executor.submit(call) for call in calls]

    errors = [future.exception() for future in futures if future.exception() is not None]
    for error in errors[1:]:
        logger.warning("Additional concurrent call failed: %s", error)
    if errors:
        raise errors[0]
    return [future.result() for future in futures]
