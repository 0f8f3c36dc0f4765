"""Callback-style completion for the operations.

Every call ends in exactly one ``Outcome`` carrying either a result or an
error, never both. Validation problems, network failures and parse errors
all travel through the same channel.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from ..domain.models import ResponseEnvelope
from ..logger.app_logger import get_logger
from .usecase import OPERATIONS, Transport

logger = get_logger(__name__)


@dataclass
class OperationError:
    operation: str
    error: Exception
    error_type: str
    message: str


@dataclass
class Outcome:
    result: ResponseEnvelope | None
    error: OperationError | None

    @property
    def ok(self) -> bool:
        return self.error is None


def _resolve(operation: str | Callable[..., ResponseEnvelope]) -> tuple[str, Callable[..., ResponseEnvelope]]:
    if callable(operation):
        return getattr(operation, "__name__", "operation"), operation
    try:
        return operation, OPERATIONS[operation]
    except KeyError:
        raise ValueError(f"Unknown operation: {operation!r}") from None


def call(
    operation: str | Callable[..., ResponseEnvelope],
    options: Optional[Mapping[str, Any]] = None,
    *,
    transport: Optional[Transport] = None,
) -> Outcome:
    """Run ``operation`` and wrap its result or failure in an Outcome."""
    name, func = _resolve(operation)
    try:
        return Outcome(result=func(options, transport=transport), error=None)
    except Exception as exc:  # reported to the caller through the outcome
        logger.debug("%s failed: %s", name, exc)
        return Outcome(
            result=None,
            error=OperationError(
                operation=name,
                error=exc,
                error_type=exc.__class__.__name__,
                message=str(exc),
            ),
        )


def dispatch(
    operation: str | Callable[..., ResponseEnvelope],
    options: Optional[Mapping[str, Any]],
    callback: Callable[[Outcome], None],
    *,
    transport: Optional[Transport] = None,
) -> threading.Thread:
    """Run ``operation`` on a worker thread and hand the Outcome to ``callback`` once.

    The returned thread can be joined; unknown operation names are rejected
    before the thread starts.
    """
    name, func = _resolve(operation)

    def _worker() -> None:
        outcome = call(func, options, transport=transport)
        callback(outcome)

    worker = threading.Thread(target=_worker, name=f"vedur-{name}", daemon=True)
    worker.start()
    return worker
