"""Background execution of the calculation pipeline.

This module provides:
- handle_message: dict-in/dict-out envelope around ``perform_calculation``
- CalculationWorker: single-thread executor where the newest request wins

Key behaviour:
    Every submission gets a sequence number. When a result arrives for a
    request that has since been superseded, it is dropped instead of being
    delivered, so callers never apply stale geometry.
"""

from __future__ import annotations

import itertools
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

from bordercalc.layout import perform_calculation
from bordercalc.validation import CalculationInput

logger = logging.getLogger(__name__)

ResultCallback = Callable[[dict[str, Any]], None]


def handle_message(payload: dict[str, Any]) -> dict[str, Any]:
    """Run one calculation from a serialized input record.

    Args:
        payload: ``CalculationInput`` fields as plain data

    Returns:
        ``Calculation`` fields as plain data, or ``{"error": message}`` when
        validation or the calculation fails
    """
    try:
        calc_input = CalculationInput.model_validate(payload)
        return perform_calculation(calc_input).model_dump()
    except Exception as e:
        logger.error(f"Calculation failed: {e}", exc_info=True)
        return {"error": str(e)}


class CalculationWorker:
    """
    Runs calculations off the caller's thread for one calculation session.

    Usage:
        with CalculationWorker() as worker:
            worker.submit(payload, on_result)
            ...
            worker.wait()

    Only the most recent submission is delivered to its callback; earlier
    in-flight requests are discarded when they finish.
    """

    def __init__(self) -> None:
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="bordercalc")
        self._sequence = itertools.count(1)
        self._latest = 0
        self._lock = threading.RLock()
        self._pending: Optional[Future] = None

    @property
    def latest_request(self) -> int:
        """Sequence number of the newest submission (0 before any)."""
        return self._latest

    def submit(self, payload: dict[str, Any], callback: Optional[ResultCallback] = None) -> Future:
        """
        Queue a calculation, superseding any earlier one.

        Args:
            payload: Serialized CalculationInput.
            callback: Called with the result envelope if this request is
                      still the latest when it completes.

        Returns:
            Future resolving to the result envelope. It resolves to None when
            superseded while running and is cancelled when superseded
            before it started.
        """
        with self._lock:
            request_id = next(self._sequence)
            self._latest = request_id
            if self._pending is not None:
                # Not started yet: skip it entirely
                self._pending.cancel()
            future = self._executor.submit(self._run, request_id, payload, callback)
            self._pending = future
        return future

    def _run(
        self,
        request_id: int,
        payload: dict[str, Any],
        callback: Optional[ResultCallback],
    ) -> Optional[dict[str, Any]]:
        result = handle_message(payload)

        # Held through delivery so a newer submit cannot slip in after the check
        with self._lock:
            if request_id != self._latest:
                logger.debug(f"Discarding superseded request {request_id} (latest {self._latest})")
                return None
            if callback is not None:
                callback(result)
        return result

    def wait(self, timeout: Optional[float] = None) -> Optional[dict[str, Any]]:
        """Block until the latest submission finishes and return its envelope."""
        with self._lock:
            pending = self._pending
        if pending is None:
            return None
        return pending.result(timeout=timeout)

    def shutdown(self) -> None:
        """Finish outstanding work and stop the worker thread."""
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "CalculationWorker":
        return self

    def __exit__(self, *args) -> None:
        self.shutdown()
