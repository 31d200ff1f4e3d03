"""Push progress events for the active import job."""

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class ProgressEvent(BaseModel):
    """Completion rate of the current backend phase."""

    rate: float


ProgressCallback = Callable[[ProgressEvent], None]


class ProgressSubscription:
    """Owned registration of a callback on a receiver."""

    def __init__(self, receiver: "ProgressReceiver", callback: ProgressCallback) -> None:
        self._receiver = receiver
        self._callback = callback
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Stop delivery. Safe to call more than once."""
        if not self._closed:
            self._closed = True
            self._receiver.unsubscribe(self._callback)


class ProgressReceiver:
    """Fans progress events from the push channel out to subscribers."""

    def __init__(self) -> None:
        self._callbacks: list[ProgressCallback] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def subscribe(self, callback: ProgressCallback) -> ProgressSubscription:
        """Register ``callback``; registering it twice has no effect."""
        if callback not in self._callbacks:
            self._callbacks.append(callback)
        return ProgressSubscription(self, callback)

    def unsubscribe(self, callback: ProgressCallback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def dispatch(self, event: ProgressEvent) -> None:
        """Deliver ``event`` to every current subscriber."""
        for callback in list(self._callbacks):
            callback(event)

    def dispatch_raw(self, payload: dict[str, Any]) -> None:
        """Validate a wire payload and deliver it."""
        self.dispatch(ProgressEvent.model_validate(payload))
