"""Port interface for one-shot timers."""

from abc import ABC, abstractmethod
from typing import Any, Callable


class SchedulerPort(ABC):
    @abstractmethod
    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> Any:
        """Run *callback* once after *delay_seconds*; returns a cancellable handle."""
        ...

    @abstractmethod
    def cancel(self, handle: Any) -> None:
        """Cancel a pending timer. Cancelling a fired or unknown handle is a no-op."""
        ...
