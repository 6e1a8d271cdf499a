"""Cancellation token shared between the poll loop and the OS signal handler."""

import asyncio
import signal
from enum import Enum
from typing import Iterable

from .logging import log

DEFAULT_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


def signal_reason(sig: signal.Signals) -> str:
    if sig == signal.SIGINT:
        return "Ctrl-C pressed"
    return f"{sig.name} received"


class SignalHandlerError(RuntimeError):
    """Raised when the interrupt handler cannot be registered"""


class WaitOutcome(Enum):
    """Result of waiting for the next poll tick"""

    TIMEOUT = "timeout"  # Interval elapsed, start the next cycle
    CANCELLED = "cancelled"  # Stop requested


class CancellationToken:
    """Run flag plus a one-shot wake-up event.

    The signal handler is the only writer. The poll loop reads ``is_running``
    at the top of each cycle and sleeps through ``wait_for_tick`` so a
    cancellation cuts the idle wait short.
    """

    def __init__(self):
        self._running: bool = True
        self._event: asyncio.Event = asyncio.Event()
        self._installed: list[signal.Signals] = []
        self._loop_handlers: bool = True

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def cancelled(self) -> bool:
        return not self._running

    def cancel(self, reason: str = "Interrupt received") -> None:
        """Request shutdown. Safe to call more than once."""
        if not self._running:
            return
        log(f"🛑 {reason}, stopping...")
        self._running = False
        self._event.set()

    async def wait_for_tick(self, interval: float) -> WaitOutcome:
        """Sleep up to ``interval`` seconds unless cancelled first."""
        if not self._running:
            return WaitOutcome.CANCELLED

        try:
            await asyncio.wait_for(self._event.wait(), timeout=interval)
        except asyncio.TimeoutError:
            return WaitOutcome.TIMEOUT
        except asyncio.CancelledError:
            # The wait itself was torn down, nothing else should end it early
            task = asyncio.current_task()
            if task is not None and hasattr(task, "uncancel"):
                task.uncancel()
            self.cancel("Wait interrupted unexpectedly")
            return WaitOutcome.CANCELLED

        return WaitOutcome.CANCELLED

    def install_signal_handlers(
        self,
        loop: asyncio.AbstractEventLoop,
        signals: Iterable[signal.Signals] = DEFAULT_SIGNALS,
    ) -> None:
        """Route the given OS signals to ``cancel``."""
        for sig in signals:
            reason = signal_reason(sig)
            try:
                loop.add_signal_handler(sig, self.cancel, reason)
            except NotImplementedError:
                # Windows event loops have no add_signal_handler
                self._loop_handlers = False
                try:
                    signal.signal(
                        sig,
                        lambda signum, frame, reason=reason: loop.call_soon_threadsafe(
                            self.cancel, reason
                        ),
                    )
                except (ValueError, OSError) as e:
                    raise SignalHandlerError(
                        f"Error setting {sig.name} handler: {e}"
                    ) from e
            except (ValueError, OSError, RuntimeError) as e:
                raise SignalHandlerError(f"Error setting {sig.name} handler: {e}") from e
            self._installed.append(sig)

    def remove_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        for sig in self._installed:
            if self._loop_handlers:
                loop.remove_signal_handler(sig)
            else:
                signal.signal(sig, signal.SIG_DFL)
        self._installed = []
