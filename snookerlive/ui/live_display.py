"""Poll loop that keeps the live score board on screen."""

import asyncio
import sys
import traceback
from enum import Enum
from typing import TextIO

from ..api import LiveScoresAPI, extract_score_lines
from ..models.config import PollerConfig
from ..utils.cancellation import CancellationToken, WaitOutcome
from ..utils.logging import debug, log
from .score_table import render_score_table
from .terminal import clear_screen


class PollState(Enum):
    RUNNING = "running"
    STOPPING = "stopping"
    STOPPED = "stopped"


class CycleOutcome(Enum):
    """What a single fetch -> extract -> render pass ended with"""

    RENDERED = "rendered"
    EMPTY = "empty"  # Container found but no match rows in it
    NO_CONTAINER = "no_container"
    FETCH_FAILED = "fetch_failed"


class LiveScoreDisplay:
    """Main live score application"""

    def __init__(
        self,
        config: PollerConfig | None = None,
        token: CancellationToken | None = None,
        out: TextIO | None = None,
    ):
        self.config: PollerConfig = config or PollerConfig()
        self.api: LiveScoresAPI = LiveScoresAPI(
            self.config.url, self.config.request_timeout, demo=self.config.demo
        )
        self.token: CancellationToken = token or CancellationToken()
        self.out: TextIO = out or sys.stdout
        self._finished: bool = False
        self.cycles: int = 0
        debug(
            f"🎯 LiveScoreDisplay initialized with url: {self.config.url}, "
            f"poll_interval: {self.config.poll_interval}, demo: {self.config.demo}"
        )

    @property
    def state(self) -> PollState:
        if self._finished:
            return PollState.STOPPED
        if self.token.cancelled:
            # In-flight work finishes, nothing new starts
            return PollState.STOPPING
        return PollState.RUNNING

    async def poll_once(self) -> CycleOutcome:
        """Fetch, extract and render one snapshot of the live page"""
        body = await self.api.fetch_page()
        if body is None:
            return CycleOutcome.FETCH_FAILED

        score_lines = extract_score_lines(body)
        if score_lines is None:
            log("⚠️  No livecontainer found")
            return CycleOutcome.NO_CONTAINER

        debug(f"🔄 Extracted {len(score_lines)} score lines")
        if not score_lines:
            return CycleOutcome.EMPTY

        render_score_table(score_lines, out=self.out)
        return CycleOutcome.RENDERED

    async def run(self) -> None:
        """Poll until cancelled (or after one cycle when ``once`` is set)"""
        while self.token.is_running:
            clear_screen(self.out)
            self.cycles += 1

            try:
                cycle_outcome = await self.poll_once()
                debug(f"🔄 Cycle {self.cycles} finished: {cycle_outcome.value}")
            except Exception as e:
                log(f"❌ Exception in poll cycle: {type(e).__name__}: {e}")
                debug(f"❌ Full traceback: {traceback.format_exc()}")

            if self.config.once:
                break

            outcome = await self.token.wait_for_tick(self.config.poll_interval)
            if outcome is WaitOutcome.CANCELLED:
                break

        log("👋 Exiting cleanly.")
        self._finished = True

    async def run_with_signals(self) -> None:
        """Run with SIGINT/SIGTERM wired to the cancellation token"""
        loop = asyncio.get_running_loop()
        self.token.install_signal_handlers(loop)
        try:
            await self.run()
        finally:
            self.token.remove_signal_handlers(loop)


def run_live_display(config: PollerConfig, out: TextIO | None = None) -> int:
    """Blocking entry point. Always returns exit code 0."""
    app = LiveScoreDisplay(config, out=out)
    asyncio.run(app.run_with_signals())
    return 0
