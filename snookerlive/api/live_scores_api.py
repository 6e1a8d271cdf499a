"""Live results page client for snooker.org."""

import asyncio

import aiohttp

from ..models.config import DEFAULT_REQUEST_TIMEOUT, DEFAULT_URL
from ..models.mock_data import MOCK_LIVE_PAGE
from ..utils.logging import debug, log


class LiveScoresAPI:
    """Fetch the live results page"""

    def __init__(
        self,
        url: str = DEFAULT_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        demo: bool = False,
    ):
        self.url: str = url
        self.timeout: float = timeout
        self.demo: bool = demo

    async def fetch_page(self) -> str | None:
        """Fetch the page body, or None if nothing usable came back this cycle"""
        if self.demo:
            await asyncio.sleep(0.1)  # Simulate network delay
            return MOCK_LIVE_PAGE

        try:
            async with aiohttp.ClientSession() as session:
                debug(f"🔍 Fetching live scores from: {self.url}")
                async with session.get(
                    self.url,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    debug(f"📡 Response Status: {response.status}")

                    if not 200 <= response.status < 300:
                        log(f"❌ Failed to fetch data: {response.status}")
                        return None

                    return await response.text(errors="replace")

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            log(f"❌ Error making request: {type(e).__name__}: {e}")
            return None
