"""Runtime configuration for the poller."""

from pydantic import BaseModel, Field

DEFAULT_URL = "https://www.snooker.org/res/index.asp?template=21"
DEFAULT_POLL_INTERVAL = 20.0
DEFAULT_REQUEST_TIMEOUT = 10.0


class PollerConfig(BaseModel):
    """Settings for one run of the live score display"""

    url: str = DEFAULT_URL
    poll_interval: float = Field(default=DEFAULT_POLL_INTERVAL, gt=0)
    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)
    demo: bool = False
    once: bool = False
