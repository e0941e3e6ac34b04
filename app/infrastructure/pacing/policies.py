from __future__ import annotations

import asyncio

from app.application.ports.pacing import PacingPolicy


class FixedDelayPacing(PacingPolicy):
    """Sleeps a fixed interval between grading calls; never before the first one."""

    def __init__(self, delay_seconds: float = 0.3) -> None:
        if delay_seconds < 0:
            raise ValueError(f"delay_seconds must be >= 0, got {delay_seconds}")
        self.delay_seconds = delay_seconds

    async def wait(self, calls_made: int) -> None:
        if calls_made > 0 and self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)


class NoPacing(PacingPolicy):
    async def wait(self, calls_made: int) -> None:
        return None
