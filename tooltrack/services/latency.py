import asyncio
from typing import Protocol


class Latency(Protocol):
    async def wait(self) -> None: ...


class SimulatedLatency:
    """Sleeps a fixed number of milliseconds before each operation takes effect."""

    def __init__(self, delay_ms: int = 300):
        if delay_ms < 0:
            raise ValueError("delay_ms must not be negative")
        self.delay_ms = delay_ms

    async def wait(self) -> None:
        if self.delay_ms:
            await asyncio.sleep(self.delay_ms / 1000)
