from abc import ABC, abstractmethod


class PacingPolicy(ABC):
    @abstractmethod
    async def wait(self, calls_made: int) -> None:
        """Suspend before the next grading call. `calls_made` counts calls already issued in this batch."""
        raise NotImplementedError
