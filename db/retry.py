from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class RetryPolicy:
    """Delay schedule for reconnect attempts.

    multiplier == 1 gives a fixed delay; anything larger grows the delay
    geometrically, capped at max_delay when one is set.
    """

    delay: float = 5.0
    multiplier: float = 1.0
    max_delay: Optional[float] = None

    def __post_init__(self):
        if self.delay < 0:
            raise ValueError("Retry delay must be >= 0")
        if self.multiplier < 1:
            raise ValueError("Retry multiplier must be >= 1")
        if self.max_delay is not None and self.max_delay < self.delay:
            raise ValueError("Max retry delay must be >= retry delay")

    @classmethod
    def from_settings(cls, settings) -> "RetryPolicy":
        return cls(
            delay=settings.retry_delay,
            multiplier=settings.retry_multiplier,
            max_delay=settings.retry_max_delay,
        )

    def delays(self) -> Iterator[float]:
        current = self.delay
        while True:
            if self.max_delay is not None:
                current = min(current, self.max_delay)
            yield current
            current *= self.multiplier
