"""Countdown timer used for the delay and sound registers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Timer:
    """An 8-bit counter that decreases by one per tick and stops at zero."""

    current_time: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.current_time <= 0xFF:
            raise ValueError(f"timer value does not fit in a byte: {self.current_time!r}")

    def tick(self) -> None:
        """Count down by one unless already at zero."""
        if self.current_time > 0:
            self.current_time -= 1