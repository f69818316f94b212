"""Round-trip statistics gathered over a ping session."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class PingStats:
    """Counters and running sums of round-trip times, in milliseconds."""

    sent: int = 0
    received: int = 0
    lost: int = 0
    minimum: float = 999999.0
    maximum: float = 0.0
    total: float = 0.0
    total_squares: float = 0.0

    def record_sent(self) -> None:
        self.sent += 1

    def record_reply(self, rtt: float) -> None:
        """Account for one answered request with its round-trip time."""
        self.minimum = min(self.minimum, rtt)
        self.maximum = max(self.maximum, rtt)
        self.total += rtt
        self.total_squares += rtt * rtt
        self.received += 1

    def record_lost(self) -> None:
        self.lost += 1

    def packet_loss(self) -> float:
        """Percentage of sent packets that got no answer; NaN before any send."""
        if not self.sent:
            return math.nan
        return (self.sent - self.received) / self.sent * 100

    def average(self) -> float:
        if not self.received:
            return math.nan
        return self.total / self.received

    def stddev(self) -> float:
        if not self.received:
            return math.nan
        mean = self.average()
        variance = self.total_squares / self.received - mean * mean
        return math.sqrt(max(variance, 0.0))

    def summary(self, host: str) -> str:
        """Render the closing statistics block, ending with a newline."""
        lines = [
            f"--- {host} ping statistics ---",
            f"{self.sent} packets transmitted, {self.received} packets received, "
            f"{self.packet_loss():.0f}% packet loss",
        ]
        if self.received:
            lines.append(
                "round-trip min/avg/max/stddev = "
                f"{self.minimum:.3f}/{self.average():.3f}/"
                f"{self.maximum:.3f}/{self.stddev():.3f} ms"
            )
        return "\n".join(lines) + "\n"