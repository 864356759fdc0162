"""Dashboard Service - Static pipeline telemetry.

The dashboard has no backend; figures are fixed at process start.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class StatCard:
    title: str
    value: str
    change: str


@dataclass
class DailyThroughput:
    name: str
    engagement: int
    feedback: int


STAT_CARDS = [
    StatCard("Active Flux Channels", "12", "+2"),
    StatCard("ICP Crystallization", "86%", "+4.3%"),
    StatCard("Echo Cycles", "1,204", "+12%"),
    StatCard("Velocity Index", "9.4", "+8.1%"),
]

WEEKLY_THROUGHPUT = [
    DailyThroughput("Mon", 4000, 2400),
    DailyThroughput("Tue", 3000, 1398),
    DailyThroughput("Wed", 2000, 9800),
    DailyThroughput("Thu", 2780, 3908),
    DailyThroughput("Fri", 1890, 4800),
    DailyThroughput("Sat", 2390, 3800),
    DailyThroughput("Sun", 3490, 4300),
]


class DashboardService:
    """Serves the fixed telemetry shown on the dashboard screen."""

    def summary(self) -> dict[str, Any]:
        return {
            "stats": [asdict(card) for card in STAT_CARDS],
            "throughput": [asdict(day) for day in WEEKLY_THROUGHPUT],
        }
