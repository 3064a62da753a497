"""
Axis domains for the daily activity chart.

Two independently scaled series share the x axis: counts (clicks,
applies) and currency (spend). Domains always contain the data, carry
visible padding and never collapse to zero width.
"""
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from centriq_backend.models.report import CampaignStat

Domain = Tuple[float, float]

PADDING_RATIO = 0.1


@dataclass(frozen=True)
class SeriesKind:
    name: str
    floor: float  # minimum absolute padding
    fallback: Domain  # used when there is no data at all


COUNTS = SeriesKind(name="counts", floor=1, fallback=(0, 100))
CURRENCY = SeriesKind(name="currency", floor=10, fallback=(0, 500))


def axis_domain(values: Iterable[float], kind: SeriesKind) -> Domain:
    """
    pad = max(floor, (max - min) * 0.1)
    domain = [max(0, min - pad), max + pad]
    """
    values = list(values)
    if not values:
        return kind.fallback
    low, high = min(values), max(values)
    pad = max(kind.floor, (high - low) * PADDING_RATIO)
    return max(0, low - pad), high + pad


def sort_chronologically(stats: Iterable[CampaignStat]) -> List[CampaignStat]:
    return sorted(stats, key=lambda stat: stat.activity_datetime)


def build_activity_chart(stats: Sequence[CampaignStat]) -> dict:
    """
    Turn the per-date activity series into chart points plus domains.
    """
    ordered = sort_chronologically(stats)
    points = [
        {
            "date": stat.activity_datetime.date().isoformat(),
            "clicks": stat.click_count,
            "applies": stat.apply_count,
            "spend": stat.spent,
        }
        for stat in ordered
    ]
    counts = [p["clicks"] for p in points] + [p["applies"] for p in points]
    spend = [p["spend"] for p in points]
    return {
        "points": points,
        "count_domain": axis_domain(counts, COUNTS),
        "spend_domain": axis_domain(spend, CURRENCY),
    }
