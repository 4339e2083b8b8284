from typing import Dict, Iterable, Sequence

from .domain.models import Aggregate, ItemDetail
from .duration import Duration, round_half_up

DEFAULT_SPEEDS = (0.75, 1.25, 1.5, 2.0)


def aggregate(details: Sequence[ItemDetail]) -> Aggregate:
    """Sums durations and picks the boundary items of ``details``."""
    total = sum(detail.duration_seconds for detail in details)
    count = len(details)
    return Aggregate(
        total_duration_seconds=total,
        first_item=details[0] if details else None,
        last_item=details[-1] if details else None,
        item_count=count,
        average_duration_seconds=round_half_up(total / count) if count else 0,
    )


def project_speeds(total_seconds: int, speeds: Iterable[float] = DEFAULT_SPEEDS) -> Dict[float, int]:
    """Playback time of ``total_seconds`` at each speed, rounded per speed."""
    total = Duration(total_seconds)
    return {speed: total.scaled(speed).seconds for speed in speeds}
