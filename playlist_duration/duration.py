"""Conversion between YouTube ISO 8601 durations, seconds and display strings."""

import re
from dataclasses import dataclass
from typing import Optional

_ISO_DURATION_RE = re.compile(
    r"^P"
    r"(?:(?P<days>\d+)D)?"
    r"(?:T"
    r"(?:(?P<hours>\d+)H)?"
    r"(?:(?P<minutes>\d+)M)?"
    r"(?:(?P<seconds>\d+)S)?"
    r")?$"
)


def parse_duration(encoded: Optional[str]) -> int:
    """
    Returns the number of seconds in a duration such as ``PT1H2M3S``.

    Unparseable input yields 0: live streams and premieres report no usable
    duration and must not abort a whole playlist.
    """
    if not encoded or not isinstance(encoded, str):
        return 0

    match = _ISO_DURATION_RE.match(encoded.strip().upper())
    if not match:
        return 0

    days = int(match.group("days") or 0)
    hours = int(match.group("hours") or 0)
    minutes = int(match.group("minutes") or 0)
    seconds = int(match.group("seconds") or 0)
    return ((days * 24 + hours) * 60 + minutes) * 60 + seconds


def format_duration(seconds: int, show_days: bool = False) -> str:
    """
    Formats seconds as ``"Mm Ss"``, ``"Hh Mm Ss"`` or, with ``show_days``,
    ``"Dd Hh Mm Ss"``. Leading zero units are omitted.
    """
    if seconds < 0:
        raise ValueError(f"duration cannot be negative: {seconds}")

    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    days = 0
    if show_days:
        days, hours = divmod(hours, 24)

    if days:
        return f"{days}d {hours}h {minutes}m {secs}s"
    if hours:
        return f"{hours}h {minutes}m {secs}s"
    return f"{minutes}m {secs}s"


def round_half_up(value: float) -> int:
    return int(value + 0.5)


@dataclass(frozen=True)
class Duration:
    """A non-negative duration in whole seconds."""
    seconds: int = 0

    @classmethod
    def parse(cls, encoded: Optional[str]) -> "Duration":
        return cls(parse_duration(encoded))

    def format(self, show_days: bool = False) -> str:
        return format_duration(self.seconds, show_days)

    def scaled(self, speed: float) -> "Duration":
        """Duration when played back at ``speed``, to the nearest second."""
        if speed <= 0:
            raise ValueError(f"speed must be positive: {speed}")
        return Duration(round_half_up(self.seconds / speed))

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.seconds + other.seconds)

    def __str__(self) -> str:
        return self.format()
