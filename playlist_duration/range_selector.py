import logging
from typing import Optional, Sequence, TypeVar, Union

from pymonad.either import Either, Left, Right

from .domain.errors import InvalidRangeError
from .domain.models import RangeSelection
from .i18n import get_message

logger = logging.getLogger(__name__)

T = TypeVar("T")
Bound = Optional[Union[int, str]]


def _is_absent(value: Bound) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_int(value: Bound, default: int) -> Optional[int]:
    if _is_absent(value):
        return default
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _invalid(reason: str, **kwargs) -> Either[InvalidRangeError, RangeSelection]:
    error = InvalidRangeError(get_message(f"range_{reason}", **kwargs), reason)
    logger.error(f"Invalid range ({reason}): {error.message}")
    return Left(error)


def validate_range(
    start: Bound, end: Bound, total: int
) -> Either[InvalidRangeError, Optional[RangeSelection]]:
    """
    Validates a 1-based inclusive range against the number of items.

    Args:
        start: First position, as an int or a numeric string. Defaults to 1.
        end: Last position, as an int or a numeric string. Defaults to ``total``.
        total: Number of enumerated items.

    Returns:
        Either: A Right(RangeSelection), Right(None) when no bound is given,
        or a Left(InvalidRangeError) naming the violated rule.
    """
    if _is_absent(start) and _is_absent(end):
        return Right(None)

    first = _to_int(start, 1)
    last = _to_int(end, total)

    if first is None or last is None:
        return _invalid("not_a_number")
    if first < 1 or last < 1:
        return _invalid("below_one")
    if first > total or last > total:
        return _invalid("exceeds_total", total=total)
    if first > last:
        return _invalid("start_after_end")

    return Right(RangeSelection(first, last))


def select_range(
    items: Sequence[T], selection: Optional[RangeSelection]
) -> Either[InvalidRangeError, list]:
    """Slices ``items`` down to ``selection``; ``None`` keeps every item."""
    if selection is None:
        return Right(list(items))

    start_index = max(0, selection.start - 1)
    end_index = min(len(items), selection.end)
    if start_index >= end_index:
        return _invalid("empty")

    logger.info(f"Selected items {selection.start} to {selection.end} of {len(items)}.")
    return Right(list(items[start_index:end_index]))


def select(items: Sequence[T], start: Bound = None, end: Bound = None) -> Either[InvalidRangeError, list]:
    """Validates ``start``/``end`` against ``items`` and returns the sub-sequence."""
    return validate_range(start, end, len(items)).bind(
        lambda selection: select_range(items, selection)
    )
