"""Log filtering: the read-side view of a user's entries."""

from datetime import date
from typing import List, Optional, Sequence

from ..core.coercion import is_positive_integer
from ..schemas.exercise import Entry


def filter_log(
    entries: Sequence[Entry],
    from_date: Optional[date] = None,
    to_date: Optional[date] = None,
    limit: Optional[int] = None,
) -> List[Entry]:
    """Return the requested view of ``entries``.

    Bounds are inclusive calendar days.  The remaining entries are
    returned most recently appended first and then truncated to
    ``limit`` when it is a positive integer.  Entries whose date cannot
    be read never match a bound.  ``entries`` itself is never modified.
    """
    selected = list(entries)
    if from_date is not None:
        selected = [entry for entry in selected if entry.day is not None and entry.day >= from_date]
    if to_date is not None:
        selected = [entry for entry in selected if entry.day is not None and entry.day <= to_date]
    selected.reverse()
    if is_positive_integer(limit):
        selected = selected[:limit]
    return selected
