"""Sequential order identifiers of the form ``PREFIX-NNN``."""

from __future__ import annotations

from orderdesk.domain.exceptions import InvalidOrderIdError

DEFAULT_PREFIX = "ORD"
COUNTER_WIDTH = 3


def initial_order_id(prefix: str = DEFAULT_PREFIX) -> str:
    """The id that stands in for "nothing issued yet" (``ORD-000``)."""
    return f"{prefix}-{0:0{COUNTER_WIDTH}d}"


def next_order_id(last_id: str | None, prefix: str = DEFAULT_PREFIX) -> str:
    """Return the identifier following *last_id*.

    The counter is incremented and zero-padded to at least three digits;
    past 999 it simply widens (``ORD-999`` -> ``ORD-1000``). The prefix of
    *last_id* is kept; *prefix* is only used when nothing was issued yet.
    """
    if last_id is None:
        last_id = initial_order_id(prefix)

    head, sep, counter = last_id.rpartition("-")
    if not sep or not head or not (counter.isascii() and counter.isdigit()):
        raise InvalidOrderIdError(
            f"Invalid order id '{last_id}', expected PREFIX-NNN"
        )
    return f"{head}-{int(counter) + 1:0{COUNTER_WIDTH}d}"
