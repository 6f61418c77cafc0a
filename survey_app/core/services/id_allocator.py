"""Integer identifier allocation for responses and users."""

from __future__ import annotations

from collections.abc import Iterable


def next_id(existing_ids: Iterable[int]) -> int:
    """Return one more than the largest existing id, or 1 for an empty set.

    Pure: callers that share a collection across threads must hold their lock
    across allocation and insertion.
    """
    return max(existing_ids, default=0) + 1
