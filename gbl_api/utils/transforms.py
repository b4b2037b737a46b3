"""Deterministic display transforms — pure Python, no database access.

  - Names and positions: "john   doe" → "John   Doe"
  - Leaderboard rows: [{...}, {...}] → [{..., "rank": 1}, {..., "rank": 2}]
"""

from collections.abc import Iterable


def title_case(value: str | None) -> str | None:
    """Capitalize each space-delimited word and lowercase the rest.

    Splits on single spaces only, so runs of spaces yield empty words that
    are kept and re-joined: "john   doe" → "John   Doe".
    """
    if not value:
        return value
    return " ".join(word[:1].upper() + word[1:].lower() for word in value.split(" "))


def assign_ranks(rows: Iterable[dict]) -> list[dict]:
    """Attach a 1-based rank taken purely from row order.

    Callers sort first. Ties get consecutive ranks, never shared ones.
    """
    return [{**row, "rank": index} for index, row in enumerate(rows, start=1)]
