"""Edge-list parsing for friendship graph files.

File format: whitespace-separated integers. The first token is the edge
count E, followed by E pairs of person IDs::

    3
    1 2
    2 3
    4 5

Line breaks carry no meaning; only token order does. Tokens after the
last declared pair are ignored and counted so callers can warn about them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from socialgraph.domain.errors import MalformedDataError

_INT_TOKEN = re.compile(r"^[+-]?[0-9]+$")


@dataclass(frozen=True)
class EdgeList:
    """Parsed contents of an edge-list file."""

    declared: int  # edge count from the header token
    pairs: tuple[tuple[int, int], ...]
    ignored_tokens: int = 0


def parse_person_id(value: str) -> int:
    """Parse a person ID: a non-negative base-10 integer.

    Raises:
        ValueError: If *value* is not a non-negative integer.
    """
    text = value.strip()
    if not _INT_TOKEN.match(text):
        msg = f"'{value}' is not an integer"
        raise ValueError(msg)
    number = int(text)
    if number < 0:
        msg = f"'{value}' is negative; person IDs start at 0"
        raise ValueError(msg)
    return number


def _read_int(tokens: list[str], index: int, what: str) -> int:
    if index >= len(tokens):
        msg = f"Unexpected end of input: expected {what} at token {index + 1}"
        raise MalformedDataError(msg)
    try:
        return parse_person_id(tokens[index])
    except ValueError as exc:
        msg = f"Invalid {what} at token {index + 1}: {exc}"
        raise MalformedDataError(msg) from exc


def parse_edge_list(text: str) -> EdgeList:
    """Parse edge-list *text* into an :class:`EdgeList`.

    Raises:
        MalformedDataError: If the header or any ID is not a non-negative
            integer, or the input ends before E pairs are read.
    """
    tokens = text.split()
    declared = _read_int(tokens, 0, "edge count")

    pairs: list[tuple[int, int]] = []
    position = 1
    for _ in range(declared):
        a = _read_int(tokens, position, "person ID")
        b = _read_int(tokens, position + 1, "person ID")
        pairs.append((a, b))
        position += 2

    return EdgeList(
        declared=declared,
        pairs=tuple(pairs),
        ignored_tokens=len(tokens) - position,
    )
