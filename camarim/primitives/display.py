"""
Camarim Display — Text Rendering Capability
=============================================
Every record and ledger renders itself as plain text through display().
The set of displayable kinds is closed: items, performers, dressing
rooms, orders, shopping lists and the four ledgers.
"""

from __future__ import annotations

from typing import List, Protocol, Sequence, Tuple


class Displayable(Protocol):
    """Anything that can render itself for the shell."""

    def display(self) -> str:
        ...  # pragma: no cover


def render_table(
    columns: Sequence[Tuple[str, int]],
    rows: Sequence[Sequence[object]],
    indent: str = "",
) -> List[str]:
    """
    Left-aligned fixed-width table.

    columns: (header, width) pairs. Returns the lines without trailing
    newlines; the header is followed by a dashed rule.
    """
    width = sum(w for _, w in columns)
    lines = [indent + "".join(h.ljust(w) for h, w in columns).rstrip()]
    lines.append(indent + "-" * width)
    for row in rows:
        cells = (str(v).ljust(w) for v, (_, w) in zip(row, columns))
        lines.append(indent + "".join(cells).rstrip())
    return lines
