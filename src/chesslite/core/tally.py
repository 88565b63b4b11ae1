"""Capture tally: how many enemy pieces of each kind each side has taken."""

from __future__ import annotations

from chesslite.core.enums import Color, PieceType

CAPTURABLE: tuple[PieceType, ...] = (
    PieceType.PAWN,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.QUEEN,
)


class CaptureTally:
    """Per-color counters of captured enemy kinds.

    Purely observational: legality code never reads it.
    """

    __slots__ = ("_counts",)

    def __init__(self) -> None:
        self._counts: dict[Color, dict[PieceType, int]] = {
            color: dict.fromkeys(CAPTURABLE, 0) for color in Color
        }

    def record(self, captor: Color, kind: PieceType) -> None:
        """*captor* took an enemy piece of *kind*."""
        if kind not in CAPTURABLE:
            raise ValueError(f"Piece kind cannot be captured: {kind.name}")
        self._counts[captor][kind] += 1

    def revert(self, captor: Color, kind: PieceType) -> None:
        """Undo one :meth:`record` call."""
        if self._counts[captor].get(kind, 0) <= 0:
            raise ValueError(f"No {kind.name} capture recorded for {captor.name}")
        self._counts[captor][kind] -= 1

    def count(self, captor: Color, kind: PieceType) -> int:
        return self._counts[captor].get(kind, 0)

    def total(self, captor: Color) -> int:
        return sum(self._counts[captor].values())

    def as_dict(self, captor: Color) -> dict[PieceType, int]:
        return dict(self._counts[captor])

    def clear(self) -> None:
        for counts in self._counts.values():
            for kind in counts:
                counts[kind] = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CaptureTally):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        parts = [
            f"{color}: " + ", ".join(f"{k.name.lower()}={n}" for k, n in counts.items() if n)
            for color, counts in self._counts.items()
        ]
        return f"CaptureTally({'; '.join(parts)})"
