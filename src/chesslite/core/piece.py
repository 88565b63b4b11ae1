"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesslite.core.enums import Color, PieceType

# Placement character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value held by a board square.

    The empty square is ``Piece(None, PieceType.EMPTY)`` (see :data:`EMPTY`);
    every other kind carries a color.
    """

    color: Color | None
    piece_type: PieceType

    def __post_init__(self) -> None:
        if (self.color is None) != (self.piece_type == PieceType.EMPTY):
            raise ValueError(
                f"Invalid piece: color={self.color!r}, type={self.piece_type!r}"
            )

    @property
    def is_empty(self) -> bool:
        return self.piece_type == PieceType.EMPTY

    def is_enemy_of(self, color: Color) -> bool:
        return self.color is not None and self.color != color

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Placement character (uppercase = white, lowercase = black, '.' empty)."""
        if self.color is None:
            return "."
        return _CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from placement character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞ (a space for the empty square)."""
        if self.color is None:
            return " "
        return _UNICODE[(self.color, self.piece_type)]


EMPTY = Piece(None, PieceType.EMPTY)
