"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import EMPTY, Piece
from chesslite.core.types import BOARD_SIZE, FILES, Square, all_squares

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of :class:`Piece` values.

    Storage only: legality lives in the rule modules, which receive the
    board explicitly.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece]] = [
            [EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece:
        row, col = sq
        return self._grid[row][col]

    def __setitem__(self, sq: Square, piece: Piece) -> None:
        row, col = sq
        self._grid[row][col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq].is_empty

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color) -> list[Square]:
        """Squares holding *color*'s pieces, in row-major order."""
        return [sq for sq in all_squares() if self[sq].color == color]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        king = Piece(color, PieceType.KING)
        for sq in all_squares():
            if self[sq] == king:
                return sq
        raise RuntimeError(f"No {color.name} king on board")

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: black on rows 0/1, white on rows 6/7."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[(0, col)] = Piece(Color.BLACK, pt)
            b[(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = " ".join(str(p) for p in self._grid[row])
            rows.append(f"{BOARD_SIZE - row} {cells}")
        rows.append("  " + " ".join(FILES))
        return "\n".join(rows)
