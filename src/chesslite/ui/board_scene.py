"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chesslite.core.board import Board
from chesslite.core.enums import Color
from chesslite.core.rules import Rules
from chesslite.core.types import BOARD_SIZE, FILES, Square, all_squares
from chesslite.ui.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights and piece glyphs.

    Clicking a piece of the side to move selects it; the selected piece
    blinks until the selection ends. Clicking a legal destination then emits
    ``move_requested``.

    Signals:
        move_requested(object, object): (from_sq, to_sq) chosen by the user.
    """

    move_requested = pyqtSignal(object, object)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None, blink_ms: int = 400) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._side_to_move = Color.WHITE

        # Interaction state
        self._selected_sq: Square | None = None
        self._legal_targets: list[Square] = []
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._blink_timer = QTimer(self)
        self._blink_timer.setInterval(blink_ms)
        self._blink_timer.timeout.connect(self._toggle_blink)

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board, side_to_move: Color) -> None:
        """Update the displayed position (full redraw of pieces)."""
        self._board = board
        self._side_to_move = side_to_move
        self._clear_selection()
        self._sync_pieces()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        if self._board is not None:
            self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move dot highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)

    def set_blink_interval(self, ms: int) -> None:
        self._blink_timer.setInterval(ms)

    def highlight_check(self, king_sq: Square | None) -> None:
        """Highlight the king that is in check (``None`` clears it)."""
        self._clear_items(self._check_items)
        if king_sq is None:
            return
        rect = self._make_highlight(king_sq, self._theme.highlight_check)
        rect.setZValue(0.6)
        self._check_items.append(rect)

    @property
    def selected_square(self) -> Square | None:
        return self._selected_sq

    @property
    def legal_targets(self) -> list[Square]:
        return list(self._legal_targets)

    @property
    def is_blinking(self) -> bool:
        return self._blink_timer.isActive()

    def click_square(self, sq: Square) -> None:
        """Handle a click on *sq*: select, deselect or request a move."""
        if not self._interactive or self._board is None:
            return

        if self._selected_sq is not None and sq in self._legal_targets:
            from_sq = self._selected_sq
            self._clear_selection()
            self.move_requested.emit(from_sq, sq)
            return

        if self._board[sq].color == self._side_to_move and sq != self._selected_sq:
            self._select_square(sq)
        else:
            self._clear_selection()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Sans", max(9, t // 8))

        for row, col in all_squares():
            is_light = (row + col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(col * t, row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[(row, col)] = rect

            label_color = self._theme.coord_dark if is_light else self._theme.coord_light
            # Rank numbers (left edge)
            if col == 0:
                self._add_coord(str(BOARD_SIZE - row), font, label_color, 2, row * t + 1)
            # File letters (bottom edge)
            if row == BOARD_SIZE - 1:
                self._add_coord(
                    FILES[col], font, label_color, col * t + t - 12, row * t + t - 16
                )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(self, text: str, font: QFont, color: QColor, x: float, y: float) -> None:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self.TILE
        font = QFont("Sans", int(t * 0.6))
        for sq in all_squares():
            piece = self._board[sq]
            if piece.is_empty:
                continue
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            item.setBrush(QBrush(self._theme.piece))
            bounds = item.boundingRect()
            row, col = sq
            item.setPos(
                col * t + (t - bounds.width()) / 2,
                row * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self._clear_selection()
        else:
            self.click_square(sq)
        super().mousePressEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, sq: Square) -> None:
        self._clear_selection()
        self._selected_sq = sq

        # Highlight origin
        rect = self._make_highlight(sq, self._theme.highlight_from)
        self._highlight_items.append(rect)

        # Legal move dots
        if self._board is not None:
            self._legal_targets = Rules.legal_destinations(
                self._board, sq, self._side_to_move
            )
            if self._show_legal_moves:
                for to_sq in self._legal_targets:
                    dot = self._make_highlight(to_sq, self._theme.highlight_to)
                    self._legal_dot_items.append(dot)

        self._blink_timer.start()

    def _toggle_blink(self) -> None:
        item = (
            self._piece_items.get(self._selected_sq)
            if self._selected_sq is not None
            else None
        )
        if item is None:
            self._blink_timer.stop()
            return
        item.setVisible(not item.isVisible())

    def _clear_selection(self) -> None:
        self._blink_timer.stop()
        if self._selected_sq is not None and self._selected_sq in self._piece_items:
            self._piece_items[self._selected_sq].setVisible(True)
        self._selected_sq = None
        self._legal_targets = []
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return (row, col)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        row, col = sq
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
