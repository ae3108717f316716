"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from kingside.core.enums import Color
from kingside.core.move import Move, MoveResult
from kingside.core.position import Position
from kingside.core.types import BOARD_SIZE, Square, all_squares
from kingside.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class BoardScene(QGraphicsScene):
    """Renders the board, highlights and piece glyphs; forwards clicks.

    The first click on an occupied square selects it; the next click asks
    the position to play ``(selected, clicked)``. Legality is decided by the
    core alone, the scene only reports the outcome.

    Signals:
        move_made(Move): A requested move was played.
        move_rejected(MoveResult): A requested move was refused.
    """

    move_made = pyqtSignal(Move)
    move_rejected = pyqtSignal(MoveResult)

    TILE = 75  # px per square

    def __init__(
        self,
        position: Position | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._position = position if position is not None else Position()
        self._tile = self.TILE

        # Interaction state
        self._selected_sq: Square | None = None
        self._hover_sq: Square | None = None
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True
        self._highlight_check = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._hover_item: QGraphicsRectItem | None = None
        self._highlight_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}

        self._draw_board()
        self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._position

    @property
    def selected_square(self) -> Square | None:
        return self._selected_sq

    def set_position(self, position: Position) -> None:
        """Show a different position (full redraw of pieces)."""
        self._position = position
        self._clear_selection()
        self.refresh()

    def refresh(self) -> None:
        """Re-read the board and redraw pieces and the check marker."""
        self._sync_pieces()
        self._update_check_highlight()

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_tile_size(self, size: int) -> None:
        self._tile = max(8, size)
        self._clear_selection()
        self._set_hover(None)
        self._draw_board()
        self.refresh()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move target highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)

    def set_highlight_check(self, enabled: bool) -> None:
        self._highlight_check = enabled
        self._update_check_highlight()

    def click_square(self, sq: Square) -> MoveResult | None:
        """Handle a click on *sq* (which may lie off the board).

        Returns the move outcome when the click completed a move request.
        """
        if not self._interactive:
            return None

        if self._selected_sq is None:
            if self._position.piece_at(sq) is not None:
                self._select_square(sq)
            return None

        from_sq = self._selected_sq
        self._clear_selection()
        if sq == from_sq:
            return None

        result = self._position.apply_move(from_sq, sq)
        self.refresh()
        if result:
            self.move_made.emit(result.move)
        else:
            _LOGGER.debug("Rejected %s: %s", result.move, result.rejection)
            self.move_rejected.emit(result)
        return result

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        self._clear_items(list(self._square_items.values()))
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self._tile
        font = QFont("Helvetica", max(7, t // 8))

        for sq in all_squares():
            is_light = (sq.rank + sq.file) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(sq.file * t, sq.rank * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_light else self._theme.coord_light

            # Rank numbers (left edge)
            if sq.file == 0:
                self._add_coord(
                    str(BOARD_SIZE - sq.rank),
                    font,
                    text_color,
                    QPointF(2, sq.rank * t + 1),
                )

            # File letters (bottom edge)
            if sq.rank == BOARD_SIZE - 1:
                self._add_coord(
                    chr(ord("a") + sq.file),
                    font,
                    text_color,
                    QPointF(sq.file * t + t - 12, sq.rank * t + t - 16),
                )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(self, label: str, font: QFont, color: QColor, pos: QPointF) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(pos)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece glyphs from the current board."""
        self._clear_items(list(self._piece_items.values()))
        self._piece_items.clear()

        t = self._tile
        font = QFont("DejaVu Sans", max(6, int(t * 0.6)))
        for sq in all_squares():
            piece = self._position.piece_at(sq)
            if piece is None:
                continue
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            if piece.color == Color.WHITE:
                fill, outline = self._theme.white_piece, self._theme.black_piece
            else:
                fill, outline = self._theme.black_piece, self._theme.white_piece
            item.setBrush(QBrush(fill))
            item.setPen(QPen(outline, 0.5))
            bounds = item.boundingRect()
            item.setPos(
                sq.file * t + (t - bounds.width()) / 2,
                sq.rank * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        self.click_square(self._pos_to_square(event.scenePos()))
        event.accept()

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None:
            sq = self._pos_to_square(event.scenePos())
            self._set_hover(sq if sq.on_board else None)
        super().mouseMoveEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, sq: Square) -> None:
        self._clear_selection()
        self._selected_sq = sq

        rect = self._make_highlight(sq, self._theme.highlight_from)
        self._highlight_items.append(rect)

        if self._show_legal_moves:
            for m in self._position.moves_from(sq):
                dot = self._make_highlight(m.to_sq, self._theme.highlight_to)
                self._legal_dot_items.append(dot)

    def _clear_selection(self) -> None:
        self._selected_sq = None
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def _set_hover(self, sq: Square | None) -> None:
        if sq == self._hover_sq:
            return
        if self._hover_item is not None:
            self.removeItem(self._hover_item)
            self._hover_item = None
        self._hover_sq = sq
        if sq is not None:
            self._hover_item = self._make_highlight(sq, self._theme.highlight_hover)
            self._hover_item.setZValue(0.4)

    def _update_check_highlight(self) -> None:
        self._clear_items(self._check_items)
        if not self._highlight_check:
            return
        for color in Color:
            if not self._position.is_in_check(color):
                continue
            king_sq = self._position.king_square(color)
            if king_sq is not None:
                rect = self._make_highlight(king_sq, self._theme.highlight_check)
                rect.setZValue(0.6)
                self._check_items.append(rect)

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Square:
        """Scene position → square. The result may lie off the board."""
        t = self._tile
        return Square(int(pos.y() // t), int(pos.x() // t))

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self._tile
        rect = QGraphicsRectItem(sq.file * t, sq.rank * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
