"""BoardView — QGraphicsView wrapper for the board scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from kingside.core.move import Move, MoveResult
from kingside.core.position import Position
from kingside.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Displays the board scene, scaled to fit the widget.

    Signals:
        move_made(Move): Bubbled up from BoardScene.
        move_rejected(MoveResult): Bubbled up from BoardScene.
    """

    move_made = pyqtSignal(Move)
    move_rejected = pyqtSignal(MoveResult)

    def __init__(
        self,
        position: Position | None = None,
        parent: QWidget | None = None,
    ) -> None:
        self._scene = BoardScene(position)
        super().__init__(self._scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setMouseTracking(True)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)

        # Bubble scene signals
        self._scene.move_made.connect(self.move_made.emit)
        self._scene.move_rejected.connect(self.move_rejected.emit)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
