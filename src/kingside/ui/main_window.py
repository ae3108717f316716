"""MainWindow — top-level window around the board view."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeyEvent
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget

from kingside.core.enums import Color
from kingside.core.move import Move, MoveResult
from kingside.core.position import Position
from kingside.ui.board.board_view import BoardView
from kingside.ui.settings import AppSettings
from kingside.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Kingside."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Kingside")
        self._settings = settings if settings is not None else AppSettings()
        self._position = Position()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()

        side = 8 * self._settings.tile_size
        self.resize(side + 12, side + 60)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)

        self._board_view = BoardView(self._position)
        root.addWidget(self._board_view)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("Ready")
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("New game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self.new_game)
        self._menu_game.addAction(self._act_new_game)

        self._menu_game.addSeparator()

        self._act_quit = QAction("Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

    def _connect_signals(self) -> None:
        self._board_view.move_made.connect(self._on_move_made)
        self._board_view.move_rejected.connect(self._on_move_rejected)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(s.board_theme))
        scene.set_tile_size(s.tile_size)
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)
        scene.set_highlight_check(s.highlight_check)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._position

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(self) -> None:
        """Reset the board to the starting setup."""
        self._position.reset()
        self._board_view.board_scene.set_position(self._position)
        self._status_label.setText("New game")
        _LOGGER.info("New game started")

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move_made(self, move: Move) -> None:
        text = f"Played {move}"
        in_check = [c for c in Color if self._position.is_in_check(c)]
        if in_check:
            names = ", ".join(c.name.capitalize() for c in in_check)
            text += f" - {names} in check"
        self._status_label.setText(text)

    def _on_move_rejected(self, result: MoveResult) -> None:
        self._status_label.setText(
            f"Invalid move {result.move}: {result.rejection!s}"
        )

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is not None and event.key() == Qt.Key.Key_Escape:
            self.close()
            return
        super().keyPressEvent(event)
