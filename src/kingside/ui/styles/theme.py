"""Visual theme constants and QSS styles for Kingside."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_hover: QColor  # square under the cursor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal move targets
    highlight_check: QColor  # king in check
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(255, 253, 152),  # pale yellow
            dark_square=QColor(166, 116, 30),  # ochre
            highlight_hover=QColor(231, 255, 0, 51),
            highlight_from=QColor(255, 0, 0, 127),
            highlight_to=QColor(0, 0, 0, 40),
            highlight_check=QColor(255, 0, 0, 120),
            coord_light=QColor(255, 253, 152),
            coord_dark=QColor(166, 116, 30),
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_hover=QColor(255, 255, 255, 50),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 40),
            highlight_check=QColor(255, 0, 0, 120),
            coord_light=QColor(240, 217, 181),
            coord_dark=QColor(181, 136, 99),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Look up a preset by settings name; unknown names get the default."""
        presets = {
            "Default": cls.default,
            "Classic": cls.classic,
        }
        return presets.get(name, cls.default)()


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QStatusBar {
    background: #1e1e1e;
    color: #d4d4d4;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
