# -*- coding: utf-8 -*-
"""
Toast notification component.
"""

from PyQt5.QtWidgets import QLabel, QWidget, QGraphicsOpacityEffect
from PyQt5.QtCore import Qt, QTimer, QPropertyAnimation

from app.config import Config


class Toast(QLabel):
    """Toast notification popup."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    COLORS = {
        SUCCESS: "#28a745",
        ERROR: "#dc3545",
        WARNING: "#ffc107",
        INFO: "#17a2b8",
    }

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("toast")
        self.toast_type = self.INFO
        self._hide_timer = QTimer(self)
        self._hide_timer.setSingleShot(True)
        self._hide_timer.timeout.connect(self._fade_out)
        self._setup_ui()

    def _setup_ui(self):
        """Setup toast UI."""
        self.setAlignment(Qt.AlignCenter)
        self.setWordWrap(True)
        self.setMinimumWidth(300)
        self.setMaximumWidth(500)

        # Opacity effect for fade animation
        self.opacity_effect = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self.opacity_effect)
        self.opacity_effect.setOpacity(0)

        self.hide()

    def show_message(self, title: str, description: str = "", toast_type: str = INFO,
                     duration: int = None):
        """
        Show a toast message.

        Args:
            title: Headline text
            description: Optional second line
            toast_type: Type (success, error, warning, info)
            duration: Display duration in milliseconds
        """
        self.toast_type = toast_type
        self.setText(f"{title}\n{description}" if description else title)

        color = self.COLORS.get(toast_type, "#333")
        text_color = "#333" if toast_type == self.WARNING else "white"
        self.setStyleSheet(f"""
            QLabel#toast {{
                background-color: {color};
                color: {text_color};
                padding: 12px 24px;
                border-radius: 6px;
                font-size: 11pt;
            }}
        """)

        # Position at bottom center of parent
        if self.parent():
            parent_rect = self.parent().rect()
            self.adjustSize()
            x = (parent_rect.width() - self.width()) // 2
            y = parent_rect.height() - self.height() - 50
            self.move(x, y)

        self.show()
        self.raise_()

        self.fade_in = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_in.setDuration(200)
        self.fade_in.setStartValue(0)
        self.fade_in.setEndValue(1)
        self.fade_in.start()

        self._hide_timer.start(duration or Config.TOAST_DURATION_MS)

    def _fade_out(self):
        """Fade out and hide."""
        self.fade_out = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_out.setDuration(300)
        self.fade_out.setStartValue(1)
        self.fade_out.setEndValue(0)
        self.fade_out.finished.connect(self.hide)
        self.fade_out.start()

    @classmethod
    def notify(cls, parent: QWidget, title: str, description: str = "",
               toast_type: str = "info", duration: int = None) -> "Toast":
        """
        Convenience method to show a toast on a widget.

        Args:
            parent: Parent widget
            title: Headline text
            description: Optional second line
            toast_type: Type (success, error, warning, info)
            duration: Display duration
        """
        toast = parent.findChild(Toast, "toast")
        if not toast:
            toast = Toast(parent)

        toast.show_message(title, description, toast_type, duration)
        return toast
