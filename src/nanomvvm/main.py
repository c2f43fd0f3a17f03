"""Entry point for the nanomvvm item list demo."""

import argparse
import sys

from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QLabel,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from .demo import Item, ItemView, ItemViewModel
from .utils.logger import setup_logging

HELP_LINES = [
    "- Each row is an ItemView bound to its own ItemViewModel.",
    "- ItemViewModel extends NanoMvvmViewModel and notifies its view on change.",
    "- Clicking a row updates the view-model, which re-renders the ItemView.",
    "- A one second delay simulates an API call and shows the busy indicator.",
]


class DemoWindow(QMainWindow):
    """Main window holding one ItemView per item."""

    def __init__(self, items: list[Item], delay_ms: int = ItemViewModel.DEFAULT_DELAY_MS):
        super().__init__()
        self.setWindowTitle("To-do list (nanomvvm)")

        central = QWidget()
        layout = QVBoxLayout(central)

        self.item_views: list[ItemView] = []
        for item in items:
            view = ItemView(ItemViewModel(item, delay_ms=delay_ms))
            self.item_views.append(view)
            layout.addWidget(view)

        divider = QFrame()
        divider.setFrameShape(QFrame.Shape.HLine)
        layout.addWidget(divider)

        title = QLabel("How it works:")
        font = title.font()
        font.setBold(True)
        font.setPointSize(font.pointSize() + 4)
        title.setFont(font)
        layout.addWidget(title)
        for line in HELP_LINES:
            layout.addWidget(QLabel(line))
        layout.addStretch()

        self.setCentralWidget(central)

    def closeEvent(self, event):
        """Unmount item views so their view-models are disposed."""
        # Child widgets get no close event of their own
        for view in self.item_views:
            view.close()
        super().closeEvent(event)


def main(argv=None):
    """Run the demo application."""
    parser = argparse.ArgumentParser(description="nanomvvm item list demo")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level (default: INFO)",
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=ItemViewModel.DEFAULT_DELAY_MS,
        help="Simulated toggle latency in milliseconds",
    )
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    app = QApplication.instance() or QApplication(sys.argv[:1])
    items = [
        Item("Buy milk"),
        Item("Pay bills", is_selected=True),
        Item("Study PyQt"),
    ]
    window = DemoWindow(items, delay_ms=args.delay_ms)
    window.resize(480, 360)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
