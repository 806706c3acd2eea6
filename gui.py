"""
Main file that controls GUI
"""
import sys
from pathlib import Path

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtWidgets import (
    QApplication,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from actions import ABOUT_TEXT, APP_TITLE, Action, AppContext, file_action, text_action
from algorithms.errors import IOFailure, MalformedInput

DARK = "#0E103D"
LIGHT = "#3590F3"


def make_button(text: str, color: str) -> QPushButton:
    button = QPushButton(text)
    button.setStyleSheet(
        f"""
        font-size: 15px;
        color: white;
        font-weight: 500;
        background-color: {color};
        border-radius: 10px;
        """
    )
    button.setFixedSize(QSize(200, 50))
    return button


def centered(*widgets) -> QHBoxLayout:
    layout = QHBoxLayout()
    layout.addStretch()
    for widget in widgets:
        layout.addWidget(widget)
    layout.addStretch()
    return layout


class MainWindow(QMainWindow):
    """
    class controls main window
    """

    def __init__(self, context: AppContext):
        super().__init__()
        self.context = context
        self.setFixedSize(QSize(700, 420))
        self.setWindowTitle(APP_TITLE)

        self.central_widget = QWidget()
        self.layout = QVBoxLayout()
        self.layout.setContentsMargins(40, 30, 40, 30)
        self.central_widget.setStyleSheet(
            """
            background-color: #E8EEF2;
            """
        )

        self.name = QLabel("RLE coder")
        self.name.setAlignment(Qt.AlignmentFlag.AlignLeft)
        self.name.setStyleSheet(
            f"""
            font-size: 35px;
            color: {DARK};
            font-weight: 700;
            """
        )
        self.layout.addWidget(self.name)

        self.text_entry = QLineEdit()
        self.text_entry.setPlaceholderText("Text to encode, or hex to decode")
        self.text_entry.setStyleSheet(
            """
            background-color: white;
            padding: 5px 10px;
            font-size: 15px;
            color: black;
            border-radius: 10px;
            """
        )
        self.text_entry.setFixedHeight(40)
        self.layout.addWidget(self.text_entry)

        self.encode_button = make_button("Encode", DARK)
        self.encode_button.clicked.connect(lambda: self.run_text_action(Action.ENCODE))
        self.decode_button = make_button("Decode", LIGHT)
        self.decode_button.clicked.connect(lambda: self.run_text_action(Action.DECODE))
        self.layout.addLayout(centered(self.encode_button, self.decode_button))

        self.encode_file_button = make_button("Encode file", DARK)
        self.encode_file_button.clicked.connect(
            lambda: self.run_file_action(Action.ENCODE)
        )
        self.decode_file_button = make_button("Decode file", LIGHT)
        self.decode_file_button.clicked.connect(
            lambda: self.run_file_action(Action.DECODE)
        )
        self.layout.addLayout(
            centered(self.encode_file_button, self.decode_file_button)
        )

        self.status_label = QLabel("")
        self.status_label.setStyleSheet(
            """
            font-size: 15px;
            color: black;
            font-weight: 500;
            """
        )
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.status_label)

        self.about_button = make_button("About", DARK)
        self.about_button.clicked.connect(self.show_about)
        self.layout.addLayout(centered(self.about_button))

        self.central_widget.setLayout(self.layout)
        self.setCentralWidget(self.central_widget)

    def run_text_action(self, action: Action):
        """
        function replaces the entry text with its encoded or decoded form
        """
        try:
            result = text_action(action, self.text_entry.text(), self.context)
        except MalformedInput as e:
            QMessageBox.warning(self, "Malformed input", str(e))
            return
        self.text_entry.setText(result)

    def run_file_action(self, action: Action):
        """
        function handles picking a file and encoding or decoding it
        """
        file_name, _ = QFileDialog.getOpenFileName(
            self, f"{action.title} file", str(self.context.working_dir)
        )
        if not file_name:
            return

        try:
            result = file_action(action, file_name, self.context)
        except MalformedInput as e:
            QMessageBox.warning(self, "Malformed input", str(e))
            return
        except IOFailure as e:
            QMessageBox.warning(self, "File error", str(e))
            return

        self.status_label.setText(
            f"{result.source.name}: {round(result.input_size / 1024, 2)} KB -> "
            f"{result.destination.name}: {round(result.output_size / 1024, 2)} KB"
        )
        QMessageBox.information(
            self, "Success", f"Saved {result.destination}\n{result.log}"
        )

    def show_about(self):
        QMessageBox.about(self, f"About {APP_TITLE}", ABOUT_TEXT)


def main():
    app = QApplication(sys.argv)
    window = MainWindow(AppContext(working_dir=Path.cwd()))
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
