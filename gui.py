"""
Main file that controls GUI
"""
import os
import sys

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtWidgets import (
    QApplication,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from LZ77 import LZ77
from lz77_cli import derive_output_names
from lz_config import MAX_WINDOW_SIZE
from lz_errors import LZ77Error

BUTTON_STYLE = """
    font-size: 15px;
    color: white;
    font-weight: 500;
    background-color: {color};
    border-radius: 10px;
    """

LABEL_STYLE = """
    font-size: {size}px;
    color: black;
    font-weight: {weight};
    """


class MainWindow(QMainWindow):
    """
    class controls main window
    """

    def __init__(self):
        super().__init__()
        self.setFixedSize(QSize(800, 600))
        self.setWindowTitle("LZ77 Compressor")

        self.central_widget = QWidget()
        self.layout = QVBoxLayout()
        self.layout.setContentsMargins(40, 30, 40, 30)
        self.central_widget.setStyleSheet(
            """
            background-color: #E8EEF2;
            """
        )

        self.name = QLabel("LZ77 compressor")
        self.name.setAlignment(Qt.AlignmentFlag.AlignLeft)
        self.name.setStyleSheet(
            """
            font-size: 35px;
            color: #0E103D;
            font-weight: 700;
        """
        )
        self.layout.addWidget(self.name)

        self.caption = QLabel("Choose file for compression:")
        self.caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.caption.setStyleSheet(LABEL_STYLE.format(size=25, weight=600))
        self.layout.addWidget(self.caption)

        self.pick_button = QPushButton("Pick a file")
        self.pick_button.setStyleSheet(BUTTON_STYLE.format(color="#0E103D"))
        self.pick_button.setFixedSize(QSize(400, 60))
        self.pick_button.clicked.connect(self.pick_file)
        self.layout.addLayout(self._centered(self.pick_button))

        self.selected_file = None
        self.selected_file_size = None
        self.file_label = QLabel("No file selected")
        self.file_label.setStyleSheet(LABEL_STYLE.format(size=15, weight=500))
        self.file_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.file_label)

        self.choose_window = QLabel("Window size (bytes):")
        self.choose_window.setStyleSheet(LABEL_STYLE.format(size=20, weight=600))
        self.layout.addWidget(self.choose_window)

        # the decompressor has to be given the same window size
        self.window_box = QSpinBox()
        self.window_box.setRange(1, MAX_WINDOW_SIZE)
        self.window_box.setValue(MAX_WINDOW_SIZE)
        self.window_box.setFixedSize(QSize(720, 40))
        self.window_box.setStyleSheet(
            """
            background-color: white;
            padding: 5px 10px;
            font-size: 15px;
            color: black;
            border-radius: 10px;
            """
        )
        self.layout.addWidget(self.window_box)

        self.compress_button = QPushButton("Compress")
        self.compress_button.setStyleSheet(BUTTON_STYLE.format(color="#0E103D"))
        self.compress_button.setFixedSize(QSize(200, 60))
        self.compress_button.clicked.connect(self.compress_file)
        self.compression_done = False
        self.compressed_file = None
        self.decompressed_file = None

        self.compressed_size_label = QLabel("")
        self.compressed_size_label.setStyleSheet(LABEL_STYLE.format(size=15, weight=500))
        self.compressed_size_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.compressed_size_label)
        self.layout.addLayout(self._centered(self.compress_button))

        self.decompress_button = QPushButton("Decompress")
        self.decompress_button.setStyleSheet(BUTTON_STYLE.format(color="#3590F3"))
        self.decompress_button.setFixedSize(QSize(200, 60))
        self.decompress_button.clicked.connect(self.decompress_file)
        self.layout.addLayout(self._centered(self.decompress_button))

        self.central_widget.setLayout(self.layout)
        self.setCentralWidget(self.central_widget)

    @staticmethod
    def _centered(widget) -> QHBoxLayout:
        row = QHBoxLayout()
        row.addStretch()
        row.addWidget(widget)
        row.addStretch()
        return row

    def select_file(self, path: str):
        """
        function remembers the file to work on
        """
        self.selected_file = path
        self.selected_file_size = os.stat(path).st_size
        self.compressed_file, self.decompressed_file = derive_output_names(path)
        self.compression_done = False
        self.compressed_size_label.setText("")
        self.file_label.setText(f"Selected: {os.path.basename(path)}")

    def pick_file(self):
        """
        function handles picking files
        """
        dialog = QFileDialog()
        dialog.setFileMode(QFileDialog.FileMode.ExistingFile)
        if dialog.exec():
            files = dialog.selectedFiles()
            if len(files) > 1:
                QMessageBox.warning(
                    self,
                    "Too many files",
                    "Choose only one file at a time for compression.",
                )
                return
            self.select_file(files[0])

    def compress_file(self):
        """
        function handles file compression
        """
        if not self.selected_file:
            QMessageBox.warning(self, "Error", "No file to compress, select it first")
            return

        window_size = self.window_box.value()
        try:
            log = LZ77.compress_file(
                self.selected_file, self.compressed_file, window_size=window_size
            )
        except (OSError, LZ77Error) as e:
            QMessageBox.critical(self, "Compression failed", str(e))
            return

        self.compression_done = True
        compressed_size = os.stat(self.compressed_file).st_size
        self.compressed_size_label.setText(
            f"Original size was: {round(self.selected_file_size / 1024, 2)} KB, "
            f"now size is: {round(compressed_size / 1024, 2)} KB"
        )
        QMessageBox.information(
            self, "Success", f"File was compressed with window {window_size}!\n{log}"
        )

    def decompress_file(self):
        """
        function handles file decompression
        """
        if not self.compression_done:
            QMessageBox.warning(self, "Error", "You have not compressed it yet!")
            return

        try:
            LZ77.decompress_file(
                self.compressed_file,
                self.decompressed_file,
                window_size=self.window_box.value(),
            )
        except (OSError, LZ77Error) as e:
            QMessageBox.critical(self, "Decompression failed", str(e))
            return

        QMessageBox.information(
            self, "Success", f"File was decompressed to {self.decompressed_file}!"
        )


if __name__ == "__main__":
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
