import logging
from pathlib import Path

from PyQt6.QtCore import QThread, pyqtSignal

from core.partition import PartitionSpec
from core.pdf_merger import PDFMerger
from core.pdf_splitter import PDFSplitter

logger = logging.getLogger("pdfhandler.workers")


class MergeWorker(QThread):
    """Executa PDFMerger.merge() fora da thread da interface."""

    finished = pyqtSignal(object)  # MergeResult
    progress = pyqtSignal(int)
    error = pyqtSignal(str)

    def __init__(
        self,
        source_paths: list[Path],
        output_path: Path,
        merger: PDFMerger | None = None,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self._source_paths = source_paths
        self._output_path = output_path
        self._merger = merger or PDFMerger()
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    def run(self) -> None:
        try:
            result = self._merger.merge(
                self._source_paths,
                self._output_path,
                progress=self.progress.emit,
                is_cancelled=lambda: self._cancelled,
            )
            self.finished.emit(result)
        except Exception as exc:
            logger.error("MergeWorker falhou: %s", exc, exc_info=True)
            self.error.emit(str(exc))


class SplitWorker(QThread):
    """Executa PDFSplitter.split() fora da thread da interface."""

    finished = pyqtSignal(object)  # SplitResult
    progress = pyqtSignal(int)
    error = pyqtSignal(str)

    def __init__(
        self,
        pdf_path: Path,
        partition: PartitionSpec,
        output_dir: Path,
        pattern: str,
        splitter: PDFSplitter | None = None,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self._pdf_path = pdf_path
        self._partition = partition
        self._output_dir = output_dir
        self._pattern = pattern
        self._splitter = splitter or PDFSplitter()
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    def run(self) -> None:
        try:
            result = self._splitter.split(
                self._pdf_path,
                self._partition,
                self._output_dir,
                self._pattern,
                progress=self.progress.emit,
                is_cancelled=lambda: self._cancelled,
            )
            self.finished.emit(result)
        except Exception as exc:
            logger.error("SplitWorker falhou: %s", exc, exc_info=True)
            self.error.emit(str(exc))


# "A ação é o antídoto do desespero." — Joan Baez
