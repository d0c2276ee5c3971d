from .documents import DocumentBackend, FitzBackend
from .errors import (
    PDFHandlerError,
    OpenError,
    SaveError,
    InvalidArgumentError,
    NoPagesError,
    NotFoundError,
    OperationCancelled,
)
from .outcome import BatchOutcome, ItemOutcome
from .partition import PageRange, RangesPartition, SinglePagePartition, EqualPartition
from .pdf_merger import PDFMerger, MergeResult
from .pdf_splitter import PDFSplitter, SplitResult

__all__ = [
    "DocumentBackend",
    "FitzBackend",
    "PDFHandlerError",
    "OpenError",
    "SaveError",
    "InvalidArgumentError",
    "NoPagesError",
    "NotFoundError",
    "OperationCancelled",
    "BatchOutcome",
    "ItemOutcome",
    "PageRange",
    "RangesPartition",
    "SinglePagePartition",
    "EqualPartition",
    "PDFMerger",
    "MergeResult",
    "PDFSplitter",
    "SplitResult",
]
