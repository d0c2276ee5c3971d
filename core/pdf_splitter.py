import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Sequence

from core.documents import DocumentBackend, FitzBackend, SourceDocument
from core.errors import (
    InvalidArgumentError,
    NotFoundError,
    OperationCancelled,
    PDFHandlerError,
)
from core.naming import render, validate_pattern
from core.outcome import BatchOutcome, ItemOutcome
from core.partition import (
    EqualPartition,
    PageRange,
    PartitionSpec,
    RangesPartition,
    SinglePagePartition,
    equal_ranges,
)
from core.progress import ProgressSink, as_progress_sink

logger = logging.getLogger("pdfhandler.splitter")

Progress = ProgressSink | Callable[[int], None] | None
CancelCheck = Callable[[], bool] | None


@dataclass
class SplitResult(BatchOutcome):
    source_path: Path | None = None
    source_pages: int = 0


@dataclass
class _Part:
    number: int          # número de sequência do arquivo (1-based)
    pages: PageRange


class PDFSplitter:
    """
    Divide um PDF em vários arquivos.

    A fonte é aberta uma única vez por chamada e fechada ao final em qualquer
    caminho de saída. Cada parte tem seu próprio documento de saída, gravado
    e fechado antes da próxima. Uma parte que falha é registrada e pulada.
    """

    def __init__(self, backend: DocumentBackend | None = None) -> None:
        self._backend = backend or FitzBackend()

    def split(
        self,
        source_path: str | Path,
        partition: PartitionSpec,
        output_dir: str | Path,
        pattern: str,
        progress: Progress = None,
        is_cancelled: CancelCheck = None,
    ) -> SplitResult:
        if isinstance(partition, RangesPartition):
            return self.split_by_ranges(
                source_path, list(partition.ranges), output_dir, pattern, progress, is_cancelled
            )
        if isinstance(partition, SinglePagePartition):
            return self.split_by_page(source_path, output_dir, pattern, progress, is_cancelled)
        if isinstance(partition, EqualPartition):
            return self.split_equally(
                source_path, partition.parts, output_dir, pattern, progress, is_cancelled
            )
        raise TypeError(f"Particao desconhecida: {partition!r}")

    def split_by_ranges(
        self,
        source_path: str | Path,
        ranges: Sequence[PageRange],
        output_dir: str | Path,
        pattern: str,
        progress: Progress = None,
        is_cancelled: CancelCheck = None,
    ) -> SplitResult:
        def precheck() -> None:
            if not ranges:
                raise InvalidArgumentError("Nenhum range informado.")

        def plan(src: SourceDocument) -> Iterator[_Part]:
            for page_range in ranges:
                page_range.validate(src.page_count)
            for i, page_range in enumerate(ranges):
                yield _Part(i + 1, page_range)

        return self._run(
            "split_ranges", source_path, output_dir, pattern, progress, is_cancelled,
            precheck=precheck, plan=plan, total=lambda src: len(ranges),
        )

    def split_by_page(
        self,
        source_path: str | Path,
        output_dir: str | Path,
        pattern: str,
        progress: Progress = None,
        is_cancelled: CancelCheck = None,
    ) -> SplitResult:
        def plan(src: SourceDocument) -> Iterator[_Part]:
            for index in range(src.page_count):
                yield _Part(index + 1, PageRange(index + 1, index + 1))

        return self._run(
            "split_pages", source_path, output_dir, pattern, progress, is_cancelled,
            plan=plan, total=lambda src: src.page_count,
        )

    def split_equally(
        self,
        source_path: str | Path,
        parts: int,
        output_dir: str | Path,
        pattern: str,
        progress: Progress = None,
        is_cancelled: CancelCheck = None,
    ) -> SplitResult:
        def precheck() -> None:
            if parts < 1:
                raise InvalidArgumentError(f"Numero de partes deve ser >= 1: {parts}")

        def plan(src: SourceDocument) -> Iterator[_Part]:
            # A numeração segue o índice da parte; partes além da última página não existem.
            for i, page_range in enumerate(equal_ranges(src.page_count, parts)):
                yield _Part(i + 1, page_range)

        return self._run(
            "split_equal", source_path, output_dir, pattern, progress, is_cancelled,
            precheck=precheck, plan=plan, total=lambda src: parts,
        )

    def _run(
        self,
        operation: str,
        source_path: str | Path,
        output_dir: str | Path,
        pattern: str,
        progress: Progress,
        is_cancelled: CancelCheck,
        *,
        plan: Callable[[SourceDocument], Iterator[_Part]],
        total: Callable[[SourceDocument], int],
        precheck: Callable[[], None] | None = None,
    ) -> SplitResult:
        source_path = Path(source_path)
        output_dir = Path(output_dir)
        sink = as_progress_sink(progress)
        result = SplitResult(operation=operation, source_path=source_path)

        try:
            validate_pattern(pattern)
            if precheck:
                precheck()
            if not source_path.is_file():
                raise NotFoundError(f"Arquivo de origem nao encontrado: {source_path}")
            self._ensure_output_dir(output_dir)

            with self._backend.open(source_path) as src:
                result.source_pages = src.page_count
                result.requested = total(src)
                logger.info(
                    "Split iniciado (%s): %s (%d pags) -> %s",
                    operation, source_path.name, src.page_count, output_dir,
                )
                parts = list(plan(src))
                for part in parts:
                    if is_cancelled and is_cancelled():
                        raise OperationCancelled(
                            f"Split cancelado antes da parte {part.number:03d}."
                        )
                    result.items.append(self._write_part(src, part, output_dir, pattern))
                    sink.step(part.number, result.requested)

            logger.info("Split concluido: %d/%d arquivo(s) em %s", result.produced, len(parts), output_dir)
            return result
        except PDFHandlerError as exc:
            logger.error("Erro no split (%s): %s", operation, exc)
            return result.fail(exc)

    def _write_part(self, src: SourceDocument, part: _Part, output_dir: Path, pattern: str) -> ItemOutcome:
        label = f"parte {part.number:03d} ({part.pages})"
        out_path = output_dir / render(pattern, part.number)
        try:
            with self._backend.new_document() as output:
                for index in part.pages.indices():
                    output.append_page(src, index)
                output.save(out_path)
        except Exception as exc:
            logger.error("Falha na %s -> %s: %s", label, out_path.name, exc)
            return ItemOutcome(item=label, success=False, error=str(exc))

        logger.debug("Split %s -> %s", label, out_path)
        return ItemOutcome(item=label, success=True, output_path=out_path, pages=part.pages.page_count)

    @staticmethod
    def _ensure_output_dir(output_dir: Path) -> None:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise NotFoundError(f"Pasta de saida indisponivel: {output_dir} ({exc})") from exc
        if not output_dir.is_dir():
            raise NotFoundError(f"Pasta de saida indisponivel: {output_dir}")


# "Dividir para conquistar." — Júlio César
