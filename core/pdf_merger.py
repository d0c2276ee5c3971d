import logging
from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from core.documents import DocumentBackend, FitzBackend, OutputDocument
from core.errors import InvalidArgumentError, NoPagesError, OperationCancelled, PDFHandlerError, SaveError
from core.outcome import BatchOutcome, ItemOutcome
from core.progress import ProgressSink, as_progress_sink

logger = logging.getLogger("pdfhandler.merger")


@dataclass
class MergeResult(BatchOutcome):
    output_path: Path | None = None
    total_pages: int = 0

    @property
    def sources(self) -> list[str]:
        return [item.item for item in self.items if item.success]

    @property
    def output_files(self) -> list[Path]:
        if self.success and self.output_path is not None and self.total_pages:
            return [self.output_path]
        return []


class PDFMerger:
    """
    Junta vários PDFs em um só, na ordem informada.

    Fontes ausentes ou ilegíveis são puladas; o merge só falha se nenhuma
    página for copiada ou se a gravação da saída falhar. As fontes ficam
    abertas até a saída ser gravada e são fechadas depois dela.
    """

    def __init__(self, backend: DocumentBackend | None = None) -> None:
        self._backend = backend or FitzBackend()

    def merge(
        self,
        source_paths: Sequence[str | Path],
        output_path: str | Path,
        progress: ProgressSink | Callable[[int], None] | None = None,
        is_cancelled: Callable[[], bool] | None = None,
    ) -> MergeResult:
        output_path = Path(output_path)
        sink = as_progress_sink(progress)
        result = MergeResult(operation="merge", output_path=output_path, requested=len(source_paths))

        try:
            if not source_paths:
                raise InvalidArgumentError("Nenhum PDF informado para o merge.")

            total = len(source_paths)
            logger.info("Merge iniciado: %d arquivos -> %s", total, output_path)

            with ExitStack() as sources, self._backend.new_document() as output:
                for i, raw_path in enumerate(source_paths):
                    if is_cancelled and is_cancelled():
                        raise OperationCancelled(f"Merge cancelado apos {i} de {total} arquivos.")
                    result.items.append(self._merge_one(Path(raw_path), output, sources))
                    sink.step(i + 1, total)

                if output.page_count == 0:
                    raise NoPagesError("Nenhuma pagina foi copiada; nada a gravar.")

                output.save(output_path)
                result.total_pages = output.page_count

            logger.info("Merge concluido: %d paginas em %s", result.total_pages, output_path)
            return result
        except PDFHandlerError as exc:
            logger.error("Erro no merge: %s", exc)
            return result.fail(exc)

    def _merge_one(self, path: Path, output: OutputDocument, sources: ExitStack) -> ItemOutcome:
        if not path.exists():
            logger.warning("Arquivo nao encontrado, ignorado: %s", path)
            return ItemOutcome(item=path.name, success=False, error=f"Arquivo nao encontrado: {path}")

        pages_before = output.page_count
        try:
            src = sources.enter_context(self._backend.open(path))
        except Exception as exc:
            logger.warning("Fonte ignorada: %s (%s)", path.name, exc)
            return ItemOutcome(item=path.name, success=False, error=str(exc))

        try:
            for index in range(src.page_count):
                output.append_page(src, index)
        except Exception as exc:
            logger.error("Falha copiando %s: %s", path.name, exc, exc_info=True)
            try:
                output.truncate(pages_before)
            except Exception as rollback_exc:
                # Saída em estado desconhecido: o lote inteiro falha.
                raise SaveError(
                    f"Falha ao desfazer a copia parcial de {path.name}: {rollback_exc}"
                ) from rollback_exc
            src.close()
            return ItemOutcome(item=path.name, success=False, error=str(exc))

        logger.debug("Mesclado: %s (%d pags)", path.name, src.page_count)
        return ItemOutcome(item=path.name, success=True, pages=src.page_count)


# "A uniao faz a forca." — Provérbio latino
