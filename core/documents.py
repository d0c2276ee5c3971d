"""
Abstração de documentos sobre fitz.Document (PyMuPDF).

Fontes são carregadas inteiras na memória para não manter lock do sistema
operacional sobre o arquivo. Saídas começam vazias e acumulam páginas na
ordem em que são anexadas.

Contrato de liberação: close() é idempotente em ambos os tipos, e uma saída
é sempre liberada antes das fontes de onde vieram suas páginas. Os motores
garantem isso adquirindo as fontes primeiro (with / ExitStack externos) e as
saídas depois.
"""

import logging
from pathlib import Path
from typing import Protocol

import fitz

from config.settings import PDF_SAVE_DEFLATE, PDF_SAVE_GARBAGE
from core.errors import InvalidArgumentError, OpenError, SaveError

logger = logging.getLogger("pdfhandler.documents")


class SourceDocument(Protocol):
    path: Path

    @property
    def page_count(self) -> int: ...

    @property
    def is_closed(self) -> bool: ...

    def close(self) -> None: ...

    def __enter__(self) -> "SourceDocument": ...

    def __exit__(self, *_: object) -> None: ...


class OutputDocument(Protocol):
    target: Path | None

    @property
    def page_count(self) -> int: ...

    @property
    def is_closed(self) -> bool: ...

    def append_page(self, source: SourceDocument, index: int) -> None: ...

    def truncate(self, page_count: int) -> None: ...

    def save(self, path: Path) -> None: ...

    def close(self) -> None: ...

    def __enter__(self) -> "OutputDocument": ...

    def __exit__(self, *_: object) -> None: ...


class DocumentBackend(Protocol):
    """Operações de abrir/criar documentos usadas pelos motores."""

    def open(self, path: str | Path) -> SourceDocument: ...

    def new_document(self) -> OutputDocument: ...


class FitzSource:
    """PDF somente leitura aberto a partir de bytes em memória."""

    def __init__(self, path: Path, doc: fitz.Document) -> None:
        self.path = path
        self._doc = doc
        self._closed = False

    @property
    def doc(self) -> fitz.Document:
        return self._doc

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    @property
    def is_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._doc.close()
        logger.debug("Fonte fechada: %s", self.path.name)

    def __enter__(self) -> "FitzSource":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


class FitzOutput:
    """Documento de saída, inicialmente vazio."""

    def __init__(self) -> None:
        self._doc = fitz.open()
        self._closed = False
        self.target: Path | None = None

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    @property
    def is_closed(self) -> bool:
        return self._closed

    def append_page(self, source: FitzSource, index: int) -> None:
        """Cópia estrutural da página `index` (0-based) de `source` para o fim deste documento."""
        if not 0 <= index < source.page_count:
            raise InvalidArgumentError(
                f"Pagina {index + 1} fora do documento {source.path.name} ({source.page_count} pags)"
            )
        self._doc.insert_pdf(source.doc, from_page=index, to_page=index)

    def truncate(self, page_count: int) -> None:
        """Descarta as páginas anexadas a partir de `page_count`."""
        if page_count < self.page_count:
            self._doc.delete_pages(from_page=page_count, to_page=self.page_count - 1)

    def save(self, path: Path) -> None:
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self._doc.save(str(path), garbage=PDF_SAVE_GARBAGE, deflate=PDF_SAVE_DEFLATE)
        except Exception as exc:
            raise SaveError(f"Falha ao salvar {path}: {exc}") from exc
        self.target = path
        logger.debug("Saida gravada: %s (%d pags)", path, self.page_count)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._doc.close()

    def __enter__(self) -> "FitzOutput":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


class FitzBackend:
    def open(self, path: str | Path) -> FitzSource:
        path = Path(path)
        if not path.is_file():
            raise OpenError(f"Arquivo nao encontrado: {path}")

        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise OpenError(f"Nao foi possivel ler {path}: {exc}") from exc

        try:
            doc = fitz.open(stream=raw, filetype="pdf")
        except Exception as exc:
            raise OpenError(f"PDF corrompido ou invalido: {path.name} ({exc})") from exc

        if doc.needs_pass:
            doc.close()
            raise OpenError(f"PDF protegido por senha: {path.name}")

        logger.debug("Fonte aberta: %s (%d pags, %d bytes)", path.name, doc.page_count, len(raw))
        return FitzSource(path, doc)

    def new_document(self) -> FitzOutput:
        return FitzOutput()


# "Nada se cria, nada se perde, tudo se transforma." — Lavoisier
