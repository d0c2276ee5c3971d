import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from core.documents import DocumentBackend, FitzBackend
from core.errors import NotFoundError, OpenError
from utils.file_utils import human_size

logger = logging.getLogger("pdfhandler.reader")


@dataclass
class PDFFileInfo:
    path: Path
    page_count: int
    file_size: int               # bytes
    last_modified: datetime

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def formatted_size(self) -> str:
        return human_size(self.file_size)


def get_page_count(path: str | Path, backend: DocumentBackend | None = None) -> int:
    """
    Conta as páginas carregando o arquivo em memória.
    Retorna 0 quando o arquivo não existe ou não pode ser lido como PDF.
    """
    backend = backend or FitzBackend()
    try:
        with backend.open(path) as src:
            return src.page_count
    except OpenError as exc:
        logger.warning("Nao foi possivel contar paginas: %s", exc)
        return 0


def read_file_info(path: str | Path, backend: DocumentBackend | None = None) -> PDFFileInfo:
    path = Path(path)
    if not path.is_file():
        raise NotFoundError(f"Arquivo nao encontrado: {path}")
    stat = path.stat()
    info = PDFFileInfo(
        path=path,
        page_count=get_page_count(path, backend),
        file_size=stat.st_size,
        last_modified=datetime.fromtimestamp(stat.st_mtime),
    )
    logger.debug("Info: %s (%d pags, %s)", info.name, info.page_count, info.formatted_size)
    return info


# "Conhece-te a ti mesmo." — Oráculo de Delfos
