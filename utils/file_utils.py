import logging
import logging.handlers
from pathlib import Path

from config.settings import LOG_DIR, LOG_FORMAT, LOG_DATE_FORMAT, LOG_BACKUP_COUNT


def setup_logging(debug: bool = False, log_dir: Path | None = None) -> logging.Logger:
    """
    Configura logging rotacionado por dia.
    Retorna o logger raiz da aplicação.
    """
    log_dir = log_dir or LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "pdfhandler.log"

    root = logging.getLogger("pdfhandler")
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    if root.handlers:
        return root

    # Handler para arquivo, rotação diária
    file_handler = logging.handlers.TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(file_handler)

    # Handler para console (stderr) apenas em modo debug
    if debug:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        root.addHandler(console_handler)

    return root


def ensure_pdf_suffix(name: str) -> str:
    """Garante a extensão .pdf no nome do arquivo de saída do merge."""
    name = name.strip()
    if not name.lower().endswith(".pdf"):
        name += ".pdf"
    return name


def human_size(num_bytes: int) -> str:
    """Converte bytes em string legível (KB, MB, GB)."""
    for unit in ("B", "KB", "MB", "GB", "TB"):
        if abs(num_bytes) < 1024.0:
            return f"{num_bytes:.1f} {unit}"
        num_bytes /= 1024.0  # type: ignore[assignment]
    return f"{num_bytes:.1f} PB"


def list_pdfs(directory: Path) -> list[Path]:
    """Lista todos os PDFs em um diretório (não recursivo)."""
    return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == ".pdf")
