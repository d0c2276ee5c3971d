import json
import logging
from pathlib import Path
from dataclasses import dataclass, asdict

logger = logging.getLogger(__name__)

# Diretórios de trabalho
APP_DIR = Path.home() / ".pdfhandler"
LOG_DIR = APP_DIR / "logs"
CONFIG_FILE = APP_DIR / "config.json"

# Padrão de nomes para o split
PAGE_NUMBER_PLACEHOLDER = "[N]"
PAGE_NUMBER_WIDTH = 3         # Largura mínima; 1234 continua "1234"
DEFAULT_SPLIT_SUFFIX = "_" + PAGE_NUMBER_PLACEHOLDER
DEFAULT_MERGE_NAME = "merged.pdf"

# Opções repassadas ao fitz.Document.save()
PDF_SAVE_GARBAGE = 3          # Remove objetos órfãos e compacta a xref
PDF_SAVE_DEFLATE = True

# Logging
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_BACKUP_COUNT = 7          # Manter 7 dias de logs

APP_VERSION = "1.0.0"
APP_NAME = "PDFHandler"


@dataclass
class UserPreferences:
    last_dir: str = ""
    last_output_dir: str = ""
    split_pattern: str = ""
    merge_name: str = DEFAULT_MERGE_NAME
    debug_mode: bool = False

    @classmethod
    def load(cls, path: Path | None = None) -> "UserPreferences":
        path = path or CONFIG_FILE
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
        except Exception as exc:
            logger.warning("Falha ao carregar config (%s), usando padrões", exc)
            return cls()

    def save(self, path: Path | None = None) -> None:
        path = path or CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(asdict(self), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        logger.debug("Preferências salvas em %s", path)
