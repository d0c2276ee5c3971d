from dataclasses import dataclass, field
from pathlib import Path

from core.errors import OperationCancelled, PDFHandlerError


@dataclass
class ItemOutcome:
    item: str                      # nome da fonte (merge) ou "parte 003 (5-8)" (split)
    success: bool
    output_path: Path | None = None
    pages: int = 0
    error: str = ""


@dataclass
class BatchOutcome:
    """
    Resultado de uma chamada do motor.

    `success` só é False quando uma pré-condição do lote falhou (argumento
    inválido, fonte ausente, nada para gravar, cancelamento). Falhas de itens
    individuais aparecem em `items` e não derrubam o lote.
    """

    operation: str
    success: bool = True
    items: list[ItemOutcome] = field(default_factory=list)
    requested: int = 0
    error: str = ""
    exception: PDFHandlerError | None = None
    cancelled: bool = False

    def __bool__(self) -> bool:
        return self.success

    @property
    def succeeded(self) -> int:
        return sum(1 for item in self.items if item.success)

    @property
    def failed(self) -> int:
        return sum(1 for item in self.items if not item.success)

    @property
    def produced(self) -> int:
        return len(self.output_files)

    @property
    def all_failed(self) -> bool:
        return bool(self.items) and self.succeeded == 0

    @property
    def output_files(self) -> list[Path]:
        return [item.output_path for item in self.items if item.success and item.output_path]

    def fail(self, exc: PDFHandlerError) -> "BatchOutcome":
        self.success = False
        self.error = str(exc)
        self.exception = exc
        self.cancelled = isinstance(exc, OperationCancelled)
        return self

    def summary(self) -> str:
        if not self.success:
            return f"{self.operation}: falhou ({self.error})"
        return f"{self.operation}: {self.succeeded}/{len(self.items)} itens concluidos"
