import logging
from pathlib import Path

from config.settings import DEFAULT_SPLIT_SUFFIX, PAGE_NUMBER_PLACEHOLDER, PAGE_NUMBER_WIDTH
from core.errors import InvalidArgumentError

logger = logging.getLogger("pdfhandler.naming")


def render(pattern: str, number: int) -> str:
    """
    Substitui o marcador [N] pelo número de sequência com zeros à esquerda.
    A largura é mínima: render("doc_[N].pdf", 1234) -> "doc_1234.pdf".
    """
    return pattern.replace(PAGE_NUMBER_PLACEHOLDER, f"{number:0{PAGE_NUMBER_WIDTH}d}")


def validate_pattern(pattern: str) -> None:
    """Lança InvalidArgumentError se o padrão não puder gerar nomes de arquivo."""
    if not pattern or not pattern.strip():
        raise InvalidArgumentError("Padrao de nome vazio.")
    if PAGE_NUMBER_PLACEHOLDER not in pattern:
        raise InvalidArgumentError(
            f"Padrao de nome deve conter {PAGE_NUMBER_PLACEHOLDER}: {pattern!r}"
        )
    if "/" in pattern or "\\" in pattern:
        raise InvalidArgumentError(f"Padrao de nome nao pode conter separador de pasta: {pattern!r}")


def default_pattern(source: str | Path) -> str:
    return f"{Path(source).stem}{DEFAULT_SPLIT_SUFFIX}.pdf"


# "Dar nome às coisas é o começo da sabedoria." — Confúcio
