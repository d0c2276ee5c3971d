import logging
import math
import re
from dataclasses import dataclass, field
from typing import Union

from core.errors import InvalidArgumentError

logger = logging.getLogger("pdfhandler.partition")

_RANGE_RE = re.compile(r"^(\d+)\s*(?:-\s*(\d+))?$")


@dataclass(frozen=True)
class PageRange:
    start: int           # 1-indexed, inclusivo
    end: int             # 1-indexed, inclusivo

    @property
    def page_count(self) -> int:
        return self.end - self.start + 1

    def indices(self) -> range:
        """Índices 0-based das páginas cobertas, em ordem."""
        return range(self.start - 1, self.end)

    def validate(self, total_pages: int) -> None:
        if not (1 <= self.start <= self.end <= total_pages):
            raise InvalidArgumentError(
                f"Range invalido: {self} (o documento tem {total_pages} paginas)"
            )

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class RangesPartition:
    ranges: tuple[PageRange, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SinglePagePartition:
    pass


@dataclass(frozen=True)
class EqualPartition:
    parts: int


PartitionSpec = Union[RangesPartition, SinglePagePartition, EqualPartition]


def equal_ranges(total_pages: int, parts: int) -> list[PageRange]:
    """
    Deriva os ranges do split em partes iguais.

    pages_per_part = ceil(total / parts); a parte i cobre
    [i*ppp + 1, min((i+1)*ppp, total)]. Partes cujo início passa do total
    são omitidas, então o resultado pode ter menos de `parts` itens.
    """
    if parts < 1:
        raise InvalidArgumentError(f"Numero de partes deve ser >= 1: {parts}")
    ranges: list[PageRange] = []
    if total_pages < 1:
        return ranges
    per_part = math.ceil(total_pages / parts)
    for i in range(parts):
        start = i * per_part + 1
        if start > total_pages:
            break
        ranges.append(PageRange(start, min((i + 1) * per_part, total_pages)))
    return ranges


def parse_ranges(text: str, total_pages: int) -> list[PageRange]:
    """
    Converte texto do usuário ("1-3, 4-7, 9") em PageRanges validados.
    Um número isolado vale como range de uma página.
    """
    if not text or not text.strip():
        raise InvalidArgumentError("Informe ao menos um range de paginas.")

    ranges = []
    for part in text.split(","):
        chunk = part.strip()
        match = _RANGE_RE.match(chunk)
        if not match:
            raise InvalidArgumentError(f"Formato de range invalido: {chunk!r}. Use: 1-3, 4-7")
        start = int(match.group(1))
        end = int(match.group(2)) if match.group(2) else start
        page_range = PageRange(start, end)
        page_range.validate(total_pages)
        ranges.append(page_range)

    logger.debug("Ranges interpretados: %s", ", ".join(str(r) for r in ranges))
    return ranges


# "A parte é menor que o todo." — Euclides
