import logging
from typing import Callable, Protocol, runtime_checkable

logger = logging.getLogger("pdfhandler.progress")


@runtime_checkable
class ProgressSink(Protocol):
    """Qualquer coisa que aceite um percentual inteiro (0-100)."""

    def report(self, percent: int) -> None:
        ...


class NullProgress:
    """Sink que descarta tudo; usado quando o chamador não quer progresso."""

    def report(self, percent: int) -> None:
        pass


class CallbackProgress:
    def __init__(self, callback: Callable[[int], None]) -> None:
        self._callback = callback

    def report(self, percent: int) -> None:
        self._callback(percent)


class MonotonicProgress:
    """
    Envolve outro sink garantindo a faixa 0-100 e que o valor nunca diminua
    dentro de uma mesma chamada do motor.
    """

    def __init__(self, sink: ProgressSink) -> None:
        self._sink = sink
        self._last = 0

    @property
    def last(self) -> int:
        return self._last

    def report(self, percent: int) -> None:
        value = max(self._last, min(100, max(0, int(percent))))
        self._last = value
        self._sink.report(value)

    def step(self, done: int, total: int) -> None:
        self.report(percentage(done, total))


def percentage(done: int, total: int) -> int:
    """Percentual inteiro de done/total, arredondando metades para cima (1/8 -> 13)."""
    if total <= 0:
        return 100
    return (200 * done + total) // (2 * total)


def as_progress_sink(progress: "ProgressSink | Callable[[int], None] | None") -> MonotonicProgress:
    """Normaliza None, um sink ou um callable simples em um MonotonicProgress."""
    if progress is None:
        sink: ProgressSink = NullProgress()
    elif isinstance(progress, ProgressSink):
        sink = progress
    elif callable(progress):
        sink = CallbackProgress(progress)
    else:
        raise TypeError(f"Sink de progresso invalido: {progress!r}")
    return MonotonicProgress(sink)


# "Devagar se vai ao longe." — Ditado popular
