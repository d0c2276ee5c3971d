"""
Exceções do motor de montagem/particionamento de PDFs.

Falhas por item (uma fonte ruim no merge, uma parte no split) são capturadas
pelo próprio motor e viram ItemOutcome; estas exceções representam o que
aborta um item ou o lote inteiro.
"""


class PDFHandlerError(Exception):
    """Base para todos os erros do PDFHandler."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "Erro desconhecido no processamento de PDF."


class OpenError(PDFHandlerError):
    """Fonte inexistente, ilegível ou que não é um PDF válido."""

    @property
    def default_message(self) -> str:
        return "Nao foi possivel abrir o PDF."


class SaveError(PDFHandlerError):
    """Falha ao gravar um documento de saída."""

    @property
    def default_message(self) -> str:
        return "Nao foi possivel salvar o PDF."


class InvalidArgumentError(PDFHandlerError):
    """Partição, range ou padrão de nome inválido."""

    @property
    def default_message(self) -> str:
        return "Argumento invalido."


class NoPagesError(PDFHandlerError):
    @property
    def default_message(self) -> str:
        return "Nenhuma pagina para gravar."


class OperationCancelled(PDFHandlerError):
    """Lote interrompido pelo chamador entre dois itens."""

    @property
    def default_message(self) -> str:
        return "Operacao cancelada."


class NotFoundError(PDFHandlerError):
    """Arquivo de origem ou pasta de saída ausente (e não criável)."""

    @property
    def default_message(self) -> str:
        return "Arquivo ou pasta nao encontrado."


# "Errar é humano; persistir no erro é diabólico." — Sêneca
