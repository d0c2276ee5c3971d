from pathlib import Path

import fitz
import pytest

from core.errors import InvalidArgumentError, OpenError, SaveError


def make_pdf(path: Path, pages: int, label: str) -> Path:
    """Cria um PDF com `pages` páginas; cada página contém "<label> p<n>"."""
    path.parent.mkdir(parents=True, exist_ok=True)
    doc = fitz.open()
    for i in range(pages):
        page = doc.new_page()
        page.insert_text((50, 100), f"{label} p{i + 1}", fontsize=12)
    doc.save(str(path))
    doc.close()
    return path


def page_texts(path: Path) -> list[str]:
    with fitz.open(str(path)) as doc:
        return [page.get_text().strip() for page in doc]


@pytest.fixture
def pdf_factory(tmp_path):
    def _make(name: str, pages: int, label: str | None = None) -> Path:
        return make_pdf(tmp_path / "fixtures" / name, pages, label or Path(name).stem)

    return _make


@pytest.fixture
def sample_pdf_path(pdf_factory) -> Path:
    return pdf_factory("sample.pdf", 1, "Documento de teste PDFHandler.")


@pytest.fixture
def sample_multipage_path(pdf_factory) -> Path:
    return pdf_factory("multipage.pdf", 5, "multi")


@pytest.fixture
def corrupted_pdf_path(tmp_path) -> Path:
    path = tmp_path / "fixtures" / "corrompido.pdf"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"isto nao e um pdf")
    return path


@pytest.fixture
def tmp_output_dir(tmp_path) -> Path:
    return tmp_path / "output"


# --- Backend instrumentado -------------------------------------------------


class FakeSource:
    def __init__(self, backend: "FakeBackend", path: Path, pages: int) -> None:
        self._backend = backend
        self.path = path
        self._pages = pages
        self.release_count = 0

    @property
    def page_count(self) -> int:
        return self._pages

    @property
    def is_closed(self) -> bool:
        return self.release_count > 0

    def close(self) -> None:
        if self.is_closed:
            return
        self.release_count += 1
        self._backend.events.append(("close_source", self.path.name))

    def __enter__(self) -> "FakeSource":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


class FakeOutput:
    def __init__(self, backend: "FakeBackend") -> None:
        self._backend = backend
        self.pages: list[tuple[str, int]] = []
        self.target: Path | None = None
        self.release_count = 0

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def is_closed(self) -> bool:
        return self.release_count > 0

    def append_page(self, source: FakeSource, index: int) -> None:
        if source.path.name in self._backend.fail_copy and index == source.page_count - 1:
            raise RuntimeError(f"pagina {index} corrompida")
        if not 0 <= index < source.page_count:
            raise InvalidArgumentError(f"indice {index} fora do documento")
        self.pages.append((source.path.name, index))

    def truncate(self, page_count: int) -> None:
        if self._backend.fail_truncate:
            raise RuntimeError("delete_pages falhou")
        del self.pages[page_count:]

    def save(self, path: Path) -> None:
        if not self.pages or path.name in self._backend.fail_save:
            raise SaveError(f"Falha ao salvar {path}")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(f"{name}:{index}" for name, index in self.pages))
        self.target = path
        self._backend.saved[path.name] = list(self.pages)

    def close(self) -> None:
        if self.is_closed:
            return
        self.release_count += 1
        self._backend.events.append(("close_output", self.target.name if self.target else ""))

    def __enter__(self) -> "FakeOutput":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


class FakeBackend:
    """
    Backend em memória que registra cada handle aberto e liberado.
    Os arquivos de origem precisam existir em disco; o conteúdo é ignorado.
    """

    def __init__(
        self,
        page_counts: dict[str, int] | None = None,
        unreadable: tuple[str, ...] = (),
        fail_save: tuple[str, ...] = (),
        fail_copy: tuple[str, ...] = (),
        fail_truncate: bool = False,
    ) -> None:
        self.page_counts = page_counts or {}
        self.unreadable = unreadable
        self.fail_save = fail_save
        self.fail_copy = fail_copy
        self.fail_truncate = fail_truncate
        self.handles: list[FakeSource | FakeOutput] = []
        self.events: list[tuple[str, str]] = []
        self.saved: dict[str, list[tuple[str, int]]] = {}

    def open(self, path: str | Path) -> FakeSource:
        path = Path(path)
        if not path.is_file() or path.name in self.unreadable:
            raise OpenError(f"Nao foi possivel abrir {path.name}")
        source = FakeSource(self, path, self.page_counts.get(path.name, 1))
        self.handles.append(source)
        self.events.append(("open_source", path.name))
        return source

    def new_document(self) -> FakeOutput:
        output = FakeOutput(self)
        self.handles.append(output)
        return output

    @property
    def open_handles(self) -> list:
        return [h for h in self.handles if not h.is_closed]

    def assert_all_released_once(self) -> None:
        assert self.open_handles == []
        assert all(h.release_count == 1 for h in self.handles)


@pytest.fixture
def touch(tmp_path):
    def _touch(*names: str) -> list[Path]:
        folder = tmp_path / "fake_sources"
        folder.mkdir(parents=True, exist_ok=True)
        paths = []
        for name in names:
            path = folder / name
            path.write_bytes(b"%PDF-fake")
            paths.append(path)
        return paths

    return _touch


@pytest.fixture
def fake_backend():
    """Fábrica: fake_backend(page_counts={...}, unreadable=(...), ...)."""
    return FakeBackend


@pytest.fixture
def read_texts():
    return page_texts
