import pytest

from core.errors import InvalidArgumentError
from core.naming import default_pattern, render, validate_pattern


def test_render_pads_to_three_digits():
    assert render("doc_[N].pdf", 7) == "doc_007.pdf"


def test_render_does_not_truncate():
    assert render("doc_[N].pdf", 1234) == "doc_1234.pdf"


def test_render_replaces_every_placeholder():
    assert render("[N]_doc_[N].pdf", 12) == "012_doc_012.pdf"


@pytest.mark.parametrize("pattern", ["", "   ", "doc.pdf", "pasta/doc_[N].pdf"])
def test_validate_pattern_rejects(pattern):
    with pytest.raises(InvalidArgumentError):
        validate_pattern(pattern)


def test_default_pattern_uses_stem(tmp_path):
    pattern = default_pattern(tmp_path / "relatorio.pdf")
    assert pattern == "relatorio_[N].pdf"
    validate_pattern(pattern)
