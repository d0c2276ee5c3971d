"""
PDFHandler — Entry point CLI.

Uso:
    python main.py merge a.pdf b.pdf -o juntos.pdf
    python main.py merge pasta/ -o juntos.pdf
    python main.py split ranges doc.pdf "1-3, 4-7" -d saida/
    python main.py split pages doc.pdf -d saida/ -p "pagina_[N].pdf"
    python main.py split equal doc.pdf 3 -d saida/
    python main.py info doc.pdf
"""

import sys
from pathlib import Path

import click

# Adiciona o diretório do projeto ao sys.path para imports absolutos
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import APP_NAME, APP_VERSION, UserPreferences
from core.errors import PDFHandlerError
from core.naming import default_pattern
from core.outcome import BatchOutcome
from core.partition import (
    EqualPartition,
    PartitionSpec,
    RangesPartition,
    SinglePagePartition,
    parse_ranges,
)
from core.pdf_merger import PDFMerger
from core.pdf_reader import get_page_count, read_file_info
from core.pdf_splitter import PDFSplitter
from utils.file_utils import ensure_pdf_suffix, list_pdfs, setup_logging


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Habilita logs de debug.")
@click.version_option(APP_VERSION, prog_name=APP_NAME)
@click.pass_context
def main(ctx: click.Context, debug: bool) -> None:
    """PDFHandler — mesclar e dividir PDFs."""
    prefs = UserPreferences.load()
    logger = setup_logging(debug=debug or prefs.debug_mode)
    logger.info("PDFHandler iniciando (debug=%s)", debug or prefs.debug_mode)
    ctx.obj = prefs


@main.command()
@click.argument("sources", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option(
    "-o", "--output", type=click.Path(path_type=Path), default=None,
    help="Arquivo de saída (padrão: nome das preferências na pasta do primeiro PDF).",
)
@click.pass_obj
def merge(prefs: UserPreferences, sources: tuple[Path, ...], output: Path | None) -> None:
    """Mescla SOURCES (arquivos ou pastas) em um único PDF, na ordem dada."""
    paths: list[Path] = []
    for source in sources:
        paths.extend(list_pdfs(source) if source.is_dir() else [source])

    if output is None:
        base_dir = paths[0].parent if paths else Path.cwd()
        output = base_dir / prefs.merge_name
    output = output.with_name(ensure_pdf_suffix(output.name))

    click.echo(f"Mesclando {len(paths)} arquivo(s) em {output}")
    result = PDFMerger().merge(paths, output, progress=_echo_progress)
    _report(result, prefs, output.parent)
    click.echo(f"  {result.total_pages} paginas -> {output}")


@main.group()
def split() -> None:
    """Divide um PDF em vários arquivos."""


def _split_options(func):
    func = click.option(
        "-p", "--pattern", default=None,
        help="Padrão de nome com [N] (padrão: preferências ou <nome>_[N].pdf).",
    )(func)
    func = click.option(
        "-d", "--output-dir", type=click.Path(file_okay=False, path_type=Path), default=None,
        help="Pasta de saída (padrão: pasta do PDF).",
    )(func)
    return func


@split.command("ranges")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("ranges")
@_split_options
@click.pass_obj
def split_ranges(
    prefs: UserPreferences, source: Path, ranges: str, output_dir: Path | None, pattern: str | None
) -> None:
    """Um arquivo por range de páginas, ex.: "1-3, 4-7"."""
    try:
        parsed = parse_ranges(ranges, get_page_count(source))
    except PDFHandlerError as exc:
        raise click.BadParameter(str(exc), param_hint="RANGES") from exc
    _run_split(prefs, source, RangesPartition(tuple(parsed)), output_dir, pattern)


@split.command("pages")
@click.argument("source", type=click.Path(path_type=Path))
@_split_options
@click.pass_obj
def split_pages(prefs: UserPreferences, source: Path, output_dir: Path | None, pattern: str | None) -> None:
    """Um arquivo por página."""
    _run_split(prefs, source, SinglePagePartition(), output_dir, pattern)


@split.command("equal")
@click.argument("source", type=click.Path(path_type=Path))
@click.argument("parts", type=click.IntRange(min=1))
@_split_options
@click.pass_obj
def split_equal(
    prefs: UserPreferences, source: Path, parts: int, output_dir: Path | None, pattern: str | None
) -> None:
    """Divide em PARTS partes com o mesmo número de páginas."""
    _run_split(prefs, source, EqualPartition(parts), output_dir, pattern)


@main.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def info(source: Path) -> None:
    """Mostra páginas, tamanho e data de modificação de um PDF."""
    file_info = read_file_info(source)
    click.echo(f"{file_info.name}")
    click.echo(f"  paginas:    {file_info.page_count}")
    click.echo(f"  tamanho:    {file_info.formatted_size}")
    click.echo(f"  modificado: {file_info.last_modified:%Y-%m-%d %H:%M}")


def _run_split(
    prefs: UserPreferences,
    source: Path,
    partition: PartitionSpec,
    output_dir: Path | None,
    pattern: str | None,
) -> None:
    output_dir = output_dir or source.parent
    pattern = pattern or prefs.split_pattern or default_pattern(source)
    click.echo(f"Dividindo {source.name} em {output_dir}")
    result = PDFSplitter().split(source, partition, output_dir, pattern, progress=_echo_progress)
    _report(result, prefs, output_dir)


def _echo_progress(percent: int) -> None:
    click.echo(f"  [{percent:3d}%]")


def _report(result: BatchOutcome, prefs: UserPreferences, output_dir: Path) -> None:
    """Imprime o relatório por item; encerra com código 1 se o lote falhou."""
    for item in result.items:
        status = "OK  " if item.success else "ERRO"
        detail = item.output_path.name if item.output_path else item.error or f"{item.pages} pags"
        click.echo(f"  {status} | {item.item:<40} | {detail}")
    click.echo(f"\n{result.summary()}")
    if not result.success:
        sys.exit(1)

    prefs.last_output_dir = str(output_dir)
    prefs.save()


# "A mente que se abre a uma nova ideia jamais voltará ao seu tamanho original." — Oliver Wendell Holmes
if __name__ == "__main__":
    main()
