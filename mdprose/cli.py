"""CLI entry point for mdprose."""

from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path

import click


def _project_root_option(f):
    return click.option(
        "--project-root",
        type=click.Path(exists=True, file_okay=False, resolve_path=True),
        default=".",
        help="Directory holding .mdprose.yaml (default: cwd).",
    )(f)


def _load_config_or_exit(project_root: str) -> dict:
    from mdprose.config import ConfigError, load_config

    try:
        return load_config(Path(project_root))
    except ConfigError as exc:
        click.echo(f"Error: {exc}")
        raise SystemExit(1)


def _parse_file(path: Path, config: dict):
    from mdprose.markdown import parse

    return parse(path.read_bytes(), heading_lines=config["parser"]["heading_lines"])


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """mdprose: classify markdown into prose, code and structure."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@cli.command()
@_project_root_option
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON.")
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
def inspect(project_root: str, as_json: bool, files: tuple[Path, ...]) -> None:
    """Show headings, code blocks, admonitions and line counts."""
    config = _load_config_or_exit(project_root)

    if as_json:
        payload = []
        for path in files:
            data = dataclasses.asdict(_parse_file(path, config))
            payload.append({"file": str(path), **data})
        click.echo(json.dumps(payload, indent=2))
        return

    for path in files:
        result = _parse_file(path, config)
        click.echo(f"{path}:")
        click.echo(
            f"  Lines: {result.total_lines} total, {result.prose_lines} prose, "
            f"{result.code_lines} code, {result.empty_lines} empty"
        )
        click.echo(f"  Code blocks: {len(result.code_blocks)}")
        click.echo(f"  Headings: {len(result.headings)}")
        for h in result.headings:
            click.echo(f"    L{h.line} {'#' * h.level} {h.text}")
        click.echo(f"  Admonitions: {len(result.admonitions)}")
        for a in result.admonitions:
            title = f' "{a.title}"' if a.title else ""
            click.echo(f"    L{a.line} {a.type}{title}")
        click.echo(f"  Prose words: {len(result.prose.split())}")


@cli.command()
@_project_root_option
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON.")
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
def stats(project_root: str, as_json: bool, files: tuple[Path, ...]) -> None:
    """Show structural and composition metrics."""
    from mdprose.composition import summarize

    config = _load_config_or_exit(project_root)
    wpm = config["composition"]["words_per_minute"]

    summaries = [
        summarize(_parse_file(path, config), path=str(path), words_per_minute=wpm)
        for path in files
    ]

    if as_json:
        click.echo(json.dumps([dataclasses.asdict(s) for s in summaries], indent=2))
        return

    for s in summaries:
        st, comp, adm = s.structural, s.composition, s.admonitions
        click.echo(f"{s.file}:")
        click.echo(
            f"  Words: {st.words:,}  Sentences: {st.sentences:,}  "
            f"Characters: {st.characters:,}  Reading time: {st.reading_time_minutes} min"
        )
        click.echo(
            f"  Lines: {comp.total_lines} total, {comp.prose_lines} prose, "
            f"{comp.code_lines} code, {comp.empty_lines} empty "
            f"(code ratio {comp.code_block_ratio:.2f})"
        )
        h = s.headings
        click.echo(
            f"  Headings: h1={h.h1} h2={h.h2} h3={h.h3} h4={h.h4} h5={h.h5} h6={h.h6}"
        )
        types = ", ".join(adm.types) if adm.types else "none"
        click.echo(f"  Admonitions: {adm.count} ({types})")
