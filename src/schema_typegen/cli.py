"""CLI entry point for schema-typegen."""

import logging
from pathlib import Path

import click

from schema_typegen.config import DEFAULT_LOG_LEVEL, DEFAULT_ROOT_NAME
from schema_typegen.errors import TypegenError
from schema_typegen.generator.sample import generate_interfaces
from schema_typegen.generator.schema import generate_types_from_schemas
from schema_typegen.parser.detect import detect_format
from schema_typegen.parser.openapi import parse_openapi
from schema_typegen.parser.sample import extract_enums, parse_sample

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _write_output(code: str, output: Path | None, append: bool) -> None:
    """Print the code, or write it to ``output`` (appending when asked)."""
    if output is None:
        click.echo(code)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    if append and output.exists():
        existing = output.read_text(encoding="utf-8").rstrip("\n")
        code = f"{existing}\n\n{code}" if existing else code
    output.write_text(code + "\n", encoding="utf-8")
    click.echo(f"Types saved to {output}", err=True)


def _load_enums(enums_path: Path) -> dict[str, list[str]]:
    document = parse_sample(enums_path).value
    enums = extract_enums({"enums": document})
    if enums is None:
        raise click.BadParameter(
            "expected a JSON object mapping enum names to lists of values",
            param_hint="--enums",
        )
    return enums


def _from_json(doc_path: Path, name: str, enums_path: Path | None, output: Path | None, append: bool):
    click.echo(f"Reading JSON sample {doc_path}...", err=True)
    try:
        sample = parse_sample(doc_path)
        enums = _load_enums(enums_path) if enums_path else sample.enums
        code = generate_interfaces(sample.value, name, enums)
    except TypegenError as e:
        raise click.ClickException(str(e)) from e
    _write_output(code, output, append)


def _from_openapi(doc_path: Path, output: Path | None, append: bool):
    click.echo(f"Parsing spec {doc_path}...", err=True)
    try:
        spec = parse_openapi(doc_path)
    except TypegenError as e:
        raise click.ClickException(str(e)) from e

    result = generate_types_from_schemas(spec)
    click.echo(
        f"Found {result.schema_count} schemas, {result.path_count} paths (v{spec.version}).",
        err=True,
    )
    _write_output(result.code, output, append)


@click.group()
@click.option("--log-level", default=DEFAULT_LOG_LEVEL, type=click.Choice(LOG_LEVELS, case_sensitive=False), help="Logging verbosity.")
def main(log_level: str):
    """Schema Typegen: generate TypeScript types from JSON samples and OpenAPI specs."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-n", "--name", default=DEFAULT_ROOT_NAME, help="Root type name.")
@click.option("--enums", "enums_path", default=None, type=click.Path(exists=True, path_type=Path), help="JSON file mapping enum names to values.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output .ts file (stdout if omitted).")
@click.option("--append", is_flag=True, help="Append to the output file instead of overwriting it.")
def from_json(doc_path: Path, name: str, enums_path: Path | None, output: Path | None, append: bool):
    """Generate interfaces and enums from a JSON sample."""
    _from_json(doc_path, name, enums_path, output, append)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output .ts file (stdout if omitted).")
@click.option("--append", is_flag=True, help="Append to the output file instead of overwriting it.")
def from_openapi(doc_path: Path, output: Path | None, append: bool):
    """Generate type aliases from an OpenAPI/Swagger schema table."""
    _from_openapi(doc_path, output, append)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "openapi"]), help="Input format.")
@click.option("-n", "--name", default=DEFAULT_ROOT_NAME, help="Root type name (JSON samples only).")
@click.option("--enums", "enums_path", default=None, type=click.Path(exists=True, path_type=Path), help="JSON file mapping enum names to values.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output .ts file (stdout if omitted).")
@click.option("--append", is_flag=True, help="Append to the output file instead of overwriting it.")
def gen(doc_path: Path, fmt: str, name: str, enums_path: Path | None, output: Path | None, append: bool):
    """Detect the input format, then generate types."""
    if fmt == "auto":
        fmt = detect_format(doc_path)

    if fmt == "openapi":
        _from_openapi(doc_path, output, append)
    else:
        _from_json(doc_path, name, enums_path, output, append)
