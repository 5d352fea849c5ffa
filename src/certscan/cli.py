from __future__ import annotations

import logging
import sys

import typer
from pydantic import ValidationError
from rich.console import Console

from certscan import __version__
from certscan.config import load_config
from certscan.errors import CloseError, ConstructionError
from certscan.ingest import LoadResult, load_results
from certscan.models.config import PresentationConfig
from certscan.output.writer import create_writer
from certscan.pipeline import emit_results

app = typer.Typer(
    help="Render TLS certificate scan results as colorized text or JSON lines.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


@app.callback(invoke_without_command=True)
def callback(
    version: bool = typer.Option(False, "--version", help="Show version and exit.", is_eager=True)
) -> None:
    if version:
        console.print(__version__)
        raise typer.Exit()


# Toggles default to None so an unset flag defers to the config file and environment.
@app.command()
def render(
    source: str = typer.Argument("-", help="JSON-lines file of scan results, or - for stdin."),
    json_mode: bool | None = typer.Option(None, "--json/--no-json", help="Emit JSON lines instead of text."),
    no_color: bool | None = typer.Option(None, "--no-color/--color", help="Disable color output (env: NO_COLOR)."),
    resp_only: bool | None = typer.Option(
        None, "--resp-only/--no-resp-only", help="Print names only, without host:port."
    ),
    san: bool | None = typer.Option(None, "--san/--no-san", help="Show subject alternative names."),
    cn: bool | None = typer.Option(None, "--cn/--no-cn", help="Show subject common name."),
    org: bool | None = typer.Option(None, "--so/--no-so", help="Show subject organization."),
    tls_version: bool | None = typer.Option(
        None, "--tls-version/--no-tls-version", help="Show negotiated TLS version."
    ),
    cipher: bool | None = typer.Option(None, "--cipher/--no-cipher", help="Show negotiated cipher suite."),
    expired: bool | None = typer.Option(None, "--expired/--no-expired", help="Flag expired certificates."),
    self_signed: bool | None = typer.Option(
        None, "--self-signed/--no-self-signed", help="Flag self-signed certificates."
    ),
    hash_algorithms: str | None = typer.Option(None, "--hash", help="Fingerprints to show, e.g. sha256,md5."),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Also write ANSI-free results to this file (env: CERTSCAN_OUTPUT)."
    ),
    jobs: int = typer.Option(8, min=1, help="Maximum concurrent submissions."),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logs."),
) -> None:
    _configure_logging(verbose)

    config = _load_config_or_exit(
        json_mode=json_mode,
        no_color=no_color,
        resp_only=resp_only,
        san=san,
        cn=cn,
        org=org,
        tls_version=tls_version,
        cipher=cipher,
        expired=expired,
        self_signed=self_signed,
        hash=hash_algorithms,
        output_file=output,
    )
    loaded = _load_results_or_exit(source)
    logger.info(
        "render config: results=%s skipped=%s jobs=%s json=%s output=%s",
        len(loaded.results),
        len(loaded.skipped),
        jobs,
        config.json_mode,
        config.output_file,
    )

    try:
        writer = create_writer(config)
    except ConstructionError as exc:
        err_console.print(f"Error: {exc}")
        raise typer.Exit(code=2) from exc

    try:
        summary = emit_results(loaded.results, writer, jobs=jobs)
    finally:
        try:
            writer.close()
        except CloseError as exc:
            err_console.print(f"Error: {exc}")
            raise typer.Exit(code=1) from exc

    for item in loaded.skipped:
        err_console.print(f"Skipped line {item.line}: {item.message}")
    if summary.failed or loaded.skipped:
        raise typer.Exit(code=1)


@app.command(name="config")
def show_config() -> None:
    console.print_json(_load_config_or_exit().model_dump_json())


def _load_config_or_exit(**overrides: object) -> PresentationConfig:
    try:
        return load_config(**overrides)
    except ValidationError as exc:
        err_console.print(f"Error: invalid configuration: {exc}")
        raise typer.Exit(code=2) from exc


def _load_results_or_exit(source: str) -> LoadResult:
    try:
        return load_results(sys.stdin if source == "-" else source)
    except (OSError, UnicodeDecodeError) as exc:
        err_console.print(f"Error: could not read scan results from {source}: {exc}")
        raise typer.Exit(code=2) from exc


def _configure_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )
