"""CLI entry point for OpenAPI MCP Tools."""

import json
import sys
from pathlib import Path
from typing import Optional

import click

from .config import Config
from .exceptions import DocumentLoadError
from .parser.document import load_openapi_document
from .parser.extract_tools import ToolExtractorService
from .utils.log_setup import configure_logging


@click.group()
@click.option(
    "--config-file", "-c",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="Path to a JSON configuration file.",
    envvar="OPENAPI_MCP_TOOLS_CONFIG_FILE"
)
@click.option(
    "--log-level", "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None, # Falls back to the Config value
    help="Override the logging level (e.g., DEBUG, INFO).",
    envvar="OPENAPI_MCP_TOOLS_LOGGING__LEVEL"
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"], case_sensitive=False),
    default=None,
    help="Override logging format.",
    envvar="OPENAPI_MCP_TOOLS_LOGGING__FORMAT"
)
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[str], log_level: Optional[str], log_format: Optional[str]) -> None:
    """OpenAPI MCP Tools - converts OpenAPI operations into MCP tool definitions."""
    try:
        if config_file:
            cfg = Config.from_file(Path(config_file))
        else:
            # Environment variables (and .env file if present)
            cfg = Config()
    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    if log_level:
        cfg.logging.level = log_level.upper()
    if log_format:
        cfg.logging.format = log_format.lower()

    configure_logging(cfg.logging)
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


@cli.command()
@click.argument("spec_file", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option(
    "--output-file", "-o",
    type=click.Path(dir_okay=False, writable=True, resolve_path=True),
    help="Output file path for the generated tool definitions (JSON format)."
)
@click.pass_context
def extract(ctx: click.Context, spec_file: str, output_file: Optional[str]) -> None:
    """Extracts tool definitions from the OpenAPI document SPEC_FILE."""
    config: Config = ctx.obj["config"]

    try:
        document = load_openapi_document(spec_file)
    except DocumentLoadError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    result = ToolExtractorService(app_config=config).extract(document)
    payload = [tool.to_dict() for tool in result.tools]

    if output_file:
        try:
            with open(output_file, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            click.echo(f"{len(payload)} tool definitions written to {output_file}", err=True)
        except IOError as e:
            click.echo(f"Error writing output file {output_file}: {e}", err=True)
            sys.exit(1)
    else:
        click.echo(json.dumps(payload, indent=2))

    if result.has_diagnostics:
        click.echo(f"{len(result.diagnostics)} schema(s) degraded to generic objects; see log warnings.", err=True)

    if not payload and config.extraction.fail_on_empty:
        click.echo("No tools were extracted.", err=True)
        sys.exit(1)


@cli.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    click.echo(f"OpenAPI MCP Tools v{__version__}")


@cli.command()
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show current configuration."""
    config = ctx.obj["config"]
    click.echo(json.dumps(config.model_dump(mode="json"), indent=2))


if __name__ == "__main__":
    cli()
