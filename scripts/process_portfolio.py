#!/usr/bin/env python3
"""
Command-line interface for the portfolio engine.

Subcommands:
- process: Read a portfolio content directory and emit the processed bundle as JSON
- templates: List registered templates
- validate: Validate custom template descriptors from a YAML file
"""

import json
import os
from datetime import datetime
from pathlib import Path
from typing import List

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf

from folio import PortfolioEngine
from folio.contexts.composition.logger import setup_composition_logger
from folio.contexts.ingest import RepositoryFile, categorize_files, map_files_to_content
from folio.contexts.templating import TemplateRegistry, validate_descriptor
from folio.contexts.templating.logger import log_validation_result, setup_templating_logger
from folio.utils.timestamp import format_timestamp

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
    help="Normalize portfolio content and bind it to a presentation template",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _session_dir(command: str) -> Path:
    return LOGS_PATH / f"{command}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"


def read_repository_files(content_dir: Path) -> List[RepositoryFile]:
    """Read every UTF-8 text file under content_dir (hidden directories skipped)."""
    files = []
    for path in sorted(content_dir.rglob("*")):
        relative = path.relative_to(content_dir)
        if not path.is_file() or any(part.startswith(".") for part in relative.parts[:-1]):
            continue
        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            continue
        files.append(
            RepositoryFile(
                name=path.name,
                content=content,
                path=str(relative),
                size=path.stat().st_size,
            )
        )
    return files


@app.command("process")
def process_command(
    content_dir: Path = typer.Argument(
        ...,
        help="Directory holding portfolio content files",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    template: str = typer.Option(
        None,
        "--template",
        "-t",
        help="Template id (defaults to the default template)",
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the bundle JSON here instead of stdout",
    ),
    show_mapping: bool = typer.Option(
        False,
        "--show-mapping",
        help="Print which file feeds each section",
    ),
):
    """
    Process a portfolio content directory.

    Examples:\n

        $ process_portfolio.py process ./my-portfolio

        $ process_portfolio.py process ./my-portfolio -t modern -o bundle.json
    """
    setup_composition_logger(_session_dir("process"), template_id=template)

    files = read_repository_files(content_dir)

    if show_mapping:
        for section, entries in categorize_files(files).items():
            if entries:
                sources = ", ".join(entry.file.path for entry in entries)
                typer.secho(f"  {section}: {sources}", fg=typer.colors.BLUE, err=True)

    raw_content = map_files_to_content(files)
    if not raw_content:
        typer.secho(f"No portfolio content found in {content_dir}", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    bundle = PortfolioEngine().process_portfolio_data(raw_content, template)
    payload = json.dumps(bundle.to_dict(), indent=2, default=str)

    if output:
        output.write_text(payload + "\n", encoding="utf-8")
        typer.secho(f"✓ Wrote {output}", fg=typer.colors.GREEN, err=True)
    else:
        typer.echo(payload)


@app.command("templates")
def templates_command():
    """
    List registered templates.

    Example:\n

        $ process_portfolio.py templates
    """
    registry = TemplateRegistry()

    typer.secho(f"\nTemplates ({len(registry)}):", fg=typer.colors.BLUE, bold=True)
    for descriptor in registry.list():
        marker = "*" if descriptor.id == registry.default_template_id else " "
        typer.echo(
            f" {marker} {descriptor.id:<10} {descriptor.layout:<11} "
            f"{', '.join(descriptor.sections)}"
        )
        typer.echo(f"     registered {format_timestamp(descriptor.registered_at)}")


@app.command("validate")
def validate_command(
    yaml_file: Path = typer.Argument(
        ...,
        help="YAML file mapping template ids to descriptors",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
):
    """
    Validate custom template descriptors.

    Example:\n

        $ process_portfolio.py validate my_templates.yaml
    """
    setup_templating_logger(_session_dir("validate"), phase="validate")

    config = OmegaConf.to_container(OmegaConf.load(yaml_file), resolve=True)
    if not isinstance(config, dict):
        typer.secho("Error: file must map template ids to descriptors", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    failures = 0
    for template_id, descriptor in config.items():
        result = validate_descriptor(descriptor)
        log_validation_result(str(template_id), result)
        if not result.valid:
            failures += 1

    if failures:
        typer.secho(f"\n{failures}/{len(config)} template(s) invalid", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.secho(f"\nAll {len(config)} template(s) valid", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
