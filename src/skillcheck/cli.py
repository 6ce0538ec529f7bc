"""
Main CLI for skillcheck using Click.

`skillcheck validate` (also installed as `validate-skills`) checks every
<root>/<skill>/SKILL.md against the structural rules and exits non-zero on
any failure. With no arguments it checks .github/skills in the current
directory.
"""

import sys
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from . import __version__
from .config import AppConfig, load_config
from .features import REPORT_FORMATS, ReportGenerator, render_console
from .logging import configure_logging
from .skills import InvalidSkillNameError, SkillInstaller, SkillsLoader, SkillValidator

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILED = 1
EXIT_CONFIG_ERROR = 3


def _load_app_config(config: Path | None, cli_args: dict[str, Any], quiet: bool = False) -> AppConfig:
    """Load config and set up logging, or exit with EXIT_CONFIG_ERROR."""
    try:
        app_config = load_config(config_path=config, cli_args=cli_args)
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except (ValidationError, ValueError) as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    try:
        configure_logging(app_config.logging, quiet=quiet)
    except OSError as e:
        click.echo(f"Could not open log file: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    return app_config


@click.group()
@click.version_option(version=__version__, prog_name="skillcheck")
def main() -> None:
    """skillcheck - Structural linter for agent skill definitions.

    Each skill lives in its own directory with a SKILL.md whose YAML
    frontmatter declares a name (equal to the directory) and a description.
    """
    pass


@main.command()
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Skills directory (default: .github/skills)",
)
@click.option(
    "--max-lines",
    type=click.IntRange(min=1),
    help="Maximum lines per definition file (default: 500)",
)
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to the YAML configuration file (default: .skillcheck.yaml if present)",
)
@click.option(
    "--report",
    "report_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write a report file (.json -> JSON, otherwise Markdown)",
)
@click.option(
    "--report-format",
    type=click.Choice(REPORT_FORMATS),
    help="Force the report format instead of inferring it from the extension",
)
@click.option("-q", "--quiet", is_flag=True, help="Only print failures and the summary")
@click.option("-v", "--verbose", count=True, help="Diagnostic logging to stderr (-v, -vv)")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write JSON logs to this file",
)
def validate(
    root: Path | None,
    max_lines: int | None,
    config: Path | None,
    report_file: Path | None,
    report_format: str | None,
    quiet: bool,
    verbose: int,
    log_file: Path | None,
) -> None:
    """Validate every SKILL.md under the skills directory."""
    app_config = _load_app_config(
        config,
        {
            "root": root,
            "max_lines": max_lines,
            "verbose": verbose,
            "log_file": log_file,
        },
        quiet=quiet,
    )

    try:
        result = SkillValidator(app_config.skills).validate()
    except OSError as e:
        click.echo(f"Could not read skills directory: {e}", err=True)
        sys.exit(EXIT_FAILED)

    for line in render_console(result, quiet=quiet):
        click.echo(line)

    exit_code = result.exit_code
    if report_file:
        try:
            ReportGenerator(result).write(report_file, report_format)
        except OSError as e:
            click.echo(f"Could not save report: {e}", err=True)
            exit_code = EXIT_FAILED

    sys.exit(exit_code)


@main.command("list")
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Skills directory (default: .github/skills)",
)
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to the YAML configuration file",
)
def list_cmd(root: Path | None, config: Path | None) -> None:
    """List discovered skills with their size and description."""
    app_config = _load_app_config(config, {"root": root})
    loader = SkillsLoader(app_config.skills.root, skill_file=app_config.skills.skill_file)
    skills = loader.list_skills()
    if not skills:
        click.echo(f"  No skills found in {app_config.skills.root}")
        return
    for s in skills:
        description = s.description or "(no description)"
        click.echo(f"  {s.name:<30} {s.line_count:4d} lines  {description}")


@main.command("create")
@click.argument("name")
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Skills directory (default: .github/skills)",
)
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to the YAML configuration file",
)
def create_cmd(name: str, root: Path | None, config: Path | None) -> None:
    """Create a new skill from a template that passes validation."""
    app_config = _load_app_config(config, {"root": root})
    installer = SkillInstaller(app_config.skills.root, skill_file=app_config.skills.skill_file)
    try:
        path, created = installer.create_local(name)
    except InvalidSkillNameError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_FAILED)

    if created:
        click.echo(f"Skill created at {path}")
    else:
        click.echo(f"Skill already exists at {path}")


@main.command("validate-config")
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to the configuration file to validate",
)
def validate_config(config: Path | None) -> None:
    """Validate a YAML configuration file."""
    app_config = _load_app_config(config, {})
    click.echo("Valid configuration")
    click.echo(f"  Skills root: {app_config.skills.root}")
    click.echo(f"  Skill file: {app_config.skills.skill_file}")
    click.echo(f"  Max lines: {app_config.skills.max_lines}")
