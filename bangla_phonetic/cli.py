"""bangla-phonetic CLI - Main entry point."""

import json
import sys
from pathlib import Path
from typing import Any

import click
import yaml  # type: ignore[import-untyped]
from tqdm import tqdm

from bangla_phonetic.pipeline import convert as convert_text
from bangla_phonetic.ruleset import load_ruleset
from bangla_phonetic.suggest import get_autocomplete_suggestions
from bangla_phonetic.utils.io import read_lines, write_jsonl, write_lines
from bangla_phonetic.utils.log import setup_logging


PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_SETTINGS_PATH = PACKAGE_DIR / "etc" / "settings.yaml"


def load_settings(settings_path: Path | None = None) -> dict[str, Any]:
    """Load settings.yaml."""
    settings_path = settings_path or DEFAULT_SETTINGS_PATH
    if not settings_path.exists():
        click.echo(f"Error: settings.yaml not found at {settings_path}", err=True)
        sys.exit(1)

    with settings_path.open(encoding="utf-8") as f:
        result: dict[str, Any] = yaml.safe_load(f) or {}
        return result


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--rules",
    "rules_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Ruleset JSON file (default: bundled rules)",
)
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings YAML file",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    rules_path: Path | None,
    settings_path: Path | None,
) -> None:
    """Convert phonetically typed Latin text to Bangla."""
    settings = load_settings(settings_path)
    log_settings = settings.get("logging", {})

    # Setup logging
    log_level = "DEBUG" if verbose else log_settings.get("level", "WARNING")
    log_format = log_settings.get("format", "pretty")
    log_file = log_settings.get("file")

    logger = setup_logging(
        level=log_level,
        format_type=log_format,
        log_file=Path(log_file) if log_file else None,
    )

    # The ruleset must load before any command runs
    rules_path = rules_path or settings.get("rules", {}).get("path")
    try:
        ruleset = load_ruleset(rules_path, logger)
    except Exception as e:
        logger.error(f"Ruleset load failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    # Store in context
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["logger"] = logger
    ctx.obj["ruleset"] = ruleset


@cli.command()
@click.argument("text", nargs=-1)
@click.option(
    "--input",
    "input_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Convert each line of this file",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write results here instead of stdout",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "jsonl"]),
    default="text",
    help="Output format (default: text)",
)
@click.pass_context
def convert(
    ctx: click.Context,
    text: tuple[str, ...],
    input_path: Path | None,
    output_path: Path | None,
    output_format: str,
) -> None:
    """Convert TEXT, or every line of --input, to Bangla."""
    logger = ctx.obj["logger"]
    ruleset = ctx.obj["ruleset"]

    if input_path is None and not text:
        raise click.UsageError("Give TEXT or --input")

    try:
        if input_path is not None:
            lines = read_lines(input_path)
            logger.info(f"Converting {len(lines)} lines from {input_path}")
        else:
            lines = [" ".join(text)]

        results = [
            (line, convert_text(line, ruleset))
            for line in tqdm(lines, desc="Converting", unit="line", disable=input_path is None)
        ]

        if output_path is not None:
            if output_format == "jsonl":
                count = write_jsonl(
                    output_path,
                    ({"input": source, "output": target} for source, target in results),
                )
            else:
                count = write_lines(output_path, (target for _, target in results))
            click.echo(f"Wrote {count} lines to {output_path}", err=True)
            return

        for source, target in results:
            if output_format == "jsonl":
                click.echo(json.dumps({"input": source, "output": target}, ensure_ascii=False))
            else:
                click.echo(target)

    except Exception as e:
        logger.error(f"Conversion failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("text", nargs=-1, required=True)
@click.option("--max", "max_suggestions", type=click.IntRange(min=0), help="Maximum suggestions")
@click.pass_context
def suggest(ctx: click.Context, text: tuple[str, ...], max_suggestions: int | None) -> None:
    """Suggest completions for the last word of TEXT."""
    settings = ctx.obj["settings"]
    ruleset = ctx.obj["ruleset"]

    if max_suggestions is None:
        max_suggestions = settings.get("suggest", {}).get("max_suggestions", 5)

    for suggestion in get_autocomplete_suggestions(" ".join(text), max_suggestions, ruleset):
        click.echo(suggestion)


@cli.command()
@click.pass_context
def rules(ctx: click.Context) -> None:
    """Show ruleset metadata and statistics."""
    ruleset = ctx.obj["ruleset"]

    click.echo("\n" + "=" * 80)
    click.echo("RULESET")
    click.echo("=" * 80 + "\n")

    for key, value in ruleset.meta.items():
        click.echo(f"  {key:18s} {value}")

    summary = ruleset.summary()
    click.echo("\nPatterns:")
    click.echo(f"  Total:        {summary['patterns']:,}")
    click.echo(f"  Direct:       {summary['direct_patterns']:,}")
    click.echo(f"  Rule-guarded: {summary['rule_patterns']:,}")

    click.echo("\nCharacter classes:")
    click.echo(f"  Vowels:         {summary['vowels']}")
    click.echo(f"  Consonants:     {summary['consonants']}")
    click.echo(f"  Case-sensitive: {summary['case_sensitive']}")
    click.echo(f"  Numbers:        {summary['numbers']}")

    click.echo(f"\nFingerprint: {summary['fingerprint']}")
    click.echo("\n" + "=" * 80 + "\n")


def main() -> None:
    """Entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
