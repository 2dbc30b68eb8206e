"""
CLI tool to classify a list of product codes.

Usage:
    python -m tools.classify.main 036000291452 978-0-13-468599-1
    python -m tools.classify.main --input codes.txt --format markdown
    python -m tools.classify.main --input codes.txt --output report.csv --strict
"""

import csv
import json
import sys
from io import StringIO
from pathlib import Path

import click
import structlog

from product_codes import CodeClassification, configure_logging, describe_code

logger = structlog.get_logger(__name__)

COLUMNS = ["code", "normalized_code", "code_type", "checksum_valid"]


def read_codes(path: Path) -> list[str]:
    """Read one code per line, skipping blank lines."""
    with open(path, encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def to_row(result: CodeClassification) -> dict[str, str]:
    return {
        "code": result.code,
        "normalized_code": result.normalized_code,
        "code_type": result.code_type.value,
        "checksum_valid": "yes" if result.checksum_valid else "no",
    }


def format_csv(results: list[CodeClassification]) -> str:
    """Format results as CSV."""
    output = StringIO()
    writer = csv.DictWriter(output, fieldnames=COLUMNS, lineterminator="\n")
    writer.writeheader()
    for result in results:
        writer.writerow(to_row(result))
    return output.getvalue()


def format_markdown(results: list[CodeClassification]) -> str:
    """Format results as markdown table."""
    lines = [
        "| " + " | ".join(COLUMNS) + " |",
        "|" + "|".join("-" * (len(column) + 2) for column in COLUMNS) + "|",
    ]
    for result in results:
        row = to_row(result)
        lines.append("| " + " | ".join(row[column] for column in COLUMNS) + " |")
    return "\n".join(lines)


def format_json(results: list[CodeClassification]) -> str:
    """Format results as a JSON array."""
    return json.dumps([result.model_dump(mode="json") for result in results], indent=2)


FORMATTERS = {
    "csv": format_csv,
    "markdown": format_markdown,
    "json": format_json,
}


@click.command()
@click.argument("codes", nargs=-1)
@click.option(
    "--input", "-i",
    "input_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="File with one code per line",
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file path (defaults to stdout)",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(list(FORMATTERS)),
    default="csv",
    help="Output format (default: csv)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 if any code is not recognized",
)
def main(
    codes: tuple[str, ...],
    input_path: Path | None,
    output: Path | None,
    output_format: str,
    strict: bool,
) -> None:
    """Classify product codes and report their type and checksum status."""
    configure_logging()

    all_codes = list(codes)
    if input_path:
        all_codes.extend(read_codes(input_path))

    if not all_codes:
        click.echo("No codes given. Pass codes as arguments or use --input.", err=True)
        sys.exit(1)

    results = [describe_code(code) for code in all_codes]
    unrecognized = sum(1 for result in results if not result.is_recognized)
    logger.info("Classified codes", total=len(results), unrecognized=unrecognized)

    content = FORMATTERS[output_format](results)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(content)
        click.echo(f"Report written to: {output}")
    else:
        click.echo(content)

    if strict and unrecognized:
        click.echo(f"{unrecognized} code(s) not recognized", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
