#!/usr/bin/env python3
"""
Demonstration of the frontmatter modes.

Parses a document (a built-in sample or a file given on the command line) in
every frontmatter mode and shows the parsed data and the rebuilt content with
line breaks made visible, so the position guarantees of each mode are easy to
compare.

Usage:
    python examples/frontmatter_modes_demo.py [FILE] [--verbose]
"""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from mdoc_frontmatter import FrontmatterMode, FrontmatterParsingError, is_frontmatter_valid, parse_frontmatter

logger = logging.getLogger(__name__)

console = Console()

SAMPLE_DOCUMENT = """---
title: Markdoc Quickstart
tags: [markdoc, docs]
published: 2024-03-15
---
# Markdoc Quickstart

{% callout type="note" %}
Frontmatter uses the same `---` fence as this example:
{% /callout %}

```yaml
---
not: frontmatter
---
```
"""


def visible(text: str) -> str:
    """Make line breaks and spaces visible."""
    return text.replace(" ", "·").replace("\r", "\\r").replace("\n", "\\n\n")


def show_mode(document: str, mode: FrontmatterMode) -> None:
    """Parse the document in one mode and print the result."""
    result = parse_frontmatter(document, {"frontmatter": mode})

    table = Table(show_header=False, box=None)
    table.add_row("length", f"{len(result.content)} (source {len(document)})")
    table.add_row("line breaks", f"{result.content.count(chr(10))} (source {document.count(chr(10))})")
    console.print(table)
    console.print(Panel(visible(result.content), title=f"[bold]{mode.value}[/bold]", expand=False))


@click.command()
@click.argument("file", required=False, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(file: Path | None, verbose: bool):
    """Show how each frontmatter mode rebuilds a document."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )

    document = file.read_bytes().decode("utf-8") if file else SAMPLE_DOCUMENT
    logger.info("Parsing %s", file or "built-in sample")

    try:
        parsed = parse_frontmatter(document, {"frontmatter": "preserve"})
    except FrontmatterParsingError as e:
        console.print(f"[red]Invalid frontmatter:[/red] {e}")
        raise SystemExit(1) from e

    console.print(Panel(repr(parsed.frontmatter), title="frontmatter", expand=False))
    console.print(f"JSON-serializable: {is_frontmatter_valid(parsed.frontmatter)}")

    for mode in FrontmatterMode:
        show_mode(document, mode)


if __name__ == "__main__":
    main()
