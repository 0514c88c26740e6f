"""CLI entry point: python -m undoc URL [options]"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from undoc.items import ProcessedDocument
from undoc.query import FetchError, InvalidURLError, fetch_html, is_valid_url, process

logger = logging.getLogger(__name__)

_PREVIEW_CHARS = 80


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="undoc",
        description=(
            "Simplify a documentation page into a title, summary, typed\n"
            "sections and key takeaways. Regex heuristics only, no DOM."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("url", metavar="URL",
                        help="Documentation page URL (http or https)")
    parser.add_argument("--html-file", default=None, metavar="PATH",
                        help="Process a local HTML file instead of fetching URL")
    parser.add_argument("--json", action="store_true", default=False,
                        help="Print the result as JSON instead of a rich summary")
    parser.add_argument("--out", default=None, metavar="FILE",
                        help="Also write the JSON result to FILE")
    parser.add_argument("--timeout", type=int, default=None, metavar="N",
                        help="Network timeout in seconds")
    parser.add_argument("--user-agent", default=None, metavar="UA",
                        help="Override the User-Agent header")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help="Logging level (default: WARNING)")
    return parser


def _load_html(args: argparse.Namespace) -> str:
    if args.html_file:
        return Path(args.html_file).read_text(encoding="utf-8", errors="replace")
    return fetch_html(args.url, timeout=args.timeout, user_agent=args.user_agent)


def _print_document(doc: ProcessedDocument) -> None:
    from rich import box
    from rich.console import Console
    from rich.panel import Panel
    from rich.rule import Rule
    from rich.table import Table
    from rich.text import Text

    console = Console()
    console.print(
        Panel.fit(
            Text(doc.summary),
            title=Text(doc.title, style="bold cyan"),
            subtitle=Text(doc.original_url, style="blue"),
            border_style="cyan",
        ),
    )

    tbl = Table(
        title=f"[bold green]Sections ({len(doc.sections)})[/bold green]",
        box=box.SIMPLE_HEAVY,
        show_lines=False,
    )
    tbl.add_column("#", style="dim", justify="right", width=3, no_wrap=True)
    tbl.add_column("Type", style="yellow", width=15, no_wrap=True)
    tbl.add_column("Title", style="cyan", max_width=40, no_wrap=True)
    tbl.add_column("Content", max_width=60)
    for i, section in enumerate(doc.sections, 1):
        preview = " ".join(section.content.split())
        if len(preview) > _PREVIEW_CHARS:
            preview = preview[:_PREVIEW_CHARS] + "…"
        tbl.add_row(str(i), section.type, Text(section.title), Text(preview))
    console.print(tbl)

    console.print(Rule("[bold cyan]Key Takeaways[/bold cyan]"))
    if doc.key_takeaways:
        for i, takeaway in enumerate(doc.key_takeaways, 1):
            console.print(Text(f"  {i}. {takeaway}"))
    else:
        console.print("  [dim](none)[/dim]")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not is_valid_url(args.url):
        parser.error(f"invalid URL {args.url!r}: expected an http or https URL")

    try:
        html = _load_html(args)
    except InvalidURLError as exc:
        parser.error(f"invalid URL {args.url!r}: {exc}")
    except FetchError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"ERROR: Could not read {args.html_file}: {exc}", file=sys.stderr)
        return 1

    doc = process(html, args.url)

    if args.out:
        out_path = Path(args.out)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(doc.to_json(indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            print(f"ERROR: Could not write {out_path}: {exc}", file=sys.stderr)
            return 1
        logger.info("wrote %s", out_path)

    if args.json:
        print(doc.to_json(indent=2))
    else:
        _print_document(doc)
    return 0


if __name__ == "__main__":
    sys.exit(main())
