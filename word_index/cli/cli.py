"""
cli.py - command line front end for the word index
Features:
- Builds an index of a text file under a chosen ordering
- Alpha / frequency / highest-frequency reports as Rich tables
- Tree stats panel (distinct words, occurrences, height)
- Defaults read from a JSON config, build time logged as a metric
"""

import argparse
import sys
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from word_index.core.entry import Entry
from word_index.core.indexer import Indexer
from word_index.core.ordering import get_ordering
from word_index.core import reporting
from word_index.utils.config_manager import Config
from word_index.utils.logger_utils import Log, log

ORDER_CHOICES = ("natural", "ignore-case", "frequency")
REPORT_CHOICES = ("alpha", "frequency", "highest", "stats")


class CLI:
    """Builds one index and renders one report for it."""

    def __init__(self, cfg: Config, console: Optional[Console] = None):
        self.cfg = cfg
        self.console = console or Console(no_color=not cfg.get("use_color", True))
        self.indexer = Indexer()

    def run(self, path: str, order: str, report: str, limit: int) -> int:
        ordering = get_ordering(order)
        with Log.time_block("build_index"):
            tree = self.indexer.build_index_from_file(
                path, ordering, encoding=self.cfg.get("encoding", "latin-1")
            )
        if tree is None:
            self.console.print(f"[yellow]Nothing to index:[/yellow] {path}")
            return 1
        log.info(f"indexed {path} ({order}): {tree.node_count()} entries")

        if report == "stats":
            self._show_stats(tree, order)
            return 0

        if report == "alpha":
            rows = reporting.sort_by_alpha(tree)
        elif report == "frequency":
            rows = reporting.sort_by_frequency(tree)
        else:
            rows = reporting.get_highest_frequency(tree)

        if limit > 0:
            rows = rows[:limit]
        self._show_entries(rows, title=f"{report} ({order})")
        return 0

    # DISPLAY -------------------------------------------------------------------------------
    def _show_entries(self, rows: List[Entry], title: str):
        table = Table(title=title, box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        table.add_column("Frequency", justify="right", style="magenta")
        table.add_column("Lines", justify="left", style="dim")

        for i, e in enumerate(rows, 1):
            table.add_row(
                str(i),
                e.text,
                str(e.frequency),
                ", ".join(str(n) for n in e.sorted_lines()),
            )
        self.console.print(table)

    def _show_stats(self, tree, order: str):
        s = reporting.summarize(tree)
        body = (
            f"ordering      : {order}\n"
            f"distinct words: {s['words']}\n"
            f"occurrences   : {s['occurrences']}\n"
            f"tree height   : {s['height']}\n"
            f"max frequency : {s['max_frequency']}"
        )
        self.console.print(Panel(body, title="Index stats", expand=False))


def build_parser(cfg: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="word-index", description="Index the words of a text file by line"
    )
    parser.add_argument("file", help="text file to index (read as latin-1)")
    parser.add_argument(
        "--order", choices=ORDER_CHOICES, default=cfg.get("ordering"),
        help=(
            "tree ordering used while indexing; 'frequency' keeps one entry per "
            "distinct count, words tied on count collapse into the first one"
        ),
    )
    parser.add_argument(
        "--report", choices=REPORT_CHOICES, default=cfg.get("report"),
        help="what to print",
    )
    parser.add_argument(
        "--limit", type=int, default=cfg.get("limit"), help="max rows, 0 = all"
    )
    parser.add_argument("--no-color", action="store_true", help="plain output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    # --config has to be known before the other defaults can be filled in
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", default="word_index.json", help="JSON config file")
    known, rest = pre.parse_known_args(argv)

    cfg = Config(known.config)
    parser = build_parser(cfg)
    parser.add_argument("--config", default=known.config, help="JSON config file")
    args = parser.parse_args(rest)

    if args.no_color:
        cfg.data["use_color"] = False
    log.use_color = cfg.get("use_color", True)

    return CLI(cfg).run(args.file, args.order, args.report, args.limit)


if __name__ == "__main__":
    sys.exit(main())
