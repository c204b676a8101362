"""
Interactive runner for corner-grocer.

Usage:
    python -m corner_grocer.run [OPTIONS]

    # Use the default purchase log and backup location
    python -m corner_grocer.run

    # Read a different log without colors
    python -m corner_grocer.run --input today.txt --no-color
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import GrocerConfig
from .frequency import FrequencyTable
from .models import ErrorKind, GrocerError, SortOrder
from .render import Palette, render_header, render_histogram, render_summary, render_table
from .suggest import suggestions_for

# Configure logging; the menu owns stdout so only warnings show by default
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("corner-grocer")

EXIT_CODES = {
    ErrorKind.OPEN: 1,
    ErrorKind.WRITE: 1,
    ErrorKind.USAGE: 2,
}

SORT_CHOICES = {
    1: SortOrder.NAME,
    2: SortOrder.FREQ_DESC,
    3: SortOrder.FREQ_ASC,
}

MENU = """
========= Corner Grocer =========
(1) Search item frequency
(2) Print all frequencies
(3) Print histogram
(4) Exit
> """


class EndOfInput(Exception):
    """Stdin closed while the menu was waiting."""


def read_line(prompt: str = "") -> str:
    try:
        return input(prompt)
    except EOFError as e:
        raise EndOfInput from e


def read_int_in_range(lo: int, hi: int, prompt: str = "") -> int:
    """Prompt until the user enters an integer in [lo, hi]."""
    text = read_line(prompt)
    while True:
        try:
            value = int(text.strip())
        except ValueError:
            value = None
        if value is not None and lo <= value <= hi:
            return value
        text = read_line(f"Please enter a number in [{lo}...{hi}]: ")


def read_sort_order(label: str) -> SortOrder:
    choice = read_int_in_range(
        1, 3, f"\n{label}: (1) Name A→Z  (2) Freq high→low  (3) Freq low→high\n> "
    )
    return SORT_CHOICES[choice]


def search_item(table: FrequencyTable, config: GrocerConfig) -> None:
    query = read_line("Enter item name: ").strip()

    count = table.count_of(query)
    if count > 0:
        print(f"{query} occurs {count} time{'' if count == 1 else 's'}.")
        return

    logger.debug(f"No match for {query!r}, looking for suggestions")
    suggestions = suggestions_for(
        query,
        table.items_sorted_by_name(),
        max_results=config.suggestions.max_results,
        max_distance=config.suggestions.max_distance,
    )
    if suggestions:
        print("Item not found. Did you mean:")
        for name in suggestions:
            print(f"  - {name}")
    else:
        print("Item not found.")


def print_frequencies(table: FrequencyTable, palette: Palette) -> None:
    rows = table.items_sorted(read_sort_order("Sort by"))
    print(render_header("All Frequencies", palette))
    if rows:
        print(render_table(rows))
    print(render_summary(table.unique_item_count(), table.total_purchases()))


def print_histogram(table: FrequencyTable, config: GrocerConfig, palette: Palette) -> None:
    rows = table.items_sorted(read_sort_order("Histogram basis"))
    print(render_header("Purchase Histogram", palette))
    print(render_histogram(rows, palette, max_width=config.histogram.width))
    print(render_summary(table.unique_item_count(), table.total_purchases()))


def menu_loop(table: FrequencyTable, config: GrocerConfig) -> None:
    """Serve menu requests until the user exits or stdin closes."""
    palette = Palette(enabled=config.color)
    try:
        while True:
            choice = read_int_in_range(1, 4, MENU)
            if choice == 4:
                break
            if choice == 1:
                search_item(table, config)
            elif choice == 2:
                print_frequencies(table, palette)
            elif choice == 3:
                print_histogram(table, config, palette)
    except EndOfInput:
        print()
    print("Goodbye!")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="corner-grocer",
        description="corner-grocer: Purchase frequency explorer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Use the default purchase log
    corner-grocer

    # Read a custom log and write the backup elsewhere
    corner-grocer --input today.txt --backup out/frequency.dat

    # Plain text output
    corner-grocer --no-color
        """,
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=Path("corner_grocer.yaml"),
        help="Path to config file (default: corner_grocer.yaml)",
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="Purchase log to read, one item per line",
    )
    parser.add_argument(
        "--backup",
        type=Path,
        help="Where to write the frequency backup",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = GrocerConfig.from_yaml(args.config)
        if args.input:
            config.input_path = args.input
        if args.backup:
            config.backup_path = args.backup
        if args.no_color:
            config.color = False

        logger.debug(f"Config: {config.to_dict()}")

        input_path = config.input_path.absolute()
        backup_path = config.backup_path.absolute()

        table = FrequencyTable()
        table.load_file(input_path)
        # The backup is written once, before any interaction
        table.write_backup(backup_path)
    except GrocerError as e:
        logger.debug("Startup failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CODES[e.kind]

    print(f"Loaded input:   {input_path}")
    print(f"Wrote backup:   {backup_path}")

    menu_loop(table, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
