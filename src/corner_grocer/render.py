"""
Text rendering for frequency tables and histograms.

Everything here returns strings; run.py decides where they go.
"""

from dataclasses import dataclass

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
FG_BRIGHT_GREEN = "\x1b[92m"
FG_GREEN = "\x1b[32m"
FG_GRAY = "\x1b[90m"


@dataclass(frozen=True)
class Palette:
    """ANSI escape codes, or empty strings when color is off."""

    enabled: bool = True

    def wrap(self, escape: str, text: str) -> str:
        if not self.enabled:
            return text
        return f"{escape}{text}{RESET}"


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def render_header(title: str, palette: Palette) -> str:
    return palette.wrap(BOLD, title)


def render_summary(unique_count: int, total_count: int) -> str:
    return f"\n{unique_count} unique items, {total_count} total purchases."


def render_table(rows: list[tuple[str, int]]) -> str:
    """Two-column table of name and count."""
    width = max([4, *(len(name) for name, _ in rows)])
    return "\n".join(f"{name:<{width}}  {count}" for name, count in rows)


def band_color(count: int, max_count: int) -> str:
    """Escape code for a histogram bar."""
    if count >= max(8, max_count - 2):
        return FG_BRIGHT_GREEN  # top sellers
    if count >= 5:
        return FG_GREEN
    return FG_GRAY


def render_histogram(rows: list[tuple[str, int]], palette: Palette, max_width: int = 50) -> str:
    """
    Star histogram of counts.

    Bars are scaled so the largest count fits in ``max_width`` stars; each
    star then stands for ``scale`` purchases, rounded up.
    """
    if not rows:
        return "(no data)"

    max_count = max(count for _, count in rows)
    scale = _ceil_div(max_count, max_width) if max_count > max_width else 1
    width = max([10, *(len(name) for name, _ in rows)])

    lines = [f"Legend: * = {scale} purchase{'s' if scale > 1 else ''}"]
    for name, count in rows:
        bar = "*" * _ceil_div(count, scale)
        colored = palette.wrap(band_color(count, max_count), bar)
        lines.append(f"{name:<{width}}  {colored}  ({count})")
    return "\n".join(lines)
