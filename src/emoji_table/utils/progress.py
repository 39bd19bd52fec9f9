"""
Progress Bar Utilities

Rich progress bar with instantaneous and average speed.
"""

import logging

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)

logger = logging.getLogger(__name__)
console = Console(stderr=True)


def create_rich_progress_bar(
    total: int,
    desc: str,
    unit: str = "item",
    verbose: int = 30,
) -> Progress | None:
    """
    Create a Rich progress bar.

    Tasks added to the bar must provide an ``avg_speed`` field.

    Args:
        total: Total number of items to process.
        desc: Description for the progress bar.
        unit: Unit label for items (e.g., "emoji").
        verbose: Numeric verbosity (only create at INFO (20) or more verbose).

    Returns:
        Rich Progress instance or None if verbosity is too low.
    """
    if verbose > 20 or total <= 0:
        return None

    columns = [
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
        TextColumn("{task.completed}/{task.total}"),
        TextColumn(f"{unit}"),
        TimeElapsedColumn(),
        TextColumn("<"),
        TimeRemainingColumn(),
        TextColumn("•"),
        TextColumn("[cyan]avg: {task.fields[avg_speed]}[/cyan]"),
    ]
    logger.debug("Progress bar enabled for %s (%s %s)", desc, total, unit)
    return Progress(*columns, console=console, transient=False)
