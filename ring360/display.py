"""Terminal rendering of ring values with rich.

Example:
    >>> from ring360 import Ring360
    >>> from ring360.display import print_rings
    >>> print_rings([Ring360(-82.467352), Ring360.from_gis(-75.0)], title="Bearings")
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.table import Table

from .config import Number
from .unit import Ring360

CONSOLE = Console()


def ring_table(values: Iterable[Ring360 | Number], title: str | None = None) -> Table:
    """Build a table with one row per value.

    Plain numbers are promoted to Ring360 first.

    Args:
        values: Ring values or raw numbers of degrees.
        title: Optional table title.

    Returns:
        Table: Columns raw, degrees, rotations, progress and GIS.
    """
    t = Table(title=title)
    t.add_column("Raw", justify="right")
    t.add_column("Degrees", justify="right", style="bold")
    t.add_column("Rotations", justify="right")
    t.add_column("Progress", justify="right")
    t.add_column("GIS", justify="right")

    for value in values:
        ring = value if isinstance(value, Ring360) else Ring360(value)
        t.add_row(
            f"{ring.value():g}",
            f"{ring.degrees():g}",
            str(ring.rotations()),
            f"{ring.progress():g}",
            f"{ring.to_gis():g}",
        )
    return t


def print_rings(
    values: Iterable[Ring360 | Number],
    title: str | None = None,
    console: Console | None = None,
) -> None:
    """Print ring_table(values) to ``console`` (module console by default)."""
    (console or CONSOLE).print(ring_table(values, title=title))
