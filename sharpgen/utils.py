"""Console and logging helpers for sharpgen.

``configure_logging`` routes the package loggers through a Rich handler;
``print_source`` and ``print_class_summary`` give a quick look at generated
code from a script or an interactive session. Nothing here is needed to
generate code.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from sharpgen.models import ClassModel

console = Console()

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach a ``RichHandler`` to the ``sharpgen`` logger.

    Calling this more than once only updates the level.

    Args:
        level: A ``logging`` level or its name. Defaults to the
            ``SHARPGEN_LOG_LEVEL`` environment variable, then ``WARNING``.

    Returns:
        The configured ``sharpgen`` logger.
    """
    if level is None:
        level = os.environ.get("SHARPGEN_LOG_LEVEL", "WARNING")
    if isinstance(level, str):
        name = level.strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    logger = logging.getLogger("sharpgen")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger


# ---------------------------------------------------------------------------
# Previews
# ---------------------------------------------------------------------------


def print_source(code: str, title: str | None = None) -> None:
    """Print C# source with syntax highlighting inside a panel.

    Args:
        code: The source text, typically from ``to_source_code()``.
        title: Optional panel title (e.g. the class name).
    """
    syntax = Syntax(code, "csharp", line_numbers=True, word_wrap=False)
    console.print(Panel(syntax, title=title, expand=False))


def summarize_class(model: ClassModel) -> dict[str, str]:
    """Return a label -> value mapping describing a built class."""
    return {
        "Name": model.name,
        "Access": model.access_modifier.value,
        "Bases": ", ".join(model.bases) or "-",
        "Fields": str(len(model.fields)),
        "Properties": str(len(model.properties)),
        "Constructors": str(len(model.constructors)),
    }


def print_class_summary(model: ClassModel) -> None:
    """Print ``summarize_class(model)`` as a two-column table."""
    table = Table(title=f"class {model.name}", show_header=False)
    table.add_column("Item", style="dim cyan", no_wrap=True)
    table.add_column("Value")
    for label, value in summarize_class(model).items():
        table.add_row(label, value)
    console.print(table)
