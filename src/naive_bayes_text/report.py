"""Terminal rendering of evaluation results with ``rich``."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from .evaluation import EvaluationResult


def evaluation_table(result: EvaluationResult, title: str = "Evaluation") -> Table:
    """Build a rich table with one row per true label.

    Overall accuracy and the unanswered count go in the caption.
    """
    table = Table(
        title=title,
        caption=f"Accuracy {result.accuracy:.2%} | Unanswered {result.unanswered}",
    )
    table.add_column("Label", style="bold")
    table.add_column("Correct", justify="right")
    table.add_column("Support", justify="right")
    table.add_column("Accuracy", justify="right")

    for label, (hits, support) in result.label_accuracy().items():
        rate = hits / support
        table.add_row(
            Text(label),
            str(hits),
            str(support),
            Text(f"{rate:.2%}", style="green" if rate >= 0.5 else "bold red"),
        )

    return table
