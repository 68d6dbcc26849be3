"""Tests for rich rendering of evaluation results."""

from __future__ import annotations

from collections import Counter

from rich.console import Console
from rich.table import Table

from naive_bayes_text.evaluation import EvaluationResult
from naive_bayes_text.report import evaluation_table


def _render(table: Table) -> str:
    console = Console(record=True, width=120, color_system=None)
    console.print(table)
    return console.export_text()


class TestEvaluationTable:
    """Tests for evaluation_table."""

    def test_row_per_true_label(self):
        result = EvaluationResult(confusion=Counter({
            ("a", "a"): 1, ("b", "a"): 1, ("c", None): 1,
        }))
        table = evaluation_table(result)
        assert isinstance(table, Table)
        assert table.row_count == 3
        assert len(table.columns) == 4

    def test_rendered_content(self):
        result = EvaluationResult(confusion=Counter({
            ("rust", "rust"): 2, ("go", "rust"): 1, ("go", None): 1,
        }))
        text = _render(evaluation_table(result, title="Fold 1"))
        assert "Fold 1" in text
        assert "rust" in text
        assert "Accuracy 50.00%" in text
        assert "Unanswered 1" in text

    def test_labels_rendered_literally(self):
        result = EvaluationResult(confusion=Counter({("[bold]x[/bold]", None): 1}))
        assert "[bold]x[/bold]" in _render(evaluation_table(result))
