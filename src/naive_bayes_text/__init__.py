"""Naive Bayes Text -- multinomial Naive Bayes text classification."""

__version__ = "0.1.0"

from .classifier import ClassifierStats, NaiveBayesClassifier
from .evaluation import EvaluationResult, cross_validate, evaluate, fold_indices
from .report import evaluation_table
from .tokenizer import tokenize

__all__ = [
    # Core
    "NaiveBayesClassifier",
    "ClassifierStats",
    "tokenize",
    # Evaluation
    "EvaluationResult",
    "cross_validate",
    "evaluate",
    "fold_indices",
    # Reporting
    "evaluation_table",
]
