"""Held-out evaluation and k-fold cross-validation.

Examples are ``(document, label)`` pairs, the same shape
:meth:`NaiveBayesClassifier.train_many` consumes. A prediction of ``None``
(the classifier knows no class yet) is tallied as unanswered rather than
mapped onto a label.
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence

from .classifier import NaiveBayesClassifier
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    """Outcome of predicting a batch of labeled documents.

    Attributes:
        confusion: Counter of ``(true_label, predicted_label)`` pairs, where
            the predicted label is None for unanswered documents.
    """

    confusion: Counter = field(default_factory=Counter)

    @property
    def total(self) -> int:
        return sum(self.confusion.values())

    @property
    def correct(self) -> int:
        return sum(n for (true, pred), n in self.confusion.items() if true == pred)

    @property
    def unanswered(self) -> int:
        return sum(n for (_, pred), n in self.confusion.items() if pred is None)

    @property
    def accuracy(self) -> float:
        """Fraction of documents given their true label; 0.0 when empty."""
        return self.correct / self.total if self.total else 0.0

    def label_accuracy(self) -> dict[str, tuple[int, int]]:
        """Map each true label to ``(correct, support)``."""
        hits: Counter = Counter()
        support: Counter = Counter()
        for (true, pred), n in self.confusion.items():
            support[true] += n
            if true == pred:
                hits[true] += n
        return {label: (hits[label], support[label]) for label in sorted(support)}

    def merge(self, other: "EvaluationResult") -> "EvaluationResult":
        """Combine two results, e.g. the folds of a cross-validation run."""
        return EvaluationResult(confusion=self.confusion + other.confusion)


def evaluate(
    classifier: NaiveBayesClassifier,
    examples: Iterable[tuple[str, str]],
) -> EvaluationResult:
    """Predict every example and tally the outcome against its label."""
    result = EvaluationResult()
    for document, label in examples:
        result.confusion[(label, classifier.predict(document))] += 1
    return result


def fold_indices(labels: Sequence[str], k: int = 5, seed: int = 42) -> list[list[int]]:
    """Split example indices into ``k`` test folds.

    Indices are shuffled within each label and dealt round-robin, continuing
    across labels, so folds keep the label mix and differ in size by at most
    one.

    Raises:
        ValueError: If k is less than 2.
    """
    if k < 2:
        raise ValueError(f"k must be at least 2, got {k}")

    rng = random.Random(seed)
    folds: list[list[int]] = [[] for _ in range(k)]
    dealt = 0
    for label in sorted(set(labels)):
        members = [i for i, lbl in enumerate(labels) if lbl == label]
        rng.shuffle(members)
        for idx in members:
            folds[dealt % k].append(idx)
            dealt += 1
    return [sorted(fold) for fold in folds]


def cross_validate(
    examples: Sequence[tuple[str, str]],
    k: int = 5,
    seed: int = 42,
    tokenizer: Optional[Callable[[str], list[str]]] = None,
) -> list[EvaluationResult]:
    """Train a fresh classifier per fold and evaluate it on the held-out fold.

    Args:
        examples: ``(document, label)`` pairs.
        k: Number of folds.
        seed: Random seed for fold assignment.
        tokenizer: Tokenizer for every fold's classifier.

    Returns:
        One EvaluationResult per fold. Use :meth:`EvaluationResult.merge` to
        pool them.
    """
    folds = fold_indices([label for _, label in examples], k=k, seed=seed)
    results: list[EvaluationResult] = []

    for n, test_idx in enumerate(folds, start=1):
        held_out = set(test_idx)
        classifier = NaiveBayesClassifier(tokenizer=tokenizer or tokenize)
        classifier.train_many(ex for i, ex in enumerate(examples) if i not in held_out)

        result = evaluate(classifier, (examples[i] for i in test_idx))
        logger.info(
            "Fold %d/%d: %d held out, accuracy %.4f, %d unanswered",
            n, k, result.total, result.accuracy, result.unanswered,
        )
        results.append(result)

    return results
