"""Multinomial Naive Bayes text classifier.

Training counts token occurrences per class; prediction scores every known
class in log space and picks the winning label. Pure Python, no numpy.

Scoring, for a class ``c`` and the tokens ``t`` of a document::

    score(c) = ln(class_freq[c] / document_count)
             + sum(ln(token_class_freq[t][c] / class_freq[c]))

Notes on the scoring rule:

- ``class_freq`` counts token occurrences, not documents, so the prior term
  is not a normalized probability.
- A (token, class) pair never seen in training adds nothing to the sum. No
  smoothing is applied.
- The label with the *lowest* score is returned, although every token term
  is <= 0 and the textbook decision rule would pick the highest.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from .tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass
class ClassifierStats:
    """Snapshot of what a classifier has learned.

    Attributes:
        document_count: Number of documents trained on.
        class_count: Number of distinct class labels.
        vocabulary_size: Number of distinct tokens.
        token_count: Total token occurrences across all training documents.
    """

    document_count: int = 0
    class_count: int = 0
    vocabulary_size: int = 0
    token_count: int = 0


@dataclass
class NaiveBayesClassifier:
    """Naive Bayes classifier over word-frequency counts.

    Example::

        nb = NaiveBayesClassifier()
        nb.train("fn use struct impl", "rust")
        nb.train("def import from as", "python")
        nb.predict("impl struct")   # "rust"

    The model is a plain in-memory structure with no internal locking.
    Callers sharing an instance across threads must serialize access.

    Args:
        tokenizer: Callable turning a document into tokens. Defaults to
            :func:`naive_bayes_text.tokenizer.tokenize`.
    """

    tokenizer: Callable[[str], list[str]] = field(default=tokenize, repr=False)

    # Learned state
    token_class_freq: dict[str, dict[str, int]] = field(default_factory=dict, repr=False)
    class_freq: dict[str, int] = field(default_factory=dict)
    document_count: int = 0

    @property
    def classes(self) -> list[str]:
        """Sorted list of known class labels."""
        return sorted(self.class_freq)

    @property
    def is_trained(self) -> bool:
        """Whether at least one class has been learned."""
        return bool(self.class_freq)

    @property
    def stats(self) -> ClassifierStats:
        """Get classifier statistics."""
        return ClassifierStats(
            document_count=self.document_count,
            class_count=len(self.class_freq),
            vocabulary_size=len(self.token_class_freq),
            token_count=sum(self.class_freq.values()),
        )

    def train(self, document: str, label: str) -> None:
        """Learn from one labeled document.

        Every token occurrence increments both the class total and the
        (token, class) count. The document count goes up by one per call,
        even when the document has no tokens.

        Args:
            document: Raw document text.
            label: Class label, compared by exact string equality.
        """
        tokens = self.tokenizer(document)

        for token in tokens:
            self.class_freq[label] = self.class_freq.get(label, 0) + 1

            per_class = self.token_class_freq.setdefault(token, {})
            per_class[label] = per_class.get(label, 0) + 1

        self.document_count += 1
        logger.debug("Trained on %d tokens for class %r", len(tokens), label)

    def train_many(self, examples: Iterable[tuple[str, str]]) -> None:
        """Train on ``(document, label)`` pairs in order."""
        for document, label in examples:
            self.train(document, label)

    def scores(self, document: str) -> dict[str, float]:
        """Compute the log score of every known class for a document.

        Args:
            document: Raw document text.

        Returns:
            Dict of {class: score}. Empty if the classifier is untrained.
        """
        tokens = self.tokenizer(document)
        scores: dict[str, float] = {}

        for cls, cls_freq in self.class_freq.items():
            score = math.log(cls_freq / self.document_count)
            for token in tokens:
                token_freq = self.token_class_freq.get(token, {}).get(cls)
                if token_freq is not None:
                    score += math.log(token_freq / cls_freq)
            scores[cls] = score

        return scores

    def predict(self, document: str) -> Optional[str]:
        """Predict the class of a document.

        Args:
            document: Raw document text.

        Returns:
            The class with the minimum score, or None if the classifier has
            never learned a class.
        """
        scores = self.scores(document)
        if not scores:
            logger.debug("Predict called on an untrained classifier")
            return None

        predicted = min(scores, key=scores.get)  # type: ignore[arg-type]
        logger.debug("Predicted %r among %d classes", predicted, len(scores))
        return predicted
