"""Shared test fixtures for naive-bayes-text tests."""

from __future__ import annotations

import pytest

from naive_bayes_text.classifier import NaiveBayesClassifier

# (label, document) pairs: one short keyword snippet per language
LANGUAGE_SNIPPETS: list[tuple[str, str]] = [
    ("rust", "fn use struct impl"),
    ("python", "def import from as"),
    ("c", "void include define ifdef"),
    ("java", "public static void main class"),
    ("javascript", "let const function arrow"),
    ("go", "package import func var"),
    ("swift", "func var let struct class"),
    ("kotlin", "fun var val if else"),
    ("typescript", "interface type import as"),
    ("php", "function include require echo"),
]


@pytest.fixture
def language_snippets() -> list[tuple[str, str]]:
    """Labeled keyword snippets for ten programming languages."""
    return list(LANGUAGE_SNIPPETS)


@pytest.fixture
def trained_classifier(language_snippets) -> NaiveBayesClassifier:
    """Classifier trained once on every language snippet."""
    nb = NaiveBayesClassifier()
    for label, document in language_snippets:
        nb.train(document, label)
    return nb


@pytest.fixture
def weather_examples() -> list[tuple[str, str]]:
    """Two-class (document, label) corpus with disjoint vocabularies."""
    docs = [
        "rain clouds storm wind",
        "storm thunder rain",
        "wind rain drizzle clouds",
        "thunder lightning storm",
        "sun heat clear sky",
        "clear sky sun",
        "heat sun warm breeze",
        "warm clear sun sky",
    ]
    labels = ["wet"] * 4 + ["dry"] * 4
    return list(zip(docs, labels))
