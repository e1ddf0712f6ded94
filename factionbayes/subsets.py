"""Naive Bayes accuracy as the amount of training data grows.

The classifier learns labels and per-feature vocabularies from the data. It
is trained on growing leading fractions of the training file, and each model
is scored against the test file.
"""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence

__all__ = [
    "NaiveBayesClassifier",
    "Sample",
    "evaluate_accuracy",
    "load_data",
    "main",
    "split_and_evaluate",
]

_FEATURE_COUNT = 3
TRAIN_RATIOS = (0.4, 0.6, 0.8, 1.0)

DEFAULT_TRAINING_PATH = "data/bayes_training_data.txt"
DEFAULT_TEST_PATH = "data/bayes_test_data.txt"


@dataclass(frozen=True)
class Sample:
    """A feature vector and its label."""

    features: tuple[str, ...]
    label: str


class NaiveBayesClassifier:
    """Categorical naive Bayes with Laplace smoothing over observed values."""

    def __init__(self) -> None:
        self.class_counts: Counter[str] = Counter()
        self.feature_counts: dict[str, list[Counter[str]]] = {}
        self.labels: list[str] = []
        self.num_features = 0
        self.total_samples = 0

    def train(self, data: Sequence[Sample]) -> None:
        """Replace the model with one fitted to ``data``; empty data changes nothing."""
        if not data:
            return
        self.num_features = len(data[0].features)
        self.total_samples = len(data)
        self.class_counts = Counter(sample.label for sample in data)
        self.labels = sorted(self.class_counts)
        self.feature_counts = {
            label: [Counter() for _ in range(self.num_features)]
            for label in self.labels
        }
        for sample in data:
            per_feature = self.feature_counts[sample.label]
            for counter, value in zip(per_feature, sample.features):
                counter[value] += 1

    def _log_probability(self, label: str, features: Sequence[str]) -> float:
        log_prob = math.log(self.class_counts[label] / self.total_samples)
        for counter, value in zip(
            self.feature_counts[label], features[: self.num_features]
        ):
            total = sum(counter.values())
            log_prob += math.log((counter[value] + 1.0) / (total + len(counter)))
        return log_prob

    def predict(self, features: Sequence[str]) -> str:
        """Return the most probable label; ties go to the first in sorted order."""
        best_label = ""
        best_prob = -math.inf
        for label in self.labels:
            log_prob = self._log_probability(label, features)
            if log_prob > best_prob:
                best_prob = log_prob
                best_label = label
        return best_label


def _parse_line(line: str) -> Sample:
    parts = line.split(",")
    fields = parts[: _FEATURE_COUNT + 1]
    fields += [""] * (_FEATURE_COUNT + 1 - len(fields))
    *features, label = fields
    return Sample(tuple(features), label)


def _parse_lines(lines: Iterable[str]) -> list[Sample]:
    return [_parse_line(line.removesuffix("\n")) for line in lines]


def load_data(path: str) -> list[Sample]:
    """Read ``f1,f2,f3,label`` lines as they are, without trimming.

    Missing fields become empty strings and text after a fourth comma is
    ignored. A file that cannot be opened yields no samples.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            return _parse_lines(handle)
    except OSError:
        return []


def evaluate_accuracy(
    classifier: NaiveBayesClassifier, test_data: Sequence[Sample]
) -> float:
    """Print and return the percentage of ``test_data`` predicted correctly."""
    correct = sum(
        1 for sample in test_data if classifier.predict(sample.features) == sample.label
    )
    accuracy = correct / len(test_data) * 100.0 if test_data else math.nan
    print(f"Accuracy on test data: {accuracy:g}%")
    return accuracy


def split_and_evaluate(
    classifier: NaiveBayesClassifier,
    all_data: list[Sample],
    train_ratio: float,
    rng: random.Random | None = None,
) -> float:
    """Shuffle ``all_data`` in place, train on its leading share, score on the rest."""
    rng = rng if rng is not None else random.Random()
    rng.shuffle(all_data)

    train_size = int(len(all_data) * train_ratio)
    training_data = all_data[:train_size]
    test_data = all_data[train_size:]

    print(
        f"\nUsing {train_ratio * 100:g}% of the data for training "
        f"({len(training_data)} samples)"
    )
    classifier.train(training_data)
    return evaluate_accuracy(classifier, test_data)


def main(argv: list[str] | None = None) -> int:
    """Score models trained on 40, 60, 80 and 100 percent of the training file."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("training", nargs="?", default=DEFAULT_TRAINING_PATH)
    parser.add_argument("testing", nargs="?", default=DEFAULT_TEST_PATH)
    args = parser.parse_args(argv)

    training_data = load_data(args.training)
    test_data = load_data(args.testing)

    classifier = NaiveBayesClassifier()
    for ratio in TRAIN_RATIOS:
        subset = training_data[: int(len(training_data) * ratio)]
        print(f"\nUsing {ratio * 100:g}% of the training data ({len(subset)} samples)")
        classifier.train(subset)
        evaluate_accuracy(classifier, test_data)
    return 0


if __name__ == "__main__":
    sys.exit(main())