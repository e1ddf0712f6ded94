"""Naive Bayes classifier over any number of categorical features.

Labels and per-feature vocabularies are learned from the training data;
conditional probabilities use Laplace smoothing over the values seen for
each label.
"""

from __future__ import annotations

import argparse
import math
import sys
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Sequence

_WHITESPACE = " \n\r\t"
_FEATURE_COUNT = 3

DEFAULT_TRAINING_PATH = "./data/bayes_training_data.txt"
DEFAULT_TEST_PATH = "./data/bayes_test_data.txt"


@dataclass(frozen=True)
class Sample:
    """A row of categorical feature values and its label."""

    features: tuple[str, ...] = field(default_factory=tuple)
    label: str = ""


class NaiveBayesClassifier:
    """Learns label priors and per-feature value counts for each label."""

    def __init__(self) -> None:
        self.class_counts: Counter[str] = Counter()
        self.feature_counts: dict[str, list[Counter[str]]] = {}
        self.labels: list[str] = []
        self.num_features = 0
        self.total_samples = 0

    def train(self, data: Sequence[Sample]) -> None:
        """Replace the model with counts from ``data``; an empty sequence changes nothing."""
        if not data:
            return
        num_features = len(data[0].features)
        if any(len(sample.features) != num_features for sample in data):
            raise ValueError("all samples must have the same number of features")

        self.num_features = num_features
        self.total_samples = len(data)
        self.class_counts = Counter(sample.label for sample in data)
        self.labels = sorted(self.class_counts)
        self.feature_counts = {
            label: [Counter() for _ in range(num_features)] for label in self.labels
        }
        for sample in data:
            for counts, value in zip(self.feature_counts[sample.label], sample.features):
                counts[value] += 1

    def _log_score(self, label: str, features: Sequence[str]) -> float:
        score = math.log(self.class_counts[label] / self.total_samples)
        for index, counts in enumerate(self.feature_counts[label]):
            count = counts.get(features[index], 0)
            total = sum(counts.values())
            score += math.log((count + 1.0) / (total + len(counts)))
        return score

    def predict(self, features: Sequence[str]) -> str:
        """Return the label with the highest log posterior, or "" if untrained."""
        best_label = ""
        best_score = -math.inf
        for label in self.labels:
            score = self._log_score(label, features)
            if score > best_score:
                best_score = score
                best_label = label
        return best_label

    def evaluate(self, test_data: Sequence[Sample]) -> float:
        """Print each prediction plus accuracy and error rate; return accuracy as a fraction."""
        correct = 0
        for sample in test_data:
            predicted = self.predict(sample.features)
            print(f"Predicted: {predicted}, Actual: {sample.label}")
            if predicted == sample.label:
                correct += 1
        accuracy = correct / len(test_data) if test_data else math.nan
        error_rate = 1.0 - accuracy
        print(f"\nAccuracy: {accuracy * 100.0:.2f}%")
        print(f"Error Rate: {error_rate * 100.0:.2f}%")
        return accuracy


def trim(text: str) -> str:
    """Strip spaces, tabs and line-break characters from both ends."""
    return text.strip(_WHITESPACE)


def _parse_line(line: str) -> Sample | None:
    parts = line.split(",", _FEATURE_COUNT)
    if len(parts) <= _FEATURE_COUNT or not parts[-1]:
        return None
    *features, label = parts
    return Sample(tuple(trim(value) for value in features), trim(label))


def _parse_lines(lines: Iterable[str]) -> list[Sample]:
    samples = (_parse_line(line.removesuffix("\n")) for line in lines)
    return [sample for sample in samples if sample is not None]


def load_labeled_data(path: str) -> list[Sample]:
    """Read ``f1,f2,f3,label`` lines; lines without a label are skipped.

    A file that cannot be opened yields no samples.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            return _parse_lines(handle)
    except OSError:
        return []


def main(argv: list[str] | None = None) -> int:
    """Train on one file and evaluate on another."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("training", nargs="?", default=DEFAULT_TRAINING_PATH)
    parser.add_argument("testing", nargs="?", default=DEFAULT_TEST_PATH)
    args = parser.parse_args(argv)

    training_data = load_labeled_data(args.training)
    test_data = load_labeled_data(args.testing)

    classifier = NaiveBayesClassifier()
    classifier.train(training_data)

    print("\n=== Predictions ===")
    classifier.evaluate(test_data)
    return 0


if __name__ == "__main__":
    sys.exit(main())