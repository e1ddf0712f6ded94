"""Naive Bayes faction classifier over a fixed robot-attribute vocabulary.

Each record is a comma-separated line ``eye_color,mode,skill,faction``.
Conditional probabilities use Laplace smoothing, with the vocabulary sizes
fixed by the known attribute values.
"""

from __future__ import annotations

import argparse
import math
import sys
from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Iterator

EYE_COLORS = ("red", "blue", "yellow")
MODES = ("truck", "car", "jet", "animal")
SKILLS = ("repair", "scout", "supply", "attack")
FACTIONS = ("good", "evil")

_VOCABULARY_SIZES = {
    "eye_color": len(EYE_COLORS),
    "mode": len(MODES),
    "skill": len(SKILLS),
}

_WHITESPACE = " \n\r\t"

DEFAULT_TRAINING_PATH = "./data/bayes_training_data.txt"
DEFAULT_TEST_PATH = "./data/bayes_test_data.txt"


@dataclass(frozen=True)
class Record:
    """One robot: three attributes and the faction it belongs to."""

    eye_color: str
    mode: str
    skill: str
    faction: str


def trim(text: str) -> str:
    """Strip spaces, tabs and line-break characters from both ends."""
    return text.strip(_WHITESPACE)


def parse_record(line: str) -> Record:
    """Parse ``eye,mode,skill,faction``; missing fields become empty strings.

    Everything after the third comma belongs to the faction, which is trimmed.
    """
    parts = line.split(",", 3)
    parts += [""] * (4 - len(parts))
    eye_color, mode, skill, faction = parts
    return Record(eye_color, mode, skill, trim(faction))


def _read_lines(path: str) -> Iterator[str]:
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            yield line.removesuffix("\n")


def _log(value: float) -> float:
    return -math.inf if value == 0 else math.log(value)


class NaiveBayes:
    """Counts attribute values per faction and predicts the likeliest faction."""

    def __init__(self) -> None:
        self.class_counts: Counter[str] = Counter()
        self.feature_counts: defaultdict[str, defaultdict[str, Counter[str]]] = (
            defaultdict(lambda: defaultdict(Counter))
        )
        self.total_records = 0

    def train(self, path: str) -> None:
        """Add every record in the file at ``path`` to the counts."""
        for line in _read_lines(path):
            record = parse_record(line)
            self.class_counts[record.faction] += 1
            self.feature_counts["eye_color"][record.eye_color][record.faction] += 1
            self.feature_counts["mode"][record.mode][record.faction] += 1
            self.feature_counts["skill"][record.skill][record.faction] += 1
            self.total_records += 1

    def _conditional(self, attribute: str, value: str, faction: str) -> float:
        count = self.feature_counts[attribute][value][faction]
        total_class = self.class_counts[faction]
        return (count + 1) / (total_class + _VOCABULARY_SIZES[attribute])

    def _log_score(self, record: Record, faction: str) -> float:
        if self.total_records:
            score = _log(self.class_counts[faction] / self.total_records)
        else:
            score = math.nan
        score += _log(self._conditional("eye_color", record.eye_color, faction))
        score += _log(self._conditional("mode", record.mode, faction))
        score += _log(self._conditional("skill", record.skill, faction))
        return score

    def predict(self, record: Record) -> str:
        """Return the faction with the highest log posterior; ties go to the first."""
        best_score = -1.0
        best_faction = ""
        for faction in FACTIONS:
            score = self._log_score(record, faction)
            if score > best_score or not best_faction:
                best_score = score
                best_faction = faction
        return best_faction

    def test(self, path: str) -> float:
        """Predict every record in ``path``, print each result, return accuracy in percent."""
        total = 0
        correct = 0
        for line in _read_lines(path):
            record = parse_record(line)
            predicted = self.predict(record)
            print(f"Predicted: {predicted}, Actual: {record.faction}")
            if predicted == record.faction:
                correct += 1
            total += 1
        accuracy = correct / total * 100 if total else math.nan
        print(f"Accuracy: {accuracy:g}%")
        return accuracy


def main(argv: list[str] | None = None) -> int:
    """Train on one file, report predictions and accuracy on another."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("training", nargs="?", default=DEFAULT_TRAINING_PATH)
    parser.add_argument("testing", nargs="?", default=DEFAULT_TEST_PATH)
    args = parser.parse_args(argv)

    classifier = NaiveBayes()
    for action, path in ((classifier.train, args.training), (classifier.test, args.testing)):
        try:
            action(path)
        except OSError:
            print(f"Failed to open file: {path}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())