"""Naive Bayes robot-faction classifier with a smoothed prior.

Both the faction prior and the attribute likelihoods use Laplace smoothing,
and scores are plain probability products rather than log sums.
"""

from __future__ import annotations

import argparse
import math
import sys
from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Iterable

from .fixed_vocab import EYE_COLORS, FACTIONS, MODES, SKILLS

__all__ = ["NaiveBayesClassifier", "Robot", "load_data", "main", "trim"]

DEFAULT_TRAINING_PATH = "./data/bayes_training_data.txt"
DEFAULT_TEST_PATH = "./data/bayes_test_data.txt"


def trim(text: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return text.strip(" \n\r\t")


@dataclass(frozen=True)
class Robot:
    """A robot's attributes and its faction."""

    eye_color: str
    mode: str
    skill: str
    faction: str


class NaiveBayesClassifier:
    """Accumulates attribute counts per faction across calls to ``train``."""

    classes = FACTIONS
    _vocabulary_sizes = {
        "eye_color": len(EYE_COLORS),
        "mode": len(MODES),
        "skill": len(SKILLS),
    }

    def __init__(self) -> None:
        self.class_counts: Counter[str] = Counter()
        self.feature_counts: defaultdict[str, defaultdict[str, Counter[str]]] = (
            defaultdict(lambda: defaultdict(Counter))
        )
        self.total_samples = 0

    def train(self, data: Iterable[Robot]) -> None:
        """Add every robot in ``data`` to the counts."""
        for robot in data:
            self.class_counts[robot.faction] += 1
            self.feature_counts["eye_color"][robot.faction][robot.eye_color] += 1
            self.feature_counts["mode"][robot.faction][robot.mode] += 1
            self.feature_counts["skill"][robot.faction][robot.skill] += 1
            self.total_samples += 1

    def _conditional(self, feature: str, faction: str, value: str) -> float:
        count = self.feature_counts[feature][faction][value] + 1
        total = self.class_counts[faction] + self._vocabulary_sizes[feature]
        return count / total

    def _score(self, robot: Robot, faction: str) -> float:
        prior = (self.class_counts[faction] + 1) / (self.total_samples + len(self.classes))
        return (
            prior
            * self._conditional("eye_color", faction, robot.eye_color)
            * self._conditional("mode", faction, robot.mode)
            * self._conditional("skill", faction, robot.skill)
        )

    def predict(self, robot: Robot) -> str:
        """Return the faction with the highest posterior; ties go to the first."""
        best_faction = ""
        best_score = -1.0
        for faction in self.classes:
            score = self._score(robot, faction)
            if score > best_score:
                best_score = score
                best_faction = faction
        return best_faction


def _parse_line(line: str) -> Robot | None:
    parts = line.split(",", 3)
    parts += [""] * (4 - len(parts))
    eye_color, mode, skill, faction = parts
    if not (eye_color and mode and skill):
        return None
    return Robot(eye_color, mode, skill, trim(faction))


def load_data(path: str, has_label: bool = True) -> list[Robot]:
    """Read ``eye,mode,skill,faction`` lines, skipping those missing an attribute.

    The fourth field is always read as the faction, whatever ``has_label``
    says. A file that cannot be opened is reported on stderr and yields no
    robots.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            robots = (_parse_line(line.removesuffix("\n")) for line in handle)
            return [robot for robot in robots if robot is not None]
    except OSError:
        print(f"ERROR: Could not open file: {path}", file=sys.stderr)
        return []


def main(argv: list[str] | None = None) -> int:
    """Train on one file, print predictions and overall accuracy on another."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("training", nargs="?", default=DEFAULT_TRAINING_PATH)
    parser.add_argument("testing", nargs="?", default=DEFAULT_TEST_PATH)
    args = parser.parse_args(argv)

    training_data = load_data(args.training, True)
    test_data = load_data(args.testing, False)
    print(f"Test Data Loaded: {len(test_data)} samples")

    classifier = NaiveBayesClassifier()
    classifier.train(training_data)

    correct = 0
    print("Predictions on Test Data:")
    for robot in test_data:
        prediction = classifier.predict(robot)
        print(
            f"{robot.eye_color},{robot.mode},{robot.skill} => "
            f"Predicted: {prediction}, Actual: {robot.faction}"
        )
        if prediction == robot.faction:
            correct += 1

    accuracy = correct / len(test_data) * 100.0 if test_data else math.nan
    print(f"Overall Accuracy: {accuracy:.2f}%")
    return 0


if __name__ == "__main__":
    sys.exit(main())