# factionbayes

Four small categorical Naive Bayes classifiers that predict whether a robot
belongs to the `good` or the `evil` faction from three features: eye colour,
mode and skill. It has no dependencies outside the standard library.

## Data format

Training and test files are plain UTF-8 text with one record per line:

```
eye_color,mode,skill,faction
```

For example:

```
red,truck,attack,evil
blue,car,repair,good
```

The fixed vocabularies used by `fixed_vocab` and `smoothed_prior` are `red`,
`blue`, `yellow` for eye colour; `truck`, `car`, `jet`, `animal` for mode;
`repair`, `scout`, `supply`, `attack` for skill; and the factions `good` and
`evil`. The `combined` and `subsets` models learn their labels and feature
values from the training data instead.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Each command takes two optional positional arguments, the training file and
the test file. By default they are `data/bayes_training_data.txt` and
`data/bayes_test_data.txt`, relative to the current directory.

```
factionbayes-combined
factionbayes-combined train.txt test.txt
```

| Command | What it does |
| --- | --- |
| `factionbayes-fixed-vocab` | Sums log probabilities with Laplace smoothing over the fixed vocabulary; prints each prediction and the accuracy. Exits with status 1 and `Failed to open file: ...` if a file cannot be read. |
| `factionbayes-combined` | Learns labels and feature values from the data; prints each prediction, then accuracy and error rate to two decimals. |
| `factionbayes-subsets` | Trains on the first 40%, 60%, 80% and 100% of the training file and prints the test accuracy of each model. |
| `factionbayes-smoothed-prior` | Multiplies plain probabilities with a Laplace-smoothed faction prior; prints each record with its prediction and the overall accuracy. |

`factionbayes-combined` and `factionbayes-subsets` treat an unreadable file as
empty; `factionbayes-smoothed-prior` does the same after printing
`ERROR: Could not open file: ...` to stderr. With no test records the accuracy
is reported as `nan`.

## Library use

Every model lives in its own module.

```python
from factionbayes.combined import NaiveBayesClassifier, load_labeled_data

training = load_labeled_data("data/bayes_training_data.txt")
test = load_labeled_data("data/bayes_test_data.txt")

classifier = NaiveBayesClassifier()
classifier.train(training)
print(classifier.predict(["red", "truck", "attack"]))
accuracy = classifier.evaluate(test)  # fraction between 0 and 1
```

### `factionbayes.fixed_vocab`

- `Record(eye_color, mode, skill, faction)`, `parse_record(line)` and `trim(text)`.
- `NaiveBayes`: `train(path)` adds the records of a file to its counts,
  `predict(record)` returns `"good"` or `"evil"`, and `test(path)` prints each
  prediction and returns the accuracy in percent. File errors propagate as
  `OSError`.
- The constants `EYE_COLORS`, `MODES`, `SKILLS` and `FACTIONS`.

### `factionbayes.combined`

- `Sample(features, label)` and `load_labeled_data(path)`, which trims every
  field and skips lines without a label.
- `NaiveBayesClassifier`: `train(data)` replaces the model (an empty sequence
  leaves it unchanged; samples with differing feature counts raise
  `ValueError`), `predict(features)` returns the best label or `""` when
  untrained, and `evaluate(test_data)` prints results and returns the accuracy
  as a fraction.

### `factionbayes.subsets`

- `Sample(features, label)` and `load_data(path)`, which keeps fields as they
  are, fills missing ones with `""` and ignores text after a fourth comma.
- `NaiveBayesClassifier` with `train(data)` and `predict(features)`; ties go to
  the first label in sorted order.
- `evaluate_accuracy(classifier, test_data)` prints and returns the accuracy
  in percent.
- `split_and_evaluate(classifier, all_data, train_ratio, rng=None)` shuffles
  `all_data` in place with the given `random.Random`, trains on its leading
  share and returns the accuracy on the rest.

### `factionbayes.smoothed_prior`

- `Robot(eye_color, mode, skill, faction)`, `trim(text)` and
  `load_data(path, has_label=True)`, which skips lines missing an attribute
  and always reads the fourth field as the faction.
- `NaiveBayesClassifier`: `train(data)` adds robots to its counts across
  calls, and `predict(robot)` returns `"good"` or `"evil"`.

## Limitations

- Trained models live only in memory; there is no way to save or load them.
- The file loaders read exactly three features per line.
- The `fixed_vocab` and `smoothed_prior` models only know the two factions
  and three attributes listed above.