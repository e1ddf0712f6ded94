import math
import random

import pytest

from factionbayes.subsets import (
    NaiveBayesClassifier,
    Sample,
    evaluate_accuracy,
    load_data,
    main,
    split_and_evaluate,
)

SEPARABLE = [
    Sample(("blue", "car", "repair"), "good"),
    Sample(("blue", "truck", "supply"), "good"),
    Sample(("red", "jet", "attack"), "evil"),
    Sample(("red", "animal", "attack"), "evil"),
]


def _write(path, lines):
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return str(path)


def test_load_data_keeps_whitespace(tmp_path):
    path = _write(tmp_path / "data.txt", ["red, car,attack,good "])
    assert load_data(path) == [Sample(("red", " car", "attack"), "good ")]


def test_load_data_pads_missing_fields(tmp_path):
    path = _write(tmp_path / "data.txt", ["red,car", ""])
    assert load_data(path) == [
        Sample(("red", "car", ""), ""),
        Sample(("", "", ""), ""),
    ]


def test_load_data_ignores_extra_fields(tmp_path):
    path = _write(tmp_path / "data.txt", ["red,car,attack,evil,extra"])
    assert load_data(path) == [Sample(("red", "car", "attack"), "evil")]


def test_load_data_missing_file(tmp_path):
    assert load_data(str(tmp_path / "absent.txt")) == []


@pytest.mark.parametrize(
    "features, expected",
    [
        (("red", "jet", "attack"), "evil"),
        (("blue", "car", "repair"), "good"),
    ],
)
def test_predict_separable(features, expected):
    classifier = NaiveBayesClassifier()
    classifier.train(SEPARABLE)
    assert classifier.predict(features) == expected


def test_train_on_empty_data_keeps_model():
    classifier = NaiveBayesClassifier()
    classifier.train(SEPARABLE)
    classifier.train([])
    assert classifier.total_samples == 4
    assert classifier.predict(("red", "jet", "attack")) == "evil"


def test_evaluate_accuracy_perfect(capsys):
    classifier = NaiveBayesClassifier()
    classifier.train(SEPARABLE)
    assert evaluate_accuracy(classifier, SEPARABLE) == 100.0
    assert "Accuracy on test data: 100%" in capsys.readouterr().out


def test_evaluate_accuracy_empty_is_nan(capsys):
    classifier = NaiveBayesClassifier()
    classifier.train(SEPARABLE)
    result = evaluate_accuracy(classifier, [])
    assert capsys.readouterr().out == "Accuracy on test data: nan%\n"
    assert math.isnan(result) is True


def test_evaluate_accuracy_untrained_gets_nothing_right():
    assert evaluate_accuracy(NaiveBayesClassifier(), SEPARABLE) == 0.0


def test_split_and_evaluate_shuffles_and_trains(capsys):
    data = list(SEPARABLE)
    classifier = NaiveBayesClassifier()
    accuracy = split_and_evaluate(classifier, data, 0.5, random.Random(7))
    assert sorted(data, key=repr) == sorted(SEPARABLE, key=repr)
    assert classifier.total_samples == 2
    assert 0.0 <= accuracy <= 100.0
    assert "Using 50% of the data for training (2 samples)" in capsys.readouterr().out


def test_split_and_evaluate_is_reproducible_with_seed():
    first = list(SEPARABLE)
    second = list(SEPARABLE)
    split_and_evaluate(NaiveBayesClassifier(), first, 0.75, random.Random(3))
    split_and_evaluate(NaiveBayesClassifier(), second, 0.75, random.Random(3))
    assert first == second


def test_main_reports_each_ratio(tmp_path, capsys):
    training = _write(
        tmp_path / "train.txt",
        [
            "blue,car,repair,good",
            "red,jet,attack,evil",
            "blue,truck,supply,good",
            "red,animal,attack,evil",
            "blue,car,scout,good",
        ],
    )
    testing = _write(tmp_path / "test.txt", ["blue,car,repair,good", "red,jet,attack,evil"])
    assert main([training, testing]) == 0
    out = capsys.readouterr().out
    assert "Using 40% of the training data (2 samples)" in out
    assert "Using 60% of the training data (3 samples)" in out
    assert "Using 80% of the training data (4 samples)" in out
    assert "Using 100% of the training data (5 samples)" in out
    assert out.count("Accuracy on test data:") == 4