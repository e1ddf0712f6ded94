import math

import pytest

from factionbayes.fixed_vocab import NaiveBayes, Record, main, parse_record, trim

TRAINING_LINES = [
    "red,truck,repair,good",
    "red,truck,repair,good",
    "blue,car,repair,good",
    "red,jet,scout,good",
    "yellow,animal,attack,evil",
    "yellow,animal,attack,evil",
    "blue,animal,attack,evil",
    "yellow,jet,supply,evil",
]


def _write(tmp_path, name, lines):
    path = tmp_path / name
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return str(path)


@pytest.fixture
def trained(tmp_path):
    classifier = NaiveBayes()
    classifier.train(_write(tmp_path, "train.txt", TRAINING_LINES))
    return classifier


def test_trim_strips_whitespace_and_line_breaks():
    assert trim("  good\r\n") == "good"
    assert trim(" \t\r\n") == ""
    assert trim("a b") == "a b"


def test_parse_record_trims_only_faction():
    assert parse_record("red,car,scout, evil \r") == Record("red", "car", "scout", "evil")
    assert parse_record(" red,car,scout,evil").eye_color == " red"


def test_parse_record_missing_fields_are_empty():
    assert parse_record("red,car") == Record("red", "car", "", "")


def test_parse_record_keeps_extra_commas_in_faction():
    assert parse_record("red,car,scout,evil,extra").faction == "evil,extra"


def test_train_counts_records(trained):
    assert trained.total_records == len(TRAINING_LINES)
    assert trained.class_counts["good"] == 4
    assert trained.class_counts["evil"] == 4
    assert trained.feature_counts["eye_color"]["red"]["good"] == 3


def test_predict_separable_examples(trained):
    assert trained.predict(Record("red", "truck", "repair", "")) == "good"
    assert trained.predict(Record("yellow", "animal", "attack", "")) == "evil"


def test_predict_untrained_defaults_to_first_faction():
    assert NaiveBayes().predict(Record("red", "car", "scout", "")) == "good"


def test_predict_only_seen_faction_wins(tmp_path):
    classifier = NaiveBayes()
    classifier.train(_write(tmp_path, "train.txt", ["yellow,animal,attack,good"]))
    assert classifier.predict(Record("yellow", "animal", "attack", "")) == "good"


def test_test_reports_each_prediction_and_accuracy(trained, tmp_path, capsys):
    test_lines = [
        "red,truck,repair,good",
        "yellow,animal,attack,evil",
        "red,truck,repair,evil",
    ]
    accuracy = trained.test(_write(tmp_path, "test.txt", test_lines))
    output = capsys.readouterr().out.splitlines()
    predictions = output[:-1]
    assert len(predictions) == len(test_lines)
    assert predictions[0] == "Predicted: good, Actual: good"
    matches = sum(
        line.split(", Actual: ")[0].removeprefix("Predicted: ") == line.split(", Actual: ")[1]
        for line in predictions
    )
    assert accuracy == pytest.approx(matches / len(test_lines) * 100)
    assert output[-1] == f"Accuracy: {accuracy:g}%"


def test_test_on_empty_file_gives_nan(trained, tmp_path, capsys):
    accuracy = trained.test(_write(tmp_path, "empty.txt", []))
    assert math.isnan(accuracy)
    assert capsys.readouterr().out.strip() == "Accuracy: nan%"


def test_train_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        NaiveBayes().train(str(tmp_path / "missing.txt"))


def test_main_runs_on_given_files(tmp_path, capsys):
    train_path = _write(tmp_path, "train.txt", TRAINING_LINES)
    test_path = _write(tmp_path, "test.txt", ["red,truck,repair,good"])
    assert main([train_path, test_path]) == 0
    assert "Predicted: good, Actual: good" in capsys.readouterr().out


def test_main_reports_missing_file(tmp_path, capsys):
    missing = str(tmp_path / "missing.txt")
    assert main([missing, missing]) == 1
    assert f"Failed to open file: {missing}" in capsys.readouterr().err