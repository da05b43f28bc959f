import math

import pytest

from workbench.classifier import Classifier, main, unique_words

TRAINING = [
    {"tag": "euchre", "content": "trump card trick"},
    {"tag": "euchre", "content": "bower trump"},
    {"tag": "image", "content": "seam carve pixel"},
]


@pytest.fixture
def trained():
    classifier = Classifier()
    classifier.train(TRAINING)
    return classifier


def _write_csv(path, rows):
    lines = ["tag,content"] + [f"{row['tag']},{row['content']}" for row in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


def test_unique_words_drops_duplicates_and_whitespace():
    assert unique_words("a b  a\tc\n") == {"a", "b", "c"}


def test_unique_words_empty():
    assert unique_words("   ") == set()


def test_training_counts(trained):
    assert trained.total_posts == len(TRAINING)
    assert trained.vocabulary_size == len(
        set().union(*(unique_words(row["content"]) for row in TRAINING))
    )
    assert trained.labels == ["euchre", "image"]


def test_log_prior_matches_label_shares(trained):
    prior = trained.log_prior()
    assert list(prior) == ["euchre", "image"]
    assert prior["euchre"] == pytest.approx(math.log(2 / 3))
    assert prior["image"] == pytest.approx(math.log(1 / 3))
    assert sum(math.exp(value) for value in prior.values()) == pytest.approx(1.0)


def test_log_likelihood_word_seen_in_label(trained):
    assert trained.log_likelihood("trump", "euchre") == pytest.approx(math.log(2 / 2))
    assert trained.log_likelihood("card", "euchre") == pytest.approx(math.log(1 / 2))


def test_log_likelihood_word_seen_elsewhere_uses_overall_share(trained):
    assert trained.log_likelihood("trump", "image") == pytest.approx(math.log(2 / 3))


def test_log_likelihood_unknown_word(trained):
    assert trained.log_likelihood("zebra", "image") == pytest.approx(math.log(1 / 3))
    assert trained.log_likelihood("zebra", "euchre") == trained.log_likelihood("zebra", "image")


def test_log_likelihood_unknown_label(trained):
    with pytest.raises(KeyError):
        trained.log_likelihood("trump", "nosuchlabel")


def test_predict(trained):
    assert trained.predict("trump trick") == "euchre"
    assert trained.predict("pixel seam") == "image"


def test_predict_tie_goes_to_earlier_label():
    classifier = Classifier()
    classifier.train([{"tag": "beta", "content": "x"}, {"tag": "alpha", "content": "y"}])
    assert classifier.predict("unrelated") == "alpha"


def test_predict_untrained_raises():
    with pytest.raises(ValueError):
        Classifier().predict("anything")


def test_train_rejects_missing_column():
    with pytest.raises(ValueError):
        Classifier().train([{"label": "x", "content": "y"}])


def test_report_test(trained):
    rows = [
        {"tag": "euchre", "content": "trump trick"},
        {"tag": "euchre", "content": "seam pixel"},
    ]
    report = trained.report_test(rows)
    lines = report.splitlines()
    assert lines[0] == "test data:"
    assert lines[1].startswith("  correct = euchre, predicted = euchre, log-probability score = ")
    assert lines[2] == "  content = trump trick"
    assert lines[-1] == "performance: 1 / 2 posts predicted correctly"


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage: classifier.exe TRAIN_FILE [TEST_FILE]" in capsys.readouterr().out


def test_main_missing_train_file(tmp_path, capsys):
    missing = str(tmp_path / "missing.csv")
    assert main([missing]) == 1
    assert capsys.readouterr().out == f"Error opening file: {missing}\n"


def test_main_training_only(tmp_path, capsys):
    train = _write_csv(tmp_path / "train.csv", TRAINING)
    assert main([train]) == 0
    out = capsys.readouterr().out
    assert out.startswith("training data:\n")
    assert "classifier parameters:" in out


def test_main_with_test_file(tmp_path, capsys):
    train = _write_csv(tmp_path / "train.csv", TRAINING)
    test = _write_csv(tmp_path / "test.csv", [{"tag": "image", "content": "carve pixel"}])
    assert main([train, test]) == 0
    out = capsys.readouterr().out
    assert out.startswith("trained on 3 examples\n\ntest data:\n")
    assert out.endswith("performance: 1 / 1 posts predicted correctly\n")


def test_main_missing_test_file(tmp_path, capsys):
    train = _write_csv(tmp_path / "train.csv", TRAINING)
    missing = str(tmp_path / "missing.csv")
    assert main([train, missing]) == 1
    assert capsys.readouterr().out.endswith(f"Error opening file: {missing}\n")