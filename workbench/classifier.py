"""A bag-of-words naive Bayes classifier for labelled posts read from CSV files."""

from __future__ import annotations

import csv
import math
import sys
from collections import Counter, defaultdict
from collections.abc import Iterable, Iterator, Mapping, Sequence

USAGE = "Usage: classifier.exe TRAIN_FILE [TEST_FILE]"
LABEL_COLUMN = "tag"
CONTENT_COLUMN = "content"


def unique_words(text: str) -> set[str]:
    """Return the set of whitespace-separated words in ``text``."""
    return set(text.split())


def _fmt(value: float) -> str:
    """Format a number with three significant digits."""
    return format(value, ".3g")


def _fields(row: Mapping[str, str]) -> tuple[str, str]:
    try:
        return row[LABEL_COLUMN], row[CONTENT_COLUMN]
    except KeyError as error:
        raise ValueError(f"row is missing column {error.args[0]!r}") from None


class Classifier:
    """Learns word frequencies per label and predicts the most likely label of a post."""

    def __init__(self) -> None:
        self._total_posts = 0
        self._vocabulary: set[str] = set()
        self._posts_per_label: Counter[str] = Counter()
        self._posts_per_word: Counter[str] = Counter()
        self._posts_per_label_word: defaultdict[str, Counter[str]] = defaultdict(Counter)
        self._training: list[tuple[str, str]] = []

    @property
    def total_posts(self) -> int:
        """Number of posts trained on."""
        return self._total_posts

    @property
    def vocabulary_size(self) -> int:
        """Number of distinct words seen in training."""
        return len(self._vocabulary)

    @property
    def labels(self) -> list[str]:
        """The labels seen in training, in sorted order."""
        return sorted(self._posts_per_label)

    def train(self, rows: Iterable[Mapping[str, str]]) -> None:
        """Learn from rows holding a ``tag`` label and ``content`` text."""
        for row in rows:
            label, post = _fields(row)
            self._training.append((label, post))
            self._total_posts += 1
            self._posts_per_label[label] += 1
            for word in unique_words(post):
                self._vocabulary.add(word)
                self._posts_per_word[word] += 1
                self._posts_per_label_word[label][word] += 1

    def log_prior(self) -> dict[str, float]:
        """Return the log of the share of training posts carrying each label."""
        return {
            label: math.log(count / self._total_posts)
            for label, count in sorted(self._posts_per_label.items())
        }

    def log_likelihood(self, word: str, label: str) -> float:
        """Return the log-likelihood of ``word`` appearing in a post labelled ``label``."""
        if label not in self._posts_per_label:
            raise KeyError(f"unknown label: {label!r}")
        count_in_label = self._posts_per_label_word[label][word] if label in self._posts_per_label_word else 0
        if count_in_label:
            return math.log(count_in_label / self._posts_per_label[label])
        if word in self._posts_per_word:
            return math.log(self._posts_per_word[word] / self._total_posts)
        return math.log(1 / self._total_posts)

    def _score(self, words: Iterable[str], label: str, prior: Mapping[str, float]) -> float:
        score = prior[label]
        for word in sorted(words):
            score += self.log_likelihood(word, label)
        return score

    def _scored_prediction(self, post: str) -> tuple[str, float]:
        if not self._posts_per_label:
            raise ValueError("classifier has not been trained")
        words = unique_words(post)
        prior = self.log_prior()
        # Labels are visited in sorted order and max keeps the first best, so ties go
        # to the label earliest in the alphabet.
        scores = ((label, self._score(words, label, prior)) for label in sorted(prior))
        return max(scores, key=lambda item: item[1])

    def predict(self, post: str) -> str:
        """Return the label with the highest log-probability score for ``post``."""
        return self._scored_prediction(post)[0]

    def _training_lines(self) -> Iterator[str]:
        yield "training data:\n"
        for label, post in self._training:
            yield f"  label = {label}, content = {post}\n"
        yield f"trained on {self._total_posts} examples\n"
        yield f"vocabulary size = {len(self._vocabulary)}\n"
        yield "\n"
        prior = self.log_prior()
        yield "classes:\n"
        for label in sorted(self._posts_per_label):
            yield (
                f"  {label}, {self._posts_per_label[label]} examples, "
                f"log-prior = {_fmt(prior[label])}\n"
            )
        yield "classifier parameters:\n"
        for label in sorted(self._posts_per_label):
            counts = self._posts_per_label_word.get(label, Counter())
            for word in sorted(self._posts_per_word):
                count = counts[word]
                if count > 0:
                    yield (
                        f"  {label}:{word}, count = {count}, "
                        f"log-likelihood = {_fmt(self.log_likelihood(word, label))}\n"
                    )
        yield "\n"

    def report_training(self) -> str:
        """Return a description of the training data and the learned parameters."""
        return "".join(self._training_lines())

    def report_test(self, rows: Iterable[Mapping[str, str]]) -> str:
        """Return the prediction for each test row followed by the overall accuracy."""
        lines = ["test data:\n"]
        correct = total = 0
        for row in rows:
            label, post = _fields(row)
            prediction, score = self._scored_prediction(post)
            lines.append(
                f"  correct = {label}, predicted = {prediction}, "
                f"log-probability score = {_fmt(score)}\n"
            )
            lines.append(f"  content = {post}\n\n")
            correct += prediction == label
            total += 1
        lines.append(f"performance: {correct} / {total} posts predicted correctly\n")
        return "".join(lines)


def _read_rows(filename: str) -> list[dict[str, str]]:
    with open(filename, newline="", encoding="utf-8") as handle:
        return list(csv.DictReader(handle))


def main(argv: Sequence[str] | None = None) -> int:
    """Train on TRAIN_FILE and, if TEST_FILE is given, report predictions for it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (1, 2):
        print(USAGE)
        return 1

    train_file = args[0]
    try:
        train_rows = _read_rows(train_file)
    except OSError:
        print(f"Error opening file: {train_file}")
        return 1

    classifier = Classifier()
    try:
        classifier.train(train_rows)
    except ValueError as error:
        print(f"Error reading {train_file}: {error}")
        return 1

    if len(args) == 1:
        print(classifier.report_training(), end="")
        return 0

    print(f"trained on {classifier.total_posts} examples")
    print()

    test_file = args[1]
    try:
        test_rows = _read_rows(test_file)
    except OSError:
        print(f"Error opening file: {test_file}")
        return 1
    try:
        print(classifier.report_test(test_rows), end="")
    except ValueError as error:
        print(f"Error reading {test_file}: {error}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())