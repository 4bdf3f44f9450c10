from __future__ import annotations

import pytest

from jobmatch.text import STOP_WORDS, count_terms, normalize, term_frequencies, tokenize


def test_normalize_lowercases_and_handles_missing_text():
    assert normalize("Senior PYTHON Developer") == "senior python developer"
    assert normalize("") == ""
    assert normalize(None) == ""


def test_tokenize_strips_punctuation_short_words_and_stop_words():
    text = normalize("Python, Django & REST-APIs; work with the team (remote).")
    assert tokenize(text) == ["python", "django", "rest", "apis", "team", "remote"]


@pytest.mark.parametrize("word", ["because", "could", "these", "first"])
def test_tokenize_drops_long_stop_words(word):
    assert word in STOP_WORDS
    assert tokenize(f"{word} kubernetes") == ["kubernetes"]


def test_tokenize_keeps_order_and_duplicates():
    text = "docker python docker"
    assert tokenize(text) == ["docker", "python", "docker"]
    assert tokenize(text) == tokenize(text)


def test_count_terms_accumulates_occurrences():
    counts = count_terms(["docker", "python", "docker"])
    assert counts == {"docker": 2, "python": 1}
    assert counts["golang"] == 0


def test_term_frequencies_runs_the_whole_pipeline():
    assert term_frequencies("Docker, docker and DOCKER!") == {"docker": 3}
    assert term_frequencies(None) == {}


def test_tokenize_drops_words_of_three_characters_or_fewer():
    assert tokenize("sql aws go python") == ["python"]
    assert tokenize("java") == ["java"]
    assert term_frequencies("SQL, AWS & GCP") == {}
