import logging

import pytest

from passcheck.services.similarity import find_similar_words, fold, similar_to_word


def test_fold_applies_case_and_substitutions():
    assert fold("Pa$$W0rD1") == "passwordl"
    assert fold("S0L$") == "sols"


def test_fold_leaves_other_characters():
    assert fold("@#2É") == "@#2É"


@pytest.mark.parametrize(
    "word,password",
    [
        ("password", "Password1"),
        ("password", "PASSWORD"),
        ("password", "Pa$$w0rd1"),
        ("hello", "he11o"),
        ("Solo", "$0L0!"),
        ("cat", "xxxxcat"),
    ],
)
def test_similar(word, password):
    assert similar_to_word(word, password)


def test_length_boundary():
    # word length 8: passwords up to 12 characters are penalised
    assert similar_to_word("password", "Pa$$w0rd1234")
    assert not similar_to_word("password", "Pa$$w0rd12345")
    assert not similar_to_word("cat", "xxxxxxxxxxxcat")


def test_match_must_be_contiguous():
    assert not similar_to_word("cat", "c-a-t")
    assert not similar_to_word("abc", "ab")


def test_empty_word_matches_short_passwords():
    assert similar_to_word("", "abcd")
    assert not similar_to_word("", "abcde")


def test_custom_slack():
    assert not similar_to_word("cat", "xcat", length_slack=0)
    assert similar_to_word("cat", "CAT", length_slack=0)


def test_find_similar_words_keeps_dictionary_order():
    dictionary = ["helloworld", "yellow", "loworl", "hellow"]
    assert find_similar_words("He1l0w0rld", dictionary) == ["helloworld", "loworl", "hellow"]


def test_find_similar_words_skips_non_strings(caplog):
    with caplog.at_level(logging.WARNING, logger="passcheck.services.similarity"):
        assert find_similar_words("Passw0rd", [None, 42, "password"]) == ["password"]
    assert "non-string dictionary entry" in caplog.text


@pytest.mark.parametrize("password", ["Pa$$w0rd1", "Pa$$w0rd12345", "xcat", "CAT", ""])
def test_find_similar_words_agrees_with_similar_to_word(password):
    dictionary = ["password", "cat", "", "dog"]
    expected = [word for word in dictionary if similar_to_word(word, password)]
    assert find_similar_words(password, dictionary) == expected
