import pytest

from dsakit.textutil import clean_string, is_clean_palindrome, is_palindrome


def test_source_word_is_palindrome():
    assert is_palindrome("mom") is True


def test_empty_is_palindrome():
    assert is_palindrome("") is True


@pytest.mark.parametrize("half", ["a", "ab", "xyz", "hello"])
def test_mirrored_text_is_palindrome(half):
    assert is_palindrome(half + half[::-1])
    assert is_palindrome(half + "q" + half[::-1])


def test_non_palindrome():
    assert is_palindrome("ab") is False


def test_clean_string():
    assert clean_string("A man, a plan, a canal: Panama") == "amanaplanacanalpanama"


def test_clean_string_drops_non_ascii():
    assert clean_string("Café!") == "caf"


def test_clean_string_is_idempotent():
    text = "Hello, World 42!"
    assert clean_string(clean_string(text)) == clean_string(text)


def test_source_phrase_is_not_palindrome():
    assert is_clean_palindrome("A man, a plan, a canal: Panamaa") is False


def test_classic_phrase_is_palindrome():
    assert is_clean_palindrome("A man, a plan, a canal: Panama") is True