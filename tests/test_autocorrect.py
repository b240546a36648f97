import pytest

from spellfix.autocorrect import AutoCorrect, sort_dictionary

WORDS = ["act", "apple", "bat", "cat", "cats", "coat", "dog", "scat", "tac"]


@pytest.fixture
def dictionary(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return path


def make(dictionary, word):
    return AutoCorrect(dictionary, word)


@pytest.mark.parametrize("word", WORDS)
def test_check_spelling_finds_every_word(dictionary, word):
    assert make(dictionary, word).check_spelling() is True


@pytest.mark.parametrize("word", ["cab", "zzz", "", "aaa"])
def test_check_spelling_rejects_unknown(dictionary, word):
    assert make(dictionary, word).check_spelling() is False


def test_word_can_be_changed(dictionary):
    corrector = make(dictionary, "cab")
    assert not corrector.check_spelling()
    corrector.word = "cat"
    assert corrector.check_spelling()


def test_letter_arrangement(dictionary):
    assert make(dictionary, "tca").letter_arrangement() == ["act", "cat", "tac"]


def test_letter_arrangement_results_are_anagrams(dictionary):
    for candidate in make(dictionary, "stca").letter_arrangement():
        assert sorted(candidate) == sorted("stca")
    assert set(make(dictionary, "stca").letter_arrangement()) == {"cats", "scat"}


def test_exchanged_letters(dictionary):
    assert make(dictionary, "cot").exchanged_letters() == ["cat"]
    assert make(dictionary, "cot").exchanged_letters(0) == []


def test_exchanged_letters_two(dictionary):
    result = make(dictionary, "cot").exchanged_letters(2)
    assert "bat" in result and "act" in result
    assert all(len(w) == 3 for w in result)


def test_missing_letters(dictionary):
    assert make(dictionary, "ct").missing_letters() == ["act", "cat"]
    assert make(dictionary, "ct").missing_letters(0) == []


def test_missing_letters_two(dictionary):
    assert "cats" in make(dictionary, "ct").missing_letters(2)


def test_extra_letters(dictionary):
    assert make(dictionary, "caat").extra_letters() == ["cat"]
    assert make(dictionary, "caat").extra_letters(0) == []


def test_missing_and_extra_letters(dictionary):
    assert make(dictionary, "cbt").missing_and_extra_letters() == ["cat"]
    assert make(dictionary, "cbt").missing_and_extra_letters(0, 1) == []
    assert make(dictionary, "cbt").missing_and_extra_letters(1, 0) == []


def test_check_all(dictionary):
    assert make(dictionary, "cat").check_all() == ["bat", "cat", "cats"]


def test_check_all_disarranged(dictionary):
    assert make(dictionary, "tca").check_all(1, 1, True) == ["act", "bat", "cat", "tac"]


def test_check_all_zero_limits(dictionary):
    assert make(dictionary, "cat").check_all(0, 0) == []


def test_negative_count_raises(dictionary):
    with pytest.raises(ValueError):
        make(dictionary, "cat").missing_letters(-1)


def test_missing_dictionary_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        AutoCorrect(tmp_path / "absent.txt", "cat").check_spelling()


def test_sort_dictionary(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("pear apple\napple  fig\n", encoding="utf-8")
    sort_dictionary(source, target)
    assert target.read_text(encoding="utf-8") == "apple\nfig\npear\n"


def test_sort_dictionary_is_idempotent(tmp_path):
    source = tmp_path / "in.txt"
    once = tmp_path / "once.txt"
    twice = tmp_path / "twice.txt"
    source.write_text("dog cat bat cat\n", encoding="utf-8")
    sort_dictionary(source, once)
    sort_dictionary(once, twice)
    assert once.read_text(encoding="utf-8") == twice.read_text(encoding="utf-8")
    lines = once.read_text(encoding="utf-8").split()
    assert lines == sorted(set(lines))