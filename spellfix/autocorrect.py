"""Dictionary-backed spelling checks and correction suggestions."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def _read_words(path: PathLike) -> Iterator[str]:
    """Yield the whitespace-separated words of a file, in file order."""
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            yield from line.split()


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _align(wrong: str, candidate: str) -> tuple[int, int, int, int]:
    """Walk both words in step, treating every mismatch as one extra and one missing.

    Returns the final positions in each word and the mismatch count twice,
    as (i, j, extra, missing) before the trailing remainders are added.
    """
    i = j = mismatches = 0
    while i < len(wrong) and j < len(candidate):
        if wrong[i] != candidate[j]:
            mismatches += 1
        i += 1
        j += 1
    return i, j, mismatches, mismatches


def _missing_count(wrong: str, candidate: str) -> int:
    """Letters of the candidate skipped while matching the wrong word against it."""
    i = j = misses = 0
    while i < len(wrong) and j < len(candidate):
        if wrong[i] == candidate[j]:
            i += 1
        else:
            misses += 1
        j += 1
    return misses + len(candidate) - j


def _extra_count(wrong: str, candidate: str) -> int:
    """Letters of the wrong word skipped while matching it against the candidate."""
    i = j = extras = 0
    while i < len(wrong) and j < len(candidate):
        if wrong[i] == candidate[j]:
            j += 1
        else:
            extras += 1
        i += 1
    return extras + len(wrong) - i


def _missing_and_extra(wrong: str, candidate: str) -> tuple[int, int]:
    """Return (missing, extra) counts for a positional comparison of two words."""
    i, j, extra, missing = _align(wrong, candidate)
    return missing + len(candidate) - j, extra + len(wrong) - i


@dataclass
class AutoCorrect:
    """Checks one word against a dictionary file and suggests corrections.

    The dictionary is a text file of whitespace-separated words; it is read
    afresh on every check. ``check_spelling`` expects the file to be sorted.
    """

    dictionary_filename: PathLike
    word: str = ""

    def _words(self) -> Iterator[str]:
        return _read_words(self.dictionary_filename)

    def check_spelling(self) -> bool:
        """Return True if the word is in the (sorted) dictionary."""
        for candidate in self._words():
            if self.word < candidate:
                return False
            if self.word == candidate:
                return True
        return False

    def letter_arrangement(self) -> list[str]:
        """Dictionary words made of exactly the same letters as the word."""
        key = sorted(self.word)
        return [
            candidate
            for candidate in self._words()
            if len(candidate) == len(self.word) and sorted(candidate) == key
        ]

    def exchanged_letters(self, exchanged: int = 1) -> list[str]:
        """Words of equal length differing from the word in exactly ``exchanged`` positions."""
        _check_count("exchanged", exchanged)
        if exchanged == 0:
            return []
        return [
            candidate
            for candidate in self._words()
            if len(candidate) == len(self.word)
            and sum(a != b for a, b in zip(self.word, candidate)) == exchanged
        ]

    def missing_letters(self, missing: int = 1) -> list[str]:
        """Words obtained by inserting ``missing`` letters into the word."""
        _check_count("missing", missing)
        if missing == 0:
            return []
        return [
            candidate
            for candidate in self._words()
            if len(self.word) + missing == len(candidate)
            and _missing_count(self.word, candidate) == missing
        ]

    def extra_letters(self, extra: int = 1) -> list[str]:
        """Words obtained by deleting ``extra`` letters from the word."""
        _check_count("extra", extra)
        if extra == 0:
            return []
        return [
            candidate
            for candidate in self._words()
            if len(self.word) == len(candidate) + extra
            and _extra_count(self.word, candidate) == extra
        ]

    def missing_and_extra_letters(self, missing: int = 1, extra: int = 1) -> list[str]:
        """Words with exactly ``missing`` missing and ``extra`` extra letters."""
        _check_count("missing", missing)
        _check_count("extra", extra)
        if missing == 0 or extra == 0:
            return []
        return [
            candidate
            for candidate in self._words()
            if len(self.word) + missing == len(candidate) + extra
            and _missing_and_extra(self.word, candidate) == (missing, extra)
        ]

    def check_all(self, missing: int = 1, extra: int = 1, disarranged: bool = False) -> list[str]:
        """Words with at most ``missing`` missing and ``extra`` extra letters.

        With ``disarranged`` the letters of both words are sorted before comparing.
        """
        _check_count("missing", missing)
        _check_count("extra", extra)
        if not (missing or extra):
            return []
        wrong = "".join(sorted(self.word)) if disarranged else self.word
        found = []
        for candidate in self._words():
            key = "".join(sorted(candidate)) if disarranged else candidate
            if not (len(wrong) <= len(key) + extra and len(wrong) + missing >= len(key)):
                continue
            misses, extras = _missing_and_extra(wrong, key)
            if misses <= missing and extras <= extra:
                found.append(candidate)
        return found


def sort_dictionary(unsorted_filename: PathLike, sorted_filename: PathLike) -> None:
    """Write the distinct words of one file, sorted, one per line, to another."""
    words = sorted(set(_read_words(unsorted_filename)))
    with open(sorted_filename, "w", encoding="utf-8") as handle:
        handle.writelines(f"{word}\n" for word in words)