"""Interactive spelling checker reading words from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence

from spellfix.autocorrect import AutoCorrect, sort_dictionary

DEFAULT_SOURCE = "dictionary/words_alpha.txt"
DEFAULT_DICTIONARY = "dictionary/words_alpha_sorted.txt"


def format_suggestions(title: str, words: Sequence[str]) -> str:
    """Render one group of suggestions as a single line."""
    return f"*** {title} ***\t:\t{', '.join(words)}\t({len(words)})"


def _suggestion_groups(corrector: AutoCorrect) -> Iterator[tuple[str, list[str]]]:
    yield "Incorrect Arrangement", corrector.letter_arrangement()
    yield "Exchanged 1 Character(s)", corrector.exchanged_letters(1)
    for count in (1, 2, 3):
        yield f"Extra {count} Character(s)", corrector.extra_letters(count)
    for count in (1, 2, 3):
        yield f"Missing {count} Character(s)", corrector.missing_letters(count)
    for missing, extra in ((1, 1), (2, 1), (1, 2), (2, 2)):
        yield (
            f"{missing} Missing & {extra} Extra Characters",
            corrector.missing_and_extra_letters(missing, extra),
        )


def report(corrector: AutoCorrect) -> str:
    """Return the text describing the spelling of the corrector's current word."""
    if corrector.check_spelling():
        return "\nSpelling of the word is correct.\n"
    parts = ["\nSpelling of the word is wrong. Possible right spellings are given below:\n\n"]
    lines = [format_suggestions(title, words) for title, words in _suggestion_groups(corrector) if words]
    parts.extend(f"{line}\n" for line in lines)
    if not lines:
        parts.append("\nNo such word exists.\n")
    return "".join(parts)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the dictionary, then check each word read from standard input."""
    parser = argparse.ArgumentParser(description="Check spelling and suggest corrections.")
    parser.add_argument("--source", default=DEFAULT_SOURCE, help="unsorted word list")
    parser.add_argument("--dictionary", default=DEFAULT_DICTIONARY, help="sorted word list to write and use")
    args = parser.parse_args(argv)

    sort_dictionary(args.source, args.dictionary)
    corrector = AutoCorrect(args.dictionary)
    tokens = _tokens(sys.stdin)
    while True:
        print("Enter a word: ", end="", flush=True)
        word = next(tokens, None)
        if word is None:
            print()
            return 0
        corrector.word = word.lower()
        print(report(corrector), end="")
        print("\n")


if __name__ == "__main__":
    sys.exit(main())