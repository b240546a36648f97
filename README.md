# spellfix

`spellfix` checks a word against a plain-text word list. If the word is not
in the list, it suggests corrections taken from the same list.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
spellfix [--source FILE] [--dictionary FILE]
```

- `--source`: the unsorted word list. Default: `dictionary/words_alpha.txt`.
- `--dictionary`: where the sorted word list is written and then read.
  Default: `dictionary/words_alpha_sorted.txt`.

On start-up the command sorts `--source`, removes duplicate words, and writes
the result to `--dictionary`. It then prompts `Enter a word: ` and reads
whitespace-separated words from standard input. It lower-cases each word
before checking it. The command exits with status 0 when input ends.

If the word is in the dictionary, the command prints
`Spelling of the word is correct.` If it is not, it prints each group of
suggestions that found something, in this order:

- `Incorrect Arrangement`: the same letters in a different order
- `Exchanged 1 Character(s)`: one position different
- `Extra N Character(s)` for N = 1, 2, 3
- `Missing N Character(s)` for N = 1, 2, 3
- `M Missing & E Extra Characters` for (M, E) = (1, 1), (2, 1), (1, 2), (2, 2)

Each group is printed on one line, in this form:

```
*** Missing 1 Character(s) ***	:	cart, cast	(2)
```

If no group finds anything, the command prints `No such word exists.`

## Library use

```python
from spellfix.autocorrect import AutoCorrect, sort_dictionary

# Write a sorted copy of a word list with duplicates removed, one word per line.
sort_dictionary("words.txt", "words_sorted.txt")

corrector = AutoCorrect("words_sorted.txt", "teh")
if not corrector.check_spelling():
    print(corrector.letter_arrangement())              # anagrams, e.g. "the"
    print(corrector.exchanged_letters(1))              # exactly 1 position different
    print(corrector.missing_letters(1))                # 1 letter missing
    print(corrector.extra_letters(1))                  # 1 letter too many
    print(corrector.missing_and_extra_letters(1, 1))   # exactly 1 missing and 1 extra
    print(corrector.check_all(2, 2, True))             # at most 2 missing and 2 extra, letters sorted
```

`AutoCorrect` is a dataclass with two fields, `dictionary_filename` and
`word`. You can assign a new value to `word` between checks. Each check reads
the dictionary file again. A check returns the matching words in the order
they appear in the file.

- `check_spelling()` reads the list in order and stops at the first word that
  sorts after the word being checked. It therefore needs a sorted list, such
  as one written by `sort_dictionary`.
- The methods that take counts raise `ValueError` for a negative count. They
  return an empty list when a required count is zero.
- `check_all` returns an empty list only when both counts are zero.

The module `spellfix.cli` also provides two functions:

- `format_suggestions(title, words)` renders one suggestion line in the form
  shown above.
- `report(corrector)` returns the full text that the command prints for the
  corrector's current word.

## Dictionary format

A dictionary is a UTF-8 text file of words separated by whitespace, usually
one word per line. Words are compared exactly as written. The command
lower-cases its input, so use a lower-case word list with it.

## Limitations

- No word list is included. Supply your own through `--source`, or place one
  at the default path.
- Suggestions are not ranked. Within a group they appear in the order the
  dictionary lists them.