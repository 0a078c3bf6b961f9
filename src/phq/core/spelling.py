import typing


class SpellingError(Exception):
    """It seems like the user just misspelled a unit."""
    def __init__(
        self,
        name: str,
        suggested: typing.Union[str, typing.List[str]],
    ) -> None:
        self.name = name
        self.suggested = suggested

    def __str__(self) -> str:
        return f"Could not find '{self.name}'. {self.suggestion}"

    @property
    def suggestion(self) -> str:
        """The formatted spelling suggestion."""
        if isinstance(self.suggested, str):
            return f"Did you mean '{self.suggested}'?"
        if len(self.suggested) == 1:
            return f"Did you mean '{self.suggested[0]}'?"
        return f"Did you mean one of {self.suggested}?"


class SpellChecker:
    """A simple spell-checker for unit spellings.

    This is based on https://norvig.com/spell-correct.html, with the alphabet
    taken from the characters of the known words so that unit symbols such as
    '/', '^', and 'μ' take part in edits. Words two edits away are only sought
    for names of at most `limit` characters.
    """
    def __init__(self, *words: str, limit: int=10) -> None:
        self.words = set(words)
        self.limit = limit

    @property
    def letters(self) -> str:
        """The characters that may appear in an edit."""
        return ''.join(sorted({c for word in self.words for c in word}))

    def check(self, name: str, mode: str=None):
        """Check the spelling of `name` based on known words."""
        suggestions = self._check(name)
        if mode == 'suggest':
            return suggestions
        if mode == 'truth':
            return not suggestions
        if mode is not None:
            raise ValueError(f"Unknown mode {mode!r}") from None
        if suggestions:
            raise SpellingError(name, suggestions)

    def _check(self, name: str) -> typing.List[str]:
        """Internal helper for `~SpellChecker.check`."""
        if name in self.words:
            return []
        letters = self.letters
        edits = self.edits(name, letters)
        suggestions = self.known(edits)
        if not suggestions and len(name) <= self.limit:
            suggestions = self.known(
                second
                for first in edits
                for second in self.edits(first, letters)
            )
        return sorted(suggestions)

    def known(self, words: typing.Iterable[str]) -> typing.Set[str]:
        """The subset of `words` that is in the list of known words."""
        return {word for word in words if word in self.words}

    def edits(self, word: str, letters: str=None) -> typing.Set[str]:
        """All edits that are one edit away from `word`."""
        splits = self.splits(word)
        letters = letters or self.letters
        return set(
            self.deletes(splits)
            + self.transposes(splits)
            + self.replaces(splits, letters)
            + self.inserts(splits, letters)
        )

    def splits(self, word: str) -> typing.List[typing.Tuple[str, str]]:
        """The pairs of strings made by splitting `word` at each position."""
        return [(word[:i], word[i:]) for i in range(len(word) + 1)]

    def deletes(self, splits) -> typing.List[str]:
        """All words produced by deleting one character."""
        return [left + right[1:] for left, right in splits if right]

    def transposes(self, splits) -> typing.List[str]:
        """All words produced by transposing one pair of characters."""
        return [
            left + right[1] + right[0] + right[2:]
            for left, right in splits if len(right) > 1
        ]

    def replaces(self, splits, letters: str) -> typing.List[str]:
        """All words produced by replacing one character."""
        return [
            left + c + right[1:]
            for left, right in splits if right for c in letters
        ]

    def inserts(self, splits, letters: str) -> typing.List[str]:
        """All words produced by inserting one character."""
        return [left + c + right for left, right in splits for c in letters]
