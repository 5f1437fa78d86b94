"""Uppercase-letter counting workloads and their input generator."""

from functools import partial
import random
import string

from .strategy import SweepStrategy

LETTERS = string.ascii_lowercase + string.ascii_uppercase + string.digits + " "


def generate_random_text(length: int, rng: random.Random) -> str:
    """Return `length` characters drawn uniformly from LETTERS."""
    return "".join(rng.choice(LETTERS) for _ in range(length))


def _is_capital(ch: str) -> bool:
    return "A" <= ch <= "Z"


def count_capitals_iterative(text: str) -> int:
    count = 0
    for ch in text:
        if _is_capital(ch):
            count += 1
    return count


def count_capitals_recursive(text: str, idx: int = 0) -> int:
    """Count capitals with one call per character.

    There is no depth guard: inputs longer than the interpreter's recursion
    limit raise RecursionError.
    """
    if idx >= len(text):
        return 0
    c = 1 if _is_capital(text[idx]) else 0
    return c + count_capitals_recursive(text, idx + 1)


class TextCorpus:
    """Seeded source of input texts, generated once per size.

    Strategies compared at the same size receive the identical string.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)
        self._texts: dict[int, str] = {}

    def text(self, size: int) -> str:
        if size not in self._texts:
            self._texts[size] = generate_random_text(size, self._rng)
        return self._texts[size]


def capital_count_strategies(corpus: TextCorpus) -> list[SweepStrategy]:
    """Recursive (isolated) and iterative (direct) capital counting, in that order."""
    return [
        SweepStrategy(
            name="recursive",
            isolate=True,
            unit_factory=lambda size: partial(count_capitals_recursive, corpus.text(size)),
        ),
        SweepStrategy(
            name="iterative",
            isolate=False,
            unit_factory=lambda size: partial(count_capitals_iterative, corpus.text(size)),
        ),
    ]
