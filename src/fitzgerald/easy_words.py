from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import FrozenSet, Iterable

EASY_WORDS_RESOURCE = "data/easy_words.txt"


def parse_easy_words(lines: Iterable[str]) -> FrozenSet[str]:
    """Build the lowercase easy-word set, skipping blanks and '#' comments."""
    words = set()
    for line in lines:
        entry = line.strip()
        if not entry or entry.startswith("#"):
            continue
        words.add(entry.lower())
    return frozenset(words)


@lru_cache(maxsize=1)
def _bundled_easy_words() -> FrozenSet[str]:
    resource = resources.files("fitzgerald").joinpath(EASY_WORDS_RESOURCE)
    return parse_easy_words(resource.read_text(encoding="utf-8").splitlines())


def load_easy_words(path: str | Path | None = None) -> FrozenSet[str]:
    """
    Load the easy-word dictionary.

    Parameters
    ----------
    path:
        Optional word list, one word per line. Defaults to the list bundled
        with the package.
    """
    if path is None:
        return _bundled_easy_words()
    contents = Path(path).read_text(encoding="utf-8")
    return parse_easy_words(contents.splitlines())
