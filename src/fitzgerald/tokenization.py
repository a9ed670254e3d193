from __future__ import annotations

import re
from typing import Iterator, List

from .models import Token

# Word characters plus the straight and curly apostrophes.
TOKEN_PATTERN = re.compile(r"[\w'‘’]+", re.UNICODE)


def iter_tokens(text: str) -> Iterator[Token]:
    """Yield word tokens with character offsets, left to right."""
    for match in TOKEN_PATTERN.finditer(text):
        yield Token(text=match.group(), start_char=match.start(), end_char=match.end())


def tokenize_words(text: str) -> List[Token]:
    """Tokenize text into word tokens with character offsets."""
    return list(iter_tokens(text))
