"""Split story text into page-sized chunks along sentence boundaries.

A sentence is a maximal run of non-terminator characters followed by one or
more terminators (``.``, ``!``, ``?``). Text after the last terminator is not
a sentence and is ignored.

Distribution Rule
-----------------
With ``n`` sentences and ``p`` requested pages:

- ``n < p``: one chunk per sentence (fewer pages than requested).
- otherwise: each page takes ``ceil(n / p)`` consecutive sentences joined by
  a single space. Trailing pages may come out empty and are dropped rather
  than rebalanced, so ``split_story("A. B. C. D. E.", 4)`` yields three
  chunks.

Examples::

    >>> split_story("One. Two. Three.", 2)
    ['One. Two.', 'Three.']
    >>> split_story("A.", 4)
    ['A.']
    >>> split_story("No terminators here", 3)
    []
"""

import math
import re

from .errors import EmptyChunkResultError

_SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+")


def split_sentences(text: str) -> list[str]:
    """Return the trimmed, non-empty sentences found in ``text``."""
    sentences = (match.group(0).strip() for match in _SENTENCE_PATTERN.finditer(text))
    return [sentence for sentence in sentences if sentence]


def split_story(text: str, page_count: int) -> list[str]:
    """Split ``text`` into at most ``page_count`` ordered chunks.

    Args:
        text: Free-form story text.
        page_count: Requested number of pages (>= 1, no upper bound).

    Returns:
        Ordered list of non-empty chunks. Empty when ``text`` contains no
        terminated sentence.

    Raises:
        ValueError: If ``page_count`` is less than 1.
    """
    if page_count < 1:
        raise ValueError(f"page_count must be >= 1, got {page_count}")

    sentences = split_sentences(text)
    if len(sentences) < page_count:
        return sentences

    per_page = math.ceil(len(sentences) / page_count)
    chunks = [
        " ".join(sentences[i * per_page : (i + 1) * per_page]).strip()
        for i in range(page_count)
    ]
    return [chunk for chunk in chunks if chunk]


def chunk_story_or_raise(text: str, page_count: int) -> list[str]:
    """Like :func:`split_story`, but an empty result is an error.

    Raises:
        EmptyChunkResultError: If no chunk could be produced.
    """
    chunks = split_story(text, page_count)
    if not chunks:
        raise EmptyChunkResultError()
    return chunks
