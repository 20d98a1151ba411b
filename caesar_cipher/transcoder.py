"""
Transcoder
==========
Applies a substitution map to text. ASCII letters are substituted with
their case kept; everything else (spaces, digits, punctuation, accented
letters) passes through untouched, so output length equals input length.
"""

from typing import Iterable, Iterator, Mapping


def _substitute(ch: str, mapping: Mapping[str, str]) -> str:
    lower = ch.lower()
    if ch.isascii() and lower in mapping:
        out = mapping[lower]
        return out.upper() if ch.isupper() else out
    return ch


def encrypt(text: str, mapping: Mapping[str, str]) -> str:
    """Encrypt text. Non-alpha characters pass through."""
    return "".join(_substitute(ch, mapping) for ch in text)


def decrypt(text: str, mapping) -> str:
    """Decrypt text produced by ``encrypt`` with the same map."""
    return encrypt(text, mapping.inverse())


def transcode_stream(chunks: Iterable[str], mapping: Mapping[str, str]) -> Iterator[str]:
    """Encrypt an iterable of chunks (e.g. file lines) one at a time."""
    for chunk in chunks:
        yield encrypt(chunk, mapping)
