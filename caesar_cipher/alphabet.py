"""
Alphabet Builder
================
Derives the ordered plaintext and ciphertext alphabets from an optional
keyword and an optional offset.

Keyword (Aristocrat convention, American Cryptogram Association):
    the keyword is written first with repeated letters dropped, so that
    "sassy" becomes "say", then the rest of the alphabet follows in order.

Offset (Caesar convention):
    the ciphertext alphabet is rotated left, so offset 3 maps a -> d.
    Combined with a keyword, only the letters left over after the keyword
    are rotated.
"""

import logging
import string
from typing import Optional, Tuple, Union

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase
ALPHABET_SIZE = len(ALPHABET)

Alphabet = Tuple[str, ...]


def validate_keyword(keyword: str) -> str:
    """Return the keyword lowercased, or raise if it holds non-letters."""
    if not keyword or any(ch not in string.ascii_letters for ch in keyword):
        raise ConfigurationError("key uses non-alphabetic characters")
    return keyword.lower()


def dedupe_keyword(keyword: str) -> str:
    """Drop repeated letters, keeping the first occurrence of each."""
    placed = set()
    ordered = []
    for letter in validate_keyword(keyword):
        if letter not in placed:
            ordered.append(letter)
            placed.add(letter)
    return "".join(ordered)


def normalize_offset(value: Union[int, str]) -> int:
    """
    Turn an offset given as an int, a single letter, or a decimal string
    into an int in [0, 25].
    """
    # bool is an int subclass; True is not an offset
    if isinstance(value, bool):
        raise ConfigurationError("invalid offset")
    if isinstance(value, int):
        offset = value
    elif isinstance(value, str) and len(value) == 1 and value in string.ascii_letters:
        offset = ALPHABET.index(value.lower())
    elif isinstance(value, str) and value.isdigit() and value.isascii():
        offset = int(value)
    else:
        raise ConfigurationError("invalid offset")
    if not 0 <= offset < ALPHABET_SIZE:
        raise ConfigurationError("invalid offset")
    return offset


def _rotate(letters: str, offset: int) -> str:
    if not letters:
        return letters
    shift = offset % len(letters)
    return letters[shift:] + letters[:shift]


def _keyed(keyword: Optional[str]) -> Tuple[str, str]:
    """Split the alphabet into (keyword letters, unused tail)."""
    head = dedupe_keyword(keyword) if keyword is not None else ""
    tail = "".join(ch for ch in ALPHABET if ch not in head)
    return head, tail


def build_plain_alphabet(keyword: Optional[str] = None) -> Alphabet:
    head, tail = _keyed(keyword)
    logger.debug("plain alphabet keyed with %d letters", len(head))
    return tuple(head + tail)


def build_cipher_alphabet(keyword: Optional[str] = None,
                          offset: Optional[Union[int, str]] = None) -> Alphabet:
    """
    Build the ciphertext alphabet.

    Without a keyword the whole alphabet is rotated by ``offset``; with one,
    the keyword letters stay in front and only the unused tail is rotated.
    """
    head, tail = _keyed(keyword)
    if offset is not None:
        tail = _rotate(tail, normalize_offset(offset))
    logger.debug("cipher alphabet keyed with %d letters, offset=%s",
                 len(head), offset)
    return tuple(head + tail)
