"""
Cipher Constructor
==================
Zips the plaintext and ciphertext alphabets position by position into a
substitution map, and refuses any map in which a letter encrypts to itself:
a fixed point leaks plaintext straight into the ciphertext.

There is no repair step. If the keys and offset produce a fixed point the
caller has to pick different ones.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator, Sequence

from cryptography.hazmat.primitives import hashes

from .alphabet import ALPHABET, Alphabet, build_cipher_alphabet, build_plain_alphabet
from .errors import ConfigurationError, DegenerateCipherError

logger = logging.getLogger(__name__)


class SubstitutionMap(Mapping):
    """Immutable bijection between two 26-letter alphabets."""

    FINGERPRINT_SIZE = 16   # hex characters of the SHA-256 digest

    def __init__(self, plain_alphabet: Sequence[str], cipher_alphabet: Sequence[str]):
        self._plain  = tuple(plain_alphabet)
        self._cipher = tuple(cipher_alphabet)
        self._table  = MappingProxyType(dict(zip(self._plain, self._cipher)))

    @property
    def plain_alphabet(self) -> Alphabet:
        return self._plain

    @property
    def cipher_alphabet(self) -> Alphabet:
        return self._cipher

    def __getitem__(self, letter: str) -> str:
        return self._table[letter]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self):
        return f"SubstitutionMap({''.join(ALPHABET)} -> {''.join(self[c] for c in ALPHABET)})"

    def inverse(self) -> "SubstitutionMap":
        """Swap plaintext and ciphertext; used for decryption."""
        return SubstitutionMap(self._cipher, self._plain)

    def fingerprint(self) -> str:
        """Short SHA-256 identifier of the key, safe to print or log."""
        digest = hashes.Hash(hashes.SHA256())
        digest.update("".join(self[c] for c in ALPHABET).encode("ascii"))
        return digest.finalize().hex()[:self.FINGERPRINT_SIZE]


def _check_alphabet(alphabet: Sequence[str], name: str) -> None:
    if len(alphabet) != len(ALPHABET) or set(alphabet) != set(ALPHABET):
        raise ConfigurationError(f"{name} alphabet is not a permutation of a-z")


def build_cipher(plain_alphabet: Sequence[str],
                 cipher_alphabet: Sequence[str]) -> SubstitutionMap:
    """
    Pair ``plain_alphabet[i]`` with ``cipher_alphabet[i]``.

    Raises:
        ConfigurationError    : either alphabet is not a permutation of a-z
        DegenerateCipherError : some letter would map to itself
    """
    _check_alphabet(plain_alphabet, "plaintext")
    _check_alphabet(cipher_alphabet, "ciphertext")

    fixed = [p for p, c in zip(plain_alphabet, cipher_alphabet) if p == c]
    if fixed:
        raise DegenerateCipherError(fixed)

    mapping = SubstitutionMap(plain_alphabet, cipher_alphabet)
    logger.info("cipher built, key fingerprint %s", mapping.fingerprint())
    return mapping


def create_cipher(config) -> SubstitutionMap:
    """Build the substitution map described by a ``CipherConfig``."""
    if config.plain_key is None and config.cypher_key is None and config.offset is None:
        raise ConfigurationError("no key or offset set")
    plain  = build_plain_alphabet(config.plain_key)
    cipher = build_cipher_alphabet(config.cypher_key, config.offset)
    return build_cipher(plain, cipher)
