"""
CaesarCipher
============
Keyword/offset substitution cipher in one object, for library use.

    c  = CaesarCipher(cypher_key="sassy", offset=3)
    ct = c.encrypt("Attack at dawn!")
    c.decrypt(ct)   # "Attack at dawn!"
"""

from typing import Optional, Union

from .cipher import create_cipher
from .config import CipherConfig
from .transcoder import decrypt, encrypt


class CaesarCipher:
    """Generalized Caesar / Aristocrat substitution cipher."""

    def __init__(self, plain_key: Optional[str] = None,
                 cypher_key: Optional[str] = None,
                 offset: Optional[Union[int, str]] = None):
        self._config  = CipherConfig(plain_key=plain_key, cypher_key=cypher_key,
                                     offset=offset)
        self._mapping = create_cipher(self._config)

    @property
    def mapping(self):
        return self._mapping

    @property
    def plain_alphabet(self) -> str:
        return "".join(self._mapping.plain_alphabet)

    @property
    def cipher_alphabet(self) -> str:
        return "".join(self._mapping.cipher_alphabet)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext, preserving case. Non-alpha characters pass through."""
        return encrypt(plaintext, self._mapping)

    def decrypt(self, ciphertext: str) -> str:
        return decrypt(ciphertext, self._mapping)
