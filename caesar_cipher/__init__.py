"""
caesar_cipher
=============
Generalized Caesar / Aristocrat substitution cipher.

Pipeline:
    alphabet    — plaintext and ciphertext alphabets from keywords and offset
    cipher      — position-wise substitution map, rejects fixed points
    transcoder  — applies the map, case and punctuation preserved

Historical note: Julius Caesar shifted by three. The American Cryptogram
Association's Aristocrats key the alphabet with a word instead.
Neither is secure; both are fun.
"""

__version__ = "0.1.0"

from .errors      import CaesarError, ConfigurationError, DegenerateCipherError
from .alphabet    import build_plain_alphabet, build_cipher_alphabet, normalize_offset
from .cipher      import SubstitutionMap, build_cipher, create_cipher
from .transcoder  import encrypt, decrypt
from .config      import CipherConfig
from .facade      import CaesarCipher

__all__ = [
    "CaesarError",
    "ConfigurationError",
    "DegenerateCipherError",
    "build_plain_alphabet",
    "build_cipher_alphabet",
    "normalize_offset",
    "SubstitutionMap",
    "build_cipher",
    "create_cipher",
    "encrypt",
    "decrypt",
    "CipherConfig",
    "CaesarCipher",
]
