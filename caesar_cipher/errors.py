"""
Errors
======
Every failure the cipher can report is a ``CaesarError``.

    ConfigurationError     bad key, offset, or input source
    DegenerateCipherError  a plaintext letter would encrypt to itself
"""


class CaesarError(Exception):
    """Base class for all caesar_cipher errors."""


class ConfigurationError(CaesarError, ValueError):
    """Missing or invalid key, offset, or filename."""


class DegenerateCipherError(CaesarError):
    """Raised when the substitution maps at least one letter to itself."""

    def __init__(self, fixed_points):
        self.fixed_points = tuple(fixed_points)
        letters = ", ".join(self.fixed_points)
        super().__init__(
            f"degenerate cipher: letters mapped to themselves: {letters}"
        )
