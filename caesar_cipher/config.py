"""
Configuration
=============
One immutable value holds everything an invocation needs: the two
keywords, the offset, and where the text comes from. Invalid settings are
rejected when the value is built, never later.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional, Union

from .alphabet import normalize_offset, validate_keyword
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

SUFFIX = ".caesar"


@dataclass(frozen=True)
class CipherConfig:
    """Validated cipher settings and input source."""

    plain_key:  Optional[str] = None
    cypher_key: Optional[str] = None
    offset:     Optional[Union[int, str]] = None
    input_file: Optional[str] = None
    text:       Optional[str] = None

    def __post_init__(self):
        if self.plain_key is not None:
            object.__setattr__(self, "plain_key", validate_keyword(self.plain_key))
        if self.cypher_key is not None:
            object.__setattr__(self, "cypher_key", validate_keyword(self.cypher_key))
        if self.offset is not None:
            object.__setattr__(self, "offset", normalize_offset(self.offset))
        if self.plain_key is None and self.cypher_key is None and self.offset is None:
            raise ConfigurationError("no key or offset set")
        if self.input_file is not None and self.text is not None:
            raise ConfigurationError("give either a text or an input file, not both")
        if self.input_file is not None and not self.input_file:
            raise ConfigurationError("empty filename")

    @classmethod
    def from_args(cls, args) -> "CipherConfig":
        """Build from an ``argparse.Namespace`` produced by the CLI parser."""
        return cls(
            plain_key=args.plain_key,
            cypher_key=args.cypher_key,
            offset=args.offset,
            input_file=args.file,
            text=args.text,
        )

    @property
    def output_file(self) -> Optional[str]:
        """Where the ciphertext is saved: next to the input, with SUFFIX."""
        if self.input_file is None:
            return None
        return self.input_file + SUFFIX


def read_input(config: CipherConfig) -> str:
    """Return the text to transcode, reading the input file if one is set."""
    if config.input_file is None:
        return config.text or ""
    if not os.path.isfile(config.input_file):
        raise ConfigurationError(f"cannot read input file: {config.input_file}")
    try:
        with open(config.input_file, "r", encoding="utf-8") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(
            f"cannot read input file: {config.input_file}"
        ) from exc
    logger.debug("read %d characters from %s", len(text), config.input_file)
    return text
