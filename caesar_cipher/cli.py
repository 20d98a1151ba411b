"""
caesar-encrypt
==============
Usage:
    caesar-encrypt -o 3 -t "attack at dawn"
    caesar-encrypt -c sassy -o d -f message.txt      # also writes message.txt.caesar
    caesar-encrypt -p sassy -o 3 -t "Def" -d

At least one of -p, -c, -o is required. Every option takes its own
argument, so grouped short flags such as -ck are refused. Exit status is
0 on success and 1 on any configuration or cipher error.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .cipher import create_cipher
from .config import CipherConfig, read_input
from .errors import CaesarError, ConfigurationError
from .transcoder import decrypt, encrypt

logger = logging.getLogger(__name__)

VALUE_OPTIONS = {"-p", "--plain-key", "-c", "--cypher-key", "-o", "--offset",
                 "-t", "--text", "-f", "--file"}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="caesar-encrypt",
        description="Encrypt text with a keyword/offset substitution cipher.",
        allow_abbrev=False,
    )
    p.add_argument("-p", "--plain-key", help="keyword that orders the plaintext alphabet")
    p.add_argument("-c", "--cypher-key", help="keyword that orders the ciphertext alphabet")
    p.add_argument("-o", "--offset",
                   help="shift of the ciphertext alphabet: 0-25 or a single letter")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("-t", "--text", help="text to encrypt")
    src.add_argument("-f", "--file", help="file to encrypt")
    p.add_argument("-d", "--decrypt", action="store_true",
                   help="invert the cipher (output is printed, never saved)")
    p.add_argument("--no-save", action="store_true",
                   help="do not write <file>.caesar next to the input")
    p.add_argument("-v", "--verbose", action="store_true")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def save_output(path: str, text: str) -> None:
    """Write text to path whole or not at all."""
    partial = path + ".part"
    try:
        with open(partial, "w", encoding="utf-8") as fh:
            fh.write(text)
        os.replace(partial, path)
    except OSError as exc:
        if os.path.isfile(partial):
            os.remove(partial)
        raise ConfigurationError(f"cannot write output file: {path}") from exc
    logger.info("ciphertext saved to %s", path)


def check_grouped_flags(argv: List[str]) -> None:
    """Refuse "-ck"-style tokens; a value must follow its option separately."""
    expect_value = False
    for arg in argv:
        if expect_value:
            expect_value = False
            continue
        if arg.startswith("-") and not arg.startswith("--") and len(arg) > 2:
            raise ConfigurationError(
                f"grouped flags are not supported by this program: {arg}"
            )
        expect_value = arg in VALUE_OPTIONS


def run(args: argparse.Namespace) -> str:
    """Execute one invocation and return the transcoded text."""
    config  = CipherConfig.from_args(args)
    mapping = create_cipher(config)
    text    = read_input(config)

    if args.decrypt:
        return decrypt(text, mapping)

    result = encrypt(text, mapping)
    if config.output_file and not args.no_save:
        save_output(config.output_file, result)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        check_grouped_flags(argv)
        args = build_parser().parse_args(argv)
        logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                            format=' %(message)s')
        result = run(args)
    except CaesarError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
