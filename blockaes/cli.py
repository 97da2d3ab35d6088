"""Command line interface: encrypt or decrypt a file with AES."""

from __future__ import annotations

import getopt
import sys
from enum import Enum
from typing import Sequence

from . import ecb

HELP_MESSAGE = (
    "Usage:\n"
    "\tblockaes (-o FILE |--output FILE) (-i FILE |--input FILE) [-d | --decrypt] "
    "[-k KEY |--key KEY] [-m MODE |--mode MODE] \n\n"
    "Encrypt or decrypt a file with the AES algorithm\n"
    "-o FILE, --output FILE : write output to FILE\n"
    "-i FILE, --input FILE : read data from FILE\n"
    "-k KEY, --key KEY : Use KEY as the secret key of AES. KEY must be in hexadecimal "
    "and of size 128, 192 or 256 bits.\n"
    "-m MODE, --mode MODE : Use MODE with AES to encrypt the input file. MODE = [ECB|CBC|CFB|GCM].\n"
    "-h, --help display this help and exit\n"
)

_SHORT_OPTIONS = "hdi:k:o:m:"
_LONG_OPTIONS = ["help", "input=", "output=", "key=", "mode=", "decrypt"]

_SIZE_MESSAGE = "The key must be of size 128, 192 or 256 bits"
_HEX_MESSAGE = "The key must be write in hexadecimal."
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_MAX_KEY_BYTES = 32

DEFAULT_KEY = bytes(range(16))


class Mode(Enum):
    """Block cipher modes of operation that can be requested."""

    ECB = "ECB"
    CBC = "CBC"
    CFB = "CFB"
    GCM = "GCM"


class KeyFormatError(ValueError):
    """Raised when a key given on the command line is malformed."""


def parse_key(text: str) -> bytes:
    """Parse a hexadecimal key of 128, 192 or 256 bits, with an optional ``0x`` prefix.

    At most 32 bytes are read; anything beyond them is ignored unless a
    single character is left over.
    """
    if len(text) < 2:
        raise KeyFormatError(_SIZE_MESSAGE)
    body = text[2:] if text.startswith("0x") else text
    count = min(len(body) // 2, _MAX_KEY_BYTES)
    pairs = [body[i : i + 2] for i in range(0, 2 * count, 2)]
    for pair in pairs:
        if not set(pair) <= _HEX_DIGITS:
            raise KeyFormatError(_HEX_MESSAGE)
    key = bytes(int(pair, 16) for pair in pairs)
    rest = body[2 * count :]
    if len(key) not in (16, 24, 32) or len(rest) == 1:
        raise KeyFormatError(_SIZE_MESSAGE)
    return key


def _fail(message: str) -> int:
    sys.stderr.write(message if message.endswith("\n") else message + "\n")
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options, _ = getopt.getopt(args, _SHORT_OPTIONS, _LONG_OPTIONS)
    except getopt.GetoptError as error:
        sys.stderr.write(f"{error}\n")
        return _fail(HELP_MESSAGE)

    key = DEFAULT_KEY
    mode = Mode.ECB
    decrypting = False
    input_path: str | None = None
    output_path: str | None = None

    for option, value in options:
        if option in ("-h", "--help"):
            sys.stdout.write(HELP_MESSAGE)
            return 0
        if option in ("-o", "--output"):
            output_path = value
        elif option in ("-i", "--input"):
            input_path = value
        elif option in ("-k", "--key"):
            try:
                key = parse_key(value)
            except KeyFormatError as error:
                return _fail(str(error))
        elif option in ("-m", "--mode"):
            try:
                mode = Mode(value)
            except ValueError:
                return _fail("MODE must be ECB, CBC, CFB or GCM")
        elif option in ("-d", "--decrypt"):
            decrypting = True

    if input_path is None:
        return _fail("No input file, error.")
    if output_path is None:
        return _fail("No output file, error.")

    try:
        source = open(input_path, "rb")
    except OSError:
        return _fail("An error occured while opening the input file")
    with source:
        try:
            target = open(output_path, "wb")
        except OSError:
            return _fail("An error occured while opening the output file")
        with target:
            if mode is not Mode.ECB:
                return _fail("Mode not implemented yet.")
            try:
                if decrypting:
                    ecb.decrypt_stream(source, target, key)
                else:
                    ecb.encrypt_stream(source, target, key)
            except ecb.ECBError as error:
                return _fail(str(error))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())