"""AES block cipher, its round transformations and key schedule, ECB mode and a command-line tool."""

__version__ = "0.1.0"