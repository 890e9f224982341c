"""Terminal input helpers."""

import getpass
import sys

from .errors import InputError


def read_password(prompt: str = "Password please: ") -> str:
    """Read a password from the terminal without echoing it.

    getpass turns echo off for the read and restores the terminal mode
    afterwards, including when the read is interrupted.

    Raises:
        InputError: If stdin is not an interactive terminal
    """
    if not sys.stdin.isatty():
        raise InputError("Cannot get input on a noninteractive terminal")

    return getpass.getpass(prompt)
