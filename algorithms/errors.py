"""
Errors raised by the run-length codec and the file helpers.
"""


class MalformedInput(ValueError):
    """Encoded or hex input that cannot be parsed (odd length, bad digit)."""


class IOFailure(OSError):
    """
    Reading the source file or writing the result failed.

    Kept separate from MalformedInput so callers can tell a broken file
    system from broken data.
    """

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path
