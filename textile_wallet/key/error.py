"""
Key encoding related errors
"""


class InvalidKey(Exception):
    """
    Base exception for key encoded strings that are malformed or unrecognized
    """


class MalformedKey(InvalidKey):
    """
    The key is not valid base58, is truncated, or its payload has the wrong length
    """


class InvalidVersionByte(InvalidKey):
    """
    The version byte is not the expected kind of key, or is not a known version byte at all
    """

    def __init__(self, expected: int | None, actual: int):
        self.expected = expected
        self.actual = actual
        if expected is None:
            super().__init__(f"invalid version byte: 0x{actual:02x}")
        else:
            super().__init__(
                f"invalid version byte: expected 0x{expected:02x}, found 0x{actual:02x}"
            )


class ChecksumMismatch(InvalidKey):
    """
    The trailing checksum does not match the version byte and payload
    """
