"""
CRC-16/XMODEM checksums used by key encoded strings.

The checksum is the CCITT polynomial (0x1021) with a zero initial value, appended to the encoded key
in little-endian byte order. Existing addresses and seeds depend on it, so it must never change.
"""

import binascii

from textile_wallet.key.error import ChecksumMismatch

CHECKSUM_SIZE = 2


def checksum(data: bytes) -> bytes:
    """
    :return: 2 byte little-endian CRC-16/XMODEM checksum
    """
    return binascii.crc_hqx(data, 0).to_bytes(CHECKSUM_SIZE, "little")


def validate(data: bytes, expected: bytes):
    """
    :exception ChecksumMismatch: if the checksum for `data` is not `expected`
    """
    if len(expected) != CHECKSUM_SIZE:
        raise ChecksumMismatch(
            f"checksum must be {CHECKSUM_SIZE} bytes, found {len(expected)} bytes"
        )

    actual = checksum(data)
    if actual != expected:
        raise ChecksumMismatch(
            f"checksum mismatch: expected {expected.hex()}, computed {actual.hex()}"
        )
