"""
Key encoding for account addresses and seeds.

A key encoded string is the base58 encoding of::

    version byte (1) | payload (32) | checksum (2)

where the checksum is computed over the version byte and payload.
The version byte identifies the kind of key, which prevents one kind of key from being mistaken for another,
e.g., pasting a seed where an address is expected. The checksum catches transcription errors.
"""

from enum import IntEnum

import base58

from textile_wallet.key import crc16
from textile_wallet.key.error import InvalidVersionByte, MalformedKey

PAYLOAD_SIZE = 32

# version byte + checksum
MIN_ENCODED_SIZE = 1 + crc16.CHECKSUM_SIZE

_ALPHABET = frozenset(base58.BITCOIN_ALPHABET.decode())


class VersionByte(IntEnum):
    """
    Key encoding prefix
    """

    # encoded account address, i.e., ed25519 public key - base58 encodes to 'P...'
    ACCOUNT_ID = 0xDD
    # encoded account seed, i.e., ed25519 private key seed - base58 encodes to 'S...'
    SEED = 0xFF

    @classmethod
    def from_byte(cls, value: int) -> "VersionByte":
        """
        :exception InvalidVersionByte: if the value is not a known version byte
        """
        try:
            return cls(value)
        except ValueError as err:
            raise InvalidVersionByte(expected=None, actual=value) from err


def encode(version: VersionByte, payload: bytes) -> str:
    """
    Encodes the payload as a key of the specified kind.

    :exception InvalidVersionByte: if the version is not a known version byte
    :exception MalformedKey: if the payload is not 32 bytes
    """
    version = VersionByte.from_byte(version)
    if len(payload) != PAYLOAD_SIZE:
        raise MalformedKey(
            f"payload must be {PAYLOAD_SIZE} bytes, found {len(payload)} bytes"
        )

    raw = bytes([version]) + bytes(payload)
    return base58.b58encode(raw + crc16.checksum(raw)).decode()


def decode(expected: VersionByte, src: str) -> bytes:
    """
    Decodes the key encoded string into its raw payload.

    The checks are applied in order:

    1. base58 decoding and minimum length -> MalformedKey
    2. version byte must match `expected` -> InvalidVersionByte
    3. checksum must match -> ChecksumMismatch
    4. payload must be 32 bytes -> MalformedKey

    :return: 32 byte payload
    """
    expected = VersionByte.from_byte(expected)
    raw = _decode_string(src)

    version = raw[0]
    if version != expected:
        raise InvalidVersionByte(expected=expected, actual=version)

    version_and_payload = raw[: -crc16.CHECKSUM_SIZE]
    crc16.validate(version_and_payload, raw[-crc16.CHECKSUM_SIZE :])

    payload = version_and_payload[1:]
    if len(payload) != PAYLOAD_SIZE:
        raise MalformedKey(
            f"payload must be {PAYLOAD_SIZE} bytes, found {len(payload)} bytes"
        )
    return payload


def version(src: str) -> VersionByte:
    """
    Extracts the version byte without validating the checksum.
    Used to classify a key encoded string before deciding how to decode it.
    """
    return VersionByte.from_byte(_decode_string(src)[0])


def _decode_string(src: str) -> bytes:
    """
    base58 decodes the string and ensures that it is long enough to hold a version byte and checksum.
    Neither the version byte nor the checksum are checked.

    Whitespace is rejected, even trailing whitespace that the base58 library would otherwise strip.
    """
    invalid = set(src) - _ALPHABET
    if invalid:
        raise MalformedKey(f"invalid base58 characters: {sorted(invalid)!r}")

    try:
        raw = base58.b58decode(src)
    except ValueError as err:
        raise MalformedKey(f"base58 decode failed: {err}") from err

    if len(raw) < MIN_ENCODED_SIZE:
        raise MalformedKey(
            f"encoded value is {len(raw)} bytes; minimum valid length is {MIN_ENCODED_SIZE}"
        )
    return raw
