"""
Hierarchical deterministic key derivation for ed25519 keys.

https://github.com/satoshilabs/slips/blob/master/slip-0010.md

ed25519 only supports hardened child key derivation, i.e., there is no public parent key -> public child key
derivation. Every index in a derivation path must be hardened.
"""

import hashlib
import hmac
import re
from dataclasses import dataclass
from typing import Iterable

from nacl.signing import SigningKey

from textile_wallet.hd.error import InvalidDerivationPath, NonHardenedIndexRejected

FIRST_HARDENED_INDEX = 0x80000000
MAX_INDEX = 0xFFFFFFFF

# domain separation constant - distinguishes ed25519 master keys from other curves derived from the same seed
SEED_MODIFIER = b"ed25519 seed"

# BIP-44 purpose / Textile coin type
TEXTILE_ACCOUNT_PREFIX = "m/44'/406'"

_SEGMENT_REGEX = re.compile(r"^([0-9]+)(')?$")


def is_hardened(index: int) -> bool:
    return FIRST_HARDENED_INDEX <= index <= MAX_INDEX


def hardened(index: int) -> int:
    """
    :return: hardened index for the child number, e.g., 0 -> 0x80000000
    :exception InvalidDerivationPath: if the child number is out of range
    """
    if not 0 <= index < FIRST_HARDENED_INDEX:
        raise InvalidDerivationPath(
            f"child number must be in the range [0, {FIRST_HARDENED_INDEX}): {index}"
        )
    return FIRST_HARDENED_INDEX + index


@dataclass(slots=True, frozen=True)
class DerivationPath:
    """
    Ordered sequence of 32-bit child indices, e.g., m/44'/406'/0'
    """

    indices: tuple[int, ...] = ()

    def __post_init__(self):
        for index in self.indices:
            if not 0 <= index <= MAX_INDEX:
                raise InvalidDerivationPath(f"index is not a 32-bit integer: {index}")
            if not is_hardened(index):
                raise NonHardenedIndexRejected(index)

    @classmethod
    def parse(cls, path: str) -> "DerivationPath":
        """
        Parses the path in the standard notation, where hardened segments are marked with an apostrophe:
        ``m/44'/406'/0'``

        :exception InvalidDerivationPath: if the path is malformed
        :exception NonHardenedIndexRejected: if any segment is not hardened
        """
        segments = path.strip().split("/")
        if segments[0] != "m":
            raise InvalidDerivationPath(f"derivation path must start with 'm': {path}")

        indices = []
        for segment in segments[1:]:
            match = _SEGMENT_REGEX.match(segment)
            if match is None:
                raise InvalidDerivationPath(f"invalid path segment '{segment}': {path}")
            child_number = int(match.group(1))
            if child_number >= FIRST_HARDENED_INDEX:
                raise InvalidDerivationPath(
                    f"child number is out of range '{segment}': {path}"
                )
            if match.group(2) is None:
                raise NonHardenedIndexRejected(child_number)
            indices.append(FIRST_HARDENED_INDEX + child_number)
        return cls(tuple(indices))

    def child(self, index: int) -> "DerivationPath":
        """
        :param index: hardened index
        :return: new path with the index appended
        """
        return DerivationPath(self.indices + (index,))

    def __str__(self) -> str:
        return "/".join(
            ["m"] + [f"{index - FIRST_HARDENED_INDEX}'" for index in self.indices]
        )


@dataclass(slots=True, frozen=True)
class ChainKey:
    """
    Extended private key: 32 byte key + 32 byte chain code
    """

    key: bytes
    chain_code: bytes

    @classmethod
    def master(cls, seed: bytes) -> "ChainKey":
        """
        Derives the master key from the BIP-39 seed
        """
        return cls._from_hmac(SEED_MODIFIER, seed)

    def derive(self, index: int) -> "ChainKey":
        """
        Derives the hardened child key.

        :exception NonHardenedIndexRejected: if the index is not hardened
        """
        if not is_hardened(index):
            raise NonHardenedIndexRejected(index)

        data = b"\x00" + self.key + index.to_bytes(4, "big")
        return self._from_hmac(self.chain_code, data)

    def derive_path(self, path: DerivationPath | Iterable[int]) -> "ChainKey":
        indices = path.indices if isinstance(path, DerivationPath) else path
        key = self
        for index in indices:
            key = key.derive(index)
        return key

    @property
    def raw_seed(self) -> bytes:
        """
        :return: the key as a 32 byte ed25519 seed
        """
        return self.key

    @property
    def public_key(self) -> bytes:
        """
        :return: 32 byte ed25519 public key
        """
        return bytes(SigningKey(self.key).verify_key)

    @classmethod
    def _from_hmac(cls, key: bytes, data: bytes) -> "ChainKey":
        digest = hmac.new(key, data, hashlib.sha512).digest()
        return cls(key=digest[:32], chain_code=digest[32:])

    def __repr__(self) -> str:
        return "ChainKey(...)"


def derive_for_path(path: str | DerivationPath, seed: bytes) -> ChainKey:
    """
    Derives the key for the path from the BIP-39 seed

    :exception InvalidDerivationPath: if the path is malformed
    :exception NonHardenedIndexRejected: if the path contains a non-hardened index
    """
    if isinstance(path, str):
        path = DerivationPath.parse(path)
    return ChainKey.master(seed).derive_path(path)
