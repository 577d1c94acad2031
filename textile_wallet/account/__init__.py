"""
Account constructors
"""

import nacl.utils

from textile_wallet.account.account import Account, Address, Seed
from textile_wallet.account.address import AddressAccount
from textile_wallet.account.full import FullAccount
from textile_wallet.key import codec
from textile_wallet.key.codec import VersionByte, PAYLOAD_SIZE
from textile_wallet.key.error import InvalidVersionByte

__all__ = [
    "Account",
    "Address",
    "Seed",
    "AddressAccount",
    "FullAccount",
    "random",
    "parse",
    "from_raw_seed",
]


def random() -> FullAccount:
    """
    Creates a new full account from a randomly generated seed.

    Failure to read from the OS random source is not recoverable and is propagated.
    """
    return from_raw_seed(nacl.utils.random(PAYLOAD_SIZE))


def parse(address_or_seed: str) -> Account:
    """
    Constructs an account from either a key encoded address or seed.
    If the provided input is a seed, the resulting account will have signing capabilities.

    :exception InvalidKey: if the string is neither a valid address nor a valid seed.
        Checksum and malformed key errors on the address attempt are raised as is.
    """
    try:
        codec.decode(VersionByte.ACCOUNT_ID, address_or_seed)
        return AddressAccount(address_or_seed)
    except InvalidVersionByte:
        pass

    codec.decode(VersionByte.SEED, address_or_seed)
    return FullAccount(address_or_seed)


def from_raw_seed(raw_seed: bytes) -> FullAccount:
    """
    Creates a full account from the raw 32 byte ed25519 seed
    """
    return FullAccount.from_raw_seed(raw_seed)
