"""
Account for which only the address is known
"""

from nacl.signing import SigningKey, VerifyKey

from textile_wallet.account import peer
from textile_wallet.account.account import Account, Address, Seed
from textile_wallet.account.error import NoSeed, CannotSign, CannotDecrypt
from textile_wallet.key import codec
from textile_wallet.key.codec import VersionByte


class AddressAccount(Account):
    """
    Account to which only the address is known. It can verify signatures and encrypt messages,
    but it cannot sign or decrypt messages.
    """

    __slots__ = ("_address",)

    def __init__(self, address: str):
        """
        :param address: key encoded address
        :exception InvalidKey: if the address is not a valid key encoded address
        """
        codec.decode(VersionByte.ACCOUNT_ID, address)
        object.__setattr__(self, "_address", Address(address))

    @classmethod
    def from_public_key(cls, public_key: bytes) -> "AddressAccount":
        """
        :param public_key: raw 32 byte ed25519 public key
        """
        return cls(codec.encode(VersionByte.ACCOUNT_ID, public_key))

    @classmethod
    def from_peer_id(cls, peer_id: str) -> "AddressAccount":
        """
        :exception InvalidPeerId: if the peer ID does not inline an ed25519 public key
        """
        return cls.from_public_key(peer.public_key_from_peer_id(peer_id))

    @property
    def address(self) -> Address:
        return self._address

    @property
    def seed(self) -> Seed:
        raise NoSeed("cannot access seed")

    @property
    def verify_key(self) -> VerifyKey:
        return VerifyKey(codec.decode(VersionByte.ACCOUNT_ID, self._address))

    @property
    def signing_key(self) -> SigningKey:
        raise CannotSign("cannot sign")

    @property
    def can_sign(self) -> bool:
        return False

    def sign(self, message: bytes) -> bytes:
        raise CannotSign("cannot sign")

    def decrypt(self, ciphertext: bytes) -> bytes:
        raise CannotDecrypt("cannot decrypt")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressAccount):
            return NotImplemented
        return self._address == other._address

    def __hash__(self) -> int:
        return hash((AddressAccount, self._address))

    def __repr__(self) -> str:
        return f"AddressAccount(address={self._address!r})"
