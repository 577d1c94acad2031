"""
Full account which holds the private key seed
"""

from nacl.public import SealedBox
from nacl.signing import SigningKey, VerifyKey

from textile_wallet.account.account import Account, Address, Seed
from textile_wallet.key import codec
from textile_wallet.key.codec import VersionByte


class FullAccount(Account):
    """
    Full account which can verify and sign signatures, and encrypt and decrypt messages.

    The account only holds the key encoded seed. The ed25519 keypair is a pure function of the seed,
    and is derived each time it is needed.
    """

    __slots__ = ("_seed",)

    def __init__(self, seed: str):
        """
        :param seed: key encoded seed
        :exception InvalidKey: if the seed is not a valid key encoded seed
        """
        codec.decode(VersionByte.SEED, seed)
        object.__setattr__(self, "_seed", Seed(seed))

    @classmethod
    def from_raw_seed(cls, raw_seed: bytes) -> "FullAccount":
        """
        :param raw_seed: 32 byte ed25519 seed
        """
        return cls(codec.encode(VersionByte.SEED, raw_seed))

    @property
    def address(self) -> Address:
        return Address(codec.encode(VersionByte.ACCOUNT_ID, self.public_key))

    @property
    def seed(self) -> Seed:
        return self._seed

    @property
    def raw_seed(self) -> bytes:
        """
        :return: 32 byte ed25519 seed
        """
        return codec.decode(VersionByte.SEED, self._seed)

    @property
    def signing_key(self) -> SigningKey:
        return SigningKey(self.raw_seed)

    @property
    def verify_key(self) -> VerifyKey:
        return self.signing_key.verify_key

    @property
    def can_sign(self) -> bool:
        return True

    def decrypt(self, ciphertext: bytes) -> bytes:
        return SealedBox(self.signing_key.to_curve25519_private_key()).decrypt(
            ciphertext
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FullAccount):
            return NotImplemented
        return self._seed == other._seed

    def __hash__(self) -> int:
        return hash((FullAccount, self._seed))

    def __repr__(self) -> str:
        # never expose the seed
        return f"FullAccount(address={self.address!r})"
