"""
:type:`Account` is the capability based interface to an ed25519 keypair.

There are exactly two kinds of accounts:

1. :type:`FullAccount` - holds the account seed, and thus the private key. It can sign and decrypt messages.
2. :type:`AddressAccount` - holds only the account address, i.e., the public key. It can only verify signatures
   and encrypt messages. Operations that require the private key raise a :type:`MissingPrivateKey` error.

Accounts are immutable. All key material is derived on demand from the encoded key string that the account holds.

Messages are encrypted using sealed box encryption, i.e., anonymous public key encryption, using the curve25519
form of the account's ed25519 public key:

https://doc.libsodium.org/public-key_cryptography/sealed_boxes
"""

from abc import ABC, abstractmethod
from dataclasses import FrozenInstanceError
from typing import NewType

from nacl.bindings import crypto_sign_BYTES
from nacl.exceptions import BadSignatureError
from nacl.public import SealedBox
from nacl.signing import SigningKey, VerifyKey

from textile_wallet.account import peer
from textile_wallet.account.error import InvalidSignature
from textile_wallet.account.peer import PeerId

# key encoded ed25519 public key - base58 encodes to 'P...'
Address = NewType("Address", str)

# key encoded ed25519 private key seed - base58 encodes to 'S...'
Seed = NewType("Seed", str)

SIGNATURE_SIZE = crypto_sign_BYTES

HINT_SIZE = 4


class Account(ABC):
    """
    Account interface
    """

    __slots__ = ()

    def __setattr__(self, name: str, value: object):
        raise FrozenInstanceError(f"cannot assign to field '{name}'")

    def __delattr__(self, name: str):
        raise FrozenInstanceError(f"cannot delete field '{name}'")

    @property
    @abstractmethod
    def address(self) -> Address:
        """
        :return: key encoded public key
        """

    @property
    @abstractmethod
    def seed(self) -> Seed:
        """
        :return: key encoded private key seed
        :exception NoSeed: if the account does not have access to the private key
        """

    @property
    @abstractmethod
    def verify_key(self) -> VerifyKey:
        """
        :return: ed25519 public key used to verify signatures
        """

    @property
    @abstractmethod
    def signing_key(self) -> SigningKey:
        """
        :return: ed25519 private key used to sign messages
        :exception CannotSign: if the account does not have access to the private key
        """

    @property
    @abstractmethod
    def can_sign(self) -> bool:
        """
        :return: True if the account holds the private key
        """

    @property
    def public_key(self) -> bytes:
        """
        :return: raw 32 byte ed25519 public key
        """
        return bytes(self.verify_key)

    @property
    def hint(self) -> bytes:
        """
        :return: last 4 bytes of the public key
        """
        return self.public_key[-HINT_SIZE:]

    @property
    def peer_id(self) -> PeerId:
        """
        :return: libp2p peer ID
        """
        return peer.peer_id_from_public_key(self.public_key)

    @property
    def peer_public_key(self) -> bytes:
        """
        :return: public key marshalled as a libp2p key
        """
        return peer.marshal_public_key(self.public_key)

    @property
    def peer_private_key(self) -> bytes:
        """
        :return: private key marshalled as a libp2p key
        :exception CannotSign: if the account does not have access to the private key
        """
        signing_key = self.signing_key
        return peer.marshal_private_key(
            bytes(signing_key), bytes(signing_key.verify_key)
        )

    def verify(self, message: bytes, signature: bytes):
        """
        Verifies that `signature` is this account's signature of the message.

        :exception InvalidSignature: if the signature is malformed or does not verify
        """
        if len(signature) != SIGNATURE_SIZE:
            raise InvalidSignature(
                f"signature must be {SIGNATURE_SIZE} bytes, found {len(signature)} bytes"
            )

        try:
            self.verify_key.verify(message, signature)
        except BadSignatureError as err:
            raise InvalidSignature("signature verification failed") from err

    def sign(self, message: bytes) -> bytes:
        """
        :return: 64 byte ed25519 signature
        :exception CannotSign: if the account does not have access to the private key
        """
        return self.signing_key.sign(message).signature

    def encrypt(self, message: bytes) -> bytes:
        """
        Encrypts the message so that it can only be decrypted by this account's private key.
        """
        return SealedBox(self.verify_key.to_curve25519_public_key()).encrypt(message)

    @abstractmethod
    def decrypt(self, ciphertext: bytes) -> bytes:
        """
        Decrypts a message that was encrypted using :meth:`encrypt`

        :exception CannotDecrypt: if the account does not have access to the private key
        :exception nacl.exceptions.CryptoError: if decryption fails
        """

    def __str__(self) -> str:
        return self.address
