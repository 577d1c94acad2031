"""
Provides support for secure messaging between accounts.

A secure message is encrypted for the recipient account, and the encrypted message is signed by the sender account.
"""
from dataclasses import dataclass

import msgpack  # type: ignore

from textile_wallet.account.account import Account, Address
from textile_wallet.account.address import AddressAccount
from textile_wallet.account.error import AccountError


class SecureMessageError(AccountError):
    """
    SecureMessage base exception
    """


class InvalidSecureMessage(SecureMessageError):
    """
    Packed message could not be unpacked
    """


class WrongRecipient(SecureMessageError):
    """
    Message was encrypted for another account
    """


@dataclass(slots=True, frozen=True)
class SecureMessage:
    """
    Message is encrypted using the recipient's address and signed by the sender.
    """

    sender: Address
    recipient: Address
    signature: bytes
    encrypted_msg: bytes

    @classmethod
    def create(cls, sender: Account, recipient: Account, msg: bytes) -> "SecureMessage":
        """
        :param sender: must be able to sign
        :param recipient: any account - only its address is used
        :exception CannotSign: if the sender is an address based account
        """
        encrypted_msg = recipient.encrypt(msg)
        return cls(
            sender=sender.address,
            recipient=recipient.address,
            signature=sender.sign(encrypted_msg),
            encrypted_msg=encrypted_msg,
        )

    def verify(self):
        """
        :exception InvalidSignature: if the message was not signed by the sender
        """
        AddressAccount(self.sender).verify(self.encrypted_msg, self.signature)

    def decrypt(self, recipient: Account) -> bytes:
        """
        Verifies the sender's signature and then decrypts the message.

        :exception WrongRecipient: if the message was not encrypted for the recipient
        :exception InvalidSignature: if the message was not signed by the sender
        :exception CannotDecrypt: if the recipient is an address based account
        """
        if recipient.address != self.recipient:
            raise WrongRecipient(f"message recipient is {self.recipient}")
        self.verify()
        return recipient.decrypt(self.encrypted_msg)

    def pack(self) -> bytes:
        """
        Serialize the message
        """
        return msgpack.packb(
            (self.sender, self.recipient, self.signature, self.encrypted_msg)
        )

    @classmethod
    def unpack(cls, packed: bytes) -> "SecureMessage":
        """
        deserializes the message

        :exception InvalidSecureMessage: if the message is not a packed SecureMessage
        """
        try:
            sender, recipient, signature, encrypted_msg = msgpack.unpackb(
                packed, use_list=False
            )
        except (ValueError, TypeError, msgpack.UnpackException) as err:
            raise InvalidSecureMessage from err

        if not (
            isinstance(sender, str)
            and isinstance(recipient, str)
            and isinstance(signature, bytes)
            and isinstance(encrypted_msg, bytes)
        ):
            raise InvalidSecureMessage("invalid message field types")

        return cls(
            sender=Address(sender),
            recipient=Address(recipient),
            signature=signature,
            encrypted_msg=encrypted_msg,
        )
