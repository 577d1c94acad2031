"""
Account related errors
"""


class AccountError(Exception):
    """
    Account base exception
    """


class InvalidSignature(AccountError):
    """
    The signature is malformed or does not verify the message against the account's public key
    """


class MissingPrivateKey(AccountError):
    """
    Base exception for operations that require the account's private key, which address based accounts do not have
    """


class NoSeed(MissingPrivateKey):
    """
    Cannot access the seed of an address based account
    """


class CannotSign(MissingPrivateKey):
    """
    Cannot sign messages with an address based account
    """


class CannotDecrypt(MissingPrivateKey):
    """
    Cannot decrypt messages with an address based account
    """


class InvalidPeerId(AccountError):
    """
    The peer ID is not an identity encoded ed25519 public key
    """
