"""
Wallet related errors
"""


class WalletError(Exception):
    """
    Wallet base exception
    """


class InvalidWordCount(WalletError):
    """
    Mnemonic word count must be 12, 15, 18, 21, or 24
    """


class InvalidMnemonic(WalletError):
    """
    Recovery phrase failed BIP-39 validation
    """


class InvalidLanguage(WalletError):
    """
    BIP-39 word list language is not supported
    """
