"""
HD wallet
"""

from textile_wallet.wallet.error import (
    WalletError,
    InvalidLanguage,
    InvalidMnemonic,
    InvalidWordCount,
)
from textile_wallet.wallet.wallet import Wallet, WordCount, validate_language

__all__ = [
    "Wallet",
    "WordCount",
    "validate_language",
    "WalletError",
    "InvalidLanguage",
    "InvalidMnemonic",
    "InvalidWordCount",
]
