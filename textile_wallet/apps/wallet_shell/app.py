"""
Textile wallet shell
"""
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from textile_wallet import account
from textile_wallet.account import Account, Address, FullAccount
from textile_wallet.account.peer import PeerId
from textile_wallet.core.logging import get_logger, to_log_level
from textile_wallet.key import codec
from textile_wallet.key.codec import VersionByte
from textile_wallet.wallet import Wallet, WordCount, validate_language
from textile_wallet.wallet.wallet import DEFAULT_LANGUAGE


@dataclass(slots=True)
class KeyInfo:
    """
    Describes a key encoded address or seed
    """

    version: VersionByte
    address: Address
    hint: str
    peer_id: PeerId
    can_sign: bool


class App:
    """
    Wallet shell app

    Config (TOML), all keys are optional:

    [wallet]
    word_count = 12
    language = "english"

    [logging]
    level = "WARNING"
    """

    def __init__(self, config: dict[str, Any]):
        wallet_config = config.get("wallet", {})
        logging_config = config.get("logging", {})

        self.word_count = WordCount.from_int(wallet_config.get("word_count", 12))
        self.language = validate_language(
            wallet_config.get("language", DEFAULT_LANGUAGE)
        )
        self.log_level = to_log_level(logging_config.get("level", logging.WARNING))
        self.config = config

    @classmethod
    def from_config_file(cls, file: Path) -> "App":
        """
        Constructs a new app instance from the specified TOML config file
        """
        with open(file, "rb") as config_file:
            config = tomllib.load(config_file)
        return cls(config)

    def new_wallet(self, word_count: int | None = None) -> Wallet:
        """
        Generates a wallet with a new recovery phrase.

        :param word_count: if None, then the configured word count is used
        """
        wallet = Wallet.from_word_count(
            word_count if word_count is not None else self.word_count, self.language
        )
        get_logger(self, "new_wallet").info(
            "generated new wallet: word_count=%s", wallet.word_count
        )
        return wallet

    def derive_accounts(
        self,
        recovery_phrase: str,
        count: int,
        passphrase: str = "",
        start: int = 0,
    ) -> list[FullAccount]:
        """
        Derives wallet accounts from the recovery phrase
        """
        wallet = Wallet.from_mnemonic(recovery_phrase, self.language)
        return wallet.derive_accounts(count, passphrase, start)

    def random_account(self) -> FullAccount:
        return account.random()

    def inspect_key(self, key: str) -> KeyInfo:
        """
        :param key: key encoded address or seed
        """
        parsed = account.parse(key.strip())
        return KeyInfo(
            version=codec.version(key.strip()),
            address=parsed.address,
            hint=parsed.hint.hex(),
            peer_id=parsed.peer_id,
            can_sign=parsed.can_sign,
        )

    def sign(self, seed: str, message: bytes) -> bytes:
        """
        :exception CannotSign: if an address is provided instead of a seed
        """
        return self._parse(seed).sign(message)

    def verify(self, address: str, message: bytes, signature: bytes):
        """
        :exception InvalidSignature: if the signature does not verify
        """
        self._parse(address).verify(message, signature)

    def encrypt(self, address: str, message: bytes) -> bytes:
        return self._parse(address).encrypt(message)

    def decrypt(self, seed: str, ciphertext: bytes) -> bytes:
        """
        :exception CannotDecrypt: if an address is provided instead of a seed
        """
        return self._parse(seed).decrypt(ciphertext)

    def _parse(self, key: str) -> Account:
        return account.parse(key.strip())
