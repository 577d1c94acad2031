"""
BIP-32 style hierarchical deterministic wallet for ed25519 accounts.

All accounts are derived from a single BIP-39 recovery phrase:

    recovery phrase + passphrase -> BIP-39 seed -> m/44'/406'/{index}' -> account seed

https://github.com/satoshilabs/slips/blob/master/slip-0010.md
"""

from dataclasses import dataclass
from enum import IntEnum

from mnemonic import Mnemonic

from textile_wallet.account import FullAccount
from textile_wallet.core.logging import get_logger
from textile_wallet.hd.derivation import (
    DerivationPath,
    TEXTILE_ACCOUNT_PREFIX,
    derive_for_path,
    hardened,
)
from textile_wallet.wallet.error import (
    InvalidLanguage,
    InvalidMnemonic,
    InvalidWordCount,
)

DEFAULT_LANGUAGE = "english"


def validate_language(language: str) -> str:
    """
    :return: the language, if it names a BIP-39 word list that is available
    :exception InvalidLanguage: if the language is not supported
    """
    if language not in Mnemonic.list_languages():
        raise InvalidLanguage(
            f"unsupported language: {language} (supported: {sorted(Mnemonic.list_languages())})"
        )
    return language


class WordCount(IntEnum):
    """
    Number of words in a recovery phrase
    """

    TWELVE = 12
    FIFTEEN = 15
    EIGHTEEN = 18
    TWENTY_ONE = 21
    TWENTY_FOUR = 24

    @classmethod
    def from_int(cls, count: int) -> "WordCount":
        """
        :exception InvalidWordCount: if the count is not 12, 15, 18, 21, or 24
        """
        try:
            return cls(count)
        except ValueError as err:
            raise InvalidWordCount(
                f"invalid word count (must be 12, 15, 18, 21, or 24): {count}"
            ) from err

    @classmethod
    def from_entropy_size(cls, entropy_size: int) -> "WordCount":
        """
        :param entropy_size: number of entropy bits
        :exception InvalidWordCount: if the entropy size does not map to a word count
        """
        for word_count in cls:
            if word_count.entropy_size == entropy_size:
                return word_count
        raise InvalidWordCount(
            f"invalid entropy size (must be 128, 160, 192, 224, or 256): {entropy_size}"
        )

    @property
    def entropy_size(self) -> int:
        """
        :return: number of random entropy bits, i.e., 32 bits for every 3 words
        """
        return self.value * 32 // 3


@dataclass(slots=True, frozen=True)
class Wallet:
    """
    Wallet is defined by its recovery phrase. Accounts are derived on demand and are never stored.

    NOTE: the recovery phrase is excluded from the repr
    """

    recovery_phrase: str
    language: str = DEFAULT_LANGUAGE

    @classmethod
    def from_word_count(
        cls, word_count: int, language: str = DEFAULT_LANGUAGE
    ) -> "Wallet":
        """
        Creates a wallet with a new random recovery phrase with the given number of words
        """
        return cls.from_entropy_size(
            WordCount.from_int(word_count).entropy_size, language
        )

    @classmethod
    def from_entropy_size(
        cls, entropy_size: int, language: str = DEFAULT_LANGUAGE
    ) -> "Wallet":
        """
        Creates a wallet with a new random recovery phrase generated from random entropy of the given bit size
        """
        WordCount.from_entropy_size(entropy_size)
        validate_language(language)
        return cls(
            recovery_phrase=Mnemonic(language).generate(strength=entropy_size),
            language=language,
        )

    @classmethod
    def from_mnemonic(
        cls, recovery_phrase: str, language: str = DEFAULT_LANGUAGE
    ) -> "Wallet":
        """
        Creates a wallet directly from a recovery phrase.
        The phrase is validated when accounts are derived.
        """
        return cls(recovery_phrase=" ".join(recovery_phrase.split()), language=language)

    @property
    def word_count(self) -> WordCount:
        """
        :exception InvalidWordCount: if the recovery phrase word count is not valid
        """
        return WordCount.from_int(len(self.recovery_phrase.split()))

    def validate(self):
        """
        :exception InvalidMnemonic: if the recovery phrase word count or checksum is invalid,
            or contains words that are not in the word list
        :exception InvalidLanguage: if the word list language is not supported
        """
        validate_language(self.language)
        try:
            WordCount.from_int(len(self.recovery_phrase.split()))
        except InvalidWordCount as err:
            raise InvalidMnemonic("invalid mnemonic phrase") from err

        if not Mnemonic(self.language).check(self.recovery_phrase):
            raise InvalidMnemonic("invalid mnemonic phrase")

    def seed(self, passphrase: str = "") -> bytes:
        """
        Validates the recovery phrase and then stretches it into the 64 byte BIP-39 seed

        :exception InvalidMnemonic: if the recovery phrase is invalid
        """
        self.validate()
        return Mnemonic.to_seed(self.recovery_phrase, passphrase)

    @staticmethod
    def account_path(index: int) -> DerivationPath:
        """
        :return: m/44'/406'/{index}'
        :exception InvalidDerivationPath: if the index is out of range
        """
        return DerivationPath.parse(TEXTILE_ACCOUNT_PREFIX).child(hardened(index))

    def derive_account(self, index: int, passphrase: str = "") -> FullAccount:
        """
        Derives the account for the index. The same index and passphrase always derives the same account.

        :exception InvalidMnemonic: if the recovery phrase is invalid
        :exception InvalidDerivationPath: if the index is out of range
        """
        path = self.account_path(index)
        key = derive_for_path(path, self.seed(passphrase))
        account = FullAccount.from_raw_seed(key.raw_seed)
        get_logger(self, "derive_account").debug(
            "derived account: path=%s address=%s", path, account.address
        )
        return account

    def derive_accounts(
        self, count: int, passphrase: str = "", start: int = 0
    ) -> list[FullAccount]:
        """
        Derives `count` consecutive accounts beginning at index `start`.
        The BIP-39 seed is computed once.
        """
        if count < 0:
            raise ValueError(f"count must not be negative: {count}")

        seed = self.seed(passphrase)
        return [
            FullAccount.from_raw_seed(
                derive_for_path(self.account_path(index), seed).raw_seed
            )
            for index in range(start, start + count)
        ]

    def __repr__(self) -> str:
        return f"Wallet(language={self.language!r})"
