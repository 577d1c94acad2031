import unittest

from mnemonic import Mnemonic

from tests.test_support import WalletTestCase, TEST_RECOVERY_PHRASE
from textile_wallet.account import FullAccount, parse
from textile_wallet.hd.derivation import derive_for_path
from textile_wallet.hd.error import InvalidDerivationPath
from textile_wallet.wallet import (
    InvalidLanguage,
    InvalidMnemonic,
    InvalidWordCount,
    Wallet,
    WalletError,
    WordCount,
    validate_language,
)

# accounts m/44'/406'/{index}' derived from TEST_RECOVERY_PHRASE without a passphrase
TEST_ACCOUNT_0_ADDRESS = "P5pPc1QDbfF1LD14e8CA4JA5twHa7j2V33pGFsFaWa9H9jQJ"
TEST_ACCOUNT_0_SEED = "SVgF3tYRtfwyccAChYTrnhi8WoVWmbpy88WCq3gnMTeUXdDS"
TEST_ACCOUNT_1_ADDRESS = "P4HGpQ5RKwF1yKHDB8hX6N9xvg3w5V56tsCAyDSfCp54zQHo"


class WordCountTestCase(unittest.TestCase):
    def test_entropy_size(self):
        expected = {
            WordCount.TWELVE: 128,
            WordCount.FIFTEEN: 160,
            WordCount.EIGHTEEN: 192,
            WordCount.TWENTY_ONE: 224,
            WordCount.TWENTY_FOUR: 256,
        }
        for word_count, entropy_size in expected.items():
            with self.subTest(word_count=word_count):
                self.assertEqual(word_count.entropy_size, entropy_size)
                self.assertEqual(WordCount.from_entropy_size(entropy_size), word_count)
                self.assertEqual(WordCount.from_int(word_count.value), word_count)

    def test_invalid(self):
        for count in (0, 11, 13, 25):
            with self.subTest(count=count):
                with self.assertRaises(InvalidWordCount):
                    WordCount.from_int(count)
        for entropy_size in (0, 127, 129, 512):
            with self.subTest(entropy_size=entropy_size):
                with self.assertRaises(InvalidWordCount):
                    WordCount.from_entropy_size(entropy_size)


class NewWalletTestCase(WalletTestCase):
    def test_from_word_count(self):
        for word_count in WordCount:
            with self.subTest(word_count=word_count):
                wallet = Wallet.from_word_count(word_count)
                self.assertEqual(len(wallet.recovery_phrase.split()), word_count)
                self.assertEqual(wallet.word_count, word_count)
                wallet.validate()
                self.assertTrue(Mnemonic("english").check(wallet.recovery_phrase))

        with self.subTest("new wallets are unique"):
            self.assertNotEqual(
                Wallet.from_word_count(12).recovery_phrase,
                Wallet.from_word_count(12).recovery_phrase,
            )

    def test_from_entropy_size(self):
        wallet = Wallet.from_entropy_size(256)
        self.assertEqual(wallet.word_count, WordCount.TWENTY_FOUR)

    def test_invalid_word_count(self):
        for word_count in (0, 11, 13, 25):
            with self.subTest(word_count=word_count):
                with self.assertRaises(InvalidWordCount):
                    Wallet.from_word_count(word_count)
        with self.assertRaises(WalletError):
            Wallet.from_entropy_size(100)

    def test_unsupported_language(self):
        self.assertEqual(validate_language("english"), "english")
        with self.assertRaises(InvalidLanguage):
            validate_language("klingon")
        with self.assertRaises(InvalidLanguage):
            Wallet.from_word_count(12, language="klingon")
        with self.assertRaises(InvalidLanguage):
            Wallet.from_mnemonic(TEST_RECOVERY_PHRASE, language="klingon").validate()

    def test_recovery_phrase_is_not_exposed_by_repr(self):
        wallet = Wallet.from_mnemonic(TEST_RECOVERY_PHRASE)
        self.assertNotIn("abandon", repr(wallet))
        self.assertNotIn("abandon", str(wallet))


class WalletFromMnemonicTestCase(WalletTestCase):
    def test_validate(self):
        Wallet.from_mnemonic(TEST_RECOVERY_PHRASE).validate()

        invalid_phrases = {
            "bad checksum": " ".join(["abandon"] * 12),
            "13 words": TEST_RECOVERY_PHRASE + " abandon",
            "11 words": " ".join(TEST_RECOVERY_PHRASE.split()[1:]),
            "unknown word": TEST_RECOVERY_PHRASE.replace("about", "notaword"),
            "empty": "",
        }
        for name, phrase in invalid_phrases.items():
            with self.subTest(name):
                wallet = Wallet.from_mnemonic(phrase)
                with self.assertRaises(InvalidMnemonic):
                    wallet.validate()
                with self.assertRaises(InvalidMnemonic):
                    wallet.derive_account(0)

    def test_whitespace_is_normalized(self):
        wallet = Wallet.from_mnemonic(f"  {TEST_RECOVERY_PHRASE.replace(' ', '   ')}\n")
        self.assertEqual(wallet.recovery_phrase, TEST_RECOVERY_PHRASE)
        self.assertEqual(wallet, Wallet.from_mnemonic(TEST_RECOVERY_PHRASE))

    def test_seed(self):
        wallet = Wallet.from_mnemonic(TEST_RECOVERY_PHRASE)
        # BIP-39 test vector
        self.assertEqual(
            wallet.seed().hex(),
            "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc1"
            "9a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4",
        )


class DeriveAccountTestCase(WalletTestCase):
    def setUp(self) -> None:
        self.wallet = Wallet.from_mnemonic(TEST_RECOVERY_PHRASE)

    def test_derive_account(self):
        logger = self.get_logger("test_derive_account")

        first = self.wallet.derive_account(0)
        logger.info(f"account 0: {first.address}")
        self.assertIsInstance(first, FullAccount)
        self.assertTrue(first.can_sign)

        with self.subTest("known accounts"):
            self.assertEqual(first.address, TEST_ACCOUNT_0_ADDRESS)
            self.assertEqual(first.seed, TEST_ACCOUNT_0_SEED)
            self.assertEqual(first, parse(TEST_ACCOUNT_0_SEED))
            self.assertEqual(
                self.wallet.derive_account(1).address, TEST_ACCOUNT_1_ADDRESS
            )

        with self.subTest("derivation is deterministic"):
            self.assertEqual(self.wallet.derive_account(0), first)
            self.assertEqual(
                Wallet.from_mnemonic(TEST_RECOVERY_PHRASE).derive_account(0).address,
                first.address,
            )

        with self.subTest("account index path is m/44'/406'/{index}'"):
            expected = derive_for_path(
                "m/44'/406'/0'", Mnemonic.to_seed(TEST_RECOVERY_PHRASE, "")
            )
            self.assertEqual(first.raw_seed, expected.raw_seed)
            self.assertEqual(first.public_key, expected.public_key)
            self.assertEqual(str(Wallet.account_path(5)), "m/44'/406'/5'")

        with self.subTest("different indexes derive different accounts"):
            self.assertNotEqual(self.wallet.derive_account(1), first)

        with self.subTest("passphrase changes the derived accounts"):
            with_passphrase = self.wallet.derive_account(0, passphrase="TREZOR")
            self.assertNotEqual(with_passphrase, first)
            self.assertEqual(
                with_passphrase.raw_seed,
                derive_for_path(
                    "m/44'/406'/0'", Mnemonic.to_seed(TEST_RECOVERY_PHRASE, "TREZOR")
                ).raw_seed,
            )

    def test_invalid_index(self):
        for index in (-1, 0x80000000):
            with self.subTest(index=index):
                with self.assertRaises(InvalidDerivationPath):
                    self.wallet.derive_account(index)

    def test_derive_accounts(self):
        accounts = self.wallet.derive_accounts(3)
        self.assertEqual(
            accounts, [self.wallet.derive_account(index) for index in range(3)]
        )
        self.assertEqual(len({derived.address for derived in accounts}), 3)

        with self.subTest("start index"):
            self.assertEqual(
                self.wallet.derive_accounts(2, start=1), accounts[1:]
            )

        with self.subTest("no accounts"):
            self.assertEqual(self.wallet.derive_accounts(0), [])

        with self.subTest("negative count"):
            with self.assertRaises(ValueError):
                self.wallet.derive_accounts(-1)


if __name__ == "__main__":
    unittest.main()
