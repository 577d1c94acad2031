import unittest

from textile_wallet.hd.derivation import (
    ChainKey,
    DerivationPath,
    FIRST_HARDENED_INDEX,
    TEXTILE_ACCOUNT_PREFIX,
    derive_for_path,
    hardened,
    is_hardened,
)
from textile_wallet.hd.error import (
    DerivationError,
    InvalidDerivationPath,
    NonHardenedIndexRejected,
)

# SLIP-0010 ed25519 test vector 1
SLIP10_SEED = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
SLIP10_VECTORS = [
    (
        "m",
        "90046a93de5380a72b5e45010748567d5ea02bbf6522f979e05c0d8d8ca9fffb",
        "2b4be7f19ee27bbf30c667b642d5f4aa69fd169872f8fc3059c08ebae2eb19e7",
        "a4b2856bfec510abab89753fac1ac0e1112364e7d250545963f135f2a33188ed",
    ),
    (
        "m/0'",
        "8b59aa11380b624e81507a27fedda59fea6d0b779a778918a2fd3590e16e9c69",
        "68e0fe46dfb67e368c75379acec591dad19df3cde26e63b93a8e704f1dade7a3",
        "8c8a13df77a28f3445213a0f432fde644acaa215fc72dcdf300d5efaa85d350c",
    ),
    (
        "m/0'/1'",
        "a320425f77d1b5c2505a6b1b27382b37368ee640e3557c315416801243552f14",
        "b1d0bad404bf35da785a64ca1ac54b2617211d2777696fbffaf208f746ae84f2",
        "1932a5270f335bed617d5b935c80aedb1a35bd9fc1e31acafd5372c30f5c1187",
    ),
]


class DerivationPathTestCase(unittest.TestCase):
    def test_parse(self):
        path = DerivationPath.parse("m/44'/406'/0'")
        self.assertEqual(
            path.indices,
            (FIRST_HARDENED_INDEX + 44, FIRST_HARDENED_INDEX + 406, FIRST_HARDENED_INDEX),
        )
        self.assertEqual(str(path), "m/44'/406'/0'")
        self.assertEqual(str(DerivationPath.parse(TEXTILE_ACCOUNT_PREFIX)), TEXTILE_ACCOUNT_PREFIX)

        with self.subTest("master path"):
            self.assertEqual(DerivationPath.parse("m").indices, ())
            self.assertEqual(str(DerivationPath()), "m")

        with self.subTest("max child number"):
            path = DerivationPath.parse(f"m/{FIRST_HARDENED_INDEX - 1}'")
            self.assertEqual(path.indices, (0xFFFFFFFF,))

    def test_parse_invalid(self):
        for path in ("", "44'/406'", "m/", "m/abc'", "m/-1'", "m/44''", "m//0'", f"m/{FIRST_HARDENED_INDEX}'", "m/४'"):
            with self.subTest(path=path):
                with self.assertRaises(InvalidDerivationPath):
                    DerivationPath.parse(path)

    def test_non_hardened_segments_are_rejected(self):
        for path in ("m/0", "m/44'/406'/0", "m/44/406'"):
            with self.subTest(path=path):
                with self.assertRaises(NonHardenedIndexRejected):
                    DerivationPath.parse(path)

        with self.subTest("non-hardened indices"):
            with self.assertRaises(NonHardenedIndexRejected) as err:
                DerivationPath((FIRST_HARDENED_INDEX, 1))
            self.assertEqual(err.exception.index, 1)

        with self.subTest("out of range indices"):
            with self.assertRaises(InvalidDerivationPath):
                DerivationPath((1 << 32,))
            with self.assertRaises(InvalidDerivationPath):
                DerivationPath((-1,))

    def test_child(self):
        path = DerivationPath.parse(TEXTILE_ACCOUNT_PREFIX).child(hardened(7))
        self.assertEqual(str(path), "m/44'/406'/7'")

        with self.assertRaises(NonHardenedIndexRejected):
            DerivationPath.parse(TEXTILE_ACCOUNT_PREFIX).child(7)

    def test_hardened(self):
        self.assertEqual(hardened(0), FIRST_HARDENED_INDEX)
        self.assertTrue(is_hardened(hardened(0)))
        self.assertFalse(is_hardened(FIRST_HARDENED_INDEX - 1))
        self.assertFalse(is_hardened(1 << 32))
        for index in (-1, FIRST_HARDENED_INDEX):
            with self.subTest(index=index):
                with self.assertRaises(InvalidDerivationPath):
                    hardened(index)


class ChainKeyTestCase(unittest.TestCase):
    def test_slip10_vectors(self):
        for path, chain_code, key, public_key in SLIP10_VECTORS:
            with self.subTest(path=path):
                derived = derive_for_path(path, SLIP10_SEED)
                self.assertEqual(derived.chain_code.hex(), chain_code)
                self.assertEqual(derived.key.hex(), key)
                self.assertEqual(derived.raw_seed.hex(), key)
                self.assertEqual(derived.public_key.hex(), public_key)

    def test_step_by_step_matches_path(self):
        master = ChainKey.master(SLIP10_SEED)
        stepped = master.derive(hardened(0)).derive(hardened(1))
        self.assertEqual(stepped, derive_for_path("m/0'/1'", SLIP10_SEED))
        self.assertEqual(stepped, master.derive_path([hardened(0), hardened(1)]))
        self.assertEqual(
            stepped, master.derive_path(DerivationPath.parse("m/0'/1'"))
        )

    def test_deterministic(self):
        path = "m/44'/406'/0'"
        self.assertEqual(
            derive_for_path(path, SLIP10_SEED), derive_for_path(path, SLIP10_SEED)
        )
        self.assertNotEqual(
            derive_for_path(path, SLIP10_SEED),
            derive_for_path("m/44'/406'/1'", SLIP10_SEED),
        )
        self.assertNotEqual(
            derive_for_path(path, SLIP10_SEED),
            derive_for_path(path, SLIP10_SEED[:-1]),
        )

    def test_non_hardened_derivation_is_rejected(self):
        master = ChainKey.master(SLIP10_SEED)
        for index in (0, 1, FIRST_HARDENED_INDEX - 1, 1 << 32):
            with self.subTest(index=index):
                with self.assertRaises(NonHardenedIndexRejected):
                    master.derive(index)

        with self.subTest("derivation errors share a base class"):
            with self.assertRaises(DerivationError):
                master.derive_path([hardened(0), 0])
            with self.assertRaises(DerivationError):
                derive_for_path("m/0'/0", SLIP10_SEED)

    def test_repr_does_not_expose_key(self):
        master = ChainKey.master(SLIP10_SEED)
        self.assertNotIn(master.key.hex(), repr(master))


if __name__ == "__main__":
    unittest.main()
