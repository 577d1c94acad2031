"""
HD key derivation errors
"""


class DerivationError(Exception):
    """
    HD key derivation base exception
    """


class InvalidDerivationPath(DerivationError):
    """
    Derivation path is malformed, e.g., m/44'/abc', or an index is out of the 32-bit range
    """


class NonHardenedIndexRejected(DerivationError):
    """
    ed25519 only supports hardened child key derivation
    """

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"no public derivation for ed25519: index={index}")
