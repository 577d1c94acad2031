"""
Textile wallet: key encoding, capability based accounts, and HD account derivation for ed25519 keys
"""
