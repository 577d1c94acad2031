"""
libp2p peer identity support.

Account keys are ed25519 keys, which map directly onto libp2p identities:

- keys are marshalled using the libp2p crypto protobuf: ``{Type: Ed25519, Data: key}``
- the peer ID is the base58 encoded identity multihash of the marshalled public key

https://github.com/libp2p/specs/blob/master/peer-ids/peer-ids.md
"""

from typing import NewType

import base58

from textile_wallet.account.error import InvalidPeerId

# base58 encoded multihash, e.g., 12D3KooW...
PeerId = NewType("PeerId", str)

PUBLIC_KEY_SIZE = 32
# libp2p ed25519 private keys are marshalled as seed | public key
PRIVATE_KEY_SIZE = 64

# protobuf field tags
_KEY_TYPE_TAG = 0x08
_KEY_DATA_TAG = 0x12
# libp2p crypto.pb.KeyType
KEY_TYPE_ED25519 = 1

# multihash codes
_IDENTITY_HASH = 0x00
_SHA2_256 = 0x12
# keys whose marshalled size is at most 42 bytes are inlined using the identity hash
_MAX_INLINE_KEY_SIZE = 42


def marshal_public_key(public_key: bytes) -> bytes:
    """
    :return: libp2p protobuf encoded ed25519 public key
    """
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise ValueError(f"ed25519 public key must be {PUBLIC_KEY_SIZE} bytes")
    return _marshal_key(public_key)


def marshal_private_key(seed: bytes, public_key: bytes) -> bytes:
    """
    :return: libp2p protobuf encoded ed25519 private key
    """
    private_key = bytes(seed) + bytes(public_key)
    if len(private_key) != PRIVATE_KEY_SIZE:
        raise ValueError(f"ed25519 private key must be {PRIVATE_KEY_SIZE} bytes")
    return _marshal_key(private_key)


def peer_id_from_public_key(public_key: bytes) -> PeerId:
    """
    Derives the libp2p peer ID for the ed25519 public key.
    """
    marshalled = marshal_public_key(public_key)
    if len(marshalled) > _MAX_INLINE_KEY_SIZE:
        raise ValueError("marshalled key is too large to inline in a peer ID")
    multihash = bytes([_IDENTITY_HASH, len(marshalled)]) + marshalled
    return PeerId(base58.b58encode(multihash).decode())


def public_key_from_peer_id(peer_id: str) -> bytes:
    """
    Extracts the ed25519 public key that is inlined in the peer ID.

    :exception InvalidPeerId: if the peer ID is not base58 encoded, or does not inline an ed25519 public key
    """
    try:
        multihash = base58.b58decode(peer_id)
    except ValueError as err:
        raise InvalidPeerId(f"peer ID is not base58 encoded: {err}") from err

    if len(multihash) < 2:
        raise InvalidPeerId("peer ID is too short")
    code, size, marshalled = multihash[0], multihash[1], multihash[2:]
    if code == _SHA2_256:
        raise InvalidPeerId("peer ID is a hash of the public key, which cannot be recovered")
    if code != _IDENTITY_HASH or size != len(marshalled):
        raise InvalidPeerId("peer ID is not an identity multihash")

    prefix = _key_prefix(PUBLIC_KEY_SIZE)
    if not marshalled.startswith(prefix) or len(marshalled) != len(prefix) + PUBLIC_KEY_SIZE:
        raise InvalidPeerId("peer ID does not contain an ed25519 public key")
    return marshalled[len(prefix) :]


def _key_prefix(size: int) -> bytes:
    return bytes([_KEY_TYPE_TAG, KEY_TYPE_ED25519, _KEY_DATA_TAG, size])


def _marshal_key(data: bytes) -> bytes:
    return _key_prefix(len(data)) + data
