"""Hardened key derivation for ed25519 seeds (SLIP-0010 style paths)."""

from __future__ import annotations

import hashlib
import hmac
import re
from dataclasses import dataclass

_PATH_PATTERN = re.compile(r"m(/[0-9]+')*")
_HARDENED_OFFSET = 1 << 31
_UINT32_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class Key:
    """A derived private key together with its chain code."""

    private_key: bytes
    chain_code: bytes


def _hmac512(key: bytes, data: bytes) -> bytes:
    return hmac.new(key, data, hashlib.sha512).digest()


def _split(digest: bytes) -> Key:
    return Key(private_key=digest[:32], chain_code=digest[32:])


def ckd_priv(key: Key, index: int) -> Key:
    """Derive the child key at a (hardened) index from a parent key."""
    if not 0 <= index <= _UINT32_MASK:
        raise ValueError(f"index {index} is not an unsigned 32-bit integer")
    data = b"\x00" + bytes(key.private_key) + index.to_bytes(4, "big")
    return _split(_hmac512(bytes(key.chain_code), data))


def create_master_key(seed: bytes) -> Key:
    """Derive the master key from a seed."""
    return _split(_hmac512(b"ed25519 seed", bytes(seed)))


def is_valid_path(path: str) -> bool:
    """Whether the path is 'm' followed by hardened segments like /44'."""
    return _PATH_PATTERN.fullmatch(path) is not None


def derived(path: str, seed: bytes) -> Key:
    """Derive the key for a path such as m/44'/501'/0'/0' from a seed.

    Raises ValueError for a malformed path or a segment that does not fit in
    an unsigned 32-bit integer.
    """
    if not is_valid_path(path):
        raise ValueError(f"invalid path: {path}")

    key = create_master_key(seed)
    for segment in path.split("/")[1:]:
        value = int(segment[:-1])
        if value > _UINT32_MASK:
            raise ValueError(f"failed to parse {segment[:-1]} as a uint32")
        key = ckd_priv(key, (value + _HARDENED_OFFSET) & _UINT32_MASK)
    return key