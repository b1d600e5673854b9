"""Decoded account, cluster node and simulation results returned by a node."""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from solkit.publickey import PublicKey

_ENCODING = "base64"
_DIGITS = re.compile(r"[0-9]+")
_U64_LIMIT = 1 << 64


@dataclass(frozen=True)
class AccountInfo:
    """An account's balance, owner, flags and raw data."""

    lamports: int
    owner: PublicKey
    executable: bool
    rent_epoch: int
    data: bytes


@dataclass(frozen=True)
class DataSlice:
    """A window of account data to fetch: an offset and a length in bytes."""

    offset: int
    length: int

    def to_json(self) -> dict:
        return {"offset": self.offset, "length": self.length}


@dataclass(frozen=True)
class ClusterNode:
    """A node taking part in the cluster."""

    pubkey: PublicKey
    gossip: Optional[str] = None
    tpu: Optional[str] = None
    rpc: Optional[str] = None
    version: Optional[str] = None
    feature_set: Optional[int] = None
    shred_version: Optional[int] = None


@dataclass(frozen=True)
class SimulationResult:
    """The outcome of simulating a transaction."""

    err: Any = None
    logs: Optional[list[str]] = None
    accounts: Optional[list[Optional[AccountInfo]]] = None


def decode_account_info(value: Optional[Mapping[str, Any]]) -> Optional[AccountInfo]:
    """Decode an account value fetched with base64 encoding; None stays None.

    Raises ValueError when the data is not a base64 [data, encoding] pair.
    """
    if value is None:
        return None
    data = value.get("data")
    if not isinstance(data, (list, tuple)) or len(data) != 2:
        raise ValueError("account data is not a [data, encoding] pair")
    if data[1] != _ENCODING:
        raise ValueError("encoding mismatch")
    try:
        raw = base64.b64decode(data[0], validate=True)
    except (binascii.Error, TypeError, ValueError):
        raise ValueError("failed to base64 decode data") from None
    return AccountInfo(
        lamports=value["lamports"],
        owner=PublicKey.from_string(value["owner"]),
        executable=value["executable"],
        rent_epoch=value["rentEpoch"],
        data=raw,
    )


def decode_cluster_node(value: Mapping[str, Any]) -> ClusterNode:
    """Decode one entry of a cluster node listing."""
    return ClusterNode(
        pubkey=PublicKey.from_string(value["pubkey"]),
        gossip=value.get("gossip"),
        tpu=value.get("tpu"),
        rpc=value.get("rpc"),
        version=value.get("version"),
        feature_set=value.get("featureSet"),
        shred_version=value.get("shredVersion"),
    )


def parse_token_amount(value: Mapping[str, Any]) -> tuple[int, int]:
    """Return (amount, decimals) from a token amount value.

    Raises ValueError when the amount is not an unsigned 64-bit decimal string.
    """
    amount = value.get("amount")
    if not isinstance(amount, str) or not _DIGITS.fullmatch(amount):
        raise ValueError(f"failed to cast token amount {amount!r}")
    number = int(amount)
    if number >= _U64_LIMIT:
        raise ValueError(f"failed to cast token amount {amount!r}: out of range")
    return number, value["decimals"]