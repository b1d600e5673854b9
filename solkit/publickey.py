"""Public keys, well-known program addresses and program-derived addresses."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from typing import Iterable

from solkit.base58 import b58decode, b58encode

PUBLIC_KEY_LENGTH = 32
MAX_SEED_LENGTH = 32
MAX_SEEDS = 16

_PDA_MARKER = b"ProgramDerivedAddress"

# edwards25519 field prime and curve constant d = -121665/121666.
_P = 2**255 - 19
_D = (-121665 * pow(121666, -1, _P)) % _P


class ProgramAddressError(ValueError):
    """Raised when a program-derived address cannot be made from the seeds."""


@dataclass(frozen=True)
class PublicKey:
    """A 32-byte Solana public key."""

    raw: bytes = bytes(PUBLIC_KEY_LENGTH)

    def __post_init__(self) -> None:
        raw = bytes(self.raw)
        if len(raw) != PUBLIC_KEY_LENGTH:
            raise ValueError(
                f"public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(raw)}"
            )
        object.__setattr__(self, "raw", raw)

    @classmethod
    def from_string(cls, text: str) -> PublicKey:
        """Build a key from its base58 form; short values are left-padded with zeros."""
        return cls.from_bytes(b58decode(text))

    @classmethod
    def from_bytes(cls, data: bytes) -> PublicKey:
        """Build a key from bytes: longer input is cut to 32, shorter is left-padded."""
        data = bytes(data)[:PUBLIC_KEY_LENGTH]
        return cls(data.rjust(PUBLIC_KEY_LENGTH, b"\0"))

    def to_base58(self) -> str:
        return b58encode(self.raw)

    def to_json(self) -> str:
        """The key as a JSON string literal holding its base58 form."""
        return json.dumps(self.to_base58())

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return self.to_base58()

    def __repr__(self) -> str:
        return f"PublicKey({self.to_base58()!r})"


def is_on_curve(pubkey: PublicKey) -> bool:
    """Whether the key's bytes decode to a point on the edwards25519 curve."""
    # The top bit is the sign of x and is ignored when reading y; values of y
    # at or above the prime are accepted and reduced.
    y = int.from_bytes(bytes(pubkey), "little") & ((1 << 255) - 1)
    y %= _P
    y2 = y * y % _P
    u = (y2 - 1) % _P
    v = (_D * y2 + 1) % _P
    x2 = u * pow(v, -1, _P) % _P
    return x2 == 0 or pow(x2, (_P - 1) // 2, _P) == 1


def create_program_address(
    seeds: Iterable[bytes], program_id: PublicKey
) -> PublicKey:
    """Derive the program address for the seeds; it must lie off the curve."""
    seeds = [bytes(seed) for seed in seeds]
    if len(seeds) > MAX_SEEDS:
        raise ProgramAddressError(
            "length of the seed is too long for address generation"
        )
    if any(len(seed) > MAX_SEED_LENGTH for seed in seeds):
        raise ProgramAddressError(
            "length of the seed is too long for address generation"
        )
    digest = hashlib.sha256(
        b"".join(seeds) + bytes(program_id) + _PDA_MARKER
    ).digest()
    pubkey = PublicKey.from_bytes(digest)
    if is_on_curve(pubkey):
        raise ProgramAddressError("invalid seeds, address must fall off the curve")
    return pubkey


def find_program_address(
    seeds: Iterable[bytes], program_id: PublicKey
) -> tuple[PublicKey, int]:
    """Find the first valid address trying bump seeds 255 down to 1.

    Returns the address and the bump seed that produced it.
    """
    seeds = [bytes(seed) for seed in seeds]
    for nonce in range(0xFF, 0, -1):
        try:
            return create_program_address([*seeds, bytes([nonce])], program_id), nonce
        except ProgramAddressError:
            continue
    raise ProgramAddressError("unable to find a viable program address")


def create_with_seed(base: PublicKey, seed: str, program_id: PublicKey) -> PublicKey:
    """Derive an address from a base key, a text seed and an owning program."""
    digest = hashlib.sha256(
        bytes(base) + seed.encode("utf-8") + bytes(program_id)
    ).digest()
    return PublicKey.from_bytes(digest)


SYSTEM_PROGRAM_ID = PublicKey.from_string("11111111111111111111111111111111")
CONFIG_PROGRAM_ID = PublicKey.from_string("Config1111111111111111111111111111111111111")
STAKE_PROGRAM_ID = PublicKey.from_string("Stake11111111111111111111111111111111111111")
VOTE_PROGRAM_ID = PublicKey.from_string("Vote111111111111111111111111111111111111111")
BPF_LOADER_PROGRAM_ID = PublicKey.from_string(
    "BPFLoader1111111111111111111111111111111111"
)
SECP256K1_PROGRAM_ID = PublicKey.from_string(
    "KeccakSecp256k11111111111111111111111111111"
)
TOKEN_PROGRAM_ID = PublicKey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
TOKEN_2022_PROGRAM_ID = PublicKey.from_string(
    "TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb"
)
MEMO_PROGRAM_ID = PublicKey.from_string("MemoSq4gqABAXKb96qnH8TysNcWxMyWCqXgDLGmfcHr")
SPL_ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_ID = PublicKey.from_string(
    "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"
)
SPL_NAME_SERVICE_PROGRAM_ID = PublicKey.from_string(
    "namesLPneVptA9Z5rqUDD9tMTWEJwofgaYwp8cawRkX"
)
METAPLEX_TOKEN_META_PROGRAM_ID = PublicKey.from_string(
    "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"
)
COMPUTE_BUDGET_PROGRAM_ID = PublicKey.from_string(
    "ComputeBudget111111111111111111111111111111"
)

SYSVAR_CLOCK_PUBKEY = PublicKey.from_string("SysvarC1ock11111111111111111111111111111111")
SYSVAR_RECENT_BLOCKHASHES_PUBKEY = PublicKey.from_string(
    "SysvarRecentB1ockHashes11111111111111111111"
)
SYSVAR_RENT_PUBKEY = PublicKey.from_string("SysvarRent111111111111111111111111111111111")
SYSVAR_REWARDS_PUBKEY = PublicKey.from_string(
    "SysvarRewards111111111111111111111111111111"
)
SYSVAR_STAKE_HISTORY_PUBKEY = PublicKey.from_string(
    "SysvarStakeHistory1111111111111111111111111"
)
SYSVAR_INSTRUCTIONS_PUBKEY = PublicKey.from_string(
    "Sysvar1nstructions1111111111111111111111111"
)
STAKE_CONFIG_PUBKEY = PublicKey.from_string(
    "StakeConfig11111111111111111111111111111111"
)


def find_associated_token_address(
    wallet_address: PublicKey, token_mint_address: PublicKey
) -> tuple[PublicKey, int]:
    """The associated token account of a wallet for a mint, with its bump seed."""
    return find_program_address(
        [bytes(wallet_address), bytes(TOKEN_PROGRAM_ID), bytes(token_mint_address)],
        SPL_ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_ID,
    )