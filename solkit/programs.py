"""Instruction builders for the associated token, compute budget and memo programs."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable

from solkit.bincode import Kind, serialize_data
from solkit.publickey import (
    COMPUTE_BUDGET_PROGRAM_ID,
    MEMO_PROGRAM_ID,
    SPL_ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    SYSVAR_RENT_PUBKEY,
    TOKEN_PROGRAM_ID,
    PublicKey,
)


@dataclass(frozen=True)
class AccountMeta:
    """An account referenced by an instruction, with its access flags."""

    pubkey: PublicKey
    is_signer: bool
    is_writable: bool


@dataclass(frozen=True)
class Instruction:
    """A program call: the program, the accounts it touches and its data."""

    program_id: PublicKey
    accounts: tuple[AccountMeta, ...] = field(default_factory=tuple)
    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "accounts", tuple(self.accounts))
        object.__setattr__(self, "data", bytes(self.data))


class AssociatedTokenInstruction(enum.IntEnum):
    """Instruction tags of the associated token account program."""

    CREATE = 0
    CREATE_IDEMPOTENT = 1


class ComputeBudgetInstruction(enum.IntEnum):
    """Instruction tags of the compute budget program."""

    REQUEST_UNITS = 0
    REQUEST_HEAP_FRAME = 1
    SET_COMPUTE_UNIT_LIMIT = 2
    SET_COMPUTE_UNIT_PRICE = 3


def create_associated_token_account(
    funder: PublicKey,
    owner: PublicKey,
    mint: PublicKey,
    associated_token_account: PublicKey,
) -> Instruction:
    """Create the associated token account of an owner for a mint."""
    return Instruction(
        program_id=SPL_ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_ID,
        accounts=(
            AccountMeta(funder, is_signer=True, is_writable=True),
            AccountMeta(associated_token_account, is_signer=False, is_writable=True),
            AccountMeta(owner, is_signer=False, is_writable=False),
            AccountMeta(mint, is_signer=False, is_writable=False),
            AccountMeta(SYSTEM_PROGRAM_ID, is_signer=False, is_writable=False),
            AccountMeta(TOKEN_PROGRAM_ID, is_signer=False, is_writable=False),
            AccountMeta(SYSVAR_RENT_PUBKEY, is_signer=False, is_writable=False),
        ),
        data=serialize_data(int(AssociatedTokenInstruction.CREATE), Kind.U8),
    )


def _compute_budget(data: bytes) -> Instruction:
    return Instruction(program_id=COMPUTE_BUDGET_PROGRAM_ID, accounts=(), data=data)


def request_units(units: int, additional_fee: int) -> Instruction:
    """Request a number of compute units and pay an additional fee."""
    return _compute_budget(
        serialize_data(
            (int(ComputeBudgetInstruction.REQUEST_UNITS), units, additional_fee),
            (Kind.U8, Kind.U32, Kind.U32),
        )
    )


def request_heap_frame(heap_bytes: int) -> Instruction:
    """Request a heap frame of the given size in bytes."""
    return _compute_budget(
        serialize_data(
            (int(ComputeBudgetInstruction.REQUEST_HEAP_FRAME), heap_bytes),
            (Kind.U8, Kind.U32),
        )
    )


def set_compute_unit_limit(units: int) -> Instruction:
    """Set the compute unit limit the transaction may consume."""
    return _compute_budget(
        serialize_data(
            (int(ComputeBudgetInstruction.SET_COMPUTE_UNIT_LIMIT), units),
            (Kind.U8, Kind.U32),
        )
    )


def set_compute_unit_price(micro_lamports: int) -> Instruction:
    """Set the compute unit price in micro-lamports for higher prioritisation."""
    return _compute_budget(
        serialize_data(
            (int(ComputeBudgetInstruction.SET_COMPUTE_UNIT_PRICE), micro_lamports),
            (Kind.U8, Kind.U64),
        )
    )


def build_memo(
    memo: bytes, signer_pubkeys: Iterable[PublicKey] = ()
) -> Instruction:
    """Attach a memo, optionally requiring the given keys to sign."""
    return Instruction(
        program_id=MEMO_PROGRAM_ID,
        accounts=tuple(
            AccountMeta(pubkey, is_signer=True, is_writable=False)
            for pubkey in signer_pubkeys
        ),
        data=bytes(memo),
    )