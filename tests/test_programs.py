import pytest

from solkit.programs import (
    AccountMeta,
    Instruction,
    build_memo,
    create_associated_token_account,
    request_heap_frame,
    request_units,
    set_compute_unit_limit,
    set_compute_unit_price,
)
from solkit.publickey import (
    COMPUTE_BUDGET_PROGRAM_ID,
    MEMO_PROGRAM_ID,
    SPL_ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    SYSVAR_RENT_PUBKEY,
    TOKEN_PROGRAM_ID,
    PublicKey,
)


def key(text):
    return PublicKey.from_string(text)


def test_create_associated_token_account():
    funder = key("EvN4kgKmCmYzdbd5kL8Q8YgkUW5RoqMTpBczrfLExtx7")
    owner = key("5JksDo879mvhxnBPLKPQLvgemxi4et75ipWC9BaLTHBK")
    mint = key("G1dYC47buM23b4kdWsa7utfEGM95t2LL3fZn535W5pYC")
    ata = key("8qJdAUsYNCRDDfs7ANyCoLPUj9CfnTM1aJU6Sndbviro")

    got = create_associated_token_account(
        funder=funder, owner=owner, mint=mint, associated_token_account=ata
    )

    assert got == Instruction(
        program_id=SPL_ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_ID,
        accounts=(
            AccountMeta(funder, True, True),
            AccountMeta(ata, False, True),
            AccountMeta(owner, False, False),
            AccountMeta(mint, False, False),
            AccountMeta(SYSTEM_PROGRAM_ID, False, False),
            AccountMeta(TOKEN_PROGRAM_ID, False, False),
            AccountMeta(SYSVAR_RENT_PUBKEY, False, False),
        ),
        data=bytes([0]),
    )


def test_request_units():
    assert request_units(units=1000, additional_fee=2000) == Instruction(
        program_id=COMPUTE_BUDGET_PROGRAM_ID,
        accounts=(),
        data=bytes([0, 232, 3, 0, 0, 208, 7, 0, 0]),
    )


def test_request_heap_frame():
    assert request_heap_frame(heap_bytes=1000) == Instruction(
        program_id=COMPUTE_BUDGET_PROGRAM_ID,
        accounts=(),
        data=bytes([1, 232, 3, 0, 0]),
    )


def test_set_compute_unit_limit():
    assert set_compute_unit_limit(units=1000) == Instruction(
        program_id=COMPUTE_BUDGET_PROGRAM_ID,
        accounts=(),
        data=bytes([2, 232, 3, 0, 0]),
    )


def test_set_compute_unit_price():
    assert set_compute_unit_price(micro_lamports=1000) == Instruction(
        program_id=COMPUTE_BUDGET_PROGRAM_ID,
        accounts=(),
        data=bytes([3, 232, 3, 0, 0, 0, 0, 0, 0]),
    )


def test_set_compute_unit_limit_rejects_negative():
    with pytest.raises(ValueError):
        set_compute_unit_limit(units=-1)


def test_request_heap_frame_rejects_overflow():
    with pytest.raises(ValueError):
        request_heap_frame(heap_bytes=1 << 32)


def test_build_memo():
    signer_1 = key("S1gner1111111111111111111111111111111111111")
    signer_2 = key("S1gner1111111111111111111111111111111111112")
    memo = "👻".encode("utf-8")

    got = build_memo(memo=memo, signer_pubkeys=[signer_1, signer_2])

    assert got == Instruction(
        program_id=MEMO_PROGRAM_ID,
        accounts=(
            AccountMeta(signer_1, is_signer=True, is_writable=False),
            AccountMeta(signer_2, is_signer=True, is_writable=False),
        ),
        data=memo,
    )


def test_build_memo_without_signers():
    got = build_memo(b"use nonce")
    assert (got.program_id, got.accounts, got.data) == (
        MEMO_PROGRAM_ID,
        (),
        b"use nonce",
    )


def test_instruction_normalises_accounts_and_data():
    meta = AccountMeta(SYSTEM_PROGRAM_ID, False, False)
    got = Instruction(
        program_id=MEMO_PROGRAM_ID, accounts=[meta], data=bytearray(b"\x01")
    )
    assert got == Instruction(MEMO_PROGRAM_ID, (meta,), b"\x01")