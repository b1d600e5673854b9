import base64

import pytest

from solkit.accountinfo import (
    AccountInfo,
    DataSlice,
    SimulationResult,
    decode_account_info,
    decode_cluster_node,
    parse_token_amount,
)
from solkit.publickey import SYSTEM_PROGRAM_ID, TOKEN_PROGRAM_ID, PublicKey

OWNER = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
NODE = "EvN4kgKmCmYzdbd5kL8Q8YgkUW5RoqMTpBczrfLExtx7"


def _value(data):
    return {
        "lamports": 2039280,
        "owner": OWNER,
        "executable": False,
        "rentEpoch": 361,
        "data": data,
    }


def test_decode_account_info_round_trip():
    payload = bytes(range(40))
    info = decode_account_info(_value([base64.b64encode(payload).decode(), "base64"]))
    assert info == AccountInfo(
        lamports=2039280,
        owner=TOKEN_PROGRAM_ID,
        executable=False,
        rent_epoch=361,
        data=payload,
    )


def test_decode_account_info_empty_data():
    info = decode_account_info(_value(["", "base64"]))
    assert info.data == b""


def test_decode_account_info_none():
    assert decode_account_info(None) is None


def test_decode_account_info_rejects_other_encoding():
    with pytest.raises(ValueError, match="encoding mismatch"):
        decode_account_info(_value(["AAAA", "base58"]))


def test_decode_account_info_rejects_non_pair():
    with pytest.raises(ValueError):
        decode_account_info(_value("AAAA"))


def test_decode_account_info_rejects_bad_base64():
    with pytest.raises(ValueError, match="base64"):
        decode_account_info(_value(["not base64!", "base64"]))


def test_decode_cluster_node_full():
    node = decode_cluster_node(
        {
            "pubkey": NODE,
            "gossip": "127.0.0.1:8001",
            "tpu": "127.0.0.1:8003",
            "rpc": "127.0.0.1:8899",
            "version": "1.10.0",
            "featureSet": 1234,
            "shredVersion": 77,
        }
    )
    assert node.pubkey == PublicKey.from_string(NODE)
    assert node.gossip == "127.0.0.1:8001"
    assert node.rpc == "127.0.0.1:8899"
    assert node.feature_set == 1234
    assert node.shred_version == 77


def test_decode_cluster_node_missing_optionals():
    node = decode_cluster_node({"pubkey": NODE, "rpc": None})
    assert node.pubkey.to_base58() == NODE
    assert (node.gossip, node.tpu, node.rpc, node.version) == (None, None, None, None)
    assert node.feature_set is None and node.shred_version is None


def test_parse_token_amount():
    assert parse_token_amount({"amount": "100000000", "decimals": 8}) == (100000000, 8)


def test_parse_token_amount_u64_max():
    top = str(2**64 - 1)
    assert parse_token_amount({"amount": top, "decimals": 0}) == (int(top), 0)


@pytest.mark.parametrize("amount", [str(2**64), "-1", "1_000", " 5", "", "1.5", None])
def test_parse_token_amount_rejects(amount):
    with pytest.raises(ValueError):
        parse_token_amount({"amount": amount, "decimals": 0})


def test_data_slice_to_json():
    assert DataSlice(offset=40, length=32).to_json() == {"offset": 40, "length": 32}


def test_simulation_result_defaults_and_fields():
    empty = SimulationResult()
    assert (empty.err, empty.logs, empty.accounts) == (None, None, None)
    info = decode_account_info(
        {"lamports": 1, "owner": SYSTEM_PROGRAM_ID.to_base58(), "executable": True,
         "rentEpoch": 0, "data": ["", "base64"]}
    )
    result = SimulationResult(err=None, logs=["log"], accounts=[info, None])
    assert result.accounts[0].owner == SYSTEM_PROGRAM_ID
    assert result.accounts[1] is None