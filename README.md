# solkit

A small toolkit for working with the Solana blockchain from Python, with no
dependencies outside the standard library.

It covers:

- **Base58** encoding and decoding (`solkit.base58`).
- **Public keys** (`solkit.publickey`): parsing and formatting, curve checks,
  program-derived addresses, seeded addresses, associated token account
  addresses, and the well-known program and sysvar addresses.
- **Instruction builders** (`solkit.programs`) for the associated token
  account, compute budget and memo programs.
- **Binary encoding** (`solkit.bincode`) of plain values and the compact
  variable-length integers used in transaction messages.
- **HD key derivation** (`solkit.hdwallet`) along hardened ed25519 paths such
  as `m/44'/501'/0'/0'`.
- **A JSON-RPC client** (`solkit.client`, `solkit.rpc`, `solkit.accountinfo`)
  for balances, account data, blockhashes, fees, transaction submission and
  simulation, signatures and cluster information.

## Installation

```
pip install solkit
```

To run the test suite:

```
pip install "solkit[test]"
pytest
```

## Base58

```python
from solkit.base58 import b58decode, b58encode

b58encode(b"\x00\x01")   # "12"
b58decode("12")          # b"\x00\x01"
```

`b58decode` raises `ValueError` for an empty string or a character outside the
alphabet.

## Public keys and addresses

```python
from solkit.publickey import (
    SYSTEM_PROGRAM_ID,
    PublicKey,
    create_with_seed,
    find_associated_token_address,
    find_program_address,
    is_on_curve,
)

wallet = PublicKey.from_string("EvN4kgKmCmYzdbd5kL8Q8YgkUW5RoqMTpBczrfLExtx7")
mint = PublicKey.from_string("8765cK2Vucsic6NA5nm4cfkrCzusaFVqBf6Pk31tGkXH")

ata, bump = find_associated_token_address(wallet, mint)
print(ata.to_base58(), bump)

print(is_on_curve(wallet))   # True: a point on edwards25519
print(is_on_curve(ata))      # False: program addresses lie off the curve

seeded = create_with_seed(wallet, "0", SYSTEM_PROGRAM_ID)
```

A `PublicKey` is an immutable 32-byte value; `bytes(key)` gives its raw bytes,
`str(key)` and `key.to_base58()` its base58 form, and `key.to_json()` a JSON
string literal. `PublicKey.from_bytes` left-pads short input with zeros and
keeps only the first 32 bytes of longer input; `PublicKey.from_string` does the
same after base58 decoding.

`create_program_address(seeds, program_id)` raises `ProgramAddressError` (a
`ValueError`) when there are more than 16 seeds, a seed is longer than 32
bytes, or the resulting address lands on the curve. `find_program_address`
tries bump seeds from 255 down to 1 and returns the first address that works
together with its bump; it raises `ProgramAddressError` if none does.

The module also defines constants such as `TOKEN_PROGRAM_ID`,
`TOKEN_2022_PROGRAM_ID`, `MEMO_PROGRAM_ID`, `COMPUTE_BUDGET_PROGRAM_ID`,
`SPL_ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_ID`, `SYSVAR_RENT_PUBKEY` and
`SYSVAR_CLOCK_PUBKEY`.

## Building instructions

```python
from solkit.programs import (
    build_memo,
    create_associated_token_account,
    request_heap_frame,
    set_compute_unit_limit,
    set_compute_unit_price,
)

instructions = [
    set_compute_unit_limit(100_000),
    set_compute_unit_price(1_000_000),
    create_associated_token_account(
        funder=wallet,
        owner=wallet,
        mint=mint,
        associated_token_account=ata,
    ),
    build_memo("hello".encode(), [wallet]),
]
```

Each builder returns a frozen `Instruction` holding the `program_id`, a tuple
of `AccountMeta` entries (`pubkey`, `is_signer`, `is_writable`) and the encoded
`data`. The instruction tags are available as the `AssociatedTokenInstruction`
and `ComputeBudgetInstruction` enums; `request_units(units, additional_fee)`
is also provided.

## Encoding

```python
from solkit.bincode import Kind, serialize_data, uint_to_var_len_bytes

uint_to_var_len_bytes(127)   # b"\x7f"
uint_to_var_len_bytes(128)   # b"\x80\x01"

serialize_data(1000, Kind.U32)                    # b"\xe8\x03\x00\x00"
serialize_data((2, 1000), (Kind.U8, Kind.U32))    # a struct: fields in order
serialize_data(None, [Kind.U64])                  # an optional: b"\x00"
serialize_data("hi", Kind.STRING)                 # u64 length, then UTF-8 bytes
```

A spec is a `Kind`, a tuple of specs for a struct, or a one-element list for an
optional value. Integers are little-endian; `Kind.BYTES` is written raw.
A value that does not fit its kind raises `ValueError`; an unknown spec raises
`TypeError`.

## Deriving keys from a seed

```python
from solkit.hdwallet import derived, is_valid_path

seed = bytes.fromhex("000102030405060708090a0b0c0d0e0f")

is_valid_path("m/44'/501'/0'/0'")    # True
is_valid_path("m/44/501'")           # False: every segment must be hardened
key = derived("m/0'/1'", seed)
key.private_key, key.chain_code      # 32 bytes each
```

`derived` raises `ValueError` for a malformed path or a segment that does not
fit in an unsigned 32-bit integer. `create_master_key(seed)` and
`ckd_priv(key, index)` expose the individual steps.

## Talking to a node

```python
from solkit.accountinfo import DataSlice
from solkit.client import Client
from solkit.rpc import Commitment

client = Client("http://localhost:8899")

balance = client.get_balance(
    "EvN4kgKmCmYzdbd5kL8Q8YgkUW5RoqMTpBczrfLExtx7", commitment=Commitment.CONFIRMED
)
amount, decimals = client.get_token_account_balance(token_account_address)
latest = client.get_latest_blockhash()        # the node's "value" object, as a dict
info = client.get_account_info(address)       # an AccountInfo, or None if absent
head = client.get_account_info(address, data_slice=DataSlice(offset=0, length=8))
signature = client.send_transaction(raw_transaction_bytes)
```

With no endpoint, `Client()` talks to `http://localhost:8899`. Other methods
include `get_token_supply`, `get_multiple_accounts`, `get_recent_blockhash`,
`is_blockhash_valid`, `get_fee_for_message`, `simulate_transaction` (returning
a `SimulationResult`), `get_slot`, `get_minimum_balance_for_rent_exemption`,
`get_block_time`, `get_identity`, `get_genesis_hash`,
`get_first_available_block`, `get_version`, `request_airdrop`,
`minimum_ledger_slot`, `get_transaction_count`, `get_cluster_nodes` (returning
`ClusterNode` values), `get_signature_status`, `get_signature_statuses`,
`get_signatures_for_address` and `get_nonce_from_nonce_account`.

A failed request, or an error reported by the node, is raised as `RpcError`;
its `error` attribute holds the node's error object when there is one.
Account data that is not a base64 `[data, encoding]` pair raises `ValueError`.

The client sends requests through `HttpTransport` by default. Any object with a
`call(method, params)` method that returns the decoded JSON-RPC response can be
passed instead, which lets the client run without a network:

```python
class FixedTransport:
    def call(self, method, params=None):
        return {"jsonrpc": "2.0", "id": 1, "result": 42}

Client(transport=FixedTransport()).get_slot()   # 42
```

## What this package does not do

- It has no keypairs and does not sign anything. It does not build, serialize
  or parse messages and transactions: `send_transaction`,
  `simulate_transaction` and `get_fee_for_message` take bytes that were
  serialized elsewhere.
- There are no instruction builders for the system, token or token metadata
  programs, and no decoding of token, mint or nonce account layouts;
  `get_nonce_from_nonce_account` only reads the stored nonce.
- Blocks and confirmed transactions cannot be fetched.
- It installs no command-line program; it is a library only.