"""A high-level client for querying a node and submitting transactions."""

from __future__ import annotations

import base64
from typing import Any, Iterable, Optional, Union

from solkit.accountinfo import (
    AccountInfo,
    ClusterNode,
    DataSlice,
    SimulationResult,
    decode_account_info,
    decode_cluster_node,
    parse_token_amount,
)
from solkit.base58 import b58encode
from solkit.rpc import LOCALNET_ENDPOINT, Commitment, HttpTransport, check_rpc_result

CommitmentLike = Union[Commitment, str, None]

_NONCE_SLICE = DataSlice(offset=40, length=32)


def _commitment(value: CommitmentLike) -> Optional[str]:
    if value is None:
        return None
    return Commitment(value).value


def _config(**entries: Any) -> dict:
    """A config object holding only the entries that were set."""
    return {key: value for key, value in entries.items() if value is not None}


def _b64(raw: bytes) -> str:
    return base64.b64encode(bytes(raw)).decode("ascii")


class Client:
    """Wraps a JSON-RPC transport and returns decoded results.

    The transport is any object with a ``call(method, params)`` method that
    returns the decoded response; by default an HTTP transport to ``endpoint``.
    Every method raises RpcError when the request fails or the node reports
    an error.
    """

    def __init__(self, endpoint: Optional[str] = None, transport: Any = None) -> None:
        if transport is None:
            transport = HttpTransport(endpoint or LOCALNET_ENDPOINT)
        self.transport = transport

    def _call(self, method: str, *params: Any) -> Any:
        return check_rpc_result(self.transport.call(method, list(params)))

    def _call_with_config(self, method: str, args: list, config: dict) -> Any:
        if config:
            args = [*args, config]
        return self._call(method, *args)

    def get_balance(self, address: str, commitment: CommitmentLike = None) -> int:
        """The account's balance in lamports."""
        result = self._call_with_config(
            "getBalance", [address], _config(commitment=_commitment(commitment))
        )
        return result["value"]

    def get_token_account_balance(
        self, address: str, commitment: CommitmentLike = None
    ) -> tuple[int, int]:
        """The (amount, decimals) held by an SPL token account."""
        result = self._call_with_config(
            "getTokenAccountBalance",
            [address],
            _config(commitment=_commitment(commitment)),
        )
        return parse_token_amount(result["value"])

    def get_token_supply(
        self, mint_address: str, commitment: CommitmentLike = None
    ) -> tuple[int, int]:
        """The (total supply, decimals) of an SPL token mint."""
        result = self._call_with_config(
            "getTokenSupply",
            [mint_address],
            _config(commitment=_commitment(commitment)),
        )
        return parse_token_amount(result["value"])

    def get_account_info(
        self,
        address: str,
        commitment: CommitmentLike = None,
        data_slice: Optional[DataSlice] = None,
    ) -> Optional[AccountInfo]:
        """The account's info, or None if the account does not exist."""
        config = _config(
            encoding="base64",
            commitment=_commitment(commitment),
            dataSlice=data_slice.to_json() if data_slice is not None else None,
        )
        result = self._call("getAccountInfo", address, config)
        return decode_account_info(result["value"])

    def get_multiple_accounts(
        self,
        addresses: Iterable[str],
        commitment: CommitmentLike = None,
        data_slice: Optional[DataSlice] = None,
    ) -> list[Optional[AccountInfo]]:
        """Info for each address in order; None where an account does not exist."""
        config = _config(
            encoding="base64",
            commitment=_commitment(commitment),
            dataSlice=data_slice.to_json() if data_slice is not None else None,
        )
        result = self._call("getMultipleAccounts", list(addresses), config)
        return [decode_account_info(value) for value in result["value"]]

    def get_recent_blockhash(self) -> dict:
        """A recent blockhash and its fee calculator (deprecated by the node)."""
        return self._call("getRecentBlockhash")["value"]

    def get_latest_blockhash(self, commitment: CommitmentLike = None) -> dict:
        """The latest blockhash and the last block height it is valid for."""
        result = self._call_with_config(
            "getLatestBlockhash", [], _config(commitment=_commitment(commitment))
        )
        return result["value"]

    def is_blockhash_valid(
        self, blockhash: str, commitment: CommitmentLike = None
    ) -> bool:
        """Whether the blockhash is still valid."""
        result = self._call_with_config(
            "isBlockhashValid",
            [blockhash],
            _config(commitment=_commitment(commitment)),
        )
        return result["value"]

    def get_fee_for_message(
        self, raw_message: bytes, commitment: CommitmentLike = None
    ) -> Optional[int]:
        """The fee the network would charge for a serialized message."""
        result = self._call_with_config(
            "getFeeForMessage",
            [_b64(raw_message)],
            _config(commitment=_commitment(commitment)),
        )
        return result["value"]

    def send_transaction(
        self,
        raw_transaction: bytes,
        skip_preflight: bool = False,
        preflight_commitment: CommitmentLike = None,
        max_retries: Optional[int] = None,
    ) -> str:
        """Submit a serialized, signed transaction and return its signature."""
        config = _config(
            encoding="base64",
            skipPreflight=True if skip_preflight else None,
            preflightCommitment=_commitment(preflight_commitment),
            maxRetries=max_retries or None,
        )
        return self._call("sendTransaction", _b64(raw_transaction), config)

    def simulate_transaction(
        self,
        raw_transaction: bytes,
        sig_verify: bool = False,
        commitment: CommitmentLike = None,
        replace_recent_blockhash: bool = False,
        addresses: Optional[Iterable[str]] = None,
    ) -> SimulationResult:
        """Simulate a serialized transaction, optionally returning account states."""
        addresses = list(addresses or ())
        accounts_config = (
            {"encoding": "base64", "addresses": addresses} if addresses else None
        )
        config = _config(
            encoding="base64",
            sigVerify=True if sig_verify else None,
            commitment=_commitment(commitment),
            replaceRecentBlockhash=True if replace_recent_blockhash else None,
            accounts=accounts_config,
        )
        result = self._call("simulateTransaction", _b64(raw_transaction), config)
        value = result["value"]
        raw_accounts = value.get("accounts")
        accounts = (
            None
            if raw_accounts is None
            else [decode_account_info(account) for account in raw_accounts]
        )
        return SimulationResult(
            err=value.get("err"), logs=value.get("logs"), accounts=accounts
        )

    def get_slot(self, commitment: CommitmentLike = None) -> int:
        """The current slot."""
        return self._call_with_config(
            "getSlot", [], _config(commitment=_commitment(commitment))
        )

    def get_minimum_balance_for_rent_exemption(self, data_len: int) -> int:
        """Lamports needed to make an account of this size rent exempt."""
        return self._call("getMinimumBalanceForRentExemption", data_len)

    def get_block_time(self, slot: int) -> int:
        """The estimated production time of a block, as a Unix timestamp."""
        return self._call("getBlockTime", slot)

    def get_identity(self) -> str:
        """The identity public key of the node."""
        return self._call("getIdentity")["identity"]

    def get_genesis_hash(self) -> str:
        return self._call("getGenesisHash")

    def get_first_available_block(self) -> int:
        """The lowest confirmed slot not yet purged from the ledger."""
        return self._call("getFirstAvailableBlock")

    def get_version(self) -> dict:
        """The software versions running on the node."""
        return self._call("getVersion")

    def request_airdrop(self, address: str, lamports: int) -> str:
        """Request an airdrop of lamports and return the transaction signature."""
        return self._call("requestAirdrop", address, lamports)

    def minimum_ledger_slot(self) -> int:
        """The lowest slot the node has information about in its ledger."""
        return self._call("minimumLedgerSlot")

    def get_transaction_count(self, commitment: CommitmentLike = None) -> int:
        return self._call_with_config(
            "getTransactionCount", [], _config(commitment=_commitment(commitment))
        )

    def get_cluster_nodes(self) -> list[ClusterNode]:
        """All nodes taking part in the cluster."""
        return [decode_cluster_node(node) for node in self._call("getClusterNodes")]

    def get_signature_status(
        self, signature: str, search_transaction_history: bool = False
    ) -> Optional[dict]:
        """The status of one signature, or None if it is unknown."""
        return self.get_signature_statuses([signature], search_transaction_history)[0]

    def get_signature_statuses(
        self, signatures: Iterable[str], search_transaction_history: bool = False
    ) -> list[Optional[dict]]:
        """The statuses of the signatures, in order."""
        config = _config(
            searchTransactionHistory=True if search_transaction_history else None
        )
        result = self._call_with_config(
            "getSignatureStatuses", [list(signatures)], config
        )
        return result["value"]

    def get_signatures_for_address(
        self,
        address: str,
        limit: Optional[int] = None,
        before: Optional[str] = None,
        until: Optional[str] = None,
        commitment: CommitmentLike = None,
    ) -> list[dict]:
        """Signatures of transactions touching the address, newest first."""
        config = _config(
            limit=limit or None,
            before=before or None,
            until=until or None,
            commitment=_commitment(commitment),
        )
        return self._call_with_config("getSignaturesForAddress", [address], config)

    def get_nonce_from_nonce_account(self, address: str) -> str:
        """The stored nonce of a nonce account, in base58."""
        info = self.get_account_info(address, data_slice=_NONCE_SLICE)
        return b58encode(info.data if info is not None else b"")