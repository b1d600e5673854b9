"""Solana toolkit: base58, public keys and program addresses, instruction builders, binary encoding, HD key derivation and a JSON-RPC client."""

__version__ = "0.1.0"