"""Base58 encoding with the Bitcoin alphabet, as used for Solana addresses."""

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(ALPHABET)}


def b58encode(data: bytes) -> str:
    """Encode bytes as a base58 string; each leading zero byte becomes a '1'."""
    data = bytes(data)
    stripped = data.lstrip(b"\0")
    zeros = len(data) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(ALPHABET[remainder])
    return "1" * zeros + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode a base58 string into bytes.

    Raises ValueError for an empty string or a character outside the alphabet.
    """
    if not text:
        raise ValueError("zero length string")
    number = 0
    for position, char in enumerate(text):
        try:
            digit = _INDEX[char]
        except KeyError:
            raise ValueError(
                f"invalid base58 digit {char!r} at position {position}"
            ) from None
        number = number * 58 + digit
    zeros = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\0" * zeros + body