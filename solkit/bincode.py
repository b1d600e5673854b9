"""Little-endian binary encoding of plain values and variable-length integers."""

from __future__ import annotations

import enum
import struct
from typing import Any, Sequence, Union


class Kind(enum.Enum):
    """The wire type a value is written as."""

    BOOL = "bool"
    U8 = "u8"
    I16 = "i16"
    U16 = "u16"
    I32 = "i32"
    U32 = "u32"
    I64 = "i64"
    U64 = "u64"
    BYTES = "bytes"
    STRING = "string"


_FORMATS = {
    Kind.U8: "<B",
    Kind.I16: "<h",
    Kind.U16: "<H",
    Kind.I32: "<i",
    Kind.U32: "<I",
    Kind.I64: "<q",
    Kind.U64: "<Q",
}

Spec = Union[Kind, tuple, list]


def serialize_data(value: Any, kind: Spec) -> bytes:
    """Encode a value according to its spec.

    The spec is a Kind; a tuple of specs for a struct, whose value is a
    sequence of field values in the same order; or a one-element list
    ``[spec]`` for an optional value, written as 0 for None and 1 followed by
    the value otherwise. Bytes are written raw, strings with a u64 length.
    """
    if isinstance(kind, tuple):
        return _serialize_struct(value, kind)
    if isinstance(kind, list):
        if len(kind) != 1:
            raise TypeError("optional spec must hold exactly one inner spec")
        if value is None:
            return b"\x00"
        return b"\x01" + serialize_data(value, kind[0])
    if not isinstance(kind, Kind):
        raise TypeError(f"unsupported type: {kind!r}")

    if kind is Kind.BOOL:
        return b"\x01" if value else b"\x00"
    if kind is Kind.BYTES:
        return bytes(value)
    if kind is Kind.STRING:
        encoded = value.encode("utf-8")
        return struct.pack("<Q", len(encoded)) + encoded
    try:
        return struct.pack(_FORMATS[kind], value)
    except struct.error as exc:
        raise ValueError(f"{value!r} does not fit in {kind.value}: {exc}") from None


def _serialize_struct(values: Sequence[Any], fields: tuple) -> bytes:
    values = list(values)
    if len(values) != len(fields):
        raise ValueError(
            f"struct has {len(fields)} fields but {len(values)} values were given"
        )
    return b"".join(serialize_data(v, f) for v, f in zip(values, fields))


def uint_to_var_len_bytes(value: int) -> bytes:
    """Encode an unsigned 64-bit integer as a little-endian base-128 varint."""
    if value < 0 or value >= 1 << 64:
        raise ValueError(f"{value} is not an unsigned 64-bit integer")
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)