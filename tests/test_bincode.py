import pytest

from solkit.bincode import Kind, serialize_data, uint_to_var_len_bytes


@pytest.mark.parametrize(
    "value, expected",
    [
        (127, bytes([0x7F])),
        (128, bytes([0x80, 0x01])),
        (0, bytes([0x00])),
    ],
)
def test_uint_to_var_len_bytes(value, expected):
    assert uint_to_var_len_bytes(value) == expected


@pytest.mark.parametrize("value", [1, 300, 2**32, 2**63, 2**64 - 1])
def test_varint_continuation_bits(value):
    encoded = uint_to_var_len_bytes(value)
    assert encoded[-1] < 0x80
    assert all(byte >= 0x80 for byte in encoded[:-1])
    decoded = sum((byte & 0x7F) << (7 * shift) for shift, byte in enumerate(encoded))
    assert decoded == value


@pytest.mark.parametrize("value", [-1, 2**64])
def test_varint_out_of_range(value):
    with pytest.raises(ValueError):
        uint_to_var_len_bytes(value)


@pytest.mark.parametrize(
    "value, kind, expected",
    [
        (True, Kind.BOOL, b"\x01"),
        (False, Kind.BOOL, b"\x00"),
        (7, Kind.U8, b"\x07"),
        (-1, Kind.I16, b"\xff\xff"),
        (0x0102, Kind.U16, b"\x02\x01"),
        (-2, Kind.I32, b"\xfe\xff\xff\xff"),
        (1000, Kind.U32, bytes([232, 3, 0, 0])),
        (-1, Kind.I64, b"\xff" * 8),
        (1000, Kind.U64, bytes([232, 3, 0, 0, 0, 0, 0, 0])),
        (b"\x01\x02\x03", Kind.BYTES, b"\x01\x02\x03"),
        ("abc", Kind.STRING, bytes([3, 0, 0, 0, 0, 0, 0, 0]) + b"abc"),
    ],
)
def test_scalars(value, kind, expected):
    assert serialize_data(value, kind) == expected


def test_string_length_counts_bytes():
    encoded = serialize_data("👻", Kind.STRING)
    assert encoded[:8] == bytes([4, 0, 0, 0, 0, 0, 0, 0])
    assert encoded[8:] == "👻".encode()


def test_optional_none_and_some():
    assert serialize_data(None, [Kind.U32]) == b"\x00"
    assert serialize_data(1000, [Kind.U32]) == b"\x01" + bytes([232, 3, 0, 0])


def test_struct_concatenates_fields():
    spec = (Kind.U8, Kind.U32, Kind.U32)
    assert serialize_data((0, 1000, 2000), spec) == bytes(
        [0, 232, 3, 0, 0, 208, 7, 0, 0]
    )


def test_nested_struct_with_optional():
    spec = (Kind.BOOL, [Kind.U16], (Kind.U8,))
    assert serialize_data([True, None, [9]], spec) == b"\x01\x00\x09"


def test_struct_field_count_mismatch():
    with pytest.raises(ValueError):
        serialize_data((1,), (Kind.U8, Kind.U8))


@pytest.mark.parametrize(
    "value, kind",
    [(256, Kind.U8), (-1, Kind.U32), (2**64, Kind.U64), (2**15, Kind.I16)],
)
def test_out_of_range_values(value, kind):
    with pytest.raises(ValueError):
        serialize_data(value, kind)


def test_unsupported_kind():
    with pytest.raises(TypeError):
        serialize_data(1.5, "float")