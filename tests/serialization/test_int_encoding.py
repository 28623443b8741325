import pytest


def _encode(n: int, length: int, signed: bool, byteorder: str = 'big') -> bytes:
    from bincodec.serialization import Serializer
    from bincodec.serialization.encoding.int import encode_int
    se = Serializer.build_bytes_serializer()
    encode_int(se, n, length=length, signed=signed, byteorder=byteorder).unwrap()
    return bytes(se.finalize())


def _decode(data: bytes, length: int, signed: bool, byteorder: str = 'big') -> int:
    from bincodec.serialization import Deserializer
    from bincodec.serialization.encoding.int import decode_int
    de = Deserializer.build_bytes_deserializer(data)
    n = decode_int(de, length=length, signed=signed, byteorder=byteorder)
    de.finalize()
    return n


@pytest.mark.parametrize(
    ['n', 'length', 'signed', 'byteorder', 'expected_hex'],
    [
        (-1, 2, True, 'little', 'ffff'),
        (-1, 1, True, 'big', 'ff'),
        (0x0102, 2, True, 'big', '0102'),
        (0x0102, 2, True, 'little', '0201'),
        (1, 4, False, 'big', '00000001'),
        (1, 4, False, 'little', '01000000'),
        (-2, 8, True, 'big', 'fffffffffffffffe'),
        (2**255, 32, False, 'big', '80' + '00' * 31),
        (2**255, 32, False, 'little', '00' * 31 + '80'),
        (-(2**127), 16, True, 'big', '80' + '00' * 15),
    ]
)
def test_known_encodings(n: int, length: int, signed: bool, byteorder: str, expected_hex: str) -> None:
    data = _encode(n, length, signed, byteorder)
    assert data.hex() == expected_hex
    assert _decode(data, length, signed, byteorder) == n


@pytest.mark.parametrize('length', [1, 2, 4, 8, 16, 32])
@pytest.mark.parametrize('signed', [True, False])
@pytest.mark.parametrize('byteorder', ['big', 'little'])
def test_round_trip_bounds(length: int, signed: bool, byteorder: str) -> None:
    from bincodec.serialization.encoding.bounds import int_bounds
    lower_bound, upper_bound = int_bounds(length * 8, signed=signed)
    for n in [lower_bound, lower_bound + 1, 0, 1, upper_bound - 1, upper_bound]:
        data = _encode(n, length, signed, byteorder)
        assert len(data) == length
        assert _decode(data, length, signed, byteorder) == n


@pytest.mark.parametrize('length', [2, 4, 8])
@pytest.mark.parametrize('signed', [True, False])
@pytest.mark.parametrize('byteorder', ['big', 'little'])
def test_struct_path_matches_big_int_path(length: int, signed: bool, byteorder: str) -> None:
    from bincodec.serialization.encoding.endian import from_byte_order
    from bincodec.serialization.encoding.twos_complement import from_twos_complement
    from bincodec.serialization.encoding.uint import parse_uint

    for data in [b'\x00' * length, b'\xff' * length, bytes(range(1, length + 1)), b'\x80' + b'\x00' * (length - 1)]:
        expected = from_twos_complement(parse_uint(from_byte_order(data, byteorder)), length * 8, signed=signed)
        assert _decode(data, length, signed, byteorder) == expected


def test_encode_out_of_range_writes_nothing() -> None:
    from bincodec.exception import OutOfRangeError
    from bincodec.serialization import Serializer
    from bincodec.serialization.encoding.int import encode_int
    se = Serializer.build_bytes_serializer()
    result = encode_int(se, 2**16, length=2, signed=False)
    assert result.is_err()
    assert isinstance(result.unwrap_err(), OutOfRangeError)
    assert result.unwrap_err().message == 'value 65536 out of u16 range'
    assert bytes(se.finalize()) == b''


def test_encode_message_widths_are_forwarded() -> None:
    from bincodec.serialization import Serializer
    from bincodec.serialization.encoding.int import encode_int
    se = Serializer.build_bytes_serializer()
    result = encode_int(se, 2**16, length=2, signed=False, value_max_width=8)
    assert result.unwrap_err().message == 'value out of u16 range'


@pytest.mark.parametrize('length', [1, 2, 4, 8, 16, 32])
def test_decode_not_enough_data(length: int) -> None:
    from bincodec.serialization import Deserializer, OutOfDataError
    from bincodec.serialization.encoding.int import decode_int
    de = Deserializer.build_bytes_deserializer(b'\x00' * (length - 1))
    with pytest.raises(OutOfDataError):
        decode_int(de, length=length, signed=True)
