import pytest


@pytest.mark.parametrize(
    ['value', 'width', 'unsigned'],
    [
        (0, 8, 0),
        (-1, 8, 0xff),
        (-128, 8, 0x80),
        (127, 8, 0x7f),
        (-1, 16, 0xffff),
        (-2, 32, 0xfffffffe),
        (-(2**63), 64, 2**63),
        (-1, 128, 2**128 - 1),
        (-(2**255), 256, 2**255),
        (2**255 - 1, 256, 2**255 - 1),
    ]
)
def test_twos_complement(value: int, width: int, unsigned: int) -> None:
    from bincodec.serialization.encoding.twos_complement import from_twos_complement, to_twos_complement
    assert to_twos_complement(value, width) == unsigned
    assert from_twos_complement(unsigned, width, signed=True) == value


def test_from_twos_complement_unsigned_is_identity() -> None:
    from bincodec.serialization.encoding.twos_complement import from_twos_complement
    for width in [8, 16, 32, 64, 128, 256]:
        top = 1 << (width - 1)
        assert from_twos_complement(top, width, signed=False) == top
        assert from_twos_complement(top, width, signed=True) == -top
