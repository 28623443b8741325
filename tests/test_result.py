import pytest

from bincodec.utils.result import Err, Ok, OkErr, Result, UnwrapError, is_err, is_ok, propagate_result


def test_ok() -> None:
    result: Result[int, str] = Ok(1)
    assert result.is_ok() and not result.is_err()
    assert is_ok(result) and not is_err(result)
    assert result.ok() == 1
    assert result.err() is None
    assert result.unwrap() == 1
    assert result.unwrap_or(2) == 1
    assert result.unwrap_or_raise() == 1
    assert result.map(lambda x: x + 1) == Ok(2)
    assert result.map_err(lambda e: e + '!') == Ok(1)
    assert result.and_then(lambda x: Err(str(x))) == Err('1')
    assert result.inspect_err(lambda e: pytest.fail('must not be called')) is result
    with pytest.raises(UnwrapError):
        result.unwrap_err()
    assert isinstance(result, OkErr)


def test_err() -> None:
    error = ValueError('boom')
    result: Result[int, ValueError] = Err(error)
    assert result.is_err() and not result.is_ok()
    assert is_err(result) and not is_ok(result)
    assert result.ok() is None
    assert result.err() is error
    assert result.unwrap_err() is error
    assert result.unwrap_or(2) == 2
    assert result.map(lambda x: x + 1) is result
    assert result.map_err(lambda e: str(e)) == Err('boom')
    assert result.and_then(lambda x: Ok(x)) is result

    seen = []
    assert result.inspect_err(seen.append) is result
    assert seen == [error]

    with pytest.raises(UnwrapError) as e:
        result.unwrap()
    assert e.value.result is result
    assert e.value.__cause__ is error

    with pytest.raises(ValueError, match='boom'):
        result.unwrap_or_raise()
    assert isinstance(result, OkErr)


def test_equality() -> None:
    assert Ok(1) == Ok(1)
    assert Ok(1) != Ok(2)
    assert Ok(1) != Err(1)
    assert Err('a') == Err('a')
    assert hash(Ok(1)) == hash(Ok(1))
    assert hash(Ok(1)) != hash(Err(1))
    assert repr(Ok(b'\x01')) == "Ok(b'\\x01')"
    assert repr(Err('a')) == "Err('a')"


def test_match() -> None:
    match Ok(5):
        case Ok(value):
            assert value == 5
        case Err(_):
            pytest.fail('unreachable')


def test_propagate_result() -> None:
    @propagate_result
    def half(n: int) -> Result[int, str]:
        if n % 2:
            return Err(f'{n} is odd')
        return Ok(n // 2)

    @propagate_result
    def quarter(n: int) -> Result[int, str]:
        return Ok(half(half(n).unwrap_or_propagate()).unwrap_or_propagate())

    assert quarter(8) == Ok(2)
    assert quarter(6) == Err('3 is odd')
    assert quarter(5) == Err('5 is odd')


def test_unwrap_or_propagate_outside_of_decorated_function() -> None:
    with pytest.raises(Exception, match='propagate_result'):
        Err('x').unwrap_or_propagate()
