import pytest

from bincodec.cli.main import CliManager


def _run(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, str, str]:
    status = CliManager().execute_from_command_line([*argv[:1], '--disable-logs', *argv[1:]])
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert CliManager().execute_from_command_line([]) == 0
    out = capsys.readouterr().out
    assert 'Available subcommands:' in out
    for cmd in ['encode', 'decode', 'list_functions']:
        assert cmd in out

    assert CliManager().execute_from_command_line(['help']) == 0
    assert 'Available subcommands:' in capsys.readouterr().out


def test_unknown_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert CliManager().execute_from_command_line(['frobnicate']) == -1
    assert 'Unknown command: "frobnicate"' in capsys.readouterr().out


@pytest.mark.parametrize(
    ['argv', 'expected'],
    [
        (['encode', 'i16', '-1', '--byte-order', 'little'], 'ffff'),
        (['encode', 'i16', '0x0102'], '0102'),
        (['encode', 'u32', '7.9'], '00000007'),
        (['encode', 'i8', '-128'], '80'),
        (['encode', 'u256', str(2**255)], '80' + '00' * 31),
        (['encode', 'f32', '1'], '3f800000'),
        (['encode', 'f64', '-2', '--byte-order', 'little'], '00000000000000c0'),
        (['encode', 'f32', '1e39'], '7f800000'),
        (['encode', 'f32', str(-(2**200)), '--byte-order', 'little'], '000080ff'),
        (['encode', '--byte-order', 'little', 'u16', '0b1'], '0100'),
    ]
)
def test_encode(capsys: pytest.CaptureFixture[str], argv: list[str], expected: str) -> None:
    status, out, err = _run(capsys, *argv)
    assert status == 0
    assert out == expected + '\n'
    assert err == ''


@pytest.mark.parametrize(
    ['argv', 'expected'],
    [
        (['decode', 'i16', 'ffff', '--byte-order', 'little'], '-1'),
        (['decode', 'i8', 'ff'], '-1'),
        (['decode', 'u8', 'ff'], '255'),
        (['decode', 'u16', '0x0102'], '258'),
        (['decode', 'u256', '80' + '00' * 31], str(2**255)),
        (['decode', 'f32', '3fc00000'], '1.5'),
    ]
)
def test_decode(capsys: pytest.CaptureFixture[str], argv: list[str], expected: str) -> None:
    status, out, err = _run(capsys, *argv)
    assert status == 0
    assert out == expected + '\n'
    assert err == ''


@pytest.mark.parametrize(
    ['argv', 'expected_err'],
    [
        (['encode', 'u8', '256'], '[E3022] value 256 out of u8 range (0 to 255)'),
        (['encode', 'i32', 'abc'], '[E7004] binary.encode_i32_to_big_endian() requires an integer argument'),
        (['encode', 'f64', 'abc'], '[E7004] binary.encode_f64_to_big_endian() requires a float or integer argument'),
        (['decode', 'u32', '0102'], '[E7010] binary.decode_u32_from_big_endian() requires exactly 4 bytes, got 2'),
    ]
)
def test_codec_errors(capsys: pytest.CaptureFixture[str], argv: list[str], expected_err: str) -> None:
    status, out, err = _run(capsys, *argv)
    assert status == 1
    assert out == ''
    assert err == expected_err + '\n'


def test_invalid_arguments(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as e:
        _run(capsys, 'decode', 'u8', 'zz')
    assert e.value.code == 2
    assert 'invalid hex string' in capsys.readouterr().err

    with pytest.raises(SystemExit) as e:
        _run(capsys, 'encode', 'i24', '1')
    assert e.value.code == 2


def test_list_functions(capsys: pytest.CaptureFixture[str]) -> None:
    from bincodec.binary import BINARY_BUILTINS

    status, out, _ = _run(capsys, 'list_functions')
    assert status == 0
    names = out.splitlines()
    assert names == sorted(BINARY_BUILTINS)
    assert 'encode_i8' in names
    assert 'decode_f64_from_little_endian' in names

    status, out, _ = _run(capsys, 'list_functions', '--qualified')
    assert status == 0
    assert 'binary.encode_i8()' in out.splitlines()


def test_main(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    from bincodec.cli import main

    monkeypatch.setattr('sys.argv', ['bincodec', 'encode', 'u16', '65535', '--disable-logs'])
    with pytest.raises(SystemExit) as e:
        main.main()
    assert e.value.code == 0
    assert capsys.readouterr().out == 'ffff\n'

    monkeypatch.setattr('sys.argv', ['bincodec', 'encode', 'u16', '65536', '--disable-logs'])
    with pytest.raises(SystemExit) as e:
        main.main()
    assert e.value.code == 1


def test_json_logs(capsys: pytest.CaptureFixture[str]) -> None:
    status = CliManager().execute_from_command_line(['encode', 'u8', '1', '--json-logs', '--debug'])
    assert status == 0
    assert capsys.readouterr().out == '01\n'
