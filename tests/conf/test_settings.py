from pathlib import Path

import pytest
from pydantic import ValidationError

from bincodec.conf import DEFAULT_SETTINGS_FILEPATH, UNITTESTS_SETTINGS_FILEPATH
from bincodec.conf.loader import load_yaml_settings, read_extended_yaml_dict
from bincodec.conf.settings import CodecSettings

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


def test_default_settings() -> None:
    settings = CodecSettings.from_yaml(filepath=DEFAULT_SETTINGS_FILEPATH)
    assert settings == CodecSettings()
    assert settings.MODULE_NAME == 'binary'
    assert settings.RANGE_ERROR_VALUE_MAX_WIDTH == 64
    assert settings.RANGE_ERROR_BOUNDS_MAX_WIDTH == 8
    assert settings.LOG_ERRORS is False


def test_unittests_settings() -> None:
    settings = CodecSettings.from_yaml(filepath=UNITTESTS_SETTINGS_FILEPATH)
    assert settings == CodecSettings(LOG_ERRORS=True)


@pytest.mark.parametrize('filepath', ['valid_settings_fixture.yml'])
def test_valid_settings_from_yaml(filepath: str) -> None:
    expected = CodecSettings(
        MODULE_NAME='std.binary',
        RANGE_ERROR_VALUE_MAX_WIDTH=128,
        RANGE_ERROR_BOUNDS_MAX_WIDTH=16,
        LOG_ERRORS=True,
    )
    assert expected == load_yaml_settings(CodecSettings, filepath=FIXTURES_DIR / filepath)


def test_extended_settings_from_yaml() -> None:
    settings = CodecSettings.from_yaml(filepath=str(FIXTURES_DIR / 'extends_settings_fixture.yml'))
    assert settings == CodecSettings(
        MODULE_NAME='std.binary',
        RANGE_ERROR_VALUE_MAX_WIDTH=128,
        RANGE_ERROR_BOUNDS_MAX_WIDTH=8,
        LOG_ERRORS=True,
    )


def test_extends_bundled_settings() -> None:
    # default.yml is not next to the fixture, it is found in the bundled settings directory
    settings = CodecSettings.from_yaml(filepath=str(FIXTURES_DIR / 'extends_bundled_settings_fixture.yml'))
    assert settings == CodecSettings(MODULE_NAME='codec')


def test_recursive_extension() -> None:
    with pytest.raises(ValueError, match='recursive extensions'):
        read_extended_yaml_dict(FIXTURES_DIR / 'recursive_settings_fixture.yml')


@pytest.mark.parametrize(
    ['filepath', 'error'],
    [
        (
            'invalid_width_settings_fixture.yml',
            'Value error, unsupported width 24, expected one of (8, 16, 32, 64, 128, 256)',
        ),
        ('invalid_module_name_settings_fixture.yml', "Value error, 'not a module' is not a valid module name"),
        ('unknown_key_settings_fixture.yml', 'Extra inputs are not permitted'),
    ]
)
def test_invalid_settings_from_yaml(filepath: str, error: str) -> None:
    with pytest.raises(ValidationError) as e:
        load_yaml_settings(CodecSettings, filepath=FIXTURES_DIR / filepath)

    errors = e.value.errors()
    assert errors[0]['msg'] == error


def test_not_a_dict() -> None:
    with pytest.raises(ValueError, match='cannot be parsed as a dictionary'):
        load_yaml_settings(CodecSettings, filepath=FIXTURES_DIR / 'list_settings_fixture.yml')


def test_missing_file() -> None:
    with pytest.raises(ValueError, match='is not a file'):
        load_yaml_settings(CodecSettings, filepath=FIXTURES_DIR / 'missing.yml')


def test_settings_are_frozen() -> None:
    settings = CodecSettings()
    with pytest.raises(ValidationError):
        settings.LOG_ERRORS = True  # type: ignore[misc]


def test_global_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from bincodec.conf import get_settings
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    monkeypatch.setenv('BINCODEC_CONFIG_YAML', str(FIXTURES_DIR / 'valid_settings_fixture.yml'))

    settings = get_settings.get_global_settings()
    assert settings.MODULE_NAME == 'std.binary'
    assert get_settings.get_global_settings() is settings
    assert get_settings.get_settings_source() == str(FIXTURES_DIR / 'valid_settings_fixture.yml')

    monkeypatch.setenv('BINCODEC_CONFIG_YAML', DEFAULT_SETTINGS_FILEPATH)
    with pytest.raises(Exception, match='loading config twice with a different file'):
        get_settings.get_global_settings()


def test_global_settings_default_file(monkeypatch: pytest.MonkeyPatch) -> None:
    from bincodec.conf import get_settings
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    monkeypatch.delenv('BINCODEC_CONFIG_YAML')

    assert get_settings.get_global_settings() == CodecSettings()
    assert get_settings.get_settings_source() == DEFAULT_SETTINGS_FILEPATH


def test_codec_uses_global_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from bincodec import binary
    from bincodec.conf import get_settings
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    monkeypatch.setenv('BINCODEC_CONFIG_YAML', str(FIXTURES_DIR / 'valid_settings_fixture.yml'))

    assert binary.encode_i16_to_big_endian().unwrap_err().message == (
        'std.binary.encode_i16_to_big_endian() takes exactly 1 argument'
    )
    error = binary.encode_i16_to_big_endian(2**15).unwrap_err()
    assert error.message == 'value 32768 out of i16 range (-32768 to 32767)'
    assert binary.get_builtin('std.binary.decode_u8()') is binary.decode_u8
