import os

import pytest
import structlog

from bincodec.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['BINCODEC_CONFIG_YAML'] = os.environ.get('BINCODEC_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)


@pytest.fixture(autouse=True)
def silent_structlog():
    # the unittests settings log every failed call, keep those logs out of stdout (and out of doctest outputs)
    structlog.reset_defaults()
    structlog.configure(logger_factory=structlog.ReturnLoggerFactory())
    yield
    structlog.reset_defaults()
