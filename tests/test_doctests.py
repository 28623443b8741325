import doctest
from types import ModuleType

import pytest

from bincodec import arguments, binary
from bincodec.conf import loader
from bincodec.serialization.encoding import bounds, endian
from bincodec.serialization.encoding import float as float_encoding
from bincodec.serialization.encoding import int as int_encoding
from bincodec.serialization.encoding import twos_complement, uint
from bincodec.utils import result

MODULES = [arguments, binary, loader, bounds, endian, float_encoding, int_encoding, twos_complement, uint, result]


@pytest.mark.parametrize('module', MODULES, ids=lambda module: module.__name__)
def test_docstrings(module: ModuleType) -> None:
    failures, tests = doctest.testmod(module)
    assert tests > 0
    assert failures == 0
