import pytest

from flowconf.loader import ConfigParser
from flowconf.modules import GitModule


@pytest.fixture
def parser() -> ConfigParser:
    return ConfigParser({GitModule})
