import re

from geoshift import LOGGER
from geoshift.utils.logging import warn_once


def test_warn_once(caplog):
    warn_once('test')
    assert 'test' in caplog.text

    warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1


def test_logger():
    assert LOGGER.name == 'geoshift'
    assert LOGGER.handlers
