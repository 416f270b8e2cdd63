"""
No-op Configuration Tests
=========================
"""

import pytest

from confsource.config import NoopConfig


@pytest.mark.parametrize("hints", [None, {}, {'file': '/does/not/exist.py'}, ['anything'], 'text', 42])
def test_always_empty(hints):
    config = NoopConfig(hints)
    assert config.get_all() == {}
    assert list(config) == []
    assert len(config) == 0


def test_reads_return_defaults():
    config = NoopConfig()
    assert config.get('app', 'debug', False) is False
    assert config.get_section('app', {'debug': True}) == {'debug': True}
    assert not config.has_section('app')
    assert not config.has('app', 'debug')
