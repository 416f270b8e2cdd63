"""
File Configuration Tests
========================

Tests for FileConfig with Python, YAML and JSON files.
"""

import os
import re
import sys

import pytest

from confsource.config import ConfigError, FileAccessError, FileConfig


def write(path, text):
    path.write_text(text, encoding='utf-8')
    return path


# ----------------------------------------------------------------------
# Python files
# ----------------------------------------------------------------------

def test_python_file(tmp_path):
    path = write(tmp_path / 'settings.py', "CONFIG = {'app': {'debug': True}}\n")
    config = FileConfig({'file': str(path)})
    assert config.get_section('app') == {'debug': True}


def test_python_file_may_compute_values(tmp_path):
    path = write(tmp_path / 'settings.py', (
        "WORKERS = 2 * 4\n"
        "CONFIG = {'server': {'workers': WORKERS, 'hosts': ['a', 'b']}}\n"
    ))
    config = FileConfig({'file': path})
    assert config.get('server', 'workers') == 8
    assert config.get('server', 'hosts') == ['a', 'b']


def test_python_file_without_config_mapping(tmp_path):
    path = write(tmp_path / 'settings.py', "CONFIG = ['not', 'a', 'mapping']\n")
    with pytest.raises(ConfigError, match='Config file must return a mapping'):
        FileConfig({'file': str(path)})


def test_python_file_missing_config_variable(tmp_path):
    path = write(tmp_path / 'settings.py', "OTHER = {}\n")
    with pytest.raises(ConfigError, match=re.escape(str(path))):
        FileConfig({'file': str(path)})


def test_python_file_errors_propagate(tmp_path):
    path = write(tmp_path / 'settings.py', "raise RuntimeError('broken config')\n")
    with pytest.raises(RuntimeError, match='broken config'):
        FileConfig({'file': str(path)})


# ----------------------------------------------------------------------
# YAML / JSON files
# ----------------------------------------------------------------------

def test_yaml_file(tmp_path):
    path = write(tmp_path / 'settings.yaml', (
        "database:\n"
        "  host: localhost\n"
        "  port: 3306\n"
        "app:\n"
        "  debug: true\n"
    ))
    config = FileConfig({'file': str(path)})
    assert config.get_all() == {
        'database': {'host': 'localhost', 'port': 3306},
        'app': {'debug': True},
    }


def test_yml_suffix(tmp_path):
    path = write(tmp_path / 'settings.yml', "app:\n  name: demo\n")
    assert FileConfig({'file': str(path)}).get('app', 'name') == 'demo'


def test_empty_yaml_is_not_a_mapping(tmp_path):
    path = write(tmp_path / 'settings.yaml', "")
    with pytest.raises(ConfigError, match='must return a mapping'):
        FileConfig({'file': str(path)})


def test_invalid_yaml(tmp_path):
    path = write(tmp_path / 'settings.yaml', "app: [unclosed\n")
    with pytest.raises(ConfigError, match='Invalid YAML'):
        FileConfig({'file': str(path)})


def test_json_file(tmp_path):
    path = write(tmp_path / 'settings.json', '{"app": {"debug": true, "workers": 4}}')
    config = FileConfig({'file': str(path)})
    assert config.get_section('app') == {'debug': True, 'workers': 4}


def test_json_list_is_not_a_mapping(tmp_path):
    path = write(tmp_path / 'settings.json', '[1, 2, 3]')
    with pytest.raises(ConfigError, match='must return a mapping'):
        FileConfig({'file': str(path)})


def test_invalid_json(tmp_path):
    path = write(tmp_path / 'settings.json', '{"app": ')
    with pytest.raises(ConfigError, match='Invalid JSON'):
        FileConfig({'file': str(path)})


# ----------------------------------------------------------------------
# Hints and file access
# ----------------------------------------------------------------------

def test_missing_file_names_path(tmp_path):
    path = tmp_path / 'missing.py'
    with pytest.raises(FileAccessError) as excinfo:
        FileConfig({'file': str(path)})
    assert excinfo.value.file_path == str(path)
    assert str(excinfo.value) == f"Config file not found: {path}"


def test_directory_is_not_a_config_file(tmp_path):
    with pytest.raises(FileAccessError):
        FileConfig({'file': str(tmp_path)})


@pytest.mark.skipif(sys.platform == 'win32' or (hasattr(os, 'geteuid') and os.geteuid() == 0),
                    reason='permission bits are not enforced')
def test_unreadable_file(tmp_path):
    path = write(tmp_path / 'settings.yaml', "app: {}\n")
    path.chmod(0)
    try:
        with pytest.raises(FileAccessError, match='could not be read'):
            FileConfig({'file': str(path)})
    finally:
        path.chmod(0o644)


@pytest.mark.parametrize("hints", [{}, {'file': ''}, None, 'settings.py'])
def test_file_hint_required(hints):
    with pytest.raises(ConfigError, match='file parameter required'):
        FileConfig(hints)


def test_unsupported_suffix(tmp_path):
    path = write(tmp_path / 'settings.ini', "[app]\n")
    with pytest.raises(ConfigError, match='Unsupported config format'):
        FileConfig({'file': str(path)})


def test_file_access_error_without_reason():
    error = FileAccessError('/etc/app.py')
    assert str(error) == 'File operation failed: /etc/app.py'
    assert isinstance(error, OSError)


def test_sections_must_be_mappings(tmp_path):
    path = write(tmp_path / 'settings.yaml', "app:\n  debug: true\nversion: 3\n")
    with pytest.raises(ConfigError, match="Section 'version' must be a mapping"):
        FileConfig({'file': str(path)})
