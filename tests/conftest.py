"""
Shared fixtures for pyinireader tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_INI = """\
# sample configuration
[development]
php.error_reporting = on
php.display_errors = on

[production]
php.error_reporting = off
php.display_errors = off

[env]
path = /usr/bin::/usr/local/bin

[database]
type = mysql
host = localhost
user = root
password = 12345
port = 3306

[database.production extends database]
host = 127.0.0.1
"""


@pytest.fixture
def sample_text() -> str:
    """The reference document used across the tests."""
    return SAMPLE_INI


@pytest.fixture
def write_ini(tmp_path):
    """Factory writing an INI file under tmp_path and returning its path."""

    def _write(name: str, content: str | bytes) -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return _write
