import os
import stat

import pytest


@pytest.fixture
def fake_git(tmp_path):
    """Create a stand-in git executable answering with fixed values."""

    def make(commit='abc123', version='v1.2.3-4-gabc123', name='git'):
        script = tmp_path / name
        script.write_text(
            '#!/bin/sh\n'
            'case "$1" in\n'
            '  rev-parse) echo "' + commit + '" ;;\n'
            '  describe) echo "' + version + '" ;;\n'
            '  *) echo "usage: git <command>"; exit 1 ;;\n'
            'esac\n')
        script.chmod(script.stat().st_mode | stat.S_IXUSR)
        return str(script)

    return make


@pytest.fixture
def script(tmp_path):
    """Create an executable shell script with the given body."""

    def make(body, name='tool'):
        path = tmp_path / name
        path.write_text('#!/bin/sh\n' + body)
        path.chmod(path.stat().st_mode | stat.S_IXUSR)
        return str(path)

    return make
