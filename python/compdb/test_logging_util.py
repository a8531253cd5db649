# Copyright (c) YugabyteDB, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except
# in compliance with the License.  You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express
# or implied.  See the License for the specific language governing permissions and limitations
# under the License.

import logging
import pathlib

import pytest

from compdb import logging_util
from compdb.compile_commands import read_compilation_database_file


def test_replace_home_dir_with_tilde(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('HOME', '/home/someone')
    assert logging_util.replace_home_dir_with_tilde('/home/someone') == '~'
    assert logging_util.replace_home_dir_with_tilde('/home/someone/proj/a.cc') == '~/proj/a.cc'
    assert logging_util.replace_home_dir_with_tilde('/home/someone_else/a.cc') == (
        '/home/someone_else/a.cc')
    assert logging_util.rewrite_args(['/home/someone/x', 3]) == ['~/x', 3]


def test_reading_is_logged(
        tmp_path: pathlib.Path,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setenv('HOME', str(tmp_path))
    path = tmp_path / 'compile_commands.json'
    path.write_text('[{"directory": "/src", "file": "a.c", "command": "cc -c a.c"}]')

    with caplog.at_level(logging.DEBUG):
        read_compilation_database_file(path)

    assert 'Read 1 compilation database entries from ~/compile_commands.json' in caplog.messages
    assert all(record.levelno == logging.DEBUG for record in caplog.records)

