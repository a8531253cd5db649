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

import pathlib

import pytest

from compdb.compile_commands import ArgumentList, CompilationDatabase, parse_compilation_database
from compdb.compile_flags import (
    from_compile_flags_txt,
    parse_compile_flags,
    read_compile_flags_file,
)


FLAGS_TXT = '-xc++\n-I\nlibwidget/include/\n'


def test_one_entry_per_file() -> None:
    compilation_db = from_compile_flags_txt('/home/user/proj', FLAGS_TXT, ['a.cc', 'b.cc'])
    assert len(compilation_db) == 2
    for cmd, file_path in zip(compilation_db, ['a.cc', 'b.cc']):
        assert cmd.directory == '/home/user/proj'
        assert cmd.file == file_path
        assert cmd.command is None
        assert cmd.output is None
        assert isinstance(cmd.command_source, ArgumentList)
        assert cmd.get_arguments() == ('cc', '-xc++', '-I', 'libwidget/include/', file_path)
        assert cmd.get_arguments()[-4:] == ('-xc++', '-I', 'libwidget/include/', file_path)


def test_empty_file_list() -> None:
    compilation_db = from_compile_flags_txt('/home/user/proj', FLAGS_TXT, [])
    assert len(compilation_db) == 0
    assert compilation_db == CompilationDatabase()


def test_empty_flags() -> None:
    compilation_db = from_compile_flags_txt('/proj', '\n\n', ['a.c'])
    assert compilation_db[0].get_arguments() == ('cc', 'a.c')


def test_blank_lines_are_ignored() -> None:
    with_blank_lines = '\n-xc++\n\n   \n\t\n-I\n  \nlibwidget/include/\n\n'
    assert (
        from_compile_flags_txt('/proj', with_blank_lines, ['a.cc']) ==
        from_compile_flags_txt('/proj', FLAGS_TXT, ['a.cc']))


def test_lines_are_not_split() -> None:
    flags_txt = '  -DNAME="a b"  \r\n-Wall -Werror\r\n'
    assert parse_compile_flags(flags_txt) == ['-DNAME="a b"', '-Wall -Werror']


def test_only_newlines_and_carriage_returns_end_lines() -> None:
    flags_txt = '-DX=a\x0cb\r-Wall\r\n-DY=c d\x85e\n-O2'
    assert parse_compile_flags(flags_txt) == ['-DX=a\x0cb', '-Wall', '-DY=c d\x85e', '-O2']


def test_comments() -> None:
    flags_txt = '# C++ flags\n-std=c++17\n  # indented comment\n-Wall\n'
    assert parse_compile_flags(flags_txt) == [
        '# C++ flags', '-std=c++17', '# indented comment', '-Wall']
    assert parse_compile_flags(flags_txt, allow_comments=True) == ['-std=c++17', '-Wall']

    compilation_db = from_compile_flags_txt('/proj', flags_txt, ['a.cc'], allow_comments=True)
    assert compilation_db[0].get_arguments() == ('cc', '-std=c++17', '-Wall', 'a.cc')


def test_file_order_and_duplicates_are_preserved() -> None:
    file_paths = ['src/z.cc', 'src/a.cc', 'src/z.cc']
    compilation_db = from_compile_flags_txt('/proj', FLAGS_TXT, file_paths)
    assert compilation_db.get_file_paths() == file_paths


def test_paths_may_be_path_objects() -> None:
    compilation_db = from_compile_flags_txt(
        pathlib.Path('/proj'), FLAGS_TXT, (pathlib.Path('src') / name for name in ['a.cc']))
    assert compilation_db[0].directory == '/proj'
    assert compilation_db[0].file == 'src/a.cc'
    assert compilation_db[0].get_arguments()[-1] == 'src/a.cc'


def test_program_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('COMPDB_FLAGS_PROGRAM_NAME', raising=False)
    assert from_compile_flags_txt('/proj', '-Wall', ['a.c'])[0].get_arguments()[0] == 'cc'

    monkeypatch.setenv('COMPDB_FLAGS_PROGRAM_NAME', 'clang')
    assert from_compile_flags_txt('/proj', '-Wall', ['a.c'])[0].get_arguments()[0] == 'clang'

    compilation_db = from_compile_flags_txt(
        '/proj', '-Wall', ['a.c'], program_name='/usr/bin/gcc')
    assert compilation_db[0].get_arguments() == ('/usr/bin/gcc', '-Wall', 'a.c')


def test_round_trip_through_json() -> None:
    compilation_db = from_compile_flags_txt('/home/user/proj', FLAGS_TXT, ['a.cc', 'b.cc'])
    assert parse_compilation_database(compilation_db.as_json_str()) == compilation_db


def test_read_compile_flags_file(tmp_path: pathlib.Path) -> None:
    flags_path = tmp_path / 'compile_flags.txt'
    flags_path.write_text(FLAGS_TXT)

    compilation_db = read_compile_flags_file(flags_path, ['a.cc'])
    assert compilation_db[0].directory == str(tmp_path)
    assert compilation_db[0].get_arguments() == (
        'cc', '-xc++', '-I', 'libwidget/include/', 'a.cc')

    compilation_db = read_compile_flags_file(str(flags_path), ['a.cc'], directory='/elsewhere')
    assert compilation_db[0].directory == '/elsewhere'


def test_read_compile_flags_file_without_directory(
        tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / 'compile_flags.txt').write_text('-Wall\n')
    monkeypatch.chdir(tmp_path)
    compilation_db = read_compile_flags_file('compile_flags.txt', ['a.c'])
    assert compilation_db[0].directory == '.'


def test_read_utf8_compile_flags_file(tmp_path: pathlib.Path) -> None:
    flags_path = tmp_path / 'compile_flags.txt'
    flags_path.write_bytes('-DGREETING="grüße"\n-Iinclude/日本\n'.encode('utf-8'))
    compilation_db = read_compile_flags_file(flags_path, ['a.cc'])
    assert compilation_db[0].get_arguments() == (
        'cc', '-DGREETING="grüße"', '-Iinclude/日本', 'a.cc')
