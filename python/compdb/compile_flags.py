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

"""
Conversion of compile_flags.txt files to compilation databases.

For simple projects, Clang tools also recognize a compile_flags.txt file containing one argument
per line, and the same flags are used to compile every file. See
https://clang.llvm.org/docs/JSONCompilationDatabase.html#alternatives

The file does not list any source files, so callers supply the list of files to create entries
for.
"""

import os
import re

from typing import Iterable, List, Optional

from compdb import config
from compdb import file_util
from compdb.compile_commands import CompilationDatabase, CompileCommand, PathLike
from compdb.logging_util import log_debug


# Form feeds and Unicode line separators are part of a flag, not line breaks.
LINE_BREAK_RE = re.compile(r'\r\n|\r|\n')


def parse_compile_flags(contents: str, allow_comments: bool = False) -> List[str]:
    """
    Returns the flags listed in the text of a compile_flags.txt file. Every non-blank line, with
    surrounding whitespace removed, is one flag. Lines are not split any further.

    :param allow_comments: Also skip lines starting with #. Clang does not support comments in
        this file, so this is off by default.

    >>> parse_compile_flags('-xc++\\n\\n  -I\\nlibwidget/include/\\n')
    ['-xc++', '-I', 'libwidget/include/']
    >>> parse_compile_flags('-DNAME=a b\\r\\n# comment\\n')
    ['-DNAME=a b', '# comment']
    >>> parse_compile_flags('-DNAME=a b\\r\\n# comment\\n', allow_comments=True)
    ['-DNAME=a b']
    """
    flags: List[str] = []
    for line in LINE_BREAK_RE.split(contents):
        line = line.strip()
        if not line:
            continue
        if allow_comments and line.startswith('#'):
            continue
        flags.append(line)
    return flags


def from_compile_flags_txt(
        directory: PathLike,
        contents: str,
        file_paths: Iterable[PathLike],
        program_name: Optional[str] = None,
        allow_comments: bool = False) -> CompilationDatabase:
    """
    Creates a compilation database with one entry per given file, all of them using the flags from
    the given compile_flags.txt contents. Each entry's command line is the program name, then the
    flags, then the file path. Nothing is looked up on the file system.

    :param directory: The working directory of every entry, usually the directory containing
        compile_flags.txt.
    :param contents: Text of the compile_flags.txt file.
    :param file_paths: Source files to create entries for, in order.
    :param program_name: First argument of every command line. Defaults to the value of the
        COMPDB_FLAGS_PROGRAM_NAME environment variable, or "cc".
    :param allow_comments: See parse_compile_flags.
    """
    flags = parse_compile_flags(contents, allow_comments=allow_comments)
    compiler = config.get_flags_program_name(program_name)
    directory_str = file_util.path_to_str(directory)

    entries = []
    for file_path in file_paths:
        file_path_str = file_util.path_to_str(file_path)
        entries.append(CompileCommand(
            directory=directory_str,
            file=file_path_str,
            arguments=[compiler] + flags + [file_path_str]))

    log_debug("Created %d compilation database entries from %d compile flags in %s",
              len(entries), len(flags), directory_str)
    return CompilationDatabase(entries)


def read_compile_flags_file(
        flags_file_path: PathLike,
        file_paths: Iterable[PathLike],
        directory: Optional[PathLike] = None,
        program_name: Optional[str] = None,
        allow_comments: bool = False) -> CompilationDatabase:
    """
    Reads a compile_flags.txt file and converts it using from_compile_flags_txt. If directory is not
    specified, the directory containing the flags file is used. That path is not resolved.
    """
    path_str = file_util.path_to_str(flags_file_path)
    if directory is None:
        directory = os.path.dirname(path_str) or os.curdir
    log_debug("Reading compile flags from %s", path_str)
    return from_compile_flags_txt(
        directory=directory,
        contents=file_util.read_file(path_str),
        file_paths=file_paths,
        program_name=program_name,
        allow_comments=allow_comments)
