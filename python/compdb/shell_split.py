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

# Splitting of the "command" field of compilation database entries into individual arguments.
#
# We don't use shlex.split here. Inside double quotes, the compilation database format treats a
# backslash as escaping any following character, while POSIX shells only treat it as an escape
# before a few special characters. E.g. "\-es" has to become "-es", not "\-es".

import enum

from typing import List, Optional

from compdb.errors import TokenizationError


class SplitterState(enum.Enum):
    NORMAL = 'normal'
    IN_SINGLE_QUOTE = 'in_single_quote'
    IN_DOUBLE_QUOTE = 'in_double_quote'
    ESCAPED = 'escaped'


def split_command(command: str) -> List[str]:
    r"""
    Splits a shell-escaped command line into a list of arguments.

    >>> split_command('clang++ -c foo.cc')
    ['clang++', '-c', 'foo.cc']
    >>> split_command('cc "-DNAME=a b" \'$HOME\' x\\ y')
    ['cc', '-DNAME=a b', '$HOME', 'x y']
    >>> split_command('cc -DX="a \\"b\\" \\-c"')
    ['cc', '-DX=a "b" -c']
    >>> split_command('cc ""')
    ['cc', '']
    >>> split_command('   ')
    []
    """
    args: List[str] = []
    current_chars: List[str] = []

    # A token can be open while still being empty, e.g. after an empty pair of quotes.
    in_token = False

    state = SplitterState.NORMAL
    state_before_escape = SplitterState.NORMAL

    # Positions of the last opening quote and the last backslash, used for error reporting.
    quote_position: Optional[int] = None
    escape_position: Optional[int] = None

    for i, c in enumerate(command):
        if state == SplitterState.ESCAPED:
            current_chars.append(c)
            state = state_before_escape
            continue

        if state == SplitterState.IN_SINGLE_QUOTE:
            if c == "'":
                state = SplitterState.NORMAL
            else:
                current_chars.append(c)
            continue

        if state == SplitterState.IN_DOUBLE_QUOTE:
            if c == '"':
                state = SplitterState.NORMAL
            elif c == '\\':
                state_before_escape = state
                state = SplitterState.ESCAPED
                escape_position = i
            else:
                current_chars.append(c)
            continue

        assert state == SplitterState.NORMAL
        if c.isspace():
            if in_token:
                args.append(''.join(current_chars))
                current_chars = []
                in_token = False
            continue

        in_token = True
        if c == "'":
            state = SplitterState.IN_SINGLE_QUOTE
            quote_position = i
        elif c == '"':
            state = SplitterState.IN_DOUBLE_QUOTE
            quote_position = i
        elif c == '\\':
            state_before_escape = state
            state = SplitterState.ESCAPED
            escape_position = i
        else:
            current_chars.append(c)

    if state == SplitterState.ESCAPED:
        assert escape_position is not None
        raise TokenizationError(
            'Backslash at the end of the command', command=command, position=escape_position)
    if state != SplitterState.NORMAL:
        assert quote_position is not None
        if state == SplitterState.IN_SINGLE_QUOTE:
            message = 'Unterminated single quote'
        else:
            message = 'Unterminated double quote'
        raise TokenizationError(message, command=command, position=quote_position)

    if in_token:
        args.append(''.join(current_chars))
    return args
