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

# This module provides utilities for extracting information from lists of compiler arguments, such
# as the normalized arguments of a compilation database entry. None of these functions modify their
# input.

from collections import defaultdict

from typing import DefaultDict, List, Optional, Sequence, Tuple


def get_output_path_from_args(args: Sequence[str]) -> Optional[str]:
    """
    Returns the argument following the -o flag, or None if there is no -o flag. Raises an exception
    if the command line contains multiple -o flags, or if -o is the last argument.

    >>> get_output_path_from_args(['clang', '-c', '-o', 'foo.o', 'foo.cc'])
    'foo.o'
    >>> get_output_path_from_args(['clang', '-fsyntax-only', 'foo.cc']) is None
    True
    """
    output_index: Optional[int] = None
    for i, arg in enumerate(args):
        if arg != '-o':
            continue
        if i == len(args) - 1:
            raise ValueError(
                "Compiler command line ends with a -o flag with no argument: %s" % list(args))
        if output_index is not None:
            raise ValueError(
                "Compiler command line contains multiple -o flags: %s" % list(args))
        output_index = i + 1

    if output_index is None:
        return None
    return args[output_index]


def split_preprocessor_definition_flag(arg: str) -> Tuple[str, Optional[str]]:
    '''
    >>> split_preprocessor_definition_flag('-DBOOST_BIND_NO_PLACEHOLDERS')
    ('BOOST_BIND_NO_PLACEHOLDERS', None)
    >>> split_preprocessor_definition_flag('-DBOOST_BIND_NO_PLACEHOLDERS=1')
    ('BOOST_BIND_NO_PLACEHOLDERS', '1')
    >>> split_preprocessor_definition_flag('-DSOMEDEF=With spaces=and equals')
    ('SOMEDEF', 'With spaces=and equals')
    '''
    assert arg.startswith('-D'), 'Expected a preprocessor definition flag, got %s' % arg
    split_on_equal = arg[2:].split('=', 1)
    if len(split_on_equal) == 1:
        return split_on_equal[0], None
    return split_on_equal[0], split_on_equal[1]


def get_preprocessor_definition_values(args: Sequence[str]) -> DefaultDict[str, List[str]]:
    """
    Given a list of compiler arguments, returns a dictionary mapping preprocessor definitions
    specified in the command line to their distinct values, in the order they appeared. A
    definition without a value is treated as having the value 1, as the compiler does.

    Only the single-argument form (-DNAME=VALUE) is recognized.

    >>> dict(get_preprocessor_definition_values(['cc', '-DFOO', '-DBAR=2', '-DFOO=1', '-DBAR=3']))
    {'FOO': ['1'], 'BAR': ['2', '3']}
    """
    name_to_values: DefaultDict[str, List[str]] = defaultdict(list)
    for arg in args:
        if arg.startswith('-D') and len(arg) > 2:
            def_name, def_value = split_preprocessor_definition_flag(arg)
            if def_value is None:
                def_value = '1'
            if def_value not in name_to_values[def_name]:
                name_to_values[def_name].append(def_value)
    return name_to_values


def get_include_paths(args: Sequence[str]) -> List[str]:
    """
    Returns include directories specified with -I, in order. Both the -I<dir> and the -I <dir>
    forms are recognized; the latter is what compile_flags.txt files contain when the flag and its
    value are put on separate lines.

    >>> get_include_paths(['cc', '-Irelative', '-I', 'libwidget/include/', '-c', 'a.cc'])
    ['relative', 'libwidget/include/']
    """
    include_paths: List[str] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == '-I':
            if i + 1 < len(args):
                include_paths.append(args[i + 1])
            i += 2
            continue
        if arg.startswith('-I'):
            include_paths.append(arg[2:])
        i += 1
    return include_paths
