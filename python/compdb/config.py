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
Defaults that can be overridden with environment variables. Explicit function arguments always
take precedence over these.
"""

import os

from typing import Optional


# The compile_flags.txt format does not name a compiler, so entries synthesized from it start
# with this placeholder.
DEFAULT_FLAGS_PROGRAM_NAME = 'cc'
FLAGS_PROGRAM_NAME_ENV_VAR = 'COMPDB_FLAGS_PROGRAM_NAME'

DEFAULT_JSON_INDENT = 2
JSON_INDENT_ENV_VAR = 'COMPDB_JSON_INDENT'


def get_flags_program_name(program_name: Optional[str] = None) -> str:
    if program_name is not None:
        return program_name
    return os.environ.get(FLAGS_PROGRAM_NAME_ENV_VAR) or DEFAULT_FLAGS_PROGRAM_NAME


def get_json_indent(indent: Optional[int] = None) -> int:
    if indent is not None:
        return indent
    indent_str = os.environ.get(JSON_INDENT_ENV_VAR, '').strip()
    if not indent_str:
        return DEFAULT_JSON_INDENT
    try:
        return int(indent_str)
    except ValueError:
        raise ValueError(
            "Invalid value of the %s environment variable, expected an integer: %s" % (
                JSON_INDENT_ENV_VAR, indent_str))
