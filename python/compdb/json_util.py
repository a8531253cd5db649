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

import json
import pathlib

from typing import Any, Optional, Union

from compdb import config
from compdb import file_util
from compdb.errors import JsonSyntaxError
from compdb.logging_util import log_debug


def parse_json_str(json_str: str, file_path: Optional[str] = None) -> Any:
    """
    Parses the given JSON text. Syntax errors are reported as JsonSyntaxError carrying the line,
    column and character offset reported by the decoder.

    >>> parse_json_str('[{"a": 1}]')
    [{'a': 1}]
    >>> parse_json_str('[1, 2')
    Traceback (most recent call last):
    ...
    compdb.errors.JsonSyntaxError: Expecting ',' delimiter (line 1, column 6)
    """
    try:
        return json.loads(json_str)
    except json.decoder.JSONDecodeError as ex:
        raise JsonSyntaxError(
            ex.msg,
            line=ex.lineno,
            column=ex.colno,
            position=ex.pos,
            file_path=file_path) from ex


def read_json_file(input_path: Union[str, pathlib.Path]) -> Any:
    """
    Reads and parses the given JSON file. If the file path has a .gz extension, the file is assumed
    to be gzipped.
    """
    path_str = file_util.path_to_str(input_path)
    log_debug("Reading JSON file %s", path_str)
    return parse_json_str(file_util.read_file(path_str), file_path=path_str)


def json_to_str(json_data: Any, indent: Optional[int] = None) -> str:
    return json.dumps(json_data, indent=config.get_json_indent(indent))


def write_json_file(
        json_data: Any,
        output_path: Union[str, pathlib.Path],
        description_for_log: Optional[str] = None,
        indent: Optional[int] = None) -> None:
    file_util.write_file(json_to_str(json_data, indent=indent) + '\n', output_path)
    if description_for_log is not None:
        log_debug("Wrote %s: %s", description_for_log, file_util.path_to_str(output_path))
