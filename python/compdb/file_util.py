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

import gzip
import os
import pathlib

from typing import Union


def path_to_str(path: Union[str, pathlib.Path]) -> str:
    if isinstance(path, str):
        return path
    return str(path)


def read_file(file_path: Union[str, pathlib.Path]) -> str:
    """
    Reads the whole file as text. Files with a .gz extension are decompressed on the fly.
    """
    path_str = path_to_str(file_path)
    if path_str.endswith('.gz'):
        with gzip.open(path_str, 'rt', encoding='utf-8') as input_file:
            return input_file.read()
    with open(path_str, encoding='utf-8') as input_file:
        return input_file.read()


def write_file(content: str, output_file_path: Union[str, pathlib.Path]) -> None:
    path_str = path_to_str(output_file_path)
    if path_str.endswith('.gz'):
        with gzip.open(path_str, 'wt', encoding='utf-8') as output_file:
            output_file.write(content)
        return
    with open(path_str, 'w', encoding='utf-8') as output_file:
        output_file.write(content)


def clean_path_join(base_path: str, rel_path: str) -> str:
    """
    Joins two paths and normalizes the result lexically, without looking at the file system. If
    rel_path is absolute, base_path is ignored.

    >>> clean_path_join('foo', 'bar')
    'foo/bar'
    >>> clean_path_join('foo', '.')
    'foo'
    >>> clean_path_join('/src/build', '../lib/a.cc')
    '/src/lib/a.cc'
    >>> clean_path_join('/src/build', '/usr/include/./b.h')
    '/usr/include/b.h'
    """
    return os.path.normpath(os.path.join(base_path, rel_path))
