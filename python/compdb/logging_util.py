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
import os

from typing import List, Any, cast


def get_home_dir_aliases() -> List[str]:
    home_dir = os.path.expanduser('~')
    aliases = [home_dir]
    real_home_dir = os.path.realpath(home_dir)
    if real_home_dir != home_dir:
        aliases.append(real_home_dir)
    return aliases


def replace_home_dir_with_tilde(p: str) -> str:
    """
    Transforms a path before logging by replacing the home directory path with ~.

    >>> replace_home_dir_with_tilde(os.path.expanduser('~/foo'))
    '~/foo'
    >>> replace_home_dir_with_tilde(os.path.expanduser('~'))
    '~'
    >>> replace_home_dir_with_tilde('/usr/bin')
    '/usr/bin'
    """
    for home_dir in get_home_dir_aliases():
        if p == home_dir:
            return '~'

        home_dir_prefix = home_dir.rstrip('/') + '/'
        if p.startswith(home_dir_prefix):
            return '~/%s' % p[len(home_dir_prefix):]

    return p


def rewrite_args(args: List[Any]) -> List[Any]:
    return [
        replace_home_dir_with_tilde(arg) if isinstance(arg, str) else arg
        for arg in args
    ]


def log_debug(format_str: str, *args: Any) -> None:
    logging.debug(format_str, *rewrite_args(cast(List[Any], args)))
