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

from compdb.errors import (  # noqa
    CompilationDatabaseError,
    JsonSyntaxError,
    MissingCommandError,
    ParseError,
    SchemaError,
    TokenizationError,
)
from compdb.shell_split import split_command  # noqa
from compdb.compile_commands import (  # noqa
    ArgumentList,
    CommandSource,
    CompilationDatabase,
    CompileCommand,
    ShellCommand,
    parse_compilation_database,
    read_compilation_database_file,
    write_compilation_database_file,
)
from compdb.compile_flags import (  # noqa
    from_compile_flags_txt,
    parse_compile_flags,
    read_compile_flags_file,
)
