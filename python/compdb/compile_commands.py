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
Data model and parser for JSON compilation databases (compile_commands.json), as described in
https://clang.llvm.org/docs/JSONCompilationDatabase.html
"""

import functools
import os
import pathlib
import shlex

from typing import (
    Any,
    Dict,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    Union,
    overload,
)

from overrides import overrides, EnforceOverrides

from compdb import compiler_args
from compdb import file_util
from compdb import json_util
from compdb.errors import MissingCommandError, SchemaError
from compdb.logging_util import log_debug
from compdb.shell_split import split_command


PathLike = Union[str, pathlib.Path]

REQUIRED_STR_FIELDS = ['directory', 'file']


class CommandSource(EnforceOverrides):
    """
    The field of a compilation database entry that the compiler command line is taken from. There
    are two alternative representations, see ArgumentList and ShellCommand.
    """

    def get_arguments(self) -> Tuple[str, ...]:
        """
        Returns the command line as a sequence of arguments, starting with the compiler.
        """
        raise NotImplementedError()

    def get_cmd_line_str(self) -> str:
        """
        Returns the command line as a single shell-escaped string.
        """
        raise NotImplementedError()


class ArgumentList(CommandSource):
    """
    The "arguments" field: the command line already split into arguments.
    """
    _args: Tuple[str, ...]

    def __init__(self, args: Iterable[str]) -> None:
        self._args = tuple(args)

    @property
    def args(self) -> Tuple[str, ...]:
        return self._args

    @overrides
    def get_arguments(self) -> Tuple[str, ...]:
        return self._args

    @overrides
    def get_cmd_line_str(self) -> str:
        return shlex.join(self._args)

    def __repr__(self) -> str:
        return 'ArgumentList(%r)' % (list(self._args),)


class ShellCommand(CommandSource):
    """
    The "command" field: the command line as one shell-escaped string. It is split into arguments
    the first time they are requested.
    """
    _command: str

    def __init__(self, command: str) -> None:
        self._command = command

    @property
    def command(self) -> str:
        return self._command

    @functools.cached_property
    def _split_args(self) -> Tuple[str, ...]:
        return tuple(split_command(self._command))

    @overrides
    def get_arguments(self) -> Tuple[str, ...]:
        return self._split_args

    @overrides
    def get_cmd_line_str(self) -> str:
        return self._command

    def __repr__(self) -> str:
        return 'ShellCommand(%r)' % (self._command,)


@functools.total_ordering
class CompileCommand:
    """
    One entry of a compilation database: how a single source file is compiled.

    At least one of arguments and command must be given. If both are given, arguments is used to
    obtain the command line, and command is only kept so that the entry can be written back out
    unchanged.
    """
    _directory: str
    _file: str
    _arguments: Optional[Tuple[str, ...]]
    _command: Optional[str]
    _output: Optional[str]
    _command_source: CommandSource

    def __init__(
            self,
            directory: PathLike,
            file: PathLike,
            arguments: Optional[Iterable[str]] = None,
            command: Optional[str] = None,
            output: Optional[PathLike] = None) -> None:
        """
        :param directory: The working directory of the compilation. Relative paths in the command
            line and in the file argument are interpreted relative to it.
        :param file: The main source file processed by this compilation step.
        :param arguments: The compiler command line as a list of arguments, starting with the
            compiler executable.
        :param command: The compiler command line as a single shell-escaped string.
        :param output: The output file created by this compilation step, informational only.
        """
        if arguments is None and command is None:
            raise MissingCommandError()
        if isinstance(arguments, str):
            raise SchemaError("expected a list of strings, got str", field_name='arguments')

        self._directory = file_util.path_to_str(directory)
        self._file = file_util.path_to_str(file)
        self._arguments = tuple(arguments) if arguments is not None else None
        self._command = command
        self._output = file_util.path_to_str(output) if output is not None else None

        if self._arguments is not None and not self._arguments:
            raise SchemaError("must not be empty", field_name='arguments')
        if self._command is not None and not self._command.strip():
            raise SchemaError("must not be empty", field_name='command')

        if self._arguments is not None:
            self._command_source = ArgumentList(self._arguments)
        else:
            assert self._command is not None
            self._command_source = ShellCommand(self._command)

    @property
    def directory(self) -> str:
        return self._directory

    @property
    def file(self) -> str:
        return self._file

    @property
    def arguments(self) -> Optional[Tuple[str, ...]]:
        """
        The "arguments" field exactly as given, or None. See get_arguments() for the normalized
        command line.
        """
        return self._arguments

    @property
    def command(self) -> Optional[str]:
        return self._command

    @property
    def output(self) -> Optional[str]:
        return self._output

    @property
    def command_source(self) -> CommandSource:
        return self._command_source

    def get_arguments(self) -> Tuple[str, ...]:
        """
        Returns the compiler command line as a sequence of arguments regardless of whether the
        entry was specified using "arguments" or "command". May raise TokenizationError for an
        entry with a malformed "command" string.
        """
        return self._command_source.get_arguments()

    def get_cmd_line_str(self) -> str:
        return self._command_source.get_cmd_line_str()

    def get_abs_file_path(self) -> str:
        """
        Returns the source file path joined onto the working directory. The path is normalized
        lexically; symlinks are not resolved and the file is not required to exist.
        """
        return file_util.clean_path_join(self._directory, self._file)

    def get_output_path(self) -> Optional[str]:
        """
        Returns the "output" field if present, otherwise the argument of the -o flag in the command
        line, if any.
        """
        if self._output is not None:
            return self._output
        return compiler_args.get_output_path_from_args(self.get_arguments())

    @staticmethod
    def from_json_obj(json_obj: Any, index: Optional[int] = None) -> 'CompileCommand':
        """
        Validates one decoded JSON object of a compilation database and creates an entry from it.
        Unknown keys are ignored.

        :param json_obj: The decoded JSON object.
        :param index: Position of the object in the enclosing array, used in error messages.
        """
        if not isinstance(json_obj, dict):
            raise SchemaError(
                "expected a JSON object, got %s" % type(json_obj).__name__, index=index)

        for field_name in REQUIRED_STR_FIELDS:
            if field_name not in json_obj:
                raise SchemaError("required field is missing", index=index, field_name=field_name)
            _check_str_field(json_obj, field_name, index)

        arguments = json_obj.get('arguments')
        command = json_obj.get('command')
        if arguments is None and command is None:
            raise MissingCommandError(index=index)

        if arguments is not None:
            if (not isinstance(arguments, list) or
                    not all(isinstance(arg, str) for arg in arguments)):
                raise SchemaError(
                    "expected a list of strings", index=index, field_name='arguments')
            if not arguments:
                raise SchemaError("must not be empty", index=index, field_name='arguments')

        if command is not None:
            _check_str_field(json_obj, 'command', index)
            if not command.strip():
                raise SchemaError("must not be empty", index=index, field_name='command')

        if json_obj.get('output') is not None:
            _check_str_field(json_obj, 'output', index)

        return CompileCommand(
            directory=json_obj['directory'],
            file=json_obj['file'],
            arguments=arguments,
            command=command,
            output=json_obj.get('output'))

    def as_json_obj(self) -> Dict[str, Any]:
        json_obj: Dict[str, Any] = {
            'directory': self._directory,
            'file': self._file,
        }
        if self._arguments is not None:
            json_obj['arguments'] = list(self._arguments)
        if self._command is not None:
            json_obj['command'] = self._command
        if self._output is not None:
            json_obj['output'] = self._output
        return json_obj

    def as_json_str(self) -> str:
        return json_util.json_to_str(self.as_json_obj())

    def _comparison_key(self) -> Tuple[str, str, Tuple[str, ...], str, str]:
        return (
            self._file,
            self._directory,
            self._arguments or (),
            self._command or '',
            self._output or '',
        )

    def __repr__(self) -> str:
        return 'CompileCommand(directory=%r, file=%r, arguments=%r, command=%r, output=%r)' % (
            self._directory,
            self._file,
            list(self._arguments) if self._arguments is not None else None,
            self._command,
            self._output)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CompileCommand):
            return False
        return (
            self._directory == other._directory and
            self._file == other._file and
            self._arguments == other._arguments and
            self._command == other._command and
            self._output == other._output
        )

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash(self._comparison_key())

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, CompileCommand):
            return NotImplemented
        return self._comparison_key() < other._comparison_key()

    def equivalence_key(self) -> Hashable:
        """
        Returns a key under which entries that compile the same file in the same way are equal,
        even if one of them uses "arguments" and the other one uses "command".
        """
        return (self._file, self._directory, self.get_arguments())


def _check_str_field(json_obj: Dict[str, Any], field_name: str, index: Optional[int]) -> None:
    value = json_obj[field_name]
    if not isinstance(value, str):
        raise SchemaError(
            "expected a string, got %s" % type(value).__name__,
            index=index,
            field_name=field_name)


class CompilationDatabase:
    """
    An ordered, read-only sequence of compilation database entries. The same file may appear in
    multiple entries, e.g. when it is compiled for several targets.
    """
    _entries: Tuple[CompileCommand, ...]

    def __init__(self, entries: Iterable[CompileCommand] = ()) -> None:
        self._entries = tuple(entries)

    @property
    def entries(self) -> Tuple[CompileCommand, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CompileCommand]:
        return iter(self._entries)

    @overload
    def __getitem__(self, index: int) -> CompileCommand:
        ...

    @overload
    def __getitem__(self, index: slice) -> 'CompilationDatabase':
        ...

    def __getitem__(
            self, index: Union[int, slice]) -> Union[CompileCommand, 'CompilationDatabase']:
        if isinstance(index, slice):
            return CompilationDatabase(self._entries[index])
        return self._entries[index]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CompilationDatabase):
            return False
        return self._entries == other._entries

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return 'CompilationDatabase(%r)' % (list(self._entries),)

    def get_file_paths(self) -> List[str]:
        """
        Returns the "file" field of every entry, in order, including duplicates.
        """
        return [entry.file for entry in self._entries]

    def get_entries_for_file(self, file_path: PathLike) -> List[CompileCommand]:
        """
        Returns all entries for the given source file, in database order. An entry matches if its
        "file" field is equal to the given path, or if the given path is absolute and equal to the
        entry's file path joined onto its directory.
        """
        path_str = file_util.path_to_str(file_path)
        normalized_path = os.path.normpath(path_str)
        return [
            entry for entry in self._entries
            if entry.file == path_str or (
                os.path.isabs(normalized_path) and
                entry.get_abs_file_path() == normalized_path)
        ]

    @staticmethod
    def from_json_obj(json_data: Any) -> 'CompilationDatabase':
        if not isinstance(json_data, list):
            raise SchemaError(
                "expected a JSON array at the top level, got %s" % type(json_data).__name__)
        return CompilationDatabase(
            CompileCommand.from_json_obj(item, index=index)
            for index, item in enumerate(json_data))

    def as_json_obj(self) -> List[Dict[str, Any]]:
        return [entry.as_json_obj() for entry in self._entries]

    def as_json_str(self, indent: Optional[int] = None) -> str:
        return json_util.json_to_str(self.as_json_obj(), indent=indent)


def parse_compilation_database(json_str: str) -> CompilationDatabase:
    """
    Parses the text of a compile_commands.json file. The whole input is validated before returning.

    :raises JsonSyntaxError: if the text is not valid JSON.
    :raises SchemaError: if the JSON value does not have the shape of a compilation database.
    """
    compilation_db = CompilationDatabase.from_json_obj(json_util.parse_json_str(json_str))
    log_debug("Parsed %d compilation database entries", len(compilation_db))
    return compilation_db


def read_compilation_database_file(file_path: PathLike) -> CompilationDatabase:
    """
    Reads and parses a compile_commands.json file. Files with a .gz extension are decompressed.
    JSON syntax errors carry the path of the file.
    """
    compilation_db = CompilationDatabase.from_json_obj(json_util.read_json_file(file_path))
    log_debug("Read %d compilation database entries from %s",
              len(compilation_db), file_util.path_to_str(file_path))
    return compilation_db


def write_compilation_database_file(
        compilation_db: CompilationDatabase,
        output_path: PathLike,
        indent: Optional[int] = None) -> None:
    json_util.write_json_file(
        compilation_db.as_json_obj(),
        output_path,
        description_for_log="compilation database with %d entries" % len(compilation_db),
        indent=indent)
