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
Exceptions raised while parsing compilation databases and tokenizing compiler command lines.
"""

from typing import Optional


class CompilationDatabaseError(Exception):
    """
    Base class for all errors raised by this package.
    """


class ParseError(CompilationDatabaseError):
    """
    Input text could not be turned into a compilation database.
    """


class JsonSyntaxError(ParseError):
    """
    The input is not well-formed JSON. Position information is taken from the JSON decoder.
    """
    line: Optional[int]
    column: Optional[int]
    position: Optional[int]
    file_path: Optional[str]

    def __init__(
            self,
            message: str,
            line: Optional[int] = None,
            column: Optional[int] = None,
            position: Optional[int] = None,
            file_path: Optional[str] = None) -> None:
        """
        :param message: Description of the syntax problem, usually from the JSON decoder.
        :param line: 1-based line number where the problem was detected.
        :param column: 1-based column number where the problem was detected.
        :param position: 0-based character offset where the problem was detected.
        :param file_path: Path of the file the text was read from, if any.
        """
        self.line = line
        self.column = column
        self.position = position
        self.file_path = file_path

        full_message = message
        if line is not None and column is not None:
            full_message += ' (line %d, column %d)' % (line, column)
        if file_path is not None:
            full_message += ' in %s' % file_path
        super().__init__(full_message)


class SchemaError(ParseError):
    """
    The input is valid JSON but does not have the shape of a compilation database.
    """
    index: Optional[int]
    field_name: Optional[str]

    def __init__(
            self,
            message: str,
            index: Optional[int] = None,
            field_name: Optional[str] = None) -> None:
        self.index = index
        self.field_name = field_name

        location_parts = []
        if index is not None:
            location_parts.append('entry #%d' % index)
        if field_name is not None:
            location_parts.append("field '%s'" % field_name)
        if location_parts:
            message = '%s: %s' % (', '.join(location_parts), message)
        super().__init__(message)


class MissingCommandError(SchemaError):
    """
    A compile command has neither an 'arguments' nor a 'command' field.
    """

    def __init__(self, index: Optional[int] = None) -> None:
        super().__init__(
            "neither 'arguments' nor 'command' is present",
            index=index)


class TokenizationError(CompilationDatabaseError):
    """
    A shell-style command string could not be split into arguments, e.g. because of an unterminated
    quote.
    """
    command: str
    position: int

    def __init__(self, message: str, command: str, position: int) -> None:
        self.command = command
        self.position = position
        super().__init__('%s at position %d in command: %s' % (message, position, command))
