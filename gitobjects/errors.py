# errors.py -- errors for gitobjects
# Copyright (C) 2026 The gitobjects contributors
#
# SPDX-License-Identifier: Apache-2.0 OR GPL-2.0-or-later
# gitobjects is dual-licensed under the Apache License, Version 2.0 and the GNU
# General Public License as published by the Free Software Foundation; version 2.0
# or (at your option) any later version. You can redistribute it and/or
# modify it under the terms of either of these two licenses.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# You should have received a copy of the licenses; if not, see
# <http://www.gnu.org/licenses/> for a copy of the GNU General Public License
# and <http://www.apache.org/licenses/LICENSE-2.0> for a copy of the Apache
# License, Version 2.0.
#

"""Exception classes raised while decoding git objects."""

import binascii


def _to_hex(value: bytes | str) -> str:
    if isinstance(value, str):
        return value
    if len(value) == 20:
        return binascii.hexlify(value).decode("ascii")
    return value.decode("ascii")


class ChecksumMismatch(Exception):
    """A decoded object's identity didn't match the expected one."""

    def __init__(
        self,
        expected: bytes | str,
        got: bytes | str,
        extra: str | None = None,
    ) -> None:
        """Initialize a ChecksumMismatch exception.

        Args:
            expected: The expected object id (raw, hex bytes or hex string).
            got: The computed object id (raw, hex bytes or hex string).
            extra: Optional additional error information.
        """
        self.expected = _to_hex(expected)
        self.got = _to_hex(got)
        self.extra = extra
        message = f"Checksum mismatch: Expected {self.expected}, got {self.got}"
        if extra is not None:
            message += f"; {extra}"
        Exception.__init__(self, message)


class WrongObjectException(Exception):
    """Baseclass for all the _ is not a _ exceptions on objects.

    Do not instantiate directly.

    Subclasses define a type_name attribute naming the kind of object
    that was expected.
    """

    type_name: str

    def __init__(self, sha: bytes, got: bytes | None = None) -> None:
        """Initialize a WrongObjectException.

        Args:
            sha: Hex id of the object that was not of the expected type.
            got: Type name the object actually carries, if known.
        """
        self.sha = sha
        self.got = got
        message = f"{sha.decode('ascii')} is not a {self.type_name}"
        if got is not None:
            message += f" (got {got.decode('ascii')})"
        Exception.__init__(self, message)


class NotCommitError(WrongObjectException):
    """Indicates that the object handed to a decoder is not a commit."""

    type_name = "commit"


class NotTreeError(WrongObjectException):
    """Indicates that the object handed to a decoder is not a tree."""

    type_name = "tree"


class NotTagError(WrongObjectException):
    """Indicates that the object handed to a decoder is not a tag."""

    type_name = "tag"


class NotBlobError(WrongObjectException):
    """Indicates that the object handed to a decoder is not a blob."""

    type_name = "blob"


class FileFormatException(Exception):
    """Base class for exceptions relating to reading git formats."""


class ObjectFormatException(FileFormatException):
    """Indicates an error parsing an object."""


class MalformedCommit(ObjectFormatException):
    """A commit body lacks its tree header or carries an invalid reference."""


class MalformedTree(ObjectFormatException):
    """A tree body contains a truncated or invalid entry record."""


class MalformedTag(ObjectFormatException):
    """A tag body lacks its object or type header."""


class UnknownMode(ObjectFormatException):
    """A tree entry carries a mode that is not one of the known file modes."""

    def __init__(self, mode: int) -> None:
        self.mode = mode
        super().__init__(f"Unknown file mode {mode:06o}")
