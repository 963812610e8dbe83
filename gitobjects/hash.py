# hash.py -- Object identity for git objects
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

"""Content hashing for git objects.

Every object is named by the SHA-1 digest of its type name, its length in
decimal, a NUL byte and its raw content::

    commit 332\\0tree c2d30fa8...

The framing has to be reproduced byte for byte, otherwise the resulting ids
won't match those computed by any other git implementation.
"""

import binascii
from collections.abc import Iterable
from hashlib import sha1

OID_LENGTH = 20
HEX_LENGTH = 40


def sha_to_hex(sha: bytes) -> bytes:
    """Takes a raw sha and returns its hex representation."""
    hexsha = binascii.hexlify(sha)
    if len(hexsha) != HEX_LENGTH:
        raise ValueError(f"Incorrect length of sha1 string: {hexsha!r}")
    return hexsha


def hex_to_sha(hex: bytes | str) -> bytes:
    """Takes a hex sha and returns a binary sha."""
    if len(hex) != HEX_LENGTH:
        raise ValueError(f"Incorrect length of hexsha: {hex!r}")
    try:
        return binascii.unhexlify(hex)
    except (TypeError, binascii.Error) as exc:
        raise ValueError(exc.args[0]) from exc


def valid_hexsha(hex: bytes | str) -> bool:
    """Check whether a value is a 40-character hex sha."""
    if len(hex) != HEX_LENGTH:
        return False
    try:
        binascii.unhexlify(hex)
    except (TypeError, ValueError):
        return False
    else:
        return True


class Hash:
    """The 20-byte identity of a git object."""

    __slots__ = ("_sha",)

    def __init__(self, sha: bytes) -> None:
        """Initialize a Hash.

        Args:
            sha: The raw 20-byte digest
        """
        if not isinstance(sha, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected bytes for sha, got {sha!r}")
        sha = bytes(sha)
        if len(sha) != OID_LENGTH:
            raise ValueError(f"Hash must be {OID_LENGTH} bytes, got {len(sha)}")
        self._sha = sha

    @classmethod
    def from_hex(cls, hexsha: bytes | str) -> "Hash":
        """Create a Hash from its 40-character hex form."""
        return cls(hex_to_sha(hexsha))

    def digest(self) -> bytes:
        """Return the raw SHA digest."""
        return self._sha

    def hexdigest(self) -> str:
        """Return the hex SHA digest."""
        return sha_to_hex(self._sha).decode("ascii")

    def __bytes__(self) -> bytes:
        return self._sha

    def __str__(self) -> str:
        return self.hexdigest()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.hexdigest()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hash):
            return NotImplemented
        return self._sha == other._sha

    def __lt__(self, other: "Hash") -> bool:
        if not isinstance(other, Hash):
            return NotImplemented
        return self._sha < other._sha

    def __hash__(self) -> int:
        return hash(self._sha)


ZERO_HASH = Hash(b"\x00" * OID_LENGTH)


def object_header(type_name: bytes, length: int) -> bytes:
    """Return the header that prefixes an object's content when hashing.

    Args:
        type_name: Type name of the object (e.g. b"blob")
        length: Length of the object content in bytes
    Returns: The header, including the trailing NUL byte
    """
    if length < 0:
        raise ValueError(f"Object length must not be negative: {length}")
    return bytes(type_name) + b" " + str(length).encode("ascii") + b"\0"


def compute_hash(
    type_name: bytes, size: int, content: bytes | Iterable[bytes]
) -> Hash:
    """Compute the identity of an object.

    The size is taken as given; if it doesn't match the actual length of
    ``content`` the result won't match the id other implementations compute
    for the same object.

    Args:
        type_name: Type name of the object (an ObjectType works too)
        size: Declared size of the content
        content: The raw content, as bytes or as an iterable of chunks
    Returns: The Hash of the object
    """
    h = sha1()
    h.update(object_header(type_name, size))
    if isinstance(content, (bytes, bytearray, memoryview)):
        h.update(content)
    else:
        for chunk in content:
            h.update(chunk)
    return Hash(h.digest())
