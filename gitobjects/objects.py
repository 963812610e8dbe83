# objects.py -- Decoding of base git objects
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

"""Decoding of base git objects.

Raw objects come out of an object store as a type tag, a declared size and
the uncompressed content. The classes here turn those into commits, trees,
blobs and tags, each carrying the hash that names it.
"""

import codecs
import io
import posixpath
import stat
from collections import namedtuple
from collections.abc import Iterable, Iterator
from enum import Enum, IntEnum
from io import BytesIO

from .errors import (
    ChecksumMismatch,
    MalformedCommit,
    MalformedTag,
    MalformedTree,
    NotBlobError,
    NotCommitError,
    NotTagError,
    NotTreeError,
    ObjectFormatException,
    UnknownMode,
    WrongObjectException,
)
from .hash import Hash, compute_hash, hex_to_sha, valid_hexsha
from .identity import Signature, parse_signature
from .log_utils import getLogger

logger = getLogger(__name__)

# Header fields for commits
_TREE_HEADER = b"tree"
_PARENT_HEADER = b"parent"
_AUTHOR_HEADER = b"author"
_COMMITTER_HEADER = b"committer"
_ENCODING_HEADER = b"encoding"

# Header fields for tags
_OBJECT_HEADER = b"object"
_TYPE_HEADER = b"type"
_TAG_HEADER = b"tag"
_TAGGER_HEADER = b"tagger"

DEFAULT_ENCODING = "utf-8"


class ObjectType(bytes, Enum):
    """The kind of a git object, named as in the object header."""

    COMMIT = b"commit"
    TREE = b"tree"
    BLOB = b"blob"
    TAG = b"tag"

    @property
    def type_name(self) -> bytes:
        return bytes(self)

    @property
    def type_num(self) -> int:
        """Numeric type used for this kind of object in pack files."""
        return _TYPE_NUMS[self]

    @classmethod
    def from_type_num(cls, type_num: int) -> "ObjectType":
        for object_type, num in _TYPE_NUMS.items():
            if num == type_num:
                return object_type
        raise ValueError(f"Unknown object type number: {type_num}")


_TYPE_NUMS = {
    ObjectType.COMMIT: 1,
    ObjectType.TREE: 2,
    ObjectType.BLOB: 3,
    ObjectType.TAG: 4,
}


class _RawObjectWriter(io.RawIOBase):
    """Write sink appending to the content of a RawObject."""

    def __init__(self, obj: "RawObject") -> None:
        super().__init__()
        self._obj = obj

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        if self.closed:
            raise ValueError("write to closed RawObject writer")
        chunk = bytes(data)
        self._obj._append(chunk)
        return len(chunk)


class RawObject:
    """An undecoded object: type tag, declared size and content.

    The content is kept as immutable chunks; every call to reader() starts a
    new cursor at the beginning, so the content can be consumed more than
    once (for instance once for parsing and once for hashing).
    """

    __slots__ = ("_type", "_size", "_chunks")

    def __init__(
        self,
        type: ObjectType | None = None,
        size: int | None = None,
        content: bytes | None = None,
    ) -> None:
        self._type: ObjectType | None = None
        self._size: int | None = None
        self._chunks: list[bytes] = []
        if type is not None:
            self.set_type(type)
        if size is not None:
            self.set_size(size)
        if content is not None:
            self._append(bytes(content))

    @classmethod
    def from_string(cls, type: ObjectType, data: bytes) -> "RawObject":
        """Create a raw object whose declared size matches its content."""
        return cls(type, len(data), data)

    @property
    def type(self) -> ObjectType | None:
        """The declared object type, or None if it hasn't been set."""
        return self._type

    def set_type(self, type: ObjectType | bytes) -> None:
        self._type = ObjectType(type)

    @property
    def size(self) -> int | None:
        """The declared size, or None if it hasn't been set."""
        return self._size

    def set_size(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"Object size must not be negative: {size}")
        self._size = size

    def _append(self, chunk: bytes) -> None:
        if chunk:
            self._chunks.append(chunk)

    def writer(self) -> _RawObjectWriter:
        """Return a file-like object that appends to the content."""
        return _RawObjectWriter(self)

    def reader(self) -> BytesIO:
        """Return a new file-like object reading the content from the start."""
        return BytesIO(self.as_raw_string())

    def as_raw_chunks(self) -> list[bytes]:
        return list(self._chunks)

    def as_raw_string(self) -> bytes:
        if len(self._chunks) > 1:
            self._chunks = [b"".join(self._chunks)]
        return self._chunks[0] if self._chunks else b""

    def raw_length(self) -> int:
        """Returns the actual length of the content."""
        return sum(len(chunk) for chunk in self._chunks)

    def hash(self) -> Hash:
        """Compute the hash of this object.

        The declared size is used for the header when there is one, the
        actual content length otherwise.

        Raises:
            ObjectFormatException: if no type has been set
        """
        if self._type is None:
            raise ObjectFormatException("Raw object has no type")
        size = self._size
        length = self.raw_length()
        if size is None:
            size = length
        elif size != length:
            logger.debug(
                "declared size %d of %s object does not match content length %d",
                size,
                self._type.type_name.decode("ascii"),
                length,
            )
        return compute_hash(self._type, size, self._chunks)

    def __repr__(self) -> str:
        type_name = self._type.type_name.decode("ascii") if self._type else None
        return f"<{self.__class__.__name__} type={type_name} size={self._size}>"


class FileMode(IntEnum):
    """Mode of a tree entry."""

    DIRECTORY = 0o040000
    REGULAR = 0o100644
    EXECUTABLE = 0o100755
    SYMLINK = 0o120000
    SUBMODULE = 0o160000

    @classmethod
    def parse(cls, mode: int) -> "FileMode":
        """Look up the FileMode for a numeric mode.

        Raises:
            UnknownMode: if mode is not one of the recognised modes
        """
        try:
            return cls(mode)
        except ValueError:
            raise UnknownMode(mode) from None

    def to_code(self) -> int:
        return int(self)

    @property
    def object_type(self) -> ObjectType:
        """The type of object an entry with this mode refers to."""
        if self is FileMode.DIRECTORY:
            return ObjectType.TREE
        if self is FileMode.SUBMODULE:
            return ObjectType.COMMIT
        return ObjectType.BLOB

    def __str__(self) -> str:
        if self in (FileMode.EXECUTABLE, FileMode.DIRECTORY, FileMode.SUBMODULE):
            permissions = 0o755
        else:
            permissions = 0o644
        if self is FileMode.DIRECTORY:
            kind = "d"
        elif self is FileMode.SYMLINK:
            kind = "l"
        else:
            kind = "-"
        return kind + stat.filemode(stat.S_IFREG | permissions)[1:]


class TreeEntry(namedtuple("TreeEntry", ["name", "mode", "hash"])):
    """Named tuple encapsulating a single tree entry.

    The name is kept as bytes; git doesn't require it to be valid text.
    """

    def decode_name(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        """Return the name as text.

        Raises:
            UnicodeDecodeError: if the name is not valid in encoding and
                errors is "strict"
        """
        return self.name.decode(encoding, errors)

    def in_path(self, path: bytes) -> "TreeEntry":
        """Return a copy of this entry with the given path prepended."""
        if not isinstance(self.name, bytes):
            raise TypeError(f"Expected bytes for name, got {self.name!r}")
        return TreeEntry(posixpath.join(path, self.name), self.mode, self.hash)


def _check_entry_name(name: bytes) -> None:
    if not name:
        raise MalformedTree("Empty tree entry name")
    if name in (b".", b".."):
        raise MalformedTree(f"Invalid tree entry name {name!r}")
    if b"/" in name:
        raise MalformedTree(f"Tree entry name contains a slash: {name!r}")


def parse_tree(text: bytes, strict: bool = False) -> Iterator[TreeEntry]:
    """Parse a tree text.

    Args:
        text: Serialized text to parse
        strict: Also reject zero-padded modes and invalid entry names
    Returns: iterator of TreeEntry, in the order they appear in text
    Raises:
        MalformedTree: if a record is truncated or otherwise malformed
        UnknownMode: if a record carries an unrecognised mode
    """
    count = 0
    length = len(text)
    while count < length:
        mode_end = text.find(b" ", count)
        if mode_end == -1:
            raise MalformedTree(f"Truncated tree entry at offset {count}: no mode")
        mode_text = text[count:mode_end]
        if strict and mode_text.startswith(b"0"):
            raise MalformedTree(f"Invalid mode {mode_text!r}")
        if not mode_text.isdigit():
            raise MalformedTree(f"Invalid mode {mode_text!r}")
        try:
            mode = int(mode_text, 8)
        except ValueError as exc:
            raise MalformedTree(f"Invalid mode {mode_text!r}") from exc
        name_end = text.find(b"\0", mode_end + 1)
        if name_end == -1:
            raise MalformedTree(f"Truncated tree entry at offset {count}: no name")
        name = text[mode_end + 1 : name_end]
        if strict:
            _check_entry_name(name)
        count = name_end + 21
        if count > length:
            raise MalformedTree(
                f"Truncated tree entry {name!r}: sha has invalid length "
                f"{length - name_end - 1}"
            )
        yield TreeEntry(name, FileMode.parse(mode), Hash(text[name_end + 1 : count]))


def _parse_message(
    text: bytes,
) -> tuple[list[tuple[bytes, bytes]], bytes]:
    """Parse a message with a list of fields and a body.

    Args:
        text: the raw content of the tag or commit object.
    Returns: tuple of (headers, body); headers is a list of (field, value)
        tuples, in the order read from the text, possibly including
        duplicates.
    """
    headers: list[tuple[bytes, bytes]] = []
    f = BytesIO(text)
    k = None
    v = b""

    # Headers can contain newlines. The next line is indented with a space.
    # We store the latest key as 'k', and the accumulated value as 'v'.
    for line in f:
        if line.startswith(b" ") and k is not None:
            v += line[1:]
            continue
        if k is not None:
            headers.append((k, v.removesuffix(b"\n")))
            k = None
        if line == b"\n":
            # Empty line indicates end of headers
            return headers, f.read()
        k, _, v = line.partition(b" ")
        k = k.rstrip(b"\n")
    if k is not None:
        headers.append((k, v.removesuffix(b"\n")))
    return headers, b""


def _text_encoding(encoding: str | None) -> str:
    """Return the codec to decode commit text with.

    Unknown encoding names fall back to UTF-8.
    """
    if encoding is None:
        return DEFAULT_ENCODING
    try:
        return codecs.lookup(encoding).name
    except (LookupError, ValueError):
        logger.debug("unknown commit encoding %r, decoding as utf-8", encoding)
        return DEFAULT_ENCODING


def _parse_hash_header(field: bytes, value: bytes, exc_class) -> Hash:
    if not valid_hexsha(value):
        raise exc_class(f"Invalid {field.decode('ascii')} reference {value!r}")
    return Hash(hex_to_sha(value))


class ShaFile:
    """A decoded git object, named by its hash."""

    __slots__ = ("_hash",)

    object_type: ObjectType
    _not_type_error: type[WrongObjectException]

    def __init__(self, hash: Hash) -> None:
        """Don't call this directly; use from_raw_object()."""
        self._hash = hash

    @classmethod
    def from_raw_object(cls, raw: RawObject, **kwargs):
        """Decode a raw object into an instance of this class.

        Raises:
            WrongObjectException: if raw is tagged with a different type
            ObjectFormatException: if the content is malformed
        """
        if raw.type is None:
            raise ObjectFormatException("Raw object has no type")
        if raw.type is not cls.object_type:
            raise cls._not_type_error(
                raw.hash().hexdigest().encode("ascii"), raw.type.type_name
            )
        return cls._from_raw_object(raw, **kwargs)

    @classmethod
    def _from_raw_object(cls, raw: RawObject):
        raise NotImplementedError(cls._from_raw_object)

    @property
    def hash(self) -> Hash:
        """The hash that names this object."""
        return self._hash

    @property
    def id(self) -> bytes:
        """The hex id of this object."""
        return self._hash.hexdigest().encode("ascii")

    @property
    def type_name(self) -> bytes:
        return self.object_type.type_name

    def check_hash(self, expected: Hash) -> None:
        """Check that this object is named by the expected hash.

        Raises:
            ChecksumMismatch: if the hashes differ
        """
        if self._hash != expected:
            raise ChecksumMismatch(expected.digest(), self._hash.digest())

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self._hash}>"

    def __eq__(self, other: object) -> bool:
        """Return true if the type and hash of the two objects match."""
        if not isinstance(other, ShaFile):
            return NotImplemented
        return (
            self.object_type is other.object_type and self._hash == other._hash
        )

    def __hash__(self) -> int:
        return hash((self.object_type, self._hash))


class Blob(ShaFile):
    """A Git Blob object."""

    __slots__ = ("_size", "_data")

    object_type = ObjectType.BLOB
    _not_type_error = NotBlobError

    def __init__(self, hash: Hash, size: int, data: bytes) -> None:
        super().__init__(hash)
        self._size = size
        self._data = data

    @classmethod
    def _from_raw_object(cls, raw: RawObject) -> "Blob":
        size = raw.size
        if size is None:
            logger.debug("blob decoded without a declared size")
            size = 0
        return cls(raw.hash(), size, raw.as_raw_string())

    @property
    def size(self) -> int:
        """The declared size of the blob."""
        return self._size

    @property
    def data(self) -> bytes:
        """The content of the blob."""
        return self._data

    def reader(self) -> BytesIO:
        """Return a file-like object reading the content from the start."""
        return BytesIO(self._data)


class Tree(ShaFile):
    """A Git tree object."""

    __slots__ = ("_entries", "_by_name")

    object_type = ObjectType.TREE
    _not_type_error = NotTreeError

    def __init__(self, hash: Hash, entries: Iterable[TreeEntry]) -> None:
        super().__init__(hash)
        self._entries = tuple(entries)
        self._by_name = {entry.name: entry for entry in self._entries}

    @classmethod
    def _from_raw_object(cls, raw: RawObject, strict: bool = False) -> "Tree":
        entries = list(parse_tree(raw.as_raw_string(), strict=strict))
        tree = cls(raw.hash(), entries)
        logger.debug("decoded tree %s with %d entries", tree.hash, len(entries))
        return tree

    @property
    def entries(self) -> tuple[TreeEntry, ...]:
        """The entries of this tree, in the order they were stored."""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TreeEntry]:
        return iter(self._entries)

    def __contains__(self, name: bytes) -> bool:
        return name in self._by_name

    def __getitem__(self, name: bytes) -> TreeEntry:
        return self._by_name[name]


class Commit(ShaFile):
    """A git commit object."""

    __slots__ = (
        "_tree",
        "_parents",
        "_author",
        "_committer",
        "_encoding",
        "_extra",
        "_message",
    )

    object_type = ObjectType.COMMIT
    _not_type_error = NotCommitError

    def __init__(
        self,
        hash: Hash,
        tree: Hash,
        parents: Iterable[Hash],
        author: Signature,
        committer: Signature,
        message: str,
        encoding: str | None = None,
        extra: Iterable[tuple[bytes, bytes]] = (),
    ) -> None:
        super().__init__(hash)
        self._tree = tree
        self._parents = tuple(parents)
        self._author = author
        self._committer = committer
        self._message = message
        self._encoding = encoding
        self._extra = tuple(extra)

    @classmethod
    def _from_raw_object(cls, raw: RawObject) -> "Commit":
        headers, body = _parse_message(raw.as_raw_string())
        encoding = None
        for field, value in headers:
            if field == _ENCODING_HEADER:
                encoding = value.decode("ascii", "replace")
        text_encoding = _text_encoding(encoding)

        tree = None
        parents = []
        author = committer = Signature()
        extra = []
        for field, value in headers:
            if field == _TREE_HEADER:
                tree = _parse_hash_header(field, value, MalformedCommit)
            elif field == _PARENT_HEADER:
                parents.append(_parse_hash_header(field, value, MalformedCommit))
            elif field == _AUTHOR_HEADER:
                author = parse_signature(value, text_encoding)
            elif field == _COMMITTER_HEADER:
                committer = parse_signature(value, text_encoding)
            elif field != _ENCODING_HEADER:
                extra.append((field, value))
        if tree is None:
            raise MalformedCommit("Commit has no tree header")

        commit = cls(
            raw.hash(),
            tree,
            parents,
            author,
            committer,
            body.decode(text_encoding, "replace"),
            encoding=encoding,
            extra=extra,
        )
        logger.debug("decoded commit %s with %d parents", commit.hash, len(parents))
        return commit

    @property
    def tree(self) -> Hash:
        """Tree that is the state of this commit."""
        return self._tree

    @property
    def parents(self) -> tuple[Hash, ...]:
        """Parents of this commit, in the order they were recorded."""
        return self._parents

    @property
    def author(self) -> Signature:
        return self._author

    @property
    def committer(self) -> Signature:
        return self._committer

    @property
    def message(self) -> str:
        return self._message

    @property
    def encoding(self) -> str | None:
        """Encoding of the commit message, if it was declared."""
        return self._encoding

    @property
    def extra(self) -> tuple[tuple[bytes, bytes], ...]:
        """Header fields this decoder does not interpret, in order."""
        return self._extra


class Tag(ShaFile):
    """A Git Tag object."""

    __slots__ = ("_object", "_tagged_type", "_name", "_tagger", "_message")

    object_type = ObjectType.TAG
    _not_type_error = NotTagError

    def __init__(
        self,
        hash: Hash,
        object: tuple[ObjectType, Hash],
        name: str,
        tagger: Signature | None,
        message: str,
    ) -> None:
        super().__init__(hash)
        (self._tagged_type, self._object) = object
        self._name = name
        self._tagger = tagger
        self._message = message

    @classmethod
    def _from_raw_object(cls, raw: RawObject) -> "Tag":
        headers, body = _parse_message(raw.as_raw_string())
        object_hash = tagged_type = None
        name = b""
        tagger = None
        for field, value in headers:
            if field == _OBJECT_HEADER:
                object_hash = _parse_hash_header(field, value, MalformedTag)
            elif field == _TYPE_HEADER:
                try:
                    tagged_type = ObjectType(value)
                except ValueError:
                    raise MalformedTag(
                        f"Unknown tagged object type {value!r}"
                    ) from None
            elif field == _TAG_HEADER:
                name = value
            elif field == _TAGGER_HEADER:
                tagger = parse_signature(value)
        if object_hash is None:
            raise MalformedTag("Tag has no object header")
        if tagged_type is None:
            raise MalformedTag("Tag has no type header")
        return cls(
            raw.hash(),
            (tagged_type, object_hash),
            name.decode(DEFAULT_ENCODING, "replace"),
            tagger,
            body.decode(DEFAULT_ENCODING, "replace"),
        )

    @property
    def object(self) -> tuple[ObjectType, Hash]:
        """The object this tag points at, as (type, hash)."""
        return (self._tagged_type, self._object)

    @property
    def name(self) -> str:
        return self._name

    @property
    def tagger(self) -> Signature | None:
        return self._tagger

    @property
    def message(self) -> str:
        return self._message


OBJECT_CLASSES: tuple[type[ShaFile], ...] = (
    Commit,
    Tree,
    Blob,
    Tag,
)

_TYPE_MAP: dict[ObjectType, type[ShaFile]] = {
    cls.object_type: cls for cls in OBJECT_CLASSES
}


def object_class(type: ObjectType | bytes | int) -> type[ShaFile] | None:
    """Get the object class corresponding to the given type.

    Args:
        type: An ObjectType, a type name or a numeric type.
    Returns: The ShaFile subclass corresponding to the given type, or None if
        type is not a valid type name/number.
    """
    try:
        if isinstance(type, int):
            type = ObjectType.from_type_num(type)
        return _TYPE_MAP[ObjectType(type)]
    except ValueError:
        return None


def decode_object(raw: RawObject, strict: bool = False) -> ShaFile:
    """Decode a raw object into the matching typed object.

    Args:
        raw: The object to decode
        strict: Use strict parsing for trees
    Raises:
        ObjectFormatException: if raw has no type or malformed content
    """
    if raw.type is None:
        raise ObjectFormatException("Raw object has no type")
    cls = _TYPE_MAP[raw.type]
    if cls is Tree:
        return Tree.from_raw_object(raw, strict=strict)
    return cls.from_raw_object(raw)


def decode_commit(raw: RawObject) -> Commit:
    return Commit.from_raw_object(raw)


def decode_tree(raw: RawObject, strict: bool = False) -> Tree:
    return Tree.from_raw_object(raw, strict=strict)


def decode_blob(raw: RawObject) -> Blob:
    return Blob.from_raw_object(raw)


def decode_tag(raw: RawObject) -> Tag:
    return Tag.from_raw_object(raw)
