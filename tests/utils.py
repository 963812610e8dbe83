# utils.py -- Test utilities for gitobjects
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

"""Utility functions and fixtures common to gitobjects tests."""

import base64

from gitobjects.objects import ObjectType, RawObject

# A merge commit with two parents and a non-ASCII author name.
COMMIT_FIXTURE = base64.b64decode(
    "dHJlZSBjMmQzMGZhOGVmMjg4NjE4ZjY1ZjZlZWQ2ZTE2OGUwZDUxNDg4NmY0CnBhcmVudCBiMDI5"
    "NTE3ZjYzMDBjMmRhMGY0YjY1MWI4NjQyNTA2Y2Q2YWFmNDVkCnBhcmVudCBiOGU0NzFmNThiY2Jj"
    "YTYzYjA3YmRhMjBlNDI4MTkwNDA5YzJkYjQ3CmF1dGhvciBNw6F4aW1vIEN1YWRyb3MgPG1jdWFk"
    "cm9zQGdtYWlsLmNvbT4gMTQyNzgwMjQzNCArMDIwMApjb21taXR0ZXIgTcOheGltbyBDdWFkcm9z"
    "IDxtY3VhZHJvc0BnbWFpbC5jb20+IDE0Mjc4MDI0MzQgKzAyMDAKCk1lcmdlIHB1bGwgcmVxdWVz"
    "dCAjMSBmcm9tIGRyaXBvbGxlcy9mZWF0dXJlCgpDcmVhdGluZyBjaGFuZ2Vsb2c="
)
COMMIT_SHA = "a5b8b09e2f8fcb0bb99d3ccb0958157b40890d69"

# A tree with four files followed by four directories.
TREE_FIXTURE = base64.b64decode(
    "MTAwNjQ0IC5naXRpZ25vcmUAMoWKrTw4PtH/Cg+b3yMdVKAMnogxMDA2NDQgQ0hBTkdFTE9HANP/"
    "U+BWSp+H2OhLbijlBg5RcAiqMTAwNjQ0IExJQ0VOU0UAwZK9aiTqGrAdeGhuQXyL3Hw9GX8xMDA2"
    "NDQgYmluYXJ5LmpwZwDVwPSrgRiXyt8DrsNYrmDSH5HFDTQwMDAwIGdvAKOXcadlH5f69ccuCCJN"
    "hX/DUTPbNDAwMDAganNvbgBah35qkGonQ61uRdmcF5NkKq+O2jQwMDAwIHBocABYavVn0Ltedx5J"
    "vdlDT14Pt20l+jQwMDAwIHZlbmRvcgDPSqOziXT7fYHzZ8CDD3141lq4aw=="
)
TREE_SHA = "a8d315b2b1c615d43042c3a62402b8a54288cf5c"

ROOT_COMMIT_FIXTURE = (
    b"tree c2d30fa8ef288618f65f6eed6e168e0d514886f4\n"
    b"author Foo Bar <foo@bar.com> 1257894000 +0100\n"
    b"committer Foo Bar <foo@bar.com> 1257894000 +0100\n"
    b"\n"
    b"Initial commit\n"
)
ROOT_COMMIT_SHA = "8fc21b92b20271c30254f2a8ed9057448eea5c26"

TAG_FIXTURE = (
    b"object a5b8b09e2f8fcb0bb99d3ccb0958157b40890d69\n"
    b"type commit\n"
    b"tag v1.0.0\n"
    b"tagger Foo Bar <foo@bar.com> 1257894000 +0100\n"
    b"\n"
    b"Release 1.0.0\n"
)
TAG_SHA = "a6ca13692819bc15ad018120319e62132b74bbb4"

EMPTY_BLOB_SHA = "e69de29bb2d1d6434b8b29ae775ad8c2e48c5391"
EMPTY_TREE_SHA = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"


def make_raw_object(
    type: ObjectType, data: bytes, size: int | None = None
) -> RawObject:
    """Build a RawObject the way an object store hands it over.

    Args:
        type: Type of the object
        data: Content to write
        size: Declared size; defaults to len(data). Pass -1 to leave it unset.
    """
    raw = RawObject()
    raw.set_type(type)
    if size is None:
        size = len(data)
    if size >= 0:
        raw.set_size(size)
    with raw.writer() as f:
        f.write(data)
    return raw


def tree_record(mode: bytes, name: bytes, sha: bytes) -> bytes:
    """Serialize a single tree entry record."""
    return mode + b" " + name + b"\0" + sha
