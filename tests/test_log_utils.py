# test_log_utils.py -- Tests for log_utils.py
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

"""Tests for gitobjects.log_utils."""

import logging

from gitobjects.log_utils import (
    _GITOBJECTS_LOGGER,
    _NULL_HANDLER,
    _NullHandler,
    getLogger,
    remove_null_handler,
)
from gitobjects.objects import ObjectType, decode_blob, decode_commit, decode_tree
from gitobjects.objects import logger as objects_logger

from . import TestCase
from .utils import TREE_FIXTURE, make_raw_object


class LogUtilsTests(TestCase):
    def test_null_handler(self) -> None:
        record = logging.LogRecord(
            name="gitobjects.test",
            level=logging.INFO,
            pathname="test_log_utils.py",
            lineno=1,
            msg="Test message",
            args=(),
            exc_info=None,
        )
        _NullHandler().emit(record)

    def test_null_handler_installed(self) -> None:
        self.assertIn(_NULL_HANDLER, _GITOBJECTS_LOGGER.handlers)

    def test_get_logger(self) -> None:
        logger = getLogger("gitobjects.test")
        self.assertIsInstance(logger, logging.Logger)
        self.assertEqual("gitobjects.test", logger.name)
        self.assertIs(_GITOBJECTS_LOGGER, logger.parent)

    def test_module_logger(self) -> None:
        self.assertEqual("gitobjects.objects", objects_logger.name)
        self.assertIs(_GITOBJECTS_LOGGER, objects_logger.parent)

    def test_remove_null_handler(self) -> None:
        remove_null_handler()
        self.assertNotIn(_NULL_HANDLER, _GITOBJECTS_LOGGER.handlers)
        # Removing it twice is harmless.
        remove_null_handler()
        self.assertNotIn(_NULL_HANDLER, _GITOBJECTS_LOGGER.handlers)


class DecodeLoggingTests(TestCase):
    def test_tree_decode_logs(self) -> None:
        with self.assertLogs("gitobjects.objects", level="DEBUG") as cm:
            decode_tree(make_raw_object(ObjectType.TREE, TREE_FIXTURE))
        self.assertEqual(1, len(cm.output))
        self.assertIn("with 8 entries", cm.output[0])

    def test_size_mismatch_logs(self) -> None:
        raw = make_raw_object(ObjectType.BLOB, b"FOO", size=4)
        with self.assertLogs("gitobjects.objects", level="DEBUG") as cm:
            raw.hash()
        self.assertIn("does not match content length 3", cm.output[0])

    def test_blob_without_size_logs(self) -> None:
        raw = make_raw_object(ObjectType.BLOB, b"FOO", size=-1)
        with self.assertLogs("gitobjects.objects", level="DEBUG") as cm:
            decode_blob(raw)
        self.assertIn("without a declared size", cm.output[0])

    def test_unknown_encoding_logs(self) -> None:
        text = (
            b"tree c2d30fa8ef288618f65f6eed6e168e0d514886f4\n"
            b"encoding x-unknown-charset\n"
            b"\n"
        )
        with self.assertLogs("gitobjects.objects", level="DEBUG") as cm:
            decode_commit(make_raw_object(ObjectType.COMMIT, text))
        self.assertIn("unknown commit encoding 'x-unknown-charset'", cm.output[0])
