# __init__.py -- The tests for gitobjects
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

"""Tests for gitobjects."""

import unittest
from unittest import TestCase as _TestCase

from gitobjects.log_utils import _GITOBJECTS_LOGGER


class TestCase(_TestCase):
    """Base test case restoring the gitobjects logger's handlers."""

    def setUp(self) -> None:
        super().setUp()
        handlers = list(_GITOBJECTS_LOGGER.handlers)
        self.addCleanup(setattr, _GITOBJECTS_LOGGER, "handlers", handlers)


def self_test_suite() -> unittest.TestSuite:
    names = [
        "errors",
        "hash",
        "identity",
        "log_utils",
        "objects",
    ]
    module_names = ["tests.test_" + name for name in names]
    loader = unittest.TestLoader()
    return loader.loadTestsFromNames(module_names)


def test_suite() -> unittest.TestSuite:
    result = unittest.TestSuite()
    result.addTests(self_test_suite())
    return result
