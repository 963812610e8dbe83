# log_utils.py -- Logging utilities for gitobjects
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

"""Logging utilities for gitobjects.

Modules get their loggers through :func:`getLogger` so they all live under
the ``gitobjects`` logger. The decoders only log at DEBUG level.

gitobjects is a library, so by default nothing it logs reaches the host
application's output. A no-op handler is attached to the ``gitobjects``
logger at import time to keep the logging module from complaining about
missing handlers; applications that configure logging themselves can drop
it with :func:`remove_null_handler`.
"""

import logging

getLogger = logging.getLogger


class _NullHandler(logging.Handler):
    """No-op logging handler to avoid unexpected logging warnings."""

    def emit(self, record: logging.LogRecord) -> None:
        pass


_NULL_HANDLER = _NullHandler()
_GITOBJECTS_LOGGER = getLogger("gitobjects")
_GITOBJECTS_LOGGER.addHandler(_NULL_HANDLER)


def remove_null_handler() -> None:
    """Remove the null handler from the gitobjects logger."""
    _GITOBJECTS_LOGGER.removeHandler(_NULL_HANDLER)
