# identity.py -- Parsing of author, committer and tagger lines
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

"""Parsing of identity lines.

Commits and tags record who made them as a single line of the form::

    Name <email> 1257894000 +0100

Old tools wrote all sorts of variations on this, so the parser here never
fails: any part that can't be made sense of is left empty.
"""

import datetime
from dataclasses import dataclass

# Offsets of a day or more can't be represented as a fixed timezone.
_MAX_TIMEZONE_OFFSET = 24 * 3600


@dataclass(frozen=True)
class Signature:
    """Who did something, and when.

    Attributes:
        name: Name of the person, possibly empty
        email: Email address, possibly empty
        time: Seconds since the epoch, or None when absent
        timezone: Offset east of UTC in seconds
    """

    name: str = ""
    email: str = ""
    time: int | None = None
    timezone: int = 0

    @property
    def when(self) -> datetime.datetime | None:
        """The timestamp as an aware datetime, or None when absent."""
        if self.time is None:
            return None
        try:
            tz = datetime.timezone(datetime.timedelta(seconds=self.timezone))
            return datetime.datetime.fromtimestamp(self.time, tz)
        except (OverflowError, OSError, ValueError):
            # Outside what the platform (or datetime) can represent.
            return None


def parse_timezone(text: bytes) -> int:
    """Parse a timezone text fragment (e.g. b'+0100').

    Args:
        text: Text to parse.
    Returns: Timezone as seconds difference to UTC
    Raises:
        ValueError: if the text is not a signed HHMM offset
    """
    if text[:1] not in (b"+", b"-"):
        raise ValueError(f"Timezone must start with + or - ({text!r})")
    digits = text[1:]
    if not digits.isdigit():
        raise ValueError(f"Invalid timezone offset ({text!r})")
    offset = int(digits)
    hours = offset // 100
    minutes = offset % 100
    seconds = hours * 3600 + minutes * 60
    if text[:1] == b"-":
        return -seconds
    return seconds


def _is_timezone(token: bytes) -> bool:
    return token[:1] in (b"+", b"-") and token[1:].isdigit()


def _split_time_suffix(value: bytes) -> tuple[bytes, bytes]:
    """Split trailing time fields off an identity without an email part."""
    tokens = value.split()
    count = 0
    if len(tokens) >= 2 and tokens[-2].isdigit() and _is_timezone(tokens[-1]):
        count = 2
    elif tokens and tokens[-1].isdigit():
        count = 1
    if count == 0:
        return value, b""
    if count == len(tokens):
        return b"", value
    head, *tail = value.rsplit(None, count)
    return head, b" ".join(tail)


def _parse_time_fields(value: bytes) -> tuple[int | None, int]:
    tokens = value.split()
    if not tokens or not tokens[0].isdigit():
        return None, 0
    time = int(tokens[0])
    timezone = 0
    if len(tokens) > 1:
        try:
            timezone = parse_timezone(tokens[1])
        except ValueError:
            timezone = 0
        if abs(timezone) >= _MAX_TIMEZONE_OFFSET:
            timezone = 0
    return time, timezone


def parse_signature(value: bytes, encoding: str = "utf-8") -> Signature:
    """Parse an identity line.

    Args:
        value: The raw line, without the header name (e.g. without b"author ")
        encoding: Encoding used for the name and email
    Returns: A Signature; missing or malformed parts are left empty
    """
    email_start = value.find(b"<")
    if email_start == -1:
        name, rest = _split_time_suffix(value)
        email = b""
    else:
        name = value[:email_start]
        email_end = value.find(b">", email_start + 1)
        if email_end == -1:
            # Unterminated email; nothing after it can be trusted.
            email = b""
            rest = b""
        else:
            email = value[email_start + 1 : email_end]
            rest = value[email_end + 1 :]
    time, timezone = _parse_time_fields(rest)
    return Signature(
        name=name.rstrip().decode(encoding, "replace"),
        email=email.decode(encoding, "replace"),
        time=time,
        timezone=timezone,
    )
