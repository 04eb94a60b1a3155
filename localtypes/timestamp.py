# Copyright (C) 2026, Hadron Industries, Inc.
# localtypes is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import datetime
from datetime import timezone
from . import util
from .interface import LocalValue, logger, in_range

ZERO = datetime.datetime(1, 1, 1, tzinfo = timezone.utc)

class LocalTimestamp(LocalValue):

    '''A date and time of day at one second resolution, in UTC.

    The storage format ``YYYY-MM-DD HH:MM:SS`` is used for JSON and for
    database binding.  ``str()`` gives the zero padded display format
    ``DD.MM.YYYY HH:MM:SS``.  Strings longer than *storage_length* are
    cut down to that length before parsing, so a driver that appends
    fractional seconds or a zone suffix still scans.
    '''

    storage_pattern = r'\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}'
    storage_format = '{year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{second:02d}'
    display_format = '{day:02d}.{month:02d}.{year:04d} {hour:02d}:{minute:02d}:{second:02d}'
    storage_length = 19

    def __init__(self, year, month, day, hour = 0, minute = 0, second = 0):
        with in_range():
            self._dt = util.normalize(year, month, day, hour, minute, second)

    @classmethod
    def create(cls, year, month, day, hour = 0, minute = 0, second = 0):
        return cls(year, month, day, hour, minute, second)

    @classmethod
    def now(cls):
        return cls._from_datetime(util.to_utc(util.clock()))

    @classmethod
    def zero(cls):
        return cls._from_datetime(ZERO)

    @classmethod
    def _truncate(cls, dt):
        return dt.replace(microsecond = 0)

    @classmethod
    def _prepare_text(cls, text):
        if len(text) > cls.storage_length:
            logger.debug("Truncating {!r} to {} characters".format(text, cls.storage_length))
            text = text[:cls.storage_length]
        return text

    @property
    def hour(self): return self._dt.hour

    @property
    def minute(self): return self._dt.minute

    @property
    def second(self): return self._dt.second

    def is_zero(self):
        return self._dt == ZERO

    def add_duration(self, delta):
        "Advance by a signed :class:`datetime.timedelta`; sub-second parts of the result are dropped"
        with in_range():
            return self._from_datetime(self._dt + delta)

    def difference(self, other):
        "Signed :class:`datetime.timedelta` from *other* to this timestamp"
        return self._dt - other._dt
