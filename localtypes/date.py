# Copyright (C) 2026, Hadron Industries, Inc.
# localtypes is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

from . import util
from .interface import LocalValue, in_range


class CalendarDate(LocalValue):

    '''A date with no time of day, held at midnight UTC.

        d = CalendarDate(2023, 5, 17)
        d.quarter_start()         # CalendarDate(2023, 4, 1)
        str(d)                    # '17.5.2023'
        d.format()                # '2023-05-17'

    Out of range months and days roll over instead of raising, so
    ``CalendarDate(2023, 1, 32)`` is 1 February 2023 and adding a month
    to 31 January lands on 3 March.
    '''

    storage_pattern = r'\d{4}-\d{2}-\d{2}'
    storage_format = '{year:04d}-{month:02d}-{day:02d}'
    display_format = '{day}.{month}.{year:04d}'

    def __init__(self, year, month, day):
        with in_range():
            self._dt = util.normalize(year, month, day)

    @classmethod
    def create(cls, year, month, day):
        return cls(year, month, day)

    @classmethod
    def today(cls):
        now = util.clock()
        return cls._from_datetime(util.to_utc(now))

    @classmethod
    def _truncate(cls, dt):
        return dt.replace(hour = 0, minute = 0, second = 0, microsecond = 0)

    @property
    def quarter(self):
        "Quarter of the year, 1 through 4"
        return (self.month-1)//3 + 1

    def quarter_start(self):
        "The first day of the quarter containing this date"
        month = self.month
        month -= (month-1) % 3
        return type(self)(self.year, month, 1)

    def to_date(self):
        return self._dt.date()

    def _fields(self):
        dt = self._dt
        return dict(year = dt.year, month = dt.month, day = dt.day)

    def __repr__(self):
        return "CalendarDate({}, {}, {})".format(self.year, self.month, self.day)
