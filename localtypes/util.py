# Copyright (C) 2026, Hadron Industries, Inc.
# localtypes is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import contextlib, datetime, logging
from datetime import timezone

def now_utc():
    "The current moment as an aware UTC datetime"
    return datetime.datetime.now(timezone.utc)

#: Source of the current moment for today() and now(); tests replace it.
clock = now_utc


def normalize(year, month, day, hour = 0, minute = 0, second = 0):
    '''Build an aware UTC datetime from calendar fields.

    Fields outside their usual range roll over into the neighbouring
    period the way calendar arithmetic does: month 13 is January of the
    following year, day 32 of January is 1 February, day 0 is the last
    day of the previous month and hour 24 is midnight of the next day.
    '''
    years, month_index = divmod(month - 1, 12)
    first = datetime.datetime(year + years, month_index + 1, 1, tzinfo = timezone.utc)
    return first + datetime.timedelta(days = day - 1, hours = hour,
                                      minutes = minute, seconds = second)


def to_utc(value):
    "Convert a native date or datetime to an aware UTC datetime; naive values are taken to be UTC already"
    if not isinstance(value, datetime.datetime):
        return datetime.datetime(value.year, value.month, value.day, tzinfo = timezone.utc)
    if value.tzinfo:
        return value.astimezone(timezone.utc)
    return value.replace(tzinfo = timezone.utc)


def wall_clock_utc(value):
    "Label the calendar fields of a native date or datetime as UTC, discarding any zone it carries"
    if not isinstance(value, datetime.datetime):
        return datetime.datetime(value.year, value.month, value.day, tzinfo = timezone.utc)
    return value.replace(tzinfo = timezone.utc)


@contextlib.contextmanager
def localtypes_logs_disabled():
    l = logging.getLogger('localtypes')
    oldlevel = l.level
    l.setLevel(logging.CRITICAL+1)
    try:
        yield
    finally:
        l.setLevel(oldlevel)
