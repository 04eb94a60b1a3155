# Copyright (C) 2026, Hadron Industries, Inc.
# localtypes is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import contextlib, datetime, functools, iso8601, json, logging, re
from . import util

logger = logging.getLogger('localtypes')


class LocalTypesError(RuntimeError): pass

class ParseError(LocalTypesError, ValueError):

    "Text could not be decoded from the storage format"

    def __init__(self, msg, text = None):
        super().__init__(msg)
        self.text = text

class UnsupportedTypeError(LocalTypesError, TypeError):

    "A scan or bind was handed a value of a type that cannot be converted"

    def __init__(self, value):
        super().__init__("failed to scan value: {!r}".format(value))
        self.value = value

class OutOfRangeError(LocalTypesError, OverflowError):

    "Construction or arithmetic produced a date outside years 1 through 9999"


@contextlib.contextmanager
def in_range():
    try:
        yield
    except (OverflowError, ValueError) as e:
        raise OutOfRangeError(str(e)) from e


def _json_text(data):
    if isinstance(data, (bytes, bytearray, memoryview)):
        try:
            data = bytes(data).decode('utf-8')
        except UnicodeDecodeError as e:
            raise ParseError("undecodable JSON bytes", data) from e
    return data.strip()

def _json_string(text):
    try:
        decoded = json.loads(text)
    except ValueError as e:
        raise ParseError("invalid JSON: {}".format(text), text) from e
    if not isinstance(decoded, str):
        raise ParseError("expected a JSON string, got {}".format(text), text)
    return decoded


@functools.total_ordering
class LocalValue:

    '''Shared behaviour of :class:`CalendarDate` and :class:`LocalTimestamp`.

    A value wraps an aware UTC :class:`datetime.datetime` held in
    *_dt*.  Subclasses define how a storage string is recognized
    (*storage_pattern*), how the value is rendered (*storage_format*
    and *display_format*, both :meth:`str.format` templates over the
    calendar fields) and which part of a native datetime is kept
    (:meth:`_truncate`).

    Only years 1 through 9999 can be represented; construction or
    arithmetic that leaves that range raises :class:`OutOfRangeError`.

    Values compare, hash and order by their instant.  The only
    operations that change a value in place are the deserialization
    mutators :meth:`scan` and :meth:`unmarshal_json`.
    '''

    storage_pattern = None
    storage_format = None
    display_format = None

    @classmethod
    def _from_datetime(cls, dt):
        self = cls.__new__(cls)
        self._dt = cls._truncate(dt)
        return self

    @classmethod
    def _truncate(cls, dt):
        raise NotImplementedError

    @classmethod
    def _prepare_text(cls, text):
        return text

    @classmethod
    def _parse_datetime(cls, text):
        prepared = cls._prepare_text(text)
        if not re.fullmatch(cls.storage_pattern, prepared):
            raise ParseError("{!r} is not a valid {}".format(text, cls.__name__), text)
        try:
            return iso8601.parse_date(prepared, default_timezone = datetime.timezone.utc)
        except iso8601.ParseError as e:
            raise ParseError("{!r} is not a valid {}: {}".format(text, cls.__name__, e), text) from e

    @classmethod
    def parse(cls, text):
        "Construct from the storage format; raises :class:`ParseError` otherwise"
        return cls._from_datetime(cls._parse_datetime(text))

    from_string = parse

    @classmethod
    def from_scan(cls, src):
        "Construct from anything :meth:`scan` accepts"
        self = cls.__new__(cls)
        self._dt = None
        self.scan(src)
        return self

    @classmethod
    def from_json(cls, data):
        "Decode a JSON document; returns None for ``null``"
        text = _json_text(data)
        if text == 'null': return None
        return cls.parse(_json_string(text))

    @property
    def year(self): return self._dt.year

    @property
    def month(self): return self._dt.month

    @property
    def day(self): return self._dt.day

    def to_datetime(self):
        return self._dt

    def equal(self, other):
        return self._dt == other._dt

    def before(self, other):
        return self._dt < other._dt

    def after(self, other):
        return self._dt > other._dt

    def equal_month(self, other):
        return self.year == other.year and self.month == other.month

    def equal_quarter(self, other):
        return self.year == other.year and (self.month-1)//3 == (other.month-1)//3

    def equal_year(self, other):
        return self.year == other.year

    def _fields(self):
        dt = self._dt
        return dict(year = dt.year, month = dt.month, day = dt.day,
                    hour = dt.hour, minute = dt.minute, second = dt.second)

    def add_days(self, days):
        with in_range():
            return self._from_datetime(self._dt + datetime.timedelta(days = days))

    def add_months(self, months):
        f = self._fields()
        f['month'] += months
        with in_range():
            return self._from_datetime(util.normalize(**f))

    def add_years(self, years):
        f = self._fields()
        f['year'] += years
        with in_range():
            return self._from_datetime(util.normalize(**f))

    def minus_days(self, days): return self.add_days(-days)

    def minus_months(self, months): return self.add_months(-months)

    def minus_years(self, years): return self.add_years(-years)

    def format(self):
        "The storage format, used for JSON and database binding"
        return self.storage_format.format(**self._fields())

    def display(self):
        "The human readable format"
        return self.display_format.format(**self._fields())

    def sql_value(self):
        "Value handed to the database driver when binding; always the storage format"
        return self.format()

    def scan(self, src):
        '''Replace this value with one read from a database driver.

        *src* may be a byte sequence or string in storage format, or a
        native :class:`datetime.datetime` or :class:`datetime.date`.
        Anything else raises :class:`UnsupportedTypeError`.
        '''
        if isinstance(src, (bytes, bytearray, memoryview)):
            try:
                src = bytes(src).decode('utf-8')
            except UnicodeDecodeError as e:
                raise ParseError("undecodable bytes for {}".format(type(self).__name__), src) from e
        if isinstance(src, str):
            self._dt = self._parse_datetime(src)
        elif isinstance(src, (datetime.datetime, datetime.date)):
            self._dt = self._truncate(util.wall_clock_utc(src))
        else:
            logger.debug("{} cannot scan {}".format(type(self).__name__, type(src).__name__))
            raise UnsupportedTypeError(src)

    def to_json(self):
        return json.dumps(self.format())

    def unmarshal_json(self, data):
        "Replace this value with one decoded from JSON.  ``null`` leaves the value unchanged."
        text = _json_text(data)
        if text == 'null': return
        self._dt = self._parse_datetime(_json_string(text))

    def __eq__(self, other):
        if not isinstance(other, LocalValue) or type(other) is not type(self):
            return NotImplemented
        return self._dt == other._dt

    def __lt__(self, other):
        if not isinstance(other, LocalValue) or type(other) is not type(self):
            return NotImplemented
        return self._dt < other._dt

    def __hash__(self): return hash(self._dt)

    def __str__(self):
        return self.display()

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self.format())
