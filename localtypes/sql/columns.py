# Copyright (C) 2026, Hadron Industries, Inc.
# localtypes is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import logging
from sqlalchemy.types import TypeDecorator, String, Text, TIME
from ..date import CalendarDate
from ..timestamp import LocalTimestamp

sql_logger = logging.getLogger('localtypes.sql')

DATA_TYPE = "time"

DIALECT_COLUMN_TYPES = {
    'mysql': 'TIME',
    'postgres': 'TIME',
    'sqlserver': 'TIME',
    'sqlite': 'TEXT',
    }

# SQLAlchemy's names for dialects that the table knows under another name
DIALECT_ALIASES = {
    'postgresql': 'postgres',
    'mssql': 'sqlserver',
    }

_sql_types = {
    'TIME': TIME,
    'TEXT': Text,
    }


def column_data_type():
    "The generic column type shared by all local value columns"
    return DATA_TYPE


def column_db_data_type(dialect_name):
    "Concrete column type for a dialect, or the empty string for dialects without an entry"
    dialect_name = DIALECT_ALIASES.get(dialect_name, dialect_name)
    return DIALECT_COLUMN_TYPES.get(dialect_name, "")


class _SqlLocalValue(TypeDecorator):

    '''Stores a local value as its storage format string.

    Binding accepts an instance of *value_class*, a storage format
    string or a native date/datetime.  Results are built through
    :meth:`LocalValue.from_scan` so bytes, strings and native datetimes
    returned by drivers all decode the same way.
    '''

    impl = String
    cache_ok = True
    value_class = None

    def load_dialect_impl(self, dialect):
        column_type = column_db_data_type(dialect.name)
        sql_logger.debug("{} column on {} uses {}".format(
            type(self).__name__, dialect.name, column_type or "default type"))
        if column_type:
            return dialect.type_descriptor(_sql_types[column_type]())
        return super().load_dialect_impl(dialect)

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if not isinstance(value, self.value_class):
            value = self.value_class.from_scan(value)
        return value.sql_value()

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        return self.value_class.from_scan(value)

    @property
    def python_type(self):
        return self.value_class


class SqlCalendarDate(_SqlLocalValue):
    value_class = CalendarDate

class SqlLocalTimestamp(_SqlLocalValue):
    value_class = LocalTimestamp
