# Copyright (C) 2026, Hadron Industries, Inc.
# localtypes is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

from sqlalchemy import Date
from ..date import CalendarDate
from ..timestamp import LocalTimestamp
from ..types import *
from .columns import SqlCalendarDate, SqlLocalTimestamp

register_type(SqlCalendarDate, storage_encoder, CalendarDate.parse)
register_type(SqlLocalTimestamp, storage_encoder, LocalTimestamp.parse)
register_type(Date, date_encoder, date_decoder)
