# Copyright (C) 2026, Hadron Industries, Inc.
# localtypes is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

from .interface import LocalValue, LocalTypesError, ParseError, UnsupportedTypeError, OutOfRangeError
from .date import CalendarDate
from .timestamp import LocalTimestamp
from .types import register_type, encode_value, decode_value, dumps
from .util import localtypes_logs_disabled
