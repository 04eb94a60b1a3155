# Copyright (C) 2026, Hadron Industries, Inc.
# localtypes is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

from .columns import (
    DATA_TYPE, DIALECT_COLUMN_TYPES, DIALECT_ALIASES,
    column_data_type, column_db_data_type,
    SqlCalendarDate, SqlLocalTimestamp,
    )
from . import encoders
