# Copyright (C) 2026, Hadron Industries, Inc.
# localtypes is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.
import datetime, iso8601, json
from datetime import timezone
from .date import CalendarDate
from .timestamp import LocalTimestamp


def datetime_encoder(dt):
    if dt.tzinfo:
        dt = dt.astimezone(timezone.utc)
    return dt.isoformat()


def datetime_decoder(value):
    return iso8601.parse_date(value)


def date_encoder(d):
    return d.isoformat()


def date_decoder(value):
    return CalendarDate.parse(value).to_date()


def storage_encoder(val):
    if val is not None: return val.format()


type_map = {}

def register_type(typ, encoder, decoder):
    type_map[typ] = {'encoder': encoder,
                      'decoder': decoder}


def _lookup(typ):
    for t in getattr(typ, '__mro__', (typ,)):
        if t in type_map: return type_map[t]
    raise KeyError(typ)


def encode_value(val):
    "Encode *val* to its JSON representation using the registered encoder for its type"
    return _lookup(type(val))['encoder'](val)


def decode_value(typ, val):
    if val is None: return None
    return _lookup(typ)['decoder'](val)


class JSONEncoder(json.JSONEncoder):

    def default(self, o):
        try: return encode_value(o)
        except KeyError:
            return super().default(o)


def dumps(obj, **kwargs):
    kwargs.setdefault('cls', JSONEncoder)
    return json.dumps(obj, **kwargs)


register_type(CalendarDate, storage_encoder, CalendarDate.parse)
register_type(LocalTimestamp, storage_encoder, LocalTimestamp.parse)
register_type(datetime.datetime, datetime_encoder, datetime_decoder)
register_type(datetime.date, date_encoder, date_decoder)

__all__ = [
    'register_type',
    'encode_value',
    'decode_value',
    'dumps',
    'JSONEncoder',
    'datetime_encoder',
    'datetime_decoder',
    'date_encoder',
    'date_decoder',
    'storage_encoder',
    ]
