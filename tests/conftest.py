# Copyright (C) 2026, Hadron Industries, Inc.
# localtypes is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.

import datetime, pytest
from datetime import timezone
from sqlalchemy import create_engine, Column, Integer
from sqlalchemy.orm import declarative_base, Session
from localtypes import util
from localtypes.sql import SqlCalendarDate, SqlLocalTimestamp

Base = declarative_base()

class Event(Base):
    __tablename__ = 'events'
    id = Column(Integer, primary_key = True)
    on_day = Column(SqlCalendarDate)
    happened_at = Column(SqlLocalTimestamp)


@pytest.fixture()
def fixed_clock(monkeypatch):
    "Pin the clock used by today() and now()"
    moment = datetime.datetime(2023, 5, 17, 10, 20, 30, 123456, tzinfo = timezone.utc)
    monkeypatch.setattr(util, 'clock', lambda: moment)
    return moment

@pytest.fixture()
def engine():
    e = create_engine('sqlite:///:memory:', echo = False)
    Base.metadata.create_all(bind = e)
    yield e
    e.dispose()

@pytest.fixture()
def session(engine):
    s = Session(bind = engine)
    yield s
    s.close()

@pytest.fixture()
def event_model():
    return Event
