#!/usr/bin/python3
# Copyright (C) 2026, Hadron Industries, Inc.
# localtypes is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3
# as published by the Free Software Foundation. It is distributed
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the file
# LICENSE for details.


from setuptools import setup

setup(
    name = "localtypes",
    license = "LGPL-3.0",
    maintainer = "Sam Hartman",
    maintainer_email = "sam.hartman@hadronindustries.com",
    url = "http://www.hadronindustries.com/",
    packages = ["localtypes", "localtypes.sql"],
    install_requires = ['SQLAlchemy>=1.4', 'iso8601'],
    extras_require = {
        'test': ['pytest'],
        },
    test_suite = "tests",
    version = "0.1",
)
