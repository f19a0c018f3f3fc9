"""
UI Kit Components
~~~~~~~~~~~~~~~~~~

A component model and serialization layer for the Discord API.

:copyright: (c) 2015-present Rapptz
:license: MIT, see LICENSE for more details.

"""

__title__ = 'uikit'
__author__ = 'Dolfies'
__license__ = 'MIT'
__copyright__ = 'Copyright 2015-present Rapptz'
__version__ = '1.0.0a'

import logging
from typing import Literal, NamedTuple

from .builders import *
from .components import *
from .enums import *
from .errors import *
from .helpers import *
from .partial_emoji import *
from .utils import *
from .validation import *


class VersionInfo(NamedTuple):
    major: int
    minor: int
    micro: int
    releaselevel: Literal['alpha', 'beta', 'candidate', 'final']
    serial: int


version_info: VersionInfo = VersionInfo(major=1, minor=0, micro=0, releaselevel='alpha', serial=0)

logging.getLogger(__name__).addHandler(logging.NullHandler())

del logging, NamedTuple, Literal, VersionInfo
