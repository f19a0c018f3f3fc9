"""
The MIT License (MIT)

Copyright (c) 2015-present Rapptz

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
DEALINGS IN THE SOFTWARE.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterator, Optional, Type, Union

from loguru import logger

__all__ = ('MISSING', 'setup_logging')


class _MissingSentinel:
    __slots__ = ()

    def __eq__(self, other) -> bool:
        return False

    def __bool__(self) -> bool:
        return False

    def __hash__(self) -> int:
        return 0

    def __repr__(self):
        return '...'


MISSING: Any = _MissingSentinel()


def get_slots(cls: Type[Any]) -> Iterator[str]:
    for mro in reversed(cls.__mro__):
        try:
            yield from mro.__slots__
        except AttributeError:
            continue


def _get_as_snowflake(data: Any, key: str) -> Optional[int]:
    try:
        value = data[key]
    except KeyError:
        return None
    else:
        return int(value) if value else None


def _to_json(obj: Any) -> str:
    return json.dumps(obj, separators=(',', ':'), ensure_ascii=True)


def _from_json(data: Union[str, bytes, bytearray]) -> Any:
    return json.loads(data)


class _InterceptHandler(logging.Handler):
    """Forwards standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding loguru level if it exists
        try:
            level: Union[str, int] = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller the record originated from
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(
    *,
    level: int = logging.INFO,
    sink: Any = MISSING,
    root: bool = False,
) -> logging.Handler:
    """A helper function to route the library's logging through loguru.

    The library itself only ever logs through the standard :mod:`logging`
    module and never installs handlers on its own. This installs a handler
    that forwards those records to :data:`loguru.logger`.

    Parameters
    -----------
    level: :class:`int`
        The default log level for the library's logger.
    sink: Any
        An optional loguru sink to add. If not given then loguru's
        existing sinks are used as-is.
    root: :class:`bool`
        Whether to install the handler on the root logger rather
        than the library's logger.

    Returns
    --------
    :class:`logging.Handler`
        The handler that was installed.
    """

    handler = _InterceptHandler()
    library, _, _ = __name__.partition('.')
    target = logging.getLogger() if root else logging.getLogger(library)

    if sink is not MISSING:
        logger.add(sink, level=logging.getLevelName(level))

    target.setLevel(level)
    target.addHandler(handler)
    return handler
