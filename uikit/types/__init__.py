"""
uikit.types
~~~~~~~~~~~~

Typings for the component wire payloads

:copyright: (c) 2015-present Rapptz
:license: MIT, see LICENSE for more details.
"""
