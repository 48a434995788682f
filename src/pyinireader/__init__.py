# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2023/11/14 20:01:52
# @Author : Chloride

import logging

from .ini import (
    CursorBuffer,
    IniDocument,
    IniParser,
    IniProperty,
    IniReader,
    IniSection,
    IniSyntaxError,
    IniToken,
    ParseOptions,
    load,
    loads
)

__all__ = [
    'CursorBuffer', 'IniToken',
    'IniDocument', 'IniSection', 'IniProperty',
    'IniReader', 'IniParser', 'IniSyntaxError', 'ParseOptions',
    'load', 'loads'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
