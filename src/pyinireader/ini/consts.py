# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/10 01:15:56
# @Author : Kariko Lin

from enum import Enum
from re import IGNORECASE
from re import compile as regex
from types import MappingProxyType

MAIN_SECTION = 'main'
UNKNOWN_SOURCE = '<UNKNOWN>'
END_OF_FILE = 'END_OF_FILE'


class IniToken(str, Enum):
    COMMENT = 'COMMENT'
    WHITE_SPACE = 'WHITE_SPACE'
    INLINE_SPACE = 'INLINE_SPACE'
    SECTION_OPEN = '['
    SECTION_CLOSE = ']'
    ASSIGN = '='
    IDENTIFIER = 'IDENTIFIER'
    VALUE = 'VALUE'
    EXTENDS = 'EXTENDS'


_NAME_SEGMENT = r'[$a-zA-Z_][a-zA-Z0-9\-$_]*'

# no `^` here: patterns are applied with `Pattern.match(text, pos)`,
# which is already anchored at the cursor.
TOKEN_PATTERNS = MappingProxyType({
    IniToken.COMMENT: regex(r'#([^\r\n]*)'),
    IniToken.WHITE_SPACE: regex(r'\s+'),
    IniToken.INLINE_SPACE: regex(r'[ \t\f\v]+'),
    IniToken.SECTION_OPEN: regex(r'\['),
    IniToken.SECTION_CLOSE: regex(r'\]'),
    IniToken.ASSIGN: regex(r'='),
    # dotted namespaces, like `database.production`
    IniToken.IDENTIFIER: regex(rf'{_NAME_SEGMENT}(?:\.{_NAME_SEGMENT})*'),
    IniToken.VALUE: regex(r'[^\r\n]+'),
    IniToken.EXTENDS: regex(r'extends\s+'),
})

# canonical integers only: `0`, or no leading zero and no `+`.
INT_PATTERN = regex(r'(?:0|-?[1-9][0-9]*)')
TRUE_PATTERN = regex(r'(?:1|y|yes|on)', IGNORECASE)
FALSE_PATTERN = regex(r'(?:0|n|no|off)', IGNORECASE)

# what the value scanner turns `\x` into; anything else is kept as `x`.
ESCAPES = MappingProxyType({'n': '\n', 't': '\t', 'r': '\r'})
