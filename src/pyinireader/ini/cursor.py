# -*- encoding: utf-8 -*-
# @File   : cursor.py
# @Time   : 2024/10/10 01:02:17
# @Author : Kariko Lin

"""Text position bookkeeping for the INI grammar.

The buffer never looks at the grammar: it only knows what has been
read, what is left, and which line the cursor is on.
"""

from re import Match, Pattern
from re import compile as regex

from ..abstract import TextCursor
from .consts import END_OF_FILE, UNKNOWN_SOURCE

_NEXT_TOKEN = regex(r'\s*\S+')


class CursorBuffer(TextCursor):
    """把一整段文本拆成“已读”和“未读”两部分的游标。

    `\\r\\n` 算一次换行，单独的 `\\r` 或 `\\n` 也各算一次。
    """

    def __init__(self, buffer: str, source: str | None = None) -> None:
        if not isinstance(buffer, str):
            raise TypeError(
                f'String expected, got {type(buffer).__name__}.')
        self.__text = buffer
        self.__pos = 0
        self.__line = 1
        self.__source = UNKNOWN_SOURCE
        self.source = source

    @property
    def consumed(self) -> str:
        return self.__text[:self.__pos]

    @property
    def remaining(self) -> str:
        return self.__text[self.__pos:]

    @property
    def line(self) -> int:
        return self.__line

    @property
    def source(self) -> str:
        """Diagnostic label only; has nothing to do with the filesystem."""
        return self.__source

    @source.setter
    def source(self, name: str | None) -> None:
        self.__source = (
            name if isinstance(name, str) and name else UNKNOWN_SOURCE)

    def consume(self, count: int) -> None:
        """Mark up to `count` characters as read, clamped to what is left."""
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(
                f'Invalid argument: int expected, got {count!r}.')
        if count < 0:
            raise ValueError(f'Invalid argument: {count} < 0.')

        end = min(self.__pos + count, len(self.__text))
        chunk = self.__text[self.__pos:end]
        if not chunk:
            return

        lone_cr = chunk.count('\r') - chunk.count('\r\n')
        # a CRLF split by two consume() calls is still one newline.
        if chunk[-1] == '\r' and self.__text.startswith('\n', end):
            lone_cr -= 1
        self.__line += chunk.count('\n') + lone_cr
        self.__pos = end

    def tell(self) -> int:
        return self.__pos

    def available(self) -> int:
        return len(self.__text) - self.__pos

    def eof(self) -> bool:
        return self.__pos >= len(self.__text)

    def can_read_string(self, literal: str) -> bool:
        return (isinstance(literal, str)
                and self.__text.startswith(literal, self.__pos))

    def can_read_expression(
        self, pattern: str | Pattern[str]
    ) -> Match[str] | None:
        """Try `pattern` at the cursor position.

        Returns the match (whose `group(0)` is the matched span),
        or `None` when the remaining text does not start with it.
        """
        if isinstance(pattern, str):
            pattern = regex(pattern)
        return pattern.match(self.__text, self.__pos)

    def next_token(self) -> str:
        """A rough look at what comes next, for error messages only."""
        if self.eof():
            return END_OF_FILE
        m = _NEXT_TOKEN.match(self.__text, self.__pos)
        return '' if m is None else m.group(0)

    def __str__(self) -> str:
        return self.remaining

    def __repr__(self) -> str:
        return '<CursorBuffer %s:%d @%d/%d>' % (
            self.__source, self.__line, self.__pos, len(self.__text))
