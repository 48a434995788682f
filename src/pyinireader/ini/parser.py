# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Recursive-descent INI reader.

Supported syntax:

    ```ini
    # comment, to the end of line
    free_key = value   ; goes into [main]

    [section]
    key = first\\tline\\nsecond line  # trailing comment
    [child extends section]
    key = overridden
    ```

The reader only consumes a `str`. Getting that string out of a file
(and guessing its codec) is what `IniParser` is for.
"""

import logging
from dataclasses import dataclass
from re import Pattern
from typing import Mapping

import chardet

from ..abstract import FileHandler
from .consts import ESCAPES, MAIN_SECTION, TOKEN_PATTERNS, IniToken
from .cursor import CursorBuffer
from .model import IniDocument


class IniSyntaxError(Exception):
    """Raised when the text does not follow the INI grammar."""

    def __init__(self, expected: str, token: str, line: int, source: str):
        self.expected = expected
        self.token = token
        self.line = line
        self.source = source
        super().__init__(
            f'Unexpected token "{token}", expected {expected}, '
            f'at line {line} in file "{source}"')


@dataclass(kw_only=True)
class ParseOptions:
    allow_duplicates: bool = False
    encoding: str | None = None
    min_confidence: float = 0.8
    fallback_encoding: str = 'gbk'


class IniReader:
    """Drives a `CursorBuffer` through the INI grammar.

    One instance reads one text, once; call `parse()` to get the document.
    """

    def __init__(
        self, buffer: str, source: str | None = None, *,
        allow_duplicates: bool = False,
        tokens: Mapping[IniToken, Pattern[str]] = TOKEN_PATTERNS
    ) -> None:
        self._buf = CursorBuffer(buffer, source)
        self._tokens = tokens
        self._allow_duplicates = allow_duplicates

    @property
    def cursor(self) -> CursorBuffer:
        return self._buf

    def __pattern(self, token: IniToken | str) -> Pattern[str]:
        try:
            return self._tokens[IniToken(token)]
        except (ValueError, KeyError):
            raise ValueError(f'Invalid token {token!r}') from None

    def read(self, token: IniToken | str) -> bool:
        """Consume `token` if the text continues with it."""
        m = self._buf.can_read_expression(self.__pattern(token))
        if m is None:
            return False
        self._buf.consume(m.end() - m.start())
        return True

    def read_string(
        self, token: IniToken | str, index: int = 0
    ) -> str | None:
        """Like `read()`, but returns the text of group `index`.

        `None` means no match; a group that took no part gives `''`.
        """
        pattern = self.__pattern(token)
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError('Invalid argument index: int expected!')
        m = self._buf.can_read_expression(pattern)
        if m is None:
            return None
        self._buf.consume(m.end() - m.start())
        if not 0 <= index <= pattern.groups:
            return ''
        return m.group(index) or ''

    def read_blank(self) -> bool:
        """Skip any run of whitespace and comments.

        Returns whether anything was skipped at all.
        """
        once = False
        while self.read(IniToken.WHITE_SPACE) or self.read(IniToken.COMMENT):
            once = True
        return once

    def __unexpected(self, expected: str) -> IniSyntaxError:
        return IniSyntaxError(
            expected, self._buf.next_token(), self._buf.line, self._buf.source)

    def read_section(self) -> tuple[str, str | None]:
        """Section header, after `[`. Returns `(name, extends)`."""
        self.read_blank()
        name = self.read_string(IniToken.IDENTIFIER)
        if name is None:
            raise self.__unexpected('<section_name>')
        self.read_blank()

        extends = None
        if self.read(IniToken.EXTENDS):
            self.read_blank()
            extends = self.read_string(IniToken.IDENTIFIER)
            if extends is None:
                raise self.__unexpected('<extends_section_name>')
            self.read_blank()

        if not self.read(IniToken.SECTION_CLOSE):
            raise self.__unexpected('"]"')
        return name, extends

    def read_property(self) -> tuple[str, str]:
        self.read_blank()
        key = self.read_string(IniToken.IDENTIFIER)
        if key is None:
            raise self.__unexpected('<identifier>')
        self.read_blank()

        if not self.read(IniToken.ASSIGN):
            raise self.__unexpected('"="')
        # never past the end of line: `key =` alone has no value.
        self.read(IniToken.INLINE_SPACE)

        raw = self.read_string(IniToken.VALUE)
        if raw is None:
            raise self.__unexpected('<value>')
        return key, self.decode_value(raw)

    @staticmethod
    def decode_value(raw: str) -> str:
        """Strip trailing `;`/`#` comments and resolve `\\` escapes."""
        raw = raw.strip()
        ret: list[str] = []
        i, length = 0, len(raw)
        while i < length:
            match raw[i]:
                case ';' | '#':
                    break
                case '\\' if i + 1 < length:
                    i += 1
                    ret.append(ESCAPES.get(raw[i], raw[i]))
                case c:
                    # includes a lone trailing backslash.
                    ret.append(c)
            i += 1
        return ''.join(ret).strip()

    def parse(self) -> IniDocument:
        """Read the whole text.

        Raises `IniSyntaxError` on the first mistake; nothing read so far
        is kept in that case.
        """
        ret = IniDocument()
        section = MAIN_SECTION
        while not self._buf.eof():
            if self.read_blank():
                continue
            if self.read(IniToken.SECTION_OPEN):
                section, extends = self.read_section()
                ret.create_section(section, extends)
                continue
            key, value = self.read_property()
            ret.add_property(section, key, value, self._allow_duplicates)
        logging.debug(f'{self._buf.source}: {len(ret)} section(s) read.')
        return ret


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str, encoding: str | None = None, *,
        allow_duplicates: bool = False,
        min_confidence: float = 0.8,
        fallback_encoding: str = 'gbk'
    ) -> None:
        if not isinstance(filename, str):
            raise TypeError('Invalid argument filename: string expected!')
        if not filename:
            raise ValueError('Invalid argument filename: '
                             'non-empty string expected!')
        super().__init__(filename)
        self._options = ParseOptions(
            allow_duplicates=allow_duplicates,
            encoding=encoding,
            min_confidence=min_confidence,
            fallback_encoding=fallback_encoding)

    @property
    def options(self) -> ParseOptions:
        return self._options

    @classmethod
    def create(
        cls, filename: str, allow_duplicates: bool = False
    ) -> IniDocument:
        """Read `filename` right away."""
        return cls(filename, allow_duplicates=allow_duplicates).read()

    @staticmethod
    def readstring(
        text: str, source: str | None = None,
        allow_duplicates: bool = False
    ) -> IniDocument:
        """读取已经解码好的字符串。

        如没有特殊需求，读文件直接调用 `self.read()` 便是。
        """
        return IniReader(
            text, source, allow_duplicates=allow_duplicates).parse()

    def _decode_file(self) -> str:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        encoding = codec.get('encoding')
        if encoding is None or (codec.get('confidence') or 0) < \
                self._options.min_confidence:
            encoding = 'utf-8'
        logging.warning(f'{self._fn}: decoding as "{encoding}" instead.')

        # fallbacks
        try:
            return raw.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            logging.warning(f'{self._fn}: still undecodable, '
                            f'trying "{self._options.fallback_encoding}".')
            return raw.decode(self._options.fallback_encoding)

    def read(self) -> IniDocument:
        """读取 `IniParser` 实例指定的文件。

        Missing or unreadable files raise the `OSError` of `open()`.
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._options.encoding,
                      newline='') as fp:
                text = fp.read()
        except UnicodeDecodeError:
            text = self._decode_file()
        return self.readstring(
            text, self._fn, self._options.allow_duplicates)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f" ({self._options.encoding})"


def loads(
    text: str, source: str | None = None, *,
    allow_duplicates: bool = False
) -> IniDocument:
    return IniParser.readstring(text, source, allow_duplicates)


def load(filename: str, encoding: str | None = None, **options) -> IniDocument:
    return IniParser(filename, encoding, **options).read()
