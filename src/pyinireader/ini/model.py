# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
INI structure with `extends` inheritance.

Inheritance here is a one-time snapshot: `[B extends A]` copies what
`A` has *at that point*, later changes to `A` never reach `B`.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Iterator, overload
from warnings import warn

from .consts import FALSE_PATTERN, INT_PATTERN, TRUE_PATTERN


def parse_int(value: str | None, default: int) -> int:
    """`value` as int if it is a canonical integer, else `default`."""
    if value is None or not INT_PATTERN.fullmatch(value):
        return default
    return int(value)


def parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    if TRUE_PATTERN.fullmatch(value):
        return True
    if FALSE_PATTERN.fullmatch(value):
        return False
    return default


def _check_name(what: str, name: object) -> None:
    if not isinstance(name, str):
        raise TypeError(f'Invalid argument {what}: string expected!')
    if not name:
        raise ValueError(f'Invalid argument {what}: non-empty string expected!')


@dataclass(kw_only=True)
class IniProperty:
    name: str
    value: str


class IniSection(Sequence[IniProperty]):
    """INI 小节。

    按出现顺序保存键值对；允许重名时同名键会出现多次。
    `in` 判断的是*键名*，不是 `IniProperty` 对象。
    """

    def __init__(
        self, section_name: str, /,
        pairs: Sequence[IniProperty] = ()
    ) -> None:
        self._name = section_name
        # own copies, so that in-place overwrites never leak across sections.
        self._data: list[IniProperty] = [replace(i) for i in pairs]

    @property
    def name(self) -> str:
        return self._name

    @overload
    def __getitem__(self, index: int) -> IniProperty: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[IniProperty]: ...

    def __getitem__(self, index):
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[IniProperty]:
        return iter(self._data)

    def __contains__(self, key: object) -> bool:
        return any(i.name == key for i in self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def add(self, key: str, value: str, allow_duplicates: bool = False) -> None:
        if not allow_duplicates:
            for i in self._data:
                if i.name == key:
                    i.value = value
                    return
        self._data.append(IniProperty(name=key, value=value))

    def get(self, key: str, default: str | None = None) -> str | None:
        """First value of `key` by insertion order."""
        for i in self._data:
            if i.name == key:
                return i.value
        return default

    def getall(self, key: str) -> list[str]:
        return [i.value for i in self._data if i.name == key]

    def keys(self) -> list[str]:
        """Property names, de-duplicated, in first-seen order."""
        return list(dict.fromkeys(i.name for i in self._data))

    def to_dict(self) -> dict[str, str]:
        ret: dict[str, str] = {}
        for i in self._data:
            ret.setdefault(i.name, i.value)
        return ret

    def copy(self, section_name: str | None = None) -> 'IniSection':
        return IniSection(
            self._name if section_name is None else section_name, self._data)


class IniDocument(Mapping[str, IniSection]):
    """INI 文档：小节名到 `IniSection` 的映射（按声明顺序）。

    Supports sections like:

        ```ini
        key = val  # before any header: goes to [main]

        [database]
        host = localhost
        [database.production extends database]
        host = 127.0.0.1
        ```

    The mapping interface is read only, mutation goes through
    `create_section()` and `add_property()`, which the parser drives.
    """

    def __init__(self) -> None:
        self.__sections: dict[str, IniSection] = {}

    def __getitem__(self, key: str) -> IniSection:
        return self.__sections[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __repr__(self) -> str:
        return 'IniDocument(%s)' % ', '.join(
            repr(i) for i in self.__sections.values())

    def section_exists(self, section: object) -> bool:
        return isinstance(section, str) and section in self.__sections

    def create_section(
        self, section: str, extends: str | None = None
    ) -> IniSection:
        """(Re)declare `section`, optionally as a copy of `extends`.

        Note: re-declaring an existing section *without* `extends`
        resets it to empty. An unknown `extends` only gets warned.
        """
        _check_name('section', section)
        if section in self.__sections:
            logging.debug(f'Section [{section}] re-declared, old pairs dropped.')
        if extends is not None and extends not in self.__sections:
            warn(f'[{section}] extends "{extends}", '
                 'but it is not declared before. Created as empty.')
        parent = self.__sections.get(extends) if extends is not None else None
        self.__sections[section] = (
            IniSection(section) if parent is None else parent.copy(section))
        return self.__sections[section]

    def add_property(
        self, section: str, key: str, value: str,
        allow_duplicates: bool = False
    ) -> None:
        """Add `key = value` to `section`, declaring it if needed.

        Without `allow_duplicates`, an existing `key` is overwritten
        where it stands instead of being appended.
        """
        _check_name('section', section)
        _check_name('key', key)
        if section not in self.__sections:
            self.create_section(section)
        self.__sections[section].add(key, value, allow_duplicates)

    def get_property(
        self, section: str, key: str, default: str | None = ''
    ) -> str | None:
        if not self.section_exists(section):
            return default
        return self.__sections[section].get(key, default)

    def get_property_multi(
        self, section: str, key: str,
        default: Sequence[str] | None = None
    ) -> Sequence[str]:
        """Every value of `key` in `section`, in order."""
        if default is None:
            default = []
        if not self.section_exists(section):
            return default
        return self.__sections[section].getall(key) or default

    def get_property_int(self, section: str, key: str, default: int) -> int:
        # bool is an int subclass, but never a sane default here.
        if isinstance(default, bool) or not isinstance(default, int):
            raise TypeError('Invalid argument default: int expected!')
        return parse_int(self.get_property(section, key, None), default)

    def get_property_bool(self, section: str, key: str, default: bool) -> bool:
        if not isinstance(default, bool):
            raise TypeError('Invalid argument default: bool expected!')
        return parse_bool(self.get_property(section, key, None), default)

    def get_by_path(self, path: str) -> str:
        """`"section/key"` lookup, split on the first `/`.

        Anything malformed simply gives an empty string.
        """
        if not isinstance(path, str):
            return ''
        section, sep, key = path.partition('/')
        if not sep or not section:
            return ''
        return self.get_property(section, key, '') or ''

    def section_names(self) -> list[str]:
        return list(self.__sections)

    def section_property_names(self, section: str) -> list[str]:
        if not self.section_exists(section):
            return []
        return self.__sections[section].keys()
