# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/09/08 20:22:30
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from re import Match, Pattern
from typing import Generic, TypeVar

T = TypeVar('T')


class TextCursor(metaclass=ABCMeta):
    """Position bookkeeping over an immutable text.

    Implementations split the text into "consumed" and "remaining" halves;
    grammar decisions are left to whoever drives the cursor.
    """

    @abstractmethod
    def consume(self, count: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def tell(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def available(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def eof(self) -> bool:
        raise NotImplementedError

    @property
    @abstractmethod
    def line(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def can_read_string(self, literal: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def can_read_expression(self, pattern: str | Pattern[str]) -> Match[str] | None:
        raise NotImplementedError

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str) -> None:
        self._fn = filename

    # read only: nothing here is ever serialized back to disk.
    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
