# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53
# @Author : Kariko Lin

from .consts import IniToken, MAIN_SECTION
from .cursor import CursorBuffer
from .model import IniDocument, IniProperty, IniSection
from .parser import (
    IniParser,
    IniReader,
    IniSyntaxError,
    ParseOptions,
    load,
    loads
)


# `extends` 只是声明时的一次性拷贝，不是运行时的继承链。
# 父小节之后再改什么，子小节都看不到。
