# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Descriptors that behave the same whether accessed through a class or through one of its instances.

>>> class Thing:
...     @classinstanceproperty
...     def label(self):
...         return "class" if isinstance(self, type) else "instance"
>>> Thing.label
'class'
>>> Thing().label
'instance'
"""

import functools

from typing import TYPE_CHECKING, Any, override


if TYPE_CHECKING:
    from collections.abc import Callable


# NOTE: We extend property so that code special-casing property descriptors (e.g. pydantic) leaves these alone
class ClassInstancePropertyDescriptor[T: Any](property):
    def __init__(self, fget: Callable[[Any], T]) -> None:
        self.getter: Any = fget

    @override
    def __get__(self, obj: Any, cls: type | None = None) -> T:  # pyright: ignore[reportIncompatibleMethodOverride]
        return self.getter(cls if obj is None else obj)

    @override
    def __set__(self, obj: Any, value: Any) -> None:
        msg = "Can't set classinstanceproperty descriptor"
        raise AttributeError(msg)

    @override
    def __delete__(self, obj: Any) -> None:
        msg = "Can't delete classinstanceproperty descriptor"
        raise AttributeError(msg)


class ClassInstanceMethodDescriptor[T: Any](property):
    def __init__(self, method: Callable[..., T]) -> None:
        self.method: Any = method

    @override
    def __get__(self, obj: Any, cls: type | None = None) -> Callable[..., T]:  # pyright: ignore[reportIncompatibleMethodOverride]
        target = cls if obj is None else obj

        @functools.wraps(self.method)
        def _wrapper(*args: Any, **kwargs: Any) -> T:
            return self.method(target, *args, **kwargs)

        return _wrapper

    @override
    def __set__(self, obj: Any, value: Any) -> None:
        msg = "Can't set classinstancemethod descriptor"
        raise AttributeError(msg)

    @override
    def __delete__(self, obj: Any) -> None:
        msg = "Can't delete classinstancemethod descriptor"
        raise AttributeError(msg)


def classinstanceproperty[T: Any](func: Callable[[Any], T]) -> ClassInstancePropertyDescriptor[T]:
    return ClassInstancePropertyDescriptor(func)


def classinstancemethod[T: Any](func: Callable[..., T]) -> ClassInstanceMethodDescriptor[T]:
    return ClassInstanceMethodDescriptor(func)
