"""
Methods callable on both a class and its instances.

``MD5.digest(data)`` is a one-shot call on the class while
``md5.digest()`` reads an instance's running state. dualmethod keeps
both under one name, like property keeps getter and setter.
"""

from __future__ import annotations

import functools
import types
from collections.abc import Callable
from typing import Any


class dualmethod:  # noqa: N801 - named like classmethod/staticmethod
    """
    Descriptor dispatching to separate class-level and instance-level functions.

    Example:
        class Digest:
            def _digest(self, data=None): ...
            digest = dualmethod(_digest)

            @digest.classlevel
            def digest(cls, data, *args): ...
    """

    def __init__(
        self,
        instance_func: Callable[..., Any],
        class_func: Callable[..., Any] | None = None,
    ) -> None:
        self.instance_func = instance_func
        self.class_func = class_func
        functools.update_wrapper(self, instance_func)

    def classlevel(self, class_func: Callable[..., Any]) -> dualmethod:
        """Return a copy of this descriptor with a class-level implementation."""
        return type(self)(self.instance_func, class_func)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            if self.class_func is None:
                return self.instance_func
            return types.MethodType(self.class_func, owner)
        return types.MethodType(self.instance_func, instance)
