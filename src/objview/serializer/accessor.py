# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Property discovery and visibility-checked get/set on arbitrary objects.

Properties are the declared fields of a value's class:

1. Dataclass fields, in declaration order.
2. Otherwise class annotations across the MRO (base classes first,
   ``ClassVar`` excluded), followed by instance attributes and ``__slots__``
   not already listed.
3. When none of those yield a name, as for a bare instance of a class that
   assigns its attributes in ``__init__``, the constructor's parameter names.

A name starting with an underscore is private. Private properties are read
through a public ``get_<name>``, ``is_<name>`` or ``has_<name>`` method and
written through ``set_<name>``; when none exists the access raises
:class:`~objview.kernel.exceptions.PrivatePropertyException`.
"""

from __future__ import annotations

import dataclasses
import inspect
from dataclasses import dataclass
from typing import Any, ClassVar, get_origin

from objview.kernel.exceptions import PrivatePropertyException

_READ_PREFIXES = ("get_", "is_", "has_")
_WRITE_PREFIX = "set_"


@dataclass(frozen=True)
class PropertyDescriptor:
    """A discovered property of an object."""

    name: str

    def get_name(self) -> str:
        return self.name

    @property
    def is_private(self) -> bool:
        return self.name.startswith("_")


class PropertyAccessor:
    """Lists, reads and writes the properties of one target object.

    Usage::

        accessor = PropertyAccessor(user)
        for prop in accessor.get_properties():
            value = accessor.get(prop.name, user)
    """

    def __init__(self, target: Any) -> None:
        self._target = target
        self._cls = target if isinstance(target, type) else type(target)

    def class_name(self) -> str:
        return self._cls.__qualname__

    def get_properties(self) -> list[PropertyDescriptor]:
        """Return the target's properties in discovery order."""
        return [PropertyDescriptor(name) for name in _discover(self._cls, self._target)]

    def has_method(self, name: str) -> bool:
        attr = inspect.getattr_static(self._cls, name, None)
        return attr is not None and (callable(attr) or isinstance(attr, (staticmethod, classmethod, property)))

    def is_public(self, name: str) -> bool:
        return not name.startswith("_")

    def invoke(self, name: str, target: Any) -> Any:
        """Call zero-argument method ``name`` on ``target``; properties are read."""
        if isinstance(inspect.getattr_static(self._cls, name, None), property):
            return getattr(target, name)
        return getattr(target, name)()

    def get(self, name: str, target: Any) -> Any:
        """Read property ``name``, directly or through a public getter."""
        if self.is_public(name):
            return getattr(target, name, None)

        accessor = self._find_method(name, _READ_PREFIXES)
        if accessor is None:
            raise PrivatePropertyException(name, self.class_name())
        return getattr(target, accessor)()

    def set(self, name: str, target: Any, value: Any) -> None:
        """Write property ``name``, directly or through a public setter."""
        if self.is_public(name):
            setattr(target, name, value)
            return

        mutator = self._find_method(name, (_WRITE_PREFIX,))
        if mutator is None:
            raise PrivatePropertyException(name, self.class_name())
        getattr(target, mutator)(value)

    def _find_method(self, name: str, prefixes: tuple[str, ...]) -> str | None:
        base = name.lstrip("_")
        for prefix in prefixes:
            candidate = f"{prefix}{base}"
            attr = inspect.getattr_static(self._cls, candidate, None)
            if attr is not None and callable(attr):
                return candidate
        return None


def _discover(cls: type, target: Any) -> list[str]:
    if dataclasses.is_dataclass(cls):
        names = [f.name for f in dataclasses.fields(cls)]
    else:
        names = []
        for klass in reversed(cls.__mro__):
            if klass is object:
                continue
            for name, annotation in inspect.get_annotations(klass).items():
                if name not in names and not _is_class_var(annotation):
                    names.append(name)

    if not isinstance(target, type):
        for name in getattr(target, "__dict__", {}):
            if name not in names:
                names.append(name)

    for klass in reversed(cls.__mro__):
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in names and name not in ("__dict__", "__weakref__"):
                names.append(name)

    if not names:
        names = _init_parameters(cls)

    return names


def _init_parameters(cls: type) -> list[str]:
    if cls.__init__ is object.__init__:
        return []
    try:
        parameters = inspect.signature(cls).parameters.values()
    except (TypeError, ValueError):
        return []
    return [p.name for p in parameters if p.kind in (p.POSITIONAL_OR_KEYWORD, p.KEYWORD_ONLY)]


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or get_origin(annotation) is ClassVar
