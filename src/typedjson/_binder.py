"""
Binding parsed members onto instances of caller-supplied classes.

Reflector answers questions about a class (constructor parameters, declared
field types) and performs construction and raw field assignment.
ObjectFactory runs the binding algorithm on top of it.
"""

import dataclasses
import inspect
import types
from collections.abc import Mapping
from enum import Enum
from typing import Any
from typing import ClassVar
from typing import Union
from typing import get_args
from typing import get_origin
from typing import get_type_hints

from ._config import logger
from ._errors import BindingError
from ._errors import ConstructionNotAllowedError
from ._profile import ProfileContext

_UNBOUND_KINDS = frozenset(
    {inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD}
)
_NON_REFLECTABLE_MODULES = frozenset({"builtins", "typing"})


def _is_class_var(hint: Any) -> bool:
    return hint is ClassVar or get_origin(hint) is ClassVar


class Reflector:
    """
    Type introspection over plain classes, dataclasses and slotted classes.

    Results are cached per class, so one Reflector can be shared across
    parses. Subclass it to change how a class is described or built.
    """

    def __init__(self) -> None:
        self._hints: dict[Any, dict[str, Any]] = {}
        self._parameters: dict[type, list[inspect.Parameter]] = {}
        self._fields: dict[type, list[str]] = {}
        self._constructible: dict[type, bool] = {}

    def normalize(self, tp: Any) -> Any:
        """Unwraps ``X | None`` to ``X``; other types pass through."""
        if get_origin(tp) in (Union, types.UnionType):
            args = [arg for arg in get_args(tp) if arg is not type(None)]
            if len(args) == 1:
                return self.normalize(args[0])
        return tp

    def is_reflectable(self, tp: Any) -> bool:
        """
        True for classes that can be built from a JSON object, and for
        ``list[X]`` where X is itself reflectable.
        """
        tp = self.normalize(tp)
        if get_origin(tp) is list:
            args = get_args(tp)
            return len(args) == 1 and self.is_reflectable(args[0])
        return (
            isinstance(tp, type)
            and tp.__module__ not in _NON_REFLECTABLE_MODULES
            and not issubclass(tp, Enum)
            and self.is_constructible(tp)
        )

    def is_constructible(self, cls: type) -> bool:
        """
        False for abstract classes, protocols and classes whose constructor
        signature cannot be read, such as C-implemented types.
        """
        if cls in self._constructible:
            return self._constructible[cls]
        constructible = self.is_constructor_public(cls)
        if constructible:
            try:
                self.constructor_parameters(cls)
            except (ValueError, TypeError) as e:
                logger.debug("No usable constructor for %r: %s", cls, e)
                constructible = False
        self._constructible[cls] = constructible
        return constructible

    def element_type(self, tp: Any) -> Any:
        """Type of each element when ``tp`` meets a JSON array."""
        if get_origin(tp) is list:
            args = get_args(tp)
            return self.normalize(args[0]) if args else None
        return tp

    def type_hints(self, obj: Any) -> dict[str, Any]:
        """Resolved annotations of a class or function, cached."""
        if obj in self._hints:
            return self._hints[obj]
        try:
            hints = get_type_hints(obj)
        except (NameError, TypeError) as e:
            # Unresolvable forward references stay as strings, which are
            # never reflectable.
            logger.debug("Could not resolve type hints of %r: %s", obj, e)
            hints = {}
            for owner in reversed(getattr(obj, "__mro__", (obj,))):
                hints.update(inspect.get_annotations(owner))
        self._hints[obj] = hints
        return hints

    def has_constructor(self, cls: type) -> bool:
        return not (
            cls.__init__ is object.__init__ and cls.__new__ is object.__new__
        )

    def is_constructor_public(self, cls: type) -> bool:
        """Abstract classes and protocols cannot be built from JSON."""
        return not (
            inspect.isabstract(cls) or getattr(cls, "_is_protocol", False)
        )

    def constructor_parameters(self, cls: type) -> list[inspect.Parameter]:
        """Parameters of the class constructor in declaration order."""
        if cls in self._parameters:
            return self._parameters[cls]
        if not self.has_constructor(cls):
            parameters: list[inspect.Parameter] = []
        else:
            try:
                signature = inspect.signature(cls, eval_str=True)
            except NameError as e:
                logger.debug("Could not resolve constructor of %r: %s", cls, e)
                signature = inspect.signature(cls)
            parameters = list(signature.parameters.values())
        self._parameters[cls] = parameters
        return parameters

    def constructor_parameter_type(self, cls: type, name: str) -> Any:
        for parameter in self.constructor_parameters(cls):
            if parameter.name == name and parameter.kind not in _UNBOUND_KINDS:
                if parameter.annotation is inspect.Parameter.empty:
                    return None
                return parameter.annotation
        return None

    def field_type(self, cls: type, name: str) -> Any:
        """Declared type of an annotated attribute or a property."""
        hint = self.type_hints(cls).get(name)
        if hint is not None and not _is_class_var(hint):
            return hint
        attribute = inspect.getattr_static(cls, name, None)
        if isinstance(attribute, property) and attribute.fget is not None:
            return self.type_hints(attribute.fget).get("return")
        return None

    def declared_type(self, cls: type, name: str) -> Any:
        """
        Type to parse the member ``name`` of ``cls`` with, or None.

        Constructor parameters are consulted first, then fields and
        properties. Only reflectable types count; anything else means the
        member is parsed as plain JSON.
        """
        for tp in (
            self.constructor_parameter_type(cls, name),
            self.field_type(cls, name),
        ):
            if tp is not None and self.is_reflectable(tp):
                return self.normalize(tp)
        return None

    def instance_fields(self, cls: type) -> list[str]:
        """Names of declared instance fields, in declaration order."""
        if cls in self._fields:
            return self._fields[cls]
        names: dict[str, None] = {}
        if dataclasses.is_dataclass(cls):
            names.update(dict.fromkeys(f.name for f in dataclasses.fields(cls)))
        for name, hint in self.type_hints(cls).items():
            if not _is_class_var(hint) and not isinstance(
                hint, dataclasses.InitVar
            ):
                names[name] = None
        for owner in cls.__mro__:
            slots = owner.__dict__.get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            names.update(
                dict.fromkeys(s for s in slots if not s.startswith("__"))
            )
        self._fields[cls] = list(names)
        return self._fields[cls]

    def construct(self, cls: type, arguments: Mapping[str, Any]) -> Any:
        """
        Calls the constructor; positional-only parameters go by position.

        An absent positional-only parameter followed by a supplied one is
        passed its default so later arguments keep their slots.
        """
        positional: list[inspect.Parameter] = []
        kwargs: dict[str, Any] = {}
        for parameter in self.constructor_parameters(cls):
            if parameter.kind is inspect.Parameter.POSITIONAL_ONLY:
                positional.append(parameter)
            elif parameter.name in arguments:
                kwargs[parameter.name] = arguments[parameter.name]

        while positional and positional[-1].name not in arguments:
            positional.pop()
        args = [
            arguments.get(parameter.name, parameter.default)
            for parameter in positional
        ]
        return cls(*args, **kwargs)

    def assign_field(self, instance: Any, name: str, value: Any) -> None:
        """Sets a field without going through the class's __setattr__."""
        object.__setattr__(instance, name, value)


class ObjectFactory:
    """
    Builds instances of a class from a mapping of member name to value.

    Constructor parameters are bound first, by name and in declaration
    order; members left over are assigned to declared fields of the same
    name. Members matching neither are dropped.
    """

    def __init__(self, reflector: Reflector | None = None):
        self.reflector = reflector if reflector is not None else Reflector()

    def create[T](self, cls: type[T], members: Mapping[str, Any]) -> T:
        with ProfileContext("create", len(members)):
            remaining = dict(members)
            instance = self._construct(cls, remaining)
            if not remaining:
                return instance

            for name in self.reflector.instance_fields(cls):
                if name in remaining:
                    self.reflector.assign_field(
                        instance, name, remaining.pop(name)
                    )
            if remaining:
                logger.debug(
                    "Dropping members %s with no field on %s",
                    ", ".join(remaining),
                    cls.__name__,
                )
            return instance

    def _construct[T](self, cls: type[T], members: dict[str, Any]) -> T:
        """Binds constructor arguments, removing them from ``members``."""
        reflector = self.reflector
        if not reflector.is_constructor_public(cls):
            raise ConstructionNotAllowedError(cls.__name__)

        supplied = list(members)
        arguments: dict[str, Any] = {}
        for parameter in reflector.constructor_parameters(cls):
            if parameter.kind in _UNBOUND_KINDS:
                continue
            name = parameter.name
            if name in members:
                arguments[name] = members.pop(name)
            elif parameter.default is inspect.Parameter.empty:
                raise BindingError(cls.__name__, name, supplied)
        return reflector.construct(cls, arguments)

