import enum
import numbers
import types
from collections.abc import Mapping
from typing import Any

from ._errors import InvalidArgumentError
from ._typecheck import typecheck

__all__ = [
    "structural_base",
    "is_structural",
    "chain_of",
]


# Classes from these modules are shared by all plain structural objects,
# i.e. `object`, `dict`, `list`, `SimpleNamespace`, `Mapping`, `Generic`...
_BASE_MODULES = frozenset(
    {
        "builtins",
        "types",
        "abc",
        "collections.abc",
        "_collections_abc",
        "typing",
    }
)

_BASE_TYPES: set[type] = set()

# values of these types are copied as they are, subclasses included
_LEAF_TYPES = (
    str,
    bytes,
    bytearray,
    tuple,
    frozenset,
    numbers.Number,
    enum.Enum,
)


def structural_base(cls: type) -> type:
    """
    Class decorator that registers a class as part of the shared base. Its
    class namespace is never part of a chain, so instances of the class are
    treated like plain structural objects.
    """
    _BASE_TYPES.add(cls)
    return cls


def _is_base(cls: type) -> bool:
    return cls in _BASE_TYPES or cls.__module__ in _BASE_MODULES


def _has_slots(cls: type) -> bool:
    return any("__slots__" in vars(c) for c in cls.__mro__ if not _is_base(c))


@typecheck
def is_structural(value: Any) -> bool:
    """
    Check whether a value is a structural object, i.e. a node of an object
    graph rather than a leaf.

    Mappings, lists and attribute objects are structural. Classes, modules,
    callables and descriptors are leaves, just like numbers, strings, tuples
    and other immutable values.
    """
    if isinstance(value, (Mapping, list)):
        return True

    if isinstance(value, _LEAF_TYPES):
        return False

    if isinstance(value, (type, types.ModuleType)) or callable(value):
        return False

    # property, classmethod, cached_property and friends
    if hasattr(type(value), "__get__"):
        return False

    return hasattr(value, "__dict__") or _has_slots(type(value))


@typecheck
def chain_of(obj: Any, /) -> list[Any]:
    """
    Get the chain of an object: the object itself followed by its classes,
    most derived first, without the classes of the shared base.

    Parameters
    ---
    obj: Any
        Structural object to walk.

    Returns
    ---
    list[Any]
        `[obj]` for plain dictionaries, lists and namespaces, otherwise
        `[obj, type(obj), ...]` in method resolution order.
    """
    if not is_structural(obj):
        error = f"Expected a structural object, got `{type(obj).__name__}`"
        raise InvalidArgumentError(error)

    chain = [obj]

    for cls in type(obj).__mro__:
        if _is_base(cls):
            continue

        chain.append(cls)

    return chain
