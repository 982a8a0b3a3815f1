import dataclasses
import inspect
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Hashable, Self

from ._chain import chain_of
from ._typecheck import typecheck

__all__ = [
    "Descriptor",
    "own_descriptors",
    "descriptors_of",
    "keys_of",
]


@typecheck
@dataclasses.dataclass(frozen=True)
class Descriptor:
    """
    Describes a single property of an object.

    A data descriptor stores its `value` directly. An accessor descriptor
    computes the value on read via its `getter` and has no stored value.
    """

    value: Any = None
    getter: Callable[..., Any] | None = None
    setter: Callable[..., Any] | None = None
    writable: bool = True
    enumerable: bool = True
    configurable: bool = True

    @property
    def is_accessor(self: Self) -> bool:
        return self.getter is not None or self.setter is not None


# bookkeeping that `abc` and `typing` store in the namespace of user classes
_CLASS_METADATA = frozenset(
    {
        "_abc_impl",
        "_is_protocol",
        "_is_runtime_protocol",
    }
)


def _is_constructor_key(key: Hashable) -> bool:
    # dunder names describe the class itself, not data of its instances
    if not isinstance(key, str):
        return False

    if key in _CLASS_METADATA:
        return True

    return key.startswith("__") and key.endswith("__")


def _is_frozen(obj: Any) -> bool:
    params = getattr(type(obj), "__dataclass_params__", None)
    return params is not None and params.frozen


def _slot_names(cls: type) -> list[str]:
    names = []

    for base in reversed(cls.__mro__):
        slots = vars(base).get("__slots__", ())

        if isinstance(slots, str):
            slots = (slots,)

        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue

            # private slots are stored under their mangled names
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{base.__name__.lstrip('_')}{name}"

            names.append(name)

    return names


def _class_descriptors(cls: type) -> dict[Hashable, Descriptor]:
    descriptors = {}

    for key, value in vars(cls).items():
        if inspect.isdatadescriptor(value):
            descriptors[key] = Descriptor(
                getter=value.__get__,
                setter=getattr(value, "__set__", None),
                writable=False,
                enumerable=False,
            )
            continue

        descriptors[key] = Descriptor(value=value, enumerable=False)

    return descriptors


def _instance_descriptors(obj: Any) -> dict[Hashable, Descriptor]:
    writable = not _is_frozen(obj)
    descriptors = {}

    for key, value in getattr(obj, "__dict__", {}).items():
        descriptors[key] = Descriptor(value=value, writable=writable)

    for name in _slot_names(type(obj)):
        # unset slots hold no data
        if not hasattr(obj, name):
            continue

        descriptors[name] = Descriptor(
            value=getattr(obj, name),
            writable=writable,
        )

    return descriptors


@typecheck
def own_descriptors(layer: Any, /) -> dict[Hashable, Descriptor]:
    """
    Get the descriptors of the properties a single layer of a chain declares
    itself, in declaration order.

    Parameters
    ---
    layer: Any
        A class, a mapping, a list or an attribute object.

    Returns
    ---
    dict[Hashable, Descriptor]
        Descriptors keyed by attribute name, mapping key or list index.
    """
    if isinstance(layer, type):
        return _class_descriptors(layer)

    if isinstance(layer, Mapping):
        mutable = isinstance(layer, MutableMapping)
        return {
            key: Descriptor(
                value=layer[key],
                writable=mutable,
                configurable=mutable,
            )
            for key in layer
        }

    if isinstance(layer, list):
        return {i: Descriptor(value=value) for i, value in enumerate(layer)}

    return _instance_descriptors(layer)


@typecheck
def descriptors_of(obj: Any, /) -> dict[Hashable, Descriptor]:
    """
    Merge the descriptors of all layers in the chain of an object into one
    flat mapping.

    Layers are merged from the base-most class to the object itself, so the
    most derived declaration of a key wins. A key keeps the position of its
    first declaration. If the chain has more than one layer, the dunder keys
    describing the classes are removed.

    Parameters
    ---
    obj: Any
        Structural object to describe.

    Returns
    ---
    dict[Hashable, Descriptor]
        The effective descriptor of every property of the object.
    """
    chain = chain_of(obj)

    if len(chain) == 1:
        return own_descriptors(obj)

    descriptors = {}

    for layer in reversed(chain):
        descriptors.update(own_descriptors(layer))

    for key in [k for k in descriptors if _is_constructor_key(k)]:
        del descriptors[key]

    return descriptors


@typecheck
def keys_of(obj: Any, /) -> list[Hashable]:
    """
    Get every key visible through the chain of an object, most derived layer
    first and without duplicates.
    """
    chain = chain_of(obj)

    if len(chain) == 1:
        return list(own_descriptors(obj))

    keys = {}

    for layer in chain:
        for key in own_descriptors(layer):
            if _is_constructor_key(key):
                continue

            keys.setdefault(key, None)

    return list(keys)
