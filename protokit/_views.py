from collections.abc import Mapping, MutableMapping
from typing import Any, Hashable, Iterable, Iterator, Self

from ._chain import is_structural, structural_base
from ._descriptors import own_descriptors
from ._errors import InvalidArgumentError, ViewAccessError
from ._typecheck import typecheck

__all__ = [
    "View",
    "PickView",
    "OmitView",
    "ReadOnlyView",
    "WriteOnlyView",
    "pick",
    "omit",
    "read_only",
    "write_only",
]

# slots of the view classes, never forwarded to the target
_INTERNAL = frozenset({"_target", "_selected", "_sources"})


def _has(target: Any, key: Hashable) -> bool:
    if isinstance(target, Mapping):
        return key in target

    if isinstance(target, list):
        return isinstance(key, int) and 0 <= key < len(target)

    return isinstance(key, str) and hasattr(target, key)


def _get(target: Any, key: Hashable) -> Any:
    if not _has(target, key):
        raise KeyError(key)

    if isinstance(target, (Mapping, list)):
        return target[key]

    return getattr(target, key)


def _set(target: Any, key: Hashable, value: Any) -> None:
    if isinstance(target, (Mapping, list)):
        target[key] = value
        return

    setattr(target, key, value)


def _delete(target: Any, key: Hashable) -> None:
    if not _has(target, key):
        raise KeyError(key)

    if isinstance(target, (Mapping, list)):
        del target[key]
        return

    delattr(target, key)


def _own_keys(target: Any) -> list[Hashable]:
    return list(own_descriptors(target))


@structural_base
class View(MutableMapping):
    """
    Mutable mapping that forwards to a structural target object.

    Mappings and lists are accessed by item, all other objects by attribute.
    The view itself supports both item and attribute access. Subclasses
    restrict access by overriding the `_readable` and `_writable` predicates.
    """

    __slots__ = ("_target",)

    def __init__(self: Self, target: Any) -> None:
        if not is_structural(target):
            error = f"Cannot view `{type(target).__name__}`, not structural"
            raise InvalidArgumentError(error)

        object.__setattr__(self, "_target", target)

    def _readable(self: Self, key: Hashable) -> bool:
        return True

    def _writable(self: Self, key: Hashable) -> bool:
        return True

    def _source(self: Self, key: Hashable) -> Any:
        return self._target

    def _keys(self: Self) -> list[Hashable]:
        return _own_keys(self._target)

    def __getitem__(self: Self, key: Hashable) -> Any:
        if not self._readable(key):
            raise KeyError(key)

        return _get(self._source(key), key)

    def __setitem__(self: Self, key: Hashable, value: Any) -> None:
        if not self._writable(key):
            error = f"Property {key!r} cannot be set through this view"
            raise ViewAccessError(error)

        _set(self._source(key), key, value)

    def __delitem__(self: Self, key: Hashable) -> None:
        if not self._writable(key):
            error = f"Property {key!r} cannot be deleted through this view"
            raise ViewAccessError(error)

        _delete(self._source(key), key)

    def __contains__(self: Self, key: object) -> bool:
        return self._readable(key) and _has(self._source(key), key)

    def __iter__(self: Self) -> Iterator[Hashable]:
        return (key for key in self._keys() if self._readable(key))

    def __len__(self: Self) -> int:
        return sum(1 for _ in self)

    def __getattr__(self: Self, name: str) -> Any:
        if name in _INTERNAL or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)

        try:
            return self[name]
        except KeyError:
            error = f"{type(self).__name__!r} object has no attribute {name!r}"
            raise AttributeError(error) from None

    def __setattr__(self: Self, name: str, value: Any) -> None:
        self[name] = value

    def __delattr__(self: Self, name: str) -> None:
        try:
            del self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __repr__(self: Self) -> str:
        return f"{self.__class__.__name__}({dict(self.items())!r})"


@structural_base
class _SelectView(View):
    __slots__ = ("_selected",)

    def __init__(
        self: Self,
        target: Any,
        keys: Iterable[Hashable] | None = None,
    ) -> None:
        super().__init__(target)

        selected = None if keys is None else frozenset(keys)
        object.__setattr__(self, "_selected", selected)

    def _selects(self: Self, key: Hashable) -> bool:
        # no explicit selection means all keys
        return self._selected is None or key in self._selected


@structural_base
class PickView(_SelectView):
    """
    Only the selected keys can be read, written, deleted or listed.
    """

    __slots__ = ()

    def _readable(self: Self, key: Hashable) -> bool:
        return self._selects(key)

    def _writable(self: Self, key: Hashable) -> bool:
        return self._selects(key)


@structural_base
class OmitView(_SelectView):
    """
    Everything but the selected keys can be read, written, deleted or listed.
    """

    __slots__ = ()

    def _readable(self: Self, key: Hashable) -> bool:
        return not self._selects(key)

    def _writable(self: Self, key: Hashable) -> bool:
        return not self._selects(key)


@structural_base
class ReadOnlyView(_SelectView):
    __slots__ = ()

    def _writable(self: Self, key: Hashable) -> bool:
        return not self._selects(key)


@structural_base
class WriteOnlyView(_SelectView):
    __slots__ = ()

    def _readable(self: Self, key: Hashable) -> bool:
        return not self._selects(key)


@typecheck
def pick(obj: Any, keys: Iterable[Hashable]) -> PickView:
    """
    View of an object restricted to the given keys.
    """
    return PickView(obj, keys)


@typecheck
def omit(obj: Any, keys: Iterable[Hashable]) -> OmitView:
    """
    View of an object without the given keys.
    """
    return OmitView(obj, keys)


@typecheck
def read_only(obj: Any, keys: Iterable[Hashable] | None = None) -> ReadOnlyView:
    """
    View of an object that rejects writes and deletes of the given keys, or
    of all keys if none are given.
    """
    return ReadOnlyView(obj, keys)


@typecheck
def write_only(
    obj: Any,
    keys: Iterable[Hashable] | None = None,
) -> WriteOnlyView:
    """
    View of an object that hides the given keys, or all keys if none are
    given, from reading while still accepting writes and deletes.
    """
    return WriteOnlyView(obj, keys)
