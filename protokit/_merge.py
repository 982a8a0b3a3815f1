from typing import Any, Hashable, Self

from ._chain import is_structural, structural_base
from ._errors import InvalidArgumentError
from ._typecheck import typecheck
from ._views import View, _has, _own_keys

__all__ = [
    "MergeView",
    "merge",
]


@structural_base
class MergeView(View):
    """
    Mutable mapping over an ordered list of source objects.

    Every key is routed to the first source that declares it. Keys no source
    declares are written to the first source. Merging a `MergeView` again
    adds its sources rather than the view itself.
    """

    __slots__ = ("_sources",)

    def __init__(self: Self, *sources: Any) -> None:
        if not sources:
            raise InvalidArgumentError("Cannot merge zero objects")

        flat = []

        for source in sources:
            if isinstance(source, MergeView):
                flat.extend(source._sources)
                continue

            if not is_structural(source):
                error = f"Cannot merge `{type(source).__name__}`, not structural"
                raise InvalidArgumentError(error)

            flat.append(source)

        super().__init__(flat[0])
        object.__setattr__(self, "_sources", tuple(flat))

    def _source(self: Self, key: Hashable) -> Any:
        for source in self._sources:
            if _has(source, key):
                return source

        return self._sources[0]

    def _keys(self: Self) -> list[Hashable]:
        keys = {}

        for source in self._sources:
            for key in _own_keys(source):
                keys.setdefault(key, None)

        return list(keys)

    def __contains__(self: Self, key: object) -> bool:
        return any(_has(source, key) for source in self._sources)


@typecheck
def merge(*objs: Any) -> MergeView:
    """
    Merge objects into a single view, earlier objects take precedence.

    Parameters
    ---
    *objs: Any
        Structural objects, mappings or attribute objects.

    Returns
    ---
    MergeView
        View that reads every key from the first object declaring it.
    """
    return MergeView(*objs)
