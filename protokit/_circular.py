import logging
from collections.abc import Sequence
from typing import Any, Hashable

from ._chain import is_structural
from ._config import DEFAULT_CONFIG, CircularConfig
from ._descriptors import descriptors_of
from ._errors import InvalidArgumentError, MalformedSeriesError
from ._typecheck import typecheck

__all__ = [
    "decircular",
    "encircular",
]

logger = logging.getLogger(__name__)


def _store(record: dict | list, key: Hashable, value: Any) -> None:
    if isinstance(record, list):
        record.append(value)
        return

    record[key] = value


@typecheck
def decircular(
    root: Any,
    /,
    config: CircularConfig | None = None,
) -> list[dict | list]:
    """
    Flatten a possibly cyclic object graph into a list of plain records.

    Every distinct object (by identity) reachable from the root is encoded
    exactly once. Nested objects are replaced by pointers `{"o": position}`,
    where position is the index of their record in the returned list.
    Positions are assigned level by level: the root first, then all objects
    one step away from it in order of discovery, and so on.

    Accessor properties are skipped, primitive values are copied as they are.
    The graph itself is not modified.

    Parameters
    ---
    root: Any
        Structural object to start the walk from.

    config: CircularConfig, optional
        Format options, see `CircularConfig`.

    Returns
    ---
    list[dict | list]
        The records, the record of the root at position 0. Lists are encoded
        as lists, all other objects as dictionaries.
    """
    if not is_structural(root):
        error = f"Cannot flatten `{type(root).__name__}`, not structural"
        raise InvalidArgumentError(error)

    config = config or DEFAULT_CONFIG

    levels: list[list[Any]] = []
    pointers: dict[int, dict] = {}
    records: dict[int, dict | list] = {}

    # records under construction with their remaining properties
    stack = []

    def register(obj, level):
        # the position is only known after the walk, the pointer is patched then
        pointer = {config.pointer_key: -1}
        record = [] if isinstance(obj, list) else {}

        if len(levels) == level:
            levels.append([])

        levels[level].append(obj)
        pointers[id(obj)] = pointer
        records[id(obj)] = record

        items = iter(descriptors_of(obj).items())
        stack.append((record, items, level))
        return pointer

    register(root, 0)

    while stack:
        record, items, level = stack[-1]

        for key, descriptor in items:
            if descriptor.is_accessor:
                continue

            # list records only hold the items, not the class layers
            if isinstance(record, list) and not isinstance(key, int):
                continue

            value = descriptor.value

            if not is_structural(value):
                _store(record, key, value)
                continue

            if id(value) in pointers:
                _store(record, key, pointers[id(value)])
                continue

            # descend first, continue with the remaining properties afterwards
            _store(record, key, register(value, level + 1))
            break

        else:
            stack.pop()

    ordered = [obj for bucket in levels for obj in bucket]

    for position, obj in enumerate(ordered):
        pointers[id(obj)][config.pointer_key] = config.position(position)

    logger.debug(
        "Flattened %d objects over %d levels",
        len(ordered),
        len(levels),
    )
    return [records[id(obj)] for obj in ordered]


def _position(value: Any, size: int, config: CircularConfig) -> int:
    if not isinstance(value, dict) or list(value) != [config.pointer_key]:
        key = config.pointer_key
        error = f"Expected a pointer `{{{key!r}: position}}`, got {value!r}"
        raise MalformedSeriesError(error)

    position = value[config.pointer_key]

    if isinstance(position, str) and position.isdecimal():
        position = int(position)

    if isinstance(position, bool) or not isinstance(position, int):
        error = f"Invalid pointer position {position!r}"
        raise MalformedSeriesError(error)

    if not 0 <= position < size:
        error = f"Pointer position {position} out of range for {size} records"
        raise MalformedSeriesError(error)

    return position


def _entries(record: dict | list):
    if isinstance(record, list):
        return enumerate(record)

    return record.items()


@typecheck
def encircular(
    series: Sequence[Any],
    /,
    config: CircularConfig | None = None,
) -> dict | list:
    """
    Restore an object graph from its flattened records, the inverse of
    `decircular`.

    Every pointer is replaced in place by the record it points to, which
    reproduces shared references and cycles. Values that already are records
    of the series are left as they are, so restoring twice is harmless.

    The series is validated completely before the first pointer is replaced.

    Parameters
    ---
    series: Sequence[Any]
        Records as produced by `decircular`.

    config: CircularConfig, optional
        Format options, must match those used for flattening.

    Returns
    ---
    dict | list
        The restored root, i.e. the record at position 0.
    """
    if not isinstance(series, Sequence) or isinstance(series, (str, bytes)):
        error = f"Expected a sequence of records, got `{type(series).__name__}`"
        raise InvalidArgumentError(error)

    if not series:
        raise MalformedSeriesError("Cannot restore an empty series")

    config = config or DEFAULT_CONFIG

    resolved = {id(record) for record in series}
    patches = []

    for index, record in enumerate(series):
        if not isinstance(record, (dict, list)):
            error = f"Record {index} is a `{type(record).__name__}`, not a record"
            raise MalformedSeriesError(error)

        for key, value in _entries(record):
            if not isinstance(value, (dict, list)):
                continue

            if id(value) in resolved:
                continue

            position = _position(value, len(series), config)
            patches.append((record, key, series[position]))

    for record, key, target in patches:
        record[key] = target

    logger.debug(
        "Restored %d pointers in %d records",
        len(patches),
        len(series),
    )
    return series[0]
