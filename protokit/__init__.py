"""
Structural object manipulation: circular reference safe flattening and
restoring of object graphs, descriptor collection along class chains, and
property views.
"""

from ._chain import chain_of, is_structural, structural_base
from ._circular import decircular, encircular
from ._config import DEFAULT_CONFIG, CircularConfig
from ._descriptors import Descriptor, descriptors_of, keys_of, own_descriptors
from ._errors import InvalidArgumentError, MalformedSeriesError, ViewAccessError
from ._merge import MergeView, merge
from ._views import (
    OmitView,
    PickView,
    ReadOnlyView,
    View,
    WriteOnlyView,
    omit,
    pick,
    read_only,
    write_only,
)

__version__ = "0.1.0"

# names of the graph operations in terms of what they do to the graph
flatten = decircular
restore = encircular

__all__ = [
    "chain_of",
    "is_structural",
    "structural_base",
    "decircular",
    "encircular",
    "flatten",
    "restore",
    "CircularConfig",
    "DEFAULT_CONFIG",
    "Descriptor",
    "descriptors_of",
    "keys_of",
    "own_descriptors",
    "InvalidArgumentError",
    "MalformedSeriesError",
    "ViewAccessError",
    "MergeView",
    "merge",
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
