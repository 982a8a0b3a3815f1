__all__ = [
    "InvalidArgumentError",
    "MalformedSeriesError",
    "ViewAccessError",
]


class InvalidArgumentError(TypeError):
    """
    Raised when an operation receives a value of the wrong kind, e.g. a
    primitive where a structural object is required.
    """


class MalformedSeriesError(ValueError):
    """
    Raised when an encoded series cannot be restored, e.g. because a pointer
    refers to a position outside of the series.
    """


class ViewAccessError(TypeError):
    pass
