import beartype

__all__ = ["typecheck"]

# hint violations in the public functions and records of protokit only warn,
# invalid graphs and series are reported through the errors in `_errors`
typecheck = beartype.beartype(
    conf=beartype.BeartypeConf(violation_type=UserWarning),
)

typecheck.__doc__ = """
Check the arguments and return value of a protokit function against its type
hints, warning with `UserWarning` on a mismatch.
"""
