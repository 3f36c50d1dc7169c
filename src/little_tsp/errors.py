from __future__ import annotations


class NotAvailableError(LookupError):
    """
    Raised when a row or column is addressed by an original vertex index that
    has no counterpart in the condensed matrix.

    A vertex disappears from the condensed matrix once an included edge fixes
    it as a departure (row) or an arrival (column). Addressing it afterwards is
    a mistake in the caller, so this error is never handled inside the package.
    """


class InfeasibleSubproblemError(AssertionError):
    """
    Raised when reduction finds a row or column whose every cell is infinite.

    Such a vertex has no available outgoing (or incoming) edge, which means the
    include/exclude sets the matrix was built from contradict each other.
    """
