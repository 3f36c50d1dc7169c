from __future__ import annotations
from dataclasses import dataclass


@dataclass(slots=True)
class CostMatrixConfig:
    """
    Configuration settings for building and reducing a cost matrix.

    Attributes
    ----------
    validate_costs : bool
        If True, a negative finite cost read from the cost source raises
        `ValueError` during construction.
    verbose : bool
        If True, every row and column minimum is logged at DEBUG level and the
        reduction summary at INFO level.
    """
    validate_costs: bool = True
    verbose: bool = False
