from __future__ import annotations
from dataclasses import dataclass
from typing import Final, Sequence, Tuple

from little_tsp.errors import NotAvailableError

# Forward-map entry for an original index that has no condensed counterpart.
UNAVAILABLE: Final[int] = -1


@dataclass(frozen=True, slots=True)
class CondensedIndexMap:
    """
    Bidirectional mapping between original vertex indices and the compacted
    row (or column) indices of a condensed matrix.

    Both directions are dense tuples: `forward[i]` is the condensed index of
    original index `i` (or `UNAVAILABLE`), `reverse[c]` is the original index
    of condensed index `c`. Available indices keep their ascending order, so
    the condensed indices are exactly `0 .. len(self) - 1`.

    Attributes
    ----------
    forward : Tuple[int, ...]
        Original -> condensed index, one entry per original index.
    reverse : Tuple[int, ...]
        Condensed -> original index, one entry per available index.
    axis : str
        "row" or "column"; used in error messages only.
    """
    forward: Tuple[int, ...]
    reverse: Tuple[int, ...]
    axis: str = "row"

    @classmethod
    def from_mask(cls, available: Sequence[bool], axis: str = "row") -> CondensedIndexMap:
        """
        Builds the map from an availability mask.

        Parameters
        ----------
        available : Sequence[bool]
            `available[i]` is True if original index `i` survives condensation.
        axis : str, optional
            Label used in error messages, by default "row".

        Returns
        -------
        CondensedIndexMap
            The immutable mapping.
        """
        forward = []
        reverse = []
        for original, is_available in enumerate(available):
            if is_available:
                forward.append(len(reverse))
                reverse.append(original)
            else:
                forward.append(UNAVAILABLE)
        return cls(forward=tuple(forward), reverse=tuple(reverse), axis=axis)

    def __len__(self) -> int:
        return len(self.reverse)

    @property
    def num_original(self) -> int:
        """Number of original indices the mask covered."""
        return len(self.forward)

    def is_available(self, original: int) -> bool:
        if original < 0 or original >= len(self.forward):
            return False
        return self.forward[original] != UNAVAILABLE

    def to_condensed(self, original: int) -> int:
        """
        Translates an original index into its condensed index.

        Raises
        ------
        IndexError
            If `original` lies outside the range of the mask.
        NotAvailableError
            If `original` was removed from the condensed matrix.
        """
        if original < 0 or original >= len(self.forward):
            raise IndexError(f"{self.axis} {original} is out of range for {len(self.forward)} vertices")
        condensed = self.forward[original]
        if condensed == UNAVAILABLE:
            raise NotAvailableError(f"This {self.axis} number is not available: {original}")
        return condensed

    def to_original(self, condensed: int) -> int:
        if condensed < 0 or condensed >= len(self.reverse):
            raise IndexError(f"Condensed {self.axis} {condensed} is out of range for size {len(self.reverse)}")
        return self.reverse[condensed]

    def original_indices(self) -> Tuple[int, ...]:
        """The available original indices, in ascending order."""
        return self.reverse
