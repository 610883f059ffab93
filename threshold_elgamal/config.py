from dataclasses import dataclass

from .errors import IndexNamespaceError

# ====================================================
# === Global Parameters ==============================
# ====================================================

DEFAULT_SECURITY_LENGTH_BYTES = 16  # Modulus length in bytes (test strength only)
MIN_SECURITY_LENGTH_BYTES = 2       # Smallest modulus that still leaves room for g
MAX_SAMPLING_ATTEMPTS = 10_000      # Bound on prime and generator sampling loops
GENERATOR_FLOOR = 4                 # Smallest accepted generator


@dataclass(frozen=True)
class IndexConfig:
    """Index namespace shared by every participant of one protocol run."""
    blinding_index: int = 0
    """Index of the ephemeral blinding point injected by the combiner."""
    reserve_index: int = 1
    """First index handed to refreshed (virtual) shares."""
    user_index: int = 100
    """First index available to real participants."""

    def __post_init__(self):
        if min(self.blinding_index, self.reserve_index, self.user_index) < 0:
            raise ValueError("Indices must be non-negative.")
        if self.reserve_index >= self.user_index:
            raise ValueError(
                f"reserve_index ({self.reserve_index}) must be below user_index ({self.user_index})."
            )
        if self.blinding_index >= self.user_index:
            raise ValueError(
                f"blinding_index ({self.blinding_index}) must be below user_index ({self.user_index})."
            )

    def virtual_indices(self, count: int) -> range:
        indices = range(self.reserve_index, self.reserve_index + count)
        if count and indices[-1] >= self.user_index:
            raise IndexNamespaceError(
                f"{count} refreshed shares starting at {self.reserve_index} "
                f"run into the participant range at {self.user_index}."
            )
        if self.blinding_index in indices:
            raise IndexNamespaceError(
                f"Refreshed share indices {indices.start}..{indices.stop - 1} "
                f"contain the blinding index {self.blinding_index}."
            )
        return indices

    def check_virtual_index(self, index: int) -> None:
        if index >= self.user_index or index == self.blinding_index:
            raise IndexNamespaceError(
                f"Refreshed share index {index} collides with the participant range or the blinding index."
            )

    def check_user_index(self, index: int) -> None:
        if index < self.user_index:
            raise IndexNamespaceError(
                f"Participant index {index} is below the participant range starting at {self.user_index}."
            )


DEFAULT_INDEX_CONFIG = IndexConfig()
