"""Boundary between the dump passes and an initialized host snapshot."""

from collections.abc import Iterable
from typing import Protocol

from mc_datadump.models import BiomeRecord, NamespacedPath


class DataDumpError(RuntimeError):
    """Base class for failures that abort a dump before anything is written."""


class AdapterUnavailableError(DataDumpError):
    """Raised when the host snapshot cannot provide the registry accessors."""


class DataSourceAdapter(Protocol):
    """Read-only view over the host's biome list and block registry."""

    def list_biome_slots(self) -> list[BiomeRecord | None]:
        """Return all 256 biome slots in index order, empty slots included."""

    def list_blocks_in_registry_order(self) -> Iterable[tuple[int, object]]:
        """Yield ``(id, key)`` pairs in ascending registry id order."""

    def resolve_path(self, block_key: object) -> NamespacedPath | None:
        """Return the block-state path mapped to ``block_key``, if any."""
