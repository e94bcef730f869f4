"""Data source adapters over exported host registries."""

from .data_source import AdapterUnavailableError, DataDumpError, DataSourceAdapter
from .snapshot import JsonSnapshotDataSource, StaticDataSource

__all__ = [
    "AdapterUnavailableError",
    "DataDumpError",
    "DataSourceAdapter",
    "JsonSnapshotDataSource",
    "StaticDataSource",
]
