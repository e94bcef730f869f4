"""Snapshot-backed data sources.

The live host (a bootstrapped Minecraft client with its obfuscated registries)
is never touched here. An exporter running inside the host writes its biome
list and block-state mapping to JSON, and these adapters serve that export
through the ``DataSourceAdapter`` accessors.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mc_datadump.adapters.data_source import AdapterUnavailableError
from mc_datadump.models import BIOME_SLOT_COUNT, BiomeRecord, NamespacedPath

_logger = logging.getLogger("mc_datadump.snapshot")


@dataclass(slots=True)
class StaticDataSource:
    """In-memory adapter over already materialized registries."""

    biomes: list[BiomeRecord | None] = field(default_factory=list)
    blocks: list[tuple[int, object]] = field(default_factory=list)
    paths: dict[object, NamespacedPath] = field(default_factory=dict)

    def list_biome_slots(self) -> list[BiomeRecord | None]:
        return list(self.biomes)

    def list_blocks_in_registry_order(self) -> Iterator[tuple[int, object]]:
        return iter(self.blocks)

    def resolve_path(self, block_key: object) -> NamespacedPath | None:
        return self.paths.get(block_key)


@dataclass(slots=True)
class JsonSnapshotDataSource(StaticDataSource):
    """Adapter over a JSON registry export written by an in-game dumper."""

    version: str | None = None
    source: Path | None = None

    @classmethod
    def from_path(cls, path: str | Path) -> JsonSnapshotDataSource:
        target = Path(path).expanduser()
        try:
            payload = json.loads(target.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise AdapterUnavailableError(f"Snapshot not found: {target}") from exc
        except (OSError, json.JSONDecodeError) as exc:
            raise AdapterUnavailableError(f"Unable to read snapshot {target}: {exc}") from exc

        snapshot = cls.from_payload(payload)
        snapshot.source = target
        _logger.info(
            "snapshot_loaded",
            extra={
                "path": str(target),
                "version": snapshot.version,
                "block_count": len(snapshot.blocks),
            },
        )
        return snapshot

    @classmethod
    def from_payload(cls, payload: Any) -> JsonSnapshotDataSource:
        if not isinstance(payload, dict):
            raise AdapterUnavailableError("Snapshot root must be a JSON object")
        for key in ("biomes", "blocks"):
            if not isinstance(payload.get(key), list):
                raise AdapterUnavailableError(f"Snapshot is missing the '{key}' list")

        raw_biomes = payload["biomes"]
        if len(raw_biomes) > BIOME_SLOT_COUNT:
            raise AdapterUnavailableError(
                f"Snapshot has {len(raw_biomes)} biome slots; at most {BIOME_SLOT_COUNT} are supported"
            )
        biomes = [_parse_biome(index, entry) for index, entry in enumerate(raw_biomes)]
        biomes.extend([None] * (BIOME_SLOT_COUNT - len(biomes)))

        blocks: list[tuple[int, object]] = []
        paths: dict[object, NamespacedPath] = {}
        for position, entry in enumerate(payload["blocks"]):
            block_id, key, path = _parse_block(position, entry)
            blocks.append((block_id, key))
            if path is not None:
                paths[key] = path

        version = payload.get("version")
        return cls(
            biomes=biomes,
            blocks=blocks,
            paths=paths,
            version=str(version) if version is not None else None,
        )


def _parse_biome(index: int, entry: Any) -> BiomeRecord | None:
    if entry is None:
        return None
    if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
        raise AdapterUnavailableError(f"Biome slot {index} is not a complete biome record: {entry!r}")
    values = [entry.get("temperature"), entry.get("humidity")]
    if any(isinstance(value, bool) or not isinstance(value, (int, float)) for value in values):
        raise AdapterUnavailableError(f"Biome slot {index} needs numeric temperature and humidity: {entry!r}")
    return BiomeRecord(
        index=index,
        name=entry["name"],
        temperature=float(values[0]),
        humidity=float(values[1]),
    )


def _parse_block(position: int, entry: Any) -> tuple[int, object, NamespacedPath | None]:
    if not isinstance(entry, dict) or "id" not in entry or "key" not in entry:
        raise AdapterUnavailableError(f"Block entry #{position} needs 'id' and 'key': {entry!r}")

    block_id = entry["id"]
    if isinstance(block_id, bool) or not isinstance(block_id, int):
        raise AdapterUnavailableError(f"Block entry #{position} has a non-integer id: {block_id!r}")
    key = entry["key"]
    if not isinstance(key, str):
        # Keep the entry; its JSON text stands in as the registry key in diagnostics.
        key = json.dumps(key, sort_keys=True)

    raw_path = entry.get("path")
    if raw_path is None:
        path = None
    elif isinstance(raw_path, str):
        path = NamespacedPath.parse(raw_path)
    elif isinstance(raw_path, dict):
        # Missing fields are kept empty so the table reports them as malformed.
        path = NamespacedPath(
            namespace=str(raw_path.get("namespace") or ""),
            identifier=str(raw_path.get("identifier") or ""),
            variant=str(raw_path.get("variant") or ""),
        )
    else:
        raise AdapterUnavailableError(f"Block entry #{position} has an unsupported path: {raw_path!r}")

    return block_id, key, path
