"""One-shot dump of both registry tables from a data source."""

from __future__ import annotations

import logging
import os
import tempfile
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from mc_datadump.adapters.data_source import DataSourceAdapter
from mc_datadump.emitters import BlockDiagnostic, emit_biome_table, emit_block_state_table


@dataclass(slots=True)
class DumpStats:
    biome_slots: int
    biomes_present: int
    blocks_total: int
    blocks_resolved: int
    diagnostics: dict[str, int] = field(default_factory=dict)


@dataclass(slots=True)
class DumpResult:
    """Complete rendered artifact; nothing is written until one exists."""

    text: str
    stats: DumpStats
    diagnostics: list[BlockDiagnostic] = field(default_factory=list)


class DataTableDumper:
    """Renders the ``BIOMES`` and ``BLOCK_STATES`` tables from one snapshot."""

    def __init__(self, source: DataSourceAdapter, *, logger: logging.Logger | None = None) -> None:
        self._source = source
        self._logger = logger or logging.getLogger("mc_datadump.dump")

    def render(self) -> DumpResult:
        slots = self._source.list_biome_slots()
        biome_lines = emit_biome_table(slots)
        block_table = emit_block_state_table(
            self._source.list_blocks_in_registry_order(),
            self._source.resolve_path,
        )

        text = "\n".join([*biome_lines, "", *block_table.lines]) + "\n"
        reasons = Counter(diagnostic.reason.value for diagnostic in block_table.diagnostics)
        stats = DumpStats(
            biome_slots=len(slots),
            biomes_present=sum(1 for slot in slots if slot is not None),
            blocks_total=block_table.resolved_count + len(block_table.diagnostics),
            blocks_resolved=block_table.resolved_count,
            diagnostics=dict(reasons),
        )
        self._logger.info(
            "dump_rendered",
            extra={
                "biomes_present": stats.biomes_present,
                "blocks_total": stats.blocks_total,
                "blocks_resolved": stats.blocks_resolved,
            },
        )
        return DumpResult(text=text, stats=stats, diagnostics=block_table.diagnostics)

    def write(self, stream: TextIO) -> DumpResult:
        """Render fully, then write to ``stream``; render failures write nothing."""
        result = self.render()
        stream.write(result.text)
        stream.flush()
        return result

    def write_file(self, path: str | Path) -> DumpResult:
        """Render and atomically replace ``path`` with the artifact."""
        result = self.render()
        target = Path(path).expanduser()
        target.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(result.text)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        self._logger.info("dump_written", extra={"output_path": str(target), "bytes": len(result.text)})
        return result
