"""Rendering of the ``BLOCK_STATES`` table from the block registry."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

from mc_datadump.adapters.data_source import DataDumpError
from mc_datadump.literals import format_block_id, rust_str
from mc_datadump.models import HOST_NAMESPACE, BlockEntry, NamespacedPath

BLOCK_TUPLE_COMMENT = "// (id, name, variant)"
BLOCK_TABLE_OPEN = "pub static BLOCK_STATES: &'static [(u16, &'static str, &'static str)] = &["
INDENT = "    "
MAX_BLOCK_ID = 0xFFFF

_logger = logging.getLogger("mc_datadump.emitters.block_states")


class RegistryContractError(DataDumpError):
    """Raised when registry ids are duplicated, unordered, or do not fit in a u16."""


class DiagnosticReason(str, Enum):
    """Why a registry entry was left out of the literal table."""

    NO_MAPPING = "no state mapping"
    MALFORMED = "malformed mapping"
    FOREIGN_NAMESPACE = "foreign namespace"


@dataclass(slots=True, frozen=True)
class BlockDiagnostic:
    entry: BlockEntry
    reason: DiagnosticReason

    def render(self) -> str:
        head = f"{INDENT}// {format_block_id(self.entry.id)}: {rust_str(str(self.entry.registry_key))}"
        if self.entry.resolved_path is None:
            return f"{head} ({self.reason.value})"
        return f"{head} ({self.reason.value}: {_comment_text(str(self.entry.resolved_path))})"


@dataclass(slots=True)
class BlockStateTable:
    """Rendered lines plus what was kept out of the literal entries."""

    lines: list[str]
    resolved_count: int = 0
    diagnostics: list[BlockDiagnostic] = field(default_factory=list)


def _comment_text(text: str) -> str:
    # Same escaping as a string literal, so a newline cannot end the comment early.
    return rust_str(text)[1:-1]


def classify(entry: BlockEntry) -> DiagnosticReason | None:
    """Return why ``entry`` cannot become a literal row, or ``None`` if it can."""
    path = entry.resolved_path
    if path is None:
        return DiagnosticReason.NO_MAPPING
    if not (path.namespace and path.identifier and path.variant):
        return DiagnosticReason.MALFORMED
    if path.namespace != HOST_NAMESPACE:
        return DiagnosticReason.FOREIGN_NAMESPACE
    return None


def render_block_row(block_id: int, path: NamespacedPath) -> str:
    return f"{INDENT}(0x{format_block_id(block_id)}, {rust_str(path.identifier)}, {rust_str(path.variant)}),"


def _check_id(block_id: int, previous_id: int | None) -> None:
    if not 0 <= block_id <= MAX_BLOCK_ID:
        raise RegistryContractError(f"Block id {block_id} does not fit in a u16")
    if previous_id is None:
        return
    if block_id == previous_id:
        raise RegistryContractError(f"Duplicate block id 0x{format_block_id(block_id)}")
    if block_id < previous_id:
        raise RegistryContractError(
            f"Block id 0x{format_block_id(block_id)} follows 0x{format_block_id(previous_id)}; "
            "registry must be in ascending id order"
        )


def emit_block_state_table(
    blocks: Iterable[tuple[int, object]],
    resolve_path: Callable[[object], NamespacedPath | None],
) -> BlockStateTable:
    """Render registry entries in the order given, one line per entry.

    Entries whose path is missing, malformed, or outside the host namespace
    become comment lines in place, so ids stay in registry order either way.
    """
    table = BlockStateTable(lines=[BLOCK_TUPLE_COMMENT, BLOCK_TABLE_OPEN])
    previous_id: int | None = None
    for block_id, key in blocks:
        _check_id(block_id, previous_id)
        previous_id = block_id

        entry = BlockEntry(id=block_id, registry_key=key, resolved_path=resolve_path(key))
        reason = classify(entry)
        if reason is None:
            table.lines.append(render_block_row(block_id, entry.resolved_path))
            table.resolved_count += 1
            continue

        diagnostic = BlockDiagnostic(entry=entry, reason=reason)
        table.lines.append(diagnostic.render())
        table.diagnostics.append(diagnostic)
        _logger.debug(
            "block_diagnostic",
            extra={"block_id": block_id, "key": str(key), "reason": reason.value},
        )

    table.lines.append("];")
    _logger.info(
        "block_state_table_emitted",
        extra={"resolved_count": table.resolved_count, "diagnostic_count": len(table.diagnostics)},
    )
    return table
