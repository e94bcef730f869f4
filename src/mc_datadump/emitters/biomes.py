"""Rendering of the fixed 256-slot ``BIOMES`` table."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from functools import reduce

from mc_datadump.adapters.data_source import DataDumpError
from mc_datadump.literals import format_tenths, rust_str, to_float32
from mc_datadump.models import BIOME_SLOT_COUNT, BiomeRecord

BIOME_TUPLE_COMMENT = "// (name, temperature, humidity)"
BIOME_TABLE_OPEN = f"pub static BIOMES: [Option<(&'static str, f32, f32)>; {BIOME_SLOT_COUNT}] = ["
EMPTY_RUN_WRAP = 16
INDENT = "    "

_logger = logging.getLogger("mc_datadump.emitters.biomes")


class BiomeSlotError(DataDumpError):
    """Raised when the biome slot array breaks its fixed-size, positional layout."""


@dataclass(slots=True, frozen=True)
class _Layout:
    rows: tuple[str, ...] = ()
    run: int = 0


def _place_slot(layout: _Layout, slot: BiomeRecord | None) -> _Layout:
    if slot is None:
        if layout.run % EMPTY_RUN_WRAP == 0:
            rows = (*layout.rows, f"{INDENT}None,")
        else:
            rows = (*layout.rows[:-1], f"{layout.rows[-1]} None,")
        return _Layout(rows=rows, run=layout.run + 1)
    return _Layout(rows=(*layout.rows, f"{INDENT}Some({render_biome(slot)}),"), run=0)


def render_biome(biome: BiomeRecord) -> str:
    """Render ``biome`` as a ``(name, temperature, humidity)`` tuple literal."""
    try:
        temperature = format_tenths(to_float32(biome.temperature))
        humidity = format_tenths(to_float32(biome.humidity))
    except (OverflowError, ValueError) as exc:
        raise BiomeSlotError(f"Biome slot {biome.index} ({biome.name}): {exc}") from exc
    return f"({rust_str(biome.name)}, {temperature}, {humidity})"


def check_biome_slots(slots: Sequence[BiomeRecord | None]) -> None:
    if len(slots) != BIOME_SLOT_COUNT:
        raise BiomeSlotError(f"Expected {BIOME_SLOT_COUNT} biome slots, got {len(slots)}")
    for position, slot in enumerate(slots):
        if slot is not None and slot.index != position:
            raise BiomeSlotError(f"Biome {slot.name!r} claims slot {slot.index} but sits in slot {position}")


def emit_biome_table(slots: Sequence[BiomeRecord | None]) -> list[str]:
    """Return the lines of the ``BIOMES`` array literal, header included.

    Every slot is emitted in index order. Runs of empty slots share lines,
    wrapping after every ``EMPTY_RUN_WRAP`` entries of the run; a present
    biome always starts its own line and resets the run.
    """
    check_biome_slots(slots)
    layout = reduce(_place_slot, slots, _Layout())

    present = sum(1 for slot in slots if slot is not None)
    _logger.info("biome_table_emitted", extra={"slot_count": len(slots), "present_count": present})
    return [BIOME_TUPLE_COMMENT, BIOME_TABLE_OPEN, *layout.rows, "];"]
