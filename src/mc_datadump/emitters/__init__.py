"""Rust table emitters for the biome list and block-state registry."""

from .biomes import BiomeSlotError, emit_biome_table
from .block_states import (
    BlockDiagnostic,
    BlockStateTable,
    DiagnosticReason,
    RegistryContractError,
    emit_block_state_table,
)

__all__ = [
    "BiomeSlotError",
    "BlockDiagnostic",
    "BlockStateTable",
    "DiagnosticReason",
    "RegistryContractError",
    "emit_biome_table",
    "emit_block_state_table",
]
