"""Dump Minecraft biome and block-state registries as Rust source tables."""

__version__ = "0.1.0"
