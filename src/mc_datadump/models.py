from __future__ import annotations

from dataclasses import dataclass

BIOME_SLOT_COUNT = 256
HOST_NAMESPACE = "minecraft"
DEFAULT_VARIANT = "normal"


@dataclass(slots=True, frozen=True)
class BiomeRecord:
    index: int
    name: str
    temperature: float
    humidity: float


@dataclass(slots=True, frozen=True)
class NamespacedPath:
    """Model resource location of a block state, e.g. ``minecraft:stone#normal``."""

    namespace: str
    identifier: str
    variant: str

    @classmethod
    def parse(cls, text: str) -> NamespacedPath:
        location, _, variant = text.partition("#")
        namespace, sep, identifier = location.partition(":")
        if not sep:
            namespace, identifier = HOST_NAMESPACE, location
        return cls(namespace=namespace, identifier=identifier, variant=variant or DEFAULT_VARIANT)

    def __str__(self) -> str:
        return f"{self.namespace}:{self.identifier}#{self.variant}"


@dataclass(slots=True, frozen=True)
class BlockEntry:
    id: int
    registry_key: object
    resolved_path: NamespacedPath | None = None
