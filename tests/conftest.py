from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def snapshot_payload() -> dict:
    biomes = [None] * 7
    biomes[6] = {"name": "Swampland", "temperature": 0.8, "humidity": 0.9}
    return {
        "version": "1.8-pre2",
        "biomes": biomes,
        "blocks": [{"id": 0, "key": "air", "path": "minecraft:air#normal"}],
    }


@pytest.fixture
def snapshot_file(tmp_path: Path, snapshot_payload: dict) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(snapshot_payload), encoding="utf-8")
    return path
