from __future__ import annotations

import io
from pathlib import Path

import pytest

from mc_datadump.adapters import JsonSnapshotDataSource, StaticDataSource
from mc_datadump.dump import DataTableDumper
from mc_datadump.emitters import RegistryContractError
from mc_datadump.models import BiomeRecord, NamespacedPath


def _source(blocks: list[tuple[int, str]] | None = None) -> StaticDataSource:
    biomes: list[BiomeRecord | None] = [None] * 256
    biomes[6] = BiomeRecord(6, "Swampland", 0.8, 0.9)
    return StaticDataSource(
        biomes=biomes,
        blocks=blocks if blocks is not None else [(0, "air")],
        paths={"air": NamespacedPath("minecraft", "air", "normal")},
    )


def test_end_to_end_example(snapshot_file: Path) -> None:
    result = DataTableDumper(JsonSnapshotDataSource.from_path(snapshot_file)).render()
    lines = result.text.splitlines()

    assert lines[0] == "// (name, temperature, humidity)"
    assert lines[2] == "    None, None, None, None, None, None,"
    assert lines[3] == '    Some(("Swampland", 0.8, 0.9)),'
    assert '    (0x0000, "air", "normal"),' in lines
    assert not any(line.lstrip().startswith("// 0") for line in lines)
    assert result.diagnostics == []


def test_tables_are_separated_by_blank_line() -> None:
    text = DataTableDumper(_source()).render().text

    biome_part, block_part = text.split("\n\n")
    assert biome_part.endswith("];")
    assert block_part.startswith("// (id, name, variant)\n")
    assert text.endswith("];\n")


def test_stats_count_diagnostics_by_reason() -> None:
    source = _source(blocks=[(0, "air"), (1, "ghost"), (2, "widget")])
    source.paths["widget"] = NamespacedPath("other_mod", "widget", "normal")

    stats = DataTableDumper(source).render().stats

    assert stats.biome_slots == 256
    assert stats.biomes_present == 1
    assert stats.blocks_total == 3
    assert stats.blocks_resolved == 1
    assert stats.diagnostics == {"no state mapping": 1, "foreign namespace": 1}


def test_write_to_stream() -> None:
    stream = io.StringIO()
    result = DataTableDumper(_source()).write(stream)

    assert stream.getvalue() == result.text


def test_failed_render_writes_nothing_to_stream() -> None:
    stream = io.StringIO()

    with pytest.raises(RegistryContractError):
        DataTableDumper(_source(blocks=[(0, "air"), (0, "air")])).write(stream)
    assert stream.getvalue() == ""


def test_write_file_replaces_target(tmp_path: Path) -> None:
    target = tmp_path / "out" / "data.rs"
    result = DataTableDumper(_source()).write_file(target)

    assert target.read_text(encoding="utf-8") == result.text
    assert sorted(p.name for p in target.parent.iterdir()) == ["data.rs"]


def test_failed_render_keeps_previous_file(tmp_path: Path) -> None:
    target = tmp_path / "data.rs"
    target.write_text("// previous\n", encoding="utf-8")

    with pytest.raises(RegistryContractError):
        DataTableDumper(_source(blocks=[(3, "air"), (1, "air")])).write_file(target)

    assert target.read_text(encoding="utf-8") == "// previous\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["data.rs"]


def test_failed_write_removes_temp_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("mc_datadump.dump.os.replace", _boom)
    target = tmp_path / "data.rs"

    with pytest.raises(OSError, match="disk full"):
        DataTableDumper(_source()).write_file(target)
    assert list(tmp_path.iterdir()) == []


def test_snapshot_block_with_list_key_becomes_diagnostic() -> None:
    source = JsonSnapshotDataSource.from_payload(
        {"biomes": [], "blocks": [{"id": 0, "key": "air", "path": "air"}, {"id": 1, "key": ["odd"]}]}
    )
    result = DataTableDumper(source).render()

    assert '    // 0001: "[\\"odd\\"]" (no state mapping)' in result.text.splitlines()
    assert result.stats.blocks_resolved == 1
