"""Unit tests for sysmod.api.module.ModuleRegistry."""

import pytest

from sysmod.api.config.ContentsConfig import ContentsConfig
from sysmod.api.module.DiscoveryResult import NO_MODULES_MESSAGE, SCAN_FAILED_MESSAGE
from sysmod.api.module.Module import Module
from sysmod.api.module.ModuleRegistry import ModuleRegistry
from sysmod.constants import RESERVED_PROGRAM_ID
from tests.conftest import write_descriptor, write_module

FOO = 0x0100000000000001
BAR = 0x0100000000000002


@pytest.fixture
def registry(contents_dir):
    return ModuleRegistry(ContentsConfig(contents_dir=str(contents_dir)))


def test_discovers_valid_descriptors(registry, contents_dir):
    write_module(contents_dir, FOO, "Foo")
    write_module(contents_dir, BAR, "Bar", requires_reboot=True)

    result = registry.discover()

    assert result.scanned is True
    assert result.skipped == []
    assert sorted(result.modules, key=lambda m: m.program_id) == [
        Module(program_id=FOO, display_name="Foo", requires_reboot=False),
        Module(program_id=BAR, display_name="Bar", requires_reboot=True),
    ]
    assert result.empty_message == ""


def test_preserves_source_order(registry, contents_dir):
    bar_dir = write_module(contents_dir, BAR, "Bar")
    foo_dir = write_module(contents_dir, FOO, "Foo")

    result = registry.discover([bar_dir, foo_dir])
    assert [m.display_name for m in result.modules] == ["Bar", "Foo"]

    result = registry.discover([foo_dir, bar_dir])
    assert [m.display_name for m in result.modules] == ["Foo", "Bar"]


def test_reserved_id_is_excluded(registry, contents_dir):
    write_module(contents_dir, RESERVED_PROGRAM_ID, "Overlay")
    write_module(contents_dir, FOO, "Foo")

    result = registry.discover()

    assert [m.program_id for m in result.modules] == [FOO]
    assert result.skipped == []


def test_reserved_id_follows_config(contents_dir):
    registry = ModuleRegistry(ContentsConfig(contents_dir=str(contents_dir), reserved_program_id=FOO))
    write_module(contents_dir, FOO, "Foo")
    write_module(contents_dir, RESERVED_PROGRAM_ID, "Overlay")

    result = registry.discover()
    assert [m.program_id for m in result.modules] == [RESERVED_PROGRAM_ID]


def test_malformed_json_is_skipped(registry, contents_dir):
    write_module(contents_dir, FOO, "Foo")
    broken = contents_dir / "broken"
    broken.mkdir()
    (broken / "toolbox.json").write_text("{not json", encoding="utf-8")

    result = registry.discover()

    assert [m.display_name for m in result.modules] == ["Foo"]
    assert len(result.skipped) == 1
    assert result.skipped[0].startswith("broken: invalid JSON")


@pytest.mark.parametrize(
    "fields",
    [
        {"tid": "0100000000000003", "name": "NoReboot"},
        {"tid": "0100000000000003", "requires_reboot": False},
        {"name": "NoTid", "requires_reboot": False},
        {"tid": "0100000000000003", "name": "Mistyped", "requires_reboot": "yes"},
        {"tid": "0100000000000003", "name": "Mistyped", "requires_reboot": 1},
        {"tid": 72057594037927939, "name": "IntTid", "requires_reboot": False},
        {"tid": "not-hex", "name": "BadTid", "requires_reboot": False},
        {"tid": "0100000000000003", "name": 7, "requires_reboot": False},
    ],
)
def test_invalid_descriptor_is_skipped(registry, contents_dir, fields):
    write_descriptor(contents_dir, "bad", **fields)

    result = registry.discover()

    assert result.modules == []
    assert result.scanned is True
    assert len(result.skipped) == 1
    assert result.skipped[0].startswith("bad: ")


def test_non_object_descriptor_is_skipped(registry, contents_dir):
    module_dir = contents_dir / "list"
    module_dir.mkdir()
    (module_dir / "toolbox.json").write_text("[1, 2]", encoding="utf-8")

    result = registry.discover()
    assert result.modules == []
    assert "must be a JSON object" in result.skipped[0]


def test_extra_descriptor_fields_are_ignored(registry, contents_dir):
    write_descriptor(contents_dir, "extra", tid="0100000000000001", name="Foo", requires_reboot=False, version="1.2")

    result = registry.discover()
    assert [m.program_id for m in result.modules] == [FOO]


def test_directory_without_descriptor_is_not_a_module(registry, contents_dir):
    (contents_dir / "empty").mkdir()
    (contents_dir / "stray.txt").write_text("not a module dir")

    result = registry.discover()

    assert result.modules == []
    assert result.skipped == []
    assert result.empty_message == NO_MODULES_MESSAGE


def test_duplicate_program_id_keeps_first(registry, contents_dir):
    first = write_descriptor(contents_dir, "a", tid="0100000000000001", name="First", requires_reboot=False)
    second = write_descriptor(contents_dir, "b", tid="0x0100000000000001", name="Second", requires_reboot=True)

    result = registry.discover([first, second])

    assert [m.display_name for m in result.modules] == ["First"]
    assert result.skipped == ["b: duplicate program id 0100000000000001"]


def test_descriptor_directory_name_is_not_the_id(registry, contents_dir):
    write_descriptor(contents_dir, "anything", tid="0100000000000002", name="Bar", requires_reboot=True)

    result = registry.discover()
    assert result.modules[0].program_id == BAR


def test_empty_contents_directory(registry):
    result = registry.discover()

    assert result.scanned is True
    assert result.modules == []
    assert result.empty_message == NO_MODULES_MESSAGE


def test_missing_contents_directory_fails_scan(tmp_path):
    registry = ModuleRegistry(ContentsConfig(contents_dir=str(tmp_path / "missing")))

    result = registry.discover()

    assert result.scanned is False
    assert result.modules == []
    assert result.empty_message == SCAN_FAILED_MESSAGE


def test_skips_are_logged(contents_dir, tmp_path):
    log_path = tmp_path / "logfile"
    registry = ModuleRegistry(ContentsConfig(contents_dir=str(contents_dir)), log_path=log_path, log_level="INFO")
    write_descriptor(contents_dir, "bad", tid="0100000000000001")

    registry.discover()

    content = log_path.read_text(encoding="utf-8")
    assert "[module] WARN: Skipping descriptor" in content
    assert "[module] INFO: Discovered 0 module(s), skipped 1" in content


def test_dynamic_and_static_partition(registry, contents_dir):
    foo_dir = write_module(contents_dir, FOO, "Foo")
    bar_dir = write_module(contents_dir, BAR, "Bar", requires_reboot=True)

    result = registry.discover([foo_dir, bar_dir])

    assert [m.display_name for m in result.dynamic] == ["Foo"]
    assert [m.display_name for m in result.static] == ["Bar"]
    assert result.get(BAR).display_name == "Bar"
    assert result.get(0x99) is None
