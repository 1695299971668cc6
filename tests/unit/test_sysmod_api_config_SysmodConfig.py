"""Unit tests for sysmod.api.config.SysmodConfig."""

import json

import pytest
from pydantic import ValidationError

from sysmod.api.config.ContentsConfig import ContentsConfig
from sysmod.api.config.RefreshConfig import RefreshConfig
from sysmod.api.config.SysmodConfig import SysmodConfig
from sysmod.constants import RESERVED_PROGRAM_ID


def test_home_dir_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("SYSMOD_HOME", str(tmp_path))
    assert SysmodConfig.get_home_dir() == tmp_path.resolve()
    assert SysmodConfig.get_config_path() == tmp_path.resolve() / "config.json"
    assert SysmodConfig.get_logfile_path() == tmp_path.resolve() / "logfile"


def test_home_dir_default(tmp_path, monkeypatch):
    monkeypatch.delenv("SYSMOD_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert SysmodConfig.get_home_dir() == tmp_path / ".sysmod"


def test_load(sysmod_home, contents_dir):
    config = SysmodConfig.load()

    assert config.contents.contents_path == contents_dir
    assert config.contents.descriptor_filename == "toolbox.json"
    assert config.contents.reserved_program_id == RESERVED_PROGRAM_ID
    assert config.process.type == "pidfile"
    assert config.refresh.every_ticks == 20
    assert config.log.level == "DEBUG"


def test_load_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("SYSMOD_HOME", str(tmp_path))
    with pytest.raises(ValueError, match="Configuration file not found"):
        SysmodConfig.load()


def test_load_invalid_json(tmp_path, monkeypatch):
    monkeypatch.setenv("SYSMOD_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text("{invalid json")
    with pytest.raises(ValueError, match="Invalid JSON"):
        SysmodConfig.load()


@pytest.mark.parametrize("section", ["contents", "process", "refresh", "log"])
def test_load_missing_section(tmp_path, monkeypatch, minimal_config_dict, section):
    monkeypatch.setenv("SYSMOD_HOME", str(tmp_path))
    del minimal_config_dict[section]
    (tmp_path / "config.json").write_text(json.dumps(minimal_config_dict))

    with pytest.raises(ValueError, match=f"Configuration validation error: {section}"):
        SysmodConfig.load()


def test_load_rejects_unknown_section(tmp_path, monkeypatch, minimal_config_dict):
    monkeypatch.setenv("SYSMOD_HOME", str(tmp_path))
    minimal_config_dict["daemon"] = {}
    (tmp_path / "config.json").write_text(json.dumps(minimal_config_dict))

    with pytest.raises(ValueError, match="daemon"):
        SysmodConfig.load()


def test_load_reports_nested_field(tmp_path, monkeypatch, minimal_config_dict):
    monkeypatch.setenv("SYSMOD_HOME", str(tmp_path))
    minimal_config_dict["refresh"]["every_ticks"] = 0
    (tmp_path / "config.json").write_text(json.dumps(minimal_config_dict))

    with pytest.raises(ValueError, match="refresh.every_ticks"):
        SysmodConfig.load()


def test_save_roundtrip(tmp_path, monkeypatch, minimal_sysmod_config):
    monkeypatch.setenv("SYSMOD_HOME", str(tmp_path / "home"))

    minimal_sysmod_config.save()

    assert SysmodConfig.load().to_dict() == minimal_sysmod_config.to_dict()
    assert not (tmp_path / "home" / "config.json.tmp").exists()


def test_to_dict_sections(minimal_sysmod_config):
    data = minimal_sysmod_config.to_dict()
    assert list(data) == ["contents", "process", "refresh", "log"]
    assert data["process"]["data"]["executable"] == "main"


def test_contents_defaults(tmp_path):
    contents = ContentsConfig(contents_dir=str(tmp_path))
    assert contents.flags_dirname == "flags"
    assert contents.flag_filename == "boot2.flag"


def test_contents_path_expands_user(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert ContentsConfig(contents_dir="~/contents").contents_path == tmp_path / "contents"


@pytest.mark.parametrize("field", ["descriptor_filename", "flags_dirname", "flag_filename"])
@pytest.mark.parametrize("value", ["", "a/b", ".."])
def test_contents_plain_names(tmp_path, field, value):
    with pytest.raises(ValidationError):
        ContentsConfig(contents_dir=str(tmp_path), **{field: value})


def test_contents_dir_required():
    with pytest.raises(ValidationError):
        ContentsConfig(contents_dir="")


def test_refresh_defaults():
    refresh = RefreshConfig()
    assert refresh.every_ticks == 20
    assert refresh.frame_secs == pytest.approx(1 / 60)
