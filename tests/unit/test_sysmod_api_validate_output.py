import pytest

from sysmod.api.config.cmd_version import cmd_version
from sysmod.api.module.cmd_toggle import cmd_toggle
from sysmod.api.validate_output import validate_output


def test_validate_output_accepts_schema():
    output = {"errors": [], "warnings": [], "version": "1.0"}
    assert validate_output(cmd_version, output) == output


def test_validate_output_rejects_missing_field():
    with pytest.raises(ValueError, match="Output validation failed for module.toggle"):
        validate_output(cmd_toggle, {"errors": [], "warnings": [], "program_id": "01"})


def test_validate_output_skips_non_api_functions():
    def cmd_local():
        pass

    assert validate_output(cmd_local, {"anything": 1}) == {"anything": 1}
