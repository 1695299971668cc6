import pytest

from sysmod.api.toggle.ModuleStatus import ModuleStatus
from sysmod.api.toggle.STATUS_LABELS import STATUS_LABELS


@pytest.mark.parametrize(
    ("running", "auto_start", "label"),
    [
        (False, False, "Off | ✗"),
        (False, True, "Off | ↻"),
        (True, False, "On | ✗"),
        (True, True, "On | ↻"),
    ],
)
def test_label(running, auto_start, label):
    assert ModuleStatus(program_id=1, running=running, auto_start=auto_start).label == label


def test_labels_are_distinct():
    assert len(set(STATUS_LABELS.values())) == 4


def test_to_dict():
    status = ModuleStatus(program_id=0x0100000000000001, running=True, auto_start=False)
    assert status.to_dict() == {
        "program_id": "0100000000000001",
        "running": True,
        "auto_start": False,
        "label": "On | ✗",
    }
