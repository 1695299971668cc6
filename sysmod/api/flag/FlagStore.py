"""Auto-start flag store backed by marker files."""

from contextlib import suppress
from pathlib import Path

from ...utils.format_program_id import format_program_id
from ..config.ContentsConfig import ContentsConfig


class FlagStore:
    """Maps a program id to its "start at next boot" flag.

    The flag is the presence of ``<contents>/<HEX>/<flags_dirname>/<flag_filename>``;
    the file's content is irrelevant.
    """

    def __init__(self, contents: ContentsConfig):
        self.contents = contents

    def flag_path(self, program_id: int) -> Path:
        """Path of the marker file for a program id."""
        return (
            self.contents.contents_path
            / format_program_id(program_id)
            / self.contents.flags_dirname
            / self.contents.flag_filename
        )

    def has_auto_start(self, program_id: int) -> bool:
        """Whether the marker exists and can be opened for reading.

        Never raises: any I/O error (including "not found") reads as False.
        """
        try:
            with self.flag_path(program_id).open("rb"):
                return True
        except OSError:
            return False

    def set_auto_start(self, program_id: int, enabled: bool) -> None:
        """Create or delete the marker. Both directions are idempotent.

        Raises:
            OSError: If the directory or marker cannot be created, or the marker cannot be deleted
        """
        path = self.flag_path(program_id)
        if enabled:
            path.parent.mkdir(parents=True, exist_ok=True)
            with suppress(FileExistsError), path.open("xb"):
                pass
            if not path.is_file():
                raise FileExistsError(f"Auto-start marker path {path} exists but is not a regular file")
        else:
            path.unlink(missing_ok=True)
