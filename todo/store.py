"""
TODO - Task Store
=================
Loads and persists the task list as a single JSON document.

The whole list is rewritten on every save: the new document is written to a
temporary file next to the target and then moved over it, so readers only
ever see the old or the new content.
"""

import contextlib
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Sequence, Union

from pydantic import ValidationError

from .errors import CorruptState, IOFailure
from .schema import (
    STORED_COLLECTION_ADAPTER,
    TASK_COLLECTION_ADAPTER,
    Task,
    TaskCollection,
    ensure_unique_ids,
)

logger = logging.getLogger(__name__)

DEFAULT_TODO_FILE = "todo.json"


def _file_mode(path: Path) -> int:
    """Mode for a rewritten file: keep the existing one, else what the umask allows"""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class TaskStore:
    """
    File-backed task storage.

    Primary storage: a JSON array at ``path`` (default ``todo.json``
    relative to the working directory).
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_TODO_FILE):
        self.path = Path(path)

    def load(self) -> TaskCollection:
        """Load the task list; a missing file is an empty list"""
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            logger.debug(f"No task file at {self.path}, starting empty")
            return []
        except OSError as e:
            raise IOFailure(f"Cannot read {self.path}: {e.strerror or e}") from e

        try:
            tasks = [stored.to_task() for stored in STORED_COLLECTION_ADAPTER.validate_json(raw)]
        except ValidationError as e:
            raise CorruptState(
                f"{self.path} is not a valid task list "
                f"({e.error_count()} problem(s), first: {e.errors()[0]['msg']})"
            ) from e

        try:
            ensure_unique_ids(tasks)
        except CorruptState as e:
            raise CorruptState(f"{self.path} is not a valid task list ({e})") from e

        logger.debug(f"📂 Loaded {len(tasks)} task(s) from {self.path}")
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        """Replace the stored task list with ``tasks``"""
        data = TASK_COLLECTION_ADAPTER.dump_json(list(tasks), indent=2)

        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.write(b"\n")
            os.chmod(tmp_name, _file_mode(self.path))
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise IOFailure(f"Cannot write {self.path}: {e.strerror or e}") from e

        logger.debug(f"💾 Saved {len(tasks)} task(s) to {self.path}")
