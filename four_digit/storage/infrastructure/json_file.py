"""JSON file helpers. Reads never raise; atomic writes do."""

import contextlib
import os
import tempfile
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from four_digit.storage.domain.absent import Absent
from four_digit.storage.infrastructure.errors import StorageWriteError


def read_json_file[T](path: Path, adapter: TypeAdapter[T]) -> T | Absent:
    """
    Read and validate ``path`` through ``adapter``.

    A missing file, undecodable bytes, invalid JSON or a schema violation all
    come back as ``Absent`` carrying the reason.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return Absent(reason=f"file not found: {path}")
    except OSError as exc:
        return Absent(reason=f"unreadable file {path}: {exc}")

    try:
        return adapter.validate_json(raw)
    except ValidationError as exc:
        return Absent(reason=f"invalid content in {path}: {exc.error_count()} error(s)")


def write_json_file[T](path: Path, adapter: TypeAdapter[T], value: T) -> None:
    """
    Serialize ``value`` and atomically replace ``path`` with it.

    Raises:
        StorageWriteError: if the directory cannot be created or the file
            cannot be written or renamed into place.
    """
    payload = adapter.dump_json(value, indent=2)
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp_name = fh.name
            fh.write(payload)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)
        raise StorageWriteError(path=path, reason=str(exc)) from exc
