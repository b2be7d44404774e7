"""Wrapper around the external ``h5repack`` tool."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import tempfile
from pathlib import Path

from h5kit.core.shared.exceptions import RepackError

logger = logging.getLogger(__name__)

DEFAULT_EXECUTABLE = "h5repack"


def find_executable(executable: str | None = None) -> str:
    """Resolve the h5repack executable (``h5repack.exe`` on Windows)."""
    name = executable or DEFAULT_EXECUTABLE
    resolved = shutil.which(name)
    if resolved is None:
        msg = f"{name!r} not found; install the HDF5 command-line tools or set repack.executable"
        raise RepackError(msg)
    return resolved


def repack(src: str | Path, trg: str | Path | None = None, executable: str | None = None) -> str:
    """Repack *src* into *trg*, e.g. to free space left by deleted objects.

    When *trg* is omitted or equal to *src* the file is repacked into a
    temporary file next to it which then replaces *src*.

    Returns:
        Standard output of h5repack.

    Raises:
        RepackError: If h5repack is missing or fails.
    """
    src = Path(src)
    if trg is None or Path(trg).resolve() == src.resolve():
        return _repack_in_place(src, executable)
    return _run(src, Path(trg), executable)


def _repack_in_place(src: Path, executable: str | None) -> str:
    fd, tmp_name = tempfile.mkstemp(suffix=".h5", prefix=f".{src.stem}-", dir=src.parent)
    os.close(fd)
    tmp = Path(tmp_name)
    try:
        output = _run(src, tmp, executable)
        os.replace(tmp, src)
    finally:
        tmp.unlink(missing_ok=True)
    return output


def _run(src: Path, trg: Path, executable: str | None) -> str:
    command = [find_executable(executable), str(src), str(trg)]
    logger.info("Running %s", " ".join(command))
    try:
        result = subprocess.run(command, capture_output=True, text=True, check=False)
    except OSError as exc:
        msg = f"cannot run {command[0]}: {exc}"
        raise RepackError(msg) from exc
    if result.returncode != 0:
        msg = f"h5repack exited with status {result.returncode}: {result.stderr.strip()}"
        raise RepackError(msg)
    return result.stdout


__all__ = ["DEFAULT_EXECUTABLE", "find_executable", "repack"]
