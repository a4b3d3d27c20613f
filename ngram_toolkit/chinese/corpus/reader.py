"""
Corpus archive reader.

Walks every file member of a ZIP or tar archive, copies it to a temporary
file and hands it out as a UTF-8 text stream. The temporary copy is removed
as soon as the caller moves on to the next entry.
"""

from __future__ import annotations

import logging
import shutil
import tarfile
import tempfile
import zipfile
from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO, Callable, Iterator, List, Optional, TextIO, Tuple

from .errors import ArchiveOpenError, EntryReadError

logger = logging.getLogger(__name__)


@dataclass
class CorpusEntry:
    name: str
    stream: TextIO


def _open_members(path: Path, stack: ExitStack) -> Tuple[List[Tuple[str, Any]], Callable[[Any], BinaryIO]]:
    """
    Open the archive and return (members, opener). Members are (name, info)
    pairs in archive order, duplicates included; the opener turns an info
    object into a binary file object.
    """
    if zipfile.is_zipfile(path):
        zf = stack.enter_context(zipfile.ZipFile(path))
        members = [(info.filename, info) for info in zf.infolist() if not info.is_dir()]
        return members, zf.open

    if tarfile.is_tarfile(path):
        tf = stack.enter_context(tarfile.open(path, mode="r:*"))
        members = [(m.name, m) for m in tf.getmembers() if m.isfile()]

        def open_tar_member(info: tarfile.TarInfo) -> BinaryIO:
            fobj = tf.extractfile(info)
            if fobj is None:
                raise OSError(f"not a regular file: {info.name}")
            return fobj

        return members, open_tar_member

    raise ArchiveOpenError(path, "not a zip or tar archive")


def _materialize(opener, name: str, info: Any, dest: Path) -> None:
    try:
        with opener(info) as src, dest.open("wb") as dst:
            shutil.copyfileobj(src, dst)
    except Exception as e:
        # bad CRC, corrupt deflate/xz data, encrypted or unsupported members
        raise EntryReadError(name, f"{type(e).__name__}: {e}") from e


def iter_corpus_entries(
    archive_path: str | Path,
    work_dir: Optional[str | Path] = None,
) -> Iterator[CorpusEntry]:
    """
    Lazily yield one CorpusEntry per file inside `archive_path`.

    Failing to open the archive raises ArchiveOpenError before anything is
    yielded. An entry that cannot be extracted is logged and skipped.
    The iterator is single-pass.
    """
    path = Path(archive_path)
    if not path.is_file():
        raise ArchiveOpenError(path, "file not found")

    with ExitStack() as stack:
        try:
            members, opener = _open_members(path, stack)
        except (OSError, zipfile.BadZipFile, tarfile.TarError) as e:
            raise ArchiveOpenError(path, str(e)) from e

        if work_dir is None:
            tmp_root = Path(stack.enter_context(tempfile.TemporaryDirectory(prefix="corpus-")))
        else:
            tmp_root = Path(work_dir)
            tmp_root.mkdir(parents=True, exist_ok=True)

        logger.info("archive %s: %d entries", path, len(members))

        for i, (name, info) in enumerate(members):
            temp = tmp_root / f"corpus-{i}.txt"
            try:
                _materialize(opener, name, info, temp)
            except EntryReadError as e:
                logger.warning("%s", e)
                temp.unlink(missing_ok=True)
                continue

            try:
                with temp.open(encoding="utf-8") as stream:
                    yield CorpusEntry(name=name, stream=stream)
            finally:
                temp.unlink(missing_ok=True)
