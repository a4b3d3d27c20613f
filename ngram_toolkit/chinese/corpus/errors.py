from __future__ import annotations

from pathlib import Path


class CorpusToolsError(RuntimeError):
    """Base class for errors reported by the corpus tools."""


class ArchiveOpenError(CorpusToolsError):
    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        super().__init__(f"cannot open corpus archive {self.path}: {reason}")


class EntryReadError(CorpusToolsError):
    def __init__(self, entry: str, reason: str):
        self.entry = entry
        super().__init__(f"cannot read corpus entry {entry}: {reason}")


class ExportWriteError(CorpusToolsError):
    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        super().__init__(f"cannot write {self.path}: {reason}")


class MergeWriteError(CorpusToolsError):
    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        super().__init__(f"cannot write merged dictionary {self.path}: {reason}")


class MergeReadError(CorpusToolsError):
    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        super().__init__(f"cannot read dictionary source {self.path}: {reason}")
