from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from werkzeug.security import safe_join

INDEX_FILENAME = "index.html"


def find_file_under(root: Path, relative: str) -> Optional[Path]:
    """
    Resolves a request path against root.
    A directory stands for its own index.html. Returns None for traversal
    attempts, missing files and directories without an index.
    """
    if not relative:
        return None
    joined = safe_join(str(root), relative)
    if joined is None:
        return None
    candidate = Path(joined)
    if candidate.is_dir():
        candidate = candidate / INDEX_FILENAME
    return candidate if candidate.is_file() else None


@dataclass
class OutputRepository:
    """
    Repository pattern: encapsulates the build output directory
    shared by the build tool, the fallback writer and the HTTP layer.
    """
    output_dir: Path

    @property
    def index_path(self) -> Path:
        return self.output_dir / INDEX_FILENAME

    def ensure_exists(self) -> Path:
        # Safe to call repeatedly and from both orchestration branches.
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir

    def has_index(self) -> bool:
        return self.index_path.is_file()

    def read_index(self) -> Optional[bytes]:
        if not self.has_index():
            return None
        return self.index_path.read_bytes()

    def write_index(self, html: str) -> Path:
        # Whole-file replacement; last writer wins.
        self.index_path.write_bytes(html.encode("utf-8"))
        return self.index_path

    def find_static_file(self, relative: str) -> Optional[Path]:
        return find_file_under(self.output_dir, relative)
