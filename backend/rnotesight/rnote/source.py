"""Read ``.rnote`` files from the configured notes directory."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from rnotesight.rnote.errors import DocumentNotFound

logger = logging.getLogger(__name__)

RNOTE_SUFFIX = ".rnote"


class DocumentSource:
    """Named access to the ``.rnote`` files under one root directory."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def list_documents(self) -> list[str]:
        if not self.root.is_dir():
            return []
        return sorted(
            p.relative_to(self.root).as_posix()
            for p in self.root.rglob(f"*{RNOTE_SUFFIX}")
            if p.is_file()
        )

    def resolve(self, name: str) -> Path:
        """Map a document name to a file, refusing anything outside the root."""
        if not name.endswith(RNOTE_SUFFIX):
            name += RNOTE_SUFFIX
        root = self.root.resolve()
        path = (root / name).resolve()
        if root not in path.parents:
            raise DocumentNotFound(name)
        if not path.is_file():
            raise DocumentNotFound(name)
        return path

    async def read_bytes(self, name: str) -> bytes:
        path = self.resolve(name)
        loop = asyncio.get_running_loop()
        blob = await loop.run_in_executor(None, path.read_bytes)
        logger.debug("Read %s (%d bytes)", path, len(blob))
        return blob
