"""Filesystem implementation of PhotoStorage."""

from __future__ import annotations

import logging
import random
import re
import time
from collections.abc import Callable
from pathlib import Path, PurePosixPath

from autolink.domain.submission import PhotoUpload
from autolink.ports.photo_storage import PhotoStorage

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9._-]")
_MAX_STEM_LENGTH = 50
_FALLBACK_EXTENSION = ".png"


def build_photo_filename(original: str, timestamp_ms: int, suffix: int) -> str:
    """
    <epoch-ms>-<random>-<sanitized stem><ext>

    Only [A-Za-z0-9._-] survive sanitisation; the stem is cut to 50
    characters and a missing extension falls back to .png.
    """
    sanitized = _UNSAFE_FILENAME_CHARS.sub("", PurePosixPath(original).name)
    path = PurePosixPath(sanitized)
    extension = path.suffix or _FALLBACK_EXTENSION
    stem = path.stem if path.suffix else sanitized
    return f"{timestamp_ms}-{suffix}-{stem[:_MAX_STEM_LENGTH]}{extension}"


class LocalPhotoStorage(PhotoStorage):
    """
    Writes uploads into a directory served as static files.

    - upload_dir: directory on disk (created on first write)
    - public_prefix: URL path the directory is mounted under
    """

    def __init__(
        self,
        upload_dir: Path,
        public_prefix: str = "/images/uploads",
        clock: Callable[[], float] = time.time,
        random_suffix: Callable[[], int] = lambda: random.randint(0, 999_999_999),
    ) -> None:
        self._upload_dir = Path(upload_dir)
        self._public_prefix = public_prefix.rstrip("/")
        self._clock = clock
        self._random_suffix = random_suffix

    def save(self, photo: PhotoUpload) -> str:
        filename = build_photo_filename(
            photo.filename,
            timestamp_ms=int(self._clock() * 1000),
            suffix=self._random_suffix(),
        )
        target = self._upload_dir / filename

        self._upload_dir.mkdir(parents=True, exist_ok=True)
        target.write_bytes(photo.content)

        public_path = f"{self._public_prefix}/{filename}"
        logger.info(
            "Photo saved",
            extra={"path": str(target), "public_path": public_path, "size": photo.size},
        )
        return public_path

    def delete(self, public_path: str) -> None:
        prefix = f"{self._public_prefix}/"
        if not public_path.startswith(prefix):
            return

        # Only ever touch files directly inside the upload directory
        filename = PurePosixPath(public_path[len(prefix) :]).name
        target = self._upload_dir / filename
        target.unlink(missing_ok=True)
        logger.info("Photo deleted", extra={"path": str(target)})
