from __future__ import annotations

from abc import ABC, abstractmethod

from autolink.domain.submission import PhotoUpload


class PhotoStorage(ABC):
    """Port for persisting uploaded listing photos."""

    @abstractmethod
    def save(self, photo: PhotoUpload) -> str:
        """
        Persist the photo under a generated, collision-resistant name.

        Returns:
            Public path of the stored photo (e.g. /images/uploads/<name>)

        Raises:
            OSError: If the photo could not be written
        """
        ...

    @abstractmethod
    def delete(self, public_path: str) -> None:
        """Remove a previously saved photo. Missing files are ignored."""
        ...
