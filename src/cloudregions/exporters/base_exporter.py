from __future__ import annotations

from abc import ABC, abstractmethod

from ..core.store import DatasetSnapshot


class BaseExporter(ABC):
    """Abstract base class for file exporters.

    Subclasses should provide a DEFAULT_FILENAME and implement `export`.
    """

    DEFAULT_FILENAME: str = "regions"

    @abstractmethod
    async def export(self, snapshot: DatasetSnapshot, path: str | None = None) -> str:
        """Export the snapshot to disk. Return the written path."""
        raise NotImplementedError()
