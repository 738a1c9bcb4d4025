from __future__ import annotations

from abc import ABC, abstractmethod


class TrackListProvider(ABC):
    """
    Port for external track list enrichment.

    Total function: implementations never raise. Any lookup failure yields
    an empty list.
    """

    @abstractmethod
    def fetch_track_list(self, external_id: str | None) -> list[str]: ...
