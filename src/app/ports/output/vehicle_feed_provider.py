from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import FeedSnapshot


class IVehicleFeedProvider(ABC):
    """Port for obtaining one snapshot of the live vehicle monitoring feed."""

    @abstractmethod
    async def fetch_snapshot(self) -> FeedSnapshot:
        raise NotImplementedError
