from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ...core.enums import PoolMode
from ...members.model import Member


@dataclass(frozen=True)
class PoolRequest:
    mode: PoolMode
    day: Optional[str] = None
    event_id: Optional[str] = None


class PoolStrategy(ABC):
    """Strategy Pattern: encapsulate where the candidate members come from."""

    @abstractmethod
    def candidates(self, *, members: Sequence[Member], request: PoolRequest) -> List[Member]:
        raise NotImplementedError
