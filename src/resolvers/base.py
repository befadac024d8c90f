from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List


@dataclass(frozen=True)
class ResolvedDate:
    matched_text: str
    resolved_date: datetime
    day_level_certainty: bool


class DateResolver(ABC):
    @abstractmethod
    def resolve(self, text: str, reference: datetime) -> List[ResolvedDate]:
        """
        Must return every date-like phrase found in ``text``, in the order it appears,
        resolved against ``reference``.
        """
        raise NotImplementedError


class NullResolver(DateResolver):
    def resolve(self, text: str, reference: datetime) -> List[ResolvedDate]:
        return []
