"""Base collector for pipeline input stages"""
from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

T = TypeVar("T")


class BaseCollector(ABC, Generic[T]):
    """Base class for stages that gather items from disk"""

    @abstractmethod
    def collect(self) -> List[T]:
        """Collect items and return them in discovery order"""
        pass
