from abc import ABC, abstractmethod
from typing import Any


class IClient(ABC):
    """Interface every vendor client builder implements."""

    @abstractmethod
    def get_client(self) -> Any:
        """Return the underlying client used to execute requests."""
