from abc import ABC, abstractmethod


class PathIdentityPort(ABC):
    @abstractmethod
    def same_file(self, first: str, second: str) -> bool:
        """Tell whether two paths name the same on-disk object (False if either is missing)."""
        raise NotImplementedError
