from abc import ABC, abstractmethod

import httpx


class BaseSource(ABC):
    name: str

    @abstractmethod
    def fetch(self, client: httpx.Client) -> list:
        """
        Implement fetch -> normalize. Return the typed records, in source order.
        """
        raise NotImplementedError

    @abstractmethod
    def parse(self, payload: str) -> list:
        """Normalize an already-fetched page or feed."""
        raise NotImplementedError
