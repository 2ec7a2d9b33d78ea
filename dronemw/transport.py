"""Transport interface and a scheme-keyed registry of transport back-ends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Optional

from dronemw.url import Url


class Transport(ABC):
    """A datagram sink that packets are sent to."""

    @abstractmethod
    def connect(self, host: str, port: int) -> bool:
        """Prepare to send to host:port; return False on failure."""

    @abstractmethod
    def send(self, data: bytes) -> bool:
        """Send one packet; return False on failure."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying resources."""

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


Creator = Callable[[], Transport]


class Factory:
    """Maps URL schemes to transport constructors."""

    _instance: ClassVar[Optional[Factory]] = None

    def __init__(self) -> None:
        self._creators: dict[str, Creator] = {}

    @classmethod
    def instance(cls) -> Factory:
        """The process-wide factory."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_backend(self, scheme: str, creator: Creator) -> None:
        """Register a creator for a scheme; the first registration wins."""
        self._creators.setdefault(scheme, creator)

    def make(self, url: Url) -> Optional[Transport]:
        """Create a transport for the URL's scheme, or None if unknown."""
        creator = self._creators.get(url.scheme)
        return creator() if creator is not None else None