"""Downloaded image model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CachedImage:
    """Raw image payload as returned by the server."""

    url: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)
