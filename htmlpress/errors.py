from __future__ import annotations


class ContentError(Exception):
    pass


class NotFoundError(ContentError, LookupError):
    def __init__(self, kind: str, slug: str) -> None:
        super().__init__(f"{kind} not found: {slug}")
        self.kind = kind
        self.slug = slug


class WalkError(ContentError):
    """Raised when a content directory cannot be fully walked."""
