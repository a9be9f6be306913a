"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Article:
    """Core domain entity representing a published or draft article."""

    title: str
    content: str
    published: bool = False
    views: int = 0
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        title: str | None = None,
        content: str | None = None,
        published: bool | None = None,
    ) -> None:
        """Update article fields and refresh the updated_at timestamp."""
        if title is not None:
            self.title = title
        if content is not None:
            self.content = content
        if published is not None:
            self.published = published
        self.updated_at = datetime.now(timezone.utc)

    def toggle_published(self) -> None:
        self.published = not self.published
        self.updated_at = datetime.now(timezone.utc)

    def increment_views(self) -> None:
        # updated_at tracks editorial changes only
        self.views += 1
