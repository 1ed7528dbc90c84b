"""Domain entity: a product in the catalogue."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Product:
    """Core domain entity for a catalogue product."""

    name: str
    description: str
    price: float
    category: str
    stock: int = 0
    image_url: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        name: str | None = None,
        description: str | None = None,
        price: float | None = None,
        category: str | None = None,
        stock: int | None = None,
        image_url: str | None = None,
    ) -> None:
        """Update the supplied fields and refresh the updated_at timestamp."""
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if price is not None:
            self.price = price
        if category is not None:
            self.category = category
        if stock is not None:
            self.stock = stock
        if image_url is not None:
            self.image_url = image_url
        self.updated_at = datetime.now(timezone.utc)
