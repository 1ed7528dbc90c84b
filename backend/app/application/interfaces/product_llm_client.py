"""Abstract interface (port) for the LLM-backed stages of landing page generation."""

from abc import ABC, abstractmethod

from app.domain.entities import (
    DesignTheme,
    GeneratedContent,
    ProductClassification,
    ProductInfo,
)


class ProductLLMClient(ABC):
    """Port for LLM interactions: implemented in infrastructure layer.

    Every method raises ``MalformedReplyError`` when the model answers with
    something that does not decode into the expected shape. Transport and
    provider failures surface as ``ServiceProviderError``.
    """

    @abstractmethod
    async def classify_product(self, product_info: ProductInfo) -> ProductClassification:
        """Classify category, audience, and price range of a product."""
        ...

    @abstractmethod
    async def generate_design_theme(
        self, classification: ProductClassification
    ) -> DesignTheme:
        """Pick a colour palette, font pairing, and style for the page."""
        ...

    @abstractmethod
    async def generate_content(
        self,
        product_info: ProductInfo,
        classification: ProductClassification,
    ) -> GeneratedContent:
        """Write the persuasive copy for the page."""
        ...
