"""Groq product LLM client: concrete implementation of the ProductLLMClient port.

Reuses GroqClient for API calls and adds the prompt engineering for
product classification, design theme, and marketing copy. Replies are
validated with strict pydantic schemas; anything that does not fit raises
MalformedReplyError so the caller can substitute its defaults.
"""

import json
import logging
import re
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.application.interfaces import ChatProvider, ProductLLMClient
from app.application.schemas.llm_replies import (
    ClassificationReply,
    DesignThemeReply,
    GeneratedContentReply,
)
from app.domain.entities import (
    FAQ,
    ChatMessage,
    ColorPalette,
    DesignTheme,
    FontPairing,
    GeneratedContent,
    ProductClassification,
    ProductInfo,
    Testimonial,
)
from app.domain.exceptions import MalformedReplyError
from app.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

logger = logging.getLogger(__name__)
plog = PipelineLogger("GroqProductLLMClient")

ReplyT = TypeVar("ReplyT", bound=BaseModel)

_CLASSIFY_PROMPT = """Classify this product based on the information provided:

Product Name: {name}
Description: {description}
Category: {category}
Price: ${price}

Please classify this product and return a JSON object with:
- category: one of [electronics, fashion, home, beauty, sports, books, other]
- subcategory: specific subcategory
- targetAudience: one of [men, women, unisex, kids, general]
- priceRange: one of [budget, mid-range, premium, luxury] based on price

Return only valid JSON."""

_THEME_PROMPT = """Generate a design theme for a landing page for a {category} product in the {subcategory} subcategory, targeting {target_audience} audience in the {price_range} price range.

Return a JSON object with:
- name: theme name
- colorPalette: {{ primary, secondary, accent, background, text, textLight }} (hex colors)
- fonts: {{ heading, body, accent }} (Google Fonts names)
- style: one of [modern, classic, minimalist, bold, elegant]

Make sure colors are appropriate for the product category and target audience.
Return only valid JSON."""

_CONTENT_PROMPT = """Generate persuasive landing page content for this product:

Product: {name}
Description: {description}
Price: ${price}
Category: {category}
Target Audience: {target_audience}

Generate a JSON object with:
- headline: compelling main headline (max 60 chars)
- subheadline: supporting headline (max 120 chars)
- description: detailed product description (2-3 paragraphs)
- benefits: array of 5-7 key benefits
- upsellCopy: persuasive upsell text
- urgencyText: create urgency (limited time, stock, etc.)
- ctaText: call-to-action button text
- testimonials: array of 3 realistic testimonials with name, rating (1-5), text, verified: true
- faq: array of 5 relevant FAQ items with question and answer

Make it compelling and conversion-focused. Return only valid JSON."""

_FENCED_JSON = re.compile(r"```(?:json)?\s*\n?(.*?)\n?\s*```", re.DOTALL)


class GroqProductLLMClient(ProductLLMClient):
    """Concrete product LLM client using a chat completion provider (Groq)."""

    def __init__(
        self,
        chat_provider: ChatProvider,
        model: str = "mixtral-8x7b-32768",
        temperature: float = 0.7,
        max_tokens: int = 2000,
    ):
        self._provider = chat_provider
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens

    async def classify_product(self, product_info: ProductInfo) -> ProductClassification:
        prompt = _CLASSIFY_PROMPT.format(
            name=product_info.name,
            description=product_info.description,
            category=product_info.category,
            price=product_info.price,
        )
        reply = await self._ask("classification", prompt, ClassificationReply)
        plog.detail(
            "Classified product",
            category=reply.category,
            audience=reply.target_audience,
            price_range=reply.price_range,
        )
        return ProductClassification(
            category=reply.category,
            subcategory=reply.subcategory,
            target_audience=reply.target_audience,
            price_range=reply.price_range,
        )

    async def generate_design_theme(
        self, classification: ProductClassification
    ) -> DesignTheme:
        prompt = _THEME_PROMPT.format(
            category=classification.category,
            subcategory=classification.subcategory,
            target_audience=classification.target_audience,
            price_range=classification.price_range,
        )
        reply = await self._ask("design theme", prompt, DesignThemeReply)
        palette = reply.color_palette
        return DesignTheme(
            name=reply.name,
            color_palette=ColorPalette(
                primary=palette.primary,
                secondary=palette.secondary,
                accent=palette.accent,
                background=palette.background,
                text=palette.text,
                text_light=palette.text_light,
            ),
            fonts=FontPairing(
                heading=reply.fonts.heading,
                body=reply.fonts.body,
                accent=reply.fonts.accent,
            ),
            style=reply.style,
        )

    async def generate_content(
        self,
        product_info: ProductInfo,
        classification: ProductClassification,
    ) -> GeneratedContent:
        prompt = _CONTENT_PROMPT.format(
            name=product_info.name,
            description=product_info.description,
            price=product_info.price,
            category=classification.category,
            target_audience=classification.target_audience,
        )
        reply = await self._ask("content", prompt, GeneratedContentReply)
        return GeneratedContent(
            headline=reply.headline,
            subheadline=reply.subheadline,
            description=reply.description,
            benefits=list(reply.benefits),
            upsell_copy=reply.upsell_copy,
            urgency_text=reply.urgency_text,
            cta_text=reply.cta_text,
            testimonials=[
                Testimonial(
                    name=t.name,
                    rating=t.rating,
                    text=t.text,
                    verified=t.verified,
                    avatar=t.avatar,
                )
                for t in reply.testimonials
            ],
            faq=[FAQ(question=f.question, answer=f.answer) for f in reply.faq],
        )

    async def _ask(self, stage: str, prompt: str, schema: type[ReplyT]) -> ReplyT:
        """Send ``prompt`` and decode the reply into ``schema``.

        Raises:
            MalformedReplyError: If the reply holds no JSON object or the
                object does not validate against ``schema``.
            ServiceProviderError: If the provider call itself fails.
        """
        result = await self._provider.complete(
            [ChatMessage.user(prompt)],
            self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        plog.detail(
            f"LLM {stage} reply received",
            model=result.model or self._model,
            tokens=result.usage.total_tokens,
        )

        try:
            data = json.loads(self._extract_json(result.content))
            return schema.model_validate(data)
        except (ValueError, PydanticValidationError) as e:
            plog.step_warning(PipelineStage.PIPELINE, f"Malformed {stage} reply", error=e)
            raise MalformedReplyError(stage, result.content) from e

    @staticmethod
    def _extract_json(text: str) -> str:
        """Extract JSON from a response that might be wrapped in markdown code blocks."""
        if "```" in text:
            match = _FENCED_JSON.search(text)
            if match:
                return match.group(1).strip()

        text = text.strip()
        if text.startswith("{"):
            return text

        raise ValueError(f"Could not extract JSON from LLM response: {text[:200]}")
