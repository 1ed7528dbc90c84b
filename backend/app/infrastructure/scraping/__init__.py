"""Product data extraction adapters."""

from .browse_ai_scraper import BrowseAiScraper
from .serpapi_product_search import SerpApiProductSearch

__all__ = ["BrowseAiScraper", "SerpApiProductSearch"]
