from .record_repository import RecordRepository
from .chat_provider import ChatProvider
from .product_llm_client import ProductLLMClient
from .product_sources import ProductScraper, ProductSearchExtractor
from .image_services import BackgroundRemover, ImageHost, UploadedImage
from .landing_page_repository import LandingPageRepository

__all__ = [
    "RecordRepository",
    "ChatProvider",
    "ProductLLMClient",
    "ProductScraper",
    "ProductSearchExtractor",
    "BackgroundRemover",
    "ImageHost",
    "UploadedImage",
    "LandingPageRepository",
]
