from .chat_message import ChatMessage, TokenUsage, ChatCompletionResult
from .user import User, UserRole, USER_ROLES
from .product import Product
from .order import Address, Order, OrderItem, OrderStatus, ORDER_STATUSES
from .query import QueryParams, Pagination, Page, SortOrder
from .dashboard import DashboardStats, TopProduct
from .landing_page import (
    ProductInfo,
    ProductClassification,
    ColorPalette,
    FontPairing,
    DesignTheme,
    Testimonial,
    FAQ,
    GeneratedContent,
    ProcessedImage,
    CountdownTimer,
    FieldRule,
    CODFormConfig,
    LandingPageData,
    GenerationStep,
    GenerationProgress,
    Customizations,
    GenerateLandingPageRequest,
    PublishedLandingPage,
    UrgencyLevel,
)
from .cod_order import CODFormData, CODOrderRequest, CODOrderResult

__all__ = [
    "ChatMessage",
    "TokenUsage",
    "ChatCompletionResult",
    "User",
    "UserRole",
    "USER_ROLES",
    "Product",
    "Address",
    "Order",
    "OrderItem",
    "OrderStatus",
    "ORDER_STATUSES",
    "QueryParams",
    "Pagination",
    "Page",
    "SortOrder",
    "DashboardStats",
    "TopProduct",
    "ProductInfo",
    "ProductClassification",
    "ColorPalette",
    "FontPairing",
    "DesignTheme",
    "Testimonial",
    "FAQ",
    "GeneratedContent",
    "ProcessedImage",
    "CountdownTimer",
    "FieldRule",
    "CODFormConfig",
    "LandingPageData",
    "GenerationStep",
    "GenerationProgress",
    "Customizations",
    "GenerateLandingPageRequest",
    "PublishedLandingPage",
    "UrgencyLevel",
    "CODFormData",
    "CODOrderRequest",
    "CODOrderResult",
]
