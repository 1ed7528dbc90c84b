from .common import ApiResponse, PaginatedResponse, PaginationResponse, ErrorResponse
from .user import UserCreate, UserUpdate, UserResponse
from .product import ProductCreate, ProductUpdate, ProductResponse
from .order import (
    AddressSchema,
    OrderItemCreate,
    OrderCreate,
    OrderUpdate,
    OrderItemResponse,
    OrderResponse,
)
from .dashboard import DashboardStatsResponse, TopProductResponse
from .landing_page import (
    CustomizationsSchema,
    GenerateLandingPageSchema,
    ValidateUrlRequest,
    ValidateUrlResponse,
    GenerationResponse,
    PublishLandingPageRequest,
    PublishedLandingPageResponse,
)
from .cod_order import CODFormDataSchema, CODOrderRequestSchema, CODOrderResponse

__all__ = [
    "ApiResponse",
    "PaginatedResponse",
    "PaginationResponse",
    "ErrorResponse",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "AddressSchema",
    "OrderItemCreate",
    "OrderCreate",
    "OrderUpdate",
    "OrderItemResponse",
    "OrderResponse",
    "DashboardStatsResponse",
    "TopProductResponse",
    "CustomizationsSchema",
    "GenerateLandingPageSchema",
    "ValidateUrlRequest",
    "ValidateUrlResponse",
    "GenerationResponse",
    "PublishLandingPageRequest",
    "PublishedLandingPageResponse",
    "CODFormDataSchema",
    "CODOrderRequestSchema",
    "CODOrderResponse",
]
