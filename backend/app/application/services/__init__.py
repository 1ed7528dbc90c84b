from .record_query import query_records
from .fault_injection import FaultInjector, NO_FAULTS
from .record_service import RecordService
from .user_service import UserService
from .product_service import ProductService
from .order_service import OrderService
from .dashboard_service import DashboardService
from .image_processing_service import ImageProcessingService
from .landing_page_generator import LandingPageGenerator, build_cod_form_config
from .landing_page_publisher import LandingPagePublisher
from .cod_order_service import CODOrderService, generate_order_id
from .sse_manager import SSEManager

__all__ = [
    "query_records",
    "FaultInjector",
    "NO_FAULTS",
    "RecordService",
    "UserService",
    "ProductService",
    "OrderService",
    "DashboardService",
    "ImageProcessingService",
    "LandingPageGenerator",
    "build_cod_form_config",
    "LandingPagePublisher",
    "CODOrderService",
    "generate_order_id",
    "SSEManager",
]
