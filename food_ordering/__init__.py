"""
Food Ordering Package.

Core of the food ordering application: client registration, delivery
addresses, order placement, order history and order cancellation.
Web delivery, authentication and persistence are provided by callers
through the repository interfaces.
"""

__version__ = "1.0.0"

from .config import settings
from .dependencies import create_client_workflow
from .workflows import ClientWorkflow, Page, PageResult, RequestContext

__all__ = [
    "ClientWorkflow",
    "create_client_workflow",
    "Page",
    "PageResult",
    "RequestContext",
    "settings",
    "__version__",
]
