"""
Shared dependencies for the application.

Wires the services into a ClientWorkflow and configures logging from the
settings. The web layer calls create_client_workflow once at startup and
get_client_workflow per request.
"""

from typing import Optional

from .config import settings
from .logging_config import setup_logging
from .repositories.client_repository import IAccountRegistry, IPrincipalProvider
from .repositories.order_repository import IFoodOrderRepository
from .services.order_lifecycle_service import OrderLifecycleGuard
from .services.order_service import FoodOrderService
from .services.registration_service import ClientRegistrationService
from .workflows import ClientWorkflow

# Global workflow instance (set at startup)
_client_workflow: Optional[ClientWorkflow] = None


def create_client_workflow(
    account_registry: IAccountRegistry,
    order_repository: IFoodOrderRepository,
    principal_provider: IPrincipalProvider,
) -> ClientWorkflow:
    """
    Configure logging and build the client workflow.

    Args:
        account_registry: Client accounts and order history
        order_repository: Order store
        principal_provider: Authentication layer

    Returns:
        The workflow, also kept for get_client_workflow
    """
    global _client_workflow

    logger = setup_logging(
        log_level=settings.LOG_LEVEL,
        service_name=settings.SERVICE_NAME,
        use_json=settings.LOG_JSON,
    )

    _client_workflow = ClientWorkflow(
        registration_service=ClientRegistrationService(account_registry),
        order_service=FoodOrderService(order_repository, account_registry),
        lifecycle_guard=OrderLifecycleGuard(order_repository),
        account_registry=account_registry,
        principal_provider=principal_provider,
    )
    logger.info(
        "client_workflow_ready",
        app_name=settings.APP_NAME,
        cancellation_window_minutes=settings.ORDER_CANCELLATION_WINDOW_MINUTES,
    )
    return _client_workflow


def get_client_workflow() -> ClientWorkflow:
    """
    Get the workflow built at startup.

    Raises:
        RuntimeError: If create_client_workflow has not been called
    """
    if _client_workflow is None:
        raise RuntimeError("Client workflow not initialized")
    return _client_workflow
