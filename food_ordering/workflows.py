"""
Client request workflow.

Runs the client-facing operations (registration, profile, delivery address,
order placement, order summary, order history and cancellation) and tells
the web layer which page to show next. Per-client state that lives between
requests is carried in an explicit RequestContext instead of a session.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from .domain.entities import Delivery, OrderItem, UserIdentity
from .domain.exceptions import FoodOrderingException
from .domain.outcomes import (
    REGISTRATION_FAILED_MESSAGE,
    OrderCancelled,
    RegistrationSucceeded,
)
from .logging_config import get_logger
from .models import DeliveryAddressForm, RegistrationForm
from .repositories.client_repository import IAccountRegistry, IPrincipalProvider
from .services.delivery_service import build_delivery
from .services.order_lifecycle_service import OrderLifecycleGuard
from .services.order_service import Checkout, FoodOrderService
from .services.registration_service import ClientRegistrationService

logger = get_logger(__name__)

NO_CLIENT_PROFILE_MESSAGE = "No client profile available."
ORDER_PROCESSED_MESSAGE = "Order processed successfully!"
NO_ORDER_TO_DISPLAY_MESSAGE = "No order found to display."
ORDER_DETAILS_UNAVAILABLE_MESSAGE = "Order details could not be retrieved."
USER_NOT_FOUND_MESSAGE = "User not found. Please login again."
ORDERS_UNAVAILABLE_MESSAGE = "Unable to retrieve orders at this time."
CANCELLATION_UNAVAILABLE_MESSAGE = "Order could not be cancelled at this time."


class Page(str, Enum):
    """Pages the web layer can render or redirect to."""

    REGISTER_CLIENT_FORM = "registerClientForm"
    REGISTRATION_SUCCESS = "registrationSuccessView"
    LOGIN = "login"
    LOGIN_VIEW = "loginView"
    CLIENT_LOGGED_IN = "clientLoggedInView"
    CLIENT_DETAILS = "clientDetails"
    DELIVERY_ADDRESS = "deliveryAddressView"
    CONFIRMATION = "confirmationPage"
    ORDER_SUMMARY = "orderSummaryView"
    ORDER_FAILED = "orderFailed"
    USER_ORDERS = "userOrders"
    ERROR = "errorPage"


@dataclass(frozen=True)
class RequestContext:
    """State of one client carried from request to request."""

    user: Optional[UserIdentity] = None
    delivery: Optional[Delivery] = None
    items: Tuple[OrderItem, ...] = ()
    unique_food_number: Optional[str] = None

    def to_checkout(self) -> Checkout:
        return Checkout(
            username=self.user.username if self.user else None,
            delivery=self.delivery,
            items=self.items,
        )


@dataclass
class PageResult:
    """
    What the web layer should do after an operation.

    Attributes:
        page: Page to render, or to redirect to when redirect is set
        redirect: Whether to redirect instead of rendering
        model: Values for rendering the page
        flash: Messages that survive the redirect
        context: Request context to keep for the next request
    """

    page: Page
    redirect: bool = False
    model: Dict[str, Any] = field(default_factory=dict)
    flash: Dict[str, Any] = field(default_factory=dict)
    context: RequestContext = field(default_factory=RequestContext)


def _form_errors(error: ValidationError) -> List[Dict[str, str]]:
    return [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in error.errors()
    ]


class ClientWorkflow:
    """Client operations of the food ordering application."""

    def __init__(
        self,
        registration_service: ClientRegistrationService,
        order_service: FoodOrderService,
        lifecycle_guard: OrderLifecycleGuard,
        account_registry: IAccountRegistry,
        principal_provider: IPrincipalProvider,
    ):
        self.registration_service = registration_service
        self.order_service = order_service
        self.lifecycle_guard = lifecycle_guard
        self.account_registry = account_registry
        self.principal_provider = principal_provider

    def register_client(
        self, params: Dict[str, str], context: RequestContext
    ) -> PageResult:
        try:
            form = RegistrationForm.from_params(params)
        except ValidationError as e:
            logger.info("registration_form_invalid", errors=len(e.errors()))
            return PageResult(
                page=Page.REGISTER_CLIENT_FORM,
                redirect=True,
                flash={"errorMessage": REGISTRATION_FAILED_MESSAGE},
                context=context,
            )

        outcome = self.registration_service.resolve_registration(form)
        if isinstance(outcome, RegistrationSucceeded):
            return PageResult(
                page=Page.REGISTRATION_SUCCESS,
                redirect=True,
                flash={"registeredClient": outcome.client},
                context=context,
            )
        return PageResult(
            page=Page.REGISTER_CLIENT_FORM,
            redirect=True,
            flash={"errorMessage": outcome.message},
            context=context,
        )

    def show_client_logged_in(self, context: RequestContext) -> PageResult:
        if context.user is None:
            return PageResult(page=Page.LOGIN, redirect=True, context=context)
        username = context.user.username
        return PageResult(
            page=Page.CLIENT_LOGGED_IN,
            model={
                "username": username,
                "user": self.account_registry.get_user_by_username(username),
            },
            context=context,
        )

    def show_user_profile(self, context: RequestContext) -> PageResult:
        principal = self.principal_provider.lookup_authenticated_principal()
        if principal is None:
            return PageResult(page=Page.LOGIN, redirect=True, context=context)

        client = self.account_registry.get_client_by_username(principal.username)
        model: Dict[str, Any] = {"user": principal}
        if client is None:
            model["errorMessage"] = NO_CLIENT_PROFILE_MESSAGE
        else:
            model["client"] = client
        return PageResult(page=Page.CLIENT_DETAILS, model=model, context=context)

    def submit_delivery_address(
        self, params: Dict[str, Any], context: RequestContext
    ) -> PageResult:
        """
        Validate the address form and keep the delivery in the context.

        On validation errors the context is returned unchanged and the
        address page is shown again.
        """
        try:
            form = DeliveryAddressForm.model_validate(params)
        except ValidationError as e:
            return PageResult(
                page=Page.DELIVERY_ADDRESS,
                model={"errors": _form_errors(e)},
                context=context,
            )

        delivery = build_delivery(form)
        return PageResult(
            page=Page.CONFIRMATION,
            redirect=True,
            model={"delivery": delivery},
            context=replace(context, delivery=delivery),
        )

    def process_order(self, context: RequestContext) -> PageResult:
        try:
            unique_food_number = self.order_service.process_order(context.to_checkout())
        except Exception as e:
            reason = e.message if isinstance(e, FoodOrderingException) else str(e)
            logger.warning("order_processing_failed", reason=reason, exc_info=True)
            return PageResult(
                page=Page.ORDER_FAILED,
                redirect=True,
                flash={"errorMessage": f"Error processing order: {reason}"},
                context=context,
            )

        return PageResult(
            page=Page.ORDER_SUMMARY,
            redirect=True,
            flash={"successMessage": ORDER_PROCESSED_MESSAGE},
            context=replace(
                context, delivery=None, items=(), unique_food_number=unique_food_number
            ),
        )

    def show_order_summary(self, context: RequestContext) -> PageResult:
        if not context.unique_food_number:
            return PageResult(
                page=Page.ERROR,
                model={"errorMessage": NO_ORDER_TO_DISPLAY_MESSAGE},
                context=context,
            )

        order = self.order_service.show_order_summary(context.unique_food_number)
        if order is None:
            return PageResult(
                page=Page.ERROR,
                model={"errorMessage": ORDER_DETAILS_UNAVAILABLE_MESSAGE},
                context=context,
            )
        return PageResult(
            page=Page.ORDER_SUMMARY,
            model={"foodOrderWithOrderItems": order},
            context=context,
        )

    def show_client_orders(self, context: RequestContext) -> PageResult:
        if context.user is None:
            return PageResult(
                page=Page.LOGIN_VIEW,
                model={"errorMessage": USER_NOT_FOUND_MESSAGE},
                context=context,
            )

        try:
            history = self.order_service.get_client_order_history(context.user.username)
        except FoodOrderingException as e:
            logger.error("order_history_unavailable", reason=e.message)
            return PageResult(
                page=Page.ERROR,
                model={"errorMessage": ORDERS_UNAVAILABLE_MESSAGE},
                context=context,
            )
        return PageResult(
            page=Page.USER_ORDERS,
            model={"clientOrderHistory": history},
            context=context,
        )

    def cancel_order(
        self, order_id: int, context: RequestContext, now: Optional[datetime] = None
    ) -> PageResult:
        try:
            outcome = self.lifecycle_guard.attempt_cancellation(order_id, now)
        except Exception:
            logger.exception("order_cancellation_error", order_id=order_id)
            return PageResult(
                page=Page.USER_ORDERS,
                redirect=True,
                flash={"errorMessage": CANCELLATION_UNAVAILABLE_MESSAGE},
                context=context,
            )

        key = "successMessage" if isinstance(outcome, OrderCancelled) else "errorMessage"
        return PageResult(
            page=Page.USER_ORDERS,
            redirect=True,
            flash={key: outcome.message},
            context=context,
        )
