"""
Order lifecycle guard.

Decides whether a placed order may still be cancelled and, if so, moves it
to CANCELLED through the order repository.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from ..config import settings
from ..domain.entities import FoodOrder, FoodOrderStatus, as_utc
from ..domain.outcomes import (
    ORDER_ALREADY_CANCELLED_MESSAGE,
    CancellationNotFound,
    CancellationOutcome,
    CancellationRejected,
    OrderCancelled,
    RejectionReason,
    window_expired_message,
)
from ..logging_config import get_logger
from ..repositories.order_repository import IFoodOrderRepository

logger = get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OrderLifecycleGuard:
    """
    Cancellation policy for food orders.

    An order can be cancelled while strictly less than the cancellation
    window has elapsed since it was placed. Cancelling an order that is
    already CANCELLED is rejected without touching the repository.
    """

    def __init__(
        self,
        order_repository: IFoodOrderRepository,
        window_minutes: Optional[int] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize the guard.

        Args:
            order_repository: Store used to look up and update orders
            window_minutes: Cancellation window, defaults to
                ORDER_CANCELLATION_WINDOW_MINUTES
            clock: Source of the current time when none is passed in
        """
        self.order_repository = order_repository
        if window_minutes is None:
            window_minutes = settings.ORDER_CANCELLATION_WINDOW_MINUTES
        self.window_minutes = window_minutes
        self.clock = clock

    @property
    def window(self) -> timedelta:
        return timedelta(minutes=self.window_minutes)

    def can_cancel(self, order: FoodOrder, now: datetime) -> bool:
        """Check the time window only; status is not considered."""
        elapsed = as_utc(now) - as_utc(order.order_time)
        return elapsed < self.window

    def attempt_cancellation(
        self, order_id: int, now: Optional[datetime] = None
    ) -> CancellationOutcome:
        """
        Cancel an order if the policy allows it.

        Args:
            order_id: Identifier of the order to cancel
            now: Current time; read once from the clock when omitted

        Returns:
            OrderCancelled, CancellationRejected or CancellationNotFound
        """
        if now is None:
            now = self.clock()

        order = self.order_repository.find_order_by_id(order_id)
        if order is None:
            logger.info("cancellation_order_not_found", order_id=order_id)
            return CancellationNotFound(order_id=order_id)

        if order.is_cancelled:
            logger.info("cancellation_already_cancelled", order_id=order_id)
            return CancellationRejected(
                order_id=order_id,
                message=ORDER_ALREADY_CANCELLED_MESSAGE,
                reason=RejectionReason.ALREADY_CANCELLED,
            )

        if not self.can_cancel(order, now):
            logger.info(
                "cancellation_window_expired",
                order_id=order_id,
                order_time=order.order_time.isoformat(),
                window_minutes=self.window_minutes,
            )
            return CancellationRejected(
                order_id=order_id,
                message=window_expired_message(self.window_minutes),
                reason=RejectionReason.WINDOW_EXPIRED,
            )

        self.order_repository.update_order_status(order_id, FoodOrderStatus.CANCELLED)
        logger.info("order_cancelled", order_id=order_id)
        return OrderCancelled(order_id=order_id)
