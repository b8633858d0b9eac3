"""
Client registration service.

Forwards a registration to the account registry and classifies what the
registry reports into a registration outcome.
"""

from ..domain.outcomes import (
    AccountRegistered,
    IdentityConflict,
    RegistrationDuplicate,
    RegistrationFailed,
    RegistrationOutcome,
    RegistrationSucceeded,
)
from ..logging_config import get_logger
from ..models import RegistrationForm
from ..repositories.client_repository import IAccountRegistry

logger = get_logger(__name__)


class ClientRegistrationService:
    """
    Resolves registration attempts into success, duplicate or failure.

    The registry is called exactly once per attempt and never retried.
    """

    def __init__(self, account_registry: IAccountRegistry):
        self.account_registry = account_registry

    def resolve_registration(self, form: RegistrationForm) -> RegistrationOutcome:
        """
        Register a client and classify the result.

        Args:
            form: Validated registration form

        Returns:
            RegistrationSucceeded with the created client,
            RegistrationDuplicate when the username or email is taken,
            RegistrationFailed for anything else
        """
        try:
            result = self.account_registry.register_account(
                form.to_client(),
                form.to_identity(),
                form.password.get_secret_value(),
            )
        except Exception:
            logger.exception("registration_error", username=form.username)
            return RegistrationFailed()

        if isinstance(result, AccountRegistered):
            logger.info("client_registered", username=form.username)
            return RegistrationSucceeded(client=result.client)

        if isinstance(result, IdentityConflict):
            logger.info(
                "registration_duplicate", username=form.username, field=result.field
            )
            return RegistrationDuplicate()

        logger.warning(
            "registration_failed",
            username=form.username,
            reason=getattr(result, "reason", None),
        )
        return RegistrationFailed()
