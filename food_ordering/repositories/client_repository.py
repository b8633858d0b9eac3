"""
Client repository interfaces (Abstract Base Classes).

Defines the contracts for account creation, client lookup and the
authenticated principal, independent of the underlying storage and
authentication mechanism.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..domain.entities import Client, ClientOrderHistory, UserIdentity
from ..domain.outcomes import RegistrationResult


class IAccountRegistry(ABC):
    """
    Abstract interface for client accounts.

    Implementations own password handling and persistence.
    """

    @abstractmethod
    def register_account(
        self, client: Client, identity: UserIdentity, password: str
    ) -> RegistrationResult:
        """
        Create the authentication identity and the client profile.

        Args:
            client: Client profile to create
            identity: Authentication identity to create
            password: Plain password, to be hashed by the implementation

        Returns:
            AccountRegistered, IdentityConflict or RegistrationError
        """
        pass

    @abstractmethod
    def get_client_by_username(self, username: str) -> Optional[Client]:
        """
        Find the client profile linked to a username.

        Returns:
            Client if found, None otherwise
        """
        pass

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[UserIdentity]:
        """
        Find an authentication identity by username.

        Returns:
            UserIdentity if found, None otherwise
        """
        pass

    @abstractmethod
    def get_client_order_history(self, username: str) -> ClientOrderHistory:
        """
        Load all orders placed by a client.

        Raises:
            Any storage error; callers treat it as a retrieval failure
        """
        pass


class IPrincipalProvider(ABC):
    """Abstract interface to the authentication layer."""

    @abstractmethod
    def lookup_authenticated_principal(self) -> Optional[UserIdentity]:
        """
        Return the identity of the current request.

        Returns:
            UserIdentity if authenticated, None otherwise
        """
        pass
