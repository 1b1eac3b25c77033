"""
Dependency injection styles.

``TightUserLogic`` creates its own collaborators with concrete constructors.
Once mail delivery sits behind ``EmailService`` the concrete service can be
created elsewhere and handed in through the constructor, a property setter,
or the method that needs it.
"""
from abc import ABC, abstractmethod
from typing import Optional

from patternbook.application.decorators import demo
from patternbook.domain.base.exceptions import MissingDependencyError
from patternbook.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

CONFIRMATION_MESSAGE = "ConfirmationMessage"


class GoogleOAuthService:
    def register_user(self, email_address: str, password: str) -> None:
        logger.debug("Registering user", email=email_address)
        print("Register a new Google user")


class EmailService(ABC):
    @abstractmethod
    def send_mail(self, email_address: str, message: str) -> None:
        pass


class GoogleEmailService(EmailService):
    def send_mail(self, email_address: str, message: str) -> None:
        print("Send an email using google")


class OutlookEmailService(EmailService):
    def send_mail(self, email_address: str, message: str) -> None:
        print("Send an email using outlook")


class TightUserLogic:
    """Creates its dependencies itself."""

    def __init__(self):
        self._auth_service = GoogleOAuthService()
        self._email_service = GoogleEmailService()

    def register(self, email_address: str, password: str) -> None:
        self._auth_service.register_user(email_address, password)
        self._email_service.send_mail(email_address, CONFIRMATION_MESSAGE)


class ConstructorUserLogic:
    def __init__(self, email_service: EmailService, auth_service: Optional[GoogleOAuthService] = None):
        self._email_service = email_service
        self._auth_service = auth_service or GoogleOAuthService()

    @property
    def email_service(self) -> EmailService:
        return self._email_service

    def register(self, email_address: str, password: str) -> None:
        self._auth_service.register_user(email_address, password)
        self._email_service.send_mail(email_address, CONFIRMATION_MESSAGE)


class SetterUserLogic:
    def __init__(self):
        self._auth_service = GoogleOAuthService()
        self._email_service: Optional[EmailService] = None

    @property
    def email_service(self) -> Optional[EmailService]:
        return self._email_service

    @email_service.setter
    def email_service(self, value: EmailService) -> None:
        self._email_service = value

    def register(self, email_address: str, password: str) -> None:
        if self._email_service is None:
            raise MissingDependencyError(type(self).__name__, "email_service")
        self._auth_service.register_user(email_address, password)
        self._email_service.send_mail(email_address, CONFIRMATION_MESSAGE)


class MethodUserLogic:
    def __init__(self):
        self._auth_service = GoogleOAuthService()

    def register(self, email_address: str, password: str, email_service: EmailService) -> None:
        self._auth_service.register_user(email_address, password)
        email_service.send_mail(email_address, CONFIRMATION_MESSAGE)


@demo("dependency-injection", category="injection", summary="Constructor, setter and method injection")
def run() -> None:
    print("Creates its own dependencies:")
    TightUserLogic().register("user@example.com", "password")

    print("Constructor injection:")
    ConstructorUserLogic(GoogleEmailService()).register("user@example.com", "password")

    print("Setter injection:")
    setter_logic = SetterUserLogic()
    setter_logic.email_service = OutlookEmailService()
    setter_logic.register("user@example.com", "password")

    print("Method injection:")
    MethodUserLogic().register("user@example.com", "password", OutlookEmailService())
