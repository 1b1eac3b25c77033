"""
Dependency Inversion Principle.

- High-level modules should not depend on low-level modules. Both should
  depend on abstractions.
- Abstractions should not depend on details. Details should depend on
  abstractions.

``TightNotification`` constructs its email and SMS senders itself. After
introducing the ``Message`` abstraction, ``Notification`` receives any
collection of messages and never names a concrete sender.

The customer example walks the same path for data access: a factory first,
then the dependency supplied through the constructor, a property, or a
method.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from patternbook.application.decorators import demo
from patternbook.domain.base.exceptions import MissingDependencyError


class PlainEmail:
    def __init__(self, to_address: str = "", subject: str = "", content: str = ""):
        self.to_address = to_address
        self.subject = subject
        self.content = content

    def send_email(self) -> None:
        print("Send email")


class PlainSMS:
    def __init__(self, phone_number: str = "", message: str = ""):
        self.phone_number = phone_number
        self.message = message

    def send_sms(self) -> None:
        print("Send sms")


class TightNotification:
    """Depends on both concrete senders and creates them itself."""

    def __init__(self):
        self._email = PlainEmail()
        self._sms = PlainSMS()

    def send(self) -> None:
        self._email.send_email()
        self._sms.send_sms()


class Message(ABC):
    @abstractmethod
    def send_message(self) -> None:
        pass


class Email(Message):
    def __init__(self, to_address: str = "", subject: str = "", content: str = ""):
        self.to_address = to_address
        self.subject = subject
        self.content = content

    def send_message(self) -> None:
        print("Send email")


class SMS(Message):
    def __init__(self, phone_number: str = "", message: str = ""):
        self.phone_number = phone_number
        self.message = message

    def send_message(self) -> None:
        print("Send sms")


class Notification:
    def __init__(self, messages: Iterable[Message]):
        self._messages: List[Message] = list(messages)

    def send(self) -> None:
        for message in self._messages:
            message.send_message()


class CustomerDataAccess(ABC):
    """The abstraction both the business logic and the data access depend on."""

    @abstractmethod
    def get_customer_name(self, customer_id: int) -> str:
        pass


class DummyCustomerDataAccess(CustomerDataAccess):
    def get_customer_name(self, customer_id: int) -> str:
        return "Dummy Customer Name"


class DataAccessFactory:
    @staticmethod
    def get_customer_data_access() -> CustomerDataAccess:
        return DummyCustomerDataAccess()


class CustomerBusinessLogic:
    """Depends on the abstraction but still asks a factory for it."""

    def __init__(self):
        self._data_access = DataAccessFactory.get_customer_data_access()

    def get_customer_name(self, customer_id: int) -> str:
        return self._data_access.get_customer_name(customer_id)


class ConstructorInjectedLogic:
    def __init__(self, data_access: Optional[CustomerDataAccess] = None):
        self._data_access = data_access if data_access is not None else DummyCustomerDataAccess()

    def get_customer_name(self, customer_id: int) -> str:
        return self._data_access.get_customer_name(customer_id)


class PropertyInjectedLogic:
    def __init__(self):
        self._data_access: Optional[CustomerDataAccess] = None

    @property
    def data_access(self) -> Optional[CustomerDataAccess]:
        return self._data_access

    @data_access.setter
    def data_access(self, value: CustomerDataAccess) -> None:
        self._data_access = value

    def get_customer_name(self, customer_id: int) -> str:
        if self._data_access is None:
            raise MissingDependencyError(type(self).__name__, "data_access")
        return self._data_access.get_customer_name(customer_id)


class DataAccessDependency(ABC):
    """Contract for receiving the data access through a method call."""

    @abstractmethod
    def set_dependency(self, data_access: CustomerDataAccess) -> None:
        pass


class MethodInjectedLogic(DataAccessDependency):
    def __init__(self):
        self._data_access: Optional[CustomerDataAccess] = None

    def set_dependency(self, data_access: CustomerDataAccess) -> None:
        self._data_access = data_access

    def get_customer_name(self, customer_id: int) -> str:
        if self._data_access is None:
            raise MissingDependencyError(type(self).__name__, "data_access")
        return self._data_access.get_customer_name(customer_id)


class ConstructorCustomerService:
    def __init__(self):
        self._customer_bl = ConstructorInjectedLogic(DummyCustomerDataAccess())

    def get_customer_name(self, customer_id: int) -> str:
        return self._customer_bl.get_customer_name(customer_id)


class PropertyCustomerService:
    def __init__(self):
        self._customer_bl = PropertyInjectedLogic()
        self._customer_bl.data_access = DummyCustomerDataAccess()

    def get_customer_name(self, customer_id: int) -> str:
        return self._customer_bl.get_customer_name(customer_id)


class MethodCustomerService:
    def __init__(self):
        self._customer_bl = MethodInjectedLogic()
        self._customer_bl.set_dependency(DummyCustomerDataAccess())

    def get_customer_name(self, customer_id: int) -> str:
        return self._customer_bl.get_customer_name(customer_id)


@demo("dependency-inversion", category="solid", summary="Depend on Message and CustomerDataAccess, not on details")
def run() -> None:
    print("Tightly coupled notification:")
    TightNotification().send()

    print("Notification over the Message abstraction:")
    Notification([Email(to_address="a@example.com"), SMS(phone_number="555-0100")]).send()

    print(f"Factory: {CustomerBusinessLogic().get_customer_name(1)}")
    for service in (ConstructorCustomerService(), PropertyCustomerService(), MethodCustomerService()):
        print(f"{type(service).__name__}: {service.get_customer_name(1)}")
