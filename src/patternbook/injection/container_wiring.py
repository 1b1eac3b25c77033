"""
Container injection.

The same ``ConstructorUserLogic`` as in the styles demo, but nobody calls its
constructor by hand: the container reads the constructor's type hints and
supplies whatever is bound to ``EmailService``.
"""
from patternbook.application.decorators import demo
from patternbook.infrastructure.di.container import DIContainer
from patternbook.injection.styles import ConstructorUserLogic, EmailService, OutlookEmailService


def build_container() -> DIContainer:
    container = DIContainer()
    container.register_singleton(EmailService, OutlookEmailService)
    return container


@demo("container-injection", category="injection", summary="Let a DI container wire the constructor")
def run() -> None:
    container = build_container()

    user_logic = container.get(ConstructorUserLogic)
    print(f"Resolved email service: {type(user_logic.email_service).__name__}")
    user_logic.register("user@example.com", "password")

    other = container.get(ConstructorUserLogic)
    print(f"New logic object: {other is not user_logic}")
    print(f"Shared email service: {other.email_service is user_logic.email_service}")
