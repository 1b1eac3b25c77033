"""
Single Responsibility Principle.

A class should have one, and only one, reason to change.

``ValidateSendInvitationService`` validates names, validates the address and
sends mail, so it changes whenever any of those rules change. The refactored
``InvitationService`` only coordinates; validation lives in
``UserNameService`` and ``EmailService`` and delivery behind ``MailSender``.

The journal example does the same for persistence: ``Journal`` keeps entries,
``PersistenceManager`` writes them to disk.
"""
import os
import tempfile
from abc import ABC, abstractmethod
from typing import ClassVar, List

from patternbook.application.decorators import demo
from patternbook.domain.base.entity import Entity
from patternbook.domain.base.exceptions import ValidationError
from patternbook.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

INVITATION_SUBJECT = "Please join me at my party!"


class InvitationMessage(Entity):
    sender: str
    recipient: str
    subject: str


class MailSender(ABC):
    """Port for delivering mail."""

    @abstractmethod
    def send(self, message: InvitationMessage) -> None:
        """Deliver the message."""


class ConsoleMailSender(MailSender):
    """Prints the message instead of talking to a mail server."""

    def send(self, message: InvitationMessage) -> None:
        print(f"Mail from {message.sender} to {message.recipient}: {message.subject}")


def _is_blank(value: str) -> bool:
    return value is None or not value.strip()


class ValidateSendInvitationService:
    """Before: validation and delivery in one class."""

    def __init__(self, mail_sender: MailSender):
        self._mail_sender = mail_sender

    def send_invite(self, email: str, first_name: str, last_name: str) -> None:
        if _is_blank(first_name) or _is_blank(last_name):
            raise ValidationError("Name is not valid!")

        if "@" not in email or "." not in email:
            raise ValidationError("Email is not valid!!")

        self._mail_sender.send(InvitationMessage(
            sender="mysite@nowhere.com", recipient=email, subject=INVITATION_SUBJECT
        ))


class UserNameService:
    def validate(self, first_name: str, last_name: str) -> None:
        if _is_blank(first_name) or _is_blank(last_name):
            raise ValidationError("The name is invalid!")


class EmailService:
    def validate(self, email: str) -> None:
        if "@" not in email or "." not in email:
            raise ValidationError("Email is not valid!!")


class InvitationService:
    """After: coordinates collaborators that each own one rule."""

    def __init__(self, user_name_service: UserNameService, email_service: EmailService,
                 mail_sender: MailSender):
        self._user_name_service = user_name_service
        self._email_service = email_service
        self._mail_sender = mail_sender

    def send_invite(self, email: str, first_name: str, last_name: str) -> None:
        self._user_name_service.validate(first_name, last_name)
        self._email_service.validate(email)
        self._mail_sender.send(InvitationMessage(
            sender="sitename@invites2you.com", recipient=email, subject=INVITATION_SUBJECT
        ))


class Journal:
    """Keeps numbered entries in memory."""

    # Entry numbers keep counting across every journal in the process
    count: ClassVar[int] = 0

    def __init__(self):
        self._entries: List[str] = []

    @property
    def entries(self) -> List[str]:
        return list(self._entries)

    def add_entry(self, text: str) -> int:
        """Append an entry and return its position."""
        type(self).count += 1
        self._entries.append(f"{type(self).count}: {text}")
        return len(self._entries) - 1

    def remove_entry(self, index: int) -> None:
        del self._entries[index]

    def save(self, filename: str) -> None:
        """Persistence mixed into the journal: the responsibility PersistenceManager takes over."""
        with open(filename, "w", encoding="utf-8") as f:
            f.write(str(self))

    def __str__(self) -> str:
        return "\n".join(self._entries)


class PersistenceManager:
    def save_to_file(self, journal: Journal, filename: str, overwrite: bool = False) -> bool:
        """Write the journal. Returns False when the file exists and overwrite is off."""
        if not overwrite and os.path.exists(filename):
            logger.debug("Journal file exists, not overwriting", filename=filename)
            return False
        with open(filename, "w", encoding="utf-8") as f:
            f.write(str(journal))
        return True


@demo("single-responsibility", category="solid", summary="Split validation and delivery out of one service")
def run() -> None:
    sender = ConsoleMailSender()

    before = ValidateSendInvitationService(sender)
    before.send_invite("guest@example.com", "Ada", "Lovelace")

    after = InvitationService(UserNameService(), EmailService(), sender)
    after.send_invite("friend@example.com", "Alan", "Turing")

    for email, first_name, last_name in (("no-at-sign.example.com", "Grace", "Hopper"),
                                         ("someone@example.com", " ", "Nobody")):
        try:
            after.send_invite(email, first_name, last_name)
        except ValidationError as e:
            print(f"Rejected {email}: {e}")


@demo("journal", category="solid", summary="Keep entries in Journal, persistence in PersistenceManager")
def run_journal() -> None:
    journal = Journal()
    journal.add_entry("I cried today.")
    journal.add_entry("I ate a bug.")
    print(journal)

    manager = PersistenceManager()
    with tempfile.TemporaryDirectory() as workdir:
        filename = os.path.join(workdir, "journal.txt")
        print(f"Saved: {manager.save_to_file(journal, filename)}")
        print(f"Saved again without overwrite: {manager.save_to_file(journal, filename)}")
