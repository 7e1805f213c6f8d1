"""Outbound port for delivering account emails."""

from abc import ABC, abstractmethod


class MailDispatcher(ABC):
    """Delivers verification and password reset links.

    Delivery is best effort: callers treat a raised exception as a
    failed notification, never as a failed account operation.
    """

    @abstractmethod
    async def send_verification_email(
        self,
        to_email: str,
        verification_link: str,
    ) -> None:
        """Send the email verification link to a newly registered user."""

    @abstractmethod
    async def send_password_reset_email(self, to_email: str, reset_link: str) -> None:
        """Send a password reset link."""
