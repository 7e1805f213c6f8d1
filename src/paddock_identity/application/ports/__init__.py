"""Outbound ports of the identity application layer."""

from paddock_identity.application.ports.mail_dispatcher import MailDispatcher

__all__ = ["MailDispatcher"]
