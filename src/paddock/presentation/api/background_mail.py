"""Mail dispatch deferred until the response has been sent.

FastAPI runs background tasks after the route returned, which is after the
router committed its unit of work. A rolled-back request never mails a
link, and no row lock is held while SMTP is talking.
"""

import logging
from collections.abc import Awaitable, Callable

from fastapi import BackgroundTasks

from paddock_identity.application.ports import MailDispatcher

logger = logging.getLogger(__name__)


class BackgroundMailDispatcher(MailDispatcher):
    """Queue messages on the request's ``BackgroundTasks``.

    Parameters
    ----------
    dispatcher
        The dispatcher that actually delivers the message
    background_tasks
        Tasks of the current request
    """

    def __init__(self, dispatcher: MailDispatcher, background_tasks: BackgroundTasks):
        self._dispatcher = dispatcher
        self._background_tasks = background_tasks

    async def send_verification_email(
        self,
        to_email: str,
        verification_link: str,
    ) -> None:
        self._background_tasks.add_task(
            _deliver,
            self._dispatcher.send_verification_email,
            to_email,
            verification_link,
        )

    async def send_password_reset_email(self, to_email: str, reset_link: str) -> None:
        self._background_tasks.add_task(
            _deliver,
            self._dispatcher.send_password_reset_email,
            to_email,
            reset_link,
        )


async def _deliver(
    send: Callable[[str, str], Awaitable[None]],
    to_email: str,
    link: str,
) -> None:
    try:
        await send(to_email, link)
        logger.info("Email delivered to %s", to_email)
    except Exception as e:
        # The account change is committed; the user can ask for a new link
        logger.error("Failed to deliver email to %s: %s", to_email, e)
