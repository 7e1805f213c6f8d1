import asyncio
import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from paddock_config.settings import Settings
from paddock_identity.application.ports import MailDispatcher

logger = logging.getLogger(__name__)

VERIFICATION_SUBJECT = "Verify Your Email - Paddock Marketplace"

VERIFICATION_TEXT = """Welcome to Paddock Marketplace!

Please verify your email address by opening the link below:
{verification_link}

If you didn't create an account, you can safely ignore this email.

-- Paddock Marketplace
"""

VERIFICATION_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background-color: #f9fafb; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 8px; padding: 40px;">
        <h2 style="color: #111827; margin-top: 0;">Welcome to Paddock Marketplace!</h2>
        <p style="color: #374151; line-height: 1.6;">Please verify your email by clicking the button below.</p>
        <p style="margin: 30px 0; text-align: center;">
            <a href="{verification_link}" style="display: inline-block; padding: 14px 28px; background-color: #2563eb; color: #ffffff !important; text-decoration: none; border-radius: 6px; font-weight: 600;">Verify Email</a>
        </p>
        <p style="color: #6b7280; font-size: 14px;">Or copy and paste this link into your browser:</p>
        <p style="word-break: break-all; color: #2563eb; font-size: 14px;">{verification_link}</p>
    </div>
</body>
</html>
"""

PASSWORD_RESET_SUBJECT = "Password Reset Request - Paddock Marketplace"

PASSWORD_RESET_TEXT = """Hello,

You requested a password reset for your Paddock Marketplace account.

Click the link below to reset your password (valid for {valid_minutes} minutes):
{reset_link}

If you didn't request this, you can safely ignore this email.

-- Paddock Marketplace
"""

PASSWORD_RESET_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background-color: #f9fafb; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 8px; padding: 40px;">
        <h2 style="color: #111827; margin-top: 0;">Password Reset Request</h2>
        <p style="color: #374151; line-height: 1.6;">You requested a password reset. This link is valid for {valid_minutes} minutes.</p>
        <p style="margin: 30px 0; text-align: center;">
            <a href="{reset_link}" style="display: inline-block; padding: 14px 28px; background-color: #2563eb; color: #ffffff !important; text-decoration: none; border-radius: 6px; font-weight: 600;">Reset Password</a>
        </p>
        <p style="color: #6b7280; font-size: 14px;">Or copy and paste this link into your browser:</p>
        <p style="word-break: break-all; color: #2563eb; font-size: 14px;">{reset_link}</p>
        <p style="color: #9ca3af; font-size: 13px;">If you didn't request this, you can safely ignore this email.</p>
    </div>
</body>
</html>
"""


class EmailService(MailDispatcher):
    """SMTP mail dispatcher.

    The blocking SMTP exchange runs in a worker thread and is bounded by
    ``smtp_timeout_seconds``, so a slow mail server cannot hold up a request
    longer than that.
    """

    def __init__(self, settings: Settings):
        self._settings = settings

    def _create_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: str | None = None,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self._settings.smtp_from_name} <{self._settings.smtp_from_email}>"
        msg["To"] = to_email

        msg.attach(MIMEText(text_body, "plain"))
        if html_body:
            msg.attach(MIMEText(html_body, "html"))

        return msg

    def _send_email(self, to_email: str, message: MIMEMultipart) -> None:
        if not self._settings.smtp_host:
            logger.error("SMTP host not configured")
            return

        smtp_password = (
            self._settings.smtp_password.get_secret_value()
            if self._settings.smtp_password
            else ""
        )
        timeout = self._settings.smtp_timeout_seconds

        try:
            if self._settings.smtp_use_tls and not self._settings.smtp_starttls:
                # Implicit TLS (port 465)
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                    context=context,
                    timeout=timeout,
                ) as server:
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)
            else:
                # STARTTLS (port 587) or plain
                with smtplib.SMTP(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                    timeout=timeout,
                ) as server:
                    if self._settings.smtp_starttls:
                        context = ssl.create_default_context()
                        server.starttls(context=context)
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)

            logger.info("Email sent to %s", to_email)

        except Exception as e:
            logger.error("Failed to send email to %s: %s", to_email, e)
            raise

    async def _dispatch(self, to_email: str, message: MIMEMultipart) -> None:
        await asyncio.to_thread(self._send_email, to_email, message)

    async def send_verification_email(
        self,
        to_email: str,
        verification_link: str,
    ) -> None:
        if not self._settings.smtp_enabled:
            logger.warning(
                "SMTP disabled, skipping verification email to %s (link: %s)",
                to_email,
                verification_link,
            )
            return

        message = self._create_message(
            to_email=to_email,
            subject=VERIFICATION_SUBJECT,
            text_body=VERIFICATION_TEXT.format(verification_link=verification_link),
            html_body=VERIFICATION_HTML.format(verification_link=verification_link),
        )

        await self._dispatch(to_email, message)

    async def send_password_reset_email(self, to_email: str, reset_link: str) -> None:
        if not self._settings.smtp_enabled:
            logger.warning(
                "SMTP disabled, skipping password reset email to %s (link: %s)",
                to_email,
                reset_link,
            )
            return

        valid_minutes = self._settings.reset_token_expire_minutes
        message = self._create_message(
            to_email=to_email,
            subject=PASSWORD_RESET_SUBJECT,
            text_body=PASSWORD_RESET_TEXT.format(
                reset_link=reset_link,
                valid_minutes=valid_minutes,
            ),
            html_body=PASSWORD_RESET_HTML.format(
                reset_link=reset_link,
                valid_minutes=valid_minutes,
            ),
        )

        await self._dispatch(to_email, message)
