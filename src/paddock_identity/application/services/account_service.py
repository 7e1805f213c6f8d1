"""Account lifecycle: registration, verification, login and credential changes."""

import logging
from datetime import timedelta
from typing import Union
from uuid import UUID

from paddock_auth import (
    JWTService,
    OpaqueTokenService,
    PasswordHashingService,
    WeakPasswordError,
)
from paddock_identity.application.dtos import LoginResult, RegistrationData
from paddock_identity.application.ports import MailDispatcher
from paddock_identity.domain.shared.time import utc_now
from paddock_identity.domain.user import (
    CredentialStore,
    Email,
    EmailAlreadyExistsError,
    InvalidUserTypeError,
    ProfileUpdate,
    PublicProfile,
    User,
    UserChanges,
    UserNotFoundError,
    UserProfile,
    UserType,
)
from paddock_identity.exceptions import (
    EmailNotVerifiedError,
    InvalidCredentialsError,
    InvalidInputError,
    InvalidOrExpiredTokenError,
    UnauthorizedError,
    WeakPasswordInputError,
)

logger = logging.getLogger(__name__)

DEFAULT_RESET_TOKEN_TTL = timedelta(hours=1)


class AccountService:
    """Drives a user through PendingVerification, Verified and password resets.

    All collaborators are passed in, so tests can swap the credential store
    and mail dispatcher for in-memory fakes. The service never commits; the
    caller owns the unit of work.
    """

    def __init__(  # noqa: PLR0913
        self,
        credential_store: CredentialStore,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        token_service: OpaqueTokenService,
        mail_dispatcher: MailDispatcher,
        frontend_base_url: str,
        reset_token_ttl: timedelta = DEFAULT_RESET_TOKEN_TTL,
    ):
        self._store = credential_store
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._token_service = token_service
        self._mail = mail_dispatcher
        self._frontend_base_url = frontend_base_url.rstrip("/")
        self._reset_token_ttl = reset_token_ttl

    async def register(self, data: RegistrationData) -> UserProfile:
        """Open a new, unverified account and mail its verification link.

        Raises
        ------
        InvalidInputError
            Malformed email, blank names, unknown or admin user type,
            or a password that fails the strength policy
        EmailAlreadyExistsError
            An account with this email exists, verified or not
        """
        email = Email(data.email)
        user_type = self._resolve_user_type(data.user_type)
        first_name = self._require_name(data.first_name, "First name")
        last_name = self._require_name(data.last_name, "Last name")

        if await self._store.find_by_email(email) is not None:
            raise EmailAlreadyExistsError(email.value)

        self._check_password(data.password)

        verification_token = self._token_service.generate()
        user = User.register(
            email=email,
            password_hash=self._password_service.hash(data.password),
            first_name=first_name,
            last_name=last_name,
            verification_token=verification_token,
            phone=data.phone,
            user_type=user_type,
            business_name=data.business_name,
        )
        created = await self._store.create(user)
        logger.info("User registered: %s (%s)", created.id, user_type.value)

        await self._send_verification(created.email, verification_token)
        return created.to_profile()

    async def provision_admin(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
    ) -> UserProfile:
        """Create an already verified admin account (operator use only)."""
        address = Email(email)
        if await self._store.find_by_email(address) is not None:
            raise EmailAlreadyExistsError(address.value)

        self._check_password(password)

        user = User(
            email=address,
            password_hash=self._password_service.hash(password),
            first_name=self._require_name(first_name, "First name"),
            last_name=self._require_name(last_name, "Last name"),
            user_type=UserType.ADMIN,
            is_verified=True,
        )
        created = await self._store.create(user)
        logger.info("Admin account provisioned: %s", created.id)
        return created.to_profile()

    async def verify_email(self, token: str) -> UserProfile:
        user = await self._store.find_by_verification_token(token)
        if user is None:
            logger.warning("Email verification with unknown token")
            raise InvalidOrExpiredTokenError

        updated = await self._store.update(
            user.id,
            UserChanges(is_verified=True, verification_token=None),
        )
        logger.info("Email verified for user %s", updated.id)
        return updated.to_profile()

    async def resend_verification(self, email: str) -> None:
        """Issue a fresh verification link to a pending account.

        Unknown and already verified emails are ignored silently.
        """
        user = await self._store.find_by_email(email.strip())
        if user is None or user.is_verified:
            logger.debug("Verification resend ignored for %s", email)
            return

        token = self._token_service.generate()
        await self._store.update(user.id, UserChanges(verification_token=token))
        await self._send_verification(user.email, token)

    async def login(self, email: str, password: str) -> LoginResult:
        """Exchange credentials for a session token.

        The password is checked before the verification state, so
        ``EmailNotVerifiedError`` only ever reaches a caller who already
        knows the right password.
        """
        user = await self._store.find_by_email(email.strip())
        if user is None:
            raise InvalidCredentialsError

        if not self._password_service.verify(password, user.password_hash):
            raise InvalidCredentialsError

        if not user.is_verified:
            raise EmailNotVerifiedError

        access_token = self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
            user_type=user.user_type.value,
        )
        logger.info("User logged in: %s", user.id)

        return LoginResult(
            user=user.to_profile(),
            access_token=access_token,
            expires_in=int(self._jwt_service.access_token_lifetime.total_seconds()),
        )

    async def request_password_reset(self, email: str) -> None:
        """Start a reset window. Returns normally whether or not the email exists."""
        user = await self._store.find_by_email(email.strip())
        if user is None:
            # Silent to prevent email enumeration
            logger.debug("Password reset requested for unknown email: %s", email)
            return

        token = self._token_service.generate()
        expires = utc_now() + self._reset_token_ttl
        await self._store.update(
            user.id,
            UserChanges(reset_password_token=token, reset_password_expires=expires),
        )

        reset_link = f"{self._frontend_base_url}/reset-password?token={token}"
        try:
            await self._mail.send_password_reset_email(
                to_email=user.email,
                reset_link=reset_link,
            )
            logger.info("Password reset email sent for user %s", user.id)
        except Exception as e:
            # Token is stored; delivery is best effort
            logger.error("Failed to send password reset email: %s", e)

    async def reset_password(self, token: str, new_password: str) -> None:
        """Set a new password using a live reset token.

        An expired token is treated exactly like an unknown one.
        """
        user = await self._store.find_by_active_reset_token(token, utc_now())
        if user is None:
            logger.warning("Password reset with invalid or expired token")
            raise InvalidOrExpiredTokenError

        self._check_password(new_password)

        await self._store.update(
            user.id,
            UserChanges(
                password_hash=self._password_service.hash(new_password),
                reset_password_token=None,
                reset_password_expires=None,
            ),
        )
        logger.info("Password reset completed for user %s", user.id)

    async def change_password(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> None:
        user = await self._require_user(user_id)

        if not self._password_service.verify(current_password, user.password_hash):
            raise UnauthorizedError(
                "Current password is incorrect",
                reason="wrong_password",
            )

        self._check_password(new_password)

        await self._store.update(
            user.id,
            UserChanges(
                password_hash=self._password_service.hash(new_password),
                reset_password_token=None,
                reset_password_expires=None,
            ),
        )
        logger.info("Password changed for user %s", user.id)

    async def update_profile(self, user_id: UUID, update: ProfileUpdate) -> UserProfile:
        user = await self._require_user(user_id)

        changed = update.changed_fields()
        for field_name in ("first_name", "last_name"):
            if field_name in changed:
                changed[field_name] = self._require_name(
                    changed[field_name],
                    field_name.replace("_", " ").capitalize(),
                )

        updated = await self._store.update(user.id, UserChanges(**changed))
        logger.info("Profile updated for user %s: %s", user.id, sorted(changed))
        return updated.to_profile()

    async def get_profile(self, user_id: UUID) -> UserProfile:
        user = await self._require_user(user_id)
        return user.to_profile()

    async def get_public_profile(self, user_id: UUID) -> PublicProfile:
        user = await self._require_user(user_id)
        return user.to_public_profile()

    async def _require_user(self, user_id: UUID) -> User:
        user = await self._store.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    async def _send_verification(self, email: str, token: str) -> None:
        verification_link = f"{self._frontend_base_url}/verify-email?token={token}"
        try:
            await self._mail.send_verification_email(
                to_email=email,
                verification_link=verification_link,
            )
        except Exception as e:
            # Account exists either way; the user can ask for a new link
            logger.error("Failed to send verification email to %s: %s", email, e)

    def _check_password(self, password: str) -> None:
        try:
            self._password_service.validate_strength(password)
        except WeakPasswordError as e:
            raise WeakPasswordInputError(e.message) from e

    @staticmethod
    def _require_name(value: str, label: str) -> str:
        if not value or not value.strip():
            msg = f"{label} is required"
            raise InvalidInputError(msg)
        return value.strip()

    @staticmethod
    def _resolve_user_type(value: Union[str, UserType, None]) -> UserType:
        if value is None:
            return UserType.BUYER
        try:
            user_type = UserType(value)
        except ValueError as e:
            raise InvalidUserTypeError(str(value)) from e
        if user_type not in UserType.self_registrable():
            raise InvalidUserTypeError(user_type.value)
        return user_type
