"""SQLAlchemy implementation of CredentialStore."""

import logging
from datetime import datetime
from typing import Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from paddock_identity.domain.shared.time import ensure_tz_aware, utc_now
from paddock_identity.domain.user import (
    CredentialStore,
    Email,
    EmailAlreadyExistsError,
    User,
    UserChanges,
    UserNotFoundError,
)
from paddock_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

# UserChanges field -> column it writes to
_CHANGE_COLUMNS: dict[str, InstrumentedAttribute] = {
    "password_hash": UserModel.password_hash,
    "first_name": UserModel.first_name,
    "last_name": UserModel.last_name,
    "phone": UserModel.phone,
    "business_name": UserModel.business_name,
    "is_verified": UserModel.is_verified,
    "verification_token": UserModel.verification_token,
    "reset_password_token": UserModel.reset_password_token,
    "reset_password_expires": UserModel.reset_password_expires,
}


class CredentialStoreSQLAlchemy(CredentialStore):
    """SQLAlchemy implementation of the CredentialStore interface.

    The store flushes but never commits; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        email_value = email.value if isinstance(email, Email) else email

        stmt = select(UserModel).where(UserModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_verification_token(self, token: str) -> User | None:
        if not token:
            return None

        stmt = select(UserModel).where(UserModel.verification_token == token)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_active_reset_token(
        self,
        token: str,
        now: datetime,
    ) -> User | None:
        if not token:
            return None

        stmt = select(UserModel).where(
            UserModel.reset_password_token == token,
            UserModel.reset_password_expires.is_not(None),
            UserModel.reset_password_expires > now,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def create(self, user: User) -> User:
        model = self._map_to_model(user)
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise EmailAlreadyExistsError(user.email) from e
            raise

        logger.info("Created user: %s (type: %s)", user.id, user.user_type.value)
        return self._map_to_domain(model)

    async def update(self, user_id: UUID, changes: UserChanges) -> User:
        model = await self._find_model_by_id(user_id, for_update=True)
        if model is None:
            raise UserNotFoundError(str(user_id))

        changed = changes.as_dict()
        for field_name, value in changed.items():
            setattr(model, _CHANGE_COLUMNS[field_name].key, value)
        model.updated_at = utc_now()

        await self._session.flush()
        logger.debug("Updated user %s: %s", user_id, sorted(changed))

        return self._map_to_domain(model)

    async def _find_model_by_id(
        self,
        user_id: UUID,
        for_update: bool = False,
    ) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            first_name=model.first_name,
            last_name=model.last_name,
            phone=model.phone,
            user_type=model.user_type,
            business_name=model.business_name,
            is_verified=model.is_verified,
            verification_token=model.verification_token,
            reset_password_token=model.reset_password_token,
            reset_password_expires=(
                ensure_tz_aware(model.reset_password_expires)
                if model.reset_password_expires
                else None
            ),
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
            user_type=user.user_type.value,
            business_name=user.business_name,
            is_verified=user.is_verified,
            verification_token=user.verification_token,
            reset_password_token=user.reset_password_token,
            reset_password_expires=user.reset_password_expires,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
