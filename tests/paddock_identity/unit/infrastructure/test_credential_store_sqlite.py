"""CredentialStoreSQLAlchemy against a throwaway SQLite file."""

from datetime import timedelta
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from paddock_identity.domain.shared.time import utc_now
from paddock_identity.domain.user import (
    EmailAlreadyExistsError,
    UserChanges,
    UserNotFoundError,
    UserType,
)
from paddock_identity.infrastructure.persistence.sqlalchemy import (
    CredentialStoreSQLAlchemy,
    build_engine,
    create_tables,
    drop_tables,
)
from tests.shared.fixtures.factories import TestUserFactory


@pytest_asyncio.fixture
async def sqlite_engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'db' / 'identity.db'}")
    await create_tables(engine)
    yield engine
    await drop_tables(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(sqlite_engine):
    session_maker = async_sessionmaker(
        sqlite_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session


@pytest.fixture
def store(session) -> CredentialStoreSQLAlchemy:
    return CredentialStoreSQLAlchemy(session)


class TestCreateAndFind:
    async def test_round_trip(self, store):
        user = TestUserFactory.bob_seller()

        await store.create(user)
        found = await store.find_by_id(user.id)

        assert found == user
        assert found.email == TestUserFactory.BOB_EMAIL
        assert found.user_type == UserType.SELLER
        assert found.business_name == "Bob's Saddlery"
        assert found.created_at.tzinfo is not None

    async def test_find_by_email_exact(self, store):
        await store.create(TestUserFactory.alice())

        assert await store.find_by_email(TestUserFactory.ALICE_EMAIL) is not None
        assert await store.find_by_email("ALICE@example.com") is None
        assert await store.find_by_email("nobody@example.com") is None

    async def test_unknown_id(self, store):
        assert await store.find_by_id(uuid4()) is None

    async def test_duplicate_email(self, store):
        await store.create(TestUserFactory.alice())

        with pytest.raises(EmailAlreadyExistsError):
            await store.create(TestUserFactory.alice(id=uuid4()))

    async def test_find_by_verification_token(self, store):
        pending = TestUserFactory.alice(
            is_verified=False,
            verification_token="v" * 64,
        )
        await store.create(pending)

        assert (await store.find_by_verification_token("v" * 64)) == pending
        assert await store.find_by_verification_token("w" * 64) is None
        assert await store.find_by_verification_token("") is None


class TestActiveResetToken:
    async def test_live_token_found(self, store):
        user = TestUserFactory.alice(
            reset_password_token="r" * 64,
            reset_password_expires=utc_now() + timedelta(hours=1),
        )
        await store.create(user)

        found = await store.find_by_active_reset_token("r" * 64, utc_now())

        assert found == user
        assert found.reset_password_expires.tzinfo is not None

    async def test_expired_token_not_found(self, store):
        await store.create(
            TestUserFactory.alice(
                reset_password_token="r" * 64,
                reset_password_expires=utc_now() - timedelta(seconds=1),
            ),
        )

        assert await store.find_by_active_reset_token("r" * 64, utc_now()) is None

    async def test_wrong_token_not_found(self, store):
        await store.create(
            TestUserFactory.alice(
                reset_password_token="r" * 64,
                reset_password_expires=utc_now() + timedelta(hours=1),
            ),
        )

        assert await store.find_by_active_reset_token("s" * 64, utc_now()) is None


class TestUpdate:
    async def test_partial_update(self, store):
        user = TestUserFactory.alice(is_verified=False, verification_token="v" * 64)
        await store.create(user)

        updated = await store.update(
            user.id,
            UserChanges(is_verified=True, verification_token=None),
        )

        assert updated.is_verified is True
        assert updated.verification_token is None
        assert updated.first_name == "Alice"
        assert updated.password_hash == user.password_hash
        assert updated.updated_at >= user.updated_at

    async def test_update_is_visible_to_lookups(self, store):
        user = TestUserFactory.alice()
        await store.create(user)
        expires = utc_now() + timedelta(minutes=30)

        await store.update(
            user.id,
            UserChanges(reset_password_token="r" * 64, reset_password_expires=expires),
        )

        found = await store.find_by_active_reset_token("r" * 64, utc_now())
        assert found is not None
        assert found.id == user.id

    async def test_update_unknown_user(self, store):
        with pytest.raises(UserNotFoundError):
            await store.update(uuid4(), UserChanges(first_name="X"))

    async def test_persists_after_commit(self, sqlite_engine, session, store):
        user = TestUserFactory.alice()
        await store.create(user)
        await store.update(user.id, UserChanges(phone=None))
        await session.commit()

        session_maker = async_sessionmaker(sqlite_engine, class_=AsyncSession)
        async with session_maker() as other:
            found = await CredentialStoreSQLAlchemy(other).find_by_id(user.id)

        assert found is not None
        assert found.phone is None
