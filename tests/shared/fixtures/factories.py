"""
Test data factories for creating deterministic test entities.

Usage:
    from tests.shared.fixtures.factories import TestUserFactory

    def test_something():
        user = TestUserFactory.alice()
"""

from dataclasses import dataclass
from uuid import UUID

from paddock_identity.domain.user import User, UserType

# bcrypt-shaped placeholder for tests that never check a password
DUMMY_PASSWORD_HASH = "$2b$04$3pZKfYw0rrbdpS1b2j0Bxe5tyF4l6E2HqQ1uV9rHZ3uS0tQ4L6y5i"


@dataclass(frozen=True)
class TestUserFactory:
    """Factory for creating test users with deterministic IDs."""

    __test__ = False

    ALICE_ID = UUID("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaaa")
    ALICE_EMAIL = "alice@example.com"

    BOB_ID = UUID("bbbbbbbb-bbbb-bbbb-bbbb-bbbbbbbbbbbb")
    BOB_EMAIL = "bob@example.com"

    ADMIN_ID = UUID("00000000-0000-0000-0000-000000000001")
    ADMIN_EMAIL = "admin@example.com"

    @classmethod
    def alice(
        cls,
        password_hash: str = DUMMY_PASSWORD_HASH,
        is_verified: bool = True,
        **overrides,
    ) -> User:
        """Verified buyer."""
        fields = {
            "id": cls.ALICE_ID,
            "email": cls.ALICE_EMAIL,
            "password_hash": password_hash,
            "first_name": "Alice",
            "last_name": "Rider",
            "phone": "+44 1234 567890",
            "user_type": UserType.BUYER,
            "is_verified": is_verified,
        }
        fields.update(overrides)
        return User(**fields)

    @classmethod
    def bob_seller(
        cls,
        password_hash: str = DUMMY_PASSWORD_HASH,
        is_verified: bool = True,
        **overrides,
    ) -> User:
        """Verified seller with a business name."""
        fields = {
            "id": cls.BOB_ID,
            "email": cls.BOB_EMAIL,
            "password_hash": password_hash,
            "first_name": "Bob",
            "last_name": "Farrier",
            "user_type": UserType.SELLER,
            "business_name": "Bob's Saddlery",
            "is_verified": is_verified,
        }
        fields.update(overrides)
        return User(**fields)

    @classmethod
    def admin(cls, password_hash: str = DUMMY_PASSWORD_HASH) -> User:
        return User(
            id=cls.ADMIN_ID,
            email=cls.ADMIN_EMAIL,
            password_hash=password_hash,
            first_name="Ada",
            last_name="Admin",
            user_type=UserType.ADMIN,
            is_verified=True,
        )
