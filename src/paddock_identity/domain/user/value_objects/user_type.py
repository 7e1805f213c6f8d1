from enum import Enum


class UserType(str, Enum):
    """Marketplace roles. The set is fixed and drives authorization."""

    BUYER = "buyer"
    SELLER = "seller"
    ADMIN = "admin"

    @classmethod
    def self_registrable(cls) -> frozenset["UserType"]:
        return frozenset({cls.BUYER, cls.SELLER})
