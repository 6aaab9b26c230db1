"""User aggregate: the directory of people acting on the marketplace.

Roles decide who receives operational notifications (administrators and
customer service representatives) and who owns products (vendors).
"""

import re
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from marketplace.domain import marketplace
from marketplace.identity.user.events import UserRegistered, UserStatusChanged

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Role(Enum):
    ADMINISTRATOR = "Administrator"
    CSR = "CSR"
    VENDOR = "Vendor"
    CUSTOMER = "Customer"


class UserStatus(Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    DEACTIVATED = "Deactivated"


# Self-registered accounts wait for staff review before they become active
_REVIEWED_ROLES = {Role.CUSTOMER.value, Role.VENDOR.value}


@marketplace.aggregate
class User:
    """A registered person on the marketplace with a single role."""

    name: String(required=True, max_length=150)
    email: String(required=True, max_length=254)
    role: String(choices=Role, required=True)
    status: String(choices=UserStatus, default=UserStatus.ACTIVE.value)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def register(cls, name, email, role):
        if not email or not _EMAIL_PATTERN.match(email):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        now = datetime.now(UTC)
        user = cls(
            name=name,
            email=email.lower(),
            role=role,
            status=UserStatus.INACTIVE.value if role in _REVIEWED_ROLES else UserStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                name=name,
                email=user.email,
                role=role,
                status=user.status,
                registered_at=now,
            )
        )
        return user

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE.value

    def change_status(self, status):
        if status == self.status:
            return

        previous_status = self.status
        now = datetime.now(UTC)
        self.status = UserStatus(status).value
        self.updated_at = now

        self.raise_(
            UserStatusChanged(
                user_id=str(self.id),
                previous_status=previous_status,
                new_status=self.status,
                changed_at=now,
            )
        )
