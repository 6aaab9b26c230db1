"""Repository for the User aggregate."""

from marketplace.domain import marketplace
from marketplace.identity.user.user import User, UserStatus
from marketplace.shared.query import scan


@marketplace.repository(part_of=User)
class UserRepository:
    """User lookups needed by notifications and read-time enrichment."""

    def find_by_email(self, email: str) -> User | None:
        users = self._dao.query.filter(email=email.lower()).all().items
        return users[0] if users else None

    def list_by_role(self, role: str) -> list[User]:
        """Active users holding ``role``."""
        return list(scan(self._dao, role=role, status=UserStatus.ACTIVE.value))

    def display_name(self, user_id) -> str | None:
        """Name of the user, or None when the id is unknown."""
        if not user_id:
            return None
        users = self._dao.query.filter(id=str(user_id)).all().items
        return users[0].name if users else None
