"""User registration and account status: commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.user.user import Role, User, UserStatus
from marketplace.notifications.notification.dispatch import notify_roles
from marketplace.shared.identifiers import ensure_identifier
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@marketplace.command(part_of="User")
class RegisterUser:
    """Create a user with one of the marketplace roles."""

    name: String(required=True, max_length=150)
    email: String(required=True, max_length=254)
    role: String(choices=Role, required=True)


@marketplace.command(part_of="User")
class ChangeUserStatus:
    """Activate, park or deactivate a user account."""

    user_id: Identifier(required=True)
    status: String(choices=UserStatus, required=True)


@marketplace.command_handler(part_of=User)
class UserDirectoryHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["Email is already registered"]})

        user = User.register(name=command.name, email=command.email, role=command.role)
        repo.add(user)

        logger.info("User registered", user_id=str(user.id), role=user.role, status=user.status)

        if user.role == Role.CUSTOMER.value:
            notify_roles([Role.CSR.value], "New customer account has been registered, please review!")
        return str(user.id)

    @handle(ChangeUserStatus)
    def change_user_status(self, command):
        user_id = ensure_identifier(command.user_id, "user_id")
        repo = current_domain.repository_for(User)
        user = repo.get(user_id)
        user.change_status(command.status)
        repo.add(user)
        return user
