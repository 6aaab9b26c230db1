"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="User")
class UserRegistered:
    """A new user joined the marketplace."""

    __version__ = 1

    user_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    role: String(required=True)
    status: String(required=True)
    registered_at: DateTime(required=True)


@marketplace.event(part_of="User")
class UserStatusChanged:
    """A user was activated, made inactive or deactivated."""

    __version__ = 1

    user_id: Identifier(required=True)
    previous_status: String(required=True)
    new_status: String(required=True)
    changed_at: DateTime(required=True)
