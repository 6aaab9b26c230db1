import pytest
from protean.exceptions import ValidationError
from protean.utils.reflection import declared_fields

from marketplace.identity.user.events import UserRegistered, UserStatusChanged
from marketplace.identity.user.user import Role, User, UserStatus


def test_user_has_defined_fields():
    assert all(
        field_name in declared_fields(User)
        for field_name in ["name", "email", "role", "status", "created_at", "updated_at"]
    )


class TestRegistration:
    def test_staff_roles_start_active(self):
        user = User.register(name="Asha", email="asha@example.com", role=Role.CSR.value)
        assert user.status == UserStatus.ACTIVE.value
        assert user.is_active

    def test_customers_wait_for_review(self):
        user = User.register(name="Kamal", email="kamal@example.com", role=Role.CUSTOMER.value)
        assert user.status == UserStatus.INACTIVE.value
        assert not user.is_active

    def test_vendors_wait_for_review(self):
        user = User.register(name="Spice Co", email="spice@example.com", role=Role.VENDOR.value)
        assert user.status == UserStatus.INACTIVE.value

    def test_email_is_normalised(self):
        user = User.register(name="Ravi", email="Ravi@Example.COM", role=Role.ADMINISTRATOR.value)
        assert user.email == "ravi@example.com"

    @pytest.mark.parametrize("email", ["", "no-at-sign", "two@@example.com", "spaces in@example.com"])
    def test_invalid_email_is_rejected(self, email):
        with pytest.raises(ValidationError) as exc:
            User.register(name="X", email=email, role=Role.CUSTOMER.value)
        assert "email" in exc.value.messages

    def test_unknown_role_is_rejected(self):
        with pytest.raises(ValidationError):
            User.register(name="X", email="x@example.com", role="Superuser")

    def test_raises_registered_event(self):
        user = User.register(name="Asha", email="asha@example.com", role=Role.CSR.value)
        assert len(user._events) == 1
        event = user._events[0]
        assert isinstance(event, UserRegistered)
        assert event.user_id == str(user.id)
        assert event.role == Role.CSR.value
        assert event.status == UserStatus.ACTIVE.value


class TestStatusChanges:
    def test_activate_customer(self):
        user = User.register(name="Kamal", email="kamal@example.com", role=Role.CUSTOMER.value)
        user._events.clear()

        user.change_status(UserStatus.ACTIVE.value)

        assert user.is_active
        event = user._events[0]
        assert isinstance(event, UserStatusChanged)
        assert event.previous_status == UserStatus.INACTIVE.value
        assert event.new_status == UserStatus.ACTIVE.value

    def test_same_status_is_a_no_op(self):
        user = User.register(name="Asha", email="asha@example.com", role=Role.CSR.value)
        user._events.clear()

        user.change_status(UserStatus.ACTIVE.value)

        assert user._events == []

    def test_unknown_status_is_rejected(self):
        user = User.register(name="Asha", email="asha@example.com", role=Role.CSR.value)
        with pytest.raises(ValueError):
            user.change_status("Banned")
