"""
Tests for the in-memory entity store.

Covers:
- Monotonic, never reused ids per entity kind
- Partial updates keep untouched fields
- Absent results for unknown ids instead of exceptions
- Filtered listing
- Activity side effects of mutations
- Uniqueness of username, booking reference and setting name
- set_token side effects
"""
from datetime import datetime, timezone

import pytest

from tiyende.auth.utils import verify_password
from tiyende.core.exceptions import DuplicateKeyError
from tiyende.schemas.route import RouteCreate
from tiyende.schemas.user import UserCreate, UserRole, UserUpdate
from tiyende.schemas.vendor import VendorCreate, VendorStatus, VendorUpdate


def vendor_in(name="Mazhandu Bus", **overrides):
    data = {
        "name": name,
        "contact_person": "John Mazhandu",
        "email": "info@mazhandubus.com",
        "phone": "+260 97 1234567",
    }
    data.update(overrides)
    return VendorCreate(**data)


def user_in(username="mary", **overrides):
    data = {
        "username": username,
        "password": "secret123",
        "email": "mary@tiyende.com",
        "full_name": "Mary Banda",
    }
    data.update(overrides)
    return UserCreate(**data)


class TestIdentifiers:
    def test_ids_start_at_one_and_increase(self, storage):
        ids = [storage.vendors.create(obj_in=vendor_in(f"Vendor {i}")).id for i in range(4)]
        assert ids == [1, 2, 3, 4]

    def test_ids_not_reused_after_delete(self, storage):
        first = storage.vendors.create(obj_in=vendor_in("A"))
        second = storage.vendors.create(obj_in=vendor_in("B"))
        assert storage.vendors.remove(second.id) is True

        third = storage.vendors.create(obj_in=vendor_in("C"))
        assert first.id == 1
        assert third.id == 3

    def test_route_ids_not_reused_after_delete(self, storage, test_route, route_payload):
        assert storage.routes.remove(test_route.id) is True
        route = storage.routes.create(obj_in=RouteCreate(**route_payload))
        assert route.id == test_route.id + 1

    def test_user_ids_not_reused_after_delete(self, storage):
        first = storage.users.create(obj_in=user_in("mary"))
        second = storage.users.create(obj_in=user_in("john"))
        assert storage.users.remove(second.id) is True

        third = storage.users.create(obj_in=user_in("grace"))
        assert first.id == 1
        assert third.id == 3

    def test_ids_are_per_entity_kind(self, storage, test_route):
        """A route created after a vendor still gets id 1"""
        assert test_route.id == 1
        assert test_route.vendor_id == 1


class TestCreateDefaults:
    def test_vendor_defaults(self, storage):
        vendor = storage.vendors.create(obj_in=vendor_in())
        assert vendor.status == VendorStatus.ACTIVE
        assert vendor.address is None
        assert vendor.logo is None
        assert vendor.created_at is not None

    def test_user_defaults_and_hashed_password(self, storage):
        user = storage.users.create(obj_in=user_in())
        assert user.role == UserRole.STAFF
        assert user.active is True
        assert user.token is None
        assert user.last_login is None
        assert user.password != "secret123"
        assert verify_password("secret123", user.password)

    def test_ticket_booking_date_stamped(self, ticket_factory):
        before = datetime.now(timezone.utc)
        ticket = ticket_factory("TIY-1")
        assert ticket.booking_date >= before

    def test_route_days_normalized(self, storage, test_vendor, route_payload):
        route_payload["days_of_week"] = ["monday", "Monday", "friday"]
        route = storage.routes.create(obj_in=RouteCreate(**route_payload))
        assert route.days_of_week == ["Monday", "Friday"]


class TestPartialUpdate:
    def test_untouched_fields_are_kept(self, storage):
        vendor = storage.vendors.create(obj_in=vendor_in(phone="+260 97 0000000"))
        updated = storage.vendors.update(vendor.id, obj_in=VendorUpdate(name="Renamed Bus"))

        assert updated.name == "Renamed Bus"
        assert updated.phone == "+260 97 0000000"
        assert updated.email == vendor.email
        assert updated.created_at == vendor.created_at

    def test_empty_update_still_logs_activity(self, storage):
        vendor = storage.vendors.create(obj_in=vendor_in())
        before = storage.activities.count()

        updated = storage.vendors.update(vendor.id, obj_in=VendorUpdate())

        assert updated == vendor
        assert storage.activities.count() == before + 1
        assert storage.activities.recent(1)[0].action == "Vendor updated"

    def test_dict_update(self, storage):
        vendor = storage.vendors.create(obj_in=vendor_in())
        updated = storage.vendors.update(vendor.id, obj_in={"status": "inactive"})
        assert updated.status == VendorStatus.INACTIVE

    def test_null_on_required_field_is_ignored(self, storage):
        vendor = storage.vendors.create(obj_in=vendor_in(address="Lusaka"))
        updated = storage.vendors.update(vendor.id, obj_in=VendorUpdate(name=None, address=None))
        assert updated.name == vendor.name
        assert updated.address is None

    def test_user_password_rehashed_on_update(self, storage):
        user = storage.users.create(obj_in=user_in())
        updated = storage.users.update(user.id, obj_in=UserUpdate(password="another-pass"))
        assert verify_password("another-pass", updated.password)
        assert updated.username == "mary"


class TestAbsence:
    def test_get_unknown_returns_none(self, storage):
        assert storage.users.get(99) is None
        assert storage.vendors.get(99) is None
        assert storage.routes.get(99) is None
        assert storage.tickets.get(99) is None
        assert storage.settings.get("missing") is None
        assert storage.users.get_by_username("ghost") is None
        assert storage.tickets.get_by_reference("TIY-404") is None

    def test_update_unknown_returns_none(self, storage):
        assert storage.vendors.update(99, obj_in=VendorUpdate(name="x")) is None
        assert storage.users.update(99, obj_in=UserUpdate(full_name="x")) is None
        assert storage.tickets.update(99, obj_in={"status": "paid"}) is None

    def test_update_unknown_logs_nothing(self, storage):
        storage.routes.update(99, obj_in={"fare": 10})
        assert storage.activities.count() == 0

    def test_delete_unknown_returns_false(self, storage):
        assert storage.users.remove(99) is False
        assert storage.vendors.remove(99) is False
        assert storage.routes.remove(99) is False
        assert storage.activities.count() == 0


class TestListing:
    def test_tickets_filtered_by_route(self, ticket_factory, storage):
        ticket_factory("TIY-1", route_id=1)
        ticket_factory("TIY-2", route_id=1)
        ticket_factory("TIY-3", route_id=2)

        on_route = storage.tickets.get_by_route(1)
        assert len(on_route) == 2
        assert {t.booking_reference for t in on_route} == {"TIY-1", "TIY-2"}

    def test_tickets_filtered_by_vendor(self, ticket_factory, storage):
        ticket_factory("TIY-1", vendor_id=1)
        ticket_factory("TIY-2", vendor_id=2)
        assert [t.booking_reference for t in storage.tickets.get_by_vendor(2)] == ["TIY-2"]

    def test_routes_filtered_by_vendor(self, storage, test_route):
        assert [r.id for r in storage.routes.get_by_vendor(test_route.vendor_id)] == [test_route.id]
        assert storage.routes.get_by_vendor(42) == []

    def test_list_all(self, storage):
        storage.vendors.create(obj_in=vendor_in("A"))
        storage.vendors.create(obj_in=vendor_in("B"))
        assert {v.name for v in storage.vendors.get_all()} == {"A", "B"}

    def test_unknown_filter_field_rejected(self, storage):
        storage.vendors.create(obj_in=vendor_in())
        with pytest.raises(ValueError):
            storage.vendors.get_multi(filters={"stauts": "active"})

    def test_returned_records_are_copies(self, storage):
        vendor = storage.vendors.create(obj_in=vendor_in())
        vendor.name = "Mutated outside"
        assert storage.vendors.get(vendor.id).name == "Mazhandu Bus"


class TestActivitySideEffects:
    def test_user_creation_is_not_logged(self, storage):
        storage.users.create(obj_in=user_in())
        assert storage.activities.count() == 0

    def test_vendor_lifecycle_logged(self, storage):
        vendor = storage.vendors.create(obj_in=vendor_in())
        storage.vendors.update(vendor.id, obj_in=VendorUpdate(name="New Name"))
        storage.vendors.remove(vendor.id)

        actions = [a.action for a in storage.activities.recent(10)]
        assert actions == ["Vendor deleted", "Vendor updated", "Vendor created"]
        # the update is reported under the name the vendor had before it
        assert storage.activities.recent(10)[1].details == {"vendor_name": "Mazhandu Bus"}

    def test_route_creation_details(self, storage, test_route):
        activity = storage.activities.recent(1)[0]
        assert activity.action == "Route created"
        assert activity.details == {"route": "Lusaka → Livingstone", "vendor": "Mazhandu Bus"}

    def test_route_delete_logged(self, storage, test_route):
        assert storage.routes.remove(test_route.id) is True
        assert storage.activities.recent(1)[0].action == "Route deleted"

    def test_ticket_update_details(self, storage, ticket_factory):
        ticket = ticket_factory("TIY-1")
        storage.tickets.update(ticket.id, obj_in={"status": "paid"})

        activity = storage.activities.recent(1)[0]
        assert activity.action == "Ticket updated"
        assert activity.details == {"reference": "TIY-1", "customer": "John Doe", "status": "paid"}


class TestUniqueness:
    def test_duplicate_username_rejected(self, storage):
        storage.users.create(obj_in=user_in("mary"))
        with pytest.raises(DuplicateKeyError) as exc_info:
            storage.users.create(obj_in=user_in("mary"))
        assert exc_info.value.field == "username"
        assert storage.users.count() == 1

    def test_rename_onto_existing_username_rejected(self, storage):
        storage.users.create(obj_in=user_in("mary"))
        other = storage.users.create(obj_in=user_in("john"))
        with pytest.raises(DuplicateKeyError):
            storage.users.update(other.id, obj_in=UserUpdate(username="mary"))

    def test_update_keeping_own_username_allowed(self, storage):
        user = storage.users.create(obj_in=user_in("mary"))
        updated = storage.users.update(user.id, obj_in=UserUpdate(username="mary", full_name="M. Banda"))
        assert updated.full_name == "M. Banda"

    def test_duplicate_booking_reference_rejected(self, ticket_factory):
        ticket_factory("TIY-1")
        with pytest.raises(DuplicateKeyError):
            ticket_factory("TIY-1")

    def test_failed_create_does_not_consume_id(self, storage):
        storage.users.create(obj_in=user_in("mary"))
        with pytest.raises(DuplicateKeyError):
            storage.users.create(obj_in=user_in("mary"))
        assert storage.users.create(obj_in=user_in("john")).id == 2

    def test_vendor_names_may_repeat(self, storage):
        storage.vendors.create(obj_in=vendor_in("Same"))
        storage.vendors.create(obj_in=vendor_in("Same"))
        assert storage.vendors.count() == 2


class TestUserToken:
    def test_set_token_stamps_last_login(self, storage):
        user = storage.users.create(obj_in=user_in())
        before = datetime.now(timezone.utc)

        assert storage.users.set_token(user.id, "abc") is True

        stored = storage.users.get(user.id)
        assert stored.token == "abc"
        assert stored.last_login >= before

    def test_clear_token(self, storage):
        user = storage.users.create(obj_in=user_in())
        storage.users.set_token(user.id, "abc")
        assert storage.users.set_token(user.id, None) is True
        assert storage.users.get(user.id).token is None

    def test_set_token_unknown_user(self, storage):
        assert storage.users.set_token(99, "abc") is False

    def test_token_not_writable_through_update(self, storage):
        user = storage.users.create(obj_in=user_in())
        storage.users.update(user.id, obj_in={"token": "forged"})
        assert storage.users.get(user.id).token is None


class TestSettings:
    def test_upsert_creates_then_updates(self, storage):
        created = storage.settings.upsert("system_name", "Tiyende")
        updated = storage.settings.upsert("system_name", "Tiyende Bus Reservation")

        assert created.id == updated.id == 1
        assert updated.value == "Tiyende Bus Reservation"
        assert updated.updated_at >= created.updated_at
        assert storage.settings.count() == 1

    def test_upsert_assigns_next_id(self, storage):
        storage.settings.upsert("a", "1")
        assert storage.settings.upsert("b", "2").id == 2

    def test_upsert_always_logs(self, storage):
        storage.settings.upsert("a", "1")
        storage.settings.upsert("a", "1")
        activities = storage.activities.recent(10)
        assert [a.action for a in activities] == ["Setting updated", "Setting updated"]
        assert activities[0].details == {"setting": "a"}

    def test_description_kept_when_not_supplied(self, storage):
        storage.settings.upsert("a", "1", description="first")
        assert storage.settings.upsert("a", "2").description == "first"
