"""Tests for the tenant access module."""

from datetime import date
from decimal import Decimal

import pytest

from conftest import first_of_month
from rentbook.core.errors import RoomHouseMismatchError, StoreFault
from rentbook.crud import house as house_crud
from rentbook.crud import payment as payment_crud
from rentbook.crud import room as room_crud
from rentbook.crud import tenant as tenant_crud
from rentbook.models.room import Room
from rentbook.models.tenant import Tenant
from rentbook.schemas.payment import PaymentCreate
from rentbook.schemas.room import RoomCreate
from rentbook.schemas.tenant import (
    PaymentStatus,
    TenantCreate,
    TenantUpdate,
    TenantWithRoomCreate,
)


def tenant_payload(house_id: int, room_id: int, **overrides) -> TenantCreate:
    data = dict(
        house_id=house_id,
        room_id=room_id,
        first_name="Awa",
        last_name="Koné",
        phone="0700000000",
        entry_date=date(2026, 1, 5),
        rent_amount=Decimal("40000"),
    )
    data.update(overrides)
    return TenantCreate(**data)


class TestTenantCreate:
    """Tests for creating tenants."""

    def test_create_in_existing_room(self, db, make_house) -> None:
        house_id = make_house()
        room_id = room_crud.create(db, RoomCreate(house_id=house_id, name="A1", type="Chambre"))

        tenant_id = tenant_crud.create(db, tenant_payload(house_id, room_id))
        tenant = tenant_crud.get_by_id(db, tenant_id)

        assert tenant.room_id == room_id
        assert tenant.email is None
        assert tenant.payment_frequency == "monthly"
        assert tenant.rent_amount == Decimal("40000")

    def test_room_from_other_house_is_rejected(self, db, make_house) -> None:
        villa = make_house("Villa A")
        other = make_house("Villa B")
        room_id = room_crud.create(db, RoomCreate(house_id=other, name="B1", type="Studio"))

        with pytest.raises(RoomHouseMismatchError):
            tenant_crud.create(db, tenant_payload(villa, room_id))

        assert tenant_crud.get_all(db) == []

    def test_missing_room_is_rejected(self, db, make_house) -> None:
        with pytest.raises(RoomHouseMismatchError):
            tenant_crud.create(db, tenant_payload(make_house(), 999))

    def test_create_with_room(self, db, make_house, today) -> None:
        house_id = make_house()
        payload = TenantWithRoomCreate(
            house_id=house_id,
            room_name="101",
            room_type="Studio",
            first_name="Jean",
            last_name="Dupont",
            phone="0102030405",
            email="jean@example.com",
            entry_date=today,
            payment_frequency="quarterly",
            rent_amount=Decimal("50000"),
        )

        tenant_id, room_id = tenant_crud.create_with_room(db, payload)
        tenant = tenant_crud.get_by_id(db, tenant_id)
        room = room_crud.get_by_id(db, room_id)

        assert tenant.room_id == room_id
        assert tenant.house_id == house_id
        assert tenant.payment_frequency == "quarterly"
        assert room.house_id == house_id
        assert (room.name, room.type) == ("101", "Studio")

    def test_create_with_room_rolls_back_room_on_failure(self, db, engine, make_house, today) -> None:
        house_id = make_house()
        db.commit()
        Tenant.__table__.drop(engine)
        payload = TenantWithRoomCreate(
            house_id=house_id,
            room_name="101",
            room_type="Studio",
            first_name="Jean",
            last_name="Dupont",
            phone="0102030405",
            entry_date=today,
            rent_amount=Decimal("50000"),
        )

        with pytest.raises(StoreFault):
            tenant_crud.create_with_room(db, payload)

        assert db.query(Room).count() == 0


class TestTenantReadUpdateDelete:
    """Tests for reads, partial updates and deletes."""

    def test_get_all_ordered_by_entry_date(self, db, make_house, make_tenant, today) -> None:
        house_id = make_house()
        older = make_tenant(house_id, entry_date=first_of_month(3, today), room_name="1")
        newer = make_tenant(house_id, entry_date=today, room_name="2")

        assert [t.id for t in tenant_crud.get_all(db)] == [newer, older]

    def test_get_by_house_id(self, db, make_house, make_tenant, today) -> None:
        villa = make_house("Villa A")
        other = make_house("Villa B")
        mine = make_tenant(villa, entry_date=today)
        make_tenant(other, entry_date=today)

        assert [t.id for t in tenant_crud.get_by_house_id(db, villa)] == [mine]

    def test_get_by_house_id_unknown_house(self, db) -> None:
        assert tenant_crud.get_by_house_id(db, 42) == []

    def test_partial_update(self, db, make_house, make_tenant, today) -> None:
        tenant_id = make_tenant(make_house(), entry_date=today)

        count = tenant_crud.update(db, tenant_id, TenantUpdate(phone="0999999999", email=""))
        db.expire_all()
        tenant = tenant_crud.get_by_id(db, tenant_id)

        assert count == 1
        assert tenant.phone == "0999999999"
        assert tenant.email is None
        assert tenant.first_name == "Jean"

    def test_empty_update_issues_no_statement(self, db, make_house, make_tenant, today, statements) -> None:
        tenant_id = make_tenant(make_house(), entry_date=today)
        statements.clear()

        assert tenant_crud.update(db, tenant_id, TenantUpdate()) == 0
        assert statements == []

    def test_move_to_room_of_other_house_is_rejected(self, db, make_house, make_tenant, today) -> None:
        tenant_id = make_tenant(make_house("Villa A"), entry_date=today)
        other_room = room_crud.create(db, RoomCreate(house_id=make_house("Villa B"), name="B1", type="Studio"))

        with pytest.raises(RoomHouseMismatchError):
            tenant_crud.update(db, tenant_id, TenantUpdate(room_id=other_room))

    def test_move_to_other_house_and_room(self, db, make_house, make_tenant, today) -> None:
        tenant_id = make_tenant(make_house("Villa A"), entry_date=today)
        other = make_house("Villa B")
        other_room = room_crud.create(db, RoomCreate(house_id=other, name="B1", type="Studio"))

        tenant_crud.update(db, tenant_id, TenantUpdate(house_id=other, room_id=other_room))
        db.expire_all()
        tenant = tenant_crud.get_by_id(db, tenant_id)

        assert (tenant.house_id, tenant.room_id) == (other, other_room)

    def test_delete_keeps_payments(self, db, make_house, make_tenant, today) -> None:
        tenant_id = make_tenant(make_house(), entry_date=today)
        payment_crud.create(db, PaymentCreate(tenant_id=tenant_id, month="2026-03", amount=Decimal("50000")))

        tenant_crud.delete(db, tenant_id)

        assert tenant_crud.get_by_id(db, tenant_id) is None
        assert len(payment_crud.get_by_tenant_id(db, tenant_id)) == 1

    def test_delete_missing_is_silent(self, db) -> None:
        tenant_crud.delete(db, 999)


class TestTenantDetails:
    """Tests for the joined detail views."""

    def test_details_include_house_and_room(self, db, make_house, make_tenant, today) -> None:
        house_id = make_house("Villa A", "Cocody")
        tenant_id = make_tenant(house_id, entry_date=today)

        details = tenant_crud.get_tenant_with_details(db, tenant_id, today)

        assert details.house.name == "Villa A"
        assert details.house.address == "Cocody"
        assert details.room.name == "101"
        assert details.room.type == "Studio"
        assert details.payment_status == PaymentStatus.UP_TO_DATE
        assert details.last_payment is None

    def test_details_missing_tenant(self, db) -> None:
        assert tenant_crud.get_tenant_with_details(db, 404) is None

    def test_deleted_room_leaves_room_absent(self, db, make_house, make_tenant, today) -> None:
        tenant_id = make_tenant(make_house(), entry_date=today)
        room_crud.delete(db, tenant_crud.get_by_id(db, tenant_id).room_id)

        details = tenant_crud.get_tenant_with_details(db, tenant_id, today)

        assert details.room is None
        assert details.house is not None

    def test_last_payment_is_most_recent(self, db, make_house, make_tenant, today) -> None:
        tenant_id = make_tenant(make_house(), entry_date=first_of_month(2, today))
        payment_crud.create(db, PaymentCreate(tenant_id=tenant_id, month="2026-02", amount=Decimal("50000")))
        latest = payment_crud.create(db, PaymentCreate(tenant_id=tenant_id, month="2026-03", amount=Decimal("50000")))

        details = tenant_crud.get_tenant_with_details(db, tenant_id, today)

        assert details.last_payment.id == latest
        assert details.payment_status == PaymentStatus.UP_TO_DATE

    def test_villa_scenario(self, db, today) -> None:
        """Jean Dupont moved in two months ago: overdue until the current month is paid."""
        from rentbook.schemas.house import HouseCreate

        house_id = house_crud.create(db, HouseCreate(name="Villa A", address="Abidjan"))
        tenant_id, _ = tenant_crud.create_with_room(
            db,
            TenantWithRoomCreate(
                house_id=house_id,
                room_name="101",
                room_type="Studio",
                first_name="Jean",
                last_name="Dupont",
                phone="0102030405",
                entry_date=first_of_month(2, today),
                rent_amount=Decimal("50000"),
            ),
        )

        (before,) = tenant_crud.get_all_with_payment_status(db, today)
        assert before.id == tenant_id
        assert before.payment_status == PaymentStatus.OVERDUE
        assert before.rent_amount == Decimal("50000")

        payment_crud.create(db, PaymentCreate(tenant_id=tenant_id, month="2026-03", amount=Decimal("50000")))

        (after,) = tenant_crud.get_all_with_payment_status(db, today)
        assert after.payment_status == PaymentStatus.UP_TO_DATE

    def test_new_tenant_scenario(self, db, make_house, make_tenant, today) -> None:
        make_tenant(make_house(), entry_date=today)

        (tenant,) = tenant_crud.get_all_with_payment_status(db, today)

        assert tenant.payment_status == PaymentStatus.UP_TO_DATE

    def test_orphaned_tenant_after_house_delete(self, db, make_house, make_tenant, today) -> None:
        house_id = make_house()
        tenant_id = make_tenant(house_id, entry_date=first_of_month(1, today))

        house_crud.delete(db, house_id)
        (tenant,) = tenant_crud.get_all_with_payment_status(db, today)

        assert tenant.id == tenant_id
        assert tenant.house is None
        assert tenant.payment_status == PaymentStatus.OVERDUE
