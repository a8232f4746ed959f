"""Tests for the Reservation model"""

from datetime import datetime, date, timedelta, timezone

import pytest

from app.exceptions import (
    InvalidStartAt,
    InvalidGuestCount,
    CustomerIdImmutable,
    IdImmutable,
    ReservationNotFound,
    EntityAlreadyPersisted,
    EntityNotPersisted,
)
from app.models.reservation import Reservation

START = datetime(2024, 1, 1, 18, 0)


def make_reservation(**overrides):
    fields = {"customer_id": 5, "num_guests": 2, "start_at": START, "notes": ""}
    fields.update(overrides)
    return Reservation(**fields)


@pytest.mark.parametrize("num_guests", [0, -1, -20])
def test_num_guests_below_one_rejected(num_guests):
    with pytest.raises(InvalidGuestCount):
        make_reservation(num_guests=num_guests)

    reservation = make_reservation()
    with pytest.raises(InvalidGuestCount):
        reservation.num_guests = num_guests
    assert reservation.num_guests == 2


@pytest.mark.parametrize("num_guests", [1, 2, 12])
def test_num_guests_accepted(num_guests):
    reservation = make_reservation(num_guests=num_guests)
    assert reservation.num_guests == num_guests


def test_num_guests_must_be_integer():
    with pytest.raises(InvalidGuestCount):
        make_reservation(num_guests="4")


@pytest.mark.parametrize("start_at", [None, "2024-01-01T18:00:00", 1704132000, date(2024, 1, 1)])
def test_invalid_start_at_rejected(start_at):
    with pytest.raises(InvalidStartAt):
        make_reservation(start_at=start_at)


def test_start_at_is_kept():
    reservation = make_reservation()
    assert reservation.start_at == START
    assert reservation.formatted_start_at == "January 1st 2024, 6:00 pm"


@pytest.mark.parametrize(
    "start_at, expected",
    [
        (datetime(2024, 3, 2, 0, 5), "March 2nd 2024, 12:05 am"),
        (datetime(2024, 3, 3, 12, 30), "March 3rd 2024, 12:30 pm"),
        (datetime(2024, 3, 11, 9, 0), "March 11th 2024, 9:00 am"),
        (datetime(2024, 3, 13, 21, 45), "March 13th 2024, 9:45 pm"),
        (datetime(2024, 3, 22, 19, 0), "March 22nd 2024, 7:00 pm"),
    ],
)
def test_formatted_start_at(start_at, expected):
    assert make_reservation(start_at=start_at).formatted_start_at == expected


def test_customer_id_can_only_be_set_once():
    reservation = make_reservation(customer_id=5)

    reservation.customer_id = 5
    assert reservation.customer_id == 5

    with pytest.raises(CustomerIdImmutable):
        reservation.customer_id = 6
    assert reservation.customer_id == 5


@pytest.mark.parametrize("notes", [None, ""])
def test_blank_notes_become_empty_string(notes):
    assert make_reservation(notes=notes).notes == ""


def test_notes_default_to_empty_string():
    reservation = Reservation(customer_id=1, num_guests=2, start_at=START)
    assert reservation.notes == ""


@pytest.mark.asyncio
async def test_create_assigns_id(test_db, test_customers):
    """Scenario: book a reservation and find it through the customer"""
    customer = test_customers[0]
    reservation = make_reservation(customer_id=customer.id)
    assert reservation.id is None

    await reservation.save(test_db)

    assert reservation.id is not None
    found = await Reservation.get_reservations_for_customer(test_db, customer.id)
    assert reservation.id in [r.id for r in found]


@pytest.mark.asyncio
async def test_get_reservations_for_customer_only_returns_theirs(test_db, test_customers, test_reservations):
    anne = test_customers[1]

    reservations = await Reservation.get_reservations_for_customer(test_db, anne.id)

    assert len(reservations) == 3
    assert all(r.customer_id == anne.id for r in reservations)


@pytest.mark.asyncio
async def test_get_by_id(test_db, test_reservations):
    reservation = test_reservations[0]

    found = await Reservation.get(test_db, reservation.id)

    assert found.id == reservation.id
    assert found.start_at == reservation.start_at


@pytest.mark.asyncio
async def test_get_missing_raises_not_found(test_db):
    with pytest.raises(ReservationNotFound):
        await Reservation.get(test_db, 9999)


@pytest.mark.asyncio
async def test_update_keeps_id_and_writes_fields(test_db, test_reservations):
    reservation = test_reservations[0]
    reservation_id = reservation.id

    reservation.num_guests = 6
    reservation.notes = "Anniversary"
    reservation.start_at = datetime(2024, 2, 14, 19, 30)
    await reservation.save(test_db)

    assert reservation.id == reservation_id

    test_db.expunge_all()
    found = await Reservation.get(test_db, reservation_id)
    assert found.num_guests == 6
    assert found.notes == "Anniversary"
    assert found.start_at == datetime(2024, 2, 14, 19, 30)


@pytest.mark.asyncio
async def test_create_twice_rejected(test_db, test_reservations):
    with pytest.raises(EntityAlreadyPersisted):
        await test_reservations[0].create(test_db)


@pytest.mark.asyncio
async def test_update_unsaved_rejected(test_db):
    with pytest.raises(EntityNotPersisted):
        await make_reservation().update(test_db)


@pytest.mark.asyncio
async def test_update_missing_row_raises_not_found(test_db, test_customers):
    reservation = make_reservation(id=9999, customer_id=test_customers[0].id)

    with pytest.raises(ReservationNotFound):
        await reservation.update(test_db)


@pytest.mark.asyncio
async def test_saved_id_cannot_change(test_db, test_reservations):
    reservation = test_reservations[0]
    reservation_id = reservation.id

    with pytest.raises(IdImmutable):
        reservation.id = reservation_id + 100
    assert reservation.id == reservation_id

    await reservation.save(test_db)

    test_db.expunge_all()
    found = await Reservation.get(test_db, reservation_id)
    assert found.id == reservation_id
    with pytest.raises(ReservationNotFound):
        await Reservation.get(test_db, reservation_id + 100)


def test_aware_start_at_stored_as_utc():
    start = datetime(2024, 1, 1, 18, 0, tzinfo=timezone(timedelta(hours=5)))

    reservation = make_reservation(start_at=start)

    assert reservation.start_at == datetime(2024, 1, 1, 13, 0)
    assert reservation.start_at.tzinfo is None


@pytest.mark.asyncio
async def test_aware_start_at_round_trip(test_db, test_customers):
    start = datetime(2024, 1, 1, 18, 0, tzinfo=timezone.utc)
    reservation = make_reservation(customer_id=test_customers[0].id, start_at=start)
    await reservation.create(test_db)

    test_db.expunge_all()
    found = await Reservation.get(test_db, reservation.id)
    assert found.start_at == datetime(2024, 1, 1, 18, 0)
