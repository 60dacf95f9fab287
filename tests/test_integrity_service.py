"""Tests for the referential integrity rules, run against in-memory repositories."""
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from app.application.ports.outbound import IClientRepository, IReservationRepository
from app.domain.exceptions import (
    ClientNotFoundException,
    DuplicateEmailException,
    HasActiveReservationsException,
    InvalidDateException,
    InvalidReferenceException,
)
from app.domain.models.client_domain_model import Client
from app.domain.models.reservation_domain_model import Reservation, ReservationStatus, ServiceType
from app.domain.services.integrity_service import ReferentialIntegrityService, parse_identifier

NOW = datetime(2030, 6, 1, 12, 0, tzinfo=timezone.utc)


class InMemoryClientRepository(IClientRepository[Client]):
    def __init__(self):
        self.items = {}

    async def get(self, db, id):
        return self.items.get(id)

    async def create(self, db, *, obj_in):
        client = Client(id=uuid4(), **obj_in)
        self.items[client.id] = client
        return client

    async def update(self, db, *, db_obj, obj_in):
        updated = replace(db_obj, **obj_in)
        self.items[updated.id] = updated
        return updated

    async def remove(self, db, *, id):
        return self.items.pop(id)

    async def get_by_email(self, db, email):
        return next((c for c in self.items.values() if c.email == email), None)

    def search_query(self, *, name=None, email=None):
        return [c for c in self.items.values() if name is None or name.lower() in c.name.lower()]

    async def paginate(self, db, query, params):
        offset = params.to_raw_params().offset
        return query[offset:offset + params.limit]


class InMemoryReservationRepository(IReservationRepository[Reservation]):
    def __init__(self):
        self.items = {}

    async def get(self, db, id):
        return self.items.get(id)

    async def create(self, db, *, obj_in):
        reservation = Reservation(id=uuid4(), **obj_in)
        self.items[reservation.id] = reservation
        return reservation

    async def update(self, db, *, db_obj, obj_in):
        updated = replace(db_obj, **obj_in)
        self.items[updated.id] = updated
        return updated

    async def remove(self, db, *, id):
        return self.items.pop(id)

    async def count_by_client_and_status(self, db, client_id, statuses):
        statuses = set(statuses)
        return sum(
            1 for r in self.items.values()
            if r.client_id == client_id and ReservationStatus(r.status).value in statuses
        )

    def search_query(self, *, client_id=None, status=None, service=None, start_date=None, end_date=None):
        return [r for r in self.items.values() if client_id is None or r.client_id == client_id]

    async def paginate(self, db, query, params):
        offset = params.to_raw_params().offset
        return query[offset:offset + params.limit]


@pytest.fixture
def clients():
    return InMemoryClientRepository()


@pytest.fixture
def reservations():
    return InMemoryReservationRepository()


@pytest.fixture
def integrity(clients, reservations):
    return ReferentialIntegrityService(None, clients, reservations, clock=lambda: NOW)


async def _client(clients, email="ana@x.com"):
    return await clients.create(None, obj_in={
        "name": "Ana Ruiz", "email": email, "password": "hash", "phone": "+573000000", "age": 25,
    })


async def _reservation(reservations, client_id, status):
    return await reservations.create(None, obj_in={
        "client_id": client_id,
        "vehicle": "Mazda 3",
        "service": ServiceType.OIL_CHANGE,
        "scheduled_date": NOW + timedelta(days=1),
        "status": status,
    })


class TestParseIdentifier:
    def test_parses_string(self):
        value = uuid4()
        assert parse_identifier(str(value)) == value

    def test_passes_uuid_through(self):
        value = uuid4()
        assert parse_identifier(value) is value

    @pytest.mark.parametrize("raw", ["123", "", None, "zzzzzzzz-zzzz-zzzz-zzzz-zzzzzzzzzzzz"])
    def test_rejects_malformed(self, raw):
        with pytest.raises(InvalidReferenceException):
            parse_identifier(raw)


class TestEmailUniqueness:
    async def test_free_email_passes(self, integrity):
        await integrity.ensure_email_unique("new@x.com")

    async def test_taken_email_is_rejected(self, integrity, clients):
        await _client(clients)
        with pytest.raises(DuplicateEmailException):
            await integrity.ensure_email_unique("ana@x.com")

    async def test_email_is_compared_normalized(self, integrity, clients):
        await _client(clients)
        with pytest.raises(DuplicateEmailException):
            await integrity.ensure_email_unique("  ANA@X.com ")

    async def test_client_may_keep_own_email(self, integrity, clients):
        client = await _client(clients)
        await integrity.ensure_email_unique("ana@x.com", exclude_id=client.id)

    async def test_other_client_email_is_rejected_on_update(self, integrity, clients):
        await _client(clients)
        other = await _client(clients, email="other@x.com")
        with pytest.raises(DuplicateEmailException):
            await integrity.ensure_email_unique("ana@x.com", exclude_id=other.id)


class TestClientReference:
    async def test_existing_client_is_returned(self, integrity, clients):
        client = await _client(clients)
        assert await integrity.ensure_client_exists(str(client.id)) is client

    async def test_missing_client(self, integrity):
        with pytest.raises(ClientNotFoundException):
            await integrity.ensure_client_exists(str(uuid4()))

    async def test_malformed_client_id(self, integrity):
        with pytest.raises(InvalidReferenceException):
            await integrity.ensure_client_exists("not-a-uuid")


class TestFutureDate:
    def test_future_date_passes(self, integrity):
        integrity.ensure_future_date(NOW + timedelta(hours=1))

    def test_now_is_rejected(self, integrity):
        with pytest.raises(InvalidDateException):
            integrity.ensure_future_date(NOW)

    def test_past_date_is_rejected(self, integrity):
        with pytest.raises(InvalidDateException):
            integrity.ensure_future_date(NOW - timedelta(seconds=1))

    def test_naive_date_is_treated_as_utc(self, integrity):
        integrity.ensure_future_date(datetime(2030, 6, 1, 12, 0, 1))
        with pytest.raises(InvalidDateException):
            integrity.ensure_future_date(datetime(2030, 6, 1, 11, 59, 59))

    def test_other_timezones_are_converted(self, integrity):
        # 13:00 at UTC+2 is 11:00 UTC
        plus_two = timezone(timedelta(hours=2))
        with pytest.raises(InvalidDateException):
            integrity.ensure_future_date(datetime(2030, 6, 1, 13, 0, tzinfo=plus_two))


class TestDeletionGuard:
    async def test_client_without_reservations(self, integrity, clients):
        client = await _client(clients)
        await integrity.guard_client_deletion(client.id)

    async def test_only_finished_reservations(self, integrity, clients, reservations):
        client = await _client(clients)
        await _reservation(reservations, client.id, ReservationStatus.COMPLETED)
        await _reservation(reservations, client.id, ReservationStatus.CANCELLED)
        await integrity.guard_client_deletion(client.id)

    @pytest.mark.parametrize("status", [ReservationStatus.PENDING, ReservationStatus.IN_PROGRESS])
    async def test_active_reservation_blocks(self, integrity, clients, reservations, status):
        client = await _client(clients)
        await _reservation(reservations, client.id, status)
        with pytest.raises(HasActiveReservationsException) as exc_info:
            await integrity.guard_client_deletion(client.id)
        assert exc_info.value.active_count == 1

    async def test_other_clients_reservations_do_not_count(self, integrity, clients, reservations):
        client = await _client(clients)
        other = await _client(clients, email="other@x.com")
        await _reservation(reservations, other.id, ReservationStatus.PENDING)
        await integrity.guard_client_deletion(client.id)
