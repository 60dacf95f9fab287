"""Tests for the SQLAlchemy repositories on SQLite."""
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from fastapi_pagination import set_page

from app.adapters.outbound.persistence.repositories import client_repository, reservation_repository
from app.adapters.outbound.security.password_hasher import PasswordHasher
from app.application.dtos.reservation_dto import ReservationOutput
from app.application.dtos.response_dto import PaginatedResponse
from app.domain.exceptions import DuplicateEmailException
from app.shared.utils.pagination import PageParams

BASE_DATE = datetime(2030, 1, 1, 9, 0, tzinfo=timezone.utc)


async def _fetch(db, query):
    return list((await db.execute(query)).scalars().all())


async def _create_client(db, email="ana@x.com", name="Ana Ruiz"):
    return await client_repository.create_with_password(db, obj_in={
        "name": name, "email": email, "password": "123456", "phone": "+573000000", "age": 25,
    })


async def _create_reservation(db, client_id, days=0, status="Pending", service="Oil change"):
    return await reservation_repository.create(db, obj_in={
        "client_id": client_id,
        "vehicle": "Mazda 3",
        "service": service,
        "status": status,
        "scheduled_date": BASE_DATE + timedelta(days=days),
    })


class TestClientRepository:
    async def test_password_is_hashed(self, db_session):
        client = await _create_client(db_session)
        assert client.password != "123456"
        assert await PasswordHasher.verify_password("123456", client.password)

    async def test_email_is_normalized(self, db_session):
        client = await _create_client(db_session, email="  ANA@X.com ")
        assert client.email == "ana@x.com"
        assert (await client_repository.get_by_email(db_session, "Ana@x.com")).id == client.id

    async def test_unique_email_constraint(self, db_session):
        await _create_client(db_session)
        with pytest.raises(DuplicateEmailException):
            await _create_client(db_session, email="ANA@x.com")

    async def test_update_without_password_keeps_hash(self, db_session):
        client = await _create_client(db_session)
        original_hash = client.password
        updated = await client_repository.update_with_password(
            db_session, db_obj=client, obj_in={"phone": "+573001112233"}
        )
        assert updated.phone == "+573001112233"
        assert updated.password == original_hash

    async def test_update_with_password_rehashes(self, db_session):
        client = await _create_client(db_session)
        updated = await client_repository.update_with_password(
            db_session, db_obj=client, obj_in={"password": "abcdef"}
        )
        assert await PasswordHasher.verify_password("abcdef", updated.password)

    async def test_search_filters_are_partial_and_case_insensitive(self, db_session):
        await _create_client(db_session, email="ana@x.com", name="Ana Ruiz")
        await _create_client(db_session, email="luis@y.com", name="Luis Perez")

        clients = await _fetch(db_session, client_repository.search_query(name="ruIZ"))
        assert len(clients) == 1
        assert clients[0].email == "ana@x.com"

        clients = await _fetch(db_session, client_repository.search_query(email="Y.CO"))
        assert [c.name for c in clients] == ["Luis Perez"]

    async def test_search_treats_wildcards_literally(self, db_session):
        await _create_client(db_session)
        assert await _fetch(db_session, client_repository.search_query(name="%")) == []

    async def test_search_orders_newest_first(self, db_session):
        first = await _create_client(db_session, email="a@x.com")
        second = await _create_client(db_session, email="b@x.com")
        clients = await _fetch(db_session, client_repository.search_query())
        assert [c.id for c in clients] == [second.id, first.id]


class TestReservationRepository:
    async def test_create_loads_client_summary(self, db_session):
        client = await _create_client(db_session)
        reservation = await _create_reservation(db_session, client.id)
        assert reservation.client.email == "ana@x.com"

    async def test_dangling_reference_has_no_client(self, db_session):
        reservation = await _create_reservation(db_session, uuid4())
        fetched = await reservation_repository.get(db_session, reservation.id)
        assert fetched.client is None

    async def test_count_by_client_and_status(self, db_session):
        client = await _create_client(db_session)
        other = await _create_client(db_session, email="other@x.com")
        await _create_reservation(db_session, client.id, status="Pending")
        await _create_reservation(db_session, client.id, status="In progress")
        await _create_reservation(db_session, client.id, status="Completed")
        await _create_reservation(db_session, other.id, status="Pending")

        active = await reservation_repository.count_by_client_and_status(
            db_session, client.id, ["Pending", "In progress"]
        )
        assert active == 2

    async def test_search_orders_by_scheduled_date(self, db_session):
        client = await _create_client(db_session)
        late = await _create_reservation(db_session, client.id, days=5)
        early = await _create_reservation(db_session, client.id, days=1)
        reservations = await _fetch(db_session, reservation_repository.search_query())
        assert [r.id for r in reservations] == [early.id, late.id]

    async def test_search_filters(self, db_session):
        client = await _create_client(db_session)
        other = await _create_client(db_session, email="other@x.com")
        await _create_reservation(db_session, client.id, days=1, service="Oil change")
        await _create_reservation(db_session, client.id, days=3, status="Completed", service="Tire change")
        await _create_reservation(db_session, other.id, days=5)

        found = await _fetch(db_session, reservation_repository.search_query(client_id=client.id))
        assert len(found) == 2

        found = await _fetch(db_session, reservation_repository.search_query(status="Completed"))
        assert len(found) == 1
        assert found[0].service == "Tire change"

        found = await _fetch(db_session, reservation_repository.search_query(service="oil"))
        assert len(found) == 2

        found = await _fetch(db_session, reservation_repository.search_query(
            start_date=BASE_DATE + timedelta(days=1),
            end_date=BASE_DATE + timedelta(days=3),
        ))
        assert len(found) == 2

    async def test_paginate_builds_page_and_summary(self, db_session):
        client = await _create_client(db_session)
        for day in range(5):
            await _create_reservation(db_session, client.id, days=day)

        with set_page(PaginatedResponse[ReservationOutput]):
            page = await reservation_repository.paginate(
                db_session, reservation_repository.search_query(), PageParams(page=2, limit=2)
            )

        assert len(page.data) == 2
        assert page.data[0].client.email == "ana@x.com"
        assert page.pagination.model_dump(by_alias=True) == {
            "currentPage": 2,
            "totalPages": 3,
            "totalRecords": 5,
            "hasNext": True,
            "hasPrev": True,
        }
