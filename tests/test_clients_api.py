"""End-to-end tests for the client endpoints."""
from uuid import uuid4

from app.shared.utils.pagination import MAX_PAGE, MAX_PAGE_SIZE


class TestCreateClient:
    async def test_create_client(self, api_client, client_payload):
        response = await api_client.post("/api/clients", json=client_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Client created successfully"
        assert body["data"]["email"] == "ana@x.com"
        assert body["data"]["name"] == "Ana Ruiz"
        assert "password" not in body["data"]
        assert "createdAt" in body["data"]

    async def test_duplicate_email(self, api_client, client_payload):
        await api_client.post("/api/clients", json=client_payload)
        response = await api_client.post("/api/clients", json=client_payload)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["code"] == "DUPLICATE_EMAIL"
        assert body["message"] == "Email is already registered"

    async def test_duplicate_email_differs_only_in_case(self, api_client, client_payload):
        await api_client.post("/api/clients", json=client_payload)
        client_payload["email"] = " ANA@X.COM "
        response = await api_client.post("/api/clients", json=client_payload)
        assert response.json()["code"] == "DUPLICATE_EMAIL"

    async def test_all_validation_errors_at_once(self, api_client):
        response = await api_client.post("/api/clients", json={})

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "INVALID_INPUT"
        assert {e["field"] for e in body["errors"]} == {"name", "email", "password", "phone", "age"}

    async def test_invalid_values(self, api_client, client_payload):
        client_payload.update({"email": "bad", "age": 15})
        response = await api_client.post("/api/clients", json=client_payload)

        assert response.status_code == 400
        assert {e["field"] for e in response.json()["errors"]} == {"email", "age"}

    async def test_age_of_wrong_type(self, api_client, client_payload):
        client_payload["age"] = "abc"
        response = await api_client.post("/api/clients", json=client_payload)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["errors"][0]["field"] == "age"


class TestGetClient:
    async def test_get_client(self, api_client, created_client):
        response = await api_client.get(f"/api/clients/{created_client['id']}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data == created_client
        assert "password" not in data

    async def test_unknown_client(self, api_client):
        response = await api_client.get(f"/api/clients/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["code"] == "RESOURCE_NOT_FOUND"

    async def test_malformed_id(self, api_client):
        response = await api_client.get("/api/clients/123")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_REFERENCE"


class TestListClients:
    async def test_pagination(self, api_client, client_payload):
        for index in range(25):
            client_payload["email"] = f"client{index}@x.com"
            response = await api_client.post("/api/clients", json=client_payload)
            assert response.status_code == 201

        first = await api_client.get("/api/clients", params={"page": 1, "limit": 10})
        body = first.json()
        assert len(body["data"]) == 10
        assert body["pagination"] == {
            "currentPage": 1,
            "totalPages": 3,
            "totalRecords": 25,
            "hasNext": True,
            "hasPrev": False,
        }

        last = await api_client.get("/api/clients", params={"page": 3, "limit": 10})
        body = last.json()
        assert len(body["data"]) == 5
        assert body["pagination"]["hasNext"] is False
        assert body["pagination"]["hasPrev"] is True

        pages = [first.json()["data"], (await api_client.get("/api/clients", params={"page": 2})).json()["data"],
                 body["data"]]
        ids = {client["id"] for page in pages for client in page}
        assert len(ids) == 25

    async def test_page_beyond_the_end_is_empty(self, api_client, created_client):
        response = await api_client.get("/api/clients", params={"page": 5})

        assert response.status_code == 200
        assert response.json()["data"] == []
        assert response.json()["pagination"]["totalRecords"] == 1

    async def test_filters(self, api_client, client_payload):
        await api_client.post("/api/clients", json=client_payload)
        client_payload.update({"name": "Luis Perez", "email": "luis@y.com"})
        await api_client.post("/api/clients", json=client_payload)

        response = await api_client.get("/api/clients", params={"name": "luis"})
        assert [c["email"] for c in response.json()["data"]] == ["luis@y.com"]

        response = await api_client.get("/api/clients", params={"email": "X.COM"})
        assert [c["name"] for c in response.json()["data"]] == ["Ana Ruiz"]

    async def test_invalid_page_parameters(self, api_client):
        response = await api_client.get("/api/clients", params={"page": 0})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_INPUT"

        response = await api_client.get("/api/clients", params={"limit": 101})
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "limit"

    async def test_page_too_large_for_an_offset(self, api_client):
        response = await api_client.get("/api/clients", params={"page": 10 ** 18})

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "INVALID_INPUT"
        assert body["errors"][0]["field"] == "page"

    async def test_largest_page_is_served(self, api_client, created_client):
        response = await api_client.get("/api/clients", params={"page": MAX_PAGE, "limit": MAX_PAGE_SIZE})

        assert response.status_code == 200
        assert response.json()["data"] == []
        assert response.json()["pagination"]["hasPrev"] is True


class TestUpdateClient:
    async def test_partial_update(self, api_client, created_client):
        response = await api_client.put(
            f"/api/clients/{created_client['id']}", json={"phone": "+573001112233"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Client updated successfully"
        data = body["data"]
        assert data["phone"] == "+573001112233"
        assert data["name"] == created_client["name"]
        assert data["email"] == created_client["email"]
        assert data["age"] == created_client["age"]

    async def test_keep_own_email(self, api_client, created_client):
        response = await api_client.put(
            f"/api/clients/{created_client['id']}", json={"email": "ana@x.com", "age": 30}
        )
        assert response.status_code == 200
        assert response.json()["data"]["age"] == 30

    async def test_email_of_another_client(self, api_client, created_client, client_payload):
        client_payload["email"] = "other@x.com"
        await api_client.post("/api/clients", json=client_payload)

        response = await api_client.put(
            f"/api/clients/{created_client['id']}", json={"email": "other@x.com"}
        )
        assert response.status_code == 400
        assert response.json()["code"] == "DUPLICATE_EMAIL"

    async def test_invalid_field(self, api_client, created_client):
        response = await api_client.put(f"/api/clients/{created_client['id']}", json={"name": "A"})

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"field": "name", "message": "Name must be between 2 and 50 characters"}
        ]

    async def test_unknown_client(self, api_client):
        response = await api_client.put(f"/api/clients/{uuid4()}", json={"age": 40})
        assert response.status_code == 404


class TestDeleteClient:
    async def test_delete_client(self, api_client, created_client):
        response = await api_client.delete(f"/api/clients/{created_client['id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Client deleted successfully"}
        assert (await api_client.get(f"/api/clients/{created_client['id']}")).status_code == 404

    async def test_unknown_client(self, api_client):
        response = await api_client.delete(f"/api/clients/{uuid4()}")
        assert response.status_code == 404


class TestApplicationRoutes:
    async def test_health(self, api_client):
        response = await api_client.get("/health")
        assert response.json() == {"status": "ok"}

    async def test_welcome(self, api_client):
        response = await api_client.get("/")
        assert response.json()["docs"] == "/docs"

    async def test_request_id_is_echoed(self, api_client):
        response = await api_client.get("/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

        generated = await api_client.get("/health")
        assert generated.headers["X-Request-ID"]

    async def test_error_envelope_keeps_request_id(self, api_client):
        response = await api_client.get(f"/api/clients/{uuid4()}")
        assert response.status_code == 404
        assert "X-Request-ID" in response.headers

    async def test_openapi_has_no_422(self, api_client):
        schema = (await api_client.get("/openapi.json")).json()
        for path in schema["paths"].values():
            for operation in path.values():
                assert "422" not in operation["responses"]
