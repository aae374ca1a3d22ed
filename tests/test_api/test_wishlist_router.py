"""Tests for the wishlist HTTP endpoints."""

import uuid

import pytest

BASE = "/api/v1/wishlist"


@pytest.fixture
def folder_id(client, auth_headers):
    response = client.post(f"{BASE}/folder", json={"name": "Favorites"}, headers=auth_headers)
    assert response.status_code == 200
    return response.json()["folders"][0]["id"]


class TestAuthentication:
    """Tests for bearer token handling."""

    def test_missing_token(self, client):
        """Test requests without a token are rejected."""
        response = client.get(f"{BASE}/")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    def test_invalid_token(self, client):
        """Test garbage tokens are rejected."""
        response = client.get(f"{BASE}/", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401

    def test_users_are_isolated(self, client, auth_headers_for, folder_id):
        """Test one user's folders are invisible to another."""
        response = client.get(f"{BASE}/", headers=auth_headers_for("user-2"))

        assert response.status_code == 200
        assert response.json()["userId"] == "user-2"
        assert response.json()["folders"] == []


class TestGetWishlist:
    """Tests for GET /."""

    def test_first_access_creates_empty_wishlist(self, client, auth_headers):
        """Test the wishlist is created on first read."""
        response = client.get(f"{BASE}/", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["userId"] == "user-1"
        assert body["folders"] == []
        assert body["version"] == 1

    def test_repeated_reads_are_stable(self, client, auth_headers):
        """Test reading twice does not create a second wishlist."""
        first = client.get(f"{BASE}/", headers=auth_headers).json()
        second = client.get(f"{BASE}/", headers=auth_headers).json()

        assert first["version"] == second["version"] == 1


class TestFolderEndpoints:
    """Tests for folder creation and deletion."""

    def test_create_folder(self, client, auth_headers):
        """Test POST /folder returns the full wishlist."""
        response = client.post(f"{BASE}/folder", json={"name": "Favorites"}, headers=auth_headers)

        assert response.status_code == 200
        folders = response.json()["folders"]
        assert len(folders) == 1
        assert folders[0]["name"] == "Favorites"
        assert folders[0]["items"] == []
        uuid.UUID(folders[0]["id"])

    @pytest.mark.parametrize("body", [{}, {"name": ""}, {"name": "   "}])
    def test_create_folder_blank_name(self, client, auth_headers, body):
        """Test blank names are a 400."""
        response = client.post(f"{BASE}/folder", json=body, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_delete_folder_with_items(self, client, auth_headers, folder_id):
        """Test deleting a folder holding two items leaves no folders."""
        for ref_id in ["L1", "L2"]:
            client.post(
                f"{BASE}/folder/{folder_id}/item",
                json={"refId": ref_id, "type": "listing"},
                headers=auth_headers,
            )

        response = client.delete(f"{BASE}/folder/{folder_id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["folders"] == []
        assert client.get(f"{BASE}/", headers=auth_headers).json()["folders"] == []

    def test_delete_unknown_folder(self, client, auth_headers, folder_id):
        """Test deleting an unknown folder is a no-op success."""
        response = client.delete(f"{BASE}/folder/{uuid.uuid4()}", headers=auth_headers)

        assert response.status_code == 200
        assert len(response.json()["folders"]) == 1


class TestItemEndpoints:
    """Tests for adding and removing items."""

    def test_add_item(self, client, auth_headers, folder_id):
        """Test the Favorites scenario end to end."""
        response = client.post(
            f"{BASE}/folder/{folder_id}/item",
            json={"refId": "L1", "type": "listing"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        folders = response.json()["folders"]
        assert len(folders) == 1
        assert folders[0]["name"] == "Favorites"
        assert folders[0]["items"] == [{"refId": "L1", "type": "listing"}]

    def test_add_duplicate_item(self, client, auth_headers, folder_id):
        """Test adding the same item twice is a 409 and keeps one copy."""
        url = f"{BASE}/folder/{folder_id}/item"
        client.post(url, json={"refId": "L1", "type": "listing"}, headers=auth_headers)

        response = client.post(url, json={"refId": "L1", "type": "listing"}, headers=auth_headers)

        assert response.status_code == 409
        assert response.json()["error"] == {
            "code": "DUPLICATE_ITEM",
            "message": "Item already in folder",
        }
        items = client.get(f"{BASE}/", headers=auth_headers).json()["folders"][0]["items"]
        assert len(items) == 1

    def test_add_invalid_type(self, client, auth_headers, folder_id):
        """Test unknown type tags are a 400."""
        response = client.post(
            f"{BASE}/folder/{folder_id}/item",
            json={"refId": "L1", "type": "castle"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid item type"

    def test_add_missing_ref_id(self, client, auth_headers, folder_id):
        """Test a body without refId is a 400."""
        response = client.post(
            f"{BASE}/folder/{folder_id}/item",
            json={"type": "listing"},
            headers=auth_headers,
        )

        assert response.status_code == 400

    def test_add_unknown_catalog_item(self, client, auth_headers, folder_id):
        """Test items missing from the catalog are a 404."""
        response = client.post(
            f"{BASE}/folder/{folder_id}/item",
            json={"refId": "L404", "type": "listing"},
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Item not found"

    def test_add_to_unknown_folder(self, client, auth_headers):
        """Test adding to an unknown folder is a 404."""
        response = client.post(
            f"{BASE}/folder/{uuid.uuid4()}/item",
            json={"refId": "L1", "type": "listing"},
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Folder not found"

    def test_remove_item(self, client, auth_headers, folder_id):
        """Test DELETE removes the item by ref id."""
        client.post(
            f"{BASE}/folder/{folder_id}/item",
            json={"refId": "L1", "type": "listing"},
            headers=auth_headers,
        )

        response = client.delete(f"{BASE}/folder/{folder_id}/item/L1", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["folders"][0]["items"] == []

    def test_remove_absent_item(self, client, auth_headers, folder_id):
        """Test removing an item that is not saved succeeds."""
        response = client.delete(f"{BASE}/folder/{folder_id}/item/L9", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["folders"][0]["items"] == []

    def test_remove_with_type_filter(self, client, auth_headers, folder_id):
        """Test the type query parameter narrows the removal."""
        client.post(
            f"{BASE}/folder/{folder_id}/item",
            json={"refId": "L1", "type": "listing"},
            headers=auth_headers,
        )

        response = client.delete(
            f"{BASE}/folder/{folder_id}/item/L1",
            params={"type": "experience"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["folders"][0]["items"] == [{"refId": "L1", "type": "listing"}]

    def test_remove_from_unknown_folder(self, client, auth_headers):
        """Test removing from an unknown folder is a 404."""
        response = client.delete(f"{BASE}/folder/{uuid.uuid4()}/item/L1", headers=auth_headers)

        assert response.status_code == 404


class TestResponseHeaders:
    """Tests for middleware-provided headers."""

    def test_request_id_and_security_headers(self, client, auth_headers):
        """Test every response carries request id and security headers."""
        response = client.get(f"{BASE}/", headers=auth_headers)

        assert response.headers["X-Request-ID"]
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_request_id_is_echoed(self, client, auth_headers):
        """Test a caller-supplied request id is kept."""
        response = client.get(f"{BASE}/", headers={**auth_headers, "X-Request-ID": "req-42"})

        assert response.headers["X-Request-ID"] == "req-42"
