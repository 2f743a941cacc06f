"""
API tests for the houses routes.
"""

from conftest import OWNER_EMAIL, TENANT_EMAIL


def house_id(repositories, name):
    return next(house["_id"] for house in repositories.houses.documents if house["houseName"] == name)


class TestHousesApi:
    """Test cases for /houses."""

    def test_list_all_houses(self, client):
        """Test that no query returns every house."""
        response = client.get("/houses")

        assert response.status_code == 200
        assert [house["houseName"] for house in response.json()] == ["Lake View", "Hill Top", "Old Town"]

    def test_list_houses_in_city(self, client):
        """Test that ?city= returns only that city."""
        response = client.get("/houses", params={"city": "Dhaka"})

        houses = response.json()
        assert {house["houseName"] for house in houses} == {"Lake View", "Old Town"}
        assert all(house["city"] == "Dhaka" for house in houses)

    def test_owner_lists_houses_by_email(self, client, auth_headers):
        """Test the owner listing."""
        response = client.get("/houses/user", params={"email": OWNER_EMAIL}, headers=auth_headers(OWNER_EMAIL))

        assert response.status_code == 200
        assert {house["houseName"] for house in response.json()} == {"Lake View", "Hill Top"}

    def test_owner_listing_without_email_is_empty(self, client, auth_headers):
        """Test that the owner listing without email is empty."""
        response = client.get("/houses/user", headers=auth_headers(OWNER_EMAIL))

        assert response.json() == []

    def test_get_house(self, client, repositories):
        """Test fetching one house."""
        response = client.get(f"/houses/{house_id(repositories, 'Hill Top')}")

        assert response.status_code == 200
        assert response.json()["city"] == "Chittagong"

    def test_get_missing_house_is_null(self, client):
        """Test that a well-formed unknown id returns null."""
        response = client.get("/houses/0123456789abcdef01234567")

        assert response.status_code == 200
        assert response.json() is None

    def test_get_malformed_id(self, client):
        """Test that a malformed id is a client error."""
        response = client.get("/houses/xyz")

        assert response.status_code == 400
        assert response.json()["error"] is True

    def test_owner_creates_house(self, client, repositories, auth_headers):
        """Test creating a house."""
        response = client.post(
            "/houses",
            json={"houseName": "River Side", "city": "Sylhet", "ownerEmail": OWNER_EMAIL},
            headers=auth_headers(OWNER_EMAIL),
        )

        assert response.status_code == 200
        created_id = response.json()["insertedId"]
        assert client.get(f"/houses/{created_id}").json()["houseName"] == "River Side"

    def test_owner_updates_only_editable_fields(self, client, repositories, auth_headers):
        """Test that a partial update ignores fields outside the editable set."""
        target = house_id(repositories, "Lake View")

        response = client.patch(
            f"/houses/{target}",
            json={
                "houseName": "Lake View Deluxe",
                "bedroomNumber": 4,
                "livingroomNumber": 1,
                "dineNumber": 1,
                "kitchenNumber": 1,
                "bathroomNumber": 2,
                "floorNumber": 5,
                "rentPrice": 30000,
                "city": "Rajshahi",
                "status": "rented",
                "ownerEmail": "thief@example.com",
            },
            headers=auth_headers(OWNER_EMAIL),
        )

        assert response.status_code == 200
        assert response.json()["modifiedCount"] == 1
        house = client.get(f"/houses/{target}").json()
        assert house["houseName"] == "Lake View Deluxe"
        assert house["rentPrice"] == 30000
        assert house["floorNumber"] == 5
        assert house["city"] == "Dhaka"
        assert house["status"] == "available"
        assert house["ownerEmail"] == OWNER_EMAIL

    def test_tenant_cannot_update_house(self, client, repositories, auth_headers):
        """Test that a Tenant cannot edit house details."""
        target = house_id(repositories, "Lake View")

        response = client.patch(f"/houses/{target}", json={"rentPrice": 1}, headers=auth_headers(TENANT_EMAIL))

        assert response.status_code == 403
        assert client.get(f"/houses/{target}").json()["rentPrice"] == 25000

    def test_any_authenticated_caller_updates_status(self, client, repositories, auth_headers):
        """Test that the status update needs authentication only."""
        target = house_id(repositories, "Hill Top")

        response = client.patch(
            f"/houses/status/{target}",
            json={"status": "rented"},
            headers=auth_headers(TENANT_EMAIL),
        )

        assert response.status_code == 200
        assert response.json()["matchedCount"] == 1
        house = client.get(f"/houses/{target}").json()
        assert house["status"] == "rented"
        assert house["houseName"] == "Hill Top"

    def test_status_update_without_token(self, client, repositories):
        """Test that the status update still needs a token."""
        target = house_id(repositories, "Hill Top")

        response = client.patch(f"/houses/status/{target}", json={"status": "rented"})

        assert response.status_code == 401
        assert repositories.houses.writes == 0

    def test_owner_deletes_house(self, client, repositories, auth_headers):
        """Test deleting a house leaves payments and rentals alone."""
        target = house_id(repositories, "Lake View")
        payments_before = len(repositories.payments.documents)
        rentals_before = len(repositories.rented_houses.documents)

        response = client.delete(f"/houses/{target}", headers=auth_headers(OWNER_EMAIL))

        assert response.json() == {"acknowledged": True, "deletedCount": 1}
        assert client.get(f"/houses/{target}").json() is None
        assert len(repositories.payments.documents) == payments_before
        assert len(repositories.rented_houses.documents) == rentals_before
