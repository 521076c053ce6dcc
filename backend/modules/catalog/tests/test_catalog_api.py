from fastapi import status

from modules.catalog.tests.factories import ItemFactory, ItemTypeFactory


class TestItemTypeAPI:

    def test_list_item_types_empty(self, client):
        response = client.get("/item-types")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_create_and_get_item_type(self, client):
        response = client.post(
            "/item-types", json={"name": "coffee", "display_name": "Coffee"}
        )
        assert response.status_code == status.HTTP_201_CREATED
        created = response.json()

        response = client.get(f"/item-types/{created['id']}")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "coffee"

    def test_create_duplicate_item_type(self, client, db_session):
        """Duplicate names map to 400 with the validation error code."""
        ItemTypeFactory(name="coffee")

        response = client.post("/item-types", json={"name": "coffee"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_get_unknown_item_type(self, client):
        response = client.get("/item-types/unknown")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        body = response.json()
        assert body["error_code"] == "NOT_FOUND"
        assert body["path"] == "/item-types/unknown"

    def test_update_item_type(self, client, db_session):
        item_type = ItemTypeFactory(name="milk")

        response = client.put(
            f"/item-types/{item_type.id}", json={"display_name": "Milk"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["display_name"] == "Milk"
        assert response.json()["name"] == "milk"

    def test_delete_item_type(self, client, db_session):
        item_type = ItemTypeFactory()

        response = client.delete(f"/item-types/{item_type.id}")
        assert response.status_code == status.HTTP_204_NO_CONTENT

        response = client.delete(f"/item-types/{item_type.id}")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_item_type_in_use(self, client, db_session):
        item = ItemFactory()

        response = client.delete(f"/item-types/{item.item_type_id}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestItemAPI:

    def test_create_item(self, client, db_session):
        item_type = ItemTypeFactory(name="coffee")

        response = client.post(
            "/items",
            json={
                "name": "Americano",
                "abbreviation": "AM",
                "price": 400,
                "key": "a",
                "item_type_id": item_type.id,
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["price"] == 400
        assert data["item_type"]["name"] == "coffee"

    def test_create_item_unknown_type(self, client):
        response = client.post(
            "/items", json={"name": "Americano", "price": 400, "item_type_id": "nope"}
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_item_negative_price(self, client, db_session):
        """Body shape errors are rejected by request validation."""
        item_type = ItemTypeFactory()

        response = client.post(
            "/items", json={"name": "Americano", "price": -1, "item_type_id": item_type.id}
        )

        assert response.status_code == 422

    def test_list_items_filtered(self, client, db_session):
        coffee = ItemTypeFactory(name="coffee")
        milk = ItemTypeFactory(name="milk")
        ItemFactory(item_type=coffee)
        ItemFactory(item_type=milk)

        response = client.get("/items", params={"item_type_id": milk.id})

        assert response.status_code == status.HTTP_200_OK
        assert [i["item_type_id"] for i in response.json()] == [milk.id]

    def test_update_item_partial(self, client, db_session):
        item = ItemFactory(name="Latte", price=450)

        response = client.put(f"/items/{item.id}", json={"price": 480})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["price"] == 480
        assert response.json()["name"] == "Latte"

    def test_delete_item(self, client, db_session):
        item = ItemFactory()

        assert client.delete(f"/items/{item.id}").status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/items/{item.id}").status_code == status.HTTP_404_NOT_FOUND
