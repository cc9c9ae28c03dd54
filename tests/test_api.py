"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from bento_designer.api.app import create_app


def _client(container) -> TestClient:
    return TestClient(create_app(container))


def test_health(container) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_box_and_locate(container) -> None:
    client = _client(container)

    box = client.get("/box").json()
    inside = client.post("/box/locate", json={"x": 10, "y": 10})
    outside = client.post("/box/locate", json={"x": 400, "y": 10})

    assert box["type"] == "rectangle"
    assert [partition["type"] for partition in box["partitions"]] == ["rice", "side"]
    assert inside.json()["id"] == box["partitions"][0]["id"]
    assert outside.status_code == 200
    assert outside.json() is None


def test_list_items_with_filters(container) -> None:
    client = _client(container)

    all_items = client.get("/items").json()
    mains = client.get("/items", params={"category": "main"}).json()

    assert len(all_items) == 20
    assert "cookingTime" in all_items[0]
    assert len(mains) == 5


def test_create_and_delete_item(container) -> None:
    client = _client(container)

    created = client.post(
        "/items",
        json={
            "name": "Pickled plum",
            "category": "other",
            "color": "red",
            "cookingTime": 0,
            "isReadyToEat": True,
        },
    )

    assert created.status_code == 201
    item = created.json()
    assert item["isReadyToEat"] is True
    assert len(client.get("/items").json()) == 21
    assert client.delete(f"/items/{item['id']}").status_code == 200
    assert client.delete(f"/items/{item['id']}").status_code == 404


def test_create_invalid_item(container) -> None:
    response = _client(container).post(
        "/items", json={"name": "Broken", "category": "dessert", "color": "green"}
    )

    assert response.status_code == 422
    assert response.json()["detail"]["errors"] == [
        "category must be one of: main, side, vegetable, fruit, other"
    ]


def test_suggestions(container) -> None:
    client = _client(container)

    response = client.post("/suggestions", json={"criterion": "speed", "limit": 3})

    assert response.status_code == 200
    scores = [suggestion["score"] for suggestion in response.json()]
    assert len(scores) == 3
    assert scores == sorted(scores, reverse=True)


def test_suggestions_for_selected_items(container) -> None:
    response = _client(container).post(
        "/suggestions",
        json={
            "criterion": "season",
            "season": "summer",
            "itemIds": ["ingredient-001", "ingredient-013"],
        },
    )

    ranked = response.json()
    assert [entry["item"]["id"] for entry in ranked] == [
        "ingredient-013",
        "ingredient-001",
    ]
    assert ranked[0]["reason"] == "in season (summer)"


def test_suggestions_unknown_criterion(container) -> None:
    response = _client(container).post("/suggestions", json={"criterion": "bogus"})

    assert response.status_code == 422


def test_placement_flow(container) -> None:
    client = _client(container)
    rice_id = container.box.partitions[0].id
    payload = {
        "itemId": "ingredient-001",
        "partitionId": rice_id,
        "position": {"x": 0, "y": 0},
    }

    created = client.post("/placements", json=payload)
    conflict = client.post("/placements", json=payload)

    assert created.status_code == 201
    placed = created.json()["placedItem"]
    assert placed["itemId"] == "ingredient-001"
    assert conflict.status_code == 409
    assert conflict.json() == {
        "success": False,
        "placedItem": None,
        "error": "overlaps with existing ingredient",
    }

    listed = client.get("/placements").json()
    assert [entry["id"] for entry in listed] == [placed["id"]]
    assert client.get("/placements/score").json()["color"] == 20

    assert client.delete(f"/placements/{placed['id']}").status_code == 200
    assert client.delete(f"/placements/{placed['id']}").status_code == 404


def test_placement_errors(container) -> None:
    client = _client(container)
    rice_id = container.box.partitions[0].id

    unknown_item = client.post(
        "/placements",
        json={
            "itemId": "missing",
            "partitionId": rice_id,
            "position": {"x": 0, "y": 0},
        },
    )
    unknown_partition = client.post(
        "/placements",
        json={
            "itemId": "ingredient-001",
            "partitionId": "partition-missing",
            "position": {"x": 0, "y": 0},
        },
    )
    out_of_bounds = client.post(
        "/placements",
        json={
            "itemId": "ingredient-001",
            "partitionId": rice_id,
            "position": {"x": 140, "y": 0},
        },
    )

    assert unknown_item.status_code == 404
    assert unknown_partition.status_code == 404
    assert unknown_partition.json()["error"] == "partition not found"
    assert out_of_bounds.status_code == 409
    assert out_of_bounds.json()["error"] == "extends beyond partition bounds"


def test_clear_placements(container) -> None:
    client = _client(container)
    payload = {
        "itemId": "ingredient-001",
        "partitionId": container.box.partitions[0].id,
        "position": {"x": 0, "y": 0},
    }
    client.post("/placements", json=payload)

    assert client.delete("/placements").status_code == 200
    assert client.get("/placements").json() == []
