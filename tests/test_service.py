import pytest
from fastapi.testclient import TestClient

from service import app
from sequence import generate_sorted_array

client = TestClient(app)


def test_health():
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


@pytest.mark.parametrize("target, found", [(8, True), (20, True), (2, True), (9, False), (1, False), (21, False)])
def test_search_reference_sequence(target, found):
    res = client.post("/search", json={"target": target})
    assert res.status_code == 200
    body = res.json()
    assert body["found"] is found
    assert body["message"] == ("Found!" if found else "Not found!")
    assert body["steps"] == []


def test_search_custom_values_and_range():
    res = client.post("/search", json={"target": 3, "values": [1, 3, 5, 7], "low": 2, "high": 3})
    assert res.json()["found"] is False
    res = client.post("/search", json={"target": 7, "values": [1, 3, 5, 7], "variant": "iterative"})
    assert res.json()["found"] is True


def test_search_with_trace():
    res = client.post("/search", json={"target": 9, "variant": "recursive", "trace": True})
    steps = res.json()["steps"]
    assert [s["direction"] for s in steps] == ["right", "left", "left", "miss"]
    assert steps[-1]["value"] is None


def test_unsorted_values_rejected():
    res = client.post("/search", json={"target": 3, "values": [5, 3, 1]})
    assert res.status_code == 400


def test_out_of_bounds_range_rejected():
    res = client.post("/search", json={"target": 3, "low": 0, "high": 10})
    assert res.status_code == 400
    assert "outside" in res.json()["detail"]


def test_malformed_body_rejected():
    assert client.post("/search", json={"target": "eight"}).status_code == 422
    assert client.post("/search", json={"target": 8, "variant": "linear"}).status_code == 422


def test_sequence_defaults():
    res = client.get("/sequence")
    assert res.status_code == 200
    assert res.json() == {"values": generate_sorted_array(12, 2, 90, 9473), "seed": 9473}


def test_sequence_with_parameters():
    res = client.get("/sequence", params={"size": 5, "min_value": 10, "max_value": 14, "seed": 3})
    assert res.json()["values"] == [10, 11, 12, 13, 14]


def test_sequence_that_cannot_fit():
    res = client.get("/sequence", params={"size": 20, "min_value": 0, "max_value": 5})
    assert res.status_code == 400


@pytest.mark.parametrize("size", [0, 65, -3])
def test_sequence_size_out_of_bounds(size):
    res = client.get("/sequence", params={"size": size})
    assert res.status_code == 422


def test_sequence_size_limits_are_inclusive():
    assert len(client.get("/sequence", params={"size": 1}).json()["values"]) == 1
    res = client.get("/sequence", params={"size": 64, "min_value": 0, "max_value": 1000})
    assert len(res.json()["values"]) == 64
