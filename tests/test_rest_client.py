import json

import pytest
import requests

from app.services.order_client import OrderClient
from app.services.product_client import ProductClient
from app.utils import rest_client
from app.utils.rest_client import NO_RESPONSE_MESSAGE, RemoteServiceError, RestClient


def _response(status, body=None, raw=None):
    resp = requests.Response()
    resp.status_code = status
    if raw is not None:
        resp._content = raw.encode()
    else:
        resp._content = json.dumps(body).encode() if body is not None else b""
        resp.headers["Content-Type"] = "application/json"
    return resp


@pytest.fixture
def fake_http(monkeypatch):
    state = {"calls": [], "result": _response(200, {"ok": True})}

    def fake_request(method, url, **kwargs):
        state["calls"].append((method, url, kwargs))
        result = state["result"]
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(rest_client.requests, "request", fake_request)
    return state


def test_get_returns_json_body(fake_http):
    api = RestClient("http://orders:5000/")

    assert api.get("/api/v1/order/1") == {"ok": True}
    method, url, kwargs = fake_http["calls"][0]
    assert method == "GET"
    assert url == "http://orders:5000/api/v1/order/1"
    assert kwargs["timeout"] == 5
    assert kwargs["headers"] == {"Content-Type": "application/json"}


def test_post_and_put_send_json(fake_http):
    api = RestClient("http://orders")

    api.post("/x", {"a": 1})
    api.put("/x", {"b": 2})

    assert [c[2]["json"] for c in fake_http["calls"]] == [{"a": 1}, {"b": 2}]
    assert [c[0] for c in fake_http["calls"]] == ["POST", "PUT"]


def test_empty_body_is_none(fake_http):
    fake_http["result"] = _response(204)
    assert RestClient("http://orders").delete("/x") is None


def test_bearer_token_set_and_removed(fake_http):
    api = RestClient("http://orders")

    api.set_auth_token("abc")
    api.get("/x")
    api.remove_auth_token()
    api.get("/x")

    assert fake_http["calls"][0][2]["headers"]["Authorization"] == "Bearer abc"
    assert "Authorization" not in fake_http["calls"][1][2]["headers"]


def test_tokens_do_not_leak_between_instances(fake_http):
    RestClient("http://orders", token="alice")
    RestClient("http://orders").get("/x")
    assert "Authorization" not in fake_http["calls"][0][2]["headers"]


def test_error_status_carries_body_verbatim(fake_http):
    fake_http["result"] = _response(422, {"errors": ["bad"], "message": "Invalid"})

    with pytest.raises(RemoteServiceError) as exc:
        RestClient("http://orders").post("/x", {})

    assert exc.value.payload == {"errors": ["bad"], "message": "Invalid"}
    assert exc.value.status_code == 422
    assert exc.value.message == "Invalid"


def test_error_status_with_text_body(fake_http):
    fake_http["result"] = _response(502, raw="Bad Gateway")

    with pytest.raises(RemoteServiceError) as exc:
        RestClient("http://orders").get("/x")

    assert exc.value.payload == "Bad Gateway"


@pytest.mark.parametrize("error", [requests.ConnectionError("refused"), requests.Timeout("slow")])
def test_no_response_is_normalized(fake_http, error):
    fake_http["result"] = error

    with pytest.raises(RemoteServiceError) as exc:
        RestClient("http://orders").get("/x")

    assert exc.value.payload == {"message": NO_RESPONSE_MESSAGE}
    assert exc.value.status_code is None


def test_other_local_fault_carries_own_message(fake_http):
    fake_http["result"] = requests.exceptions.InvalidURL("bad url")

    with pytest.raises(RemoteServiceError) as exc:
        RestClient("http://orders").get("/x")

    assert exc.value.payload == {"message": "bad url"}


def test_order_client_paths(fake_http):
    client = OrderClient(RestClient("http://orders"))

    client.get_user_orders(7)
    client.get_order("o1")
    client.create_order({"total_price": 1})
    client.delete_order("o1")
    client.delete_user_orders(7)

    assert [(m, u) for m, u, _ in fake_http["calls"]] == [
        ("GET", "http://orders/api/v1/order/user/7"),
        ("GET", "http://orders/api/v1/order/o1"),
        ("POST", "http://orders/api/v1/order"),
        ("DELETE", "http://orders/api/v1/order/o1"),
        ("DELETE", "http://orders/api/v1/order/user/7"),
    ]


def test_order_client_reraises_untouched(fake_http):
    fake_http["result"] = _response(500, {"message": "boom"})

    with pytest.raises(RemoteServiceError) as exc:
        OrderClient(RestClient("http://orders")).delete_user_orders(1)

    assert exc.value.payload == {"message": "boom"}


def test_product_client_paths(fake_http):
    client = ProductClient(RestClient("http://products"))

    client.get_all_products()
    client.get_product_by_id("p1")

    assert [u for _, u, _ in fake_http["calls"]] == [
        "http://products/api/v1/product",
        "http://products/api/v1/product/p1",
    ]
