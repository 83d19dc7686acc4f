import base64
import json

import httpx
import pytest

from conftest import BASE_URL
from intercom import DecodeError, HTTPStatusError, TransportError


def basic(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return f"Basic {token}"


def test_get_composes_url_from_base(client, recorder):
    client.get("contacts", {})
    request = recorder.last
    assert request.method == "GET"
    assert f"{request.url.scheme}://{request.url.host}" == BASE_URL
    assert request.url.path == "/contacts"


def test_get_sends_payload_as_query(client, recorder):
    client.get("contacts", {"email": "a@b.com"})
    request = recorder.last
    assert request.url.params["email"] == "a@b.com"
    assert request.content == b""


def test_post_sends_payload_as_json_body(client, recorder):
    client.post("contacts", {"email": "a@b.com"})
    request = recorder.last
    assert request.method == "POST"
    assert request.url.path == "/contacts"
    assert "email" not in request.url.params
    assert recorder.last_json() == {"email": "a@b.com"}


@pytest.mark.parametrize("verb", ["put", "delete"])
def test_put_and_delete_send_json_body(client, recorder, verb):
    getattr(client, verb)("users/5", {"name": "Ann"})
    assert recorder.last.method == verb.upper()
    assert recorder.last.url.path == "/users/5"
    assert recorder.last_json() == {"name": "Ann"}


@pytest.mark.parametrize("call", [
    lambda c: c.get("users", {}),
    lambda c: c.post("users", {}),
    lambda c: c.put("users", {}),
    lambda c: c.delete("users", {}),
    lambda c: c.next_page({"next": "https://api.intercom.test/users?page=2"}),
])
def test_every_operation_sends_basic_auth_and_accept(client, recorder, call):
    call(client)
    assert recorder.last.headers["Authorization"] == basic("app", "key")
    assert recorder.last.headers["Accept"] == "application/json"


def test_next_page_uses_cursor_url_verbatim(client, recorder):
    client.next_page({"next": "https://host/x?starting_after=9"})
    request = recorder.last
    assert request.method == "GET"
    assert str(request.url) == "https://host/x?starting_after=9"


def test_next_page_accepts_attribute_cursor(client, recorder):
    class Pages:
        next = "https://host/y?page=3"

    client.next_page(Pages())
    assert str(recorder.last.url) == "https://host/y?page=3"


def test_decodes_json_object(client, recorder):
    recorder.raw = b'{"id":"42","type":"contact"}'
    assert client.get("contacts/42") == {"id": "42", "type": "contact"}


def test_decodes_json_array_and_scalar(client, recorder):
    recorder.raw = b"[1, 2]"
    assert client.post("things", {}) == [1, 2]
    recorder.raw = b"true"
    assert client.put("things", {}) is True


def test_non_json_body_raises_decode_error(client, recorder):
    recorder.raw = b"<html>oops</html>"
    with pytest.raises(DecodeError) as excinfo:
        client.get("contacts")
    assert excinfo.value.text == "<html>oops</html>"
    assert isinstance(excinfo.value, ValueError)


def test_empty_200_body_is_a_decode_error(client, recorder):
    recorder.raw = b""
    with pytest.raises(DecodeError):
        client.delete("users/1")


def test_no_content_returns_none(client, recorder):
    recorder.status_code = 204
    recorder.raw = b""
    assert client.delete("users/1") is None


def test_error_status_raises_with_response(client, recorder):
    recorder.status_code = 404
    recorder.body = {"type": "error.list", "errors": [{"code": "not_found"}]}
    with pytest.raises(HTTPStatusError) as excinfo:
        client.get("users/missing")
    assert excinfo.value.status_code == 404
    assert excinfo.value.response.json()["errors"][0]["code"] == "not_found"


def test_rate_limit_is_not_retried(client, recorder):
    recorder.status_code = 429
    with pytest.raises(HTTPStatusError):
        client.get("users")
    assert len(recorder.requests) == 1


def test_transport_failure_raises_transport_error(client):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client.set_client(httpx.Client(transport=httpx.MockTransport(handler)))
    with pytest.raises(TransportError) as excinfo:
        client.get("users")
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)
    assert excinfo.value.method == "GET"


def test_extra_headers_are_merged_into_defaults(make_client, recorder):
    client = make_client({"headers": {"Intercom-Version": "1.1"}})
    client.get("admins")
    assert recorder.last.headers["Intercom-Version"] == "1.1"
    assert recorder.last.headers["Accept"] == "application/json"


def test_extra_options_override_defaults(make_client, recorder):
    client = make_client({"headers": {"Accept": "application/xml"}, "auth": ("other", "pw")})
    recorder.raw = b"{}"
    client.post("users", {"email": "a@b.com"})
    assert recorder.last.headers["Accept"] == "application/xml"
    assert recorder.last.headers["Authorization"] == basic("other", "pw")


def test_extra_json_fields_merge_into_body(make_client, recorder):
    client = make_client({"json": {"update_last_request_at": True}})
    client.post("users", {"email": "a@b.com"})
    assert recorder.last_json() == {"email": "a@b.com", "update_last_request_at": True}


def test_set_client_replaces_transport(client, recorder):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={"replaced": True})

    client.set_client(httpx.Client(transport=httpx.MockTransport(handler)))
    assert client.get("counts") == {"replaced": True}
    assert len(calls) == 1
    assert recorder.requests == []


def test_one_request_per_call(client, recorder):
    client.get("users")
    client.post("users", {})
    assert len(recorder.requests) == 2


def test_get_auth_returns_credentials(make_client):
    client = make_client(username="id", password="secret")
    assert client.get_auth() == ("id", "secret")


def test_response_body_is_returned_as_plain_json(client, recorder):
    recorder.body = {"type": "user.list", "users": [{"id": "1"}], "pages": {"next": None}}
    result = client.get("users")
    assert json.dumps(result)
    assert result["users"] == [{"id": "1"}]


def test_cookie_jar_in_extra_options_is_sent(make_client, recorder):
    cookies = httpx.Cookies({"s": "1"})
    client = make_client({"cookies": cookies})
    client.get("users")
    assert recorder.last.headers["Cookie"] == "s=1"


def test_auth_list_in_extra_options_is_sent_as_basic(make_client, recorder):
    client = make_client({"auth": ["other", "pw"]})
    client.get("users")
    assert recorder.last.headers["Authorization"] == basic("other", "pw")


@pytest.mark.parametrize("cursor", [{}, {"next": None}, {"next": "not a url"}])
def test_next_page_with_unusable_cursor_raises_transport_error(settings, cursor):
    from intercom import HTTPClient

    with HTTPClient("app", "key", settings=settings) as client:
        client.set_client(httpx.Client(trust_env=False))
        with pytest.raises(TransportError):
            client.next_page(cursor)
