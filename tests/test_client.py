from __future__ import annotations

import httpx
import pytest

from mandrill_client import Mandrill, client as client_mod, credentials
from mandrill_client.errors import ConfigurationError, UnknownTemplateError


class _Recorder:
    def __init__(self, result=None):
        self.calls: list[tuple[str, dict]] = []
        self.result = result

    def __call__(self, endpoint, params=None):
        self.calls.append((endpoint, dict(params or {})))
        return self.result


@pytest.fixture()
def mandrill(monkeypatch):
    m = Mandrill("test-key", transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})))
    recorder = _Recorder(result={"ok": True})
    monkeypatch.setattr(m, "call", recorder)
    yield m, recorder
    m.close()


def test_constructor_uses_env_key(monkeypatch) -> None:
    monkeypatch.setenv(credentials.ENV_APIKEY, "env-key")

    with Mandrill(transport=httpx.MockTransport(lambda request: httpx.Response(200, json={}))) as m:
        assert m.apikey == "env-key"
        assert m.base_url == "https://mandrillapp.com/api/1.0/"
        assert m.debug is False


def test_constructor_without_key_fails(monkeypatch) -> None:
    monkeypatch.delenv(credentials.ENV_APIKEY, raising=False)
    monkeypatch.setattr(client_mod, "resolve_apikey", lambda apikey: credentials.resolve_apikey(apikey, paths=()))

    with pytest.raises(ConfigurationError):
        Mandrill()


def test_context_manager_closes_transport() -> None:
    m = Mandrill("k", transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})))
    with m:
        assert not m._t._client.is_closed
    assert m._t._client.is_closed


def test_context_manager_closes_on_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"status": "error", "name": "Unknown_Template", "message": "no", "code": 5})

    m = Mandrill("k", transport=httpx.MockTransport(handler))
    with pytest.raises(UnknownTemplateError):
        with m:
            m.templates.info("missing")
    assert m._t._client.is_closed


def test_users_ping(mandrill) -> None:
    m, rec = mandrill
    assert m.users.ping() == {"ok": True}
    assert rec.calls == [("users/ping", {})]


def test_messages_send_maps_async_and_omits_unset(mandrill) -> None:
    m, rec = mandrill
    message = {"to": [{"email": "a@example.com"}], "subject": "hi"}

    m.messages.send(message, async_=True, send_at="2026-01-01 00:00:00")

    assert rec.calls == [
        ("messages/send", {"message": message, "async": True, "send_at": "2026-01-01 00:00:00"}),
    ]


def test_messages_send_template_uses_dashed_endpoint(mandrill) -> None:
    m, rec = mandrill

    m.messages.send_template("welcome", [{"name": "main", "content": "x"}], {"subject": "s"}, ip_pool="Main Pool")

    endpoint, params = rec.calls[0]
    assert endpoint == "messages/send-template"
    assert params == {
        "template_name": "welcome",
        "template_content": [{"name": "main", "content": "x"}],
        "message": {"subject": "s"},
        "async": False,
        "ip_pool": "Main Pool",
    }


def test_messages_search_defaults(mandrill) -> None:
    m, rec = mandrill
    m.messages.search(tags=["a"])
    assert rec.calls == [("messages/search", {"query": "*", "tags": ["a"], "limit": 100})]


def test_templates_add(mandrill) -> None:
    m, rec = mandrill
    m.templates.add("t1", subject="Hello", code="<p>hi</p>", labels=["x"])
    assert rec.calls == [
        ("templates/add", {"name": "t1", "subject": "Hello", "code": "<p>hi</p>", "publish": True, "labels": ["x"]}),
    ]


def test_rejects_list_sends_include_expired(mandrill) -> None:
    m, rec = mandrill
    m.rejects.list(email="a@example.com")
    assert rec.calls == [("rejects/list", {"email": "a@example.com", "include_expired": False})]


def test_webhooks_update_coerces_id(mandrill) -> None:
    m, rec = mandrill
    m.webhooks.update("42", "https://hooks.example.com", events=["send"])
    assert rec.calls == [
        ("webhooks/update", {"id": 42, "url": "https://hooks.example.com", "events": ["send"]}),
    ]


def test_ips_set_pool(mandrill) -> None:
    m, rec = mandrill
    m.ips.set_pool("127.0.0.1", "Main Pool", create_pool=True)
    assert rec.calls == [("ips/set-pool", {"ip": "127.0.0.1", "pool": "Main Pool", "create_pool": True})]


@pytest.mark.parametrize(
    "invoke, endpoint",
    [
        (lambda m: m.users.senders(), "users/senders"),
        (lambda m: m.tags.all_time_series(), "tags/all-time-series"),
        (lambda m: m.whitelists.delete("a@example.com"), "whitelists/delete"),
        (lambda m: m.senders.verify_domain("example.com", "postmaster"), "senders/verify-domain"),
        (lambda m: m.urls.check_tracking_domain("t.example.com"), "urls/check-tracking-domain"),
        (lambda m: m.subaccounts.pause("cust-1"), "subaccounts/pause"),
        (lambda m: m.inbound.add_route("example.com", "mail-*", "https://in.example.com"), "inbound/add-route"),
        (lambda m: m.exports.activity(notify_email="ops@example.com"), "exports/activity"),
        (lambda m: m.ips.check_custom_dns("127.0.0.1", "mail.example.com"), "ips/check-custom-dns"),
        (lambda m: m.metadata.update("website", "{{value}}"), "metadata/update"),
        (lambda m: m.messages.list_scheduled(), "messages/list-scheduled"),
        (lambda m: m.templates.time_series("t1"), "templates/time-series"),
    ],
)
def test_resource_endpoints(mandrill, invoke, endpoint) -> None:
    m, rec = mandrill
    invoke(m)
    assert rec.calls[0][0] == endpoint


def test_resource_round_trip_through_transport() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json=[{"tag": "welcome", "sent": 3}])

    with Mandrill("k", transport=httpx.MockTransport(handler)) as m:
        assert m.tags.list() == [{"tag": "welcome", "sent": 3}]

    assert seen == ["https://mandrillapp.com/api/1.0/tags/list.json"]
