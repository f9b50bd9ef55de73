"""Tests client Contentful — résolution des liens, requêtes, erreurs, sélection preview."""
from unittest.mock import MagicMock

import pytest
import requests

from tempo_site.config import DELIVERY_HOST, PREVIEW_HOST
from tempo_site.contentful.client import (
    ContentfulClient, ContentfulError, create_client, get_client, resolve_links,
)


def _link(link_type, id_):
    return {"sys": {"type": "Link", "linkType": link_type, "id": id_}}


def _response(status=200, payload=None, text=""):
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = payload if payload is not None else {}
    resp.text = text
    return resp


def _client(resp):
    session = MagicMock()
    session.headers = {}
    session.get.return_value = resp
    return ContentfulClient("space1", "tok", "master", session=session), session


# ── resolve_links ────────────────────────────────────────────────────────────

def test_resolve_entry_and_asset_links():
    payload = {
        "items": [{"sys": {"id": "h1", "type": "Entry"}, "fields": {
            "logo": _link("Asset", "a1"),
            "navItems": [_link("Entry", "n1")],
        }}],
        "includes": {
            "Entry": [{"sys": {"id": "n1", "type": "Entry"}, "fields": {"label": "Blog"}}],
            "Asset": [{"sys": {"id": "a1", "type": "Asset"}, "fields": {"title": "Logo"}}],
        },
    }
    item = resolve_links(payload)["items"][0]
    assert item["fields"]["logo"]["fields"]["title"] == "Logo"
    assert item["fields"]["navItems"][0]["fields"]["label"] == "Blog"


def test_resolve_nested_include_links():
    payload = {
        "items": [{"sys": {"id": "h1", "type": "Entry"}, "fields": {"navItems": [_link("Entry", "g1")]}}],
        "includes": {"Entry": [
            {"sys": {"id": "g1", "type": "Entry"}, "fields": {"links": [_link("Entry", "l1")]}},
            {"sys": {"id": "l1", "type": "Entry"}, "fields": {"label": "Docs"}},
        ]},
    }
    item = resolve_links(payload)["items"][0]
    assert item["fields"]["navItems"][0]["fields"]["links"][0]["fields"]["label"] == "Docs"


def test_resolve_rich_text_asset_target():
    payload = {
        "items": [{"sys": {"id": "p1", "type": "Entry"}, "fields": {"content": {
            "nodeType": "document", "content": [
                {"nodeType": "embedded-asset-block", "data": {"target": _link("Asset", "a1")}, "content": []},
            ],
        }}}],
        "includes": {"Asset": [{"sys": {"id": "a1", "type": "Asset"}, "fields": {"file": {"url": "//x"}}}]},
    }
    item = resolve_links(payload)["items"][0]
    target = item["fields"]["content"]["content"][0]["data"]["target"]
    assert target["fields"]["file"]["url"] == "//x"


def test_unresolved_link_kept():
    payload = {"items": [{"sys": {"id": "p1", "type": "Entry"}, "fields": {"logo": _link("Asset", "missing")}}]}
    item = resolve_links(payload)["items"][0]
    assert item["fields"]["logo"] == _link("Asset", "missing")


def test_cyclic_links_do_not_loop():
    payload = {
        "items": [{"sys": {"id": "a", "type": "Entry"}, "fields": {"other": _link("Entry", "b")}}],
        "includes": {"Entry": [{"sys": {"id": "b", "type": "Entry"}, "fields": {"other": _link("Entry", "a")}}]},
    }
    a = resolve_links(payload)["items"][0]
    assert a["fields"]["other"]["fields"]["other"] is a


# ── get_entries ──────────────────────────────────────────────────────────────

def test_get_entries_builds_request():
    client, session = _client(_response(payload={"items": [], "total": 0}))
    client.get_entries({"content_type": "blogPost", "order": ["-fields.publishDate"], "include": 2})
    url = session.get.call_args.args[0]
    params = session.get.call_args.kwargs["params"]
    assert url == f"https://{DELIVERY_HOST}/spaces/space1/environments/master/entries"
    assert params == {"content_type": "blogPost", "order": "-fields.publishDate", "include": 2}
    assert session.headers["Authorization"] == "Bearer tok"


def test_get_entries_returns_collection():
    client, _ = _client(_response(payload={
        "items": [{"sys": {"id": "x", "type": "Entry"}, "fields": {"slug": "a"}}],
        "total": 1, "skip": 0, "limit": 100,
    }))
    col = client.get_entries({"content_type": "blogPost"})
    assert col.total == 1
    assert col.items[0]["fields"]["slug"] == "a"


def test_http_error_raises_contentful_error():
    client, _ = _client(_response(status=401, payload={"message": "The access token you sent could not be found"}))
    with pytest.raises(ContentfulError) as exc:
        client.get_entries()
    assert exc.value.status_code == 401
    assert "access token" in str(exc.value)


def test_network_error_wrapped():
    session = MagicMock()
    session.headers = {}
    session.get.side_effect = requests.ConnectionError("boom")
    client = ContentfulClient("s", "t", session=session)
    with pytest.raises(ContentfulError):
        client.get_entries()


def test_get_entry_by_id():
    client, session = _client(_response(payload={"items": [{"sys": {"id": "e1", "type": "Entry"}, "fields": {}}]}))
    assert client.get_entry("e1")["sys"]["id"] == "e1"
    assert session.get.call_args.kwargs["params"]["sys.id"] == "e1"


# ── Sélection delivery / preview ─────────────────────────────────────────────

@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("CONTENTFUL_SPACE_ID", "space1")
    monkeypatch.setenv("CONTENTFUL_ACCESS_TOKEN", "delivery-token")
    monkeypatch.delenv("CONTENTFUL_PREVIEW_TOKEN", raising=False)
    monkeypatch.delenv("CONTENTFUL_ENVIRONMENT", raising=False)
    return monkeypatch


def test_delivery_client_by_default(env):
    client = get_client()
    assert client.host == DELIVERY_HOST
    assert client.environment == "master"


def test_preview_falls_back_to_delivery_without_token(env):
    assert create_client(preview=True) is None
    assert get_client(preview=True).host == DELIVERY_HOST


def test_preview_client_when_token_set(env):
    env.setenv("CONTENTFUL_PREVIEW_TOKEN", "preview-token")
    client = get_client(preview=True)
    assert client.host == PREVIEW_HOST
    assert client.session.headers["Authorization"] == "Bearer preview-token"
