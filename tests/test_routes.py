"""
Panes — HTTP Tests: htmx routes end to end

Every route answers 200 with an HTML fragment; a template fault answers
a generic 500 for that request only.
"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from jinja2 import DictLoader, Environment

# Add service paths
sys.path.insert(0, str(Path(__file__).parent.parent / "services"))

from panes.main import app
from panes.render import FragmentRenderer
from panes.routers import ui


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


class TestPageRoutes:

    def test_index(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/html")
        body = r.text
        assert body.startswith("<!DOCTYPE html>")
        assert 'id="combo-Stand"' in body
        assert 'id="combo-Owner"' in body
        assert 'value="heute"' in body
        assert 'id="service" name="service" value="Eigener-Service-1"' in body
        assert "Eigener-Service-20" in body
        assert 'name="showUsers" value="off"' in body
        assert "hx-swap-oob" not in body

    def test_category_change(self, client):
        r = client.get("/services/search", params={"showUsers": "on"})
        assert r.status_code == 200
        body = r.text
        assert body.startswith('<div id="service-list"')
        assert body.index('id="service-list"') < body.index('id="service"') < body.index('id="service-details"')
        assert 'id="service" name="service" value="Gesuchter-Service-1" hx-swap-oob="true"' in body
        assert "host:h7-of-Gesuchter-Service-1" in body
        assert 'data-query-params="/services/search?showUsers=on"' in body

    def test_category_change_alias(self, client):
        r = client.get("/serviceList/user")
        assert r.status_code == 200
        assert "Eigener-Service-20" in r.text
        assert 'name="showUsers" value=""' in r.text

    def test_category_change_to_owner(self, client):
        r = client.get("/services/owner")
        assert r.status_code == 200
        assert r.text.count('hx-get="/details/Genutzter-Service-') == 21845

    def test_empty_category(self, client):
        r = client.get("/services/visible", params={"showUsers": "off"})
        assert r.status_code == 200
        assert "No services" in r.text
        assert 'id="service" name="service" value="" hx-swap-oob="true"' in r.text

    def test_entity_selection(self, client):
        r = client.get("/details/Eigener-Service-3", params={"showUsers": "off"})
        assert r.status_code == 200
        body = r.text
        assert body.startswith('<div id="service-details"')
        assert "Description of Eigener-Service-3" in body
        assert "host:h1-of-Eigener-Service-3" not in body
        assert 'id="service" name="service" value="Eigener-Service-3" hx-swap-oob="true"' in body

    def test_visibility_toggle(self, client):
        r = client.get("/showUsers/on", params={"service": "Eigener-Service-1"})
        assert r.status_code == 200
        body = r.text
        assert 'name="showUsers" value="on"' in body
        for i in range(1, 8):
            assert f"host:h{i}-of-Eigener-Service-1" in body
        assert "hx-swap-oob" not in body

    def test_admin_expansion(self, client):
        r = client.get("/admins/Owner-5")
        assert r.status_code == 200
        assert r.text.startswith('<div id="admins"')
        assert r.text.count("mailto:") == 5
        assert "admin-5@example.com" in r.text


class TestComboRoutes:

    def test_show_menu_on_active_item(self, client):
        r = client.get("/showMenu", params={"Name": "Owner", "ActiveItem": "Owner-1", "Search": "Owner-1"})
        assert r.status_code == 200
        assert r.text.startswith('<ul id="menu-Owner"')
        assert r.text.count("dropdown-item") == 21

    def test_show_menu_filtered(self, client):
        r = client.get("/showMenu", params={"Name": "Stand", "ActiveItem": "heute", "Search": "2025"})
        assert r.text.count("dropdown-item") == 1
        assert "2025-1-1" in r.text

    def test_hide_menu(self, client):
        r = client.get("/hideMenu", params={"Name": "Owner", "ActiveItem": "Owner-1", "Search": "Own"})
        assert r.status_code == 200
        assert r.text.startswith('<ul id="menu-Owner"')
        assert "dropdown-item" not in r.text

    def test_set_combo(self, client):
        r = client.get("/setCombo/Owner-7", params={"Name": "Owner", "ActiveItem": "Owner-1"})
        assert r.status_code == 200
        assert r.text.startswith('<div id="combo-Owner"')
        assert 'name="ActiveItem" value="Owner-7"' in r.text

    def test_reset_combo_escapes_active_item(self, client):
        r = client.get("/resetCombo", params={"Name": "Stand", "ActiveItem": "<b>x</b>"})
        assert r.status_code == 200
        assert "<b>x</b>" not in r.text
        assert "&lt;b&gt;x&lt;/b&gt;" in r.text


class TestServiceRoutes:

    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "healthy"

    def test_metrics(self, client):
        client.get("/admins/Owner-2")
        r = client.get("/metrics")
        assert r.status_code == 200
        assert "panes_fragments_rendered_total" in r.text
        assert "panes_interactions_total" in r.text

    def test_render_fault_is_generic_500(self, client):
        broken = FragmentRenderer(Environment(loader=DictLoader({})))
        app.dependency_overrides[ui.get_renderer] = lambda: broken
        try:
            r = client.get("/details/Eigener-Service-1")
        finally:
            app.dependency_overrides.clear()
        assert r.status_code == 500
        assert r.text == "Internal Server Error"
        assert client.get("/details/Eigener-Service-1").status_code == 200
