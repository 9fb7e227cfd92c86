import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from ambientimpact_core.routes import build_client_settings, build_router, mount_module_assets


@pytest.fixture
def client(services):
    app = FastAPI()
    app.include_router(build_router(services))
    mount_module_assets(app, services)
    return TestClient(app)


def test_all_component_settings(client):
    response = client.get("/api/components/settings")

    assert response.status_code == 200
    icon = response.json()["AmbientImpact"]["components"]["icon"]
    assert icon["containerBaseClass"] == "ambientimpact-icon"
    assert set(icon["bundles"]) == {"core", "brands"}
    assert "urlPlaceholder#iconNamePlaceholder" in icon["template"]


def test_single_component_settings(client, services):
    response = client.get("/api/components/icon/settings")

    assert response.status_code == 200
    assert response.json() == services.component_manager.get_component("icon").get_js_settings()


def test_unknown_component_is_404(client):
    response = client.get("/api/components/nope/settings")

    assert response.status_code == 404


def test_api_request_does_not_inherit_used_state_of_earlier_page(client, services):
    services.bus.emit("page:request_start", {"path": "/"})
    services.renderer.render({"#type": "ambientimpact_icon", "#bundle": "core", "#icon": "check"})
    assert services.get("icon_bundle_manager").get_icon_bundle("core").is_used()

    bundles = client.get("/api/components/icon/settings").json()["bundles"]

    assert bundles["core"]["used"] is False
    assert bundles["brands"]["used"] is False


def test_all_settings_request_starts_with_unused_bundles(client, services):
    services.get("icon_bundle_manager").get_icon_bundle("brands").set_used()

    icon = client.get("/api/components/settings").json()["AmbientImpact"]["components"]["icon"]

    assert not any(bundle["used"] for bundle in icon["bundles"].values())


def test_api_request_emits_request_start(client, services):
    seen = []
    services.bus.subscribe("page:request_start")(seen.append)

    client.get("/api/components/icon/settings")

    assert seen == [{"path": "/api/components/icon/settings"}]


def test_bundle_url_is_served(client, services):
    url = services.get("icon_bundle_manager").get_icon_bundle("core").get_url()

    response = client.get(url)

    assert response.status_code == 200
    assert '<symbol id="check"' in response.text


def test_client_settings_are_json_serializable(services):
    settings = build_client_settings(services.component_manager)

    assert json.loads(json.dumps(settings)) == settings
