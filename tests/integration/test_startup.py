from unittest.mock import patch

from fastapi.testclient import TestClient

from dockdemo.server.api import create_app


def test_startup_announces_server_in_orchestration_log(config):
    app = create_app(config)

    with patch("dockdemo.server.api.setup_logging") as mock_setup:
        with TestClient(app) as client:
            logs = client.get("/api/logs/orchestration").json()

    mock_setup.assert_called_once_with(config)
    assert [entry["message"] for entry in logs] == ["Docker Demo Server started", "System ready for testing"]
    assert [entry["type"] for entry in logs] == ["success", "info"]


def test_static_dashboard_is_served_when_present(tmp_path, config):
    from dataclasses import replace

    static = tmp_path / "public"
    static.mkdir()
    (static / "index.html").write_text("<h1>Docker demo</h1>")
    app = create_app(replace(config, static_dir=static))

    with patch("dockdemo.server.api.setup_logging"):
        with TestClient(app) as client:
            page = client.get("/")
            health = client.get("/health")

    assert page.status_code == 200
    assert "Docker demo" in page.text
    assert health.json()["status"] == "healthy"
