"""
Tests for the application shell: health endpoints and server settings.
"""
from splittrip.core.config import Settings


def test_health_endpoints(client):
    assert client.get("/").json() == {"message": "SplitTrip API is running"}
    assert client.get("/health").json() == {"status": "healthy"}


def test_server_settings_from_environment(monkeypatch):
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "9001")
    configured = Settings()
    assert configured.HOST == "0.0.0.0"
    assert configured.PORT == 9001
