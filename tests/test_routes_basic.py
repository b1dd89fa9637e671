def test_root(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.json() == {"message": "ETA backend is running"}


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "google_maps_api_key": True}


def test_health_reports_missing_key(make_client):
    client = make_client(api_key=None)

    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "google_maps_api_key": False}


def test_app_keeps_settings_and_client_on_state(make_client):
    client = make_client(api_key="abc", timeout_s=3.0)

    state = client.app.state
    assert state.settings.google_maps_api_key == "abc"
    assert state.directions_client.api_key == "abc"
    assert state.directions_client.timeout_s == 3.0
