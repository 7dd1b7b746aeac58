from liftlog import main as app_main


def test_ping(client):
    r = client.get("/ping")
    assert r.status_code == 200
    assert r.json() == {"pong": True}


def test_root_and_version(client):
    assert client.get("/").json() == {"ok": True, "name": "LiftLog API"}
    r = client.get("/version")
    assert r.status_code == 200
    assert "version" in r.json()


def test_request_id_echoed(client):
    r = client.get("/ping", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"
    assert client.get("/ping").headers["X-Request-ID"]


def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] in {"ok", "degraded"}


def test_healthz_degraded(client, monkeypatch):
    # force SessionLocal to throw
    class Boom:
        def __enter__(self): raise RuntimeError("db down")
        def __exit__(self, *a): return False
    monkeypatch.setattr(app_main, "SessionLocal", lambda: Boom())
    r = client.get("/healthz")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "degraded"
    assert "db down" in body["error"]
