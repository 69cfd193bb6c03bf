import pytest
from fastapi.testclient import TestClient

from app.main import app
from domains.file_ingest.storage import HOT_DIR_SENTINEL, TMP_DIR_SENTINEL


@pytest.fixture
def configured_storage(storage_dir, monkeypatch):
    monkeypatch.setenv("STORAGE_DIR", str(storage_dir))
    return storage_dir


def test_startup_wipes_transient_storage(configured_storage):
    (configured_storage / "hotdir" / "orphan.pdf").write_text("orphan")
    (configured_storage / "tmp" / "partial.json").write_text("{}")

    with TestClient(app):
        pass

    assert [p.name for p in (configured_storage / "hotdir").iterdir()] == [HOT_DIR_SENTINEL]
    assert [p.name for p in (configured_storage / "tmp").iterdir()] == [TMP_DIR_SENTINEL]


def test_health_reports_storage(configured_storage):
    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["storage"] == {"documents": True, "hotdir": True, "tmp": True}


def test_health_degraded_without_storage_dir():
    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "degraded"
    assert body["storage"] is None


def test_admin_wipe_storage(configured_storage):
    with TestClient(app) as client:
        (configured_storage / "hotdir" / "late.docx").write_text("late")
        (configured_storage / "tmp" / "late.tmp").write_text("late")

        response = client.post("/admin/wipe-storage")

    assert response.status_code == 200
    assert response.json() == {
        "status": "completed",
        "message": "Collector hot directory and tmp storage wiped",
        "removed": 2,
    }
    assert not (configured_storage / "hotdir" / "late.docx").exists()


def test_root(configured_storage):
    with TestClient(app) as client:
        response = client.get("/")

    assert response.json()["status"] == "operational"


if __name__ == "__main__":  # pragma: no cover
    pytest.main([__file__])
