"""
Tests for the HTTP API against a temporary database
"""

import pytest
from fastapi.testclient import TestClient

from bookkeeper.config import config, load_config
from bookkeeper.main import app
from bookkeeper.services.book_service import book_service
from bookkeeper.services.database_service import DatabaseService


@pytest.fixture
def client(database, monkeypatch):
    monkeypatch.setattr(book_service, "database", database)
    with TestClient(app) as test_client:
        yield test_client


class TestLedgerApi:

    def test_list_and_search(self, client):
        response = client.get("/api/ledgers")
        assert response.status_code == 200
        assert response.json()["count"] == 8

        response = client.get("/api/ledgers", params={"search": "27ABCDE"})
        assert [l["name"] for l in response.json()["data"]] == ["Ramesh Traders"]

    def test_create_and_fetch_balance(self, client):
        response = client.post("/api/ledgers", json={
            "name": "Laptop Stock", "group": "Asset", "opening_balance": "1200"
        })
        assert response.status_code == 201
        ledger_id = response.json()["data"]["id"]

        response = client.get(f"/api/ledgers/{ledger_id}")
        assert response.status_code == 200
        assert response.json()["balance"]["nature"] == "Debit"

    def test_create_without_name_is_rejected(self, client):
        response = client.post("/api/ledgers", json={"name": "", "group": "Asset"})
        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_missing_ledger_is_404(self, client):
        assert client.get("/api/ledgers/nope").status_code == 404


class TestVoucherApi:

    def test_negative_amount_rejected(self, client):
        response = client.post("/api/vouchers", json={
            "type": "Payment", "ledger_id": "7", "amount": "-10"
        })
        assert response.status_code == 422
        assert client.get("/api/vouchers").json()["count"] == 4

    def test_create_and_day_book(self, client):
        response = client.post("/api/vouchers", json={
            "type": "Receipt", "ledger_id": "5", "amount": "5000",
            "date": "2024-04-05", "narration": "Part payment"
        })
        assert response.status_code == 201

        day_book = client.get("/api/vouchers/daybook", params={"date": "2024-04-05"}).json()
        assert [e["voucher_id"] for e in day_book["entries"]][0] == "V003"
        assert len(day_book["entries"]) == 2

    def test_delete_ledger_keeps_vouchers(self, client):
        assert client.delete("/api/ledgers/6").json()["removed"] is True
        assert client.get("/api/vouchers").json()["count"] == 4

        xml = client.get("/api/export/tally").text
        assert xml.count("<VOUCHER ") == 4
        assert "<PARTYLEDGERNAME>Unknown Ledger</PARTYLEDGERNAME>" in xml


class TestReportApi:

    def test_trial_balance(self, client):
        body = client.get("/api/reports/trial-balance").json()
        names = [row["ledger_name"] for row in body["data"]]

        assert "Sales Account" not in names
        assert "Tech Solutions Ltd" in names
        assert body["totals"] is None

    def test_profit_and_loss(self, client):
        body = client.get("/api/reports/profit-loss").json()
        assert float(body["net_profit"]) == 8000

    def test_export_download(self, client):
        response = client.get("/api/export/tally")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/xml")
        assert "attachment; filename=NAC_TallyExport_" in response.headers["content-disposition"]


class TestBackupApi:

    def test_backup_and_restore(self, client):
        backup = client.get("/api/export/backup").content
        client.delete("/api/vouchers/V001")

        response = client.post("/api/export/restore", content=backup)
        assert response.status_code == 200
        assert response.json()["data"]["vouchers"] == 4

    def test_restore_invalid_file(self, client):
        response = client.post("/api/export/restore", content=b"not json")
        assert response.status_code == 422

    def test_restore_non_utf8_file(self, client):
        response = client.post("/api/export/restore", content=b"\xff\xfe{}")
        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert client.get("/api/vouchers").json()["count"] == 4


class TestCompanyApi:

    def test_save_defaults_writes_config_file(self, client, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        monkeypatch.setenv("BOOKKEEPER_CONFIG_FILE", str(path))
        monkeypatch.setattr(config, "company", config.company)

        client.put("/api/company", json={"name": "Acme Traders", "gst_number": "27AAACA1234A1Z1"})
        response = client.post("/api/company/defaults")

        assert response.status_code == 200
        saved = load_config(str(path))
        assert saved.company.name == "Acme Traders"
        assert saved.company.gst_number == "27AAACA1234A1Z1"


class TestHealthApi:

    def test_health(self, client):
        body = client.get("/api/health").json()
        assert body["status"] == "healthy"
        assert body["components"]["books"]["ledgers"] == 8

    def test_books_component(self, client):
        body = client.get("/api/health/books").json()
        assert body["vouchers"] == 4

    def test_unreadable_database_is_503(self, client, tmp_path, monkeypatch):
        monkeypatch.setattr(book_service, "database", DatabaseService(str(tmp_path)))
        response = client.get("/api/health/database")
        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"
