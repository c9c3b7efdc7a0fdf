# tests/test_routes.py

"""
Tests for the HTTP routes. Database and model calls are replaced with fakes.
"""

import json
import pytest
from datetime import date
from fastapi.testclient import TestClient

from app.main import app
from app.models import ExpenseEntry, OperationalDayRecord
from app.integrations import claude
import app.routers.invoices as invoices_router
import app.routers.verification as verification_router


ACCOUNT_002_CSV = (
    "Data Movimento\tData Valor\tDescritivo\tValor\tMoeda\n"
    "01/03/2024\t01/03/2024\tDepósito nº 55\t131000\tAOA\n"
)

ACCOUNT_001_CSV = (
    "Data Movimento\tData Valor\tDescritivo\tValor\tMoeda\n"
    "01/03/2024\t01/03/2024\tFecho TPA 000123\t96000\tAOA\n"
    "01/03/2024\t01/03/2024\tComissões-Fecho TPA\t500\tAOA\n"
)

VERIFICATION_FORM = {
    "bank": "Caixa Angola",
    "startDate": "2024-03-01",
    "endDate": "2024-03-31",
}


def statement_files(account_001: str = ACCOUNT_001_CSV, account_002: str = ACCOUNT_002_CSV) -> dict:
    return {
        "account001Statement": ("conta-001.csv", account_001.encode("utf-8"), "text/csv"),
        "account002Statement": ("conta-002.csv", account_002.encode("utf-8"), "text/csv"),
    }


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def fake_reports(monkeypatch):
    records = [
        OperationalDayRecord(
            id="r1",
            report_date=date(2024, 3, 1),
            vehicle_plate="LD-12-34-AB",
            ticket_revenue=230000,
            expenses=[ExpenseEntry(amount=3000)],
        ),
        OperationalDayRecord(
            id="r2",
            report_date=date(2024, 3, 1),
            vehicle_plate="LDA-25-91-AD",
            ticket_revenue=50000,
        ),
    ]

    async def get_operational_reports(start, end):
        return records

    monkeypatch.setattr(verification_router, "get_operational_reports", get_operational_reports)
    return records


# ============================================
# Health Tests
# ============================================

class TestHealth:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        assert client.get("/").json()["status"] == "running"


# ============================================
# Bank Verification Route Tests
# ============================================

class TestBankVerificationRoute:
    """Test POST /bank-verification."""

    def test_verified_run(self, client, fake_reports):
        response = client.post("/bank-verification", data=VERIFICATION_FORM, files=statement_files())

        assert response.status_code == 200
        body = response.json()
        assert isinstance(body, list) and len(body) == 1

        result = body[0]
        assert result["status"] == "verified"
        assert result["totalNetRevenue"] == 227000
        assert result["account002Total"] == 131000
        assert result["account001Total"] == 96000
        assert result["bankTotalDeposits"] == 227000
        assert result["dateRange"] == "2024-03-01 to 2024-03-31"
        assert result["breakdown"]["revenue"]["excluded_reports"] == 1

    def test_bai_counts_agaseke_revenue(self, client, fake_reports):
        form = {**VERIFICATION_FORM, "bank": "BAI"}

        result = client.post("/bank-verification", data=form, files=statement_files()).json()[0]

        assert result["totalNetRevenue"] == 277000
        assert result["status"] == "mismatch"
        assert result["difference"] == -50000

    def test_missing_fields(self, client, fake_reports):
        response = client.post("/bank-verification", data={"bank": "BAI"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Invalid input"
        assert "startDate" in body["details"]
        assert "account001Statement" in body["details"]

    def test_unknown_bank(self, client, fake_reports):
        form = {**VERIFICATION_FORM, "bank": "Millennium"}

        response = client.post("/bank-verification", data=form, files=statement_files())

        assert response.status_code == 400
        assert "Millennium" in response.json()["message"]

    def test_start_after_end(self, client, fake_reports):
        form = {**VERIFICATION_FORM, "startDate": "2024-04-01"}

        response = client.post("/bank-verification", data=form, files=statement_files())

        assert response.status_code == 400

    def test_no_qualifying_transactions(self, client, fake_reports):
        files = statement_files(account_001=ACCOUNT_002_CSV)

        response = client.post("/bank-verification", data=VERIFICATION_FORM, files=files)

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "No qualifying transactions found"
        assert body["troubleshooting"]

    def test_empty_statement(self, client, fake_reports):
        files = statement_files(account_002="")

        response = client.post("/bank-verification", data=VERIFICATION_FORM, files=files)

        assert response.status_code == 400
        assert response.json()["error"] == "Empty bank statement"

    def test_report_fetch_failure(self, client, monkeypatch):
        async def failing(start, end):
            raise RuntimeError("connection refused")

        monkeypatch.setattr(verification_router, "get_operational_reports", failing)

        response = client.post("/bank-verification", data=VERIFICATION_FORM, files=statement_files())

        assert response.status_code == 502
        assert "connection refused" in response.json()["details"]


# ============================================
# Invoice OCR Route Tests
# ============================================

class TestInvoiceOcrRoute:
    """Test POST /invoice-ocr."""

    @pytest.fixture(autouse=True)
    def no_custom_parts(self, monkeypatch):
        async def list_custom_part_names(limit):
            return ["Kit de juntas"]

        monkeypatch.setattr(invoices_router, "list_custom_part_names", list_custom_part_names)

    def fake_model(self, monkeypatch, output: str):
        calls = []

        async def extract_invoice(images):
            calls.append(images)
            return output

        monkeypatch.setattr(claude, "extract_invoice", extract_invoice)
        return calls

    def test_invoice_mapped(self, client, monkeypatch):
        calls = self.fake_model(monkeypatch, json.dumps({
            "invoice_date": "2024-03-05",
            "items": [
                {"description": "Rolamento 6205 SKF", "quantity": 2, "total_incl_tax": 11400},
                {"description": "Kit de juntas", "quantity": 1, "total": 4000},
                {"description": "Serviço de reboque", "total": 30000},
            ],
        }))

        response = client.post(
            "/invoice-ocr",
            files=[
                ("files", ("p1.jpg", b"page-1", "image/jpeg")),
                ("files", ("p2.png", b"page-2", "image/png")),
            ],
        )

        assert response.status_code == 200
        body = response.json()
        assert body["invoice_date"] == "2024-03-05"
        assert [i["item_name"] for i in body["items"]] == [
            "ROLAMENTO 6205", "Kit de juntas", "Serviço de reboque",
        ]
        assert body["items"][0]["amount_unit"] == 5700
        assert calls[0] == [("image/jpeg", b"page-1"), ("image/png", b"page-2")]

    def test_single_file_field(self, client, monkeypatch):
        self.fake_model(monkeypatch, '{"invoice_date": "", "items": []}')

        response = client.post("/invoice-ocr", files={"file": ("inv.webp", b"x", "image/webp")})

        assert response.status_code == 200
        assert response.json()["items"] == []

    def test_no_files(self, client, monkeypatch):
        self.fake_model(monkeypatch, "{}")

        response = client.post("/invoice-ocr")

        assert response.status_code == 400

    def test_pdf_rejected(self, client, monkeypatch):
        calls = self.fake_model(monkeypatch, "{}")

        response = client.post("/invoice-ocr", files={"file": ("inv.pdf", b"%PDF", "application/pdf")})

        assert response.status_code == 400
        assert "Only image files are supported" in response.json()["message"]
        assert calls == []

    def test_unparseable_model_output(self, client, monkeypatch):
        self.fake_model(monkeypatch, "I could not read the invoice")

        response = client.post("/invoice-ocr", files={"file": ("inv.jpg", b"x", "image/jpeg")})

        assert response.status_code == 502
        body = response.json()
        assert body["error"] == "Failed to parse model JSON"
        assert body["details"] == "I could not read the invoice"
