"""
Integration tests for the HTTP API.
Exercises end-to-end flows through FastAPI TestClient against a temporary SQLite database.
"""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from carddesk.core.security import create_access_token
from carddesk.main import create_app

from conftest import login, register


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def issue_card(client, headers, number="1234", balance=100, holder="Bob"):
    body = {"cardNumber": number, "holderName": holder}
    if balance is not None:
        body["initialBalance"] = balance
    return client.post("/api/cards", json=body, headers=headers)


class TestHealth:
    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json() == {"status": "ok"}


class TestRegistration:
    def test_register_returns_summary_without_password(self, client):
        r = register(client)
        assert r.status_code == 201
        data = r.json()
        assert data["employeeId"] == "E001"
        assert data["email"] == "alice@example.com"
        assert data["permissions"] == ["processWithdrawal"]
        assert "password" not in data
        assert "passwordHash" not in data

    def test_duplicate_employee_id(self, client):
        assert register(client).status_code == 201
        r = register(client, email="someone-else@example.com")
        assert r.status_code == 400
        assert r.json()["detail"] == "Employee already exists"

    def test_duplicate_email(self, client):
        assert register(client).status_code == 201
        r = register(client, employee_id="E002")
        assert r.status_code == 400

    def test_missing_fields(self, client):
        r = client.post("/api/register", json={"employeeId": "E001", "email": "alice@example.com"})
        assert r.status_code == 400
        assert "detail" in r.json()


class TestLogin:
    def test_login_returns_token_and_identity(self, client):
        register(client)
        r = client.post("/api/login", json={"email": "alice@example.com", "password": "secret123"})
        assert r.status_code == 200
        data = r.json()
        assert data["employeeId"] == "E001"
        assert data["name"] == "Alice"
        assert data["tokenType"] == "bearer"
        assert data["token"]

    @pytest.mark.parametrize(
        "email,password",
        [("alice@example.com", "wrong-password"), ("nobody@example.com", "secret123")],
    )
    def test_bad_credentials_are_indistinguishable(self, client, email, password):
        register(client)
        r = client.post("/api/login", json={"email": email, "password": password})
        assert r.status_code == 401
        assert r.json() == {"detail": "Invalid credentials"}


class TestProtectedRoutes:
    def test_token_from_login_grants_access(self, client, auth_headers):
        r = client.get("/api/cards", headers=auth_headers)
        assert r.status_code == 200
        assert r.json() == []

    @pytest.mark.parametrize(
        "headers",
        [{}, {"Authorization": "Bearer not-a-token"}, {"Authorization": "Token abc"}],
    )
    def test_missing_or_malformed_token(self, client, headers):
        r = client.get("/api/cards", headers=headers)
        assert r.status_code == 401

    def test_expired_token(self, client, settings):
        register(client)
        token, _ = create_access_token(
            settings.security, "E001", "Alice", ["processWithdrawal"], expires_delta=timedelta(hours=-1)
        )
        r = client.get("/api/cards", headers=bearer(token))
        assert r.status_code == 401
        assert r.json()["detail"] == "Token has expired"

    def test_token_from_another_deployment(self, client):
        from carddesk.core.config import SecuritySettings

        foreign = SecuritySettings(secret_key="some-other-deployment-secret")
        token, _ = create_access_token(foreign, "E001", "Alice", ["processWithdrawal"])
        assert client.get("/api/cards", headers=bearer(token)).status_code == 401


class TestCards:
    def test_issue_and_list(self, client, auth_headers):
        r = issue_card(client, auth_headers, balance=100.5)
        assert r.status_code == 201
        assert r.json()["balance"] == 100.5
        assert r.json()["cardNumber"] == "1234"

        cards = client.get("/api/cards", headers=auth_headers).json()
        assert [card["cardNumber"] for card in cards] == ["1234"]

    def test_initial_balance_defaults_to_zero(self, client, auth_headers):
        r = issue_card(client, auth_headers, balance=None)
        assert r.status_code == 201
        assert r.json()["balance"] == 0

    def test_duplicate_card(self, client, auth_headers):
        assert issue_card(client, auth_headers).status_code == 201
        r = issue_card(client, auth_headers, holder="Mallory")
        assert r.status_code == 400
        assert r.json()["detail"] == "Card already exists"

    def test_negative_initial_balance(self, client, auth_headers):
        assert issue_card(client, auth_headers, balance=-1).status_code == 400

    def test_initial_balance_too_large_to_store(self, client, auth_headers):
        r = issue_card(client, auth_headers, balance=1e20)
        assert r.status_code == 400
        assert r.json()["detail"] == "Amount exceeds the supported maximum"
        assert client.get("/api/cards", headers=auth_headers).json() == []

    def test_get_card(self, client, auth_headers):
        issue_card(client, auth_headers)
        assert client.get("/api/cards/1234", headers=auth_headers).json()["holderName"] == "Bob"
        assert client.get("/api/cards/9999", headers=auth_headers).status_code == 404


class TestWithdraw:
    def withdraw(self, client, headers, amount, number="1234", branch="BR-1"):
        return client.post(
            "/api/withdraw",
            json={"cardNumber": number, "amount": amount, "branchId": branch},
            headers=headers,
        )

    def test_withdraw_flow(self, client, auth_headers):
        issue_card(client, auth_headers, balance=100)

        r = self.withdraw(client, auth_headers, 40)
        assert r.status_code == 200
        data = r.json()
        assert data["newBalance"] == 60
        transaction_id = data["transactionId"]

        r = self.withdraw(client, auth_headers, 70)
        assert r.status_code == 400
        assert r.json()["detail"] == "Insufficient balance"

        card = client.get("/api/cards/1234", headers=auth_headers).json()
        assert card["balance"] == 60

        history = client.get("/api/cards/1234/transactions", headers=auth_headers).json()
        assert len(history) == 1
        assert history[0]["transactionId"] == transaction_id
        assert history[0]["type"] == "withdrawal"
        assert history[0]["amount"] == 40
        assert history[0]["branchId"] == "BR-1"

    def test_unknown_card(self, client, auth_headers):
        r = self.withdraw(client, auth_headers, 10, number="0000")
        assert r.status_code == 404
        assert r.json()["detail"] == "Card not found"

    def test_without_permission(self, client, settings, auth_headers):
        issue_card(client, auth_headers, balance=100)
        token, _ = create_access_token(settings.security, "E001", "Alice", [])
        r = self.withdraw(client, bearer(token), 1)
        assert r.status_code == 403
        assert client.get("/api/cards/1234", headers=auth_headers).json()["balance"] == 100

    def test_without_token(self, client, auth_headers):
        issue_card(client, auth_headers, balance=100)
        assert self.withdraw(client, {}, 1).status_code == 401

    def test_amount_larger_than_any_balance(self, client, auth_headers):
        issue_card(client, auth_headers, balance=10)
        r = self.withdraw(client, auth_headers, 1e300)
        assert r.status_code == 400
        assert r.json()["detail"] == "Insufficient balance"
        assert client.get("/api/cards/1234", headers=auth_headers).json()["balance"] == 10

    @pytest.mark.parametrize("amount", [0, -10, 1.234, "abc"])
    def test_invalid_amount(self, client, auth_headers, amount):
        issue_card(client, auth_headers, balance=100)
        assert self.withdraw(client, auth_headers, amount).status_code == 400


class TestDeposit:
    def test_deposit_requires_permission(self, client, auth_headers):
        issue_card(client, auth_headers, balance=10)
        r = client.post(
            "/api/deposit",
            json={"cardNumber": "1234", "amount": 5, "branchId": "BR-1"},
            headers=auth_headers,
        )
        assert r.status_code == 403

    def test_deposit_with_permission(self, client, settings, auth_headers):
        issue_card(client, auth_headers, balance=10)
        token, _ = create_access_token(settings.security, "E001", "Alice", ["processDeposit"])
        r = client.post(
            "/api/deposit",
            json={"cardNumber": "1234", "amount": 2.5, "branchId": "BR-1"},
            headers=bearer(token),
        )
        assert r.status_code == 200
        assert r.json()["newBalance"] == 12.5
        history = client.get("/api/cards/1234/transactions", headers=auth_headers).json()
        assert [entry["type"] for entry in history] == ["deposit"]


    @pytest.mark.parametrize("amount", [1e20, 1])
    def test_deposit_beyond_storable_balance(self, client, settings, auth_headers, amount):
        issue_card(client, auth_headers, balance="92233720368547758.07")
        token, _ = create_access_token(settings.security, "E001", "Alice", ["processDeposit"])
        r = client.post(
            "/api/deposit",
            json={"cardNumber": "1234", "amount": amount, "branchId": "BR-1"},
            headers=bearer(token),
        )
        assert r.status_code == 400
        assert client.get("/api/cards/1234/transactions", headers=auth_headers).json() == []


class TestEmployees:
    def test_get_employee(self, client, auth_headers):
        r = client.get("/api/employees/E001", headers=auth_headers)
        assert r.status_code == 200
        data = r.json()
        assert data["name"] == "Alice"
        assert "password" not in data and "passwordHash" not in data

    def test_unknown_employee(self, client, auth_headers):
        assert client.get("/api/employees/nope", headers=auth_headers).status_code == 404

    def test_requires_token(self, client):
        register(client)
        assert client.get("/api/employees/E001").status_code == 401


class TestBranches:
    def test_create_and_list(self, client, auth_headers):
        body = {"branchId": "BR-1", "branchName": "Downtown", "location": "Main St 1"}
        assert client.post("/api/branches", json=body, headers=auth_headers).status_code == 201
        assert client.post("/api/branches", json=body, headers=auth_headers).status_code == 400

        branches = client.get("/api/branches", headers=auth_headers).json()
        assert [branch["branchName"] for branch in branches] == ["Downtown"]
        assert client.get("/api/branches/BR-1", headers=auth_headers).status_code == 200
        assert client.get("/api/branches/BR-9", headers=auth_headers).status_code == 404


class TestUnexpectedErrors:
    def test_internal_errors_do_not_leak(self, settings, monkeypatch):
        from carddesk.modules.cards import CardService

        async def boom(self):
            raise RuntimeError("database exploded at 10.0.0.5")

        monkeypatch.setattr(CardService, "list_all", boom)
        with TestClient(create_app(settings), raise_server_exceptions=False) as client:
            register(client)
            r = client.get("/api/cards", headers=bearer(login(client)))

        assert r.status_code == 500
        assert r.json() == {"detail": "Internal server error"}
