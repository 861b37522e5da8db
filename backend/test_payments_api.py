import pytest
from fastapi.testclient import TestClient

from payment_system.core.config_manager import config_manager
from payment_system.core.service_manager import service_manager
from payment_system.main import app
from payment_system.payments import PAYMENT_METHODS, PaymentStrategy, register_payment_method


@pytest.fixture
def client():
    # Lifecycle hooks are exercised in test_app_restarts_cleanly_in_same_process
    return TestClient(app)


def test_health_reports_registered_services(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["system_status"]["application_healthy"] is True
    assert "payments" in body["system_status"]["service_names"]


def test_credit_card_endpoint_pays_and_hides_credentials(client, capsys):
    response = client.post("/payments/credit-card", json={
        "card_number": "1234 5678 9101 1121",
        "expiry_date": "12/25",
        "cvv": "123",
        "amount": 100.0,
    })

    assert response.status_code == 200
    body = response.json()
    assert body["data"] == {"method": "credit_card", "amount": 100.0, "card_last4": "1121"}
    assert "9101" not in response.text
    assert "Paid 100.0 via credit card." in capsys.readouterr().out


def test_paypal_endpoint_pays_and_hides_password(client, capsys):
    response = client.post("/payments/paypal", json={
        "email": "a@b.com",
        "password": "pw-secret",
        "amount": 50.0,
    })

    assert response.status_code == 200
    assert response.json()["data"]["method"] == "paypal"
    assert "pw-secret" not in response.text
    assert "Paid 50.0 via PayPal." in capsys.readouterr().out


def test_negative_amount_is_accepted(client):
    response = client.post("/payments/paypal", json={
        "email": "a@b.com",
        "password": "pw",
        "amount": -5,
    })

    assert response.status_code == 200
    assert response.json()["data"]["amount"] == -5.0


def test_generic_endpoint_uses_registry(client):
    response = client.post("/payments/paypal", json={
        "email": "a@b.com",
        "password": "pw",
        "amount": 1,
    })
    assert response.status_code == 200

    response = client.post("/payments/credit_card", json={
        "amount": 3.5,
        "credentials": {"card_number": "4111", "expiry_date": "01/30", "cvv": "000"},
    })
    assert response.status_code == 200
    assert response.json()["data"]["method"] == "credit_card"
    assert response.json()["data"]["card_last4"] == "4111"


def test_generic_endpoint_rejects_unknown_method(client):
    response = client.post("/payments/bitcoin", json={"amount": 1.0})

    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "UNSUPPORTED_METHOD"


def test_generic_endpoint_rejects_wrong_credentials(client):
    response = client.post("/payments/credit_card", json={
        "amount": 1.0,
        "credentials": {"email": "a@b.com"},
    })

    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "INVALID_CREDENTIALS"


def test_missing_fields_are_rejected(client):
    response = client.post("/payments/credit-card", json={"amount": 10.0})

    assert response.status_code == 422


def test_system_endpoints(client):
    status_response = client.get("/system/status")
    assert status_response.status_code == 200
    assert status_response.json()["available_services"] == ["config", "payments"]

    settings_response = client.get("/system/config/settings")
    assert settings_response.json()["server"]["app_name"] == "Payment System"

    reload_response = client.post("/system/config/reload")
    assert reload_response.json()["success"] is True


def test_generic_credit_card_reports_last_four_digits(client):
    response = client.post("/payments/credit_card", json={
        "amount": 100.0,
        "credentials": {"card_number": "1234 5678 9101 1121", "expiry_date": "12/25", "cvv": "123"},
    })

    assert response.status_code == 200
    assert response.json()["data"]["card_last4"] == "1121"
    assert "9101" not in response.text


def test_strategy_failure_is_a_server_error():
    @register_payment_method
    class FailingPayment(PaymentStrategy):
        method = "failing"
        display_name = "failing"

        def __init__(self):
            pass

        def pay(self, amount):
            raise TypeError("unsupported operand")

    try:
        response = TestClient(app, raise_server_exceptions=False).post(
            "/payments/failing", json={"amount": 1.0}
        )
        assert response.status_code == 500
    finally:
        PAYMENT_METHODS.pop("failing")


def test_app_restarts_cleanly_in_same_process():
    try:
        for _ in range(2):
            with TestClient(app) as lifecycle_client:
                body = lifecycle_client.get("/health").json()
                assert body["system_status"]["application_healthy"] is True
                assert body["system_status"]["service_names"] == ["config", "payments"]
        assert service_manager.list_services() == []
    finally:
        service_manager.start()


def test_health_reflects_reloaded_settings(client, monkeypatch):
    monkeypatch.setenv("PAYMENT_APP_NAME", "Checkout")
    monkeypatch.setenv("PAYMENT_VERSION", "2.0.0")
    try:
        assert client.post("/system/config/reload").json()["success"] is True

        body = client.get("/health").json()
        assert body["version"] == "2.0.0"
        assert body["message"].startswith("Checkout API")
    finally:
        monkeypatch.delenv("PAYMENT_APP_NAME")
        monkeypatch.delenv("PAYMENT_VERSION")
        config_manager.reload_settings()
