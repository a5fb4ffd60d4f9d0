"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from cipherlab.core.config import Settings, get_settings
from cipherlab.main import create_app


@pytest.fixture
def client():
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: Settings(gemini_api_key=None, max_text_length=50)
    with TestClient(app) as test_client:
        yield test_client


def _client_with(settings: Settings) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: settings
    return TestClient(app)


class TestCiphersEndpoint:
    """Test cipher listing."""

    def test_lists_all_ciphers(self, client):
        response = client.get("/api/v1/ciphers")

        assert response.status_code == 200
        types = [item["cipher_type"] for item in response.json()]
        assert types == ["caesar", "vigenere", "playfair", "hill"]
        assert all(item["key_hint"] for item in response.json())


class TestEncryptEndpoint:
    """Test /encrypt."""

    @pytest.mark.parametrize("cipher_type, key, text, expected", [
        ("caesar", "3", "HELLO", "KHOOR"),
        ("caesar", 3, "a1b!", "d1e!"),
        ("vigenere", "LEMON", "ATTACKATDAWN", "LXFOPVEFRNHR"),
        ("playfair", "MONARCHY", "HELLO", "CFSUPM"),
        ("hill", "3 3 2 5", "HI", "TC"),
        ("hill", [[3, 3], [2, 5]], "HI", "TC"),
    ])
    def test_known_vectors(self, client, cipher_type, key, text, expected):
        response = client.post(
            "/api/v1/encrypt",
            json={"text": text, "cipher_type": cipher_type, "key": key},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["text"] == expected
        assert body["cipher_type"] == cipher_type
        assert body["explanation"]

    def test_generates_key_when_missing(self, client):
        response = client.post("/api/v1/encrypt", json={"text": "HELLO", "cipher_type": "hill"})

        assert response.status_code == 200
        key_used = response.json()["key_used"]
        decrypted = client.post(
            "/api/v1/decrypt",
            json={"text": response.json()["text"], "cipher_type": "hill", "key": key_used},
        )
        assert decrypted.json()["text"] == "HELLO"

    def test_invalid_hill_key(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"text": "AB", "cipher_type": "hill", "key": "1 2 3"},
        )

        assert response.status_code == 422
        assert response.json()["error"] == "InvalidKeyError"

    def test_invalid_caesar_key(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"text": "AB", "cipher_type": "caesar", "key": "abc"},
        )

        assert response.status_code == 422
        assert response.json()["error"] == "InvalidKeyError"

    def test_text_too_long(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"text": "A" * 51, "cipher_type": "caesar", "key": "1"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "TextTooLongError"

    def test_unknown_cipher_rejected_by_schema(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"text": "AB", "cipher_type": "enigma", "key": "1"},
        )

        assert response.status_code == 422


class TestDecryptEndpoint:
    """Test /decrypt."""

    def test_hill_decrypt(self, client):
        response = client.post(
            "/api/v1/decrypt",
            json={"text": "TC", "cipher_type": "hill", "key": "3,3,2,5"},
        )

        assert response.status_code == 200
        assert response.json()["text"] == "HI"
        assert response.json()["key_used"] == "3 3 2 5"

    def test_non_invertible_key(self, client):
        response = client.post(
            "/api/v1/decrypt",
            json={"text": "TC", "cipher_type": "hill", "key": "1 2 3 4"},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "NonInvertibleKeyError"
        assert body["details"]["determinant"] == 24

    def test_key_required(self, client):
        response = client.post("/api/v1/decrypt", json={"text": "TC", "cipher_type": "hill"})
        assert response.status_code == 422


class TestKeysEndpoint:
    """Test /keys/suggest."""

    @pytest.mark.parametrize("cipher_type", ["caesar", "vigenere", "playfair", "hill"])
    def test_local_suggestion(self, client, cipher_type):
        response = client.post("/api/v1/keys/suggest", json={"cipher_type": cipher_type})

        assert response.status_code == 200
        body = response.json()
        assert body["source"] == "local"
        assert body["key"]


class TestTextLengthLimit:
    """The configured max_text_length is the only length gate."""

    def test_default_limit_returns_400(self):
        with _client_with(Settings(gemini_api_key=None)) as client:
            response = client.post(
                "/api/v1/encrypt",
                json={"text": "A" * 100_001, "cipher_type": "caesar", "key": "1"},
            )

        assert response.status_code == 400
        assert response.json()["error"] == "TextTooLongError"

    def test_raised_limit_is_honoured(self):
        with _client_with(Settings(gemini_api_key=None, max_text_length=200_000)) as client:
            response = client.post(
                "/api/v1/decrypt",
                json={"text": "B" * 150_000, "cipher_type": "caesar", "key": "1"},
            )

        assert response.status_code == 200
        assert response.json()["text"] == "A" * 150_000
