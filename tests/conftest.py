"""
Pytest fixtures. The backend is replaced by an httpx.MockTransport that
answers RPC calls from a per-test table and records every call it sees.
"""

from __future__ import annotations

import json
import os

# Keep test runs off the filesystem; must be set before settings load
os.environ.setdefault("LOG_TO_FILE", "false")

import httpx
import pytest

from dzwallet.services.backend import BackendClient, OTPService, TransferService, VerificationService


class FakeBackend:
    """Maps RPC names to canned JSON bodies (or callables taking the params)"""

    def __init__(self):
        self.responses = {}
        self.calls = []

    def on(self, rpc_name, body=None, status_code=200):
        self.responses[rpc_name] = (body, status_code)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        rpc_name = request.url.path.rsplit("/", 1)[-1]
        params = json.loads(request.content or b"{}")
        self.calls.append((rpc_name, params, request))

        if rpc_name not in self.responses:
            return httpx.Response(404, json={"message": f"function {rpc_name} does not exist"})

        body, status_code = self.responses[rpc_name]
        if callable(body):
            body = body(params)
        return httpx.Response(status_code, json=body)

    def rpc_names(self):
        return [name for name, _, _ in self.calls]

    def params_of(self, rpc_name):
        for name, params, _ in self.calls:
            if name == rpc_name:
                return params
        raise AssertionError(f"{rpc_name} was never called")


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def backend(fake_backend):
    return BackendClient(
        base_url="http://backend.test",
        api_key="test-key",
        transport=httpx.MockTransport(fake_backend.handler),
    )


@pytest.fixture
def transfers(backend):
    return TransferService(backend)


@pytest.fixture
def verifications(backend):
    return VerificationService(backend)


@pytest.fixture
def otp(backend):
    return OTPService(backend)


@pytest.fixture
def client(transfers, verifications, otp):
    """FastAPI TestClient wired to the fake backend through dependency overrides"""
    from fastapi.testclient import TestClient

    from dzwallet.api.dependencies import get_otp_service, get_transfer_service, get_verification_service
    from dzwallet.main import app

    app.dependency_overrides[get_transfer_service] = lambda: transfers
    app.dependency_overrides[get_verification_service] = lambda: verifications
    app.dependency_overrides[get_otp_service] = lambda: otp
    yield TestClient(app)
    app.dependency_overrides.clear()
