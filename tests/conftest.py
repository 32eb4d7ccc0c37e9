from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.core.services import AddressLookupService, get_address_lookup_service
from app.main import app


PAULISTA_PAYLOAD = {
    "cep": "01310-100",
    "logradouro": "Av Paulista",
    "complemento": "de 612 a 1510 - lado par",
    "bairro": "Bela Vista",
    "localidade": "São Paulo",
    "uf": "SP",
    "ibge": "3550308",
    "gia": "1004",
    "ddd": "11",
    "siafi": "7107",
}


class StubResolver:
    """Address resolver double: returns a canned payload or raises a canned error."""

    def __init__(self, payload: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None):
        self.payload = payload
        self.error = error
        self.calls: List[str] = []

    async def resolve(self, postal_code: str) -> Dict[str, Any]:
        self.calls.append(postal_code)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def resolver():
    return StubResolver(payload=dict(PAULISTA_PAYLOAD))


@pytest.fixture
def client(resolver):
    app.dependency_overrides[get_address_lookup_service] = lambda: AddressLookupService(resolver)
    yield TestClient(app)
    app.dependency_overrides.clear()
