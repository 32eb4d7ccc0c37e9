import pytest

from app.core.models.exceptions import (
    AddressLookupError,
    InternalLookupError,
    InvalidPostalCodeError,
    PostalCodeNotFoundError,
    UpstreamUnavailableError,
)
from app.core.services import AddressLookupService, map_directory_payload
from app.core.services.address_lookup_service import DIRECTORY_FIELD_MAP, is_not_found
from tests.conftest import PAULISTA_PAYLOAD, StubResolver


@pytest.mark.anyio
async def test_lookup_maps_directory_fields_without_altering_values():
    resolver = StubResolver(payload=dict(PAULISTA_PAYLOAD))

    record = await AddressLookupService(resolver).lookup("01310-100")

    assert record.cep == "01310-100"
    assert record.address == "Av Paulista"
    assert record.neighborhood == "Bela Vista"
    assert record.city == "São Paulo"
    assert record.state == "SP"
    assert record.ibge == "3550308"
    assert record.gia == "1004"
    assert record.ddd == "11"
    assert record.siafi == "7107"


@pytest.mark.anyio
async def test_lookup_sends_normalized_code_to_resolver():
    resolver = StubResolver(payload=dict(PAULISTA_PAYLOAD))

    await AddressLookupService(resolver).lookup(" 01310-100 ")

    assert resolver.calls == ["01310100"]


@pytest.mark.anyio
async def test_invalid_code_never_reaches_resolver():
    resolver = StubResolver(payload=dict(PAULISTA_PAYLOAD))

    with pytest.raises(InvalidPostalCodeError) as exc_info:
        await AddressLookupService(resolver).lookup("0131-100")

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "invalid postal code"
    assert resolver.calls == []


@pytest.mark.anyio
@pytest.mark.parametrize("marker", [True, "true", "True", 1])
async def test_not_found_marker_wins_over_other_fields(marker):
    resolver = StubResolver(payload={**PAULISTA_PAYLOAD, "erro": marker})

    with pytest.raises(PostalCodeNotFoundError) as exc_info:
        await AddressLookupService(resolver).lookup("01310100")

    assert exc_info.value.status_code == 404


@pytest.mark.anyio
async def test_transport_failure_is_reported_as_upstream_unavailable():
    resolver = StubResolver(error=UpstreamUnavailableError())

    with pytest.raises(UpstreamUnavailableError) as exc_info:
        await AddressLookupService(resolver).lookup("01310100")

    assert exc_info.value.message == "upstream lookup failed"


@pytest.mark.anyio
@pytest.mark.parametrize(
    "payload",
    [
        {"logradouro": "Av Paulista"},  # no cep
        {**PAULISTA_PAYLOAD, "ddd": 11},  # non-string value
    ],
)
async def test_malformed_payload_is_an_internal_error(payload):
    resolver = StubResolver(payload=payload)

    with pytest.raises(InternalLookupError) as exc_info:
        await AddressLookupService(resolver).lookup("01310100")

    assert exc_info.value.message == "internal error"
    assert exc_info.value.status_code == 500


@pytest.mark.anyio
async def test_unexpected_resolver_exception_is_wrapped():
    resolver = StubResolver(error=KeyError("boom"))

    with pytest.raises(InternalLookupError) as exc_info:
        await AddressLookupService(resolver).lookup("01310100")

    assert isinstance(exc_info.value.__cause__, KeyError)


@pytest.mark.anyio
async def test_every_failure_is_an_address_lookup_error():
    for resolver, code in [
        (StubResolver(payload={}), "bad"),
        (StubResolver(payload={"erro": True}), "01310100"),
        (StubResolver(error=UpstreamUnavailableError()), "01310100"),
        (StubResolver(error=RuntimeError("x")), "01310100"),
    ]:
        with pytest.raises(AddressLookupError):
            await AddressLookupService(resolver).lookup(code)


def test_not_found_marker_absent_or_false():
    assert is_not_found(PAULISTA_PAYLOAD) is False
    assert is_not_found({"erro": False}) is False
    assert is_not_found({"erro": "false"}) is False


def test_mapping_drops_fields_outside_the_table_and_keeps_missing_ones_absent():
    record = map_directory_payload({"cep": "70040-010", "uf": "DF", "complemento": "bloco A", "gia": ""})

    assert record.model_dump(exclude_none=True) == {"cep": "70040-010", "state": "DF", "gia": ""}


def test_field_map_covers_every_record_field():
    from app.core.schemas import AddressRecord

    assert set(DIRECTORY_FIELD_MAP.values()) == set(AddressRecord.model_fields)


@pytest.mark.anyio
async def test_internal_error_log_passes_raw_input_as_argument(caplog):
    resolver = StubResolver(error=RuntimeError("boom"))

    with caplog.at_level("ERROR", logger="app.core.services.address_lookup_service"):
        with pytest.raises(InternalLookupError):
            await AddressLookupService(resolver).lookup("01310-100")

    record = caplog.records[-1]
    assert record.args[0] == "01310-100"
    assert "'01310-100'" in record.getMessage()
