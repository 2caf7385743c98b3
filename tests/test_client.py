"""CarsClient against the in-memory backend."""

from __future__ import annotations

import logging

import pytest

from conftest import FakeCarsBackend
from pycars.client import CarsClient
from pycars.exceptions import (
    CarsEntityStateError,
    CarsError,
    CarsNotFoundError,
    CarsTransportError,
    CarsValidationError,
)
from pycars.models.car import Car


@pytest.mark.asyncio
async def test_client_requires_context_manager(backend: FakeCarsBackend) -> None:
    client = CarsClient(transport=backend)
    with pytest.raises(CarsError, match="not initialized"):
        await client.list_cars()


@pytest.mark.asyncio
async def test_list_preserves_server_order(backend: FakeCarsBackend) -> None:
    backend.seed({"id": "1", "make": "Toyota"}, {"id": "2", "make": "Honda"})
    async with CarsClient(transport=backend) as client:
        cars = await client.list_cars()
    assert [car.to_payload() for car in cars] == [
        {"id": "1", "make": "Toyota"},
        {"id": "2", "make": "Honda"},
    ]


@pytest.mark.asyncio
async def test_create_posts_and_returns_id(backend: FakeCarsBackend) -> None:
    async with CarsClient(transport=backend) as client:
        created = await client.create_car(Car.model_validate({"make": "Ford", "year": 2019}))
    assert created.id is not None
    assert created.fields == {"make": "Ford", "year": 2019}
    assert backend.count("POST", "/cars") == 1
    assert backend.count("PUT") == 0


@pytest.mark.asyncio
async def test_create_with_id_is_refused_before_sending(backend: FakeCarsBackend) -> None:
    async with CarsClient(transport=backend) as client:
        with pytest.raises(CarsEntityStateError):
            await client.create_car(Car.model_validate({"id": "5", "make": "Ford"}))
    assert backend.calls == []


@pytest.mark.asyncio
async def test_update_without_id_is_refused_before_sending(backend: FakeCarsBackend) -> None:
    async with CarsClient(transport=backend) as client:
        with pytest.raises(CarsEntityStateError):
            await client.update_car(Car.model_validate({"make": "Ford"}))
    assert backend.calls == []


@pytest.mark.asyncio
async def test_empty_id_is_refused(backend: FakeCarsBackend) -> None:
    async with CarsClient(transport=backend) as client:
        with pytest.raises(CarsEntityStateError):
            await client.delete_car("")
        with pytest.raises(CarsEntityStateError):
            await client.get_car(" ")
    assert backend.calls == []


@pytest.mark.asyncio
async def test_update_addresses_car_by_id(backend: FakeCarsBackend) -> None:
    backend.seed({"id": "2", "make": "Honda", "year": 2019})
    async with CarsClient(transport=backend) as client:
        updated = await client.update_car(Car.model_validate({"id": "2", "make": "Honda", "year": 2020}))
    assert updated.to_payload() == {"id": "2", "make": "Honda", "year": 2020}
    assert backend.calls == [("PUT", "/cars/2")]


@pytest.mark.asyncio
async def test_delete_then_list_omits_car(backend: FakeCarsBackend) -> None:
    backend.seed({"id": "1", "make": "Toyota"}, {"id": "2", "make": "Honda"})
    async with CarsClient(transport=backend) as client:
        await client.delete_car("1")
        cars = await client.list_cars()
    assert [car.id for car in cars] == ["2"]


@pytest.mark.asyncio
async def test_get_twice_is_idempotent(backend: FakeCarsBackend) -> None:
    backend.seed({"id": "3", "make": "Mazda", "model": "MX-5"})
    async with CarsClient(transport=backend) as client:
        first = await client.get_car("3")
        second = await client.get_car("3")
    assert first == second


@pytest.mark.asyncio
async def test_create_then_get_round_trips_fields(backend: FakeCarsBackend) -> None:
    sent = {"make": "Volvo", "model": "240", "year": 1988, "wagon": True}
    async with CarsClient(transport=backend) as client:
        created = await client.create_car(Car.model_validate(sent))
        assert created.id is not None
        fetched = await client.get_car(created.id)
    assert fetched == created
    for key, value in sent.items():
        assert fetched.fields[key] == value


@pytest.mark.asyncio
async def test_get_unknown_id_raises_not_found(backend: FakeCarsBackend) -> None:
    async with CarsClient(transport=backend) as client:
        with pytest.raises(CarsNotFoundError) as exc_info:
            await client.get_car("9")
    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_ids_are_quoted_as_one_segment(backend: FakeCarsBackend) -> None:
    backend.seed({"id": "a/b", "make": "Fiat"})
    async with CarsClient(transport=backend) as client:
        car = await client.get_car("a/b")
    assert car.id == "a/b"
    assert backend.calls == [("GET", "/cars/a%2Fb")]


@pytest.mark.asyncio
async def test_create_validation_errors_are_unwrapped(
    backend: FakeCarsBackend,
    caplog: pytest.LogCaptureFixture,
) -> None:
    backend.reject_with = {"message": "Validation failed", "errors": {"make": "required"}}
    async with CarsClient(transport=backend) as client:
        with caplog.at_level(logging.ERROR, logger="pycars._api.cars"):
            with pytest.raises(CarsValidationError) as exc_info:
                await client.create_car(Car.model_validate({"year": 2001}))
    exc = exc_info.value
    assert exc.errors == {"make": "required"}
    assert exc.status_code == 400
    assert isinstance(exc.__cause__, CarsTransportError)
    assert any(record.name == "pycars._api.cars" for record in caplog.records)


@pytest.mark.asyncio
async def test_update_validation_errors_are_unwrapped(backend: FakeCarsBackend) -> None:
    backend.seed({"id": "2", "make": "Honda"})
    backend.reject_with = {"errors": {"year": "must be a number"}}
    async with CarsClient(transport=backend) as client:
        with pytest.raises(CarsValidationError) as exc_info:
            await client.update_car(Car.model_validate({"id": "2", "make": "Honda", "year": "new"}))
    assert exc_info.value.errors == {"year": "must be a number"}


@pytest.mark.asyncio
async def test_create_network_failure_becomes_detail(backend: FakeCarsBackend) -> None:
    backend.network_failures.add("POST")
    async with CarsClient(transport=backend) as client:
        with pytest.raises(CarsValidationError) as exc_info:
            await client.create_car(Car.model_validate({"make": "Ford"}))
    assert list(exc_info.value.errors) == ["detail"]
    assert "connection refused" in exc_info.value.errors["detail"]


@pytest.mark.asyncio
async def test_read_and_delete_errors_pass_through_raw(backend: FakeCarsBackend) -> None:
    backend.network_failures.update({"GET", "DELETE"})
    async with CarsClient(transport=backend) as client:
        with pytest.raises(CarsTransportError) as list_exc:
            await client.list_cars()
        with pytest.raises(CarsTransportError) as delete_exc:
            await client.delete_car("1")
    assert not isinstance(list_exc.value, CarsValidationError)
    assert not isinstance(delete_exc.value, CarsValidationError)


class _StaticTransport:
    def __init__(self, body: object) -> None:
        self._body = body

    async def request(self, _method: str, _endpoint: str, _payload: object = None) -> object:
        return self._body


@pytest.mark.asyncio
async def test_list_rejects_non_array_body() -> None:
    async with CarsClient(transport=_StaticTransport({"cars": []})) as client:
        with pytest.raises(CarsTransportError, match="JSON array"):
            await client.list_cars()


@pytest.mark.asyncio
async def test_create_response_without_id_is_an_error() -> None:
    async with CarsClient(transport=_StaticTransport({"make": "Ford"})) as client:
        with pytest.raises(CarsTransportError, match="without an id"):
            await client.create_car(Car.model_validate({"make": "Ford"}))


@pytest.mark.asyncio
async def test_update_with_empty_response_echoes_car() -> None:
    car = Car.model_validate({"id": "4", "make": "Kia"})
    async with CarsClient(transport=_StaticTransport(None)) as client:
        assert await client.update_car(car) == car
