from typing import Generator

import httpx
import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
    InMemorySpanExporter,
)

from simple_client import JsonOptions, SimpleClient, SimpleClientError

_exporter = InMemorySpanExporter()


@pytest.fixture(scope="module", autouse=True)
def tracer_provider() -> None:
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(_exporter))
    trace.set_tracer_provider(provider)


@pytest.fixture
def exporter() -> Generator[InMemorySpanExporter, None, None]:
    _exporter.clear()
    yield _exporter
    _exporter.clear()


class TestTracing:
    @pytest.mark.anyio
    async def test_span_attributes(self, make_transport, exporter):
        client = SimpleClient(transport=make_transport(httpx.Response(200, json={})))

        await client.put("https://api.example.com/a", JsonOptions(json={"a": 1}))

        spans = [s for s in exporter.get_finished_spans() if s.name == "simple_client.http"]
        assert len(spans) == 1
        attributes = spans[0].attributes or {}
        assert attributes["http.method"] == "PUT"
        assert attributes["http.url"] == "https://api.example.com/a"
        assert attributes["http.status_code"] == 200

    @pytest.mark.anyio
    async def test_span_records_failure(self, make_transport, exporter):
        client = SimpleClient(
            transport=make_transport(error=RuntimeError("network down"))
        )

        with pytest.raises(SimpleClientError):
            await client.get("https://api.example.com/a", JsonOptions())

        spans = [s for s in exporter.get_finished_spans() if s.name == "simple_client.http"]
        assert len(spans) == 1
        assert not spans[0].status.is_ok

    @pytest.mark.anyio
    async def test_span_records_decode_failure(self, make_transport, exporter):
        client = SimpleClient(transport=make_transport(httpx.Response(200, text="{")))

        with pytest.raises(ValueError):
            await client.get("https://api.example.com/a", JsonOptions())

        spans = [s for s in exporter.get_finished_spans() if s.name == "simple_client.http"]
        assert len(spans) == 1
        assert not spans[0].status.is_ok
        assert any(event.name == "exception" for event in spans[0].events)
