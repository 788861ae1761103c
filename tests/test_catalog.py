from __future__ import annotations

import pytest

from core.catalog import ToolCatalog, mapped, same
from core.models import ToolDescriptor
from core.tool_definitions import INTERZOID_TOOLS, default_catalog


def _descriptor(name: str = "t", **kwargs) -> ToolDescriptor:
    kwargs.setdefault("endpoint", "/x")
    return ToolDescriptor(name=name, description="d", **kwargs)


def test_lookup_returns_descriptor_or_none():
    a = _descriptor("a")
    catalog = ToolCatalog([a, _descriptor("b")])

    assert catalog.get("a") is a
    assert catalog.get("missing") is None
    assert "b" in catalog
    assert "missing" not in catalog


def test_catalog_keeps_declaration_order():
    catalog = ToolCatalog([_descriptor("z"), _descriptor("a"), _descriptor("m")])
    assert catalog.names() == ["z", "a", "m"]
    assert [d.name for d in catalog] == ["z", "a", "m"]
    assert len(catalog) == 3


def test_duplicate_tool_names_are_rejected():
    with pytest.raises(ValueError, match="Duplicate tool name"):
        ToolCatalog([_descriptor("a"), _descriptor("a")])


def test_duplicate_caller_names_within_descriptor_are_rejected():
    with pytest.raises(ValueError, match="more than once"):
        _descriptor(required_params=[same("q")], optional_params=[mapped("q", "query")])


def test_descriptor_params_are_stored_as_tuples():
    d = _descriptor(required_params=[same("a")], optional_params=[same("b")])
    assert isinstance(d.required_params, tuple)
    assert isinstance(d.optional_params, tuple)


def test_mapped_and_same_helpers():
    assert same("org", "Org name").remote_name == "org"
    p = mapped("company_name", "company")
    assert (p.caller_name, p.remote_name) == ("company_name", "company")


def test_input_schema_lists_caller_names_and_required_order():
    d = _descriptor(
        required_params=[same("org1", "First"), mapped("second", "org2")],
        optional_params=[same("algorithm", "Variant")],
    )
    schema = d.input_schema()

    assert schema["type"] == "object"
    assert schema["required"] == ["org1", "second"]
    assert set(schema["properties"]) == {"org1", "second", "algorithm"}
    assert schema["properties"]["org1"] == {"type": "string", "description": "First"}
    assert schema["properties"]["second"] == {"type": "string"}


def test_default_catalog_covers_every_interzoid_tool():
    catalog = default_catalog()

    assert len(catalog) == len(INTERZOID_TOOLS) == 31
    for descriptor in catalog:
        assert descriptor.name.startswith("interzoid_")
        assert descriptor.endpoint.startswith("/")
        assert descriptor.required_params, descriptor.name
        assert "x402" in descriptor.description


def test_known_endpoint_mappings():
    catalog = default_catalog()

    rates = catalog.get("interzoid_currency_rate")
    assert rates.endpoint == "/getrates"
    assert [p.remote_name for p in rates.required_params] == ["from", "to"]

    country = catalog.get("interzoid_country_info")
    assert [p.remote_name for p in country.optional_params] == ["algorithm"]
