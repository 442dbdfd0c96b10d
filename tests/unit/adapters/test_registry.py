"""Tests for the adapter variant registry."""

import pytest

from factory_resolver.adapters import (
    Adapter,
    BlueprintAdapter,
    FactoryBoyAdapter,
    OrmAdapter,
    available_adapters,
    get_adapter_class,
    register_adapter,
)
from factory_resolver.adapters import registry as registry_module
from factory_resolver.errors import UnknownAdapterError


class TestAdapterRegistry:
    def test_builtin_adapters_registered(self):
        assert get_adapter_class("orm") is OrmAdapter
        assert get_adapter_class("factory_boy") is FactoryBoyAdapter
        assert get_adapter_class("blueprint") is BlueprintAdapter

    def test_builtin_keys_listed(self):
        keys = available_adapters()
        assert {"orm", "factory_boy", "blueprint"} <= set(keys)

    def test_unknown_adapter_raises(self):
        with pytest.raises(UnknownAdapterError, match="Unknown adapter: machinist"):
            get_adapter_class("machinist")

    def test_unknown_adapter_is_value_error(self):
        with pytest.raises(ValueError):
            get_adapter_class("machinist")

    def test_register_custom_adapter(self, monkeypatch):
        monkeypatch.setattr(registry_module, "_ADAPTER_REGISTRY", dict(registry_module._ADAPTER_REGISTRY))

        @register_adapter("custom")
        class CustomAdapter(Adapter):
            @classmethod
            def factories(cls):
                return []

        assert get_adapter_class("custom") is CustomAdapter
        assert "custom" in available_adapters()
