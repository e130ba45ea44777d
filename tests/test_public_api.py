"""Tests for the autocomponents public API surface.

Verifies that all expected names are importable from the top-level
``autocomponents`` package and that ``__all__`` is comprehensive.
"""

import autocomponents


class TestPublicAPIImports:
    """Every public component must be importable from ``import autocomponents``."""

    def test_registry_importable(self):
        from autocomponents import Registry

        assert Registry is not None

    def test_discover_importable(self):
        from autocomponents import discover

        assert callable(discover)

    def test_normalize_importable(self):
        from autocomponents import normalize

        assert normalize("vue-icon.py") == "VueIcon"

    def test_config_importable(self):
        from autocomponents import Config

        assert Config is not None

    def test_errors_importable(self):
        from autocomponents import (
            ComponentError,
            DiscoveryError,
            ModuleResolutionError,
            NormalizationError,
        )

        for error in (DiscoveryError, ModuleResolutionError, NormalizationError):
            assert issubclass(error, ComponentError)


class TestAll:
    def test_all_names_resolve(self):
        for name in autocomponents.__all__:
            assert hasattr(autocomponents, name), name

    def test_version(self):
        assert autocomponents.__version__ == "0.1.0"
