"""
Unit tests for resolving a generator backend from an import path.
"""

import pytest

from storegen.backend import GeneratorBackend, load_backend
from storegen.exceptions import BackendLoadError


class TestLoadBackend:
    """Test the package.module:attribute resolver."""

    def test_instance(self, backend_module, backend):
        assert load_backend("storegen_test_backend:backend") is backend

    def test_class_is_instantiated(self, backend_module, backend_class):
        loaded = load_backend("storegen_test_backend:RecordingBackend")
        assert isinstance(loaded, backend_class)
        assert isinstance(loaded, GeneratorBackend)

    def test_factory(self, backend_module, backend):
        assert load_backend("storegen_test_backend:make_backend") is backend

    @pytest.mark.parametrize(
        "path", ["", "storegen_test_backend", ":backend", "storegen_test_backend:"]
    )
    def test_malformed_path(self, path):
        with pytest.raises(BackendLoadError) as exc_info:
            load_backend(path)
        assert "package.module:attribute" in str(exc_info.value)

    def test_missing_module(self):
        with pytest.raises(BackendLoadError) as exc_info:
            load_backend("storegen_no_such_module:backend")
        assert "Could not import" in str(exc_info.value)

    def test_missing_attribute(self, backend_module):
        with pytest.raises(BackendLoadError) as exc_info:
            load_backend("storegen_test_backend:missing")
        assert "has no attribute 'missing'" in str(exc_info.value)

    def test_not_a_backend(self, backend_module):
        with pytest.raises(BackendLoadError):
            load_backend("storegen_test_backend:not_a_backend")

    def test_abstract_interface_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            GeneratorBackend()
