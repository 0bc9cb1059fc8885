"""Packaging correctness verification for formpath.

Tests validate:
- Base install imports cleanly and exposes the public API
- py.typed marker is present in the wheel
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the built wheel and current installation rather than
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import subprocess
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    """Verify the installed package imports and works."""

    def test_import_formpath(self):  # type: ignore[no-untyped-def]
        """Top-level import succeeds."""
        import formpath

        assert hasattr(formpath, "parse")
        assert hasattr(formpath, "normalize")
        assert hasattr(formpath, "flatten")
        assert hasattr(formpath, "deep_equal")

    def test_flatten_basic(self):  # type: ignore[no-untyped-def]
        """flatten() works with the default file probe."""
        from formpath import flatten

        assert flatten({"a": "x"}) == {"": {"a": "x"}, "a": "x"}


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        dist_dir = PROJECT_ROOT / "dist"
        # Use poetry build since that's the project's build system
        try:
            result = subprocess.run(
                ["poetry", "build", "-f", "wheel"],
                cwd=str(PROJECT_ROOT),
                capture_output=True,
                text=True,
            )
        except FileNotFoundError:
            pytest.skip("poetry is not installed")
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("formpath-*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """py.typed marker must be included in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            py_typed_files = [n for n in names if n.endswith("py.typed")]
            assert py_typed_files, f"py.typed not found in wheel. Contents: {names}"

    def test_no_pycache_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """__pycache__ directories must not be in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            pycache_files = [n for n in zf.namelist() if "__pycache__" in n]
            assert not pycache_files, f"__pycache__ found in wheel: {pycache_files}"

    def test_all_source_modules_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """All source modules must be present in the wheel."""
        expected_modules = [
            "formpath/__init__.py",
            "formpath/api.py",
            "formpath/config.py",
            "formpath/probes.py",
            "formpath/protocols.py",
            "formpath/submission.py",
            "formpath/path/__init__.py",
            "formpath/path/codec.py",
            "formpath/path/segments.py",
            "formpath/tree/__init__.py",
            "formpath/tree/accessor.py",
            "formpath/tree/equality.py",
            "formpath/tree/flattener.py",
            "formpath/tree/nodes.py",
            "formpath/tree/normalizer.py",
            "formpath/integrations/__init__.py",
            "formpath/integrations/_pytest_plugin.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert any(module in n for n in names), (
                    f"Module {module} not found in wheel"
                )

    def test_metadata_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """Wheel metadata must include correct package info."""
        with zipfile.ZipFile(wheel_path) as zf:
            metadata_files = [n for n in zf.namelist() if "METADATA" in n]
            assert metadata_files, "No METADATA found in wheel"
            metadata = zf.read(metadata_files[0]).decode()
            assert "formpath" in metadata.lower()
            assert "0.1.0" in metadata
            assert "cachetools" in metadata


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        """pytest11 entry point must be registered for formpath."""
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")

        fp_eps = [ep for ep in pytest11_eps if "formpath" in str(ep.value)]
        assert fp_eps, (
            f"No pytest11 entry point found for formpath. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        """assert_form_equivalent fixture must be importable from plugin."""
        import importlib

        mod = importlib.import_module("formpath.integrations._pytest_plugin")
        assert hasattr(mod, "assert_form_equivalent")
        assert callable(mod.assert_form_equivalent)


class TestPackageMetadata:
    """Verify package metadata completeness."""

    def test_version(self):  # type: ignore[no-untyped-def]
        """Package version must be 0.1.0."""
        import formpath

        assert formpath.__version__ == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        """__all__ must include the documented public API."""
        import formpath

        expected = {
            "APPEND",
            "AttributeFileProbe",
            "FileProbe",
            "NormalizeConfig",
            "Submitter",
            "deep_equal",
            "flatten",
            "flatten_entries",
            "format_name",
            "format_path",
            "get_child_paths",
            "get_value",
            "has_changed",
            "is_prefix",
            "is_unchanged",
            "lift_entries",
            "normalize",
            "normalize_with",
            "parse",
            "set_value",
            "with_submitter",
        }
        actual = set(formpath.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
