"""pytest plugin for formpath.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from formpath.config import NormalizeConfig
from formpath.tree.equality import deep_equal
from formpath.tree.flattener import flatten
from formpath.tree.normalizer import normalize_with


def _differing_names(left_tree: Any, right_tree: Any, config: NormalizeConfig) -> list[str]:
    """Return the field names whose flattened values differ, in sorted order.

    Both trees must already be normalized with ``config`` so that uploads
    dropped by ``accept_file=False`` are never reported.
    """
    left = flatten(left_tree, file_probe=config.file_probe)
    right = flatten(right_tree, file_probe=config.file_probe)
    names = set(left) | set(right)
    return sorted(
        name
        for name in names
        if name not in left or name not in right or not deep_equal(left[name], right[name])
    )


@pytest.fixture(scope="session")
def assert_form_equivalent() -> Any:
    """Fixture that returns a callable form data equivalence asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_blank_fields_ignored(assert_form_equivalent):
            assert_form_equivalent({"name": "x", "note": ""}, {"name": "x"})

        def test_real_change(assert_form_equivalent):
            with pytest.raises(AssertionError, match=r"differing fields"):
                assert_form_equivalent({"name": "x"}, {"name": "y"})

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` when the normalized trees differ.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: NormalizeConfig | None = None,
    ) -> None:
        """Assert that two form data trees hold the same data.

        Args:
            actual:   The tree produced by the code under test.
            expected: The expected tree.
            config:   Optional NormalizeConfig for file handling.

        Raises:
            AssertionError: When the normalized trees differ, with a message
                including both normalized trees and the differing field names.
        """
        cfg = config if config is not None else NormalizeConfig()
        left = normalize_with(actual, cfg)
        right = normalize_with(expected, cfg)
        if not deep_equal(left, right):
            raise AssertionError(
                f"form data not equivalent\n"
                f"  actual:   {left}\n"
                f"  expected: {right}\n"
                f"  differing fields: {_differing_names(left, right, cfg)}"
            )

    return _assert
