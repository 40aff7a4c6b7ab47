"""Tests for qs2cookie.__init__ — lazy imports cover all public names."""

import tomllib
from pathlib import Path

import pytest

import qs2cookie


@pytest.mark.parametrize("name", qs2cookie.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(qs2cookie, name)
    assert obj is not None, f"qs2cookie.{name} resolved to None"


def test_transform_is_the_function() -> None:
    """Importing the pipeline module must not shadow ``transform``."""
    import qs2cookie.pipeline  # noqa: F401

    from qs2cookie import transform

    assert callable(transform)
    assert transform is qs2cookie.pipeline.transform


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        qs2cookie.__getattr__("ThisDoesNotExist")


def test_version_matches_pyproject() -> None:
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with pyproject.open("rb") as f:
        project = tomllib.load(f)["project"]
    assert qs2cookie.__version__ == project["version"]
