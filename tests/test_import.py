"""Verify package imports work correctly."""


def test_import_scriptlex() -> None:
    """Test that scriptlex can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import scriptlex

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert scriptlex.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from scriptlex import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_all_exports_resolve() -> None:
    import scriptlex

    for name in scriptlex.__all__:
        assert hasattr(scriptlex, name), name
