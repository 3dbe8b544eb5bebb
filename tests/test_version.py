"""Tests for version information."""

import subprocess


def test_version_flag():
    """Test that --version flag works and shows version."""
    result = subprocess.run(
        ["noteline", "--version"],
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0
    assert "noteline" in result.stdout
    assert "python" in result.stdout
    assert "platform" in result.stdout


def test_version_module():
    """Test that version is accessible from module."""
    from noteline import __version__

    assert __version__
    assert isinstance(__version__, str)
    # Should be in SemVer format
    parts = __version__.split('.')
    assert len(parts) >= 2  # At least MAJOR.MINOR


def test_package_readme_is_declared():
    """Test that the package long description points at the README."""
    from pathlib import Path

    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore

    root = Path(__file__).resolve().parent.parent
    with open(root / "pyproject.toml", "rb") as f:
        project = tomllib.load(f)["project"]

    assert project["readme"] == "README.md"
    assert (root / "README.md").read_text(encoding="utf-8").startswith("# noteline")
