"""Checks on the project metadata in pyproject.toml.

Tests cover:
- The long description does not ship the internal requirements document
- Declared runtime dependencies
"""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


@pytest.fixture(scope="module")
def project():
    """The [project] table of pyproject.toml."""
    with PYPROJECT.open("rb") as handle:
        return tomllib.load(handle)["project"]


class TestProjectMetadata:
    """Tests for the [project] table."""

    def test_readme_is_not_requirements_document(self, project):
        """Test the published description is not the requirements document."""
        readme = project.get("readme")
        if readme is None:
            return
        name = readme if isinstance(readme, str) else readme.get("file", "")
        assert Path(name).name not in {"SPEC_FULL.md", "spec.md"}
        assert (PYPROJECT.parent / name).is_file()

    def test_runtime_dependencies(self, project):
        """Test numpy is the only runtime dependency."""
        assert [dep.split(">")[0] for dep in project["dependencies"]] == ["numpy"]
