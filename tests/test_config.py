"""Tests for the configuration module."""

from pathlib import Path

import pytest

from topo_sort._cli.config import (
    ConfigError,
    TopoSortConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        result = find_pyproject_toml(tmp_path)

        assert result == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "src" / "pkg"
        subdir.mkdir(parents=True)

        result = find_pyproject_toml(subdir)

        assert result == pyproject

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        """Should return None when no pyproject.toml is found."""
        result = find_pyproject_toml(tmp_path)

        assert result is None


class TestLoadConfigInputOutput:
    """Tests for loading input/output path configuration."""

    def test_input_path(self, tmp_path: Path) -> None:
        """Should resolve the input path against the project root."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.topo-sort]
input = "data/deps.toml"
""",
        )

        config = load_config(pyproject)

        assert config.input == tmp_path / "data/deps.toml"
        assert config.output is None

    def test_output_path(self, tmp_path: Path) -> None:
        """Should resolve the output path against the project root."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.topo-sort]
output = "build/order.toml"
""",
        )

        config = load_config(pyproject)

        assert config.output == tmp_path / "build/order.toml"

    def test_absolute_path_kept(self, tmp_path: Path) -> None:
        absolute = tmp_path / "elsewhere" / "deps.toml"
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f'[tool.topo-sort]\ninput = "{absolute.as_posix()}"\n')

        config = load_config(pyproject)

        assert config.input == absolute

    def test_full_configuration(self, tmp_path: Path) -> None:
        """Should parse full configuration with all fields."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.topo-sort]
input = "data/deps.toml"
output = "data/order.toml"
""",
        )

        config = load_config(pyproject)

        assert config.input == tmp_path / "data/deps.toml"
        assert config.output == tmp_path / "data/order.toml"
        assert config.project_root == tmp_path

    def test_invalid_input_type_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError when input is not a string."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.topo-sort]
input = 123
""",
        )

        with pytest.raises(ConfigError, match="expected string path"):
            load_config(pyproject)


class TestLoadConfigEmptySection:
    """Tests for empty or missing configuration."""

    def test_no_tool_section(self, tmp_path: Path) -> None:
        """Should return empty config when no [tool.topo-sort] section."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[project]
name = "test"
""",
        )

        config = load_config(pyproject)

        assert config.input is None
        assert config.output is None
        assert config.project_root == tmp_path

    def test_empty_tool_section(self, tmp_path: Path) -> None:
        """Should return empty config when [tool.topo-sort] is empty."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.topo-sort]
""",
        )

        config = load_config(pyproject)

        assert config.input is None
        assert config.output is None


class TestLoadConfigErrors:
    """Tests for configuration error handling."""

    def test_invalid_toml_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError for invalid TOML."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("invalid toml [[[")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)

    def test_section_not_a_table_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool]\ntopo-sort = "deps.toml"\n')

        with pytest.raises(ConfigError, match="expected a table"):
            load_config(pyproject)


class TestGetConfig:
    """Tests for config discovery from the working directory."""

    def test_discovers_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.topo-sort]\ninput = "deps.toml"\n')
        subdir = tmp_path / "sub"
        subdir.mkdir()
        monkeypatch.chdir(subdir)

        config = get_config()

        assert config.input == tmp_path.resolve() / "deps.toml"


class TestTopoSortConfigDataclass:
    """Tests for the TopoSortConfig dataclass."""

    def test_default_values(self) -> None:
        """Should have None as default values."""
        config = TopoSortConfig()

        assert config.input is None
        assert config.output is None
        assert config.project_root is None

    def test_frozen(self) -> None:
        """Should be frozen (immutable)."""
        config = TopoSortConfig()

        with pytest.raises(AttributeError):
            config.input = Path("deps.toml")  # type: ignore[misc]
