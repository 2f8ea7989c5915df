"""
Tests for loading and the build orchestrator.

Tests cover:
- Export, token-file and config loading
- Full builds from an export
- Deterministic re-runs
- Name validation before any write
- Write failures
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_tokens.emission import default_registries
from chuk_mcp_tokens.errors import (
    DestinationWriteError,
    MalformedSourceError,
    UnknownFormatError,
    UnknownTransformError,
)
from chuk_mcp_tokens.models import BuildConfig, parse_tree
from chuk_mcp_tokens.pipeline import (
    Orchestrator,
    build_all,
    load_config,
    load_source_document,
    load_source_set,
)

THEME_CSS = "packages/themes/default/theme.generated.css"
COMPONENTS_CSS = "packages/ui/components.generated.css"
MERGE_CONFIG = "packages/ui/src/tailwind-merge-config.json"


def _config(transforms: list[str], fmt: str = "css/variables") -> BuildConfig:
    return BuildConfig.model_validate(
        {
            "source": ["tokens/*.json"],
            "platforms": {
                "css": {
                    "transforms": transforms,
                    "files": [{"destination": "out/vars.css", "format": fmt}],
                }
            },
        }
    )


class TestLoader:
    """Tests for loading inputs."""

    def test_load_source_document(self, source_path: Path) -> None:
        """The export parses into a tree."""
        tree = load_source_document(source_path)
        assert "Theme" in tree

    def test_load_non_object(self, temp_dir: Path) -> None:
        """A JSON array is not an export."""
        path = temp_dir / "bad.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(MalformedSourceError):
            load_source_document(path)

    def test_load_source_set(self, temp_dir: Path) -> None:
        """Matching files load keyed by relative POSIX path, sorted."""
        tokens = temp_dir / "tokens"
        tokens.mkdir()
        (tokens / "b.json").write_text('{"b": {"$value": 2}}', encoding="utf-8")
        (tokens / "a.json").write_text('{"a": {"$value": 1}}', encoding="utf-8")

        sources = load_source_set(temp_dir, ["tokens/*.json"])
        assert list(sources) == ["tokens/a.json", "tokens/b.json"]

    def test_load_default_config(self) -> None:
        """No path means the stock build."""
        assert load_config() == BuildConfig.default()

    def test_load_yaml_config(self, temp_dir: Path) -> None:
        """YAML configs validate into a BuildConfig."""
        path = temp_dir / "tokens.yaml"
        path.write_text(
            "source:\n"
            "  - tokens/*.json\n"
            "platforms:\n"
            "  css:\n"
            "    transforms: [name/kebab]\n"
            "    options:\n"
            "      selector: [':root']\n"
            "      outputReferences: true\n"
            "    files:\n"
            "      - destination: out/vars.css\n"
            "        format: css/variables\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.platforms["css"].options.output_references is True

    def test_load_missing_config(self, temp_dir: Path) -> None:
        """A config path that does not exist is an error."""
        with pytest.raises(FileNotFoundError):
            load_config(temp_dir / "missing.yaml")


class TestOrchestrator:
    """Tests for the Orchestrator."""

    def _orchestrator(self, root: Path) -> Orchestrator:
        transforms, formats = default_registries()
        return Orchestrator(transforms, formats, root)

    def _sources(self) -> dict:
        return {
            "tokens/theme.json": parse_tree(
                {
                    "color": {"White": {"$type": "color", "$value": "#fff"}},
                    "text-color": {"Default": {"$type": "color", "$value": "{color.White}"}},
                }
            )
        }

    def test_run(self, temp_dir: Path) -> None:
        """Each configured file is rendered and written."""
        result = self._orchestrator(temp_dir).run(_config(["name/kebab"]), self._sources())
        assert result.platforms_built == ["css"]
        output = (temp_dir / "out/vars.css").read_text(encoding="utf-8")
        assert "--color-white: #fff;" in output
        assert "--text-color-default: {color.White};" in output

    def test_file_options_override_platform(self, temp_dir: Path) -> None:
        """File options are layered over the platform's."""
        config = BuildConfig.model_validate(
            {
                "platforms": {
                    "css": {
                        "transforms": ["name/kebab"],
                        "options": {"selector": ["@theme"]},
                        "files": [
                            {
                                "destination": "out/vars.css",
                                "format": "css/variables",
                                "options": {"outputReferences": True},
                            }
                        ],
                    }
                },
            }
        )
        self._orchestrator(temp_dir).run(config, self._sources())
        output = (temp_dir / "out/vars.css").read_text(encoding="utf-8")
        assert "@theme {" in output
        assert "--text-color-default: var(--color-white);" in output

    def test_file_options_snake_case_key(self, temp_dir: Path) -> None:
        """A file can switch references off with the field name."""
        config = BuildConfig.model_validate(
            {
                "platforms": {
                    "css": {
                        "transforms": ["name/kebab"],
                        "options": {"selector": ["@theme"], "outputReferences": True},
                        "files": [
                            {
                                "destination": "out/vars.css",
                                "format": "css/variables",
                                "options": {"output_references": False},
                            }
                        ],
                    }
                },
            }
        )
        self._orchestrator(temp_dir).run(config, self._sources())
        output = (temp_dir / "out/vars.css").read_text(encoding="utf-8")
        assert "@theme {" in output
        assert "--text-color-default: {color.White};" in output

    def test_unknown_transform_before_write(self, temp_dir: Path) -> None:
        """Unknown transforms fail before any file is written."""
        with pytest.raises(UnknownTransformError):
            self._orchestrator(temp_dir).run(_config(["name/kebab", "size/rem"]), self._sources())
        assert not (temp_dir / "out").exists()

    def test_unknown_format_before_write(self, temp_dir: Path) -> None:
        """Unknown formats fail before any file is written."""
        with pytest.raises(UnknownFormatError):
            self._orchestrator(temp_dir).run(_config(["name/kebab"], "scss/map"), self._sources())
        assert not (temp_dir / "out").exists()

    def test_write_failure(self, temp_dir: Path) -> None:
        """Filesystem errors surface as DestinationWriteError."""
        (temp_dir / "out").write_text("not a directory", encoding="utf-8")
        with pytest.raises(DestinationWriteError) as exc_info:
            self._orchestrator(temp_dir).run(_config(["name/kebab"]), self._sources())
        assert isinstance(exc_info.value.reason, OSError)


class TestBuildAll:
    """End-to-end builds from an export."""

    def test_outputs_written(self, source_path: Path, temp_dir: Path) -> None:
        """A build writes token files and every generated output."""
        result = build_all(source_path, temp_dir)

        assert result.count == 3
        assert result.platforms_built == ["theme/default", "components", "tailwindMerge"]
        assert len(result.token_files_written) == 2
        for relative in (THEME_CSS, COMPONENTS_CSS, MERGE_CONFIG):
            assert (temp_dir / relative).exists()

    def test_theme_stylesheet(self, source_path: Path, temp_dir: Path) -> None:
        """The theme stylesheet holds the theme's custom properties."""
        build_all(source_path, temp_dir)
        css = (temp_dir / THEME_CSS).read_text(encoding="utf-8")

        assert "@theme {\n" in css
        assert "  --default-border-width: 1px;\n" in css
        assert "  --default-ring-width: 2px;\n" in css
        assert "  --color-gray-900: #111111;\n" in css
        assert (
            "  --background-color-default-default: "
            "light-dark(var(--color-white), var(--color-gray-900));\n"
        ) in css
        assert "  --text-color-default-default: var(--color-gray-900);\n" in css
        assert "  --font-family-serif: 'Noto Serif', serif;\n" in css
        assert "  --font-heading: var(--font-family-serif);\n" in css
        assert "  --text-01: 0.75rem;\n" in css
        assert "  --font-weight-bold: 700;\n" in css
        assert "  --shadow-200: 0 2px 4px #000, inset 0 0 0 #fff;\n" in css
        assert "  --inset-shadow-100: inset 0 1px 2px 1px var(--color-gray-300);\n" in css
        assert (
            "  --text-body-base: var(--is-size-base, 1rem) "
            "var(--is-size-compact, 0.875rem) var(--is-size-comfortable, 1.125rem);\n"
        ) in css

    def test_component_stylesheet(self, source_path: Path, temp_dir: Path) -> None:
        """Typography styles become @apply classes."""
        build_all(source_path, temp_dir)
        css = (temp_dir / COMPONENTS_CSS).read_text(encoding="utf-8")

        assert (
            ".typography-heading-h-1 {\n"
            "  @apply font-heading text-heading-large leading-heading-large "
            "font-weight-bold tracking-heading uppercase;\n}"
        ) in css
        assert (
            ".typography-body-base {\n"
            "  @apply font-body text-body-base leading-body-base "
            "font-[400] tracking-[0.2px] italic underline;\n}"
        ) in css
        assert "hidden" not in css

    def test_class_merge_config(self, source_path: Path, temp_dir: Path) -> None:
        """The class-merge config lists generated names by bucket."""
        build_all(source_path, temp_dir)
        config = json.loads((temp_dir / MERGE_CONFIG).read_text(encoding="utf-8"))

        override = config["override"]["theme"]
        assert override["leading"] == ["none", "heading-large", "body-base"]
        assert override["text"] == ["01", "02", "heading-large", "body-base"]
        assert override["font-weight"] == ["regular", "bold", "heading"]
        assert override["radius"] == ["200", "full"]
        assert config["extend"]["theme"]["spacing"] == [
            "space-200",
            "space-300",
            "depth-100",
            "icon-small",
        ]

    def test_rerun_identical(self, source_path: Path, temp_dir: Path) -> None:
        """Building twice produces byte-identical files."""
        first = build_all(source_path, temp_dir)
        before = {p: p.read_bytes() for p in first.files_written + first.token_files_written}

        second = build_all(source_path, temp_dir)
        after = {p: p.read_bytes() for p in second.files_written + second.token_files_written}

        assert before == after

    def test_several_themes(self, source_path: Path, temp_dir: Path) -> None:
        """Each theme gets its own token file and stylesheet."""
        result = build_all(source_path, temp_dir, themes={"default": "Theme", "alt": "Theme"})
        assert "theme/alt" in result.platforms_built
        assert (temp_dir / "packages/themes/alt/theme.generated.css").exists()

    def test_unknown_name_writes_nothing(self, source_path: Path, temp_dir: Path) -> None:
        """A bad config fails before the token files are written."""
        with pytest.raises(UnknownTransformError):
            build_all(source_path, temp_dir, config=_config(["size/rem"]))
        assert not (temp_dir / "packages").exists()

    def test_malformed_export(self, sample_export: dict, temp_dir: Path) -> None:
        """A missing required group stops the build."""
        del sample_export["Size"]
        path = temp_dir / "export.json"
        path.write_text(json.dumps(sample_export), encoding="utf-8")

        with pytest.raises(MalformedSourceError):
            build_all(path, temp_dir)
