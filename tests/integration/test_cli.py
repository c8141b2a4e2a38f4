"""Integration tests for CLI."""

import json

import pytest
import yaml
from click.testing import CliRunner

from chromagraph.cli import main
from chromagraph.schema.loader import parse_graph, parse_graph_from_string


@pytest.fixture
def runner():
    return CliRunner()


class TestGenerateCommand:
    def test_generate_yaml(self, runner):
        result = runner.invoke(main, ["generate", "cycle", "5"])

        assert result.exit_code == 0
        graph = parse_graph_from_string(result.stdout)
        assert graph.node_count == 5
        assert graph.edge_count == 5

    def test_generate_json(self, runner):
        result = runner.invoke(
            main, ["generate", "complete", "4", "--format", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data["edges"]) == 6

    def test_generate_is_reproducible_with_seed(self, runner):
        args = ["generate", "random", "10", "--edges", "14", "--seed", "9"]

        first = runner.invoke(main, args)
        second = runner.invoke(main, args)
        assert first.stdout == second.stdout

    def test_generate_seed_from_environment(self, runner):
        args = ["generate", "tree", "8"]

        first = runner.invoke(main, args, env={"CHROMAGRAPH_SEED": "4"})
        second = runner.invoke(main, args + ["--seed", "4"])
        assert first.stdout == second.stdout

    def test_generate_to_file(self, runner, tmp_path):
        output = tmp_path / "wheel.yaml"

        result = runner.invoke(
            main, ["generate", "planar", "6", "--output", str(output)]
        )

        assert result.exit_code == 0
        assert parse_graph(output).edge_count == 10

    def test_generate_degenerate_size(self, runner):
        result = runner.invoke(main, ["generate", "cycle", "2"])

        assert result.exit_code == 2
        assert "Invalid parameters" in result.output

    def test_generate_unknown_kind(self, runner):
        result = runner.invoke(main, ["generate", "hypercube", "8"])

        assert result.exit_code == 2


class TestValidateCommand:
    def test_validate_valid_file(self, runner, examples_dir):
        result = runner.invoke(
            main, ["validate", str(examples_dir / "square_valid.yaml")]
        )

        assert result.exit_code == 0
        assert "Coloring valid" in result.output

    def test_validate_with_conflicts(self, runner, examples_dir):
        result = runner.invoke(
            main, ["validate", str(examples_dir / "triangle_conflict.yaml")]
        )

        assert result.exit_code == 1
        assert "a -- b share color #FF0000" in result.output

    def test_validate_json_output(self, runner, examples_dir):
        result = runner.invoke(
            main,
            [
                "validate",
                str(examples_dir / "triangle_conflict.yaml"),
                "--format",
                "json",
            ],
        )

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["conflict_count"] == 1

    def test_validate_invalid_graph(self, runner, examples_dir):
        result = runner.invoke(
            main, ["validate", str(examples_dir / "invalid" / "self_loop.yaml")]
        )

        assert result.exit_code == 2
        assert "self-loop" in result.output

    def test_validate_nonexistent_file(self, runner):
        result = runner.invoke(main, ["validate", "/nonexistent/graph.yaml"])

        assert result.exit_code == 2


class TestEstimateCommand:
    def test_estimate(self, runner, examples_dir):
        result = runner.invoke(
            main, ["estimate", str(examples_dir / "triangle_conflict.yaml")]
        )

        assert result.exit_code == 0
        assert result.stdout.strip() == "3"


class TestHintCommand:
    def test_hint_star(self, runner, examples_dir):
        result = runner.invoke(
            main,
            [
                "hint",
                str(examples_dir / "star_uncolored.yaml"),
                "--palette",
                "#FF0000",
                "--palette",
                "#00FF00",
            ],
        )

        assert result.exit_code == 0
        assert "Next node: hub" in result.output
        assert "Safe colors: #FF0000, #00FF00" in result.output

    def test_hint_palette_from_environment(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["hint", str(examples_dir / "triangle_conflict.yaml")],
            env={"CHROMAGRAPH_PALETTE": "#FF0000 #0000FF"},
        )

        assert result.exit_code == 0
        assert "Next node: c" in result.output
        assert "Safe colors: #0000FF" in result.output

    def test_hint_fully_colored(self, runner, examples_dir):
        result = runner.invoke(
            main, ["hint", str(examples_dir / "square_valid.yaml")]
        )

        assert result.exit_code == 0
        assert "All nodes are colored" in result.output


class TestRecolorCommand:
    def test_recolor_fixes_conflict(self, runner, examples_dir, tmp_path):
        output = tmp_path / "fixed.yaml"

        result = runner.invoke(
            main,
            [
                "recolor",
                str(examples_dir / "triangle_conflict.yaml"),
                "b",
                "#00FF00",
                "--output",
                str(output),
            ],
        )

        assert result.exit_code == 0
        assert parse_graph(output).get_node("b").color == "#00FF00"

        check = runner.invoke(main, ["validate", str(output)])
        assert check.exit_code == 0

    def test_recolor_without_color_clears(self, runner, examples_dir):
        result = runner.invoke(
            main, ["recolor", str(examples_dir / "triangle_conflict.yaml"), "a"]
        )

        assert result.exit_code == 0
        data = yaml.safe_load(result.stdout)
        assert data["nodes"][0]["color"] is None

    def test_recolor_unknown_node_is_ignored(self, runner, examples_dir):
        path = examples_dir / "triangle_conflict.yaml"

        result = runner.invoke(main, ["recolor", str(path), "zzz", "#00FF00"])

        assert result.exit_code == 0
        assert parse_graph_from_string(result.stdout) == parse_graph(path)


class TestAnalyzeCommand:
    def test_analyze_text(self, runner, examples_dir):
        result = runner.invoke(
            main, ["analyze", str(examples_dir / "star_uncolored.yaml")]
        )

        assert result.exit_code == 0
        assert "Estimated chromatic number: 2" in result.output
        assert "Hint: color hub" in result.output

    def test_analyze_json_with_conflict(self, runner, examples_dir):
        result = runner.invoke(
            main,
            [
                "analyze",
                str(examples_dir / "triangle_conflict.yaml"),
                "--format",
                "json",
            ],
        )

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["chromatic_number"] == 3
        assert data["hint"]["node_id"] == "c"

    def test_analyze_square_complete(self, runner, examples_dir):
        result = runner.invoke(
            main, ["analyze", str(examples_dir / "square_valid.yaml")]
        )

        assert result.exit_code == 0
        assert "Coloring complete with the minimum number of colors" in result.output


class TestVersion:
    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output
