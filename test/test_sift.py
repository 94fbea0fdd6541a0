import json

import pytest
import typer
from sift.apple import Apple
from sift.inventory import INVENTORY_ENVIRONMENT_VARIABLE
from sift.sift import Sift
from typer.testing import CliRunner


@pytest.fixture
def app(monkeypatch):
    monkeypatch.delenv(INVENTORY_ENVIRONMENT_VARIABLE, raising=False)
    application = typer.Typer()
    application.command()(Sift().sift)
    return application


def test_default_run(app):
    result = CliRunner().invoke(app, [])

    assert result.exit_code == 0
    assert "green apples: [green 80g, green 155g]" in result.output
    assert "apples heavier than 150: [green 155g]" in result.output
    assert "is_red_and_heavy: []" in result.output
    assert "even numbers: [2, 4, 6, 8, 10]" in result.output


def test_color_and_weight_options(app):
    result = CliRunner().invoke(app, ["--color", "red", "--heavier-than", "100", "--criterion", "weight", "--no-numbers"])

    assert result.exit_code == 0
    assert "red apples: [red 120g]" in result.output
    assert "apples by weight: [green 155g, red 120g]" in result.output
    assert "even numbers" not in result.output


def test_inventory_file(app, tmp_path):
    path = tmp_path / "apples.json"
    path.write_text(json.dumps([{"weight": 200, "color": "red"}]), encoding="utf-8")

    result = CliRunner().invoke(app, ["--inventory", str(path)])

    assert result.exit_code == 0
    assert "is_red_and_heavy: [red 200g]" in result.output


def test_bad_inventory_file(app, tmp_path):
    path = tmp_path / "apples.json"
    path.write_text("{}", encoding="utf-8")

    result = CliRunner().invoke(app, ["--inventory", str(path)])

    assert result.exit_code == 1


def test_describe():
    assert Sift.describe([Apple(80, "green"), 3]) == "[green 80g, 3]"
    assert Sift.describe([]) == "[]"
