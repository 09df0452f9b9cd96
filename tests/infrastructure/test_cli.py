"""End-to-end tests for the beer CLI."""

import pytest
from click.testing import CliRunner

from beerstock.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def invoke(*args):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), "beer", *args])

    return invoke


def _create(run, name="Eisenbahn", max="50", quantity="10"):
    return run(
        "create", "--name", name, "--brand", "Brasil Kirin",
        "--type", "lager", "--max", max, "--quantity", quantity,
    )


class TestBeerCommands:

    def test_create_and_show(self, run):
        result = _create(run)
        assert result.exit_code == 0
        assert "Beer #1 'Eisenbahn' created" in result.output

        shown = run("show", "--name", "Eisenbahn")
        assert shown.exit_code == 0
        assert "Brasil Kirin" in shown.output
        assert "LAGER" in shown.output
        assert "10 / 50" in shown.output

    def test_duplicate_create_fails(self, run):
        _create(run)
        result = _create(run)
        assert result.exit_code == 1
        assert "already registered" in result.output

    def test_create_requires_quantity(self, run):
        result = run(
            "create", "--name", "Eisenbahn", "--brand", "Brasil Kirin",
            "--type", "lager", "--max", "50",
        )
        assert result.exit_code == 2
        assert "--quantity" in result.output
        assert "No beers found." in run("list").output

    def test_invalid_max_fails(self, run):
        result = _create(run, max="600")
        assert result.exit_code == 1
        assert "max: must be less than or equal to 500" in result.output

    def test_list_empty(self, run):
        result = run("list")
        assert result.exit_code == 0
        assert "No beers found." in result.output

    def test_list_shows_beers(self, run):
        _create(run)
        _create(run, name="Colorado")
        result = run("list")
        assert "Eisenbahn" in result.output
        assert "Colorado" in result.output

    def test_increment_and_decrement(self, run):
        _create(run)
        result = run("increment", "--id", "1", "--amount", "10")
        assert result.exit_code == 0
        assert "stock is now 20/50" in result.output

        result = run("decrement", "--id", "1", "--amount", "20")
        assert "stock is now 0/50" in result.output

    def test_increment_past_capacity_fails(self, run):
        _create(run)
        result = run("increment", "--id", "1", "--amount", "41")
        assert result.exit_code == 1
        assert "exceeds max capacity" in result.output
        assert "10 / 50" in run("show", "--name", "Eisenbahn").output

    def test_delete(self, run):
        _create(run)
        assert run("delete", "--id", "1").exit_code == 0

        shown = run("show", "--name", "Eisenbahn")
        assert shown.exit_code == 1
        assert "not found" in shown.output

    def test_delete_unknown_fails(self, run):
        result = run("delete", "--id", "3")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_data_dir_from_environment(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["beer", "list"], env={"BEERSTOCK_DATA_DIR": str(tmp_path)},
        )
        assert result.exit_code == 0
        assert (tmp_path / "beers.json").exists()
