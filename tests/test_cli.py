import pickle
from pathlib import Path

from typer.testing import CliRunner

from ouroboros.cli import DataLoadError, app, load_data


def write_pickle(path: Path, value) -> Path:
    with path.open("wb") as handle:
        pickle.dump(value, handle)
    return path


def cyclic_list(*items):
    values = list(items)
    values.append(values)
    return values


class TestCLIBasicFunctionality:
    def test_help_command_works(self):
        """Test that --help shows usage information."""
        runner = CliRunner()
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "OUROBOROS" in result.stdout
        assert "show" in result.stdout
        assert "compare" in result.stdout

    def test_show_cyclic_list(self, tmp_path):
        path = write_pickle(tmp_path / "data.pkl", cyclic_list(1))
        runner = CliRunner()
        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 0
        assert result.stdout.strip() == "[1, [...]]"

    def test_show_custom_placeholder(self, tmp_path):
        path = write_pickle(tmp_path / "data.pkl", cyclic_list())
        runner = CliRunner()
        result = runner.invoke(app, ["show", str(path), "--placeholder", "@"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "[[@]]"

    def test_show_rejects_empty_placeholder(self, tmp_path):
        path = write_pickle(tmp_path / "data.pkl", [1])
        runner = CliRunner()
        result = runner.invoke(app, ["show", str(path), "--placeholder", ""])

        assert result.exit_code != 0

    def test_hash_cyclic_list(self, tmp_path):
        path = write_pickle(tmp_path / "data.pkl", cyclic_list(1, 2))
        runner = CliRunner()
        result = runner.invoke(app, ["hash", str(path)])

        assert result.exit_code == 0
        assert result.stdout.strip() == "3"

    def test_compare_equal(self, tmp_path):
        first = write_pickle(tmp_path / "a.pkl", cyclic_list("x"))
        second = write_pickle(tmp_path / "b.pkl", cyclic_list("x"))
        runner = CliRunner()
        result = runner.invoke(app, ["compare", str(first), str(second)])

        assert result.exit_code == 0
        assert result.stdout.strip() == "equal"

    def test_compare_different(self, tmp_path):
        first = write_pickle(tmp_path / "a.pkl", cyclic_list("x"))
        second = write_pickle(tmp_path / "b.pkl", cyclic_list("y"))
        runner = CliRunner()
        result = runner.invoke(app, ["compare", str(first), str(second)])

        assert result.exit_code == 1
        assert "different" in result.stdout

    def test_compare_strict_cycles(self, tmp_path):
        first = write_pickle(tmp_path / "a.pkl", cyclic_list("x"))
        second = write_pickle(tmp_path / "b.pkl", cyclic_list("x"))
        runner = CliRunner()
        result = runner.invoke(app, ["compare", str(first), str(second), "--strict-cycles"])

        assert result.exit_code == 1

    def test_missing_file_rejected(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(app, ["show", str(tmp_path / "missing.pkl")])

        assert result.exit_code != 0

    def test_corrupt_file_exits_with_code_2(self, tmp_path):
        path = tmp_path / "corrupt.pkl"
        path.write_bytes(b"\xff\xfe corrupt")
        runner = CliRunner()
        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 2


class TestLoadData:
    def test_load_data_round_trip(self, tmp_path):
        path = write_pickle(tmp_path / "data.pkl", {"k": [1, 2]})
        assert load_data(path) == {"k": [1, 2]}

    def test_load_data_wraps_errors(self, tmp_path):
        path = tmp_path / "empty.pkl"
        path.write_bytes(b"")
        try:
            load_data(path)
        except DataLoadError as exc:
            assert "empty.pkl" in str(exc)
        else:
            raise AssertionError("DataLoadError not raised")
