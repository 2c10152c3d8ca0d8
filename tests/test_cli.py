from typer.testing import CliRunner

from gedcom_importer.cli import app
from gedcom_importer.utils import mock_file_path

runner = CliRunner()


def _db(tmp_path):
    return f"sqlite:///{tmp_path / 'cli.db'}"


def test_stats_command():
    result = runner.invoke(app, ["stats", str(mock_file_path("gedcom_1.ged"))])

    assert result.exit_code == 0
    assert "INDI" in result.output
    assert "FAM" in result.output


def test_stats_missing_file(tmp_path):
    result = runner.invoke(app, ["stats", str(tmp_path / "missing.ged")])
    assert result.exit_code == 1


def test_import_then_sosa_then_export(tmp_path):
    db = _db(tmp_path)
    gedcom = str(mock_file_path("gedcom_1.ged"))

    result = runner.invoke(app, ["import", gedcom, "--tree", "Doe", "--db", db])
    assert result.exit_code == 0, result.output
    assert "persons" in result.output
    assert "Sosa numbers assigned: 3" in result.output

    result = runner.invoke(app, ["sosa", "Doe", "--db", db])
    assert result.exit_code == 0, result.output
    assert "Sosa numbers assigned: 3" in result.output

    result = runner.invoke(app, ["export", "Doe", "--db", db])
    assert result.exit_code == 0, result.output
    assert result.output.startswith("0 HEAD")

    out = tmp_path / "doe.ged"
    result = runner.invoke(app, ["export", "Doe", "--db", db, "--out", str(out)])
    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8").endswith("0 TRLR\n")


def test_import_without_sosa(tmp_path):
    result = runner.invoke(
        app,
        ["import", str(mock_file_path("gedcom_1.ged")), "--db", _db(tmp_path), "--no-sosa"],
    )
    assert result.exit_code == 0, result.output
    assert "Sosa numbers assigned" not in result.output


def test_import_missing_file(tmp_path):
    result = runner.invoke(app, ["import", str(tmp_path / "missing.ged"), "--db", _db(tmp_path)])

    assert result.exit_code == 1
    assert "File not found" in result.output


def test_unknown_tree(tmp_path):
    result = runner.invoke(app, ["sosa", "Nobody", "--db", _db(tmp_path)])

    assert result.exit_code == 1
    assert "Unknown tree" in result.output
