import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "import_csv.py"


@pytest.fixture
def cli(restore_root_logger):
    spec = importlib.util.spec_from_file_location("import_csv", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def mandiri_csv(tmp_path):
    path = tmp_path / "mandiri.csv"
    path.write_text(
        "Tanggal;Ref;Keterangan;Cabang;Jumlah\n"
        "15/01/2024;001;Gaji Januari;KCP;5000000\n"
        "16/01/2024;002;Isi bensin;KCP;-150000\n",
        encoding="utf-8",
    )
    return path


def test_json_output(cli, mandiri_csv, capsys):
    assert cli.main([str(mandiri_csv), "--bank", "mandiri", "--json"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["summary"] == {"total": 2, "income": 5000000, "expense": 150000}
    assert output["transactions"][1]["category"] == "transportasi"


def test_table_output(cli, mandiri_csv, capsys):
    assert cli.main([str(mandiri_csv), "--bank", "mandiri"]) == 0

    out = capsys.readouterr().out
    assert "Isi bensin" in out
    assert "Total: 2" in out


def test_missing_file(cli, tmp_path, capsys):
    assert cli.main([str(tmp_path / "nope.csv")]) == 2
    assert "Cannot read" in capsys.readouterr().err


def test_empty_file(cli, tmp_path):
    empty = tmp_path / "empty.csv"
    empty.write_bytes(b"")
    assert cli.main([str(empty), "--bank", "bca"]) == 2
