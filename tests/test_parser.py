import io
import json
import sys
from pathlib import Path

import openpyxl
import pytest

import parser as cli
from utils.download import WorkbookDownloadError

_ENV_VARS = (
    "REPORT_YEAR",
    "SERIES_A_TITLE",
    "SERIES_B_TITLE",
    "OUTPUT_PATH",
    "ONEDRIVE_XLSX_URL",
)


@pytest.fixture(autouse=True)
def _clean_env(tmp_path, monkeypatch):
    """Run every CLI call from an empty directory with no settings set.

    ``setenv`` before ``delenv`` makes monkeypatch restore the original
    state even when ``main`` loads a .env that sets these variables.
    """
    for name in _ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


def _workbook() -> openpyxl.Workbook:
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.append(["Mês", "Entrada", "Saída", "Líquido", "Diferença", "Crescimento"])
    ws.append(["Janeiro", 1000, 400, 600, None, "10%"])
    ws.append(["Total", 1000, 400, 600])
    ws.append([])
    ws.append(["Nubank"])
    ws.append(["Janeiro", 300])
    ws.append(["Total"])
    ws.append(["Itau"])
    ws.append(["Fevereiro", 50])
    return wb


def _save(path):
    _workbook().save(path)
    return str(path)


def _run(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["parser.py", *args])
    cli.main()


def _read(path):
    return json.loads(Path(path).read_text(encoding="utf-8"))


def test_parse_workbook_from_bytes():
    buf = io.BytesIO()
    _workbook().save(buf)

    result = cli.parse_workbook(buf.getvalue(), year=2027)

    assert result.meta.year == 2027
    assert [r.period for r in result.dashboard.primary] == ["Janeiro"]
    assert result.dashboard.primary[0].iso_date == "2027-01-01"
    assert [p.outflow for p in result.dashboard.series_a] == [300]


def test_writes_default_output_path(tmp_path, monkeypatch):
    _run(monkeypatch, _save(tmp_path / "fluxo.xlsx"))

    doc = _read(tmp_path / "data" / "data.json")
    assert doc["meta"]["year"] == 2026
    assert doc["dashboard"]["tabela1"][0]["entrada"] == 1000


def test_year_flag_and_output_flag(tmp_path, monkeypatch):
    out = tmp_path / "out" / "result.json"
    _run(monkeypatch, _save(tmp_path / "fluxo.xlsx"), "--year", "2030", "-o", str(out))

    doc = _read(out)
    assert doc["meta"]["year"] == 2030
    assert doc["dashboard"]["tabela1"][0]["date"] == "2030-01-01"


def test_output_path_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("OUTPUT_PATH", str(tmp_path / "env.json"))
    _run(monkeypatch, _save(tmp_path / "fluxo.xlsx"))

    assert _read(tmp_path / "env.json")["meta"]["year"] == 2026


def test_dotenv_in_working_directory_is_applied(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text(
        "REPORT_YEAR=2031\nSERIES_A_TITLE=Itau\n", encoding="utf-8"
    )
    _run(monkeypatch, _save(tmp_path / "fluxo.xlsx"), "-o", "out.json")

    doc = _read(tmp_path / "out.json")
    assert doc["meta"]["year"] == 2031
    assert doc["dashboard"]["tabela2"] == [
        {"month": "Fevereiro", "date": "2031-02-01", "saida": 50.0}
    ]


def test_missing_file_exits_1(tmp_path, monkeypatch):
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, str(tmp_path / "nope.xlsx"))
    assert exc.value.code == 1


def test_no_file_and_no_url_exits_1(monkeypatch):
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch)
    assert exc.value.code == 1


def test_invalid_workbook_exits_1(tmp_path, monkeypatch):
    bad = tmp_path / "login.xlsx"
    bad.write_bytes(b"<html>login</html>")

    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, str(bad))
    assert exc.value.code == 1
    assert not (tmp_path / "data" / "data.json").exists()


def test_download_error_exits_1(monkeypatch):
    def fail(url):
        raise WorkbookDownloadError("The URL returned HTML")

    monkeypatch.setattr(cli, "fetch_workbook_bytes", fail)
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "--url", "https://example.test/view")
    assert exc.value.code == 1


def test_url_from_environment_is_downloaded(tmp_path, monkeypatch):
    buf = io.BytesIO()
    _workbook().save(buf)
    seen = []

    def fetch(url):
        seen.append(url)
        return buf.getvalue()

    monkeypatch.setattr(cli, "fetch_workbook_bytes", fetch)
    monkeypatch.setenv("ONEDRIVE_XLSX_URL", "https://example.test/f.xlsx")
    _run(monkeypatch)

    assert seen == ["https://example.test/f.xlsx"]
    assert _read(tmp_path / "data" / "data.json")["dashboard"]["tabela2"][0][
        "saida"
    ] == 300
