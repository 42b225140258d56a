from __future__ import annotations

import dealer_inventory.cli.fb_catalog as fb_catalog_mod
import dealer_inventory.cli.valuation as valuation_mod
from dealer_inventory.cli import fb_catalog, sanitize, valuation
from dealer_inventory.core.config import ValuationConfig
from dealer_inventory.processing.valuation import ValuationEnricher

FENCED = '```json\n{"wholesale_low":"1000","wholesale_high":"1200","market_low":"1500","market_high":"1700"}\n```'

CATALOG_HEADER = b'"Stock Number","Vehicle Vin","Vehicle Year","Vehicle Make","Vehicle Model","Retail","Image URL","Comments"'
CATALOG_ROW = b'"4089","VIN1","2015","RAM","2500","22500","https://img/1.jpg","Caf\xe9 owner, clean truck"'


def _stub_enricher(**_kwargs: object) -> ValuationEnricher:
    return ValuationEnricher(
        complete=lambda _p: FENCED,
        config=ValuationConfig(state="Iowa", delay_sec=0),
        logger=lambda _msg: None,
    )


def _blocked_path(tmp_path) -> str:
    # parent of the output is a regular file, so creating the directory fails
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    return str(blocker / "out.csv")


def test_sanitize_usage_error(capsys) -> None:
    assert sanitize.main(["only-source.csv"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_sanitize_missing_source(tmp_path, capsys) -> None:
    assert sanitize.main([str(tmp_path / "missing.csv"), str(tmp_path / "out.csv")]) == 1
    assert "not found" in capsys.readouterr().err


def test_sanitize_success(tmp_path) -> None:
    src = tmp_path / "in.csv"
    src.write_text('"Cost","Retail"\n"1","2"\n', encoding="utf-8")
    dest = tmp_path / "out" / "in.csv"
    assert sanitize.main([str(src), str(dest)]) == 0
    assert dest.read_bytes() == b'"Cost","Retail"\r\n"ZERO","2"\r\n'


def test_sanitize_tolerates_cp1252_bytes(tmp_path) -> None:
    src = tmp_path / "in.csv"
    src.write_bytes(b'"Cost","Comments"\n"1","Caf\xe9"\n')
    dest = tmp_path / "out.csv"
    assert sanitize.main([str(src), str(dest)]) == 0
    assert dest.read_bytes().decode("utf-8") == '"Cost","Comments"\r\n"ZERO","Caf�"\r\n'


def test_sanitize_failed_write_reports_error(tmp_path, capsys) -> None:
    src = tmp_path / "in.csv"
    src.write_text('"Cost"\n"1"\n', encoding="utf-8")
    assert sanitize.main([str(src), _blocked_path(tmp_path)]) == 1
    assert "ERROR:" in capsys.readouterr().err


def test_valuation_requires_api_key(monkeypatch, capsys) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    assert valuation.main(["in.csv", "out.csv"]) == 1
    assert "GEMINI_API_KEY" in capsys.readouterr().err


def test_valuation_missing_input(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    assert valuation.main([str(tmp_path / "missing.csv"), str(tmp_path / "out.csv")]) == 1
    assert "not found" in capsys.readouterr().err


def test_valuation_tolerates_cp1252_bytes(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(valuation_mod, "build_default_enricher", _stub_enricher)
    src = tmp_path / "in.csv"
    src.write_bytes(b'"Vehicle Make","Vehicle Model","Comments"\n"RAM","2500","Caf\xe9"\n')
    dest = tmp_path / "out.csv"
    assert valuation.main([str(src), str(dest)]) == 0
    lines = dest.read_bytes().decode("utf-8").split("\n")
    assert lines[1] == '"RAM","2500","Caf�","1500","1700","1000","1200"'


def test_valuation_failed_write_reports_error(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setattr(valuation_mod, "build_default_enricher", _stub_enricher)
    src = tmp_path / "in.csv"
    src.write_text('"Vehicle Make","Vehicle Model"\n"RAM","2500"\n', encoding="utf-8")
    assert valuation.main([str(src), _blocked_path(tmp_path)]) == 1
    assert "ERROR:" in capsys.readouterr().err


def test_fb_catalog_missing_input(tmp_path, capsys) -> None:
    assert fb_catalog.main([str(tmp_path / "missing.csv"), str(tmp_path / "out.csv")]) == 1
    assert "not found" in capsys.readouterr().err


def test_fb_catalog_no_data_rows(tmp_path, capsys) -> None:
    src = tmp_path / "in.csv"
    src.write_text('"Vehicle Vin"\n', encoding="utf-8")
    assert fb_catalog.main([str(src), str(tmp_path / "out.csv")]) == 1
    assert "no data rows" in capsys.readouterr().err


def test_fb_catalog_tolerates_cp1252_bytes(monkeypatch, tmp_path) -> None:
    copy = tmp_path / "public" / "inventoryFB.csv"
    monkeypatch.setattr(fb_catalog_mod, "CATALOG_PUBLIC_COPY", str(copy))
    src = tmp_path / "in.csv"
    src.write_bytes(CATALOG_HEADER + b"\n" + CATALOG_ROW + b"\n")
    out = tmp_path / "out.csv"
    assert fb_catalog.main([str(src), str(out)]) == 0
    content = out.read_bytes().decode("utf-8")
    assert "Caf� owner, clean truck" in content
    assert out.read_bytes() == copy.read_bytes()


def test_fb_catalog_failed_write_reports_error(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setattr(fb_catalog_mod, "CATALOG_PUBLIC_COPY", str(tmp_path / "public" / "inventoryFB.csv"))
    src = tmp_path / "in.csv"
    src.write_bytes(CATALOG_HEADER + b"\n" + CATALOG_ROW + b"\n")
    assert fb_catalog.main([str(src), _blocked_path(tmp_path)]) == 1
    assert "ERROR:" in capsys.readouterr().err
