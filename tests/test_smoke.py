from pathlib import Path
import json

import pytest

from color_token_report import demo
from color_token_report.report.utils import clear_config_cache

DATA = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture(autouse=True)
def sample_data_dir(monkeypatch):
    monkeypatch.setenv("DATA_DIR", str(DATA))
    clear_config_cache()


def test_smoke_json(capsys):
    demo.main(["--format", "json"])
    out = json.loads(capsys.readouterr().out)
    assert out["collection"] == "VariableCollectionId:theme"
    assert out["mode"] == "theme:light"
    assert out["tokens"] == 6
    assert list(out["report"]) == ["global", "primary", "surface"]

    pair = out["report"]["global"]["background"]
    assert pair["background"] == "#ffffff" and pair["foreground"] == "#000000"
    assert pair["grade"]["normal_text"] == "AAA"
    assert out["report"]["primary"]["primary"]["foreground"] == "#ffffff"


def test_smoke_dark_mode_table(capsys):
    demo.main(["--mode", "theme:dark"])
    out = capsys.readouterr().out
    assert out.splitlines()[0].split()[0] == "Context"
    assert "surface" in out and "muted" in out


def test_smoke_tree(capsys):
    demo.main(["--format", "tree"])
    tree = json.loads(capsys.readouterr().out)
    assert tree["name"] == "Color System"


def test_smoke_unknown_collection_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        demo.main(["--collection", "nope"])
    assert exc.value.code == 1
    assert "unknown collection" in capsys.readouterr().err
