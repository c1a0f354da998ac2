# Shared pytest fixtures
from __future__ import annotations

import logging
import tempfile
from pathlib import Path

import pandas as pd
import pytest

from dlconv.logging.init import reset_logging

# Row width of the export (column 12 holds the dive time)
ROW_WIDTH = 13
SPAN = 23

# field -> (row offset, column); written out independently of dlconv.extract.layout
COORDS = {
    "cardinal": (0, 1),
    "site": (1, 4),
    "date": (1, 9),
    "time": (1, 12),
    "duration": (4, 4),
    "suit_type": (4, 11),
    "max_depth": (5, 4),
    "suit_thickness": (5, 11),
    "avg_depth": (6, 4),
    "weights": (6, 11),
    "tank_pressure_start": (7, 4),
    "tank_type": (7, 11),
    "tank_pressure_end": (8, 4),
    "tank_volume": (8, 11),
    "decompression_dive": (9, 4),
    "computer": (9, 11),
    "gas": (10, 4),
    "deco_alg_p_factor": (10, 11),
    "o2": (11, 4),
    "cns": (12, 4),
    "altitude": (13, 4),
    "weather": (13, 11),
    "entry": (14, 4),
    "air_temp": (14, 11),
    "operator": (17, 1),
    "water_type": (17, 11),
    "water_min_temp": (18, 11),
    "water_visibility": (19, 11),
    "drift_dive": (20, 11),
}

SAMPLE_DIVE = {
    "cardinal": "1",
    "site": "Blue Hole",
    "date": "2023-01-01",
    "time": "10:30",
    "duration": "45",
    "suit_type": "Wet suit",
    "max_depth": "18.5",
    "suit_thickness": "5",
    "avg_depth": "11.2",
    "weights": "6",
    "tank_pressure_start": "200",
    "tank_type": "Aluminium",
    "tank_pressure_end": "60",
    "tank_volume": "12",
    "decompression_dive": "No",
    "computer": "Suunto D5",
    "gas": "Nitrox",
    "deco_alg_p_factor": "P1",
    "o2": "32",
    "cns": "7",
    "altitude": "0",
    "weather": "Sunny",
    "entry": "Shore",
    "air_temp": "28",
    "operator": "Blue Dive Center",
    "water_type": "Salt",
    "water_min_temp": "24",
    "water_visibility": "Good",
    "drift_dive": "No",
}


def make_block(**values: str) -> list[list[str]]:
    """Build one 23-row dive block; unspecified fields come from SAMPLE_DIVE."""
    rows = [[""] * ROW_WIDTH for _ in range(SPAN)]
    rows[0][4] = "Site"
    rows[0][9] = "Date"
    # labels the export puts next to values; must never leak into records
    rows[4][3] = "Duration"
    rows[4][10] = "Suit"
    data = {**SAMPLE_DIVE, **values}
    for name, (r, c) in COORDS.items():
        rows[r][c] = data[name]
    return rows


def noise_row(text: str = "Dive log export") -> list[str]:
    row = [""] * ROW_WIDTH
    row[0] = text
    return row


def write_csv(path: Path, rows: list[list[str]]) -> Path:
    if rows:
        pd.DataFrame(rows).to_csv(path, header=False, index=False)
    else:
        path.write_text("", encoding="utf-8")
    return path


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("DLCONV_CONFIG", raising=False)
        yield p


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()
    # drop handlers bound to this test's captured stdout
    logger = logging.getLogger("dlconv")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)


@pytest.fixture()
def sample_config_yaml() -> str:
    return """title: My Dives
output_file: my-dives.md
created: '2020-01-01T00:00:00.000Z'
tags: [diving, logbook]
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "dlconv.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def dive_log_csv(temp_workdir: Path) -> Path:
    """Export with a title row and three chronological dives."""
    rows = [noise_row()]
    rows += make_block(cardinal="1", site="Blue Hole", date="2023-01-01")
    rows += make_block(cardinal="2", site="Canyon", date="2023-01-02", suit_type="Dry suit")
    rows += make_block(cardinal="3", site="Cathedral", date="2023-01-03")
    return write_csv(temp_workdir / "data" / "log.csv", rows)


@pytest.fixture()
def block():
    return make_block


@pytest.fixture()
def noise():
    return noise_row


@pytest.fixture()
def csv_file(temp_workdir: Path):
    def _write(rows: list[list[str]], name: str = "log.csv") -> Path:
        return write_csv(temp_workdir / "data" / name, rows)
    return _write


@pytest.fixture()
def sample_dive() -> dict[str, str]:
    return dict(SAMPLE_DIVE)


@pytest.fixture()
def coords() -> dict[str, tuple[int, int]]:
    return dict(COORDS)
