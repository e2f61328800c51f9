import pandas as pd
import pytest

from pollen_map.schema import TIDY_COLS


@pytest.fixture
def records() -> pd.DataFrame:
    rows = [
        # site, lat, lon, age, age_type, taxon, pct
        ("Devils Lake", 43.42, -89.73, 100.0, "Calibrated radiocarbon years BP", "Pinus", 20.0),
        ("Devils Lake", 43.42, -89.73, 600.0, "Calibrated radiocarbon years BP", "Pinus", 5.0),
        ("Devils Lake", 43.42, -89.73, 100.0, "Calibrated radiocarbon years BP", "Quercus", 35.0),
        ("Crawford Lake", 43.47, -79.95, 250.0, "Calibrated radiocarbon years BP", "Pinus", 60.0),
        ("Crawford Lake", 43.47, -79.95, -250.0, "Calibrated radiocarbon years BP", "Pinus", 12.5),
        ("Crawford Lake", 43.47, -79.95, 4000.0, "Calibrated radiocarbon years BP", "Quercus", 18.0),
        ("Lake Tulane", 27.59, -81.50, 251.0, "Calibrated radiocarbon years BP", "Pinus", 44.0),
    ]
    return pd.DataFrame(rows, columns=TIDY_COLS)


@pytest.fixture
def write_csv(tmp_path):
    def _write(text: str, name: str = "pollen.csv") -> str:
        p = tmp_path / name
        p.write_text(text)
        return str(p)
    return _write
