import logging
from pathlib import Path

import pandas as pd
import pytest

from pollen_map.loader import load_records, normalize_columns
from pollen_map.schema import TIDY_COLS

SAMPLE_CSV = Path(__file__).resolve().parents[1] / "data" / "pollen_sample.csv"

CANONICAL = """site_name,lat,lon,age,age_type,taxon,pct
Devils Lake,43.42,-89.73,150,Calibrated radiocarbon years BP,Pinus,18.5
Crawford Lake,43.47,-79.95,300,Calibrated radiocarbon years BP,Quercus,14.9
"""


def test_loads_canonical_file(write_csv):
    df = load_records(write_csv(CANONICAL))
    assert list(df.columns) == TIDY_COLS
    assert len(df) == 2
    assert df["age"].tolist() == [150.0, 300.0]
    assert df["pct"].dtype == "float64"
    assert df["lat"].dtype == "float64"


def test_aliases_are_normalized(write_csv):
    text = """SiteName, Latitude ,Long,Age,AgeType,VariableName,Value
Devils Lake,43.42,-89.73,150,Radiocarbon years BP,Pinus,18.5
"""
    df = load_records(write_csv(text))
    row = df.iloc[0]
    assert row["site_name"] == "Devils Lake"
    assert row["lat"] == pytest.approx(43.42)
    assert row["lon"] == pytest.approx(-89.73)
    assert row["age_type"] == "Radiocarbon years BP"
    assert row["taxon"] == "Pinus"
    assert row["pct"] == pytest.approx(18.5)


def test_canonical_column_wins_over_alias():
    raw = pd.DataFrame(columns=["lat", "latitude", "lon"])
    out = normalize_columns(raw)
    assert list(out.columns) == ["lat", "latitude", "lon"]


def test_age_type_is_optional(write_csv):
    text = """site_name,lat,lon,age,taxon,pct
Devils Lake,43.42,-89.73,150,Pinus,18.5
"""
    df = load_records(write_csv(text))
    assert list(df.columns) == TIDY_COLS
    assert df["age_type"].isna().all()


def test_malformed_rows_are_dropped(write_csv, caplog):
    text = """site_name,lat,lon,age,taxon,pct
Good,43.42,-89.73,150,Pinus,18.5
No lat,,-89.73,150,Pinus,18.5
Bad age,43.42,-89.73,n/a,Pinus,18.5
Bad pct,43.42,-89.73,150,Pinus,lots
No taxon,43.42,-89.73,150,,18.5
Off the globe,143.42,-89.73,150,Pinus,18.5
Negative age,43.42,-89.73,-45,Pinus,3
"""
    with caplog.at_level(logging.INFO, logger="pollen_map.loader"):
        df = load_records(write_csv(text))
    assert df["site_name"].tolist() == ["Good", "Negative age"]
    assert df.index.tolist() == [0, 1]
    assert df["age"].tolist() == [150.0, -45.0]
    assert "Dropped 5 malformed rows" in caplog.text


def test_missing_required_columns(write_csv):
    text = """site_name,lat,lon,taxon
Devils Lake,43.42,-89.73,Pinus
"""
    with pytest.raises(ValueError, match="age"):
        load_records(write_csv(text))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_records(str(tmp_path / "nope.csv"))


def test_custom_separator(write_csv):
    text = CANONICAL.replace(",", "\t")
    df = load_records(write_csv(text, name="pollen.tsv"), sep="\t")
    assert len(df) == 2
    assert df["taxon"].tolist() == ["Pinus", "Quercus"]


def test_sample_file_loads():
    df = load_records(str(SAMPLE_CSV))
    assert not df.empty
    assert "Bad Row" not in set(df["site_name"])


def test_first_listed_alias_wins_for_pct(write_csv):
    text = """sitename,lat,long,age,variablename,value,percentage
Devils Lake,43.42,-89.73,150,Pinus,412,18.5
"""
    df = load_records(write_csv(text))
    assert list(df.columns) == TIDY_COLS
    assert df["pct"].tolist() == [18.5]


def test_first_listed_alias_wins_for_site(write_csv):
    text = """site,sitename,lat,lon,age,taxon,pct
DEV,Devils Lake,43.42,-89.73,150,Pinus,18.5
"""
    df = load_records(write_csv(text))
    assert df["site_name"].tolist() == ["Devils Lake"]


def test_alias_never_duplicates_a_column():
    raw = pd.DataFrame(columns=["site", "sitename", "site.name", "value", "percent", "percentage"])
    out = normalize_columns(raw)
    assert out.columns.is_unique
    assert list(out.columns).count("site_name") == 1
    assert list(out.columns).count("pct") == 1
