import numpy as np
import pandas as pd
from pathlib import Path

# This module reads the geocoded violent-event log. One row is one incident, located in a named
# region and flagged by who initiated it and who was targeted.

EVENT_COLUMNS = [
    "id",
    "lat",
    "long",
    "date",
    "name",
    "areaSqKm",
    "boundary",
    "initGovt",
    "initRebel",
    "initOther",
    "targetGovt",
    "targetRebel",
    "targetCiv",
    "targetOther",
    "direct"]

# Civilian-initiated events are not coded in every version of the log; the column is kept when present.
OPTIONAL_COLUMNS = ["initCiv"]

NUMERIC_COLUMNS = [
    "lat",
    "long",
    "areaSqKm",
    "boundary",
    "initGovt",
    "initRebel",
    "initCiv",
    "initOther",
    "targetGovt",
    "targetRebel",
    "targetCiv",
    "targetOther",
    "direct"]


def load_events(input_file: str | Path) -> pd.DataFrame:
    input_file = Path(input_file)

    # The pipeline cannot proceed if the event log is missing.
    if not input_file.exists():
        raise FileNotFoundError(f"Event file not found: {input_file}")

    keep_cols = EVENT_COLUMNS + OPTIONAL_COLUMNS
    df = pd.read_csv(
        input_file,
        low_memory=False,
        usecols=lambda c: c in keep_cols) # Reads only the columns needed for the panel.

    missing = [c for c in EVENT_COLUMNS if c not in df.columns]
    if missing:
        raise KeyError(f"Missing columns. Looked for: {missing}. Available: {list(df.columns)}")

    for col in OPTIONAL_COLUMNS:
        if col not in df.columns:
            df[col] = np.nan

    # Indicators and coordinates are coerced: a value that is not a number becomes missing instead of raising
    for col in NUMERIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce")

    # The year is the time key of the panel, so an event without a usable date cannot be placed in it.
    # Each value is parsed on its own: logs mix ISO dates, day-first dates and timestamps.
    df["date"] = pd.to_datetime(df["date"], errors="coerce", format="mixed", dayfirst=True)
    undated = int(df["date"].isna().sum())
    if undated:
        print(f"[WARN] {undated:,} events without a parsable date dropped from {input_file.name}")
        df = df.dropna(subset=["date"])

    df["year"] = df["date"].dt.year.astype(int)

    print(f"Events loaded: {input_file.name} | Rows: {len(df):,}")

    return df.reset_index(drop=True)
