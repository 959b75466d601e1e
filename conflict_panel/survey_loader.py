from pathlib import Path
import pandas as pd

# Columns retained from the coded survey, addressed by their position in the layout descriptor.
# Positions are used instead of variable names because names change between survey waves while the
# order of the extract does not.
SURVEY_COLUMNS = {
    0: "region",
    1: "religion",
    2: "club1",
    3: "club2",
    4: "club3",
    5: "club4",
    6: "governance",
    7: "employment",
    8: "stdLiving",
}

LAYOUT_FIELDS = ["variable", "start", "end"]


def read_layout(layout_file: str | Path) -> pd.DataFrame:
    """
    Reads a layout descriptor: one row per variable with its 1-based, inclusive start and end columns
    (the convention of SPSS DATA LIST setup files). Row order defines the variable positions.
    """
    layout_file = Path(layout_file)
    if not layout_file.exists():
        raise FileNotFoundError(f"Layout file not found: {layout_file}")

    layout = pd.read_csv(layout_file)
    layout.columns = [c.strip().lower() for c in layout.columns]

    missing = [c for c in LAYOUT_FIELDS if c not in layout.columns]
    if missing:
        raise KeyError(f"Missing columns. Looked for: {missing}. Available: {list(layout.columns)}")

    layout = layout[LAYOUT_FIELDS].reset_index(drop=True)

    # A layout we cannot trust would silently shift every column, so it is rejected outright
    bounds = layout[["start", "end"]].apply(pd.to_numeric, errors="coerce")
    fractional = (bounds % 1 != 0).any(axis=1)
    bad = bounds.isna().any(axis=1) | fractional | (bounds["start"] < 1) | (bounds["end"] < bounds["start"])
    if bad.any():
        bad_vars = layout.loc[bad, "variable"].tolist()
        raise ValueError(f"Invalid column bounds in {layout_file.name} for: {bad_vars}")

    layout[["start", "end"]] = bounds.astype(int)
    return layout


def load_coded_survey(data_file: str | Path, layout_file: str | Path) -> pd.DataFrame:
    # Decodes the fixed-layout survey extract. Every cell is kept as text: recoding happens later,
    # on exact labels, so nothing must be guessed or converted here.
    data_file = Path(data_file)
    if not data_file.exists():
        raise FileNotFoundError(f"Survey file not found: {data_file}")

    layout = read_layout(layout_file)

    # read_fwf expects 0-based, half-open intervals
    colspecs = [(start - 1, end) for start, end in zip(layout["start"], layout["end"])]

    df = pd.read_fwf(
        data_file,
        colspecs=colspecs,
        header=None,
        names=list(range(len(colspecs))),
        dtype=str,
        keep_default_na=False, # Labels like "None" or "NA" are answers, only blank fields are missing
        na_values=[""])

    print(f"Survey decoded: {data_file.name} | Rows: {len(df):,} | Variables: {len(colspecs)}")
    return df


def select_survey_columns(df: pd.DataFrame, positions: dict[int, str] | None = None) -> pd.DataFrame:
    # Keeps only the positional columns needed for the analysis and gives them semantic names
    positions = SURVEY_COLUMNS if positions is None else positions

    missing = [p for p in positions if p not in df.columns]
    if missing:
        raise KeyError(f"Missing columns. Looked for positions: {missing}. Available: {list(df.columns)}")

    return df[list(positions)].rename(columns=positions).reset_index(drop=True)
