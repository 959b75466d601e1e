import os
from pathlib import Path
import pandas as pd

# Column order of the delivered panel file
OUTPUT_COLUMNS = [
    "name", "year", "id", "lat", "long", "date", "areaSqKm", "boundary",
    "initGovt", "initRebel", "initCiv", "initOther",
    "targetGovt", "targetRebel", "targetCiv", "targetOther", "direct",
    "religion", "governance", "employment", "stdLiving", "clubs",
    "yearsSinceReference",
    "govtAttacksLag", "rebelAttacksLag", "loyalistAttacksLag",
    "govtAll", "rebelAll", "loyalistAll"]


def write_panel(panel: pd.DataFrame, out_path: str | Path, columns: list[str] | None = None) -> Path:
    columns = OUTPUT_COLUMNS if columns is None else columns
    out_path = Path(out_path)

    missing = [c for c in columns if c not in panel.columns]
    if missing:
        raise KeyError(f"Missing columns. Looked for: {missing}. Available: {list(panel.columns)}")

    # Sorted by region and year so two runs on the same inputs give the same file
    out = panel[columns].sort_values(["name", "year", "id"], kind="mergesort")

    out_path.parent.mkdir(parents=True, exist_ok=True)

    # Written next to the target first, so a failed write never leaves a truncated panel behind
    tmp_path = out_path.with_name(out_path.name + ".tmp")
    out.to_csv(tmp_path, index=False, na_rep="")
    os.replace(tmp_path, out_path)

    print(f"   [Saved] {out_path.name} ({len(out):,} rows)")
    return out_path
