import pandas as pd
from pathlib import Path

from conflict_panel.config import REFERENCE_YEAR
from conflict_panel.conflict_loader import load_events
from conflict_panel.lag_features import add_lagged_event_features
from conflict_panel.panel_merge import merge_region_profiles
from conflict_panel.panel_writer import write_panel
from conflict_panel.recode import recode_survey
from conflict_panel.region_profiles import aggregate_by_region
from conflict_panel.survey_loader import load_coded_survey, select_survey_columns


def build_region_profiles(survey_file: Path, layout_file: Path) -> pd.DataFrame:
    # Survey side of the panel: decode, keep the analysis columns, recode, collapse to regions
    raw = load_coded_survey(survey_file, layout_file)
    survey = select_survey_columns(raw)
    survey = recode_survey(survey)

    unmapped = int(survey["region"].isna().sum())
    if unmapped:
        print(f"[WARN] {unmapped:,} respondents outside the canonical regions excluded")

    profiles = aggregate_by_region(survey)
    print(f"Region profiles: {len(profiles)} regions from {len(survey):,} respondents")
    return profiles


def add_years_since_reference(panel: pd.DataFrame, reference_year: int = REFERENCE_YEAR) -> pd.DataFrame:
    out = panel.copy()
    out["yearsSinceReference"] = out["year"] - reference_year
    return out


def build_region_year_panel(
    survey_file: Path,
    layout_file: Path,
    events_file: Path,
    out_path: Path | None = None,
    reference_year: int = REFERENCE_YEAR,
) -> pd.DataFrame:

    print(f"   [Panel] Building from {Path(events_file).name} and {Path(survey_file).name}...")

    # Both sources are fully read before anything is written, so a bad input aborts the run with no output
    profiles = build_region_profiles(survey_file, layout_file)
    events = load_events(events_file)

    # 1. Attach the regional survey profile to every event (inner join on region name)
    panel = merge_region_profiles(events, profiles)

    # 2. Temporal fields
    panel = add_years_since_reference(panel, reference_year)

    # 3. Civilian-targeted lags and all-target totals per actor class
    panel = add_lagged_event_features(panel)

    if not panel.empty:
        print(f"   Years: {panel['year'].min()} -> {panel['year'].max()}")
        print(f"   Regions: {panel['name'].nunique()}")
    else:
        print("   [WARN] Panel is empty after the region merge!")

    if out_path:
        write_panel(panel, out_path)

    return panel
