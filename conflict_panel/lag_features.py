import pandas as pd

# Each actor class is described by its initiation indicator in the event log and the two panel
# columns built from it: the civilian-targeted count of the previous observed year, and the
# unfiltered count of the current year.
ACTOR_CLASSES = {
    "government": ("initGovt", "govtAttacksLag", "govtAll"),
    "rebel": ("initRebel", "rebelAttacksLag", "rebelAll"),
    "loyalist": ("initOther", "loyalistAttacksLag", "loyalistAll"),
}

CIVILIAN_TARGET = "targetCiv"

GROUP_KEY = "name"
TIME_KEY = "year"


def lag_within_groups(
    df: pd.DataFrame,
    group_key: str,
    time_key: str,
    value_col: str,
    out_col: str | None = None,
    periods: int = 1,
) -> pd.DataFrame:
    """
    Sorts each group by its time key and shifts value_col by `periods` rows within the group.

    The shift runs over observed time steps only: if a group has rows for 1970 and 1972, the 1972
    lag is the 1970 value. The first observed step of every group has a missing lag.
    Expects one row per (group, time).
    """
    out_col = f"{value_col}_lag{periods}" if out_col is None else out_col

    if df.duplicated(subset=[group_key, time_key]).any():
        raise ValueError(f"Expected one row per ({group_key}, {time_key}) before lagging {value_col}")

    out = df.sort_values([group_key, time_key]).copy()
    out[out_col] = out.groupby(group_key)[value_col].shift(periods)

    return out.reset_index(drop=True)


def region_year_totals(
    panel: pd.DataFrame,
    indicator: str,
    target_filter: str | None = None,
    out_col: str | None = None,
    group_key: str = GROUP_KEY,
    time_key: str = TIME_KEY,
) -> pd.DataFrame:
    # Sum of an actor indicator per (region, year). With a target filter only events flagged on
    # that target count, but every (region, year) of the panel keeps a row (with 0 if nothing matched),
    # so the key set of the result is always the full key set of the panel.
    out_col = indicator if out_col is None else out_col

    missing = [c for c in [group_key, time_key, indicator] + ([target_filter] if target_filter else [])
               if c not in panel.columns]
    if missing:
        raise KeyError(f"Missing columns. Looked for: {missing}. Available: {list(panel.columns)}")

    values = pd.to_numeric(panel[indicator], errors="coerce")
    if target_filter is not None:
        on_target = pd.to_numeric(panel[target_filter], errors="coerce").eq(1)
        values = values.where(on_target, 0)

    totals = (
        values.groupby([panel[group_key], panel[time_key]])
        .sum()
        .rename(out_col)
        .reset_index())

    return totals


def _merge_on_keys(panel: pd.DataFrame, series: pd.DataFrame, keys: list[str]) -> pd.DataFrame:
    # Inner join on a key set that covers the whole panel; losing or duplicating rows here would
    # mean the key set was incomplete, which is a bug and not a data issue.
    merged = panel.merge(series, on=keys, how="inner", validate="many_to_one")
    if len(merged) != len(panel):
        raise ValueError(f"Merge on {keys} changed the panel from {len(panel):,} to {len(merged):,} rows")
    return merged


def add_actor_class_features(
    panel: pd.DataFrame,
    indicator: str,
    lag_col: str,
    total_col: str,
    target_filter: str | None = CIVILIAN_TARGET,
    group_key: str = GROUP_KEY,
    time_key: str = TIME_KEY,
) -> pd.DataFrame:
    keys = [group_key, time_key]

    # 1. Previous observed year's count of events on the target, per region
    targeted = region_year_totals(panel, indicator, target_filter, "_targeted", group_key, time_key)
    lagged = lag_within_groups(targeted, group_key, time_key, "_targeted", out_col=lag_col)
    lagged = lagged[keys + [lag_col]]

    # 2. Current year's count of all events of the class, not lagged
    totals = region_year_totals(panel, indicator, None, total_col, group_key, time_key)

    # 3. Both series are broadcast back onto every event of their (region, year)
    out = _merge_on_keys(panel, lagged, keys)
    out = _merge_on_keys(out, totals, keys)

    return out


def add_lagged_event_features(
    panel: pd.DataFrame,
    actor_classes: dict | None = None,
    target_filter: str | None = CIVILIAN_TARGET,
) -> pd.DataFrame:
    actor_classes = ACTOR_CLASSES if actor_classes is None else actor_classes

    out = panel
    for actor, (indicator, lag_col, total_col) in actor_classes.items():
        out = add_actor_class_features(out, indicator, lag_col, total_col, target_filter)
        print(f"   [Lag] {actor}: {lag_col}, {total_col}")

    return out
