import pandas as pd


def merge_region_profiles(
    events: pd.DataFrame,
    profiles: pd.DataFrame,
    event_key: str = "name",
    profile_key: str = "region",
) -> pd.DataFrame:
    """
    Inner join of the regional survey profiles onto the event rows.

    An event whose region has no profile is dropped and a profile without events never appears.
    Profile fields are repeated on every event of their region; there is no deduplication.
    """
    if event_key not in events.columns:
        raise KeyError(f"Missing columns. Looked for: {event_key}. Available: {list(events.columns)}")
    if profile_key not in profiles.columns:
        raise KeyError(f"Missing columns. Looked for: {profile_key}. Available: {list(profiles.columns)}")

    # The merge relies on one profile per region; duplicates would multiply event rows
    if profiles[profile_key].duplicated().any():
        dupes = sorted(profiles.loc[profiles[profile_key].duplicated(), profile_key].unique())
        raise ValueError(f"Region profiles are not unique for: {dupes}")

    # Unmatched regions are usually misspellings in the event log, so they are reported before being dropped
    unmatched = ~events[event_key].isin(profiles[profile_key])
    if unmatched.any():
        names = sorted(events.loc[unmatched, event_key].dropna().astype(str).unique())
        print(f"[WARN] {int(unmatched.sum()):,} events dropped, region not in survey profiles: {names}")

    panel = events.merge(
        profiles,
        left_on=event_key,
        right_on=profile_key,
        how="inner",
        validate="many_to_one")

    # The event region name is the key kept in the panel
    if profile_key != event_key:
        panel = panel.drop(columns=[profile_key])

    print(f"   [Merge] Events: {len(events):,} | Profiles: {len(profiles):,} | Panel rows: {len(panel):,}")

    return panel.reset_index(drop=True)
