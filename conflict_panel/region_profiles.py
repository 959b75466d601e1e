import pandas as pd

# Up to four group affiliations are recorded per respondent, one mention per column.
AFFILIATION_COLUMNS = ["club1", "club2", "club3", "club4"]

# Raw label used by the survey once a respondent has no more affiliations to mention
NO_FURTHER_MENTIONS = "No further mentions"

# Recoded attributes that are averaged per region
PROFILE_COLUMNS = ["religion", "governance", "employment", "stdLiving"]


def count_unique_affiliations(
    df: pd.DataFrame,
    group_key: str = "region",
    columns: list[str] | None = None,
    sentinel: str = NO_FURTHER_MENTIONS,
) -> pd.Series:
    """
    Number of distinct affiliations mentioned in each group, across all affiliation columns and all
    members of the group. The sentinel and empty mentions are not affiliations. A group whose members
    mention nothing else still appears, with a count of 0.
    """
    columns = AFFILIATION_COLUMNS if columns is None else columns

    missing = [c for c in [group_key] + columns if c not in df.columns]
    if missing:
        raise KeyError(f"Missing columns. Looked for: {missing}. Available: {list(df.columns)}")

    # One row per (group, mention) so that the four parallel columns are treated as a single pool
    mentions = (
        df[[group_key] + columns]
        .dropna(subset=[group_key])
        .melt(id_vars=group_key, value_vars=columns, value_name="affiliation"))

    groups = pd.Index(mentions[group_key].unique(), name=group_key).sort_values()

    kept = mentions.dropna(subset=["affiliation"])
    kept = kept[kept["affiliation"] != sentinel]

    counts = (
        kept.groupby(group_key)["affiliation"]
        .nunique()
        .reindex(groups, fill_value=0)
        .astype(int))
    counts.name = "clubs"
    return counts


def aggregate_by_region(
    df: pd.DataFrame,
    group_key: str = "region",
    value_columns: list[str] | None = None,
    affiliation_columns: list[str] | None = None,
    sentinel: str = NO_FURTHER_MENTIONS,
) -> pd.DataFrame:
    # Collapses recoded respondent rows to one profile row per region
    value_columns = PROFILE_COLUMNS if value_columns is None else value_columns

    missing = [c for c in [group_key] + value_columns if c not in df.columns]
    if missing:
        raise KeyError(f"Missing columns. Looked for: {missing}. Available: {list(df.columns)}")

    # Respondents whose region did not recode to a canonical name cannot be attributed to any region
    members = df.dropna(subset=[group_key])

    # Codes are coerced once more: a non-numeric value left over from recoding counts as missing.
    # mean() skips missing values, so an all-missing region gets a missing mean rather than 0.
    values = members[value_columns].apply(pd.to_numeric, errors="coerce")
    means = values.groupby(members[group_key]).mean()

    clubs = count_unique_affiliations(members, group_key, affiliation_columns, sentinel)

    profiles = means.join(clubs, how="left")
    profiles["clubs"] = profiles["clubs"].fillna(0).astype(int)
    profiles.index.name = group_key

    return profiles.reset_index()
