import pandas as pd
import pytest

# Widths of the nine survey variables in the synthetic fixed-layout extract
SURVEY_LAYOUT = [
    ("ELECREG", 30),
    ("RELIGION", 12),
    ("ORGMEM1", 22),
    ("ORGMEM2", 22),
    ("ORGMEM3", 22),
    ("ORGMEM4", 22),
    ("GOVAPPR", 20),
    ("JOBDIFF", 17),
    ("STDLIV", 15),
]

SURVEY_ROWS = [
    ("BELFAST EAST", "Protestant", "Sports club", "Church group", "No further mentions", "",
     "Approve", "Fairly easy", "Better"),
    ("BELFAST EAST", "Catholic", "Church group", "Trade union", "", "",
     "Strongly approve", "Very difficult", "About the same"),
    ("FOYLE", "Catholic", "No further mentions", "", "", "",
     "Disapprove", "Fairly difficult", "Worse"),
    ("FOYLE", "Refused", "Residents association", "", "", "",
     "Don't know", "Very difficult", ""),
    ("NOWHERE", "Protestant", "Sports club", "", "", "",
     "Approve", "Very easy", "Better"),
    ("MID ULSTER", "Protestant", "Orange Order", "", "", "",
     "Approve", "Very easy", "Much better"),
]

EVENT_HEADER = [
    "id", "lat", "long", "date", "name", "areaSqKm", "boundary",
    "initGovt", "initRebel", "initOther",
    "targetGovt", "targetRebel", "targetCiv", "targetOther", "direct"]

# (id, date, region, initGovt, initRebel, initOther, targetGovt, targetCiv)
EVENT_ROWS = [
    (1, "1970-03-01", "Belfast East", 1, 0, 0, 0, 1),
    (2, "1970-06-12", "Belfast East", 0, 1, 0, 0, 1),
    (3, "1970-08-09", "Belfast East", 0, 1, 0, 1, 0),
    (4, "1971-02-20", "Belfast East", 0, 0, 1, 0, 1),
    (5, "1970-05-05", "Foyle", 0, 1, 0, 1, 0),
    (6, "1971-01-30", "Foyle", 0, 1, 0, 0, 1),
    (7, "1971-09-14", "Foyle", 1, 0, 0, 0, 1),
    (8, "1970-07-01", "Belfst East", 1, 0, 0, 0, 1),
]


def write_layout(path, layout=SURVEY_LAYOUT):
    rows = []
    start = 1
    for variable, width in layout:
        rows.append({"variable": variable, "start": start, "end": start + width - 1})
        start += width
    pd.DataFrame(rows).to_csv(path, index=False)
    return path


def write_fixed_width(path, rows, layout=SURVEY_LAYOUT):
    widths = [w for _, w in layout]
    lines = ["".join(value.ljust(width) for value, width in zip(row, widths)) for row in rows]
    path.write_text("\n".join(lines) + "\n")
    return path


def write_events(path, rows=EVENT_ROWS):
    records = []
    for event_id, date, region, init_govt, init_rebel, init_other, target_govt, target_civ in rows:
        records.append({
            "id": event_id,
            "lat": 54.6,
            "long": -5.9,
            "date": date,
            "name": region,
            "areaSqKm": 12.5,
            "boundary": 0,
            "initGovt": init_govt,
            "initRebel": init_rebel,
            "initOther": init_other,
            "targetGovt": target_govt,
            "targetRebel": 0,
            "targetCiv": target_civ,
            "targetOther": 0,
            "direct": 1,
        })
    pd.DataFrame(records, columns=EVENT_HEADER).to_csv(path, index=False)
    return path


@pytest.fixture
def layout_file(tmp_path):
    return write_layout(tmp_path / "layout.csv")


@pytest.fixture
def survey_file(tmp_path):
    return write_fixed_width(tmp_path / "survey.dat", SURVEY_ROWS)


@pytest.fixture
def events_file(tmp_path):
    return write_events(tmp_path / "events.csv")
