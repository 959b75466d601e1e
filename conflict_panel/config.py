from pathlib import Path

# Paths are resolved from the repository root so the pipeline can be run from any working directory.
BASE_DIR = Path(__file__).resolve().parent.parent

DATA_DIR = BASE_DIR / "data"
RAW_DIR = DATA_DIR / "raw"
PROCESSED_DIR = DATA_DIR / "processed"

# The four inputs/outputs of the pipeline. These are the only configurable options.
SURVEY_FILE = RAW_DIR / "survey_extract.dat"
LAYOUT_FILE = RAW_DIR / "survey_layout.csv"
EVENTS_FILE = RAW_DIR / "violent_events.csv"
OUTPUT_FILE = PROCESSED_DIR / "region_year_panel.csv"

# yearsSinceReference is measured from this year (onset of the event series).
REFERENCE_YEAR = 1969
