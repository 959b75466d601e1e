from conflict_panel.build_panel import build_region_year_panel
from conflict_panel.config import EVENTS_FILE, LAYOUT_FILE, OUTPUT_FILE, SURVEY_FILE

def main():
    print("Region-Year Panel: Survey Profiles x Violent Events")

    missing = [p for p in (SURVEY_FILE, LAYOUT_FILE, EVENTS_FILE) if not p.exists()]
    if missing:
        for p in missing:
            print("No data file found yet at:", p)
        raise SystemExit(1)

    build_region_year_panel(SURVEY_FILE, LAYOUT_FILE, EVENTS_FILE, OUTPUT_FILE)

if __name__ == "__main__":
    main()
