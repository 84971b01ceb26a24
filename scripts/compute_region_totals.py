# scripts/compute_region_totals.py

import sys
from pathlib import Path

import pandas as pd

project_root = Path(__file__).resolve().parents[1]

src_path = project_root / "src"
if str(src_path) not in sys.path:
    sys.path.append(str(src_path))

from abandoned_wells import paths
from abandoned_wells.loaders import load_abandoned_wells, load_counties
from abandoned_wells.region_totals import OLD_WELL_MONTHS, standing_region_totals


def summarize(name: str, region_totals: pd.DataFrame) -> None:
    county_sum = region_totals["COUNTY_TOTAL"].sum()
    district_sum = region_totals.drop_duplicates("DISTRICT_NAME")["DISTRICT_TOTAL"].sum()

    print(f"{name}:")
    print(f"  counties:                 {len(region_totals):>8,}")
    print(f"  districts:                {region_totals['DISTRICT_NAME'].nunique():>8,}")
    print(f"  wells on the county map:  {county_sum:>8,}")
    print(f"  wells in district totals: {district_sum:>8,}")

    # Offshore wells count towards districts only
    unmapped = district_sum - county_sum
    if unmapped:
        print(f"  wells without a county:   {unmapped:>8,}")


def main() -> None:
    wells_path = paths.abandoned_wells_csv()
    counties_path = paths.counties_csv()

    out_dir = paths.processed()
    out_all = out_dir / "region_totals.csv"
    out_old = out_dir / "region_totals_old_wells.csv"

    print("Loading data...")
    wells = load_abandoned_wells(wells_path)
    counties = load_counties(counties_path)
    print(f"Loaded {len(wells):,} wells and {len(counties):,} counties")

    tables = standing_region_totals(wells, counties)

    print()
    summarize("All abandoned wells", tables["all"])
    summarize(f"Inactive at least {OLD_WELL_MONTHS} months", tables["old"])

    out_dir.mkdir(parents=True, exist_ok=True)
    tables["all"].to_csv(out_all, index=False)
    tables["old"].to_csv(out_old, index=False)

    print()
    print(f"Saved to {out_all}")
    print(f"Saved to {out_old}")


if __name__ == "__main__":
    main()
