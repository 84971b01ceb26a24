# scripts/make_status_plots.py

import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[1]

src_path = project_root / "src"
if str(src_path) not in sys.path:
    sys.path.append(str(src_path))

from abandoned_wells import paths
from abandoned_wells.loaders import (
    load_abandoned_wells,
    load_counties,
    load_county_geometry,
)
from abandoned_wells.plots import (
    PLOT_CONFIG,
    generate_map,
    plot_county_totals,
    plot_inactive_period,
    plot_risk_level,
)
from abandoned_wells.region_totals import standing_region_totals
from abandoned_wells.views import Granularity


def main() -> None:
    out_dir = paths.plots()
    out_dir.mkdir(parents=True, exist_ok=True)

    print("Loading data...")
    wells = load_abandoned_wells(paths.abandoned_wells_csv())
    counties = load_counties(paths.counties_csv())
    counties_geo = load_county_geometry(paths.counties_geojson())

    tables = standing_region_totals(wells, counties)

    figures = {}
    for name, region_totals in tables.items():
        for granularity in Granularity:
            key = f"map_{name}_wells_by_{granularity.value}"
            figures[key] = generate_map(region_totals, granularity, counties_geo)

    figures["county_totals"] = plot_county_totals(wells)
    figures["inactive_period"] = plot_inactive_period(wells)
    figures["risk_level"] = plot_risk_level()

    for key, fig in figures.items():
        html_path = out_dir / f"{key}.html"
        fig.write_html(html_path, config=PLOT_CONFIG)
        print(f"  {html_path}")

    print(f"Wrote {len(figures)} plots to {out_dir}")


if __name__ == "__main__":
    main()
