from pathlib import Path

import pandas as pd
import geopandas as gpd

from abandoned_wells.region_totals import COUNTY_COLUMNS, WELL_COLUMNS, as_table


# Districts look numeric ("08") but include codes like "8A", read names as text
NAME_DTYPES = {"COUNTY_NAME": str, "DISTRICT_NAME": str}


def load_abandoned_wells(path: Path) -> pd.DataFrame:
    """
    Load the table of abandoned wells, one row per well.
    """
    df = pd.read_csv(path, dtype=NAME_DTYPES, low_memory=False)
    df = as_table(df, WELL_COLUMNS, f"well records in {path}")

    months = pd.to_numeric(df["MONTHS_INACTIVE"], errors="coerce")
    if months.isna().any():
        bad_rows = df.index[months.isna()].tolist()
        raise ValueError(f"non-numeric MONTHS_INACTIVE in rows: {bad_rows[:10]}")
    if (months < 0).any():
        bad_rows = df.index[months < 0].tolist()
        raise ValueError(f"negative MONTHS_INACTIVE in rows: {bad_rows[:10]}")

    df = df.copy()
    df["MONTHS_INACTIVE"] = months
    return df


def load_counties(path: Path) -> pd.DataFrame:
    """
    Load the county reference table (district name and FIPS code per county).
    """
    # FIPS codes are zero-padded, keep them as strings
    df = pd.read_csv(path, dtype={**NAME_DTYPES, "FIPS": str})
    df = as_table(df, COUNTY_COLUMNS, f"county reference table in {path}")

    dupes = df.loc[df["COUNTY_NAME"].duplicated(), "COUNTY_NAME"]
    if not dupes.empty:
        raise ValueError(f"duplicate county names: {dupes.tolist()}")

    return df


def normalize_fips(gdf: gpd.GeoDataFrame) -> pd.Series:
    cols = list(gdf.columns)

    # An explicit FIPS property wins over feature ids
    if "FIPS" in cols:
        fips = gdf["FIPS"]
    elif "id" in cols:
        fips = gdf["id"]
    elif {"STATE", "COUNTY"}.issubset(cols):
        fips = gdf["STATE"].astype(str).str.zfill(2) + gdf["COUNTY"].astype(str).str.zfill(3)
    else:
        raise ValueError(
            f"expected FIPS, id or STATE/COUNTY in county geometry, got: {cols}"
        )

    return fips.astype(str).str.zfill(5)


def load_county_geometry(path: Path) -> gpd.GeoDataFrame:
    """
    Load county boundaries, keyed by a FIPS column.
    """
    gdf = gpd.read_file(path)

    if gdf.crs is None:
        gdf.set_crs(epsg=4326, inplace=True)

    gdf["FIPS"] = normalize_fips(gdf)
    return gdf
