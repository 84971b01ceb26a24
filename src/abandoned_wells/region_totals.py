from typing import Iterable, Mapping, Optional, Union

import pandas as pd


WELL_COLUMNS = ["COUNTY_NAME", "DISTRICT_NAME", "MONTHS_INACTIVE"]
COUNTY_COLUMNS = ["COUNTY_NAME", "DISTRICT_NAME", "FIPS"]

REGION_TOTALS_COLUMNS = [
    "COUNTY_NAME",
    "FIPS",
    "COUNTY_TOTAL",
    "DISTRICT_NAME",
    "DISTRICT_TOTAL",
]

# Wells inactive for at least 20 years
OLD_WELL_MONTHS = 240

TableLike = Union[pd.DataFrame, Iterable[Mapping]]


def as_table(data: TableLike, required: list[str], what: str) -> pd.DataFrame:
    """Return data as a DataFrame, checking that the required columns exist."""
    if isinstance(data, pd.DataFrame):
        df = data
    else:
        records = list(data)
        df = pd.DataFrame(records) if records else pd.DataFrame(columns=required)

    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(
            f"{what} is missing columns {missing}, got: {list(df.columns)}"
        )
    return df


def filter_by_months_inactive(
    wells: pd.DataFrame, min_months_inactive: Optional[int] = None
) -> pd.DataFrame:
    if min_months_inactive is None:
        return wells
    if min_months_inactive < 0:
        raise ValueError(
            f"min_months_inactive must be non-negative, got: {min_months_inactive}"
        )
    return wells[wells["MONTHS_INACTIVE"] >= min_months_inactive]


def count_by(wells: pd.DataFrame, key: str, total_col: str) -> pd.DataFrame:
    counts = wells.groupby(key).size().reset_index(name=total_col)
    counts[total_col] = counts[total_col].astype("int64")
    return counts


def compute_county_totals(wells: pd.DataFrame, geo: pd.DataFrame) -> pd.DataFrame:
    """
    Count wells per county and attach the reference geography.

    Counties in the reference table with no wells get a total of zero so the
    choropleth has no holes. Counties with no FIPS code (offshore areas are
    not part of the county geometry) are dropped.
    """
    county_counts = count_by(wells, "COUNTY_NAME", "COUNTY_TOTAL")

    # Outer join keeps counties from both sides; NaN totals are the gaps
    county_totals = county_counts.merge(
        geo[COUNTY_COLUMNS], on="COUNTY_NAME", how="outer"
    )
    county_totals["COUNTY_TOTAL"] = (
        county_totals["COUNTY_TOTAL"].fillna(0).astype("int64")
    )

    county_totals = county_totals[county_totals["FIPS"].notna()].copy()
    return county_totals


def compute_region_totals(
    wells: TableLike,
    geo: TableLike,
    min_months_inactive: Optional[int] = None,
) -> pd.DataFrame:
    """
    Build the per-county summary table used for the choropleth maps.

    Each row carries the county total, the FIPS code and the total of the
    county's RRC district. District totals are counted over every filtered
    well, offshore wells included, so within a district the county totals
    can add up to less than the district total.

    If min_months_inactive is given, only wells inactive at least that many
    months are counted. An empty set of wells gives an empty table.
    """
    wells = as_table(wells, WELL_COLUMNS, "well records")
    geo = as_table(geo, COUNTY_COLUMNS, "county reference table")

    filtered = filter_by_months_inactive(wells, min_months_inactive)

    county_totals = compute_county_totals(filtered, geo)
    district_totals = count_by(filtered, "DISTRICT_NAME", "DISTRICT_TOTAL")

    region_totals = county_totals.merge(
        district_totals, on="DISTRICT_NAME", how="inner"
    )

    region_totals = (
        region_totals[REGION_TOTALS_COLUMNS]
        .sort_values("COUNTY_NAME")
        .reset_index(drop=True)
    )
    return region_totals


def standing_region_totals(wells: TableLike, geo: TableLike) -> dict[str, pd.DataFrame]:
    """Region totals for all wells and for wells inactive OLD_WELL_MONTHS or more."""
    return {
        "all": compute_region_totals(wells, geo),
        "old": compute_region_totals(wells, geo, min_months_inactive=OLD_WELL_MONTHS),
    }
