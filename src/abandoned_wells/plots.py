import json
from typing import Optional, Union

import pandas as pd
import geopandas as gpd
import plotly.graph_objects as go

from abandoned_wells.region_totals import WELL_COLUMNS, as_table, count_by
from abandoned_wells.views import Granularity, resolve_view


# Passed to fig.show / fig.write_html
PLOT_CONFIG = {"displayModeBar": False, "scrollZoom": False}

BAR_COLOR = "navy"
BASE_FONT_SIZE = 18
HISTOGRAM_BINS = 30

# Risk level of abandoned wells as published in July 2020
RISK_LEVELS = [
    ("1", 3),
    ("2H", 1039),
    ("2", 752),
    ("3", 1387),
    ("4", 1353),
    ("TBD", 1729),
]


def geometry_to_geojson(counties_geo: Union[gpd.GeoDataFrame, dict]) -> tuple[dict, str]:
    """Return (geojson, featureidkey) for a plotly choropleth."""
    if isinstance(counties_geo, gpd.GeoDataFrame):
        if "FIPS" not in counties_geo.columns:
            raise ValueError(
                f"county geometry needs a FIPS column, got: {list(counties_geo.columns)}"
            )
        gdf = counties_geo[["FIPS", counties_geo.geometry.name]]
        if gdf.crs is not None:
            gdf = gdf.to_crs(epsg=4326)
        geojson = json.loads(gdf.to_json())
        return geojson, "properties.FIPS"

    # Raw GeoJSON, features keyed by id
    return counties_geo, "id"


def generate_map(
    region_totals: pd.DataFrame,
    granularity: Union[Granularity, str],
    counties_geo: Union[gpd.GeoDataFrame, dict],
) -> go.Figure:
    """
    Choropleth of abandoned wells per county, coloured either by the county
    total or by the total of the county's RRC district.
    """
    view = resolve_view(granularity)
    data = view.select(region_totals)
    geojson, featureidkey = geometry_to_geojson(counties_geo)

    fig = go.Figure(
        go.Choropleth(
            geojson=geojson,
            featureidkey=featureidkey,
            locations=data["FIPS"],
            z=data["WELL_COUNT"],
            text=data["NAME"],
            colorscale="RdBu",
            reversescale=False,
            hovertemplate=view.plotly_hovertemplate(),
            colorbar={"title": {"text": "Number of<br>abandoned wells"}},
        )
    )

    fig.update_geos(fitbounds="locations", visible=False)
    fig.update_layout(
        annotations=[
            {
                "x": 0.5,
                "y": -0.1,
                "xref": "paper",
                "yref": "paper",
                "text": "Hover over map to see details",
                "showarrow": False,
                "font": {"size": 16},
            }
        ],
        margin={"l": 0, "r": 0, "t": 0, "b": 40},
    )
    return fig


def histogram(values: pd.Series, title: str, x_title: str, y_title: str) -> go.Figure:
    fig = go.Figure(
        go.Histogram(x=values, nbinsx=HISTOGRAM_BINS, marker_color=BAR_COLOR)
    )
    fig.update_layout(
        title=title,
        xaxis_title=x_title,
        yaxis_title=y_title,
        font={"size": BASE_FONT_SIZE},
        bargap=0.05,
    )
    return fig


def plot_county_totals(wells: pd.DataFrame) -> go.Figure:
    """Histogram of the number of abandoned wells per county."""
    wells = as_table(wells, WELL_COLUMNS, "well records")
    county_totals = count_by(wells, "COUNTY_NAME", "COUNTY_TOTAL")

    return histogram(
        county_totals["COUNTY_TOTAL"],
        title="Number of abandoned wells per county",
        x_title="Number of abandoned wells",
        y_title="Number of counties",
    )


def plot_inactive_period(
    wells: pd.DataFrame, county_name: Optional[str] = None
) -> go.Figure:
    """Histogram of years inactive, statewide or for one county."""
    wells = as_table(wells, WELL_COLUMNS, "well records")
    title = "Age of abandoned wells"

    if county_name is None:
        data = wells
        title += " in Texas"
    else:
        data = wells[wells["COUNTY_NAME"] == county_name]
        if data.empty:
            raise ValueError(f"no abandoned wells for county: {county_name}")
        title += f", {county_name} County"

    years_inactive = data["MONTHS_INACTIVE"] / 12

    return histogram(
        years_inactive,
        title=title,
        x_title="Number of years inactive",
        y_title="Number of abandoned wells",
    )


def plot_risk_level() -> go.Figure:
    priority = [level for level, _ in RISK_LEVELS]
    number_of_wells = [count for _, count in RISK_LEVELS]

    fig = go.Figure(go.Bar(x=priority, y=number_of_wells, marker_color=BAR_COLOR))
    fig.update_layout(
        title="Risk level of abandoned wells, July 2020",
        xaxis_title="Risk level",
        yaxis_title="Number of abandoned wells",
        font={"size": BASE_FONT_SIZE},
    )
    # Keep the published order instead of sorting the labels
    fig.update_xaxes(type="category", categoryorder="array", categoryarray=priority)
    return fig
