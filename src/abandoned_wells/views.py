from dataclasses import dataclass
from enum import Enum
from typing import Union

import pandas as pd


@dataclass(frozen=True)
class ViewSpec:
    """Columns and hover text used to colour a map by county or by district."""

    count_column: str
    label_column: str
    hovertemplate: str

    def plotly_hovertemplate(self) -> str:
        # text holds the label, z the count
        return self.hovertemplate.format(label="%{text}", value="%{z:,d}")

    def select(self, region_totals: pd.DataFrame) -> pd.DataFrame:
        """Return FIPS plus the count and label columns as WELL_COUNT and NAME."""
        missing = [
            c
            for c in ["FIPS", self.count_column, self.label_column]
            if c not in region_totals.columns
        ]
        if missing:
            raise ValueError(
                f"region totals are missing columns {missing}, "
                f"got: {list(region_totals.columns)}"
            )

        df = region_totals[["FIPS", self.count_column, self.label_column]].rename(
            columns={self.count_column: "WELL_COUNT", self.label_column: "NAME"}
        )
        return df


COUNTY_VIEW = ViewSpec(
    count_column="COUNTY_TOTAL",
    label_column="COUNTY_NAME",
    hovertemplate="{label} County<br>Total: {value}<extra></extra>",
)

DISTRICT_VIEW = ViewSpec(
    count_column="DISTRICT_TOTAL",
    label_column="DISTRICT_NAME",
    hovertemplate="District {label}<br>Total: {value}<extra></extra>",
)


class Granularity(Enum):
    COUNTY = "county"
    DISTRICT = "district"

    @property
    def view(self) -> ViewSpec:
        if self is Granularity.COUNTY:
            return COUNTY_VIEW
        return DISTRICT_VIEW

    @classmethod
    def parse(cls, label: Union["Granularity", str]) -> "Granularity":
        """
        Map a label to a granularity.

        'county' (or 'Counties', the label used by the map page) selects the
        county view. Every other label selects the district view.
        """
        if isinstance(label, cls):
            return label
        if label in COUNTY_LABELS:
            return cls.COUNTY
        return cls.DISTRICT


COUNTY_LABELS = {"county", "Counties"}


def resolve_view(granularity: Union[Granularity, str]) -> ViewSpec:
    return Granularity.parse(granularity).view
