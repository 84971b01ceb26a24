import pandas as pd
import pytest


@pytest.fixture
def wells():
    return pd.DataFrame(
        {
            "COUNTY_NAME": ["A", "A", "B"],
            "DISTRICT_NAME": ["D1", "D1", "D1"],
            "MONTHS_INACTIVE": [10, 300, 5],
        }
    )


@pytest.fixture
def counties():
    return pd.DataFrame(
        {
            "COUNTY_NAME": ["A", "B", "C"],
            "DISTRICT_NAME": ["D1", "D1", "D1"],
            "FIPS": ["00001", "00002", "00003"],
        }
    )


@pytest.fixture
def texas_wells():
    # Two districts, one offshore area with no county geometry
    return pd.DataFrame(
        {
            "COUNTY_NAME": [
                "ANDREWS", "ANDREWS", "ANDREWS", "ECTOR", "ECTOR",
                "HARRIS", "GALVESTON", "GALVESTON OFFSHORE", "GALVESTON OFFSHORE",
            ],
            "DISTRICT_NAME": ["08", "08", "08", "08", "08", "03", "03", "03", "03"],
            "MONTHS_INACTIVE": [12, 250, 480, 60, 241, 239, 400, 300, 36],
        }
    )


@pytest.fixture
def texas_counties():
    return pd.DataFrame(
        {
            "COUNTY_NAME": ["ANDREWS", "ECTOR", "MARTIN", "HARRIS", "GALVESTON", "CHAMBERS"],
            "DISTRICT_NAME": ["08", "08", "08", "03", "03", "03"],
            "FIPS": ["48003", "48135", "48317", "48201", "48167", "48071"],
        }
    )
