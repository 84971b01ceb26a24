from pathlib import Path

project_root = Path(__file__).resolve().parents[2]

def raw() -> Path:
    return project_root / "data" / "raw"

def processed() -> Path:
    return project_root / "data" / "processed"

def reference() -> Path:
    return project_root / "data" / "reference"

def outputs() -> Path:
    return project_root / "outputs"

def plots() -> Path:
    return project_root / "outputs" / "plots"

# Default inputs
def abandoned_wells_csv() -> Path:
    return raw() / "abandoned_wells.csv"

def counties_csv() -> Path:
    return reference() / "counties.csv"

def counties_geojson() -> Path:
    return reference() / "counties.geojson"
