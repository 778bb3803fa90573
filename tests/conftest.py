import pandas as pd
import geopandas as gpd
import pytest
from shapely.geometry import Point, box


@pytest.fixture
def gage_melt():
    # 2000: three sites, 2001: one site listed twice, 2003: one site
    return pd.DataFrame({
        'site': ['01', '02', '03', '01', '01', '02'],
        'year': [2000, 2000, 2000, 2001, 2001, 2003],
    })


@pytest.fixture
def state_map():
    return gpd.GeoDataFrame(
        {'NAME': ['West', 'East']},
        geometry=[box(-100, 30, -90, 40), box(-90, 30, -80, 40)],
        crs='EPSG:4326'
    )


@pytest.fixture
def site_map():
    # site 03 sits off the basemap
    return gpd.GeoDataFrame(
        {'site_no': ['01', '02', '03']},
        geometry=[Point(-95, 35), Point(-85, 35), Point(150, -10)],
        crs='EPSG:4326'
    )
