import geopandas as gpd
import pandas as pd
from pathlib import Path

from st0_config import crs_wgs84, crs_projected

# USGS column names mapped to ours
site_cols = ['site', 'site_no', 'site_id']
lat_cols = ['dec_lat_va', 'latitude', 'lat']
lon_cols = ['dec_long_va', 'longitude', 'lon']


def first_existing(columns, cands):
    for c in cands:
        if c in columns:
            return c
    return None


def read_gage_records(fp):
    '''
    Read long form gage records (one row per site & active year).
    Returns a dataframe with `site` (str) and `year` (int).
    '''
    gage_melt = pd.read_csv(fp, dtype=str)

    id_col = first_existing(gage_melt.columns, site_cols)
    if id_col and id_col != 'site':
        gage_melt = gage_melt.rename(columns={id_col: 'site'})

    gage_melt['year'] = gage_melt['year'].astype(int)

    return gage_melt[['site', 'year']].copy()


def melt_gage_table(wide, id_col='site'):
    '''
    Turn a wide table (one row per site, one column per year, truthy when
    the gage was active) into long (site, year) rows.
    '''
    gage_melt = wide.melt(id_vars=id_col, var_name='year', value_name='active')
    gage_melt = gage_melt.loc[pd.to_numeric(gage_melt['active'], errors='coerce').fillna(0) > 0]
    gage_melt = gage_melt.rename(columns={id_col: 'site'})
    gage_melt['site'] = gage_melt['site'].astype(str)
    gage_melt['year'] = gage_melt['year'].astype(int)

    return gage_melt[['site', 'year']].sort_values(['year', 'site']).reset_index(drop=True)


def read_site_map(fp, crs=crs_projected):
    '''
    Read gage locations as points. CSV files need a site column plus
    decimal lat/long columns (WGS84); anything else goes through geopandas.
    '''
    fp = Path(fp)
    if fp.suffix == '.csv':
        df = pd.read_csv(fp, dtype=str)
        lat_col = first_existing(df.columns, lat_cols)
        lon_col = first_existing(df.columns, lon_cols)
        sites = gpd.GeoDataFrame(
            df,
            geometry=gpd.points_from_xy(df[lon_col].astype(float), df[lat_col].astype(float)),
            crs=crs_wgs84
        )
    else:
        sites = gpd.read_file(fp)

    id_col = first_existing(sites.columns, site_cols)
    if id_col and id_col != 'site_no':
        sites = sites.rename(columns={id_col: 'site_no'})
    sites['site_no'] = sites['site_no'].astype(str)

    # ensure CRS
    if sites.crs is None:
        sites = sites.set_crs(crs_wgs84)

    return sites[['site_no', 'geometry']].to_crs(crs)


if __name__ == '__main__':
    import sys

    gage_melt = read_gage_records(sys.argv[1])
    print('Gage records rows:', len(gage_melt))
    print('Distinct sites:', gage_melt['site'].nunique())
    print('Years:', gage_melt['year'].min(), '-', gage_melt['year'].max())
