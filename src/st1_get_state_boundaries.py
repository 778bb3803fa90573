import geopandas as gpd
import requests
from pathlib import Path

from st0_config import cfg, crs_projected

def download_states(url=cfg.states_url, dest=cfg.states_zip):
    '''
    Download the census state boundary zip, skipped when already on disk.
    Returns the zip path.
    '''
    dest = Path(dest)
    if not dest.exists():
        dest.parent.mkdir(parents=True, exist_ok=True)
        r = requests.get(url, timeout=60)
        r.raise_for_status()
        dest.write_bytes(r.content)

    return dest


def read_state_map(zip_path, crs=crs_projected):
    '''
    Read state + territory polygons from the census zip (or any file
    geopandas can open) and reproject to the map CRS.
    '''
    zip_path = Path(zip_path)
    if zip_path.suffix == '.zip':
        states = gpd.read_file(f'zip://{zip_path}')
    else:
        states = gpd.read_file(zip_path)

    return states.to_crs(crs)


if __name__ == '__main__':
    shp_zip = download_states()
    states = read_state_map(shp_zip)

    print('states crs', states.crs)
    print('states bounds', states.total_bounds)
    print('states rows:', len(states))
