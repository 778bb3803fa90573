from pathlib import Path

class Config:
    data_dir: Path = Path('data')
    out_dir: Path = Path('out')
    resized_dir: Path = Path('out/resized')

    # CRS choices:
    crs_wgs84: str = 'EPSG:4326'
    crs_projected: str = 'EPSG:5070' # CONUS Albers, map CRS

    # census cartographic boundary, states + territories
    states_url: str = 'https://www2.census.gov/geo/tiger/GENZ2023/shp/cb_2023_us_state_20m.zip'
    states_zip: Path = Path('data/cb_2023_us_state_20m.zip')

    # colours
    col_bg: str = '#ededed'
    col_active: str = '#0962b2'
    col_label: str = '#b3b3b3' # grey70
    col_outline: str = 'white'

    # bar chart
    yr_max: int = 2022
    x_break: int = 10
    y_break: int = 2000
    y_pad: int = 500
    bar_width: float = 0.8
    bar_label: str = 'Number of active gages through time'
    font_size: float = 6

    # canvas (inches / dpi) and plot slots as (x, y, width, height) fractions
    canvas_width: float = 5
    canvas_height: float = 4
    dpi: int = 300
    map_slot: tuple = (0, 0.2, 1, 0.8)
    bar_slot: tuple = (0.05, 0, 0.9, 0.25)
    frame_name: str = 'gage_time_{year}.png'

    # gif
    frame_delay_cs: int = 25
    frame_rate: int = 4
    gif_colors: int = 20
    gif_opt_level: int = 3

cfg = Config()

# module level names for stage scripts
data_dir = cfg.data_dir
out_dir = cfg.out_dir
resized_dir = cfg.resized_dir
crs_wgs84 = cfg.crs_wgs84
crs_projected = cfg.crs_projected
