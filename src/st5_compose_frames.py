from pathlib import Path
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from st0_config import cfg, out_dir
from st4_plot_gages import plot_gage_timeseries, plot_gage_map, figure_to_raster


def as_raster(plot):
    if isinstance(plot, Figure):
        return figure_to_raster(plot)
    return plot


def compose_chart(bar_chart, gage_map, year, out_dir=out_dir):
    '''
    Compose map and bar chart onto one canvas and save it as a png.
    Saving again for the same year overwrites the frame.

    params:
        bar_chart: timeseries bar chart of active gages (figure or RGBA array)
        gage_map: map of active gages (figure or RGBA array)
        year: year being shown, used in the file name
    returns:
        path to the saved frame
    '''
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    fig = plt.figure(figsize=(cfg.canvas_width, cfg.canvas_height),
                     dpi=cfg.dpi, facecolor='white')

    # map in the upper area, bar chart in the lower strip
    ax_map = fig.add_axes(cfg.map_slot)
    ax_map.imshow(as_raster(gage_map), interpolation='none')
    ax_map.set_axis_off()

    ax_bar = fig.add_axes(cfg.bar_slot)
    ax_bar.imshow(as_raster(bar_chart), interpolation='none')
    ax_bar.set_axis_off()

    out_fp = out_dir / cfg.frame_name.format(year=year)
    fig.savefig(out_fp, dpi=cfg.dpi, facecolor='white')
    plt.close(fig)

    return out_fp


def render_year_frames(gage_melt, site_map, state_map, years=None, out_dir=out_dir):
    '''
    Render one composed frame per year. Returns frame paths in year order.
    '''
    if years is None:
        years = sorted(gage_melt['year'].unique())

    frames = []
    for yr in years:
        bar_chart = plot_gage_timeseries(gage_melt, yr)
        gage_map = plot_gage_map(gage_melt, yr, site_map, state_map)

        frames.append(compose_chart(bar_chart, gage_map, yr, out_dir=out_dir))
        plt.close(bar_chart)
        plt.close(gage_map)
        print(f'Saved: {frames[-1]}')

    return frames
