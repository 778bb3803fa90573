import pytest
from matplotlib.figure import Figure
import matplotlib.pyplot as plt

from st0_config import cfg
from st4_plot_gages import (plot_gage_timeseries, plot_gage_map,
                            select_active_sites, figure_to_raster)


def test_select_active_sites_drops_points_off_basemap(gage_melt, site_map, state_map):
    gages_active = select_active_sites(gage_melt, 2000, site_map, state_map)
    assert sorted(gages_active['site_no']) == ['01', '02']


def test_select_active_sites_empty_year(gage_melt, site_map, state_map):
    gages_active = select_active_sites(gage_melt, 2002, site_map, state_map)
    assert len(gages_active) == 0


def test_select_active_sites_uses_state_crs(gage_melt, site_map, state_map):
    state_map = state_map.to_crs(cfg.crs_projected)
    gages_active = select_active_sites(gage_melt, 2003, site_map, state_map)
    assert gages_active.crs == state_map.crs
    assert list(gages_active['site_no']) == ['02']


def test_select_active_sites_accepts_year_string(gage_melt, site_map, state_map):
    gages_active = select_active_sites(gage_melt, '2001', site_map, state_map)
    assert list(gages_active['site_no']) == ['01']


def test_plot_gage_map_empty_year(gage_melt, site_map, state_map):
    fig = plot_gage_map(gage_melt, 2002, site_map, state_map)
    assert isinstance(fig, Figure)
    plt.close(fig)


@pytest.mark.parametrize('yr', [2000, 2002])
def test_plot_gage_timeseries(gage_melt, yr):
    fig = plot_gage_timeseries(gage_melt, yr)
    ax = fig.axes[0]
    assert ax.get_xlim()[1] == cfg.yr_max
    assert ax.get_ylim()[0] == -cfg.y_pad
    plt.close(fig)


def test_plot_gage_timeseries_highlights_active_year(gage_melt):
    fig = plot_gage_timeseries(gage_melt, 2000)
    ax = fig.axes[0]
    # 3 background bars + 1 highlight
    assert len(ax.patches) == 4
    highlight = ax.patches[-1]
    assert highlight.get_height() == 3
    plt.close(fig)


def test_plot_gage_timeseries_missing_year_has_no_highlight(gage_melt):
    fig = plot_gage_timeseries(gage_melt, 2002)
    assert len(fig.axes[0].patches) == 3
    plt.close(fig)


def test_figure_to_raster(gage_melt):
    fig = plot_gage_timeseries(gage_melt, 2000)
    raster = figure_to_raster(fig)
    assert raster.ndim == 3
    assert raster.shape[2] == 4
    plt.close(fig)


def test_rasters_match_slot_pixels(gage_melt, site_map, state_map):
    bar_chart = plot_gage_timeseries(gage_melt, 2000)
    gage_map = plot_gage_map(gage_melt, 2000, site_map, state_map)

    bar_raster = figure_to_raster(bar_chart)
    map_raster = figure_to_raster(gage_map)
    plt.close(bar_chart)
    plt.close(gage_map)

    # (rows, cols) at the frame dpi
    assert bar_raster.shape[:2] == (round(cfg.canvas_height * cfg.bar_slot[3] * cfg.dpi),
                                    round(cfg.canvas_width * cfg.bar_slot[2] * cfg.dpi))
    assert map_raster.shape[:2] == (round(cfg.canvas_height * cfg.map_slot[3] * cfg.dpi),
                                    round(cfg.canvas_width * cfg.map_slot[2] * cfg.dpi))
    assert bar_raster.shape[:2] == (300, 1350)
    assert map_raster.shape[:2] == (960, 1500)
