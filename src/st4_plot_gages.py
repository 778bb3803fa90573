import geopandas as gpd
import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker

from st0_config import cfg
from st3_count_gages_by_year import count_gages_by_year


def plot_gage_timeseries(gage_melt, yr):
    '''
    Bar chart of active gages per year, with the shown year highlighted.
    Sized to the bar strip of the composed frame.

    params:
        gage_melt (DataFrame): long form, gage site & years active
        yr (int): year being shown
    '''
    active_year = int(yr)
    gages_by_year = count_gages_by_year(gage_melt)

    fig, ax = plt.subplots(figsize=(cfg.canvas_width * cfg.bar_slot[2],
                                    cfg.canvas_height * cfg.bar_slot[3]),
                           dpi=cfg.dpi)
    fig.patch.set_facecolor('white')
    ax.set_facecolor('white')

    ## all years, then the active year on top
    ax.bar(gages_by_year['year'], gages_by_year['n_sites'],
           color=cfg.col_bg, width=cfg.bar_width)
    active = gages_by_year.loc[gages_by_year['year'] == active_year]
    ax.bar(active['year'], active['n_sites'],
           color=cfg.col_active, width=cfg.bar_width)

    ax.text(0.05, 0.92, cfg.bar_label, transform=ax.transAxes,
            color=cfg.col_label, fontsize=cfg.font_size * 1.3, va='top')

    # axes: upper year bound is fixed so the frames line up
    if gages_by_year.empty:
        x_min = cfg.yr_max - cfg.x_break
    else:
        x_min = gages_by_year['year'].min() - 1
    ax.set_xlim(x_min, cfg.yr_max)
    ax.set_ylim(bottom=-cfg.y_pad)
    ax.xaxis.set_major_locator(mticker.MultipleLocator(cfg.x_break))
    ax.yaxis.set_major_locator(mticker.MultipleLocator(cfg.y_break))
    ax.yaxis.set_major_formatter(mticker.FuncFormatter(lambda y, pos: f'{y:,.0f}' if y >= 0 else ''))

    ax.set_xlabel(None)
    ax.set_ylabel(None)
    ax.tick_params(length=0, labelsize=cfg.font_size)
    for side in ['top', 'right']:
        ax.spines[side].set_visible(False)
    for side in ['left', 'bottom']:
        ax.spines[side].set_color(cfg.col_bg)
        ax.spines[side].set_linewidth(0.25)

    fig.tight_layout(pad=0.2)

    return fig


def select_active_sites(gage_melt, active_year, site_map, state_map):
    '''
    Sites active in a given year, in the state map CRS, keeping only
    points that fall inside a state or territory polygon.
    '''
    # filter gage data to given year
    yr_gages = gage_melt.loc[gage_melt['year'] == int(active_year), 'site'].drop_duplicates()

    sites = site_map.drop_duplicates(subset='site_no')
    gages_active = sites.loc[sites['site_no'].isin(yr_gages)].to_crs(state_map.crs)

    if gages_active.empty:
        return gages_active

    # drops points off the basemap (e.g. south pacific islands)
    gages_active = gpd.sjoin(gages_active, state_map[['geometry']],
                             predicate='within',
                             how='inner').drop(columns=['index_right'])

    return gages_active.drop_duplicates(subset='site_no')


def plot_gage_map(gage_melt, active_year, site_map, state_map):
    '''
    Map of gages active in a given year over states and territories.
    An empty year draws just the basemap.
    '''
    gages_active = select_active_sites(gage_melt, active_year, site_map, state_map)

    fig, ax = plt.subplots(figsize=(cfg.canvas_width * cfg.map_slot[2],
                                    cfg.canvas_height * cfg.map_slot[3]),
                           dpi=cfg.dpi)
    fig.patch.set_facecolor('white')

    state_map.plot(ax=ax, color=cfg.col_bg,
                   edgecolor=cfg.col_outline, linewidth=0.25)
    if not gages_active.empty:
        gages_active.plot(ax=ax, color=cfg.col_active,
                          markersize=0.1, alpha=0.7)

    ax.set_axis_off()
    fig.tight_layout(pad=0)

    return fig


def figure_to_raster(fig):
    '''Draw a figure and return it as an RGBA array.'''
    fig.canvas.draw()
    return np.asarray(fig.canvas.buffer_rgba()).copy()
