import argparse
from pathlib import Path

from st0_config import cfg
from st1_get_state_boundaries import download_states, read_state_map
from st2_read_gage_records import read_gage_records, read_site_map
from st3_count_gages_by_year import count_gages_by_year
from st5_compose_frames import render_year_frames
from st6_animate_frames import resize_frames, animate_frames_gif


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Render yearly active stream gage frames and stitch them into a gif.'
    )
    parser.add_argument('--records', required=True,
                        help='csv of gage records, one row per site & active year')
    parser.add_argument('--sites', required=True,
                        help='gage locations (csv with dec_lat_va/dec_long_va, or gpkg)')
    parser.add_argument('--states', default=None,
                        help='state boundaries; downloads the census file when omitted')
    parser.add_argument('--years', type=int, nargs=2, metavar=('START', 'END'), default=None)
    parser.add_argument('--out-dir', default=str(cfg.out_dir))
    parser.add_argument('--gif', default=str(cfg.out_dir / 'gage_time.gif'))
    parser.add_argument('--delay-cs', type=int, default=cfg.frame_delay_cs)
    parser.add_argument('--fps', type=int, default=cfg.frame_rate)
    parser.add_argument('--scale-width', type=int, default=None)
    parser.add_argument('--scale-percent', type=float, default=None)
    parser.add_argument('--resized-dir', default=str(cfg.resized_dir))
    parser.add_argument('--no-reduce', action='store_true',
                        help='skip gifsicle compression')

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # 1) inputs
    states_fp = args.states if args.states else download_states()
    state_map = read_state_map(states_fp)
    gage_melt = read_gage_records(args.records)
    site_map = read_site_map(args.sites, crs=state_map.crs)
    print('Gage records rows:', len(gage_melt))
    print('Site locations:', len(site_map))

    # 2) yearly counts
    gages_by_year = count_gages_by_year(gage_melt)
    print('Years with active gages:', len(gages_by_year))

    if args.years is not None:
        years = [y for y in gages_by_year['year'] if args.years[0] <= y <= args.years[1]]
    else:
        years = list(gages_by_year['year'])

    # 3) one frame per year
    frames = render_year_frames(gage_melt, site_map, state_map,
                                years=years, out_dir=Path(args.out_dir))

    # 4) gif
    if args.scale_width is not None or args.scale_percent is not None:
        frames = resize_frames(frames,
                               scale_width=args.scale_width,
                               scale_percent=args.scale_percent,
                               dir_out=args.resized_dir)

    gif = animate_frames_gif(frames, args.gif,
                             reduce=not args.no_reduce,
                             frame_delay_cs=args.delay_cs,
                             frame_rate=args.fps)
    print(f'Gif written to: {gif}')

    return gif


if __name__ == '__main__':
    main()
