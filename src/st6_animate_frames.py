import subprocess
from pathlib import Path
from PIL import Image, GifImagePlugin

from st0_config import cfg, out_dir, resized_dir


def frame_out_name(frame):
    '''
    Resized frame name: the input path with any `out/` segment stripped.
    Absolute paths keep only the file name.
    '''
    frame = Path(frame)
    if frame.is_absolute():
        return frame.name
    return Path(*[part for part in frame.parts if part != out_dir.name]).as_posix()


def resize_frames(frames, scale_width=None, scale_percent=None, dir_out=resized_dir):
    '''
    Scale png frames proportionally, either to a width or to a percentage
    of the current size. The percentage wins when both are given.

    params:
        frames (list): pngs, frames for gif
        scale_width (int, optional): desired output frame width
        scale_percent (float, optional): percent of current size
        dir_out: directory to store resized frames
    returns:
        list of resized frame paths
    '''
    if scale_width is None and scale_percent is None:
        raise ValueError('resize_frames needs scale_width or scale_percent')

    dir_out = Path(dir_out)
    dir_out.mkdir(parents=True, exist_ok=True)

    png_names = []
    for frame in frames:
        with Image.open(frame) as img:
            if scale_percent is not None:
                width = round(img.width * (scale_percent / 100))
            else:
                width = int(scale_width)
            height = max(1, round(img.height * width / img.width))
            frame_scaled = img.resize((width, height), resample=Image.LANCZOS)

        out_fp = dir_out / frame_out_name(frame)
        out_fp.parent.mkdir(parents=True, exist_ok=True)
        frame_scaled.save(out_fp)
        png_names.append(out_fp)

    return png_names


def animate_frames_gif(frames, out_file, reduce=True, frame_delay_cs=None, frame_rate=cfg.frame_rate):
    '''
    Animate frames into a looping gif.

    params:
        frames (list): pngs, frames for gif, in display order
        out_file: output file name for gif
        reduce (bool): whether or not to apply gifsicle compression
        frame_delay_cs (int): time spent on each frame, centiseconds.
            Derived from frame_rate when not given.
        frame_rate (int): frames per second
    '''
    if frame_delay_cs is None:
        frame_delay_cs = round(100 / frame_rate)

    images = [Image.open(f).convert('RGB') for f in frames]

    out_file = Path(out_file)
    out_file.parent.mkdir(parents=True, exist_ok=True)
    write_gif(images, out_file, duration_ms=frame_delay_cs * 10)
    print(f'Saved: {out_file} ({len(images)} frames)')

    if reduce:
        optimize_gif(out_file, frame_delay_cs)

    return out_file


def write_gif(images, out_file, duration_ms, loop=0):
    '''
    Write images as a looping gif, one gif frame per image.
    Frames are written one at a time so repeated frames are kept
    instead of being merged into one longer frame.
    '''
    # adaptive palette per frame, stored as a local colour table
    frames_p = [im.convert('P', palette=Image.Palette.ADAPTIVE) for im in images]
    header, _ = GifImagePlugin.getheader(frames_p[0], info={'loop': loop, 'duration': duration_ms})

    with open(out_file, 'wb') as fp:
        for chunk in header:
            fp.write(chunk)
        for frame in frames_p:
            for chunk in GifImagePlugin.getdata(frame, duration=duration_ms, include_color_table=True):
                fp.write(chunk)
        fp.write(b';') # gif trailer

    return out_file


def optimize_gif(out_file, frame_delay_cs):
    '''
    Simplify the gif in place with gifsicle. Cuts size by about 2/3.
    '''
    gifsicle_command = [
        'gifsicle',
        '-b',
        f'-O{cfg.gif_opt_level}',
        '-d', str(frame_delay_cs),
        '--colors', str(cfg.gif_colors),
        str(out_file)
    ]
    subprocess.run(gifsicle_command)

    return out_file
