"""
Allow running the package directly: python -m mandelbrot_dots
"""
from argparse import ArgumentParser
from dataclasses import replace

from .app import run
from .settings import load_settings


def build_parser():
    parser = ArgumentParser(prog='mandelbrot_dots')

    parser.add_argument('--settings', type=str, default=None,
                        dest='settings_path', help='path to a settings.json file',
                        metavar='PATH')

    parser.add_argument('--depth', type=int, default=None,
                        dest='max_depth', help='maximum number of iterations per sample',
                        metavar='DEPTH')

    parser.add_argument('--samples', type=int, default=None,
                        dest='samples_per_axis', help='number of samples along each axis',
                        metavar='SAMPLES')

    parser.add_argument('--size', type=int, default=None,
                        dest='size', help='window size in pixels (the view is square)',
                        metavar='PX')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(args.settings_path)
    if args.max_depth is not None:
        if args.max_depth < 0:
            parser.error('--depth must be >= 0')
        settings = replace(settings, max_depth=args.max_depth)
    if args.samples_per_axis is not None:
        if args.samples_per_axis <= 0:
            parser.error('--samples must be > 0')
        settings = replace(settings, samples_per_axis=args.samples_per_axis)
    if args.size is not None:
        if args.size <= 0:
            parser.error('--size must be > 0')
        settings = replace(settings, window_size=(args.size, args.size))

    run(settings)


if __name__ == "__main__":
    main()
