import logging
import colorlog
import argparse
import json
import sys
from maths.curves.errors import CurveError
from resampler.config import CurveConfig, PresentationConfig
from resampler.pipeline import DEFAULT_CONTROL_POINTS, resample

formatter = colorlog.ColoredFormatter(
    '%(blue)s[%(asctime)s]%(reset)s %(log_color)s[%(levelname)s]%(reset)s %(purple)s[%(filename)s:%(lineno)d]%(reset)s: %(message)s',
    datefmt='%H:%M:%S',
    log_colors={
        'DEBUG': 'cyan',
        'INFO': 'green',
        'WARNING': 'yellow',
        'ERROR': 'red',
        'CRITICAL': 'red,bg_white',
    },
    secondary_log_colors={
        'message': {
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'red',
        }
    },
    style='%'
)

logger = logging.getLogger()


def setup_logging(verbose: bool = False):
    handler = colorlog.StreamHandler()
    handler.setFormatter(formatter)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.handlers = [handler]


def segment_curve(control_points, config: CurveConfig, presentation: PresentationConfig = None, include_sample: bool = False) -> dict:
    result = resample(control_points, config, presentation)
    if presentation is not None and not presentation.contains(result.breakpoints):
        logging.warning(f"Breakpoints fall outside the {presentation.width}x{presentation.height} viewport")
    return result.to_dict(include_sample=include_sample)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Split a cubic Bezier curve into pieces of equal arc length')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    segment_parser = subparsers.add_parser('segment', help='Print the equal arc length breakpoints as JSON')
    segment_parser.add_argument('--point', nargs=2, type=float, action='append', metavar=('X', 'Y'),
                                help='Control point, given exactly four times (defaults to the demo curve)')
    segment_parser.add_argument('--segments', type=int, default=10, help='Number of equal arc length pieces')
    segment_parser.add_argument('--epsilon', type=float, default=0.001, help='Tolerance when matching the step length')
    segment_parser.add_argument('--dt', type=float, default=0.5, help='Sampling increment over the domain')
    segment_parser.add_argument('--domain', type=float, default=100.0, help='Sampling domain, t runs over [0, domain]')
    segment_parser.add_argument('--scale', nargs=2, type=float, default=(300.0, 300.0), metavar=('SX', 'SY'),
                                help='Presentation scale')
    segment_parser.add_argument('--offset', nargs=2, type=float, default=(400.0, 300.0), metavar=('OX', 'OY'),
                                help='Presentation offset')
    segment_parser.add_argument('--no-transform', action='store_true', help='Segment in curve space')
    segment_parser.add_argument('--include-sample', action='store_true', help='Include the dense sample in the output')
    segment_parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(getattr(args, 'verbose', False))

    if args.command != 'segment':
        logging.error("Please specify a command. Use --help for more information.")
        return 2

    presentation = None
    if not args.no_transform:
        presentation = PresentationConfig(
            scale_x=args.scale[0],
            scale_y=args.scale[1],
            offset_x=args.offset[0],
            offset_y=args.offset[1]
        )
    config = CurveConfig(segments=args.segments, epsilon=args.epsilon, dt=args.dt, domain=args.domain)

    try:
        output = segment_curve(
            control_points=args.point or DEFAULT_CONTROL_POINTS,
            config=config,
            presentation=presentation,
            include_sample=args.include_sample
        )
    except CurveError as e:
        logging.error(f"{type(e).__name__}: {e}")
        return 1

    json.dump(output, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
