"""Command line interface for vorender."""
import argparse
import logging
import sys
from pathlib import Path

from vorender.pipeline import VoronoiPipeline
from vorender.types import RenderConfig, RenderMode, SaveMode, UnknownModeError, VoronoiError


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog='vorender',
        description='Render a Voronoi diagram of random seeds to a PPM image or video',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  vorender interesting ppm
  vorender euclidean ppm -o cells.ppm --random-seed 42
  vorender manhattan mp4 --frames-dir frames --video voronoi.mp4
        """,
    )

    parser.add_argument(
        'render_mode',
        type=str,
        help='Render mode: ' + ', '.join(m.value for m in RenderMode)
    )

    parser.add_argument(
        'save_mode',
        type=str,
        help='Save mode: ' + ', '.join(m.value for m in SaveMode)
    )

    parser.add_argument(
        '-o', '--output',
        type=str,
        default='img.ppm',
        help='Output PPM path for ppm mode (default: img.ppm)'
    )

    parser.add_argument('--width', type=int, default=1920, help='Canvas width (default: 1920)')
    parser.add_argument('--height', type=int, default=1080, help='Canvas height (default: 1080)')

    parser.add_argument(
        '--seeds',
        type=int,
        default=9,
        help='Number of seed points (default: 9)'
    )

    parser.add_argument(
        '--random-seed',
        type=int,
        default=None,
        help='Seed for the random generator (default: fresh entropy)'
    )

    parser.add_argument(
        '--markers',
        dest='draw_markers',
        action='store_true',
        help='Draw seed markers for every render mode'
    )
    parser.add_argument(
        '--no-markers',
        dest='draw_markers',
        action='store_false',
        help='Never draw seed markers'
    )
    parser.set_defaults(draw_markers=None)

    parser.add_argument(
        '--frames-dir',
        type=str,
        default='.',
        help='Directory for mp4 frame files (default: current directory)'
    )

    parser.add_argument(
        '--frame-count',
        type=int,
        default=600,
        help='Number of frames for mp4 mode (default: 600)'
    )

    parser.add_argument('--fps', type=int, default=60, help='Video frame rate (default: 60)')

    parser.add_argument(
        '--video',
        type=str,
        default='output.mp4',
        help='Video output path for mp4 mode (default: output.mp4)'
    )

    parser.add_argument(
        '--ffmpeg',
        type=str,
        default='ffmpeg',
        help='ffmpeg executable (default: ffmpeg)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser


def setup_logging(verbose: bool = False):
    """Configure the package logger for command line runs."""
    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger("vorender")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def main(args=None):
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    setup_logging(parsed_args.verbose)

    # Unknown modes turn their stage into a no-op
    try:
        render_mode = RenderMode.parse(parsed_args.render_mode)
    except UnknownModeError as e:
        print(f"Error: {e}", file=sys.stderr)
        render_mode = None

    try:
        save_mode = SaveMode.parse(parsed_args.save_mode)
    except UnknownModeError as e:
        print(f"Error: {e}", file=sys.stderr)
        save_mode = None

    try:
        config = RenderConfig(
            width=parsed_args.width,
            height=parsed_args.height,
            seed_count=parsed_args.seeds,
            random_seed=parsed_args.random_seed,
            draw_markers=parsed_args.draw_markers,
            output_path=Path(parsed_args.output),
            frames_dir=Path(parsed_args.frames_dir),
            frame_count=parsed_args.frame_count,
            fps=parsed_args.fps,
            video_path=Path(parsed_args.video),
            ffmpeg=parsed_args.ffmpeg,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        pipeline = VoronoiPipeline(config)
        result = pipeline.process(render_mode, save_mode)
    except VoronoiError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if save_mode is SaveMode.FRAME_SEQUENCE and result.video_returncode != 0:
        if result.video_returncode is None:
            print(f"Error: could not run {config.ffmpeg}", file=sys.stderr)
        else:
            print(
                f"Error: {config.ffmpeg} exited with code {result.video_returncode}",
                file=sys.stderr
            )

    return 0


if __name__ == '__main__':
    sys.exit(main())
