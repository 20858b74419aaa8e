#!/usr/bin/env python3
"""
ringpick - Command Line Interface

Entry point for the ringpick package.
"""

import argparse
import logging
import sys

from ringpick.__version__ import __version__

log = logging.getLogger(__name__)

DEFAULT_SIZE = 280


def _setup_logging(verbose=0):
    """Configure logging from -v count (filter out noisy PIL)."""
    if verbose >= 2:
        logging.basicConfig(level=logging.DEBUG, format='[%(levelname)s] %(name)s: %(message)s')
        logging.getLogger('PIL').setLevel(logging.WARNING)
    elif verbose == 1:
        logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    else:
        logging.basicConfig(level=logging.WARNING)


def _geometry(size):
    """DiscGeometry for a square control of ``size`` pixels, saved settings."""
    from ringpick.conf import get_ring_config
    return get_ring_config().geometry(size, size)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="ringpick",
        description="Segmented ring color picker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    ringpick pick 140 0           Color under pointer (140, 0)
    ringpick color 12 4           Color of sector 12, track 4
    ringpick palette              Print every cell as hex
    ringpick render ring.png      Render the disc to an image
    ringpick gui                  Open the picker window
    ringpick config --tracks 6    Change saved ring settings
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    pick_parser = subparsers.add_parser("pick", help="Locate a pointer and print its color")
    pick_parser.add_argument("x", type=float, help="Pointer x in control coordinates")
    pick_parser.add_argument("y", type=float, help="Pointer y in control coordinates")
    pick_parser.add_argument("--size", "-s", type=float, default=DEFAULT_SIZE,
                             help="Control size in pixels")

    color_parser = subparsers.add_parser("color", help="Print the color of a cell")
    color_parser.add_argument("sector", type=int, help="Sector index")
    color_parser.add_argument("track", type=int, help="Track index (0 = outer)")

    subparsers.add_parser("palette", help="Print every cell color")

    render_parser = subparsers.add_parser("render", help="Render the disc to an image")
    render_parser.add_argument("output", help="Output image path (e.g. ring.png)")
    render_parser.add_argument("--size", "-s", type=int, default=DEFAULT_SIZE,
                               help="Image size in pixels")

    subparsers.add_parser("gui", help="Open the picker window")

    config_parser = subparsers.add_parser("config", help="Show or change ring settings")
    config_parser.add_argument("--width", type=float, help="Track width in pixels")
    config_parser.add_argument("--tracks", type=int, help="Number of tracks")
    config_parser.add_argument("--sectors", type=int, help="Number of sectors")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    _setup_logging(args.verbose)

    if args.command == "pick":
        return pick(args.x, args.y, size=args.size)
    elif args.command == "color":
        return show_color(args.sector, args.track)
    elif args.command == "palette":
        return show_palette()
    elif args.command == "render":
        return render(args.output, size=args.size)
    elif args.command == "gui":
        return gui()
    elif args.command == "config":
        return configure(width=args.width, tracks=args.tracks, sectors=args.sectors)

    return 0


def pick(x, y, size=DEFAULT_SIZE):
    """Locate (x, y) on the disc and print cell + color."""
    from ringpick.services.locator import locate_in
    from ringpick.services.palette import resolve_cell

    geometry = _geometry(size)
    cell = locate_in(geometry, x, y)
    color = resolve_cell(cell, geometry)
    print(f"sector={cell.sector} track={cell.track} #{color.to_hex()}")
    return 0


def show_color(sector, track):
    """Print the resolver output for one cell."""
    from ringpick.services.palette import resolve_color

    ring = _geometry(DEFAULT_SIZE)
    if not 0 <= sector <= ring.sectors_count or not 0 <= track < ring.tracks_count:
        print(f"Error: cell ({sector}, {track}) outside "
              f"{ring.sectors_count} sectors x {ring.tracks_count} tracks")
        return 1
    color = resolve_color(sector, track, ring.sectors_count, ring.tracks_count)
    print(f"#{color.to_hex()} rgb({color.r}, {color.g}, {color.b})")
    return 0


def show_palette():
    """Print the palette, one line per track."""
    from ringpick.services.palette import palette

    ring = _geometry(DEFAULT_SIZE)
    for track, row in enumerate(palette(ring.sectors_count, ring.tracks_count)):
        print(f"{track}: " + " ".join(c.to_hex() for c in row))
    return 0


def render(output, size=DEFAULT_SIZE):
    """Render the disc to an image file."""
    try:
        from ringpick.services.image import ImageService

        geometry = _geometry(size)
        image = ImageService.render_disc(geometry)
        path = ImageService.save(image, output)
        print(f"Wrote {path} ({image.width}x{image.height})")
        return 0
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1


def configure(width=None, tracks=None, sectors=None):
    """Show saved ring settings, updating any given values first."""
    from ringpick.conf import ConfigError, get_ring_config, save_ring_config

    ring = get_ring_config()
    if width is not None or tracks is not None or sectors is not None:
        if width is not None:
            ring.color_track_width = width
        if tracks is not None:
            ring.tracks_count = tracks
        if sectors is not None:
            ring.sectors_count = sectors
        try:
            save_ring_config(ring)
        except ConfigError as e:
            print(f"Error: {e}")
            return 1
        except OSError as e:
            print(f"Error saving config: {e}")
            return 1

    print(f"track width: {ring.color_track_width:g}px")
    print(f"tracks:      {ring.tracks_count}")
    print(f"sectors:     {ring.sectors_count}")
    return 0


def gui():
    """Open the picker window; the last picked color is saved on exit."""
    try:
        from PySide6.QtWidgets import QApplication

        from ringpick.conf import get_ring_config, save_last_color
        from ringpick.qt_components import UCSimpleRing
    except ImportError as e:
        print(f"Error: PySide6 not available: {e}")
        print("Install with: pip install PySide6")
        return 1

    app = QApplication.instance() or QApplication(sys.argv)
    widget = UCSimpleRing(get_ring_config())
    widget.setWindowTitle("ringpick")
    widget.color_picked.connect(
        lambda r, g, b: log.info("Picked rgb(%d, %d, %d)", r, g, b))
    widget.show()
    code = app.exec()

    if widget.picked_color is not None:
        try:
            save_last_color(widget.picked_color)
            print(f"#{widget.picked_color.to_hex()}")
        except OSError as e:
            log.warning("Could not save last color: %s", e)
    return code


if __name__ == "__main__":
    sys.exit(main())
