#!/usr/bin/env python3
"""
PlaceOverlay CLI

Command-line access to the placement overlay for captured snapshots.

Usage:
    placeoverlay inspect <snapshot.yaml> [--draw-bins] [--pick X Y]
"""

import argparse
import logging
import sys
from typing import List, Optional


def load_snapshot_from_path(snapshot_arg: str):
    """Load a snapshot, printing the error instead of raising.

    Returns:
        PlacementSnapshot, or None if loading failed
    """
    from .placement.snapshot_loader import load_snapshot

    try:
        return load_snapshot(snapshot_arg)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return None


def cmd_inspect(args):
    """Render one frame of a snapshot and optionally pick a point."""
    from .graphics import Gui, OverlayConfig, PlacementGraphics
    from .graphics.composer import LAYER_ORDER
    from .visualization_color_manager import ColorManager

    snapshot = load_snapshot_from_path(args.snapshot)
    if snapshot is None:
        return 1

    print(f"Snapshot: {args.snapshot}")
    print(f"  Bins: {len(snapshot.bins)}")
    print(f"  Cells: {len(snapshot.cells)}")
    print(f"  Nets: {len(snapshot.nets)}")

    colors = ColorManager(args.colors) if args.colors else None
    gui = Gui()
    graphics = PlacementGraphics(
        snapshot, gui, OverlayConfig(draw_bins=args.draw_bins), colors
    )

    if args.pick:
        x, y = args.pick
        result = gui.click((x, y))
        selected = graphics.selection.current()
        print(f"\nPick at ({x:g}, {y:g}): {result.kind.value}")
        if result.handle is not None:
            print(f"  Instance: {result.handle}")
        if selected is not None:
            print(f"  Selected cell: {selected.name or '(unnamed)'} ({selected.kind.value})")
    else:
        gui.redraw()

    frame = gui.last_frame
    print("\nFrame layers:")
    for layer in LAYER_ORDER:
        commands = frame.by_layer(layer)
        if commands:
            print(f"  {layer}: {len(commands)} primitives")

    return 0


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="PlaceOverlay - Global placement debug overlay",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  placeoverlay inspect snapshot.yaml
  placeoverlay inspect snapshot.yaml --draw-bins
  placeoverlay inspect snapshot.yaml --pick 50 50
        """,
    )

    parser.add_argument('--version', action='version', version='placeoverlay 0.1.0')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    inspect_parser = subparsers.add_parser('inspect', help='Render a snapshot frame')
    inspect_parser.add_argument('snapshot', help='Path to snapshot YAML file')
    inspect_parser.add_argument('--draw-bins', action='store_true',
                                help='Draw bin density shading and force vectors')
    inspect_parser.add_argument('--pick', type=float, nargs=2, metavar=('X', 'Y'),
                                help='Select the cell under a point')
    inspect_parser.add_argument('--colors', help='Custom overlay colors YAML')
    inspect_parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    commands = {
        'inspect': cmd_inspect,
    }

    return commands[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
