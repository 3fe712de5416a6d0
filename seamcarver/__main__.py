"""
Command-line seam carving.

    python -m seamcarver -i input.png -o output.png -w 400 -d 300
"""

import argparse
import logging
import sys

from .carving import overlay_seam, resize
from .carver import SeamCarver
from .errors import SeamCarvingError
from .imageio import load_image, save_image


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Content-aware image shrinking by seam carving"
    )
    parser.add_argument(
        '-i', '--input',
        required=True,
        help='Input image path'
    )
    parser.add_argument(
        '-o', '--output',
        default='output.png',
        help='Output image path (default: output.png)'
    )
    parser.add_argument(
        '-w', '--width',
        type=int,
        help='Target width (default: keep current width)'
    )
    parser.add_argument(
        '-d', '--height',
        type=int,
        help='Target height (default: keep current height)'
    )
    parser.add_argument(
        '--show-seam',
        metavar='PATH',
        help='Also save the input with its first vertical seam drawn in red'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log energy matrices and seams'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )

    grid = load_image(args.input)
    print(f"Loaded {args.input}: {grid.width} x {grid.height}")

    try:
        if args.show_seam:
            seam = SeamCarver(grid).find_vertical_seam()
            save_image(overlay_seam(grid, seam, direction='vertical'), args.show_seam)
            print(f"Saved: {args.show_seam}")

        carved = resize(grid, width=args.width, height=args.height)
    except SeamCarvingError as e:
        print(f"Error: {e}")
        return 1

    save_image(carved, args.output)
    print(f"Saved: {args.output} ({carved.width} x {carved.height})")
    return 0


if __name__ == '__main__':
    sys.exit(main())
