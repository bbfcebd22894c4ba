#!/usr/bin/env python3
"""CLI for seam carving width reduction."""

import argparse
import logging
import sys
from pathlib import Path

from seam_carve import (
    ConfigurationError,
    GradientEnergyFunction,
    InputError,
    OutputError,
    SeamCarver,
    WidthReducer,
    load_image,
    save_image,
)
from seam_carve.resizer import DEFAULT_OUTPUT


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _prompt(message: str) -> str:
    return input(message).strip()


def _parse_num_seams(value: str) -> int:
    num_seams = int(value)
    if num_seams < 0:
        raise ValueError(f"number of seams must not be negative: {value}")
    return num_seams


def _non_negative_int(value: str) -> int:
    try:
        return _parse_num_seams(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Reduce image width by removing low-energy vertical seams"
    )
    parser.add_argument("input", type=str, nargs="?", help="Input image path")
    parser.add_argument(
        "-n", "--num-seams", type=_non_negative_int,
        help="Number of seams (columns) to remove"
    )
    parser.add_argument(
        "-o", "--output", type=str,
        help=f"Output image path (default: {DEFAULT_OUTPUT})"
    )
    parser.add_argument(
        "--channel-order", type=str, default="rgb", choices=["rgb", "bgr"],
        help="Channel order used for grayscale conversion"
    )
    parser.add_argument(
        "--visualize-energy", action="store_true",
        help="Save the energy map instead of carving"
    )
    parser.add_argument(
        "--visualize-seams", type=_non_negative_int, metavar="N",
        help="Save the input with the first N seams highlighted"
    )
    parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )

    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    input_image = args.input or _prompt(
        "Enter the input image filename (e.g., image.png or full path): "
    )

    try:
        image = load_image(input_image)
    except InputError as e:
        print(f"Error: {e}!", file=sys.stderr)
        return 1

    print(f"Original image size: {image.shape[1]}x{image.shape[0]}")

    energy_fn = GradientEnergyFunction(channel_order=args.channel_order)

    # Handle visualization modes
    if args.visualize_energy or args.visualize_seams is not None:
        carver = SeamCarver(energy_function=energy_fn)
        stem = Path(input_image).stem

        try:
            if args.visualize_energy:
                output = args.output or f"{stem}_energy.png"
                save_image(carver.visualize_energy(image), output)
                print(f"Energy map saved to: {output}")

            if args.visualize_seams is not None:
                vis = carver.visualize_seams(image, n_seams=args.visualize_seams)
                output = args.output or f"{stem}_seams.png"
                save_image(vis, output)
                print(f"Seam visualization saved to: {output}")
        except (ConfigurationError, OutputError) as e:
            print(f"Error: {e}!", file=sys.stderr)
            return 1

        return 0

    num_seams = args.num_seams
    if num_seams is None:
        raw = _prompt("Enter the number of seams to remove: ")
        try:
            num_seams = _parse_num_seams(raw)
        except ValueError:
            print(f"Error: invalid number of seams '{raw}'!", file=sys.stderr)
            return 1

    reducer = WidthReducer(energy_function=energy_fn)
    try:
        result = reducer.reduce(image, num_seams, show_progress=not args.no_progress)
    except ConfigurationError as e:
        print(f"Error: {e}!", file=sys.stderr)
        return 1

    height, width = result.resized_size
    print(f"Resized image size: {width}x{height}")

    output_image = args.output
    if output_image is None:
        output_image = _prompt(
            "Enter the output image filename "
            f"(e.g., resized.png or full path, press Enter for '{DEFAULT_OUTPUT}'): "
        )
    output_image = output_image or DEFAULT_OUTPUT

    try:
        result.save(output_image)
    except OutputError as e:
        print(f"Error: {e}!", file=sys.stderr)
        return 1

    print(f"Seam carving completed. Saved as {output_image} ({width}x{height})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
