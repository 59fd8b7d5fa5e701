"""Command line driver: ``python -m simulation parameters/lid_driven_cavity.txt``."""

import argparse

from datastructures import Settings
from output import OutputWriterHDF5, OutputWriterText

from .computation import Computation

WRITERS = {
    "hdf5": OutputWriterHDF5,
    "text": OutputWriterText,
}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="numsim",
        description="Simulate 2D incompressible flow on a staggered grid.",
    )
    parser.add_argument("parameter_file", help="Parameter file with 'key = value' lines")
    parser.add_argument("--output-dir", default="out", help="Directory for per-step output files")
    parser.add_argument(
        "--format",
        choices=sorted(WRITERS),
        action="append",
        dest="formats",
        help="Output format, may be repeated. Default is all formats.",
    )
    parser.add_argument("--no-output", action="store_true", help="Do not write per-step output")
    parser.add_argument("--save", default=None, help="Save the final result to this HDF5 file")
    parser.add_argument("--quiet", action="store_true", help="Only print errors")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    settings = Settings.from_file(args.parameter_file)

    if args.no_output:
        writers = []
    else:
        writers = [WRITERS[name] for name in sorted(set(args.formats or WRITERS))]

    computation = Computation(
        settings,
        output_writers=writers,
        output_dir=args.output_dir,
        verbose=not args.quiet,
    )
    computation.run_simulation()

    if args.save:
        computation.save(args.save)
        if not args.quiet:
            print(f"Results saved to: {args.save}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
