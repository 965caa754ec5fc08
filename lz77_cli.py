"""
Command line front end: compresses a file with LZ77, then decompresses the
result next to it and reports how long each phase took.
"""
import argparse
import os
import sys
import time

from LZ77 import LZ77
from lz_config import MAX_MATCH_LENGTH, MAX_WINDOW_SIZE
from lz_errors import LZ77ConfigError, MalformedStreamError

DEFAULT_WINDOW_SIZE = 100

EXIT_OK = 0
EXIT_MISSING_INPUT = 1
EXIT_BAD_CONFIG = 3
EXIT_FAILURE = 4


def derive_output_names(input_file: str) -> tuple[str, str]:
    """
    Builds the compressed and decompressed file names for an input file:
    'notes.txt' -> ('notes-compressed.txt', 'notes-decompressed.txt').
    """
    root, ext = os.path.splitext(input_file)
    compressed = f"{root}-compressed{ext}"
    decompressed = f"{root}-decompressed{ext}"
    return compressed, decompressed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="LZ77 compression/decompression round trip",
        epilog=(
            "The compressed file is saved as inputname-compressed.extension and "
            "the decompressed one as inputname-decompressed.extension. "
            "A larger window compresses better but takes longer."
        ),
    )
    parser.add_argument("input", help="file to compress")
    parser.add_argument(
        "window_size",
        nargs="?",
        type=int,
        default=DEFAULT_WINDOW_SIZE,
        help=f"sliding window size, at most {MAX_WINDOW_SIZE} (default: %(default)s)",
    )
    parser.add_argument(
        "--max-match",
        type=int,
        default=MAX_MATCH_LENGTH,
        help=(
            "longest match a back reference may cover (default: %(default)s); "
            "14 reproduces the output of the original LZ77 program"
        ),
    )
    parser.add_argument(
        "--exhaustive",
        action="store_true",
        help="use the brute-force match search",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="print every token")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if not os.path.exists(args.input):
        print(f"File does not exist: {args.input}")
        return EXIT_MISSING_INPUT

    try:
        lz77 = LZ77(
            args.window_size,
            max_match_length=args.max_match,
            exhaustive=args.exhaustive,
            verbose=args.verbose,
        )
    except LZ77ConfigError as e:
        print(f"Invalid configuration: {e}")
        return EXIT_BAD_CONFIG

    compressed_file, decompressed_file = derive_output_names(args.input)
    for stale in (compressed_file, decompressed_file):
        if os.path.exists(stale):
            os.remove(stale)

    options = {
        "window_size": lz77.window_size,
        "max_match_length": lz77.config.max_match_length,
        "exhaustive": args.exhaustive,
        "verbose": args.verbose,
    }
    try:
        print(f"Window size: {lz77.window_size}")
        print("Compressing...")
        start_time = time.perf_counter()
        log = LZ77.compress_file(args.input, compressed_file, **options)
        elapsed = (time.perf_counter() - start_time) * 1000
        print(log)
        print(f"Compression took {elapsed:.0f} ms")

        print("\nDecompressing...")
        start_time = time.perf_counter()
        log = LZ77.decompress_file(compressed_file, decompressed_file, **options)
        elapsed = (time.perf_counter() - start_time) * 1000
        print(log)
        print(f"Decompression took {elapsed:.0f} ms")
    except (OSError, MalformedStreamError) as e:
        print(f"Failed: {e}")
        return EXIT_FAILURE

    with open(args.input, "rb") as orig, open(decompressed_file, "rb") as dec:
        if orig.read() != dec.read():
            print("Round trip mismatch: decompressed file differs from the input")
            return EXIT_FAILURE

    print(f"\nCompressed file: {compressed_file}")
    print(f"Decompressed file: {decompressed_file}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
