#!/usr/bin/env python3
"""
redlsb - Command Line Interface
Hide a secret in the red channel of a JPEG or PNG image
"""

import argparse
import logging
import sys

from lsb import CapacityError, CodecConfig, Framing, LogConfig, ScanOrder, StegError, setup_logging
from lsb.image import (
    SUPPORTED_EXTENSIONS, extract_from_image, get_image_capacity, hide_in_image, is_supported,
)
from lsb.utils import format_size, format_symbols, read_secret

logger = logging.getLogger("redlsb")


def get_secret(args) -> bytes:
    """Secret from -secret or the full contents of -secret-path."""
    if args.secret:
        return args.secret.encode('utf-8')
    logger.debug(f"reading secret from {args.secret_path}")
    return read_secret(args.secret_path)


def cmd_encode(args, config: CodecConfig) -> int:
    """Hide the secret in the image."""
    if bool(args.secret) == bool(args.secret_path):
        print("Error: must pass either -secret or -secret-path", file=sys.stderr)
        return 1

    try:
        payload = get_secret(args)
    except OSError as e:
        print(f"Error: could not open secret ({args.secret_path}): {e}", file=sys.stderr)
        return 1

    try:
        result_path = hide_in_image(args.image_path, payload, args.output_dir, config)
    except CapacityError as e:
        print(f"Warning: secret does not fit in {args.image_path}. {e}", file=sys.stderr)
        return 1
    except StegError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Steganography completed successfully!")
    print(f"  Output: {result_path}")

    if args.verbose:
        print(f"  Hidden: {len(payload)} bytes")
        print(f"  Capacity: {format_size(get_image_capacity(args.image_path, config))}")
        print(f"  Framing: {config.framing.value}")
        print(f"  Scan order: {config.scan_order.value}")

    return 0


def cmd_decode(args, config: CodecConfig) -> int:
    """Extract the hidden secret from the image."""
    try:
        result = extract_from_image(args.image_path, config)
    except StegError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Steganography completed successfully!")

    if config.framing is Framing.TERMINATOR:
        print(f"  Hidden message: {format_symbols(result)}")
    else:
        try:
            print(f"  Hidden message: {result.decode('utf-8')}")
        except UnicodeDecodeError:
            print(f"  Binary data: {len(result)} bytes")

    if args.verbose:
        print(f"  Extracted: {len(result)} bytes")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='redlsb',
        description='Hide a secret in the red channel of an image, one bit per pixel',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Hide a message in an image
  redlsb -encode -image-path image.png -secret "Secret message"

  # Hide the contents of a file
  redlsb -encode -image-path image.png -secret-path secret.txt

  # Extract hidden data
  redlsb -decode -image-path encoded_image.png
        """
    )

    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument('-encode', action='store_true', help='encode image file')
    mode.add_argument('-decode', action='store_true', help='decode image file')

    parser.add_argument('-image-path', dest='image_path', required=True,
                        help='path to image (.jpg or .png)')

    secret = parser.add_mutually_exclusive_group()
    secret.add_argument('-secret', help='secret message')
    secret.add_argument('-secret-path', dest='secret_path', help='path to secret file')

    parser.add_argument('-output-dir', dest='output_dir', default='.',
                        help='directory for encoded_image.<ext> (default: .)')
    parser.add_argument('-framing', choices=[f.value for f in Framing],
                        default=Framing.TERMINATOR.value,
                        help='end-of-message marker (default: terminator)')
    parser.add_argument('-scan-order', dest='scan_order', choices=[o.value for o in ScanOrder],
                        default=ScanOrder.ROW_MAJOR.value,
                        help='pixel traversal order (default: row-major)')
    parser.add_argument('-strict', action='store_true',
                        help='fail instead of producing corrupted output')
    parser.add_argument('-verbose', action='store_true', help='verbose logging')

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(LogConfig(level="DEBUG" if args.verbose else "INFO"))

    if not is_supported(args.image_path):
        exts = ', '.join(sorted(SUPPORTED_EXTENSIONS))
        print(f"Error: -image-path must end in one of: {exts}", file=sys.stderr)
        return 1

    config = CodecConfig.from_dict({
        "framing": args.framing,
        "scan_order": args.scan_order,
        "strict": args.strict,
    })

    if args.encode:
        return cmd_encode(args, config)
    return cmd_decode(args, config)


if __name__ == '__main__':
    sys.exit(main())
