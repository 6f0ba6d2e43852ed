"""Validate a local image file against an upload profile.

Usage:
  python scripts/validate_image.py banner.png --type banner
  python scripts/validate_image.py variant.jpg --lenient
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.services import image_validation


def main(argv=None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("path", help="Image file to check")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--type", choices=sorted(image_validation.PROFILES), help="Upload profile")
    group.add_argument("--lenient", action="store_true", help="Variant/gallery 1:1 check with 5%% tolerance")
    args = parser.parse_args(argv)

    with open(args.path, "rb") as f:
        content = f.read()

    if args.lenient:
        valid = image_validation.is_roughly_square(content)
        print(f"{args.path}: {'valid' if valid else 'not square (1:1)'}")
        return 0 if valid else 1

    result = image_validation.validate(content, image_validation.get_profile(args.type))
    print(f"Validation result for {args.path} ({args.type})")
    print(f"  valid: {result.valid}")
    if result.dimensions:
        print(f"  dimensions: {result.dimensions.width}x{result.dimensions.height}")
    if result.error:
        print(f"  error: {result.error}")
    return 0 if result.valid else 1


if __name__ == "__main__":
    sys.exit(main())
