#!/usr/bin/env python3
"""
docconvert CLI

Command-line interface for single-file document conversion.

Usage:
    docconvert <file> [options]
    docconvert sample.md          # data/sample.md   -> data/sample.html
    docconvert report.docx        # data/report.docx -> data/report.html
    docconvert page.html          # data/page.html   -> data/page.pdf

Options:
    --data-dir DIR       Directory holding input files (default: ./data)
    -o, --output DIR     Output directory (default: the data directory)
    --charset LABEL      Assume this charset for HTML input (e.g. SJIS)
    --formats            Show all supported formats
"""

import argparse
import sys

from .core import DocumentConverter, split_file_name


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="docconvert",
        description=(
            "Single-file Document Converter\n\n"
            "Converts Markdown to HTML, Word documents to HTML, and HTML to\n"
            "PDF. HTML in Shift_JIS / EUC-JP / ISO-2022-JP is repaired to\n"
            "UTF-8 before rendering."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  docconvert sample.md\n"
            "  docconvert report.docx\n"
            "  docconvert page.html\n"
            "  docconvert legacy.html --charset SJIS       # skip detection\n"
            "  docconvert notes.md --data-dir ./docs -o ./out\n"
        ),
    )

    parser.add_argument(
        "file",
        nargs="?",
        help="File name (.md | .docx | .html) inside the data directory",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory holding input files (default: ./data)",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output directory (default: the data directory)",
    )
    parser.add_argument(
        "--charset",
        default=None,
        help="Charset to assume for HTML input instead of detecting it",
    )
    parser.add_argument(
        "--formats",
        action="store_true",
        help="Show all supported input formats and exit",
    )

    args = parser.parse_args(argv)

    if args.formats:
        _show_formats()
        return

    if not args.file:
        parser.print_help()
        print("\nError: No file provided. Usage: docconvert <file(.md | .docx | .html)>", file=sys.stderr)
        sys.exit(1)

    try:
        engine = DocumentConverter(data_dir=args.data_dir, output_dir=args.output)
    except OSError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)

    base_name, ext = split_file_name(args.file)
    print(f"Input file : {args.file}")
    print(f"  base name: {base_name}")
    print(f"  ext      : {ext}")
    print(f"  data dir : {engine.data_dir}")
    print(f"  output   : {engine.output_dir}")
    print()

    try:
        engine.convert(args.file, forced_charset=args.charset)
    except Exception as e:
        print(f"[ERROR] {args.file}: {e}", file=sys.stderr)
        sys.exit(1)

    print()
    print("-" * 60)
    print("  Done: conversion complete")
    print("-" * 60)


def _show_formats():
    """Display all supported formats."""
    formats = DocumentConverter.supported_formats()
    print("\nSupported Conversions:")
    print("-" * 40)
    for category, extensions in formats.items():
        print(f"\n  {category}:")
        for ext in extensions:
            print(f"    {ext}")
    print()


if __name__ == "__main__":
    main()
