#!/usr/bin/env python3
"""
Command-line interface for CSS Inliner.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

import rcssmin
import validators

from css_inliner.core.extractor import (
    inline_css,
    inline_css_external,
    reverse_css_external,
    reverse_css_internal,
)
from css_inliner.utils.config import (
    AUTO_CLASS_PREFIX,
    DEFAULT_STYLESHEET_HREF,
    MAX_HTML_SIZE,
    REQUEST_TIMEOUT,
    VERSION,
)
from css_inliner.utils.error import ValidationError
from css_inliner.utils.file import read_text_file, write_text_file
from css_inliner.utils.logging import setup_logging

logger = logging.getLogger(__name__)

def validate_url(url: str) -> bool:
    """Validate URL format."""
    if not validators.url(url):
        raise ValidationError(f"Invalid URL format: {url}")
    return True

def validate_file_path(file_path: Path) -> bool:
    """Validate file path and size."""
    if not file_path.exists():
        raise ValidationError(f"File not found: {file_path}")

    if not file_path.is_file():
        raise ValidationError(f"Not a file: {file_path}")

    if file_path.stat().st_size > MAX_HTML_SIZE:
        raise ValidationError(f"File too large (max {MAX_HTML_SIZE/1024/1024}MB): {file_path}")

    return True

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='css-inliner',
        description='Inline stylesheet rules into HTML, or turn inline styles back into CSS'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {VERSION}'
    )

    parser.add_argument(
        'mode',
        choices=['inline', 'reverse'],
        help='inline: stylesheet to style attributes; reverse: style attributes to stylesheet'
    )

    # Input source
    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument(
        '-f', '--file',
        help='Path to HTML file, or - for standard input',
        type=Path
    )
    source_group.add_argument(
        '-u', '--url',
        help='URL of the HTML document',
        type=str
    )

    # Output options
    parser.add_argument(
        '-o', '--output',
        help='Output HTML file (default: standard output)',
        type=Path
    )
    parser.add_argument(
        '--external',
        help='Write the CSS to a separate file and link it instead of a <style> block',
        action='store_true'
    )
    parser.add_argument(
        '--href',
        help='href of the linked stylesheet in external mode',
        default=DEFAULT_STYLESHEET_HREF
    )
    parser.add_argument(
        '--css-output',
        help='Path of the CSS file in external mode (default: href next to the output file)',
        type=Path
    )
    parser.add_argument(
        '--minify',
        help='Minify the CSS file written in external mode',
        action='store_true'
    )
    parser.add_argument(
        '--class-prefix',
        help='Prefix of classes generated by reverse mode',
        default=AUTO_CLASS_PREFIX
    )

    # Network options
    parser.add_argument(
        '--timeout',
        help='Request timeout in seconds',
        type=int,
        default=REQUEST_TIMEOUT
    )
    parser.add_argument(
        '--no-verify-ssl',
        help='Do not verify SSL certificates',
        action='store_true'
    )

    # Other options
    parser.add_argument(
        '--log-file',
        help='Also write log records to this file'
    )
    parser.add_argument(
        '-v', '--verbose',
        help='Enable verbose output',
        action='store_true'
    )

    return parser.parse_args(argv)

def _css_output_path(args: argparse.Namespace) -> Path:
    if args.css_output:
        return args.css_output
    if args.output:
        return args.output.parent / args.href
    return Path(args.href)

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        # Validate input
        if args.url:
            validate_url(args.url)
            source, base = args.url, None
        elif str(args.file) == '-':
            source, base = sys.stdin.read(), os.getcwd()
        else:
            validate_file_path(args.file)
            source, base = read_text_file(str(args.file)), str(args.file.resolve().parent)

        verify_ssl = not args.no_verify_ssl
        css_content = None

        if args.mode == 'inline':
            if args.external:
                html_content, css_content = inline_css_external(
                    source, args.href, base=base, timeout=args.timeout, verify_ssl=verify_ssl
                )
            else:
                html_content = inline_css(source, base=base, timeout=args.timeout, verify_ssl=verify_ssl)
        else:
            if args.external:
                html_content, css_content = reverse_css_external(
                    source, args.href, timeout=args.timeout, verify_ssl=verify_ssl,
                    auto_class_prefix=args.class_prefix
                )
            else:
                html_content = reverse_css_internal(
                    source, timeout=args.timeout, verify_ssl=verify_ssl,
                    auto_class_prefix=args.class_prefix
                )

        if css_content:
            if args.minify:
                css_content = rcssmin.cssmin(css_content)
            css_file = _css_output_path(args)
            write_text_file(str(css_file), css_content)
            logger.info(f"CSS saved to {css_file}")
        elif args.external:
            logger.info("No CSS produced, stylesheet file not written")

        # Save output
        if args.output:
            write_text_file(str(args.output), html_content)
            logger.info(f"HTML saved to {args.output}")
        else:
            sys.stdout.write(html_content)

        return 0

    except Exception as e:
        logger.error(f"Error: {str(e)}")
        return 1

if __name__ == '__main__':
    sys.exit(main())
