#!/usr/bin/env python3
"""
WsdlWrangler

This script parses a WSDL document into its semantic model and prints a summary
of the types, operations, bindings and endpoints it found. Optionally the whole
model is dumped as JSON for inspection.

Usage:
    python wsdl_wrangler.py --input <wsdl_file> [--json <output_file>] [--no-schema-check] [--verbose] [--help]

Arguments:
    --input, -i       : Path to the WSDL document
    --json, -j        : Write the model as JSON to this file
    --no-schema-check : Skip strict re-validation of the embedded schemas
    --verbose, -v     : Enable debug logging
    --help, -h        : Show this help message

Environment overrides:
    WW_INPUT_FILE, WW_JSON_OUTPUT, WW_VERBOSE

Example:
    python wsdl_wrangler.py --input service.wsdl
    python wsdl_wrangler.py --input service.wsdl --json ./generated/service_model.json
"""

import argparse
import logging
import os
import sys

from lxml import etree

from model_debug import dump_definition_json, format_definition_summary
from wsdl_parser import WsdlParser, WsdlParserError

logger = logging.getLogger("wsdl_wrangler")


def parse_arguments(argv=None):
    """
    Parse command line arguments.

    Returns:
        argparse.Namespace: Parsed command line arguments
    """
    parser = argparse.ArgumentParser(
        description="Parse a WSDL document and summarize its semantic model",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument('--input', '-i', help='Path to the WSDL document')
    parser.add_argument('--json', '-j', dest='json_output', help='Write the model as JSON to this file')
    parser.add_argument('--no-schema-check', action='store_true',
                        help='Skip strict re-validation of the embedded schemas')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    # Environment variables win over flags
    args.input = os.environ.get('WW_INPUT_FILE', args.input)
    args.json_output = os.environ.get('WW_JSON_OUTPUT', args.json_output)
    if os.environ.get('WW_VERBOSE', '').lower() in ('1', 'true', 'yes'):
        args.verbose = True

    if not args.input:
        parser.error("the following arguments are required: --input/-i (or WW_INPUT_FILE)")
    return args


def main(argv=None) -> int:
    """
    Main entry point of the script.
    """
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    wsdl_parser = WsdlParser(validate_schemas=not args.no_schema_check)
    try:
        definition = wsdl_parser.parse_file(args.input)
    except (OSError, etree.XMLSyntaxError, WsdlParserError) as e:
        print(f"Error parsing {args.input}: {e}", file=sys.stderr)
        return 1

    print(format_definition_summary(definition))
    if args.json_output:
        dump_definition_json(definition, args.json_output)
        print(f"Model written to {args.json_output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
