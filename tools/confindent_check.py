#!/usr/bin/env python
# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Check Confindent files and show their structure.

Parses each file, reports the first malformed line, and optionally prints
the key paths or a JSON rendering of the tree.

Usage:
    python tools/confindent_check.py example.conf
    python tools/confindent_check.py *.conf --paths
    python tools/confindent_check.py example.conf --json -o example.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from genro_confindent import Confindent, ConfParent, ParseError


def to_dict(container: ConfParent) -> list[dict]:
    """Convert child nodes to JSON-serializable dicts, in order."""
    result = []
    for node in container:
        item = {'key': node.key, 'value': node.value}
        if len(node):
            item['children'] = to_dict(node)
        result.append(item)
    return result


def main() -> int:
    parser = argparse.ArgumentParser(
        description='Check Confindent files and show their structure'
    )
    parser.add_argument('files', nargs='+', help='Configuration files to check')
    parser.add_argument('--paths', action='store_true', help='Print key paths and values')
    parser.add_argument('--json', action='store_true', help='Print the tree as JSON')
    parser.add_argument('-o', '--output', help='Output JSON file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    failed = 0
    trees = {}
    for filepath in args.files:
        try:
            conf = Confindent.from_file(filepath)
        except ParseError as e:
            print(f"{filepath}:{e.line}: {e}", file=sys.stderr)
            failed += 1
            continue
        except OSError as e:
            print(f"{filepath}: {e}", file=sys.stderr)
            failed += 1
            continue

        if args.paths:
            for path, node in conf.walk():
                print(f"{filepath}: {path} = {node.value if node.value is not None else ''}")
        trees[filepath] = to_dict(conf)

    if args.json:
        output = json.dumps(trees, indent=2)
        if args.output:
            Path(args.output).write_text(output)
            print(f"Tree written to {args.output}")
        else:
            print(output)

    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())
