"""``urlshort check`` — validate a redirect file and list its redirects.

Prints the resolved mapping (after last-write-wins on duplicate paths)
as a PATH / URL table.
"""

import argparse
import sys

from urlshort.decoding import load_records
from urlshort.errors import UrlshortError
from urlshort.records import build_mapping


def run_check(args: argparse.Namespace) -> None:
    """Decode ``args.file`` and print its redirects, sorted by path."""
    try:
        records = load_records(args.file)
    except UrlshortError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    mapping = build_mapping(records)
    if not mapping:
        print("No redirects defined.")
        return

    rows = sorted(mapping.items())
    max_path = max(max(len(path) for path, _ in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_path}}}  {{}}"
    print(fmt.format("PATH", "URL"))
    sep_len = max_path + 2 + max(len(url) for _, url in rows)
    print("-" * min(max(sep_len, max_path + 5), 80))
    for path, url in rows:
        print(fmt.format(path, url))

    dropped = len(records) - len(mapping)
    if dropped:
        print(f"\n{dropped} duplicate path(s) overridden by later entries.")
