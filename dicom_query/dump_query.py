"""
Dumps the tags and matching values read from DICOM query files.
"""

import argparse
import sys
from collections.abc import Sequence

from dicom_query.command_line_utils import add_query_args, query_from_args
from dicom_query.query.query_spec import QuerySpecification

WILDCARD = "*"


class QueryDumper:
    def __init__(self, max_value_len: int) -> None:
        self.max_value_len = max_value_len

    def print_query(self, query: QuerySpecification) -> None:
        print("\n" + query.file_path)
        for query_tag, name in zip(query.tags, query.tag_names()):
            attribute = query.attribute(query_tag)
            if attribute is None:
                print(f"{name:<60} -- unrecognized")
                continue
            value = attribute.value[: self.max_value_len] or WILDCARD
            print(f"{name:<60} {attribute.vr:<2} {value}")
        if query.diagnostics:
            print(f"{len(query.diagnostics)} problem(s) found")


def dump(args: argparse.Namespace) -> int:
    dumper = QueryDumper(args.max_value_len)
    for query_path in args.queryfiles:
        query = query_from_args(args, query_path)
        if query is None:
            return 1
        dumper.print_query(query)
    return 0


def main(args: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Dumps the query attributes read from DICOM query files"
    )
    add_query_args(parser)
    parser.add_argument(
        "--max-value-len",
        "-ml",
        help="Maximum string length of displayed values",
        type=int,
        default=80,
    )
    return dump(parser.parse_args(args))


if __name__ == "__main__":
    sys.exit(main())
