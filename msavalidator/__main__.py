#!/usr/bin/env python3
"""
Command-line interface for validating multiple sequence alignments.

Checks that a FASTA alignment has sequences of equal length, optionally
checks that every header has the expected number of '|'-delimited fields,
and can write the alignment back out with unwrapped sequences.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from .exceptions import ParseError
from .msa import MSA
from .validators import FieldCountAction

logger = logging.getLogger("msavalidator")


def setup_argument_parser() -> argparse.ArgumentParser:
    """
    Configure and return the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="msavalidator",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-i",
        "--input",
        help="Path to the FASTA alignment file",
        required=True,
        type=Path,
    )

    check_group = parser.add_argument_group("header options")
    check_group.add_argument(
        "-n",
        "--fields",
        help="Expected number of '|'-delimited fields per header",
        type=int,
        action=FieldCountAction,
    )

    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "-o",
        "--output",
        help="Write the validated alignment to this FASTA file",
        type=Path,
    )
    output_group.add_argument(
        "-f",
        "--force",
        help="Overwrite an existing output file",
        action="store_true",
    )
    output_group.add_argument(
        "--json",
        help="Print the report as JSON",
        action="store_true",
    )
    output_group.add_argument(
        "-v",
        "--verbose",
        help="Enable debug logging",
        action="store_true",
    )

    return parser


def build_report(msa: MSA, fields: Optional[int]) -> dict[str, Any]:
    """
    Summarize a loaded alignment for display.

    Args:
        msa: Alignment that has been set successfully.
        fields: Expected header field count, or None to skip the check.

    Returns:
        Dictionary with counts and, if requested, the problem headers.
    """
    report: dict[str, Any] = {
        "valid": True,
        "sequence_count": msa.get_seq_count(),
        "alignment_width": msa.alignment_width,
    }
    if fields is not None:
        report["expected_field_count"] = fields
        report["problem_headers"] = [
            problem.to_dict() for problem in msa.check_headers(fields)
        ]
    return report


def print_report(report: dict[str, Any]) -> None:
    print(f"Number of sequences: {report['sequence_count']}")
    print(f"Alignment length: {report['alignment_width']}")
    if "problem_headers" not in report:
        return

    problems = report["problem_headers"]
    if not problems:
        print(f"All headers have {report['expected_field_count']} fields")
        return

    print(
        f"{len(problems)} headers do not have {report['expected_field_count']} fields:"
    )
    for problem in problems:
        print(f"{problem['index']}\t{problem['header']}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if not args.input.exists():
        parser.error(f"Alignment file not found: {args.input}")

    if args.output and args.output.exists() and not args.force:
        raise FileExistsError(
            f"Output file {args.output} already exists. Use --force to overwrite."
        )

    logger.debug("Loading alignment from %s", args.input)
    msa = MSA()
    try:
        msa.set_seqs(args.input.read_bytes())
    except ParseError as e:
        if args.json:
            print(json.dumps({"valid": False, "kind": e.kind, "error": str(e)}))
        else:
            print(f"Error: {e}", file=sys.stderr)
        return 1

    report = build_report(msa, args.fields)
    if args.json:
        print(json.dumps(report))
    else:
        print_report(report)

    if args.output:
        args.output.write_text(msa.get_seqs() + "\n", encoding="utf-8")
        logger.debug("Wrote %d sequences to %s", msa.get_seq_count(), args.output)

    return 1 if report.get("problem_headers") else 0


if __name__ == "__main__":
    sys.exit(main())
