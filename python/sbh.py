"""Command line entrypoint for the sequencing-by-hybridization assembler."""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import List, Optional

from Bio import SeqIO

from sbh_core import AssemblyConfig, Assembler, PathType
from sbh_core.fasta import read_reads, write_contigs
from sbh_core.logging_utils import setup_logging
from sbh_core.report import AssemblyReport, append_metrics, reference_edit_distance

logger = logging.getLogger("sbh_core.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Assemble contigs from hybridization reads")
    parser.add_argument(
        "infile",
        nargs="?",
        type=Path,
        default=Path("data/YeastReads.fasta"),
        help="FASTA file of fixed-length reads",
    )
    parser.add_argument(
        "outfile",
        nargs="?",
        type=Path,
        default=Path("cont.fasta"),
        help="FASTA file the contigs are written to",
    )
    parser.add_argument(
        "--kmer-length",
        type=int,
        default=15,
        help="k-mer length; reads must be exactly twice as long",
    )
    parser.add_argument(
        "--min-overlap",
        type=int,
        default=15,
        help="Minimum suffix/prefix overlap for two contigs to be merged",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=1,
        help="Worker threads for contig condensation (1 disables threading)",
    )
    parser.add_argument(
        "--reference",
        type=Path,
        help="Reference FASTA used to score the longest contig",
    )
    parser.add_argument(
        "--metrics-csv",
        type=Path,
        help="Optional CSV file to append assembly metrics",
    )
    parser.add_argument("--log-file", type=Path, help="Also write a debug log here")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug detail")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings")
    return parser.parse_args(argv)


def load_reference(reference_path: Path | None) -> str | None:
    if reference_path is None:
        return None
    record = next(SeqIO.parse(str(reference_path), "fasta"), None)
    return str(record.seq).upper() if record is not None else None


def assemble(args: argparse.Namespace) -> AssemblyReport:
    config = AssemblyConfig(
        kmer_length=args.kmer_length,
        read_length=2 * args.kmer_length,
        min_overlap=args.min_overlap,
        max_workers=max(args.threads, 1),
    )
    reference = load_reference(args.reference)
    timings = {}
    run_start = time.time()

    reads = read_reads(args.infile, config.read_length)
    logger.info("Loaded %d reads from %s", len(reads), args.infile)

    start = time.time()
    assembler = Assembler(reads, config)
    timings["graph"] = time.time() - start

    start = time.time()
    assembler.populate(PathType.PATH)
    timings["paths"] = time.time() - start

    start = time.time()
    assembler.populate(PathType.CYCLE)
    timings["cycles"] = time.time() - start

    start = time.time()
    raw_contigs = len(assembler.build_contigs())
    timings["contigs"] = time.time() - start

    start = time.time()
    assembler.condense()
    timings["condense"] = time.time() - start

    count = write_contigs(args.outfile, assembler.contigs)
    logger.info("Wrote %d contigs to %s", count, args.outfile)
    timings["total"] = time.time() - run_start

    report = AssemblyReport.from_assembler(
        assembler, reads=len(reads), raw_contigs=raw_contigs, timings=timings
    )
    if reference is not None and assembler.contigs:
        longest = max(assembler.contigs, key=len)
        report.edit_distance = reference_edit_distance(longest, reference)
    return report


def print_report(report: AssemblyReport, outfile: Path) -> None:
    print("SBH assembly complete")
    print(f"Reads processed       : {report.reads}")
    print(f"Graph nodes / edges   : {report.nodes} / {report.edges}")
    print(f"Paths (longest)       : {report.paths} ({report.longest_path} nodes)")
    print(f"Cycles (longest)      : {report.cycles} ({report.longest_cycle} nodes)")
    print(f"Raw contigs           : {report.raw_contigs}")
    print(f"Condensed contigs     : {report.contigs} in {report.rounds} rounds")
    print(f"Longest contig        : {report.longest_contig} nucleotides")
    print(f"N50                   : {report.n50}")
    if report.edit_distance is not None:
        print(f"Edit distance to ref  : {report.edit_distance}")
    print(f"Contigs written to    : {outfile}")
    print(f"Assembly time         : {report.timings.get('total', 0.0):.3f}s")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    setup_logging(level, args.log_file)
    try:
        report = assemble(args)
        if args.metrics_csv is not None:
            append_metrics(args.metrics_csv, report)
    except ValueError as exc:
        logger.error("Assembly aborted: %s", exc)
        return 1
    except OSError as exc:
        logger.error("I/O failure: %s", exc)
        return 1
    print_report(report, args.outfile)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
