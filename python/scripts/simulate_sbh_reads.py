#!/usr/bin/env python3
"""Write a random genome and its hybridization spectrum as FASTA files.

Usage:
    python simulate_sbh_reads.py output_prefix [--length 10000] [--read-length 30] [--seed 0]

Output:
    output_prefix_reads.fasta (one record per read)
    output_prefix_ref.fasta   (the genome the reads were taken from)
"""

import argparse
from pathlib import Path

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from sbh_core.simulate import generate_genome_sequence, sbh_spectrum


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("prefix", type=Path, help="Output path prefix")
    parser.add_argument("--length", type=int, default=10000, help="Genome length")
    parser.add_argument("--read-length", type=int, default=30, help="Read length")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    genome = generate_genome_sequence(args.length, seed=args.seed)
    reads = sbh_spectrum(genome, args.read_length, seed=args.seed)

    reads_path = Path(f"{args.prefix}_reads.fasta")
    ref_path = Path(f"{args.prefix}_ref.fasta")
    reads_path.parent.mkdir(parents=True, exist_ok=True)
    SeqIO.write(
        (SeqRecord(Seq(read), id=f"read{i}", description="") for i, read in enumerate(reads)),
        str(reads_path),
        "fasta-2line",
    )
    SeqIO.write([SeqRecord(Seq(genome), id="reference", description="")], str(ref_path), "fasta")
    print(f"Wrote {len(reads)} reads to {reads_path}")
    print(f"Wrote {len(genome)} bp reference to {ref_path}")


if __name__ == "__main__":
    main()
