"""Tests for containment removal, overlap merging and the fixed-point loop."""

from sbh_core.condense import (
    condense,
    contains,
    merge,
    merge_if_overlap,
    remove_contained,
)
from sbh_core.simulate import generate_genome_sequence

OVERLAP = "ACGTACGTACGTACG"


def test_contains_is_exact():
    assert contains("ACGTACGT", "GTAC")
    assert contains("ACGT", "ACGT")
    assert not contains("ACGT", "ACGTA")
    assert not contains("ACGTACGT", "GTTC")


def test_remove_contained_keeps_one_copy_and_drops_substrings():
    contigs = ["ACGTACGT", "GTAC", "TTTT", "ACGTACGT"]

    survivors, removed = remove_contained(contigs)

    assert survivors == ["ACGTACGT", "TTTT"]
    assert removed == 2


def test_remove_contained_is_idempotent():
    genome = generate_genome_sequence(200, seed=5)
    contigs = [genome[i : i + 40] for i in range(0, 160, 7)] + [genome[10:30], genome[:200]]

    survivors, removed = remove_contained(contigs)
    again, removed_again = remove_contained(survivors)

    assert survivors == [genome]
    assert removed == len(contigs) - 1
    assert again == survivors
    assert removed_again == 0


def test_threaded_marking_matches_sequential():
    genome = generate_genome_sequence(300, seed=9)
    contigs = [genome[i : i + 50 + i % 13] for i in range(0, 240, 5)]
    contigs += [genome[100:160], genome[100:160], "ACGT" * 20]

    assert remove_contained(contigs, max_workers=4) == remove_contained(contigs)


def test_merge_if_overlap_joins_either_orientation():
    a = "TTTTT" + OVERLAP
    b = OVERLAP + "CCCCC"

    assert merge_if_overlap(a, b, 15) == (15, "TTTTT" + OVERLAP + "CCCCC")
    assert merge_if_overlap(b, a, 15) == (15, "TTTTT" + OVERLAP + "CCCCC")
    assert merge_if_overlap(a, b, 16) is None


def test_merge_takes_the_smallest_qualifying_overlap():
    """A periodic junction overlaps by 16, 18 and 20; 16 wins."""
    periodic = "AC" * 10
    a = "TTTTT" + periodic
    b = periodic + "GGGGG"

    overlap, joined = merge_if_overlap(a, b, 15)

    assert overlap == 16
    assert len(joined) == len(a) + len(b) - 16
    assert joined == "TTTTT" + "ACAC" + b


def test_merge_counts_two_per_join():
    a = "TTTTT" + OVERLAP
    b = OVERLAP + "CCCCC"

    merged, count = merge([a, b], 15)

    assert merged == ["TTTTT" + OVERLAP + "CCCCC"]
    assert len(merged[0]) == len(a) + len(b) - len(OVERLAP)
    assert count == 2


def test_merge_rebuilds_a_genome_from_overlapping_pieces():
    genome = generate_genome_sequence(100, seed=7)
    pieces = [genome[0:40], genome[20:70], genome[50:100]]

    merged, count = merge(pieces, 15)

    assert merged == [genome]
    assert count == 4
    assert merge(pieces, 15, max_workers=3) == (merged, count)


def test_merge_leaves_short_overlaps_alone():
    merged, count = merge(["GGGGG" + "ACGTAC", "ACGTAC" + "TTTTT"], 15)

    assert sorted(merged) == ["ACGTACTTTTT", "GGGGGACGTAC"]
    assert count == 0


def test_condense_reaches_a_fixed_point():
    genome = generate_genome_sequence(100, seed=7)
    contigs = [genome[0:40], genome[30:45], genome[20:70], genome[50:100]]

    result = condense(contigs, 15)

    assert result.contigs == [genome]
    assert result.rounds == [(1, 4), (0, 0)]
    assert result.removed == 1
    assert result.merged == 4


def test_condensed_contigs_neither_contain_nor_overlap_each_other():
    genome = generate_genome_sequence(400, seed=21)
    contigs = [genome[i : i + 45] for i in range(0, 360, 30)] + [genome[355:]]
    contigs += [generate_genome_sequence(60, seed=s) for s in range(3)]

    final = condense(contigs, 15).contigs

    for i, first in enumerate(final):
        for second in final[i + 1 :]:
            assert not contains(first, second) and not contains(second, first)
            assert merge_if_overlap(first, second, 15) is None
    assert genome in final


def test_condense_of_nothing_is_nothing():
    result = condense([], 15)

    assert result.contigs == []
    assert result.merged == 0 and result.removed == 0


def test_condense_respects_round_cap():
    genome = generate_genome_sequence(100, seed=7)

    result = condense([genome[0:40], genome[20:100]], 15, max_rounds=1)

    assert len(result.rounds) == 1
    assert result.contigs == [genome]
