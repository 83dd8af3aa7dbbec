"""Tests for greedy path and cycle extraction."""

from sbh_core.kmer import decode
from sbh_core.multigraph import Multigraph
from sbh_core.simulate import generate_genome_sequence, sbh_spectrum
from sbh_core.traversal import PathType, populate, start_nodes, walk


def graph_of(*pairs):
    return Multigraph.from_reads(decode(a) + decode(b) for a, b in pairs)


def chain(n):
    return graph_of(*((i, i + 1) for i in range(1, n)))


def test_path_of_five_nodes_is_kept():
    graph = chain(5)

    assert start_nodes(graph, PathType.PATH) == [1]
    assert populate(graph, PathType.PATH) == [[1, 2, 3, 4, 5]]


def test_short_paths_are_dropped_but_still_consume_edges():
    """A four node path is noise, yet its edges stay used."""
    graph = chain(4)

    assert populate(graph, PathType.PATH) == []
    assert all(edge.used for edge in graph.iter_edges())


def test_two_overlapping_reads_give_no_paths():
    """read1's suffix is read2's prefix: three nodes, one path of three, below threshold."""
    graph = graph_of((10, 20), (20, 30))

    assert len(graph.nodes) == 3
    assert walk(graph, 10, PathType.PATH) == [10, 20, 30]
    assert populate(chain(3), PathType.PATH) == []


def test_single_read_path_is_below_threshold():
    graph = graph_of((10, 20))

    assert len(graph.nodes) == 2
    assert populate(graph, PathType.PATH) == []


def test_triangle_is_one_cycle():
    graph = graph_of((1, 2), (2, 3), (3, 1))

    assert start_nodes(graph, PathType.CYCLE) == [1, 2, 3]
    assert populate(graph, PathType.CYCLE) == [[1, 2, 3, 1]]


def test_cycle_closes_on_key_after_degrees_changed():
    """Two loops through node 0: each closes at its start even though node 0's degrees moved."""
    graph = graph_of((0, 1), (1, 0), (0, 2), (2, 0))

    cycles = populate(graph, PathType.CYCLE)

    assert cycles == [[0, 1, 0], [2, 0, 2]]
    assert all(edge.used for edge in graph.iter_edges())


def test_path_walk_does_not_stop_at_its_start():
    graph = graph_of((0, 1), (1, 0), (0, 2), (2, 0))

    assert walk(graph, 0, PathType.PATH) == [0, 1, 0, 2, 0]


def test_walk_from_exhausted_start_is_a_single_node():
    graph = graph_of((1, 2))
    graph.consume(graph.edges[1][2][0])

    assert walk(graph, 1, PathType.PATH) == [1]


def repeat_rich_reads():
    genome = generate_genome_sequence(600, seed=11)
    reads = sbh_spectrum(genome, seed=11)
    # a repeat to give the graph some cycles
    reads += sbh_spectrum(genome[:90] + genome[:90], shuffle=False)
    return reads


def test_thresholds_hold_and_degrees_track_unused_edges():
    graph = Multigraph.from_reads(repeat_rich_reads())

    paths = populate(graph, PathType.PATH)
    cycles = populate(graph, PathType.CYCLE)

    assert all(len(path) >= 5 for path in paths)
    assert all(len(cycle) >= 3 for cycle in cycles)
    for key, node in graph.nodes.items():
        assert node.out_degree >= 0 and node.in_degree >= 0
        assert node.out_degree == graph.unused_out_degree(key)
        assert node.in_degree == graph.unused_in_degree(key)


def test_used_edges_equal_steps_walked():
    """Every step of every walk, kept or not, consumes exactly one distinct edge."""
    graph = Multigraph.from_reads(repeat_rich_reads())

    steps = 0
    for path_type in (PathType.PATH, PathType.CYCLE):
        for start in start_nodes(graph, path_type):
            steps += len(walk(graph, start, path_type)) - 1

    assert steps > 0
    assert sum(edge.used for edge in graph.iter_edges()) == steps
