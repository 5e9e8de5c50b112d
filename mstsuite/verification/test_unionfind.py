from mstsuite.core.unionfind import UnionFindInt


def test_union_reports_whether_a_merge_happened():
    uf = UnionFindInt(4)
    assert uf.union(0, 1)
    assert uf.union(2, 3)
    assert not uf.union(1, 0)
    assert uf.union(1, 3)
    assert not uf.union(0, 2)
    assert uf.merges == 3
    assert uf.n_sets == 1


def test_find_compresses_the_whole_path():
    uf = UnionFindInt(5)
    # hand-built chain 4 -> 3 -> 2 -> 1 -> 0
    uf.parent = [0, 0, 1, 2, 3]

    assert uf.find(4) == 0
    assert uf.parent == [0, 0, 0, 0, 0]

    # idempotent
    assert uf.find(4) == 0
    assert uf.parent == [0, 0, 0, 0, 0]


def test_equal_rank_tie_goes_to_smaller_root():
    uf = UnionFindInt(4)
    uf.union(3, 1)
    assert uf.find(3) == 1
    assert uf.rank[1] == 1

    # lower rank root is attached under the higher one
    uf.union(0, 3)
    assert uf.find(0) == 1
    assert uf.rank[1] == 1


def test_groups_partition_all_indices():
    """Every index lands in exactly one group, keyed by its root."""
    uf = UnionFindInt(6)
    uf.union(0, 5)
    uf.union(2, 3)
    uf.union(3, 4)

    groups = uf.groups()
    assert sorted(sorted(g) for g in groups.values()) == [[0, 5], [1], [2, 3, 4]]
    for root, members in groups.items():
        assert all(uf.find(m) == root for m in members)
    assert uf.n_sets == len(groups)
