import threading

from wordcrawl.domain.word_counts import WordCountAccumulator


def test_new_accumulator_is_empty():
    acc = WordCountAccumulator()
    assert acc.is_empty()
    assert acc.snapshot() == {}
    assert len(acc) == 0


def test_merge_adds_to_existing_totals():
    acc = WordCountAccumulator()
    acc.merge({"x": 3, "y": 1})
    acc.merge({"x": 5})
    assert acc.snapshot() == {"x": 8, "y": 1}
    assert not acc.is_empty()


def test_merge_empty_mapping_is_noop():
    acc = WordCountAccumulator()
    acc.merge({})
    assert acc.is_empty()


def test_snapshot_is_a_copy():
    acc = WordCountAccumulator()
    acc.merge({"x": 1})
    snap = acc.snapshot()
    snap["x"] = 100
    assert acc.snapshot() == {"x": 1}


def test_concurrent_merges_of_same_word_lose_no_updates():
    acc = WordCountAccumulator()
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        for _ in range(500):
            acc.merge({"shared": 1, "other": 2})

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert acc.snapshot() == {"shared": 4000, "other": 8000}
