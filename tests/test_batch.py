import os

import pytest

from pivot.batch import batch_output_path, iter_batches, partition_batches, run_batches
from pivot.constants import OUTPUT_HEADER
from pivot.errors import UnreadableSourceError

from conftest import make_grid


class FakeWriter:
    def __init__(self):
        self.tables = {}

    def __call__(self, path, header, rows):
        self.tables[path] = (list(header), list(rows))


def fake_reader(bad=()):
    def read(path):
        name = os.path.basename(path)
        if name in bad:
            raise UnreadableSourceError(path, "corrupt")
        return make_grid({0: [f"{name}:T1"]}, name=name, source=path)

    return read


@pytest.mark.parametrize(
    "count, sizes",
    (
        pytest.param(12, [5, 5, 2], id="12"),
        pytest.param(5, [5], id="5"),
        pytest.param(1, [1], id="1"),
        pytest.param(10, [5, 5], id="10"),
        pytest.param(0, [], id="0"),
    ),
)
def test_partition_sizes(count, sizes):
    files = [f"f{i}.xlsx" for i in range(count)]

    groups = partition_batches(files, 5)

    assert [len(g) for g in groups] == sizes
    assert [f for g in groups for f in g] == files


def test_partition_rejects_non_positive_size():
    with pytest.raises(ValueError):
        partition_batches(["a.xls"], 0)


def test_output_path_naming():
    assert batch_output_path("BGK_testing/output", 3) == os.path.join(
        "BGK_testing/output", "Consolidated_SCADA_Tag_Data_Batch_3.xlsx"
    )


def test_batches_follow_listing_order():
    files = [f"s{i}.xlsx" for i in (7, 2, 9, 1, 4, 3, 8)]
    writer = FakeWriter()

    results = run_batches(
        "in", files, "BGK", "out", reader=fake_reader(), writer=writer
    )

    assert [r.batch_number for r in results] == [1, 2]
    assert [f.file_name for f in results[0].files] == files[:5]
    assert [f.file_name for f in results[1].files] == files[5:]

    header, rows = writer.tables[batch_output_path("out", 1)]
    assert header == OUTPUT_HEADER
    assert len(rows) == 5 * 1440
    assert rows[0][1] == "s7.xlsx"
    assert rows[-1][1] == "s4.xlsx"
    assert results[0].row_count == 5 * 1440


def test_each_batch_starts_with_fresh_accumulator():
    files = [f"s{i}.xlsx" for i in range(6)]
    writer = FakeWriter()

    run_batches("in", files, "BGK", "out", reader=fake_reader(), writer=writer)

    _, rows = writer.tables[batch_output_path("out", 2)]
    assert len(rows) == 1440
    assert {r[4] for r in rows} == {"s5.xlsx:T1"}


def test_unreadable_file_aborts_remaining_batches():
    files = [f"s{i}.xlsx" for i in range(12)]
    writer = FakeWriter()
    done = []

    with pytest.raises(UnreadableSourceError):
        for batch in iter_batches(
            "in",
            files,
            "BGK",
            "out",
            reader=fake_reader(bad={"s7.xlsx"}),
            writer=writer,
        ):
            done.append(batch.batch_number)

    assert done == [1]
    assert list(writer.tables) == [batch_output_path("out", 1)]


def test_run_batches_passes_batch_size_through():
    files = [f"s{i}.xlsx" for i in range(5)]
    writer = FakeWriter()

    results = run_batches(
        "in",
        files,
        "BGK",
        "out",
        reader=fake_reader(),
        writer=writer,
        batch_size=2,
    )

    assert [len(r.files) for r in results] == [2, 2, 1]
    assert sorted(writer.tables) == [batch_output_path("out", n) for n in (1, 2, 3)]
