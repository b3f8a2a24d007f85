import asyncio
import os

import pytest

from pivot.errors import DirectoryUnavailableError, UnreadableSourceError
from pivot.zones import derive_zone, run_zone, run_zones

from conftest import make_grid


@pytest.mark.parametrize(
    "folder, zone",
    (
        ("BGK_testing", "BGK"),
        ("./BGM_testing", "BGM"),
        ("/data/HSN_testing/", "HSN"),
        ("A1B_x", "A1B"),
        ("BGKX_testing", "Unknown"),
        ("BG_testing", "Unknown"),
        ("testing", "Unknown"),
    ),
)
def test_derive_zone(folder, zone):
    assert derive_zone(folder) == zone


class Recorder:
    def __init__(self):
        self.written = []

    def __call__(self, path, header, rows):
        self.written.append((path, len(rows)))


def _reader(path):
    if "broken" in os.path.basename(path):
        raise UnreadableSourceError(path, "not a spreadsheet")
    return make_grid({0: ["T1"]}, source=path)


def _lister(listing):
    def list_files(folder):
        key = os.path.basename(folder)
        if key not in listing:
            raise DirectoryUnavailableError(folder, "missing")
        return listing[key]

    return list_files


def test_zones_are_isolated(tmp_path):
    listing = {
        "BGK_testing": [f"b{i}.xlsx" for i in range(7)],
        "BGM_testing": ["m0.xlsx", "broken.xlsx", "m2.xlsx"],
    }
    folders = [str(tmp_path / name) for name in ("BGK_testing", "BGM_testing", "HSN_testing")]
    writer = Recorder()

    results = asyncio.run(
        run_zones(folders, lister=_lister(listing), reader=_reader, writer=writer)
    )

    by_zone = {r.zone: r for r in results}
    assert [r.zone for r in results] == ["BGK", "BGM", "HSN"]

    assert by_zone["BGK"].ok
    assert [len(b.files) for b in by_zone["BGK"].batches] == [5, 2]
    assert by_zone["BGK"].file_count == 7
    assert os.path.isdir(tmp_path / "BGK_testing" / "output")

    assert not by_zone["BGM"].ok
    assert "broken.xlsx" in by_zone["BGM"].error
    assert by_zone["BGM"].batches == []

    assert not by_zone["HSN"].ok
    assert "missing" in by_zone["HSN"].error

    assert {os.path.basename(p) for p, _ in writer.written} == {
        "Consolidated_SCADA_Tag_Data_Batch_1.xlsx",
        "Consolidated_SCADA_Tag_Data_Batch_2.xlsx",
    }


def test_failure_keeps_earlier_batches(tmp_path):
    files = [f"f{i}.xlsx" for i in range(5)] + ["broken.xlsx"]
    folder = str(tmp_path / "BGK_testing")

    result = asyncio.run(
        run_zone(
            folder,
            lister=lambda _: files,
            reader=_reader,
            writer=Recorder(),
            batch_size=5,
        )
    )

    assert [b.batch_number for b in result.batches] == [1]
    assert result.error is not None


def test_unexpected_writer_error_is_reported(tmp_path):
    def failing_writer(path, header, rows):
        raise PermissionError(path)

    result = asyncio.run(
        run_zone(
            str(tmp_path / "HSN_x"),
            lister=lambda _: ["a.xlsx"],
            reader=_reader,
            writer=failing_writer,
        )
    )

    assert result.zone == "HSN"
    assert result.error.startswith("PermissionError")
