"""Unit tests – filesystem adapter (bundled dataset source, local saver)."""
from __future__ import annotations

import asyncio
import base64
from pathlib import Path

import pytest

from grant_tracker.adapters.filesystem import BundledResourceSource, LocalFileSaver
from grant_tracker.application.export import DatasetExporter, DatasetSource, FileSaver
from grant_tracker.kernel.errors import SaveFailedError, SourceUnavailableError


# ---------------------------------------------------------------------------
# BundledResourceSource
# ---------------------------------------------------------------------------
class TestBundledResourceSource:
    def test_reads_and_strips(self, tmp_path: Path):
        resource = tmp_path / "decisions.b64"
        resource.write_text("SGVsbG8sV29ybGQ=\n", encoding="utf-8")
        assert asyncio.run(BundledResourceSource(resource).fetch()) == "SGVsbG8sV29ybGQ="

    def test_accepts_str_path(self, tmp_path: Path):
        resource = tmp_path / "decisions.b64"
        resource.write_text("YQ==")
        assert asyncio.run(BundledResourceSource(str(resource)).fetch()) == "YQ=="

    def test_missing_file_is_unavailable(self, tmp_path: Path):
        source = BundledResourceSource(tmp_path / "missing.b64")
        with pytest.raises(SourceUnavailableError) as exc_info:
            asyncio.run(source.fetch())
        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert exc_info.value.source.endswith("missing.b64")

    def test_undecodable_file_is_unavailable(self, tmp_path: Path):
        resource = tmp_path / "latin1.b64"
        resource.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(SourceUnavailableError):
            asyncio.run(BundledResourceSource(resource).fetch())

    def test_from_package(self):
        source = BundledResourceSource.from_package("grant_tracker", "__init__.py")
        assert "grant_tracker" in asyncio.run(source.fetch())

    def test_satisfies_port(self, tmp_path: Path):
        assert isinstance(BundledResourceSource(tmp_path / "x"), DatasetSource)


# ---------------------------------------------------------------------------
# LocalFileSaver
# ---------------------------------------------------------------------------
class TestLocalFileSaver:
    def test_writes_file(self, tmp_path: Path):
        saver = LocalFileSaver(tmp_path)
        location = asyncio.run(saver.save(b"a,b\n", "out.csv", "text/csv"))
        assert Path(location) == tmp_path / "out.csv"
        assert (tmp_path / "out.csv").read_bytes() == b"a,b\n"

    def test_creates_directory(self, tmp_path: Path):
        target = tmp_path / "nested" / "downloads"
        asyncio.run(LocalFileSaver(target).save(b"x", "out.csv", "text/csv"))
        assert (target / "out.csv").exists()

    def test_does_not_overwrite_by_default(self, tmp_path: Path):
        saver = LocalFileSaver(tmp_path)

        async def run() -> list[str]:
            return [await saver.save(bytes([n]), "out.csv", "text/csv") for n in range(3)]

        locations = [Path(p).name for p in asyncio.run(run())]
        assert locations == ["out.csv", "out_1.csv", "out_2.csv"]
        assert (tmp_path / "out.csv").read_bytes() == b"\x00"
        assert (tmp_path / "out_2.csv").read_bytes() == b"\x02"

    def test_overwrite_replaces(self, tmp_path: Path):
        saver = LocalFileSaver(tmp_path, overwrite=True)
        asyncio.run(saver.save(b"old", "out.csv", "text/csv"))
        asyncio.run(saver.save(b"new", "out.csv", "text/csv"))
        assert (tmp_path / "out.csv").read_bytes() == b"new"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["out.csv"]

    @pytest.mark.parametrize("name", ["", "../escape.csv", "sub/dir.csv"])
    def test_rejects_paths(self, tmp_path: Path, name: str):
        with pytest.raises(SaveFailedError):
            asyncio.run(LocalFileSaver(tmp_path).save(b"x", name, "text/csv"))

    def test_os_error_becomes_save_failed(self, tmp_path: Path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        with pytest.raises(SaveFailedError) as exc_info:
            asyncio.run(LocalFileSaver(blocker).save(b"x", "out.csv", "text/csv"))
        assert isinstance(exc_info.value.cause, OSError)

    def test_satisfies_port(self, tmp_path: Path):
        assert isinstance(LocalFileSaver(tmp_path), FileSaver)


class TestBundledToLocalPipeline:
    def test_end_to_end(self, tmp_path: Path):
        resource = tmp_path / "decisions.b64"
        resource.write_text(base64.b64encode(b"office,fy\nHouston,2021\n").decode())
        out = tmp_path / "downloads"
        exporter = DatasetExporter(BundledResourceSource(resource), LocalFileSaver(out))

        doc = asyncio.run(exporter.export())

        assert (out / "asylum_decisions.csv").read_bytes() == doc.content
        assert doc.text() == "office,fy\nHouston,2021\n"
