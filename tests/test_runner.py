"""
End-to-end import tests.

Each test builds a small cache of gzip Contents files in tmp_path and runs a
complete import, then inspects the resulting database.
"""

import sqlite3

import pytest

from contentsdb.indexer.exceptions import ContentsFileError, MalformedLineError
from contentsdb.indexer.orchestrator import ImportOrchestrator
from contentsdb.indexer.runner import run_contents_import
from contentsdb.indexer.schemas import SCHEMA_TABLES


class TestEndToEnd:
    def test_two_line_sample_v1(self, contents_cache, write_contents, fetch_rows, tmp_path):
        write_contents("", ["usr/bin/foo  admin/foo", "usr/bin/bar  admin/bar,admin/baz"])

        result = run_contents_import(
            "noble", 1, cache_dir=contents_cache, db_path=tmp_path / "out.sqlite3"
        )

        assert fetch_rows(result.db_path, "path_package") == [
            ("usr/bin/bar", "bar"),
            ("usr/bin/foo", "foo"),
        ]

    def test_default_database_name(self, contents_cache, write_contents, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        write_contents("", ["usr/bin/foo admin/foo"])

        result = run_contents_import("noble", 2, cache_dir=contents_cache)

        assert result.db_path.name == "contents-noble_v2.sqlite3"
        assert (tmp_path / "contents-noble_v2.sqlite3").exists()

    def test_arch_selects_contents_files(self, contents_cache, write_contents, fetch_rows, tmp_path):
        for pocket in ["-proposed", "", "-security", "-updates"]:
            write_contents(pocket, [], arch="arm64")
        write_contents("", ["usr/bin/foo admin/foo-arm"], arch="arm64")

        result = run_contents_import(
            "noble", 1, cache_dir=contents_cache, db_path=tmp_path / "out.sqlite3", arch="arm64"
        )

        assert fetch_rows(result.db_path, "path_package") == [("usr/bin/foo", "foo-arm")]
        assert result.pockets[1].filename == "noble-Contents-arm64.gz"


class TestPocketOrder:
    """-proposed, release, -security, -updates: later pockets win."""

    @pytest.fixture
    def pockets(self, write_contents):
        write_contents("-proposed", ["usr/bin/vim editors/vim-proposed", "usr/bin/ed editors/ed"])
        write_contents("", ["usr/bin/vim editors/vim-release"])
        write_contents("-security", ["usr/bin/vim editors/vim-security"])
        write_contents("-updates", ["usr/bin/vim editors/vim-updates"])

    def test_contents_files_order(self, contents_cache):
        orchestrator = ImportOrchestrator(None, contents_cache, "noble")
        assert [p.name for p in orchestrator.contents_files()] == [
            "noble-proposed-Contents-amd64.gz",
            "noble-Contents-amd64.gz",
            "noble-security-Contents-amd64.gz",
            "noble-updates-Contents-amd64.gz",
        ]

    def test_flat(self, pockets, contents_cache, fetch_rows, tmp_path):
        result = run_contents_import("noble", 1, cache_dir=contents_cache, db_path=tmp_path / "db")
        assert fetch_rows(result.db_path, "path_package") == [
            ("usr/bin/ed", "ed"),
            ("usr/bin/vim", "vim-updates"),
        ]

    def test_package_normalized(self, pockets, contents_cache, tmp_path):
        result = run_contents_import("noble", 2, cache_dir=contents_cache, db_path=tmp_path / "db")
        conn = sqlite3.connect(result.db_path)
        try:
            owner = conn.execute(
                """SELECT p.package FROM path_package pp
                   JOIN packages p ON p.id = pp.package_id WHERE pp.path = 'usr/bin/vim'"""
            ).fetchone()
        finally:
            conn.close()
        assert owner == ("vim-updates",)
        assert result.packages == 5
        assert result.directories is None
        assert result.row_counts == {"packages": 5, "path_package": 2}

    def test_directory_normalized(self, pockets, contents_cache, fetch_rows, tmp_path):
        result = run_contents_import("noble", 3, cache_dir=contents_cache, db_path=tmp_path / "db")
        assert fetch_rows(result.db_path, "directories") == [(1, "usr/bin")]
        assert fetch_rows(result.db_path, "packages") == [
            (1, "vim-proposed"),
            (2, "ed"),
            (3, "vim-release"),
            (4, "vim-security"),
            (5, "vim-updates"),
        ]
        assert fetch_rows(result.db_path, "directory_name_package") == [
            (1, "ed", 2),
            (1, "vim", 5),
        ]
        assert result.packages == 5
        assert result.directories == 1


class TestStatistics:
    def test_counts_per_pocket(self, contents_cache, write_contents, tmp_path, log_messages):
        write_contents(
            "",
            [
                "usr/bin/foo admin/foo",
                "usr/share/doc/foo/README admin/foo",
                "boot/vmlinuz kernel/linux-image",
            ],
        )

        result = run_contents_import("noble", 2, cache_dir=contents_cache, db_path=tmp_path / "db")

        release = result.pockets[1]
        assert (release.filename, release.lines, release.processed) == (
            "noble-Contents-amd64.gz",
            3,
            1,
        )
        assert release.percentage == pytest.approx(33.333, rel=1e-3)
        assert result.pockets[0].percentage == 0.0
        assert (result.lines, result.processed) == (3, 1)

        assert "Added paths to database: 1/3 (33.3 %)" in log_messages
        assert "Added paths to database: 0/0 (0.0 %)" in log_messages
        assert "Entries in packages table: 1" in log_messages

    def test_directories_summary_logged(self, contents_cache, write_contents, tmp_path, log_messages):
        write_contents("", ["usr/bin/foo admin/foo", "usr/sbin/bar admin/bar"])

        run_contents_import("noble", 3, cache_dir=contents_cache, db_path=tmp_path / "db")

        assert "Entries in packages table: 2" in log_messages
        assert "Entries in directories table: 2" in log_messages


class TestIdempotence:
    @pytest.mark.parametrize("version", [1, 2, 3])
    def test_rerun_gives_identical_rows(self, version, contents_cache, write_contents, fetch_rows, tmp_path):
        write_contents("-proposed", ["usr/bin/a admin/a", "usr/lib/x86_64-linux-gnu/libb.so.1 libs/libb1"])
        write_contents("", ["usr/bin/a admin/a2", "usr/bin/c admin/c,admin/d"])
        write_contents("-updates", ["usr/lib/x86_64-linux-gnu/libb.so.1 libs/libb1-new"])

        first = run_contents_import("noble", version, cache_dir=contents_cache, db_path=tmp_path / "1.db")
        second = run_contents_import("noble", version, cache_dir=contents_cache, db_path=tmp_path / "2.db")

        for table in SCHEMA_TABLES[version]:
            assert fetch_rows(first.db_path, table) == fetch_rows(second.db_path, table)
        assert (first.packages, first.directories) == (second.packages, second.directories)


class TestFailures:
    """Any error aborts the run and leaves no database file behind."""

    @pytest.mark.parametrize("version", [1, 2, 3])
    def test_malformed_line(self, version, contents_cache, write_contents, tmp_path):
        write_contents("", ["usr/bin/foo admin/foo"])
        write_contents("-security", ["usr/bin/bar admin/bar", "usr/bin/broken"])
        db_path = tmp_path / "out.sqlite3"

        with pytest.raises(MalformedLineError, match="usr/bin/broken"):
            run_contents_import("noble", version, cache_dir=contents_cache, db_path=db_path)

        assert not db_path.exists()

    def test_missing_pocket(self, contents_cache, write_contents, tmp_path):
        write_contents("", ["usr/bin/foo admin/foo"])
        (contents_cache / "noble-updates-Contents-amd64.gz").unlink()
        db_path = tmp_path / "out.sqlite3"

        with pytest.raises(ContentsFileError, match="noble-updates-Contents-amd64.gz"):
            run_contents_import("noble", 2, cache_dir=contents_cache, db_path=db_path)

        assert not db_path.exists()

    def test_corrupt_pocket(self, contents_cache, tmp_path):
        (contents_cache / "noble-security-Contents-amd64.gz").write_bytes(b"not gzip at all\n")
        db_path = tmp_path / "out.sqlite3"

        with pytest.raises(ContentsFileError):
            run_contents_import("noble", 3, cache_dir=contents_cache, db_path=db_path)

        assert not db_path.exists()

    def test_unknown_release(self, contents_cache, tmp_path):
        db_path = tmp_path / "out.sqlite3"
        with pytest.raises(ContentsFileError, match="plucky-proposed"):
            run_contents_import("plucky", 1, cache_dir=contents_cache, db_path=db_path)
        assert not db_path.exists()

    def test_existing_database_is_refused_and_kept(self, contents_cache, tmp_path):
        db_path = tmp_path / "out.sqlite3"
        run_contents_import("noble", 1, cache_dir=contents_cache, db_path=db_path)

        with pytest.raises(sqlite3.OperationalError, match="already exists"):
            run_contents_import("noble", 1, cache_dir=contents_cache, db_path=db_path)

        assert db_path.exists()
