"""Tests for scripts/export_registrations.py."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from festadmin.errors import StoreConnectionError
from scripts import export_registrations
from tests.fixtures.registrations import make_participant, make_record


@pytest.fixture
def pocketbase_class(mock_pocketbase):
    """Patch the client class the connector builds from settings."""
    with patch("festadmin.store.PocketBase", return_value=mock_pocketbase) as mock_class:
        yield mock_class


class TestExport:
    """Tests for export()."""

    def test_writes_pdf_named_after_event(self, tmp_path: Path, pocketbase_class):
        records = pocketbase_class.return_value.collection.return_value
        records.get_full_list.return_value = [
            make_record("r1", "A", "Quiz", [make_participant("Ann")]),
        ]

        with patch.dict("os.environ", {"POCKETBASE_URL": "http://store.test"}):
            path = export_registrations.export("Quiz", tmp_path / "out")

        assert path == tmp_path / "out" / "Quiz_Registrations.pdf"
        assert path.read_bytes().startswith(b"%PDF")

    def test_unfiltered_export(self, tmp_path: Path, pocketbase_class):
        path = export_registrations.export(None, tmp_path)

        assert path.name == "All_Events_Registrations.pdf"


class TestMain:
    """Tests for the command line entry point."""

    def test_store_failure_exits_non_zero(self, tmp_path: Path):
        argv = ["export_registrations.py", "--output-dir", str(tmp_path)]
        with patch("sys.argv", argv), patch.object(
            export_registrations, "export", side_effect=StoreConnectionError("down")
        ):
            with pytest.raises(SystemExit) as exc_info:
                export_registrations.main()

        assert exc_info.value.code == 1
        assert list(tmp_path.iterdir()) == []
