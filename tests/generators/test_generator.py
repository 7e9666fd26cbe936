# SPDX-License-Identifier: MIT
"""Tests for ninjawriter.generators.generator."""

import gc
import logging

import pytest

from ninjawriter.core.config import WriterConfig
from ninjawriter.core.errors import GenerateError, PersistenceError
from ninjawriter.generators.generator import BaseWriter, Writer
from ninjawriter.generators.ninja import DocumentWriter


class TestBaseWriter:
    def test_is_writer(self, tmp_path):
        writer = BaseWriter("test", tmp_path / "out.txt")
        assert isinstance(writer, Writer)
        assert writer.name == "test"
        assert writer.path == tmp_path / "out.txt"
        writer.finalize()

    def test_repr(self, tmp_path):
        writer = BaseWriter("test", tmp_path / "out.txt")
        assert repr(writer).startswith("BaseWriter('test', ")
        writer.finalize()

    def test_nothing_written_before_finalize(self, tmp_path):
        path = tmp_path / "build.ninja"
        writer = DocumentWriter(path)
        writer.comment("hello")
        assert not path.exists()
        assert writer.getvalue() == "# hello\n"

        writer.finalize()
        assert path.read_text() == "# hello\n"

    def test_finalize_truncates_existing_file(self, tmp_path):
        path = tmp_path / "build.ninja"
        path.write_text("stale content that is much longer than the new one\n")

        writer = DocumentWriter(path)
        writer.comment("new")
        writer.finalize()

        assert path.read_text() == "# new\n"

    def test_finalize_twice_is_noop(self, tmp_path):
        path = tmp_path / "build.ninja"
        writer = DocumentWriter(path)
        writer.comment("once")
        writer.finalize()
        path.write_text("changed\n")

        writer.finalize()
        assert path.read_text() == "changed\n"
        assert writer.closed

    def test_emit_after_finalize_raises(self, tmp_path):
        writer = DocumentWriter(tmp_path / "build.ninja")
        writer.finalize()
        with pytest.raises(GenerateError, match="finalized"):
            writer.comment("late")

    def test_getvalue_after_finalize(self, tmp_path):
        writer = DocumentWriter(tmp_path / "build.ninja")
        writer.newline()
        writer.finalize()
        assert writer.getvalue() == "\n"

    def test_writes_utf8_with_unix_newlines(self, tmp_path):
        path = tmp_path / "build.ninja"
        writer = DocumentWriter(path)
        writer.comment("héllo")
        writer.variable("a", "b")
        writer.finalize()
        assert path.read_bytes() == "# héllo\na = b\n".encode()

    def test_configured_encoding(self, tmp_path):
        path = tmp_path / "build.ninja"
        writer = DocumentWriter(path, config=WriterConfig(encoding="latin-1"))
        writer.comment("café")
        writer.finalize()
        assert path.read_bytes() == "# café\n".encode("latin-1")


class TestScopedFinalize:
    def test_context_manager_finalizes(self, tmp_path):
        path = tmp_path / "build.ninja"
        with DocumentWriter(path) as writer:
            writer.comment("scoped")
        assert writer.closed
        assert path.read_text() == "# scoped\n"

    def test_context_manager_finalizes_on_error(self, tmp_path):
        path = tmp_path / "build.ninja"
        with pytest.raises(RuntimeError):
            with DocumentWriter(path) as writer:
                writer.comment("partial")
                raise RuntimeError("boom")
        assert path.read_text() == "# partial\n"

    def test_collected_writer_is_flushed(self, tmp_path, caplog):
        path = tmp_path / "build.ninja"
        writer = DocumentWriter(path)
        writer.comment("dropped")

        with caplog.at_level(logging.WARNING, logger="ninjawriter"):
            del writer
            gc.collect()

        assert path.read_text() == "# dropped\n"
        assert "was not finalized" in caplog.text

    def test_finalized_writer_is_not_flushed_again(self, tmp_path):
        path = tmp_path / "build.ninja"
        writer = DocumentWriter(path)
        writer.comment("first")
        writer.finalize()
        path.unlink()

        del writer
        gc.collect()
        assert not path.exists()


class TestPersistenceFailure:
    def test_missing_directory(self, tmp_path, caplog):
        path = tmp_path / "no" / "such" / "dir" / "build.ninja"
        writer = DocumentWriter(path)
        writer.comment("x")

        with caplog.at_level(logging.ERROR, logger="ninjawriter"):
            with pytest.raises(PersistenceError) as exc_info:
                writer.finalize()

        assert exc_info.value.path == path
        assert isinstance(exc_info.value.__cause__, OSError)
        assert "Failed to write" in caplog.text

    def test_failure_is_not_retried(self, tmp_path):
        path = tmp_path / "missing" / "build.ninja"
        writer = DocumentWriter(path)
        with pytest.raises(PersistenceError):
            writer.finalize()

        (tmp_path / "missing").mkdir()
        writer.finalize()
        assert not path.exists()

    def test_destination_is_directory(self, tmp_path):
        writer = DocumentWriter(tmp_path)
        with pytest.raises(PersistenceError):
            writer.finalize()
