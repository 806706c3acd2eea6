from pathlib import Path

import pytest

from actions import Action, AppContext, file_action, output_path, text_action
from algorithms.errors import IOFailure, MalformedInput


@pytest.fixture
def ctx(tmp_path):
    return AppContext(working_dir=tmp_path)


class TestTextAction:
    def test_encode(self, ctx):
        assert text_action(Action.ENCODE, "aaa", ctx) == "0361"

    def test_decode_strips_surrounding_whitespace(self, ctx):
        assert text_action(Action.DECODE, "  0361\n", ctx) == "aaa"

    def test_decode_malformed(self, ctx):
        with pytest.raises(MalformedInput):
            text_action(Action.DECODE, "036", ctx)

    def test_verbose_prints_summary(self, tmp_path, capsys):
        text_action(Action.ENCODE, "aaa", AppContext(working_dir=tmp_path, verbose=True))
        assert "Encoded 3 characters into 4" in capsys.readouterr().out


class TestOutputPath:
    def test_suffix_next_to_source(self, ctx):
        assert output_path("/data/photo.bmp", Action.ENCODE, ctx) == Path("/data/photo.bmp.encoded")
        assert output_path("/data/photo.bmp.encoded", Action.DECODE, ctx) == Path(
            "/data/photo.bmp.encoded.decoded"
        )

    def test_output_dir(self, tmp_path):
        ctx = AppContext(working_dir=tmp_path, output_dir=tmp_path / "out")
        assert output_path("/data/a.txt", Action.ENCODE, ctx) == tmp_path / "out" / "a.txt.encoded"

    def test_context_is_immutable(self, ctx):
        with pytest.raises(AttributeError):
            ctx.verbose = True


class TestFileAction:
    def test_encode_then_decode(self, ctx, tmp_path):
        data = b"\x00" * 700 + b"header" + bytes(range(256))
        source = tmp_path / "sample.bin"
        source.write_bytes(data)

        encoded = file_action(Action.ENCODE, source, ctx)
        assert encoded.destination == tmp_path / "sample.bin.encoded"
        assert encoded.input_size == len(data)
        assert encoded.output_size == len(encoded.destination.read_bytes())
        assert encoded.destination.read_bytes()[:6] == bytes([255, 0, 255, 0, 190, 0])

        decoded = file_action(Action.DECODE, encoded.destination, ctx)
        assert decoded.destination == tmp_path / "sample.bin.encoded.decoded"
        assert decoded.destination.read_bytes() == data

    def test_relative_source_uses_working_dir(self, ctx, tmp_path):
        (tmp_path / "a.txt").write_bytes(b"zz")
        result = file_action(Action.ENCODE, "a.txt", ctx)
        assert result.destination.read_bytes() == bytes([2, ord("z")])

    def test_empty_file(self, ctx, tmp_path):
        (tmp_path / "empty").write_bytes(b"")
        result = file_action(Action.ENCODE, "empty", ctx)
        assert result.output_size == 0

    def test_missing_file_is_io_failure(self, ctx, tmp_path):
        with pytest.raises(IOFailure) as excinfo:
            file_action(Action.ENCODE, tmp_path / "missing.bin", ctx)
        assert excinfo.value.path == str(tmp_path / "missing.bin")
        assert not (tmp_path / "missing.bin.encoded").exists()

    def test_unwritable_destination_is_io_failure(self, tmp_path):
        (tmp_path / "a.txt").write_bytes(b"abc")
        ctx = AppContext(working_dir=tmp_path, output_dir=tmp_path / "no" / "such" / "dir")
        with pytest.raises(IOFailure):
            file_action(Action.ENCODE, "a.txt", ctx)

    def test_malformed_file_writes_nothing(self, ctx, tmp_path):
        (tmp_path / "bad.encoded").write_bytes(b"\x02\x41\x05")
        with pytest.raises(MalformedInput):
            file_action(Action.DECODE, "bad.encoded", ctx)
        assert not (tmp_path / "bad.encoded.decoded").exists()

    def test_io_failure_is_not_malformed_input(self, ctx, tmp_path):
        with pytest.raises(OSError):
            file_action(Action.DECODE, tmp_path / "missing", ctx)
