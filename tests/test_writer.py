"""
Tests for the component writer
"""
import pytest

from jokoui_mcp.core.errors import WriteFailedError
from jokoui_mcp.services.writer import write_component


def test_write_creates_parents(tmp_path):
    target = tmp_path / "a" / "b" / "Card.tsx"

    outcome = write_component("export {}\n", str(target))

    assert outcome.output_path == str(target)
    assert outcome.bytes_written == 10
    assert target.read_text() == "export {}\n"


def test_write_counts_utf8_bytes(tmp_path):
    target = tmp_path / "Café.tsx"

    outcome = write_component("// café\n", str(target))

    assert outcome.bytes_written == len("// café\n".encode("utf-8"))


def test_write_preserves_line_endings(tmp_path):
    target = tmp_path / "Crlf.tsx"

    write_component("a\r\nb\n", str(target))

    assert target.read_bytes() == b"a\r\nb\n"


def test_write_without_directory_creation(tmp_path):
    target = tmp_path / "absent" / "Card.tsx"

    with pytest.raises(WriteFailedError) as exc_info:
        write_component("export {}", str(target), create_directories=False)

    assert exc_info.value.output_path == str(target)
    assert exc_info.value.message.startswith("Failed to write component:")
    assert not target.parent.exists()


def test_write_into_existing_directory_without_creation(tmp_path):
    target = tmp_path / "Card.tsx"

    write_component("export {}", str(target), create_directories=False)

    assert target.exists()


def test_write_over_a_directory_fails(tmp_path):
    with pytest.raises(WriteFailedError):
        write_component("export {}", str(tmp_path))
