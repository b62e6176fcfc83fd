"""Persist component code to disk."""
from dataclasses import dataclass
from pathlib import Path

from jokoui_mcp.core.errors import WriteFailedError
from jokoui_mcp.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class WriteOutcome:
    output_path: str
    bytes_written: int


def write_component(code: str, output_path: str, create_directories: bool = True) -> WriteOutcome:
    """
    Write ``code`` to ``output_path`` as UTF-8.

    Parent directories are created only when ``create_directories`` is true;
    otherwise a missing parent is an error.

    Raises:
        WriteFailedError: on any filesystem error.
    """
    path = Path(output_path)
    data = code.encode("utf-8")

    try:
        if create_directories:
            path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as fh:
            fh.write(data)
    except OSError as e:
        logger.error("writer.file.failed", extra={"output_path": output_path}, exc_info=e)
        raise WriteFailedError(output_path, str(e)) from e

    logger.info("writer.file.written", extra={"output_path": output_path, "bytes": len(data)})
    return WriteOutcome(output_path=output_path, bytes_written=len(data))
