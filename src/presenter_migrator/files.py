"""Reading and writing Presenter and ProPresenter files with an explicit encoding."""
import os
import re
import tempfile
from pathlib import Path

from .constants import DEFAULT_ENCODING
from .document import ProPresenter5Document
from .parser import parse_song
from .types import Song


def read_song(path: Path, encoding: str = DEFAULT_ENCODING) -> Song:
    """Read and parse a Presenter song file."""
    return parse_song(path.read_text(encoding=encoding))


def pro5_name(filename: str) -> str:
    """Name of the .pro5 file imported from a Presenter file (first "txt" becomes "pro5")."""
    return re.sub("txt", "pro5", filename, count=1, flags=re.IGNORECASE)


def load_document(path: Path, encoding: str = DEFAULT_ENCODING) -> ProPresenter5Document:
    return ProPresenter5Document(path.read_bytes(), encoding=encoding)


def _write_atomic(dst: Path, data: bytes) -> None:
    # dst only ever appears complete
    fd, tmp = tempfile.mkstemp(dir=dst.parent, prefix=f".{dst.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp, dst)
    except BaseException:
        os.unlink(tmp)
        raise


def _terminated(data: bytes) -> bytes:
    return data if data.endswith(b"\n") else data + b"\n"


def write_text_output(out_dir: Path, name: str, text: str, encoding: str = DEFAULT_ENCODING) -> Path:
    """Write rendered song text to out_dir/name."""
    data = _terminated(text.encode(encoding))
    dst = out_dir / name
    _write_atomic(dst, data)
    return dst


def write_document(out_dir: Path, name: str, document: ProPresenter5Document) -> Path:
    """Serialize a ProPresenter document to out_dir/name."""
    data = _terminated(document.to_bytes())
    dst = out_dir / name
    _write_atomic(dst, data)
    return dst
