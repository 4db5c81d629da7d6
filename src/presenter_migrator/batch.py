"""Two-phase batch migration of a directory of Presenter songs."""
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .constants import DEFAULT_ENCODING, PRESENTER_GLOB
from .errors import MigrationError
from .files import load_document, pro5_name, read_song, write_document, write_text_output
from .merge import update_from
from .renderers import RenderFormat, render

# Set up logger
logger = logging.getLogger(__name__)

# Per-file failures that skip the file instead of aborting the batch
FILE_ERRORS = (MigrationError, OSError, ValueError)


@dataclass
class BatchResult:
    """Files converted and files skipped by a batch run."""
    converted: list[Path] = field(default_factory=list)
    failed: list[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def __str__(self) -> str:
        return f"{len(self.converted)} converted, {len(self.failed)} failed"


def presenter_files(source_dir: Path) -> list[Path]:
    """Presenter song files in source_dir, in name order."""
    return sorted(path for path in source_dir.glob(PRESENTER_GLOB) if path.is_file())


def extract_plain_text(
    source_dir: Path,
    output_dir: Path,
    encoding: str = DEFAULT_ENCODING,
    fmt: RenderFormat = RenderFormat.PLAIN_TEXT,
) -> BatchResult:
    """Phase 1: strip Presenter files down to text for ProPresenter's import."""
    output_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Extracting {fmt.value} from {source_dir} into {output_dir}")

    result = BatchResult()
    for path in presenter_files(source_dir):
        try:
            song = read_song(path, encoding)
            dst = write_text_output(output_dir, path.name, render(song, fmt), encoding)
        except FILE_ERRORS as e:
            logger.error(f"{path.name}: Extraction failed - {e}")
            result.failed.append(path)
            continue

        logger.info(f"{path.name}: {song}")
        result.converted.append(dst)

    logger.info(f"Extraction complete: {result}")
    return result


def supplement_metadata(
    source_dir: Path,
    propresenter_dir: Path,
    output_dir: Path,
    encoding: str = DEFAULT_ENCODING,
    strict: bool = False,
) -> BatchResult:
    """Phase 2: add Presenter metadata to the .pro5 files ProPresenter imported."""
    output_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Supplementing {propresenter_dir} from {source_dir} into {output_dir}")

    result = BatchResult()
    for path in presenter_files(source_dir):
        name = pro5_name(path.name)
        try:
            song = read_song(path, encoding)
            document = load_document(propresenter_dir / name, encoding)
            logger.debug(f"{path.name}: {len(song.slides)} slides, {len(document.slide_groups)} slide groups")
            update_from(document, song, strict=strict, source=path.name)
            dst = write_document(output_dir, name, document)
        except FILE_ERRORS as e:
            logger.error(f"{path.name}: Merge failed - {e}")
            result.failed.append(path)
            continue

        logger.info(f"{name}: {song}")
        result.converted.append(dst)

    logger.info(f"Merge complete: {result}")
    return result
