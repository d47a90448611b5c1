# litforge/core.py
import logging
from typing import Iterable, List, Optional

from ._logging import resolve_logger
from .assemble import assemble_blocks
from .locate import locate
from .models.blocks import Block, ProcessedFile
from .utils.fs import read_source_text
from .utils.language import get_language_for_path


def parse_source_text(source_text: str, file_name: str) -> List[Block]:
    """
    Split already-loaded source text into alternating Comment/Code blocks.

    The language comes from `file_name`'s extension. Raises
    UnsupportedLanguageError or ParserInitError; nothing is skipped silently.
    """
    language = get_language_for_path(file_name)
    spans = locate(source_text, language)
    return assemble_blocks(spans, source_text, file_name)


def parse_source_file(file_path: str) -> List[Block]:
    # Checked before reading so an unsupported file is never opened.
    get_language_for_path(file_path)
    return parse_source_text(read_source_text(file_path), file_path)


def process_files(
    file_names: Iterable[str],
    base_url: Optional[str] = None,
    *,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> List[ProcessedFile]:
    """
    Parse every file in the given order into a ProcessedFile.

    All or nothing: the first ExtractError propagates and no result is returned.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    processed: List[ProcessedFile] = []
    for file_name in file_names:
        lg.info("Processing: %s", file_name)
        blocks = parse_source_file(file_name)
        lg.debug("  - %s: %d block(s)", file_name, len(blocks))
        processed.append(ProcessedFile(file_name=file_name, blocks=tuple(blocks), base_url=base_url))
    return processed
