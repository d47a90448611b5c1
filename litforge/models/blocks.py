from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple


class BlockKind(str, Enum):
    COMMENT = "comment"
    CODE = "code"


@dataclass(frozen=True)
class CommentSpan:
    """A located comment, delimiters included. Lines are 1-indexed and inclusive."""

    line_start: int
    line_end: int
    raw_text: str


@dataclass(frozen=True)
class Block:
    """One unit of output: normalized prose or raw source lines."""

    kind: BlockKind
    content: str
    line_start: int
    line_end: int
    source_file: str
    language: Optional[str] = None  # Code blocks only

    @property
    def is_comment(self) -> bool:
        return self.kind is BlockKind.COMMENT

    @property
    def is_code(self) -> bool:
        return self.kind is BlockKind.CODE


@dataclass(frozen=True)
class ProcessedFile:
    """All blocks of one input file plus the base URL used for source links."""

    file_name: str
    blocks: Tuple[Block, ...]
    base_url: Optional[str] = None

    @property
    def comment_count(self) -> int:
        return sum(1 for b in self.blocks if b.is_comment)

    @property
    def code_count(self) -> int:
        return sum(1 for b in self.blocks if b.is_code)


class PairGroup(NamedTuple):
    """A comment and the code it documents; either side may be missing."""

    comment: Optional[Block]
    code: Optional[Block]

    @property
    def is_paired(self) -> bool:
        return self.comment is not None and self.code is not None
