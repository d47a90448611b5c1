from .blocks import Block, BlockKind, CommentSpan, PairGroup, ProcessedFile

__all__ = ["Block", "BlockKind", "CommentSpan", "PairGroup", "ProcessedFile"]
