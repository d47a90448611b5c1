import pytest

from litforge.errors import UnsupportedLanguageError
from litforge.utils.language import (
    COMMENT_STRATEGIES,
    EXTENSION_LANGUAGES,
    get_block_language,
    get_language_for_path,
    get_lexer_alias,
    is_supported_path,
)


@pytest.mark.parametrize(
    "path,language",
    [
        ("hello.c", "c"),
        ("include/io.H", "c"),
        ("app.mjs", "javascript"),
        ("app.ts", "typescript"),
        ("lib.rs", "rust"),
        ("tool.py", "python"),
        ("board/flash.ld", "linker-script"),
    ],
)
def test_language_for_path(path, language):
    assert get_language_for_path(path) == language


@pytest.mark.parametrize("path", ["data.xyz", "Makefile"])
def test_unsupported_paths(path):
    assert not is_supported_path(path)
    with pytest.raises(UnsupportedLanguageError):
        get_language_for_path(path)


def test_every_language_has_a_strategy():
    assert set(EXTENSION_LANGUAGES.values()) <= set(COMMENT_STRATEGIES)


def test_block_language_and_lexer_alias():
    assert get_block_language("src/main.rs") == "rs"
    assert get_lexer_alias("rs") == "rust"
    assert get_lexer_alias("ld") == "text"
    assert get_lexer_alias("nope") == "text"
