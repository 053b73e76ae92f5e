"""Built-in language table and run defaults."""

from commentscan.models import LanguageSpec

LANGUAGE_ENV_VAR = "COMMENTSCAN_LANGUAGE"
DEFAULT_LANGUAGE = "c"

# Report layout
PATH_COLUMN_WIDTH = 40
TOTAL_COLUMN_WIDTH = 4
COUNT_COLUMN_WIDTH = 3

_C_STYLE = {
    "inline_comment": "//",
    "block_comment_start": "/*",
    "block_comment_end": "*/",
    "escape_char": "\\",
}

LANGUAGES: dict[str, LanguageSpec] = {
    # C and C++ share the preprocessor's backslash continuation
    "c": LanguageSpec(
        name="c",
        line_continuation="\\",
        string_delimiters=('"', "'"),
        extensions=frozenset({".c", ".cpp", ".h", ".hpp"}),
        **_C_STYLE,
    ),
    "java": LanguageSpec(
        name="java",
        string_delimiters=('"', "'"),
        extensions=frozenset({".java"}),
        **_C_STYLE,
    ),
    "javascript": LanguageSpec(
        name="javascript",
        string_delimiters=('"', "'", "`"),
        extensions=frozenset({".js", ".mjs", ".cjs", ".jsx", ".ts", ".tsx"}),
        **_C_STYLE,
    ),
    "go": LanguageSpec(
        name="go",
        string_delimiters=('"', "'", "`"),
        extensions=frozenset({".go"}),
        **_C_STYLE,
    ),
    "rust": LanguageSpec(
        name="rust",
        string_delimiters=('"',),
        extensions=frozenset({".rs"}),
        **_C_STYLE,
    ),
    "csharp": LanguageSpec(
        name="csharp",
        string_delimiters=('"', "'"),
        extensions=frozenset({".cs"}),
        **_C_STYLE,
    ),
    # Triple quotes first so they win over the single-character forms
    "python": LanguageSpec(
        name="python",
        inline_comment="#",
        escape_char="\\",
        string_delimiters=('"""', "'''", '"', "'"),
        extensions=frozenset({".py", ".pyi"}),
    ),
    "shell": LanguageSpec(
        name="shell",
        inline_comment="#",
        escape_char="\\",
        string_delimiters=('"', "'"),
        extensions=frozenset({".sh", ".bash", ".zsh"}),
    ),
}
