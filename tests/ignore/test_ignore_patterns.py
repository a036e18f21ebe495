from pathspec.pattern import RegexPattern
from pathspec.patterns import GitWildMatchPattern

from project_publish.ignore.patterns import compile_pattern, match, pattern_text


def _matches(
    pattern: str, text: str, anchored: bool = True, directory_only: bool = False
) -> bool:
    return match(compile_pattern(pattern, anchored, directory_only), text)


def test_pattern_text_folds_rule_flags() -> None:
    assert pattern_text("build", anchored=True, directory_only=True) == "/build/"
    assert pattern_text("Assets/Temp", anchored=False, directory_only=False) == (
        "**/Assets/Temp"
    )
    assert pattern_text("**/temp", anchored=False, directory_only=True) == "**/temp/"
    assert pattern_text("**", anchored=False, directory_only=False) == "**"


def test_compiles_to_git_wildmatch_pattern() -> None:
    assert isinstance(compile_pattern("*.log", anchored=False), GitWildMatchPattern)


def test_star_stays_within_segment() -> None:
    assert _matches("*.cs", "Player.cs")
    assert not _matches("*.cs", "Scripts/Player.cs")


def test_double_star_crosses_segments() -> None:
    assert _matches("Assets/**/*.cs", "Assets/Player.cs")
    assert _matches("Assets/**/*.cs", "Assets/Scripts/AI/Enemy.cs")
    assert _matches("**/temp", "temp")
    assert _matches("**/temp", "a/b/temp")
    assert _matches("docs/**", "docs/a/b.md")
    assert not _matches("docs/**", "docs")


def test_question_mark_is_single_non_separator() -> None:
    assert _matches("file?.txt", "file1.txt")
    assert not _matches("file?.txt", "file10.txt")
    assert not _matches("a?b", "a/b")


def test_character_classes() -> None:
    assert _matches("[Tt]emp", "Temp")
    assert _matches("[Tt]emp", "temp")
    assert not _matches("[!Tt]emp", "temp")
    assert _matches("[!Tt]emp", "xemp")


def test_unclosed_class_is_literal() -> None:
    assert _matches("[abc", "[abc")
    assert not _matches("[abc", "a")


def test_uncompilable_pattern_falls_back_to_literal() -> None:
    matcher = compile_pattern("a[z-b]c", anchored=True)

    assert isinstance(matcher, RegexPattern)
    assert match(matcher, "a[z-b]c")
    assert not match(matcher, "abc")


def test_backslash_escapes_next_character() -> None:
    assert _matches("\\*.txt", "*.txt")
    assert not _matches("\\*.txt", "a.txt")


def test_unanchored_pattern_matches_at_segment_boundary() -> None:
    assert _matches("build", "src/build", anchored=False)
    assert not _matches("build", "src/mybuild", anchored=False)
    assert not _matches("build", "src/build", anchored=True)


def test_unanchored_pattern_with_slash_matches_at_any_depth() -> None:
    assert _matches("Assets/Temp", "Assets/Temp", anchored=False)
    assert _matches("Assets/Temp", "Sub/Assets/Temp", anchored=False)
    assert not _matches("Assets/Temp", "Sub/Assets/Temp", anchored=True)


def test_directory_only_pattern_needs_trailing_slash() -> None:
    assert _matches("build", "build/", directory_only=True)
    assert _matches("build", "build/output/x.bin", directory_only=True)
    assert not _matches("build", "build", directory_only=True)


def test_empty_pattern_matches_nothing() -> None:
    assert compile_pattern("", anchored=True) is None
    assert not _matches("", "")
    assert not _matches("", "anything", anchored=False)
