"""
Language signature table used for snippet classification.

Each language maps to keywords (+1 each when found as a substring) and
regular expressions (+2 each when they match). Patterns run against the
lowercased snippet. Declaration order is significant: on equal scores the
language declared first wins.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class LanguageSignature:
    keywords: tuple[str, ...]
    patterns: tuple[re.Pattern[str], ...]


def _signature(keywords: list[str], patterns: list[str]) -> LanguageSignature:
    return LanguageSignature(
        keywords=tuple(keywords),
        patterns=tuple(re.compile(p) for p in patterns),
    )


SIGNATURES = MappingProxyType(
    {
        "JavaScript": _signature(
            ["const", "let", "var", "function", "return", "export", "import", "from", "=>"],
            [
                r"console\.log\(",
                r"const\s+\w+\s*=",
                r"function\s+\w+\s*\(",
                r"import\s+.*\s+from\s+",
            ],
        ),
        "TypeScript": _signature(
            ["interface", "type", "namespace", "readonly", "private", "public", "protected"],
            [
                r":\s*string\b",
                r":\s*number\b",
                r":\s*boolean\b",
                r"<[\w\s,]+>",
                r"interface\s+\w+\s*\{",
            ],
        ),
        "Python": _signature(
            ["def", "class", "import", "from", "as", "with", "self", "if", "elif", "else"],
            [
                r"def\s+\w+\s*\(",
                r"class\s+\w+\s*:",
                r"if\s+.*:",
                r"import\s+\w+",
                r"(?m)#.*$",
            ],
        ),
        "HTML": _signature(
            ["div", "span", "class", "href", "src"],
            [r"(?i)</?[a-z][\s\S]*>", r"(?i)<html", r"(?i)<div", r"(?i)<body", r"(?i)<head"],
        ),
        "CSS": _signature(
            ["margin", "padding", "color", "background", "width", "height", "display"],
            [r"\{[\s\S]*\}", r";\s*\Z", r"(?i)#[a-f0-9]{3,6}", r"\.\w+\s*\{"],
        ),
        "SQL": _signature(
            [
                "select",
                "from",
                "where",
                "join",
                "group by",
                "having",
                "order by",
                "insert",
                "update",
                "delete",
            ],
            [
                r"(?i)select\s+.*\s+from",
                r"(?i)create\s+table",
                r"(?i)insert\s+into",
                r"(?i)update\s+.*\s+set",
            ],
        ),
        "Java": _signature(
            [
                "public",
                "private",
                "protected",
                "class",
                "interface",
                "extends",
                "implements",
                "void",
                "static",
            ],
            [
                r"public\s+class",
                r"public\s+static\s+void\s+main",
                r"\w+\s+\w+\s*=\s*new\s+\w+",
            ],
        ),
        "CSharp": _signature(
            ["namespace", "using", "class", "var", "string", "int", "bool", "void", "async", "await"],
            [r"namespace\s+\w+", r"class\s+\w+", r"using\s+\w+;", r"\w+<\w+>"],
        ),
        "PHP": _signature(
            ["function", "echo", "print", "require", "include", "namespace", "use", "$"],
            [
                r"<\?php",
                r"\$\w+\s*=",
                r"function\s+\w+\s*\(.*\)\s*\{",
                r"echo\s+",
            ],
        ),
        "Ruby": _signature(
            ["def", "end", "class", "module", "require", "include", "attr_accessor", "do"],
            [
                r"def\s+\w+",
                r"class\s+\w+",
                r"\w+\.each\s+do",
                r"attr_accessor\s+:\w+",
            ],
        ),
        "Go": _signature(
            ["func", "package", "import", "var", "const", "struct", "interface", "go", "chan", "defer"],
            [
                r"func\s+\w+\(",
                r"package\s+\w+",
                r"import\s+\([\s\S]*\)",
                r"type\s+\w+\s+struct",
            ],
        ),
        "Rust": _signature(
            ["fn", "let", "mut", "struct", "enum", "impl", "trait", "match", "use", "mod"],
            [
                r"fn\s+\w+\s*\(",
                r"let\s+mut\s+\w+",
                r"impl\s+\w+\s+for",
                r"use\s+\w+::\w+",
            ],
        ),
        "JSON": _signature(
            [],
            [
                r"\A\s*\{[\s\S]*\}\s*\Z",
                r'"[\w\s]+"\s*:\s*["{\[\d]',
                r"\[[\s\S]*\]",
            ],
        ),
        "Markdown": _signature(
            [],
            [
                r"(?m)^#\s+.*$",
                r"\*\*.*\*\*",
                r"\[.*\]\(.*\)",
                r"```[\s\S]*```",
            ],
        ),
    }
)

# Literal prefixes that decide the language without scoring
PREFIX_LANGUAGES: tuple[tuple[str, str], ...] = (
    ("<?xml", "XML"),
    ("<!doctype html", "HTML"),
    ("<?php", "PHP"),
)

KNOWN_LANGUAGES: frozenset[str] = frozenset(SIGNATURES) | frozenset(
    language for _, language in PREFIX_LANGUAGES
)
