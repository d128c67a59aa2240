"""Reader for Steam's text KeyValues format (``*.vdf`` / ``*.acf``).

    "AppState"
    {
        "appid"     "100"
        "name"      "Game One"
    }

Produces a plain tree of dicts: every scope is a ``dict`` keyed by the quoted
key, leaves are strings. Key order follows the document.
"""
from pathlib import Path
from typing import Dict, Iterator, Tuple, Union

Tree = Dict[str, Union[str, "Tree"]]

_OPEN, _CLOSE, _STRING = "{", "}", "str"

class KeyValuesError(ValueError):
    def __init__(self, message: str, line: int):
        super().__init__(f"line {line}: {message}")
        self.line = line

def _read_quoted(text: str, i: int, line: int) -> Tuple[str, int]:
    # i points just past the opening quote
    out = []
    n = len(text)
    while i < n:
        c = text[i]
        if c == "\\" and i + 1 < n and text[i + 1] in ('"', "\\"):
            out.append(text[i + 1])
            i += 2
            continue
        if c == '"':
            return "".join(out), i + 1
        out.append(c)
        i += 1
    raise KeyValuesError("unterminated quoted string", line)

def _tokens(text: str) -> Iterator[Tuple[str, str, int]]:
    i, n, line = 0, len(text), 1
    while i < n:
        c = text[i]
        if c == "\n":
            line += 1
            i += 1
        elif c.isspace():
            i += 1
        elif c == "/" and text.startswith("//", i):
            nl = text.find("\n", i)
            i = n if nl == -1 else nl
        elif c in "{}":
            yield c, c, line
            i += 1
        elif c == '"':
            start_line = line
            value, i = _read_quoted(text, i + 1, start_line)
            line += value.count("\n")
            yield _STRING, value, start_line
        else:
            j = i
            while j < n and not text[j].isspace() and text[j] not in '{}"':
                j += 1
            word = text[i:j]
            i = j
            # platform conditionals such as [$WIN32] carry no data for us
            if word.startswith("[") and word.endswith("]"):
                continue
            yield _STRING, word, line

def parse(text: str) -> Tree:
    if text.startswith("\ufeff"):
        text = text[1:]
    root: Tree = {}
    stack = [root]
    pending = None
    line = 1

    for kind, value, line in _tokens(text):
        if kind == _STRING:
            if pending is None:
                pending = value
            else:
                stack[-1][pending] = value
                pending = None
        elif kind == _OPEN:
            if pending is None:
                raise KeyValuesError("'{' without a key", line)
            child: Tree = {}
            stack[-1][pending] = child
            stack.append(child)
            pending = None
        else:
            if pending is not None:
                raise KeyValuesError(f"key {pending!r} has no value", line)
            if len(stack) == 1:
                raise KeyValuesError("unbalanced '}'", line)
            stack.pop()

    if pending is not None:
        raise KeyValuesError(f"key {pending!r} has no value", line)
    if len(stack) > 1:
        raise KeyValuesError(f"{len(stack) - 1} scope(s) left open", line)
    return root

def load(path: Union[str, Path]) -> Tree:
    return parse(Path(path).read_text(encoding="utf-8-sig", errors="replace"))

def find_scope(tree: Tree, key: str):
    """Case-insensitive lookup of a child scope; None if absent or not a scope."""
    for k, v in tree.items():
        if k.lower() == key.lower() and isinstance(v, dict):
            return v
    return None
