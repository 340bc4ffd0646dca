from io import StringIO

from minipyth import Value
from minipyth.reader.opcodes import op_name
from minipyth.types.function import Basic, Composite, Function, HigherOrder
from minipyth.types.value import ErrorValue

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_BASIC = "\033[94m"
COLOR_HIGHER = "\033[92m"
COLOR_COMPOSITE = "\033[90m"

DEFAULT_OPTIONS = {
    "color": False,
    "indent": 2,
}


# ----------------- Values -----------------
def format_value(value: Value) -> str:
    """Integers in decimal, lists as [a, b], errors as `Error: kind in op: payload`."""
    with StringIO() as buffer:
        _write_value(buffer, value)
        return buffer.getvalue()


def _write_value(buffer: StringIO, value: Value) -> None:
    # explicit stack: nesting depth is only bounded by memory
    pending: list = [value]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            buffer.write(item)
        elif isinstance(item, tuple):
            pending.append("]")
            for index in range(len(item) - 1, -1, -1):
                pending.append(item[index])
                if index > 0:
                    pending.append(", ")
            pending.append("[")
        elif isinstance(item, ErrorValue):
            buffer.write(f"Error: {item.kind}")
            if item.source is not None:
                buffer.write(f" in {item.source}")
            if item.payload is not None:
                pending.append(item.payload)
                pending.append(": ")
        else:
            buffer.write(str(item))


# ----------------- Composition trees -----------------
def _colorize(text: str, color: str, options: dict) -> str:
    if options.get("color", False):
        return f"{color}{text}{RESET}"
    return text


def format_function(func: Function, options: dict = DEFAULT_OPTIONS) -> str:
    """One-line rendering: name, name(arg, ...), [f, g, ...]."""
    if isinstance(func, Basic):
        return _colorize(op_name(func.op), COLOR_BASIC, options)
    if isinstance(func, HigherOrder):
        args = ", ".join(format_function(arg, options) for arg in func.args)
        return f"{_colorize(op_name(func.op), COLOR_HIGHER, options)}({args})"
    inner = ", ".join(format_function(sub, options) for sub in func.funcs)
    return _colorize("[", COLOR_COMPOSITE, options) + inner + _colorize("]", COLOR_COMPOSITE, options)


def pprint_function(func: Function, options: dict = DEFAULT_OPTIONS, depth: int = 0) -> str:
    """Indented tree rendering, one node per line, used by --debug."""
    pad = " " * (options.get("indent", 2) * depth)
    if isinstance(func, Basic):
        return pad + _colorize(op_name(func.op), COLOR_BASIC, options)
    if isinstance(func, HigherOrder):
        lines = [pad + _colorize(op_name(func.op), COLOR_HIGHER, options)]
        lines.extend(pprint_function(arg, options, depth + 1) for arg in func.args)
        return "\n".join(lines)
    if not func.funcs:
        return pad + _colorize("[]", COLOR_COMPOSITE, options)
    lines = [pad + _colorize("composite", COLOR_COMPOSITE, options)]
    lines.extend(pprint_function(sub, options, depth + 1) for sub in func.funcs)
    return "\n".join(lines)
