from __future__ import annotations

from failchain.application.accessors import call_stack_of, info_list_of


def format_error(err: BaseException | None, verbose: bool = False) -> str:
    """Render *err* on one line, or with its info and call stack when *verbose*.

    Verbose output looks like::

        main.load(not_found): open config
            path = /etc/app.toml
            [CallStack]
            [main.load] /srv/app/main.py:12
    """
    if err is None:
        return ""
    text = str(err)
    if not verbose:
        return text

    lines = [text]
    for info in info_list_of(err):
        for key, value in info.items():
            lines.append(f"    {key} = {value}")
    stack = call_stack_of(err)
    if stack:
        lines.append("    [CallStack]")
        for frame in stack.frames:
            lines.append(f"    [{frame.func}] {frame.file}:{frame.line}")
    return "\n".join(lines)
