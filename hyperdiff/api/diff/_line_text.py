from ..repo.LineRecord import LineRecord


def _line_text(line: LineRecord | str) -> str:
    return line.text if isinstance(line, LineRecord) else line
