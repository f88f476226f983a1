"""Hunk-mode file diff command."""

from collections.abc import Iterator

from ..errors.DiffError import DiffError
from ..StageResult import StageResult
from ._error_output import _error_output
from ._open_service import _open_service


def cmd_file(
    path: str,
    old_ref: str | None = None,
    new_ref: str | None = None,
    context_lines: int | None = None,
    repo: str | None = None,
) -> StageResult:
    """Diff ``path`` between ``old_ref`` (default HEAD) and ``new_ref`` (default: working tree)."""
    new_label = new_ref or "working tree"

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Opening repository")
        try:
            with _open_service(repo) as service:
                yield (0.4, "Computing diff")
                file_diff = service.file_diff(path, old_ref, new_ref, context_lines)
        except (DiffError, ValueError) as exc:
            result_obj.result = f"Diff failed: {exc}"
            result_obj.output = _error_output(path, exc)
            result_obj.success = False
            yield (1.0, "Failed")
            return

        stats = file_diff.stats
        if stats.is_identical:
            result_obj.result = f"No changes in {file_diff.path}"
        else:
            result_obj.result = (
                f"{file_diff.path}: {stats.total_hunks} hunk(s), +{stats.lines_added} -{stats.lines_removed}"
            )
        result_obj.output = file_diff.to_dict()
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Diffing {path} ({old_ref or 'HEAD'} -> {new_label})...",
        progress_callback=do_work,
    )
