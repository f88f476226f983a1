"""Complete-mode file diff command."""

from collections.abc import Iterator

from ..errors.DiffError import DiffError
from ..StageResult import StageResult
from ._error_output import _error_output
from ._open_service import _open_service


def cmd_complete(path: str, old_ref: str, new_ref: str, repo: str | None = None) -> StageResult:
    """Render the whole of ``path`` at ``new_ref`` with lines removed since ``old_ref`` inlined."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Opening repository")
        try:
            with _open_service(repo) as service:
                yield (0.4, "Computing complete diff")
                file_diff = service.complete_diff(path, old_ref, new_ref)
        except (DiffError, ValueError) as exc:
            result_obj.result = f"Complete diff failed: {exc}"
            result_obj.output = _error_output(path, exc)
            result_obj.success = False
            yield (1.0, "Failed")
            return

        stats = file_diff.stats
        result_obj.result = (
            f"{file_diff.path}: {len(file_diff.lines)} line(s), +{stats.lines_added} -{stats.lines_removed}"
        )
        result_obj.output = file_diff.to_dict()
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Rendering {path} ({old_ref} -> {new_ref})...",
        progress_callback=do_work,
    )
