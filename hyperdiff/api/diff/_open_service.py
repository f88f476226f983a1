"""Build a DiffService from the user's configuration."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from ...utils.configure_logging import configure_logging
from ..cache.DiffCache import DiffCache
from ..config.HyperdiffConfig import HyperdiffConfig
from ..repo.GitObjectStore import GitObjectStore
from .DiffService import DiffService


@contextmanager
def _open_service(repo: str | Path | None = None) -> Iterator[DiffService]:
    """Yield a DiffService over the repository containing ``repo`` (default: cwd).

    Raises:
        ValueError: If the config file is invalid
        RepositoryError: If no git repository contains ``repo``
    """
    config = HyperdiffConfig.load()
    configure_logging(level=config.log.level)
    cache = DiffCache.from_config(config.cache) if config.cache.enabled else None
    with GitObjectStore(repo if repo is not None else Path.cwd()) as store:
        yield DiffService(store, cache=cache, config=config.diff)
