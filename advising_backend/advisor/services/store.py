import logging
import threading
from pathlib import Path

from advisor.models.catalog import Catalog
from advisor.services.catalog_loader import LoadResult, load_file, load_text

logger = logging.getLogger(__name__)


class CatalogStore:
    """Holds the session's current catalog.

    Reloads swap the whole Catalog reference under a lock; readers always get
    a complete snapshot.
    """

    def __init__(self, catalog: Catalog | None = None):
        self._catalog = catalog if catalog is not None else Catalog()
        self._lock = threading.Lock()

    def snapshot(self) -> Catalog:
        return self._catalog

    def replace(self, catalog: Catalog) -> None:
        with self._lock:
            self._catalog = catalog

    def apply(self, result: LoadResult) -> LoadResult:
        if result.ok and result.catalog is not None:
            self.replace(result.catalog)
        else:
            logger.info("Keeping previous catalog of %d courses", len(self._catalog))
        return result

    def load_file(self, path: str | Path, encoding: str = "utf-8-sig") -> LoadResult:
        return self.apply(load_file(path, encoding=encoding))

    def load_text(self, content: str) -> LoadResult:
        return self.apply(load_text(content))


_store = CatalogStore()


def get_store() -> CatalogStore:
    return _store
