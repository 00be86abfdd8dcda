import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional
from pydantic import ValidationError
from sofka_aroma.errors import CatalogLoadError
from sofka_aroma.models.base_model import CatalogRecord


DEFAULT_CATALOG_PATH = Path(__file__).parent / "candles.json"


class CatalogManager:
    """
    Owns the scent catalog of one process.
    The asset is read on first use and the parsed mapping is kept for the
    lifetime of the manager; it is never reloaded.
    """
    def __init__(self, path=None):
        """
        Remember where the catalog asset lives. Nothing is read here.
        """
        self.path = Path(path) if path else DEFAULT_CATALOG_PATH
        self._catalog: Optional[Mapping[str, CatalogRecord]] = None

    @classmethod
    def from_records(cls, records: dict):
        """
        Build a manager around an in-memory catalog, bypassing the asset.
        """
        manager = cls()
        manager._catalog = cls._parse(records, source="<memory>")
        return manager

    @property
    def loaded(self) -> bool:
        return self._catalog is not None

    def load(self) -> Mapping[str, CatalogRecord]:
        """
        Return the catalog, reading the asset if this is the first call.
        Raises CatalogLoadError if the asset is missing or malformed.
        """
        if self._catalog is not None:
            return self._catalog
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as e:
            raise CatalogLoadError(f"Cannot read catalog {self.path}: {e.strerror or e}") from e
        except json.JSONDecodeError as e:
            raise CatalogLoadError(f"Catalog {self.path} is not valid JSON: {e.msg}") from e
        self._catalog = self._parse(raw, source=str(self.path))
        logging.info(f"Catalog loaded from {self.path} ({len(self._catalog)} records)")
        return self._catalog

    def get(self, record_id: str) -> Optional[CatalogRecord]:
        """
        Look up a record by id. Returns None when the id is not registered.
        """
        return self.load().get(record_id)

    @staticmethod
    def _parse(raw, source: str) -> Mapping[str, CatalogRecord]:
        if not isinstance(raw, dict):
            raise CatalogLoadError(f"Catalog {source} must be a JSON object keyed by id")
        records = {}
        for record_id, entry in raw.items():
            try:
                records[record_id] = CatalogRecord.model_validate(entry)
            except ValidationError as e:
                raise CatalogLoadError(
                    f"Catalog {source} has an invalid record '{record_id}': {e.error_count()} error(s)"
                ) from e
        return MappingProxyType(records)
