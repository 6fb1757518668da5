# ============================================================================
# SCHEMA SERVICE
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Service - Schema definition management
# PURPOSE: Load and cache declarative schema definitions
# CREATED: 19 OCT 2026
# ============================================================================
"""
Schema Service

Loads schema definitions from YAML files and provides lookup
capabilities. Caches loaded schemas by database name.

Schema files are stored in the schemas/ directory:

    name: blog
    tables:
      - name: users
        columns:
          - {name: id, datatype: integer, primary_key: true, auto_increment: true}
          - {name: email, datatype: varchar, scale: 255}
        indexes:
          - {name: by_email, columns: [email], unique: true}
      - name: posts
        columns:
          - {name: id, datatype: integer, primary_key: true, auto_increment: true}
        references:
          - {table_name: users, has_one: true}
"""

from pathlib import Path
from typing import Dict, List, Optional, Union
import yaml
from pydantic import ValidationError

from core.config import get_defaults
from core.logging import ComponentType, get_logger, log_checkpoint, log_context
from core.models import Database

logger = get_logger(__name__, ComponentType.LOADER)


class SchemaService:
    """Service for loading and managing schema definitions."""

    def __init__(self, schemas_dir: Optional[Union[str, Path]] = None):
        """
        Initialize schema service.

        Args:
            schemas_dir: Directory containing schema YAML files.
                         Defaults to SCHEMAS_DIR (./schemas/)
        """
        self.schemas_dir = Path(schemas_dir or get_defaults().generator.schemas_dir)

        self._cache: Dict[str, Database] = {}
        self._loaded = False

    def load_all(self) -> int:
        """
        Load all schema definitions from the schemas directory.

        Files that fail to load are logged and skipped.

        Returns:
            Number of schemas loaded
        """
        if not self.schemas_dir.exists():
            logger.warning(f"Schemas directory not found: {self.schemas_dir}")
            return 0

        count = 0
        paths = sorted(self.schemas_dir.glob("*.yaml")) + sorted(self.schemas_dir.glob("*.yml"))
        for path in paths:
            try:
                database = self.load_file(path)
            except (OSError, ValueError) as e:
                logger.error(f"Failed to load {path}: {e}")
                continue
            self._cache[database.name] = database
            count += 1
            logger.info(f"Loaded schema: {database.name} ({len(database.tables)} tables)")

        self._loaded = True
        logger.info(f"Loaded {count} schemas from {self.schemas_dir}")
        return count

    def get(self, name: str) -> Optional[Database]:
        """
        Get a schema by database name.

        Returns:
            Database or None if not found
        """
        if not self._loaded:
            self.load_all()

        return self._cache.get(name)

    def get_or_raise(self, name: str) -> Database:
        """
        Get a schema, raising if not found.

        Raises:
            KeyError if schema not found
        """
        database = self.get(name)
        if database is None:
            raise KeyError(f"Schema not found: {name}")
        return database

    def list_all(self) -> List[Database]:
        """List all loaded schemas."""
        if not self._loaded:
            self.load_all()

        return list(self._cache.values())

    def register(self, database: Database) -> None:
        """
        Register a schema (for testing or programmatic use).

        Args:
            database: Database to register
        """
        self._cache[database.name] = database
        logger.info(f"Registered schema: {database.name}")

    def load_file(self, path: Union[str, Path]) -> Database:
        """
        Load a schema from a YAML file.

        A file without a `name` is named after its stem.

        Raises:
            ValueError: file is not valid YAML, not a mapping, or fails model validation
            OSError: file can't be read
        """
        path = Path(path)
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Invalid schema in {path}: expected a mapping at top level")

        data.setdefault("name", path.stem)

        try:
            database = Database.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid schema in {path}: {e}") from e

        with log_context(schema=database.name):
            log_checkpoint("schema_loaded", data={"path": str(path), "tables": len(database.tables)})
        return database

    def reload(self) -> int:
        """
        Reload all schemas from disk.

        Returns:
            Number of schemas loaded
        """
        self._cache.clear()
        self._loaded = False
        return self.load_all()


__all__ = ["SchemaService"]
