"""Configuration management - load/save the JSON configuration document"""

import json
from pathlib import Path
from typing import Optional

from .defaults import build_default_document
from .paths import AppPaths
from .schema import ConfigurationDocument
from ..logging_config import get_logger

logger = get_logger("config_manager")


def serialize_document(document: ConfigurationDocument) -> str:
    """Render a document exactly as it is written to disk.

    Args:
        document: The document to render

    Returns:
        Pretty-printed JSON text (UTF-8 characters kept, trailing newline)
    """
    return json.dumps(document.to_dict(), indent=2, ensure_ascii=False) + "\n"


class ConfigurationManager:
    """Manages configuration document persistence.

    Handles reading and writing the JSON document, including creating
    the sample configuration when no file exists yet.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = Path(config_path) if config_path else AppPaths.resolve_config_path()

    def exists(self) -> bool:
        """Check whether the configuration file is present."""
        return self.config_path.exists()

    def load(self) -> ConfigurationDocument:
        """Load the configuration document from disk.

        Ordered collections are repaired and legacy keys migrated while
        parsing; the file itself is not modified.

        Returns:
            The parsed ConfigurationDocument

        Raises:
            FileNotFoundError: If the config file doesn't exist
            json.JSONDecodeError: If the file is not valid JSON
            ValueError: If the JSON root is not an object
        """
        logger.debug(f"Loading configuration from {self.config_path}")
        with open(self.config_path, encoding="utf-8-sig") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object at the top level, got {type(data).__name__}")

        document = ConfigurationDocument.from_dict(data)
        if document.initialize_order():
            logger.info("Repaired order lists that did not match their collections")

        logger.debug(
            f"Configuration loaded: {len(document.games)} games, {len(document.managed_apps)} managed apps"
        )
        return document

    def save(self, document: ConfigurationDocument) -> None:
        """Write a document to the configuration file.

        Creates missing parent directories.

        Args:
            document: The document to persist

        Raises:
            OSError: If the file cannot be written
        """
        logger.debug(f"Saving configuration to {self.config_path}")
        AppPaths.ensure_parent_dir(self.config_path)

        # Write to a sibling file first so a failed write leaves the old file intact
        temp_path = self.config_path.with_name(self.config_path.name + ".tmp")
        temp_path.write_text(serialize_document(document), encoding="utf-8")
        temp_path.replace(self.config_path)

    def create_default(self) -> ConfigurationDocument:
        """Create the built-in sample configuration.

        Returns:
            New ConfigurationDocument with example games and apps
        """
        return build_default_document()
