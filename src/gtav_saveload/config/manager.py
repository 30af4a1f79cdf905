"""Configuration management - load/save XML configuration"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional
from xml.dom import minidom

from .paths import GamePaths
from .schema import (
    DEFAULT_DATED_SLOT_FORMAT,
    DEFAULT_SAVE_FILE_PREFIX,
    AppConfiguration,
    Settings,
    TransferMode,
)
from ..errors import ConfigurationError
from ..logging_config import get_logger

logger = get_logger("config_manager")


class ConfigurationManager:
    """Manages application configuration persistence.

    Handles loading and saving configuration to XML format,
    including first-run detection and default configuration creation.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or GamePaths.config_file()
        self.config: Optional[AppConfiguration] = None

    def is_first_run(self) -> bool:
        """Check if this is the first run (no configuration file yet)."""
        return not self.config_path.exists()

    def load_or_create(self) -> AppConfiguration:
        """Load the configuration, writing the defaults on first run.

        Returns:
            The loaded or newly created AppConfiguration

        Raises:
            ConfigurationError: If an existing file is malformed
        """
        if self.is_first_run():
            logger.info(f"No configuration at {self.config_path}, writing defaults")
            self.create_default()
            self.save()
            return self.config
        return self.load()

    def load(self) -> AppConfiguration:
        """Load configuration from XML file.

        Returns:
            AppConfiguration object with loaded settings

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If XML is malformed or holds invalid values
        """
        logger.debug(f"Loading configuration from {self.config_path}")
        try:
            tree = ET.parse(self.config_path)
        except ET.ParseError as e:
            raise ConfigurationError(f"Malformed configuration file {self.config_path}: {e}") from e
        root = tree.getroot()

        settings_elem = root.find("Settings")

        # Use defaults if Settings element is missing
        if settings_elem is not None:
            mode_text = self._get_text(settings_elem, "TransferMode", TransferMode.COPY.value)
            try:
                transfer_mode = TransferMode(mode_text.strip().lower())
            except ValueError as e:
                raise ConfigurationError(f"Unknown transfer mode in configuration: {mode_text!r}") from e

            settings = Settings(
                save_file_prefix=self._get_text(settings_elem, "SaveFilePrefix", DEFAULT_SAVE_FILE_PREFIX),
                transfer_mode=transfer_mode,
                dated_slot_format=self._get_text(settings_elem, "DatedSlotFormat", DEFAULT_DATED_SLOT_FORMAT),
                base_dir=self._parse_path(settings_elem, "BaseDirectory"),
            )
        else:
            settings = Settings()

        self.config = AppConfiguration(settings=settings)
        logger.debug(
            f"Configuration loaded: prefix={settings.save_file_prefix}, "
            f"mode={settings.transfer_mode.value}"
        )
        return self.config

    def save(self) -> None:
        """Save current configuration to XML file.

        Creates the configuration directory if it doesn't exist.
        """
        if self.config is None:
            raise ValueError("No configuration to save")

        logger.debug(f"Saving configuration to {self.config_path}")
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        settings = self.config.settings
        root = ET.Element("GTAVSaveLoad", version="1.0")

        settings_elem = ET.SubElement(root, "Settings")
        ET.SubElement(settings_elem, "SaveFilePrefix").text = settings.save_file_prefix
        ET.SubElement(settings_elem, "TransferMode").text = settings.transfer_mode.value
        ET.SubElement(settings_elem, "DatedSlotFormat").text = settings.dated_slot_format
        ET.SubElement(settings_elem, "BaseDirectory").text = str(settings.base_dir) if settings.base_dir else ""

        # Write pretty-printed XML
        xml_str = minidom.parseString(ET.tostring(root, encoding="unicode")).toprettyxml(indent="  ")
        # Remove extra blank lines that minidom adds
        lines = [line for line in xml_str.split('\n') if line.strip()]
        xml_str = '\n'.join(lines)

        self.config_path.write_text(xml_str, encoding="utf-8")

    def create_default(self) -> AppConfiguration:
        """Create a default configuration.

        Returns:
            New AppConfiguration with default values
        """
        self.config = AppConfiguration(settings=Settings())
        return self.config

    # Helper methods for XML parsing
    @staticmethod
    def _get_text(parent: ET.Element, tag: str, default: str = "") -> str:
        """Get text content of a child element."""
        elem = parent.find(tag)
        return elem.text if elem is not None and elem.text else default

    @staticmethod
    def _parse_path(parent: ET.Element, tag: str) -> Optional[Path]:
        """Parse a path value from child element."""
        elem = parent.find(tag)
        if elem is not None and elem.text and elem.text.strip():
            return GamePaths.expand_path(elem.text.strip())
        return None
