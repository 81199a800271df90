"""
Settings Validator Module
Validates JSON settings files against schemas.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import structlog
from jsonschema import Draft7Validator, ValidationError

logger = structlog.get_logger(__name__)

SCHEMA_DIR = Path(__file__).resolve().parent.parent / "schemas"


class ConfigurationError(Exception):
    """Raised when settings validation fails."""

    pass


class SettingsValidator:
    """Validates settings files against JSON schemas."""

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        """
        Initialize validator with schema directory.

        Args:
            schema_dir: Path to directory containing JSON schemas
        """
        self.schema_dir = Path(schema_dir)
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load JSON schema from file.

        Args:
            schema_name: Schema filename (e.g., "app_settings_schema.json")

        Returns:
            Loaded schema dictionary

        Raises:
            ConfigurationError: If schema file not found or invalid
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self.schema_dir / schema_name
        if not schema_path.exists():
            logger.error(
                "schema_not_found",
                schema_name=schema_name,
                schema_path=str(schema_path),
            )
            raise ConfigurationError(f"Schema file not found: {schema_path}")

        try:
            with open(schema_path, "r", encoding="utf-8") as f:
                schema = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("schema_invalid_json", schema_name=schema_name, error=str(e))
            raise ConfigurationError(f"Invalid JSON in schema {schema_name}: {e}")

        self._schemas[schema_name] = schema
        logger.debug("schema_loaded", schema_name=schema_name)
        return schema

    def validate(self, config: Dict[str, Any], schema_name: str) -> None:
        """
        Validate settings against schema.

        Args:
            config: Settings dictionary to validate
            schema_name: Schema filename to validate against

        Raises:
            ConfigurationError: If validation fails with detailed error messages
        """
        schema = self.load_schema(schema_name)
        validator = Draft7Validator(schema)

        errors = sorted(
            validator.iter_errors(config), key=lambda e: [str(p) for p in e.path]
        )
        if not errors:
            logger.debug("validation_passed", schema_name=schema_name)
            return

        logger.warning(
            "validation_failed", schema_name=schema_name, error_count=len(errors)
        )
        raise ConfigurationError(
            "\n".join(self._format_validation_errors(errors, schema_name))
        )

    def validate_file(self, config_path: Path, schema_name: str) -> Dict[str, Any]:
        """
        Load and validate a settings file.

        Args:
            config_path: Path to settings JSON file
            schema_name: Schema filename to validate against

        Returns:
            Validated settings dictionary

        Raises:
            ConfigurationError: If file not found, not JSON, or validation fails
        """
        config_path = Path(config_path)
        if not config_path.exists():
            logger.error("config_file_not_found", config_path=str(config_path))
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(
                "config_invalid_json", config_path=str(config_path), error=str(e)
            )
            raise ConfigurationError(
                f"Invalid JSON in {config_path.name}: {e}\n"
                f"Check for trailing commas, missing quotes, or invalid syntax."
            )

        self.validate(config, schema_name)
        return config

    def _format_validation_errors(
        self, errors: List[ValidationError], schema_name: str
    ) -> List[str]:
        """
        Format validation errors into user-friendly messages.

        Args:
            errors: List of validation errors from jsonschema
            schema_name: Schema name for context

        Returns:
            List of formatted error messages
        """
        messages = [f"\n[X] Settings validation failed for {schema_name}:\n"]

        for error in errors:
            path = " -> ".join([str(p) for p in error.absolute_path]) or "(root)"

            if error.validator == "type":
                messages.append(
                    f"  * Type mismatch at '{path}': {error.message}\n"
                    f"    -> Expected type: {error.validator_value}"
                )
            elif error.validator == "minimum":
                messages.append(f"  * Value too small at '{path}': {error.message}")
            elif error.validator == "minLength":
                messages.append(f"  * Value too short at '{path}': {error.message}")
            elif error.validator == "enum":
                messages.append(
                    f"  * Invalid value at '{path}': {error.message}\n"
                    f"    -> Allowed values: {error.validator_value}"
                )
            elif error.validator == "additionalProperties":
                messages.append(f"  * Unknown setting at '{path}': {error.message}")
            else:
                messages.append(f"  * Validation error at '{path}': {error.message}")

        messages.append("\n[!] Fix the errors above and try again.\n")
        return messages
