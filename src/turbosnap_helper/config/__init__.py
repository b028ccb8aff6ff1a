"""Persisted configuration contracts."""

from turbosnap_helper.config.contracts import (
    CONFIG_FILENAME,
    CONFIG_SCHEMA_URL,
    ChromaticConfig,
    format_project_id,
    load_chromatic_config,
    save_chromatic_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "CONFIG_SCHEMA_URL",
    "ChromaticConfig",
    "format_project_id",
    "load_chromatic_config",
    "save_chromatic_config",
]
