"""
Configuration for the Aptos MCP server.

Configuration is resolved once at startup from, in increasing priority:
1. Built-in defaults
2. YAML configuration file (config/server.yaml)
3. Environment variables (a .env file is loaded first when present)

The result is an immutable ServerConfig that is passed by parameter to the
server, the tool dispatcher and the resource store.
"""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_FILE = PROJECT_ROOT / "config" / "server.yaml"
DEFAULT_DOCS_PATH = Path(__file__).parent / "docs"

# ServerConfig field -> environment variable
ENV_MAPPINGS = {
    "name": "APTOS_MCP_NAME",
    "docs_path": "APTOS_MCP_DOCS_PATH",
    "log_level": "APTOS_MCP_LOG_LEVEL",
    "log_format": "APTOS_MCP_LOG_FORMAT",
    "log_file": "APTOS_MCP_LOG_FILE",
}


@dataclass(frozen=True)
class ServerConfig:
    """Immutable server configuration."""

    name: str = "aptos-mcp"
    version: str = "0.0.14"
    description: str = "MCP server with Aptos development resources"
    docs_path: Path = DEFAULT_DOCS_PATH
    transport: str = "stdio"
    log_level: str = "INFO"
    log_format: str = "json"
    log_file: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServerConfig":
        """
        Build a config from the nested layout used by server.yaml.

        Args:
            data: Mapping with optional "server", "transport", "logging"
                  and "workspace" sections

        Returns:
            ServerConfig with defaults for anything not present
        """
        server = data.get("server", {}) or {}
        transport = data.get("transport", {}) or {}
        logging_config = data.get("logging", {}) or {}
        workspace = data.get("workspace", {}) or {}

        values: Dict[str, Any] = {}
        for key in ("name", "version", "description"):
            if key in server:
                values[key] = str(server[key])
        if "type" in transport:
            values["transport"] = str(transport["type"])
        if "level" in logging_config:
            values["log_level"] = str(logging_config["level"])
        if "format" in logging_config:
            values["log_format"] = str(logging_config["format"])
        if logging_config.get("file"):
            values["log_file"] = str(logging_config["file"])
        if workspace.get("docs_path"):
            values["docs_path"] = _resolve_path(workspace["docs_path"])

        return cls(**values)

    def with_env_overrides(self, environ: Optional[Dict[str, str]] = None) -> "ServerConfig":
        """
        Apply environment variable overrides.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            New ServerConfig with overrides applied
        """
        environ = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}
        for field_name, env_var in ENV_MAPPINGS.items():
            value = environ.get(env_var)
            if not value:
                continue
            if field_name == "docs_path":
                overrides[field_name] = _resolve_path(value)
            else:
                overrides[field_name] = value
            logger.debug(f"Config override from {env_var}")
        return replace(self, **overrides) if overrides else self


def _resolve_path(value: Any) -> Path:
    path = Path(str(value)).expanduser()
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path.resolve()


def load_yaml_config(config_file: Path) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        config_file: Path to YAML file

    Returns:
        Parsed mapping, or an empty dict if the file is missing or invalid
    """
    if not config_file.exists():
        logger.debug(f"Config file not found: {config_file}")
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_file}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file {config_file}: expected a mapping")
        return {}

    logger.info(f"Loaded configuration from {config_file}")
    return data


def load_config(
    config_file: Optional[Path] = None,
    environ: Optional[Dict[str, str]] = None,
    use_dotenv: bool = True,
) -> ServerConfig:
    """
    Resolve the server configuration.

    Args:
        config_file: YAML config path (default: config/server.yaml)
        environ: Environment mapping (default: os.environ)
        use_dotenv: Whether to load a .env file into os.environ first

    Returns:
        ServerConfig instance
    """
    if use_dotenv:
        # Host environment takes precedence over .env values
        load_dotenv(override=False)

    config_file = Path(config_file) if config_file else DEFAULT_CONFIG_FILE
    config = ServerConfig.from_dict(load_yaml_config(config_file))
    return config.with_env_overrides(environ)
