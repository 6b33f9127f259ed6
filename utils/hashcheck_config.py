"""
Configuration utilities for loading hashcheck config files and environment overrides.
"""
import configparser
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator
from models.algorithm import AlgorithmSet, CaseMode

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "./config/hashcheck_config.ini"

# Environment variable mapping: env_var -> (section, key)
ENV_VAR_MAPPING = {
    'HASHCHECK_ALGORITHMS': ('hashing', 'algorithms'),
    'HASHCHECK_CASE': ('hashing', 'case'),
    'HASHCHECK_READ_CHUNK_SIZE': ('hashing', 'read_chunk_size'),
    'HASHCHECK_PARALLEL': ('hashing', 'parallel'),
}

_TRUE_VALUES = ('true', '1', 'yes', 'on', 'enabled')


class HashingSettings(BaseModel):
    """
    Effective hashing settings after config file and environment overrides.

    Attributes:
        algorithms (str): Comma separated algorithm names, or "all".
        case (CaseMode): Letter case for rendered digests.
        read_chunk_size (int): Bytes read from a file per update.
        parallel (bool): Run each algorithm on its own worker thread.
    """

    model_config = ConfigDict(validate_assignment=True, extra='forbid')

    algorithms: str = Field("crc32,md5,sha1", description="Comma separated algorithm names")
    case: CaseMode = Field(CaseMode.LOWERCASE, description="Hex digest letter case")
    read_chunk_size: int = Field(1_048_576, gt=0, description="Read size in bytes")
    parallel: bool = Field(False, description="Hash algorithms on worker threads")

    @field_validator('algorithms')
    @classmethod
    def validate_algorithms(cls, v: str) -> str:
        # Raises ValueError for unknown or empty selections
        AlgorithmSet.from_names(v)
        return v.strip().lower()

    @field_validator('case', mode='before')
    @classmethod
    def normalize_case(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def algorithm_set(self) -> AlgorithmSet:
        return AlgorithmSet.from_names(self.algorithms)


def load_configuration(path: Optional[str]) -> configparser.ConfigParser:
    """
    Load an INI configuration file. A missing file yields an empty parser.

    Args:
        path (Optional[str]): Path to the configuration file.

    Returns:
        configparser.ConfigParser: Loaded configuration parser.
    """
    parser = configparser.ConfigParser()
    if path and Path(path).is_file():
        parser.read(path, encoding='utf-8')
        logger.debug(f"Loaded configuration from: {path}")
    else:
        logger.debug(f"No configuration file at {path}, using defaults")
    return parser


def normalize_config(config: configparser.ConfigParser) -> Dict[str, Dict[str, str]]:
    """
    Lowercase section names, merging sections that differ only by case.
    """
    normalized: Dict[str, Dict[str, str]] = {}
    for section in config.sections():
        normalized.setdefault(section.lower(), {}).update(dict(config[section]))
    return normalized


def apply_env_overrides(config: Dict[str, Dict[str, str]]) -> Dict[str, Dict[str, str]]:
    """
    Apply HASHCHECK_* environment variables on top of a normalized configuration.
    """
    for env_var, (section, key) in ENV_VAR_MAPPING.items():
        value = os.getenv(env_var)
        if value is not None and value.strip():
            config.setdefault(section, {})[key] = value.strip()
            logger.debug(f"Applied environment override {env_var} -> [{section}] {key}")
    return config


def get_config_value(
    config: Union[configparser.ConfigParser, Dict[str, Dict[str, Any]]],
    section: str,
    key: str,
    fallback: Any = None,
    value_type: type = str
) -> Any:
    """
    Get a configuration value with case-insensitive section lookup and type conversion.

    Args:
        config: Configuration object (ConfigParser or normalized dict)
        section: Configuration section name
        key: Configuration key name
        fallback: Default value if not found
        value_type: Type to convert the value to (str, int, bool)

    Returns:
        Configuration value converted to specified type or fallback

    Raises:
        ValueError: If value cannot be converted to specified type
    """
    if config is None:
        return fallback

    if isinstance(config, configparser.ConfigParser):
        config = normalize_config(config)

    section_data = config.get(section.strip().lower(), {})
    value = section_data.get(key.strip().lower())

    # Only values actually found are converted
    if value is None or (isinstance(value, str) and not value.strip()):
        return fallback

    if value_type == bool and isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    elif value_type == int:
        return int(value)
    elif value_type == str:
        return str(value).strip()
    return value_type(value)


def load_hashing_settings(path: Optional[str] = None) -> HashingSettings:
    """
    Build HashingSettings from the [Hashing] section and environment overrides.

    Args:
        path (Optional[str]): Path to the configuration file; may not exist.

    Returns:
        HashingSettings: Validated settings.

    Raises:
        pydantic.ValidationError: If a configured value is invalid.
        ValueError: If read_chunk_size is not an integer.
    """
    config = apply_env_overrides(normalize_config(load_configuration(path)))
    defaults = HashingSettings()

    settings = HashingSettings(
        algorithms=get_config_value(config, 'hashing', 'algorithms', fallback=defaults.algorithms),
        case=get_config_value(config, 'hashing', 'case', fallback=defaults.case.value),
        read_chunk_size=get_config_value(config, 'hashing', 'read_chunk_size', fallback=defaults.read_chunk_size, value_type=int),
        parallel=get_config_value(config, 'hashing', 'parallel', fallback=defaults.parallel, value_type=bool),
    )
    logger.info(
        f"Hashing settings: algorithms={settings.algorithms}, case={settings.case.value}, "
        f"read_chunk_size={settings.read_chunk_size}, parallel={settings.parallel}"
    )
    return settings
