"""YAML-backed run configuration.

Each option group lives in its own file inside the config directory. A
missing file is created with the defaults so users have something to edit;
keys absent from an existing file keep their default value.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Type, TypeVar

import yaml

LOGGER = logging.getLogger(__name__)

OUTPUT_CONFIG_FILE = "outputConfig.yml"
QUERY_CONFIG_FILE = "queryConfig.yml"
PROXY_CONFIG_FILE = "proxy.yml"
INPUT_CONFIG_FILE = "inputConfig.yml"


@dataclass
class OutputOptions:
    include_phonetic: bool = True
    include_origin: bool = True
    include_synonyms: bool = True
    include_antonyms: bool = True
    filter_definitions_without_examples: bool = False
    generate_explanations: bool = True
    generate_example_sentences: bool = True
    max_example_sentences: int = 0
    generate_summary: bool = True


@dataclass
class QueryOptions:
    query_for_unknown_words: bool = False


@dataclass
class ProxyOptions:
    http_proxy: str = ""
    https_proxy: str = ""


@dataclass
class InputOptions:
    input_directory: str = "inputs"


@dataclass
class Settings:
    output: OutputOptions
    query: QueryOptions
    proxy: ProxyOptions
    input: InputOptions


Options = TypeVar("Options")


def yaml_key(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def to_yaml_dict(options: Any) -> Dict[str, Any]:
    return {yaml_key(f.name): getattr(options, f.name) for f in fields(options)}


def from_yaml_dict(cls: Type[Options], data: Dict[str, Any]) -> Options:
    defaults = cls()
    values = {}
    for f in fields(defaults):
        key = yaml_key(f.name)
        default = getattr(defaults, f.name)
        if key not in data or data[key] is None:
            values[f.name] = default
            continue
        value = data[key]
        if isinstance(default, bool):
            if not isinstance(value, bool):
                LOGGER.warning("Ignoring non-boolean %s=%r", key, value)
                value = default
        elif isinstance(default, int):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                LOGGER.warning("Ignoring invalid %s=%r", key, value)
                value = default
        else:
            value = str(value)
        values[f.name] = value
    return cls(**values)


def load_options(path: Path, cls: Type[Options]) -> Options:
    defaults = cls()
    if not path.exists():
        LOGGER.info("Writing default configuration to %s", path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "wt", encoding="utf-8") as handle:
                yaml.safe_dump(to_yaml_dict(defaults), handle, sort_keys=False)
        except OSError as exc:
            LOGGER.warning("Could not write default configuration %s: %s", path, exc)
        return defaults
    try:
        with open(path, "rt", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except OSError as exc:
        LOGGER.warning("Could not read %s: %s; using defaults", path, exc)
        return defaults
    except yaml.YAMLError as exc:
        LOGGER.warning("Invalid YAML in %s: %s; using defaults", path, exc)
        return defaults
    if data is None:
        return defaults
    if not isinstance(data, dict):
        LOGGER.warning("Expected a mapping in %s; using defaults", path)
        return defaults
    return from_yaml_dict(cls, data)


def load_settings(config_dir: Path) -> Settings:
    return Settings(
        output=load_options(config_dir / OUTPUT_CONFIG_FILE, OutputOptions),
        query=load_options(config_dir / QUERY_CONFIG_FILE, QueryOptions),
        proxy=load_options(config_dir / PROXY_CONFIG_FILE, ProxyOptions),
        input=load_options(config_dir / INPUT_CONFIG_FILE, InputOptions),
    )
