#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

import yaml

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr) # Default to stderr
    ]
)
logger = logging.getLogger("versioninfo")


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. VERSIONINFO_CONFIG environment variable
    2. ~/.versioninfo/ directory
    """
    # Check for environment variable override
    if 'VERSIONINFO_CONFIG' in os.environ:
        path = Path(os.environ['VERSIONINFO_CONFIG'])
        if path.exists():
            return path

    config_dir = Path.home() / '.versioninfo'
    for filename in ['config.json', 'config.toml', 'config.yaml', 'config.yml']:
        path = config_dir / filename
        if path.exists():
            return path

    # If no file exists, return the default location
    return config_dir / 'config.json'


def load_config():
    """Load configuration from file."""
    config_path = get_config_path()

    # Start with default config
    config = get_default_config()

    # Load from file if it exists
    if config_path.exists():
        try:
            if config_path.suffix.lower() in ['.toml']:
                with open(config_path, 'rb') as f:
                    file_config = tomllib.load(f)
            elif config_path.suffix.lower() in ['.yaml', '.yml']:
                with open(config_path, 'r') as f:
                    file_config = yaml.safe_load(f) or {}
            else:
                # Default to JSON format
                with open(config_path, 'r') as f:
                    file_config = json.load(f)

            # Merge file config with defaults
            config = merge_configs(config, file_config)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Error loading config from {config_path}: {e}")

    # Apply environment variable overrides
    config = apply_env_overrides(config)

    configure_logging(config)

    return config


def get_default_config():
    """Get default configuration."""
    return {
        "docs": {
            "host": "code.angularjs.org"
        },
        "versions": {
            # Release lines whose unprefixed versions are marked stable
            "stable_range": "1.0 || 1.2",
            # Checked in order, first non-empty value wins
            "build_number_env": ["TRAVIS_BUILD_NUMBER", "BUILD_NUMBER"],
            "snapshot_code_name": "snapshot"
        },
        "manifest": {
            "filename": "package.json"
        },
        "git": {
            "timeout": 30
        },
        "logging": {
            "level": "WARNING",
            "format": "%(levelname)s: %(message)s"
        }
    }


def configure_logging(config):
    """Apply the logging section of the configuration to the package logger."""
    logging_config = config.get("logging", {})
    level = str(logging_config.get("level", "WARNING")).upper()
    logger.setLevel(getattr(logging, level, logging.WARNING))

    fmt = logging_config.get("format")
    if fmt:
        for handler in logging.getLogger().handlers:
            handler.setFormatter(logging.Formatter(fmt))


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            # Recursively merge nested dictionaries
            merged[key] = merge_configs(merged[key], value)
        else:
            # Override or add new key
            merged[key] = value

    return merged


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: VERSIONINFO_SECTION_KEY
    For example: VERSIONINFO_DOCS_HOST=docs.example.com

    List values are given comma-separated:
    VERSIONINFO_VERSIONS_BUILD_NUMBER_ENV=CI_PIPELINE_IID,BUILD_NUMBER
    """
    env_prefix = "VERSIONINFO_"

    for env_key, value in os.environ.items():
        if not env_key.startswith(env_prefix) or env_key == "VERSIONINFO_CONFIG":
            continue

        key_parts = env_key[len(env_prefix):].lower().split('_')

        # Convert value
        if value.lower() in ('true', 'yes', 'on'):
            typed_value = True
        elif value.lower() in ('false', 'no', 'off'):
            typed_value = False
        elif value.isdigit():
            typed_value = int(value)
        else:
            typed_value = value

        current_level = config
        i = 0
        while i < len(key_parts):
            # Find the longest key in current_level that is a prefix of the remaining key_parts
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts_from_key = config_key.split('_')
                if key_parts[i : i + len(config_key_parts_from_key)] == config_key_parts_from_key:
                    if len(config_key_parts_from_key) > best_match_len:
                        best_match_len = len(config_key_parts_from_key)
                        matched_key = config_key

            if matched_key:
                # If we are at the end of the env var, we have found the key to set
                if i + best_match_len == len(key_parts):
                    if isinstance(current_level[matched_key], list):
                        typed_value = [item.strip() for item in value.split(',') if item.strip()]
                    current_level[matched_key] = typed_value
                    break

                # Otherwise, we descend into the dictionary
                if isinstance(current_level[matched_key], dict):
                    current_level = current_level[matched_key]
                    i += best_match_len
                else:
                    # Path conflict, e.g., env var is longer but we found a non-dict value
                    break
            else:
                # No match found
                break

    return config
