"""
Logger Configuration Module

This module builds LoggerOptions from command line arguments and an optional
settings file, with priority: CLI args > settings file > defaults.

Settings files are INI (configparser) or YAML (.yaml / .yml):

    [logger]                        logger:
    always_log = false                always_log: false
    prefix = jobs                     prefix: jobs
    [colors]                        colors:
    log = yellow                      log: yellow
"""

import os
import argparse
import configparser
from typing import Optional, Any, Callable, TypeVar

import yaml

from .channels import Channel
from .colors import named_formatter
from .logger import Logger
from .logger_injection import with_logger
from .options import LoggerOptions

T = TypeVar('T')

LOGGER_SECTION = 'logger'
COLORS_SECTION = 'colors'
YAML_SUFFIXES = ('.yaml', '.yml')


# Convert a value to boolean using string matching for string values
def convert_to_bool(value) -> bool:
    """
    Convert a value to boolean using string matching for string values.
    Strings like 'true', 'yes', 'on' and '1' are converted to True.
    Other strings and falsy values are converted to False.

    Args:
        value: The value to convert to boolean

    Returns:
        bool: The converted boolean value
    """
    if isinstance(value, str):
        return value.strip().lower() in ('true', 'yes', 'on', '1')
    return bool(value)


# Safely convert a value to a specified type
def convert_to_type(value, type_func) -> Any:
    """
    Safely convert a value to the specified type.
    Special handling for boolean conversion using string matching.

    Args:
        value: The value to convert
        type_func: The type function to use for conversion (int, str, bool, etc.)

    Returns:
        The converted value, or None if conversion fails
    """
    if type_func is None:
        return value

    if type_func == bool:
        return convert_to_bool(value)

    try:
        return type_func(value)
    except (ValueError, TypeError):
        # Return None to signal conversion failure
        return None


# Helper function to get settings with priority: CLI args > settings file > default
def get_setting(arg_value, section, option, default: T = None, type: Optional[Callable[[Any], T]] = None, config=None) -> T:
    """
    Get setting with priority: CLI args > settings file > default

    Args:
        arg_value: Value from command line argument
        section: Section in config file
        option: Option name in config file
        default: Default value if not found in args or config file
        type: Optional type conversion function (int, str, bool, etc.)
        config: ConfigParser object (if None, setting from file will be None)

    Returns:
        The setting value based on priority with type conversion applied
    """
    if arg_value is not None:
        converted_value = convert_to_type(arg_value, type)
        if converted_value is not None:
            return converted_value
        # If conversion fails, try settings file instead

    if config and config.has_section(section) and config.has_option(section, option):
        setting_value = config.get(section, option)
        converted_value = convert_to_type(setting_value, type)
        if converted_value is not None:
            return converted_value
        # If conversion fails, fall back to default

    return default


# Helper function to get settings from args or config file
def get_setting_from_arg_or_file(args_obj, arg_name: str, section: str, option: str, default: T = None, type: Optional[Callable[[Any], T]] = None, config=None) -> T:
    """
    Get setting with priority: CLI args > settings file > default
    Extracts the arg_name from args_obj automatically

    Args:
        args_obj: The args object containing command line arguments
        arg_name: Name of the argument to extract from args_obj
        section: Section in config file
        option: Option name in config file
        default: Default value if not found in args or config file
        type: Optional type conversion function (int, str, bool, etc.)
        config: ConfigParser object (if None, setting from file will be None)

    Returns:
        The setting value based on priority with type conversion applied
    """
    arg_value = getattr(args_obj, arg_name, None) if args_obj else None
    return get_setting(arg_value, section, option, default, type, config)


def add_logger_arguments(parser: argparse.ArgumentParser) -> None:
    """
    Add logger option arguments to an argument parser.

    Args:
        parser: ArgumentParser instance to add arguments to
    """
    parser.add_argument('--settings-path',
                        help='Path to the settings file (if not specified, standard locations will be searched)')

    parser.add_argument('--always-log',
                        action='store_true',
                        default=None,
                        help='Emit even when not running in development mode')
    parser.add_argument('--no-log-if-development',
                        dest='log_if_development',
                        action='store_false',
                        default=None,
                        help='Do not emit on development detection alone')
    parser.add_argument('--no-file-prefix',
                        dest='show_file_prefix',
                        action='store_false',
                        default=None,
                        help='Do not prefix messages with the calling file name')
    parser.add_argument('--prefix',
                        help='Explicit prefix label for every message',
                        default=None)
    parser.add_argument('--no-debug',
                        dest='debug_enabled',
                        action='store_false',
                        default=None,
                        help='Suppress the debug channel')


def find_config_file():
    """
    Search for a config file in standard locations.

    Returns:
        Path to the first config file found, or None if no config file is found
    """
    env_path = os.getenv('DEVLOG_CONFIG_PATH')
    if env_path and os.path.isfile(env_path):
        return env_path

    home_dir = os.getenv('HOME') or os.path.expanduser('~')

    potential_locations = [
        os.path.join(home_dir, '.config', 'devlog', 'config.conf'),
        os.path.join(home_dir, '.devlog', 'config.conf'),
        '/etc/devlog/config.conf',
    ]

    for location in filter(None, potential_locations):
        if os.path.isfile(location):
            return location

    return None


@with_logger
def read_settings_file(path, logger=None) -> configparser.ConfigParser:
    """
    Load a settings file into a ConfigParser.

    YAML files are flattened into the same sections an INI file would have.
    Files that cannot be read or parsed are reported and give empty settings.

    Args:
        path: Path to an INI or YAML settings file

    Returns:
        configparser.ConfigParser: The settings, possibly empty
    """
    settings = configparser.ConfigParser(interpolation=None)
    if not path:
        return settings

    try:
        if str(path).lower().endswith(YAML_SUFFIXES):
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                logger.warning(f"Settings file {path} does not hold a mapping, ignoring it")
                return settings
            for section in (LOGGER_SECTION, COLORS_SECTION):
                values = data.get(section)
                if isinstance(values, dict):
                    settings[section] = {str(k): '' if v is None else str(v) for k, v in values.items()}
        else:
            with open(path, 'r', encoding='utf-8') as f:
                settings.read_file(f)
    except (OSError, UnicodeDecodeError, configparser.Error, yaml.YAMLError) as e:
        logger.warning(f"Could not read settings file {path}: {e}")
        return configparser.ConfigParser(interpolation=None)

    return settings


def _colors_from_settings(settings):
    colors = {}
    if not settings.has_section(COLORS_SECTION):
        return colors
    for channel in Channel:
        if settings.has_option(COLORS_SECTION, channel.value):
            colors[channel] = named_formatter(settings.get(COLORS_SECTION, channel.value))
    return colors


def parse_logger_config(args=None):
    """
    Parse logger options from command line arguments and settings file.

    Args:
        args: Parsed argument namespace (optional)

    Returns:
        tuple: (LoggerOptions, ConfigParser holding the settings file contents)
    """
    config_file_path = None
    if args and getattr(args, 'settings_path', None):
        config_file_path = args.settings_path
    else:
        config_file_path = find_config_file()

    settings = read_settings_file(config_file_path)
    defaults = LoggerOptions()

    prefix = get_setting_from_arg_or_file(args, 'prefix', LOGGER_SECTION, 'prefix', defaults.prefix, None, settings)

    options = LoggerOptions(
        always_log=get_setting_from_arg_or_file(args, 'always_log', LOGGER_SECTION, 'always_log', defaults.always_log, bool, settings),
        log_if_development=get_setting_from_arg_or_file(args, 'log_if_development', LOGGER_SECTION, 'log_if_development', defaults.log_if_development, bool, settings),
        show_file_prefix=get_setting_from_arg_or_file(args, 'show_file_prefix', LOGGER_SECTION, 'show_file_prefix', defaults.show_file_prefix, bool, settings),
        prefix=prefix or None,
        debug_enabled=get_setting_from_arg_or_file(args, 'debug_enabled', LOGGER_SECTION, 'debug_enabled', defaults.debug_enabled, bool, settings),
        colors=_colors_from_settings(settings),
    )

    # Return both the options and the ConfigParser to avoid reopening the file
    return options, settings


def load_logger(args=None, **kwargs):
    """
    Build a Logger from configuration.

    Args:
        args: Parsed argument namespace (optional)
        **kwargs: Passed on to Logger (environment_query, sink, option overrides)

    Returns:
        Logger: The configured logger
    """
    options, _ = parse_logger_config(args)
    return Logger(options, **kwargs)
