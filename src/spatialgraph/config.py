import configparser
import dataclasses
import logging
import os.path
from typing import Optional

from spatialgraph import constants


@dataclasses.dataclass
class Config:
    input_file: Optional[str]
    random_nodes: int
    lat_range: tuple
    lon_range: tuple
    seed: Optional[int]
    model: str
    k: float
    probability: float
    output_dir: str
    basename: str
    write_csv: bool
    write_tgf: bool

    def show(self):
        logger = logging.getLogger(constants.LOGGER_NAME)
        logger.info('')
        logger.info('Using configuration:')
        for k, v in self.__dict__.items():
            logger.info(f'  + {k}: {v}')


def config_parser_factory(configuration_file):
    """
    Returns a ConfigParser by reading the specified file.
    """
    if configuration_file is None or not os.path.exists(configuration_file):
        raise ValueError(f'Unable to find configuration file {configuration_file}')
    cfg_parser = configparser.ConfigParser(interpolation=configparser.ExtendedInterpolation())
    cfg_parser.read(configuration_file)
    return cfg_parser


def parse_range(value):
    """
    Parses a 'low,high' string into a pair of floats.
    """
    if isinstance(value, (tuple, list)):
        parts = list(value)
    else:
        parts = [p for p in str(value).split(',') if p.strip()]
    if len(parts) != 2:
        raise ValueError(f'Expected a range of two numbers, got {value!r}')
    return (float(parts[0]), float(parts[1]))


def _optional(value, value_type):
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return value_type(value)


def _get_configuration_value(section, name, value_type, config_parser, overrides):
    """
    Returns a value from the provided config parser; any value for the key that
    is provided in the 'overrides' dictionary will take precedence.
    """
    if overrides.get(name) is not None:
        return overrides.get(name)

    if value_type is bool:
        return config_parser.getboolean(section, name)
    elif value_type is int:
        return config_parser.getint(section, name)
    elif value_type is float:
        return config_parser.getfloat(section, name)
    else:
        return config_parser.get(section, name)


def configuration(config_parser, overrides):
    """
    Returns a valid Config object that is populated from the provided config
    parser, with values overriden with anything provided in 'overrides'.
    """
    config_parser['DEFAULT'] = {
        'input_file': '',
        'random_nodes': constants.DEFAULT_RANDOM_NODES,
        'lat_range': constants.DEFAULT_LAT_RANGE,
        'lon_range': constants.DEFAULT_LON_RANGE,
        'seed': '',
        'model': constants.DEFAULT_MODEL,
        'k': constants.DEFAULT_K,
        'probability': constants.DEFAULT_PROBABILITY,
        'output_dir': constants.DEFAULT_OUTPUT_DIR,
        'basename': constants.DEFAULT_BASENAME,
        'write_csv': constants.DEFAULT_WRITE_CSV,
        'write_tgf': constants.DEFAULT_WRITE_TGF,
    }
    for section in [constants.SOURCE_SECTION_NAME,
                    constants.MODEL_SECTION_NAME,
                    constants.DESTINATION_SECTION_NAME]:
        if not config_parser.has_section(section):
            config_parser.add_section(section)

    def value(section, name, value_type):
        return _get_configuration_value(section, name, value_type, config_parser, overrides)

    source = constants.SOURCE_SECTION_NAME
    model = constants.MODEL_SECTION_NAME
    destination = constants.DESTINATION_SECTION_NAME
    try:
        return Config(
            _optional(value(source, 'input_file', str), str),
            value(source, 'random_nodes', int),
            parse_range(value(source, 'lat_range', str)),
            parse_range(value(source, 'lon_range', str)),
            _optional(value(source, 'seed', str), int),
            value(model, 'model', str).strip().lower(),
            value(model, 'k', float),
            value(model, 'probability', float),
            value(destination, 'output_dir', str),
            value(destination, 'basename', str),
            value(destination, 'write_csv', bool),
            value(destination, 'write_tgf', bool),
        )
    except (ValueError, configparser.Error) as e:
        raise ValueError(f'Unable to read the configuration file: {e}') from e


def validate(configuration):
    """
    Validates each value in the configuration.
    """
    validations = [
        ['input_file', lambda path: path is None or os.path.exists(path), 'The input_file does not exist.'],
        ['random_nodes', lambda count: count >= 0, 'The number of random_nodes must not be negative.'],
        ['model', lambda name: name in constants.MODELS, f'The model must be one of {", ".join(constants.MODELS)}.'],
        ['k', lambda k: k >= 0, 'The SISG parameter k must not be negative.'],
        ['probability', lambda p: 0 <= p <= 1, 'The Gilbert probability must be within [0, 1].'],
    ]
    errors = [msg for name, fn, msg in validations if not fn(getattr(configuration, name))]
    if configuration.input_file is None and configuration.random_nodes <= 0:
        errors.append('No nodes to process: set an input_file or a positive number of random_nodes.')
    return len(errors) == 0, errors
