from configparser import ConfigParser, ExtendedInterpolation
from unittest.mock import patch

import pytest
from spatialgraph import config, constants

# Unit tests for the 'config' module functions.
#
# The test boundary is the config module's interface with the filesystem, so
# in addition to testing the config module's behavior, the tests should mock
# filesystem checks where needed.


@pytest.fixture
def expected_keys():
    return set(
        [
            "input_file",
            "random_nodes",
            "lat_range",
            "lon_range",
            "seed",
            "model",
            "k",
            "probability",
            "output_dir",
            "basename",
            "write_csv",
            "write_tgf",
        ]
    )


@pytest.fixture
def cfg_parser():
    cp = ConfigParser(interpolation=ExtendedInterpolation())
    cp["Source"] = {
        "input_file": "/data/points.geojson",
        "random_nodes": 10,
        "lat_range": "50, 52",
        "lon_range": "6,9",
        "seed": 42,
    }
    cp["Model"] = {"model": "SISG", "k": 2.5, "probability": 0.2}
    cp["Destination"] = {
        "output_dir": "/output/here",
        "basename": "${Model:model}-graph",
        "write_csv": True,
        "write_tgf": False,
    }
    return cp


@pytest.fixture
def valid_config():
    return config.Config(
        input_file=None,
        random_nodes=10,
        lat_range=(50.0, 52.0),
        lon_range=(6.0, 9.0),
        seed=None,
        model="sisg",
        k=1.0,
        probability=0.1,
        output_dir="output",
        basename="graph",
        write_csv=True,
        write_tgf=True,
    )


def test_config_parser_without_filename():
    with pytest.raises(ValueError):
        config.config_parser_factory(None)


def test_config_parser_with_missing_file(tmp_path):
    with pytest.raises(ValueError):
        config.config_parser_factory(str(tmp_path / "missing.ini"))


@patch("spatialgraph.config.os.path.exists", return_value=True)
def test_config_parser_return_type(mock):
    result = config.config_parser_factory("foo.ini")
    assert isinstance(result, ConfigParser)


def test_config_from_config_parser(cfg_parser, expected_keys):
    cfg = config.configuration(cfg_parser, {})

    assert isinstance(cfg, config.Config)
    assert set(cfg.__dict__) == expected_keys
    assert cfg.input_file == "/data/points.geojson"
    assert cfg.random_nodes == 10
    assert cfg.lat_range == (50.0, 52.0)
    assert cfg.lon_range == (6.0, 9.0)
    assert cfg.seed == 42
    assert cfg.model == "sisg"
    assert cfg.k == 2.5
    assert cfg.probability == 0.2
    assert cfg.basename == "SISG-graph"
    assert cfg.write_csv
    assert not cfg.write_tgf


def test_config_defaults():
    cfg = config.configuration(ConfigParser(interpolation=ExtendedInterpolation()), {})

    assert cfg.input_file is None
    assert cfg.seed is None
    assert cfg.random_nodes == constants.DEFAULT_RANDOM_NODES
    assert cfg.lat_range == (-90.0, 90.0)
    assert cfg.lon_range == (-180.0, 180.0)
    assert cfg.model == constants.DEFAULT_MODEL
    assert cfg.k == constants.DEFAULT_K
    assert cfg.probability == constants.DEFAULT_PROBABILITY
    assert cfg.output_dir == constants.DEFAULT_OUTPUT_DIR
    assert cfg.write_csv
    assert cfg.write_tgf


def test_config_with_overrides(cfg_parser):
    overrides = {"model": "gilbert", "probability": 0.9, "seed": 7, "k": None}
    cfg = config.configuration(cfg_parser, overrides)

    assert cfg.model == "gilbert"
    assert cfg.probability == 0.9
    assert cfg.seed == 7
    assert cfg.k == 2.5


def test_config_with_bad_range(cfg_parser):
    cfg_parser.set("Source", "lat_range", "50")
    with pytest.raises(ValueError):
        config.configuration(cfg_parser, {})


def test_config_with_bad_number(cfg_parser):
    cfg_parser.set("Model", "k", "lots")
    with pytest.raises(ValueError):
        config.configuration(cfg_parser, {})


def test_get_configuration_value(cfg_parser):
    result = config._get_configuration_value("Source", "input_file", str, cfg_parser, {})
    assert result == cfg_parser.get("Source", "input_file")


def test_get_configuration_value_with_override(cfg_parser):
    overrides = {"input_file": "foobar"}
    result = config._get_configuration_value("Source", "input_file", str, cfg_parser, overrides)
    assert result == "foobar"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("1,2", (1.0, 2.0)),
        (" -10 , 10 ", (-10.0, 10.0)),
        ((3, 4), (3.0, 4.0)),
    ],
)
def test_parse_range(value, expected):
    assert config.parse_range(value) == expected


def test_validate_valid_config(valid_config):
    assert config.validate(valid_config) == (True, [])


def test_validate_reports_every_problem(valid_config):
    valid_config.model = "erdos"
    valid_config.k = -1
    valid_config.probability = 2
    valid_config.input_file = "/no/such/file.csv"

    valid, errors = config.validate(valid_config)

    assert not valid
    assert len(errors) == 4


def test_validate_requires_nodes(valid_config):
    valid_config.random_nodes = 0

    valid, errors = config.validate(valid_config)

    assert not valid
    assert "No nodes to process" in errors[0]


@patch("spatialgraph.config.os.path.exists", return_value=True)
def test_validate_accepts_input_file_only(mock, valid_config):
    valid_config.random_nodes = 0
    valid_config.input_file = "points.csv"

    assert config.validate(valid_config) == (True, [])
