import configparser
import dataclasses
import datetime as dt
import logging
import os.path
import sys
from pathlib import Path
from typing import Callable, Optional

import numpy as np
from funcy import decorator, partial, rcompose
from pyfiglet import Figlet
from rich.prompt import Confirm, Prompt

from spatialgraph import config
from spatialgraph import constants
from spatialgraph import validation
from spatialgraph.graph import Graph
from spatialgraph.readers import registry


CONSOLE_FORMAT = "%(message)s"
LOGFILE_FORMAT = "%(asctime)s|%(levelname)s|%(name)s|%(message)s"

def _remove_handlers(logger: logging.Logger):
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

def init_logging(logfile: str = constants.LOGFILE_NAME):
    logger = logging.getLogger(constants.LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    _remove_handlers(logger)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    logfile_handler = logging.FileHandler(logfile, "w")
    logfile_handler.setLevel(logging.DEBUG)
    logfile_handler.setFormatter(logging.Formatter(LOGFILE_FORMAT))
    logger.addHandler(logfile_handler)

    # Library modules log below the package logger; route their records to the same handlers.
    library_logger = logging.getLogger("spatialgraph")
    library_logger.setLevel(logging.DEBUG)
    _remove_handlers(library_logger)
    library_logger.addHandler(logfile_handler)

@decorator
def log(call):
    logging.getLogger(constants.LOGGER_NAME).info(call._func.__name__)
    return call()

def banner():
    """
    Displays the name of this utility using incredible ASCII-art.
    """
    f = Figlet(font='slant')
    return f.renderText('sgraph')

def init_config(configuration_file):
    """
    Prompts the user for configuration values and then creates a valid configuration file.
    """
    print("""This utility will create a spatial graph configuration file by prompting """
          """you for values for each of the configuration parameters.""")
    print()
    if not configuration_file:
        configuration_file = Prompt.ask("configuration file name", default="example.ini")
    else:
        print(f'Creating configuration file {configuration_file}')
        print()

    if (os.path.exists(configuration_file)):
        print(f'WARNING: The {configuration_file} already exists.')
        overwrite = Confirm.ask("Overwrite?")
        if not overwrite:
            print('Not overwriting existing file. Exiting.')
            exit(1)

    cfg_parser = configparser.ConfigParser()

    print()
    print(f'{constants.SOURCE_SECTION_NAME} Parameters')
    print('--------------------------------------------------')
    cfg_parser.add_section(constants.SOURCE_SECTION_NAME)
    cfg_parser.set(constants.SOURCE_SECTION_NAME, "input_file", Prompt.ask("Input file (GeoJSON or CSV, blank for none)", default=""))
    cfg_parser.set(constants.SOURCE_SECTION_NAME, "random_nodes", Prompt.ask("Number of random nodes", default=str(constants.DEFAULT_RANDOM_NODES)))
    cfg_parser.set(constants.SOURCE_SECTION_NAME, "lat_range", Prompt.ask("Latitude range of random nodes", default=constants.DEFAULT_LAT_RANGE))
    cfg_parser.set(constants.SOURCE_SECTION_NAME, "lon_range", Prompt.ask("Longitude range of random nodes", default=constants.DEFAULT_LON_RANGE))
    cfg_parser.set(constants.SOURCE_SECTION_NAME, "seed", Prompt.ask("Random seed (blank for none)", default=""))
    print()

    print()
    print(f'{constants.MODEL_SECTION_NAME} Parameters')
    print('--------------------------------------------------')
    cfg_parser.add_section(constants.MODEL_SECTION_NAME)
    cfg_parser.set(constants.MODEL_SECTION_NAME, "model", Prompt.ask("Edge model", choices=list(constants.MODELS), default=constants.DEFAULT_MODEL))
    cfg_parser.set(constants.MODEL_SECTION_NAME, "k", Prompt.ask("SISG parameter k", default=str(constants.DEFAULT_K)))
    cfg_parser.set(constants.MODEL_SECTION_NAME, "probability", Prompt.ask("Gilbert edge probability", default=str(constants.DEFAULT_PROBABILITY)))
    print()

    print()
    print(f'{constants.DESTINATION_SECTION_NAME} Parameters')
    print('--------------------------------------------------')
    cfg_parser.add_section(constants.DESTINATION_SECTION_NAME)
    cfg_parser.set(constants.DESTINATION_SECTION_NAME, "output_dir", Prompt.ask("Output directory", default=constants.DEFAULT_OUTPUT_DIR))
    cfg_parser.set(constants.DESTINATION_SECTION_NAME, "basename", Prompt.ask("Output file base name", default=constants.DEFAULT_BASENAME))
    cfg_parser.set(constants.DESTINATION_SECTION_NAME, "write_csv", Prompt.ask("Write CSV edge list? (True/False)", default=str(constants.DEFAULT_WRITE_CSV)))
    cfg_parser.set(constants.DESTINATION_SECTION_NAME, "write_tgf", Prompt.ask("Write TGF graph? (True/False)", default=str(constants.DEFAULT_WRITE_TGF)))

    print()
    print(f'Saving new configuration: {configuration_file}')
    with open(configuration_file, "tw") as file:
        cfg_parser.write(file)

    return configuration_file

# -------------------------------------------------------------------

@dataclasses.dataclass
class Action:
    name: str
    successful: bool
    message: Optional[str]
    startDatetime: Optional[dt.datetime] = None
    endDatetime: Optional[dt.datetime] = None

@dataclasses.dataclass
class Ledger:
    graph: Graph
    actions: list[Action] = dataclasses.field(default_factory=list)
    successful: bool = False
    startDatetime: Optional[dt.datetime] = None
    endDatetime: Optional[dt.datetime] = None

# -------------------------------------------------------------------

def process(configuration: config.Config) -> Ledger:
    """
    Builds a graph as described by the configuration: loads the nodes,
    generates the edges and writes the exports.
    """
    logger = logging.getLogger(constants.LOGGER_NAME)
    configuration.show()
    logger.info('')

    valid, errors = config.validate(configuration)
    if not valid:
        logger.info("The configuration is invalid:")
        for msg in errors:
            logger.info(" * " + msg)
        raise ValueError('Invalid configuration')

    rng = np.random.default_rng(configuration.seed)
    operations = [
        load_nodes,
        validate_input,
        generate_edges,
        export_graph,
    ]

    configured_operations = [partial(fn, configuration, rng) for fn in operations]
    recorded_operations = [partial(recorder, fn) for fn in configured_operations]
    pipeline = rcompose(
        start_ledger,
        *recorded_operations,
        end_ledger,
        log_ledger
    )

    ledger = pipeline(Graph())
    summarize_results(ledger)

    if not ledger.successful:
        raise RuntimeError('Unable to build the graph, see the log for details')
    return ledger

def recorder(fn: Callable[[Graph], Graph], ledger: Ledger) -> Ledger:
    name = fn.func.__name__
    start = dt.datetime.now()

    if not all(a.successful for a in ledger.actions):
        successful, message = False, 'Skipped after a failed step'
    else:
        try:
            fn(ledger.graph)
            successful, message = True, None
        except Exception as e:
            logging.getLogger(constants.LOGGER_NAME).error(f'{name} failed: {e}')
            successful, message = False, str(e)

    new_actions = ledger.actions.copy()
    new_actions.append(
            Action(
                name,
                successful=successful,
                message=message,
                startDatetime=start,
                endDatetime=dt.datetime.now()
            )
        )

    return dataclasses.replace(
        ledger,
        actions=new_actions
    )

def start_ledger(graph: Graph) -> Ledger:
    return Ledger(graph, startDatetime=dt.datetime.now())

def end_ledger(ledger: Ledger) -> Ledger:
    return dataclasses.replace(
        ledger,
        endDatetime=dt.datetime.now(),
        successful=all([a.successful for a in ledger.actions])
    )

@log
def load_nodes(configuration: config.Config, rng, graph: Graph) -> Graph:
    logger = logging.getLogger(constants.LOGGER_NAME)
    if configuration.input_file:
        reader = registry.lookup(configuration.input_file)
        graph.add_nodes(reader(configuration.input_file))
        logger.info(f'  Read nodes from {configuration.input_file}')
    if configuration.random_nodes > 0:
        graph.add_nodes_random(configuration.random_nodes,
                               configuration.lat_range,
                               configuration.lon_range,
                               rng)
        logger.info(f'  Sampled {configuration.random_nodes} random nodes')
    logger.info(f'  Graph has {len(graph.nodes)} nodes')
    return graph

@log
def validate_input(configuration: config.Config, rng, graph: Graph) -> Graph:
    valid, errors = validation.validate_nodes(graph.nodes)
    if not valid:
        logger = logging.getLogger(constants.LOGGER_NAME)
        for msg in errors:
            logger.warning(f'  * {msg}')
    return graph

@log
def generate_edges(configuration: config.Config, rng, graph: Graph) -> Graph:
    if configuration.model == constants.SISG_MODEL:
        graph.add_edges_sisg(configuration.k)
    elif configuration.model == constants.GILBERT_MODEL:
        graph.add_edges_gilbert(configuration.probability, rng)
    else:
        raise ValueError(f'Unknown edge model {configuration.model}')
    logging.getLogger(constants.LOGGER_NAME).info(f'  Graph has {len(graph.edges)} edges')
    return graph

@log
def export_graph(configuration: config.Config, rng, graph: Graph) -> Graph:
    logger = logging.getLogger(constants.LOGGER_NAME)
    output_path = Path(configuration.output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    exports = [
        (configuration.write_csv, '.csv', graph.csv),
        (configuration.write_tgf, '.tgf', graph.tgf),
    ]
    for enabled, extension, render in exports:
        if not enabled:
            continue
        file_path = output_path / (configuration.basename + extension)
        with open(file_path, "tw") as f:
            print(render(), file=f)
        logger.info(f'  Wrote {file_path}')
    return graph

def log_ledger(ledger: Ledger) -> Ledger:
    logger = logging.getLogger(constants.LOGGER_NAME)
    logger.info(f"  {ledger.graph}")
    logger.info(f"    * Bounding box   : {ledger.graph.bounding_box()}")
    logger.info(f"    * Successful     : {ledger.successful}")
    logger.info(f"    * Start          : {ledger.startDatetime}")
    logger.info(f"    * End            : {ledger.endDatetime}")
    logger.debug(f"    * Actions:")
    for a in ledger.actions:
        logger.debug(f"        + Name: {a.name}")
        logger.debug(f"          Start     : {a.startDatetime}")
        logger.debug(f"          End       : {a.endDatetime}")
        logger.debug(f"          Successful: {a.successful}")
        if a.message:
            logger.debug(f"          Message   : {a.message}")
    return ledger

def summarize_results(ledger: Ledger) -> None:
    successful_count = len([a for a in ledger.actions if a.successful])
    failed_count = len([a for a in ledger.actions if not a.successful])
    logger = logging.getLogger(constants.LOGGER_NAME)
    logger.info("Processing Summary")
    logger.info("==================")
    logger.info(f"Nodes: {len(ledger.graph.nodes)}")
    logger.info(f"Edges: {len(ledger.graph.edges)}")
    logger.info(f"Start: {ledger.startDatetime}")
    logger.info(f"End: {ledger.endDatetime}")
    logger.info(f"Successful steps: {successful_count}")
    logger.info(f"Failed steps: {failed_count}")
