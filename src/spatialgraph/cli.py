import click

from spatialgraph import config
from spatialgraph import constants
from spatialgraph import sgraph


@click.group(epilog="For detailed help on each command, run: sgraph COMMAND --help")
def cli():
    """The sgraph utility builds spatial graphs: it reads or samples
    geographic nodes, connects them with the Scale-Invariant Spatial Graph
    (SISG) or the Gilbert model, and exports the result as CSV and TGF."""
    pass

@cli.command()
@click.option('-c', '--config', help='Path to configuration file to create or replace')
def init(config):
    """Populates a configuration file based on user input."""
    click.echo(sgraph.banner())
    config = sgraph.init_config(config)
    click.echo(f'Initialized the sgraph configuration file {config}')

@cli.command()
@click.option('-c', '--config', 'config_filename', help='Path to configuration file to display', required=True)
def info(config_filename):
    """Summarizes the contents of a configuration file."""
    click.echo(sgraph.banner())
    sgraph.init_logging()
    configuration = config.configuration(config.config_parser_factory(config_filename), {})
    configuration.show()

@cli.command()
@click.option('-c', '--config', 'config_filename', help='Path to configuration file', required=True)
@click.option('-m', '--model', type=click.Choice(constants.MODELS, case_sensitive=False), help='Edge model, overrides the configuration file.')
@click.option('-k', 'k', type=float, help='SISG parameter k, overrides the configuration file.')
@click.option('-p', '--probability', type=float, help='Gilbert edge probability, overrides the configuration file.')
@click.option('-s', '--seed', type=int, help='Seed of the random source.')
@click.option('-n', '--number', 'random_nodes', type=int, metavar='count', help='Number of random nodes to sample.')
def process(config_filename, model, k, probability, seed, random_nodes):
    """Builds a spatial graph based on configuration file contents."""
    click.echo(sgraph.banner())
    sgraph.init_logging()
    overrides = {
        'model': model,
        'k': k,
        'probability': probability,
        'seed': seed,
        'random_nodes': random_nodes,
    }
    try:
        configuration = config.configuration(config.config_parser_factory(config_filename), overrides)
        sgraph.process(configuration)
    except Exception as e:
        print("\nUnable to process data: " + str(e))
        exit(1)
    click.echo(f'Processed nodes using the configuration file {config_filename}')

if __name__ == "__main__":
    cli()
