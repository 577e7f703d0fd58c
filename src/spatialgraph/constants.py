# Geodesy
EARTH_RADIUS = 6371.009

# Edge generation models
SISG_MODEL = 'sisg'
GILBERT_MODEL = 'gilbert'
MODELS = (SISG_MODEL, GILBERT_MODEL)

# Default configuration values
DEFAULT_MODEL = SISG_MODEL
DEFAULT_K = 1.0
DEFAULT_PROBABILITY = 0.1
DEFAULT_RANDOM_NODES = 0
DEFAULT_LAT_RANGE = '-90,90'
DEFAULT_LON_RANGE = '-180,180'
DEFAULT_OUTPUT_DIR = 'output'
DEFAULT_BASENAME = 'graph'
DEFAULT_WRITE_CSV = True
DEFAULT_WRITE_TGF = True

# Configuration sections
SOURCE_SECTION_NAME = 'Source'
MODEL_SECTION_NAME = 'Model'
DESTINATION_SECTION_NAME = 'Destination'

# Logging
LOGGER_NAME = 'sgraph'
LOGFILE_NAME = 'sgraph.log'

# GeoJSON property keys holding a feature name, lowest precedence first
GEOJSON_NAME_KEYS = ('name', 'NAME', 'naam', 'HTXT')

# Export formats
CSV_HEADER = ('from', 'to')
CSV_SEPARATOR = ', '
TGF_NAME_SEPARATOR = '  -  '
TGF_SECTION_SEPARATOR = '#'
NOT_FOUND_INDEX = -1
