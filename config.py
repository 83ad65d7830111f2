"""Configuration"""

import logging


# Logging
LOGGING_CONFIG = {
    "level": logging.INFO,
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# Default precedence convention handed to downstream stages (see tokens.PRECEDENCE_MAPS)
PRECEDENCE_NAME = 'standard'

# Token stream visualization
VISUALIZER_CONFIG = {
    "output_file": "token_stream.html",
    "title": "Token stream for: {expression}",
    "height": 500,
    "marker_size": 28,
    "colors": {
        "number": '#1890ff',
        "operator": '#fa8c16',
        "bracket": '#8c8c8c',
        "implicit": '#eb2f96',  # synthesized multiplication
        "depth": '#d9d9d9',
    },
}


def setup_logging(level=None):
    """Configure root logging for scripts and notebooks using this package."""
    logging.basicConfig(
        level=LOGGING_CONFIG["level"] if level is None else level,
        format=LOGGING_CONFIG["format"],
    )
