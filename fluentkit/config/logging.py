from __future__ import annotations

import os
from typing import Dict, Any

# Default logging channel
default = 'fluent'

channels: Dict[str, Dict[str, Any]] = {
    'fluent': {
        'driver': 'stack',
        'channels': ['stderr'],
        'level': os.getenv('LOG_LEVEL', 'warning').upper(),
    },

    'stderr': {
        'driver': 'stderr',
        'level': os.getenv('LOG_LEVEL', 'warning').upper(),
        'formatter': 'laravel',
    },

    'single': {
        'driver': 'single',
        'path': os.getenv('LOG_PATH', 'storage/logs/fluent.log'),
        'level': os.getenv('LOG_LEVEL', 'debug').upper(),
    },

    'json': {
        'driver': 'single',
        'path': os.getenv('LOG_PATH', 'storage/logs/fluent.json.log'),
        'level': os.getenv('LOG_LEVEL', 'debug').upper(),
        'formatter': 'json',
    },
}
