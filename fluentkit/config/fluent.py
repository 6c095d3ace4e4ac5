from __future__ import annotations

import os

# Coerce empty, non-sequence properties into a list on add<Prop>(item)
init_arrays_if_empty: bool = os.getenv('FLUENT_INIT_ARRAYS_IF_EMPTY', 'true').lower() == 'true'

# Log channel the fluent loggers write into
log_channel: str = os.getenv('FLUENT_LOG_CHANNEL', 'fluent')
