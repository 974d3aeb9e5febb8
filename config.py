"""
config.py — App Defaults
=========================
Plain module constants.  main.py loads them with
`app.config.from_object(config)` and then lets FLASK_* environment
variables override them (`FLASK_DEFAULT_ARRAY_SIZE=80`, …).
"""

import secrets

SECRET_KEY = secrets.token_hex(32)

# array generation
DEFAULT_ARRAY_SIZE = 50
MIN_ARRAY_SIZE     = 10
MAX_ARRAY_SIZE     = 150
MIN_VALUE          = 1
MAX_VALUE          = 100

# run selection
DEFAULT_ALGORITHM  = "bubbleSort"
DEFAULT_TARGET     = 50
DEFAULT_SPEED      = "medium"

# server
HOST = "0.0.0.0"
PORT = 5000

# in-memory runs kept at once (one per browser session, LRU evicted)
MAX_RUNS = 64
