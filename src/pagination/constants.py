# src/pagination/constants.py

# Shard queried when a request does not name one.
DEFAULT_SHARD = 0

DEFAULT_PAGE_NUMBER = 1
