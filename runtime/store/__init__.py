"""
Storage abstractions for the recdb runtime.

Includes:
- RecordStore: read/write access to the JSON record files
- LogStore: append-only operation log
"""
