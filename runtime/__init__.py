"""
Runtime package for recdb.

This package contains:
- Service (RecordService: the public operation surface, writes the log)
- Stores (record files, operation log)
- Models (Pydantic results and log entries)
"""
