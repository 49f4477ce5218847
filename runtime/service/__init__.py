"""
Service layer for the recdb runtime.

RecordService threads the store configuration through every operation
and writes each outcome to the operation log.
"""
