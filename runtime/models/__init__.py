"""
Pydantic models used by the recdb runtime.

- record_models: OperationResult + ErrorKind + LogEntry
"""
