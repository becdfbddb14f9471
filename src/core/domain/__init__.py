"""Domain models, value objects and error kinds.

The domain knows nothing about the terminal, subprocesses or HTTP transports:
only the concepts of the diagnostic run.
"""
