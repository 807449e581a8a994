"""Small worked programs: expression evaluation, toy servers, concurrency and sequence utilities."""

__version__ = "0.1.0"