"""
covxml - Coverage snapshot to XML report conversion

A build-integration task that turns a coverage.py data file produced by a
test run into a Cobertura-style XML report for CI servers.
"""

__version__ = "0.1.0"
