"""
Test package for MyDay.

Tests are organised by scope:
- unit/: Unit tests for models, codecs, storage and ordering
- cli/: Command line tests run through typer's CliRunner
"""
