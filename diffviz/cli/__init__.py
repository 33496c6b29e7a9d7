"""Command line interface for diffviz, see :mod:`diffviz.cli.main`."""
