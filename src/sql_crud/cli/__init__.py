"""Command line tools for SqlCrud."""
