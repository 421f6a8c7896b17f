"""Artifact IO: Parquet schemas and output path conventions."""
