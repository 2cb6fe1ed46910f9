"""Baselines, colours, glyphs and particles for telemetry-driven terminal visualizations."""

__version__ = "0.1.0"