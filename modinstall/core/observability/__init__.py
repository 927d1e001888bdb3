"""Observability — logging setup and telemetry."""
