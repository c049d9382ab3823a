"""Workflow orchestration for chaining generation requests."""

from transmogrifia_images.workflows.batch import run_batch

__all__ = ["run_batch"]
