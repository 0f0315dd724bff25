"""Project setup helpers."""

from .inference import InferredSetup, infer_setup, load_workspace, write_inferred_config

__all__ = ["InferredSetup", "infer_setup", "load_workspace", "write_inferred_config"]
