from .run_config_parser import RunConfig, RunConfigParser

__all__ = [
    "RunConfig",
    "RunConfigParser"
]
