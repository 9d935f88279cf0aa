from .config_loader import RunnerConfigFileSpec, load_runner_config
from .errors import ConfigError

__all__ = ["load_runner_config", "RunnerConfigFileSpec", "ConfigError"]
