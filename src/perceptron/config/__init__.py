from perceptron.config.models import (
    CONFIG_PATH_ENV_VAR,
    NeuronConfig,
    resolve_config_path,
)

__all__ = [
    "CONFIG_PATH_ENV_VAR",
    "NeuronConfig",
    "resolve_config_path",
]
