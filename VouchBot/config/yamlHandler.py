import os
import yaml

config_path = os.path.join(os.path.dirname(__file__), "conf.yml")

_config = None

def load_config(path=None):
    global _config, config_path
    if path is not None:
        config_path = str(path)
    with open(config_path, "r", encoding="utf-8-sig") as file:
        _config = yaml.safe_load(file) or {}
    return _config

def _normalize(value):
    if isinstance(value, bool) or isinstance(value, (int, float)):
        return value

    if isinstance(value, str):
        val_lower = value.strip().lower()
        if val_lower == "true":
            return True
        if val_lower == "false":
            return False

        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            pass

    return value

def get_value(*keys):
    value = _config if _config is not None else load_config()
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            raise KeyError(f"Key path {' -> '.join(keys)} not found in config.")
    return _normalize(value)

def get_optional(*keys, default=None):
    try:
        return get_value(*keys)
    except KeyError:
        return default
