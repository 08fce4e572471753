import logging
from pathlib import Path

import yaml

DEFAULTS = {
    "max_depth": 250,
    "print_tokens": True,
    "print_ast": True,
    "log_level": "WARNING",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CalcOptions:
    __slots__ = tuple(DEFAULTS)

    def __init__(self, **kwargs):
        unknown = kwargs.keys() - DEFAULTS.keys()
        if unknown:
            raise ValueError(
                f"Unknown option(s): {', '.join(sorted(map(str, unknown)))}"
            )
        options = DEFAULTS | kwargs
        max_depth = options["max_depth"]
        if max_depth is not None and (
            not isinstance(max_depth, int) or isinstance(max_depth, bool) or max_depth < 1
        ):
            raise ValueError(
                f"max_depth must be a positive integer or null, got {max_depth!r}"
            )
        for k in ("print_tokens", "print_ast"):
            if options[k] is not True and options[k] is not False:
                raise ValueError(f"{k} must be a boolean, got {options[k]!r}")
        log_level = str(options["log_level"]).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {options['log_level']!r}"
            )
        options["log_level"] = log_level
        for k, v in options.items():
            setattr(self, k, v)

    @classmethod
    def from_yaml(cls, text, *, base=None):
        options = base.as_dict() if base is not None else {}
        text = text.strip()
        if text:
            try:
                extra_params = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid parameters: {exc}") from exc
            if extra_params is not None:
                if not isinstance(extra_params, dict):
                    raise ValueError("Parameters must be a JSON or YAML object")
                bad_keys = [k for k in extra_params if not isinstance(k, str)]
                if bad_keys:
                    raise ValueError(
                        f"Parameter names must be strings, got {bad_keys!r}"
                    )
                options |= extra_params
        return cls(**options)

    @classmethod
    def from_file(cls, path, *, base=None):
        return cls.from_yaml(Path(path).read_text(encoding="utf-8"), base=base)

    def as_dict(self):
        return {k: getattr(self, k) for k in self.__slots__}

    @property
    def log_level_value(self):
        return logging.getLevelName(self.log_level)

    def __repr__(self):
        return f"<CalcOptions: {', '.join(f'{k}={v!r}' for k, v in self.as_dict().items())}>"


__all__ = ("CalcOptions", "DEFAULTS")
