import os
from functools import lru_cache
from typing import Union


class Env:
    @staticmethod
    @lru_cache
    def get(var: str, default: str) -> str:
        return os.getenv(var, default)

    @staticmethod
    @lru_cache
    def get_bool(var: str, default: bool = False) -> bool:
        return Env.to_bool(Env.get(var, ""), default)

    @staticmethod
    @lru_cache
    def to_bool(var: Union[None, str, bool], default: bool = False) -> bool:

        if var is None or var == "":
            return default

        if isinstance(var, bool):
            return var

        # if not directly a bool, try an interpretation
        # INTEGERS
        try:
            tmp = int(var)
            return bool(tmp)
        except (TypeError, ValueError):
            pass

        # STRINGS
        if isinstance(var, str):
            # false / False / FALSE / no / off
            if var.lower() in ("false", "no", "off"):
                return False
            # any non empty string has to be considered True
            if len(var) > 0:
                return True

        return default
