
# third party imports
from ruamel.yaml.comments import CommentedMap


class YamlMap:
    '''Typed read access to a ruamel CommentedMap,
    a wrong type for a key gives the default value.'''

    def __init__(self, map: CommentedMap):
        self._map = map

    def int(self, key: str, default=0) -> int:
        value = self._map.get(key, default)
        if value is None or isinstance(value, bool):
            return default

        try:
            value_int = int(value)
        except (TypeError, ValueError):
            return default
        else:
            return value_int

    def bool(self, key: str, default=False) -> bool:
        value = self._map.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            if value.lower() in ('true', 'yes', 'on', '1'):
                return True
            if value.lower() in ('false', 'no', 'off', '0'):
                return False
        return default

    def str_list(self, key: str) -> list[str]:
        value = self._map.get(key)
        if isinstance(value, list):
            return [v for v in value if isinstance(v, str)]
        if isinstance(value, str):
            return [value]
        return []
