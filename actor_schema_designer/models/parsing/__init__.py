from .yaml_parser import SourceMap, YamlParser, join_yaml_path, yaml_parser

__all__ = ["SourceMap", "YamlParser", "join_yaml_path", "yaml_parser"]
