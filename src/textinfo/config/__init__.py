"""Configuration schema and YAML loading."""

from .schema import AnalyzerConfig, SegmentationRules, LanguageCfg, NGramCfg, TextOptions
from .loader import load_config, load_config_from_string

__all__ = [
    'AnalyzerConfig',
    'SegmentationRules',
    'LanguageCfg',
    'NGramCfg',
    'TextOptions',
    'load_config',
    'load_config_from_string',
]
