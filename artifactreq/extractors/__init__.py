"""
Requirement Extractors - One extractor per artifact type.

- RulesRequirementExtractor: engine version required by a rules file
- PluginRequirementExtractor: API version required by a compiled plugin
"""

from .base import BaseRequirementExtractor
from .rules_extractor import RulesRequirementExtractor, RULES_ENGINE_ANCHOR
from .plugin_extractor import PluginRequirementExtractor

__all__ = [
    'BaseRequirementExtractor',
    'RulesRequirementExtractor',
    'PluginRequirementExtractor',
    'RULES_ENGINE_ANCHOR',
]
