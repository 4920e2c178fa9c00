"""Generator configuration."""

from .loader import load_config
from .model import SkillcatConfig

__all__ = ["SkillcatConfig", "load_config"]
