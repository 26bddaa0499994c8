"""
Advisory Module

Optional LLM commentary on the current weld parameters.
"""

from .config import AdvisoryConfig
from .client import WeldAdvisor, build_prompt

__all__ = ["AdvisoryConfig", "WeldAdvisor", "build_prompt"]
