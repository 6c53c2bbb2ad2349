"""
Interest profile - additive, transparent design.

Interactions add a fixed increment to every tag of the item acted on. No
hidden interactions, easy to debug: print(profile.as_dict()).
"""

from curator.services.profile.accumulator import InterestAccumulator
from curator.services.profile.evidence import EvidenceCalculator

__all__ = [
    "InterestAccumulator",
    "EvidenceCalculator",
]
