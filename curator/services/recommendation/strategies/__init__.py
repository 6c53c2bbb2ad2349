from curator.services.recommendation.strategies.actors import ActorStrategy
from curator.services.recommendation.strategies.interests import InterestStrategy
from curator.services.recommendation.strategies.liked import LikedStrategy
from curator.services.recommendation.strategies.watched import WatchedStrategy

__all__ = [
    "LikedStrategy",
    "WatchedStrategy",
    "ActorStrategy",
    "InterestStrategy",
]
