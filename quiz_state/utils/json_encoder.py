"""JSON encoding for domain objects"""
import dataclasses
import json
from enum import Enum

class DomainEncoder(json.JSONEncoder):
    """Encodes dataclasses, enums and tuples produced by the domain models"""

    def default(self, obj):
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
        if isinstance(obj, Enum):
            return obj.value
        return super().default(obj)

def quiz_to_dict(quiz) -> dict:
    """Plain dict view of a Quiz with the reward distribution flattened"""
    data = json.loads(json.dumps(quiz, cls=DomainEncoder))
    rewards = quiz.reward_settings
    data['reward_settings'].pop('distribution', None)
    data['reward_settings']['distribution_type'] = rewards.distribution_type.value
    data['reward_settings']['prize_percentage'] = list(rewards.prize_percentage)
    return data
