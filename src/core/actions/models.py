"""게임 캐릭터 / 게임 상태 모델

월드 상태 + 캐릭터 + 소셜 그래프를 한 스냅샷으로 묶는다.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from src.core.belief.models import BeliefState
from src.core.social.models import SocialGraph
from src.core.utility.models import CharacterState, NeedState
from src.core.world.models import WorldState


@dataclass(frozen=True)
class GameCharacter:
    """캐릭터 전체 상태"""

    id: str
    name: str
    needs: NeedState
    beliefs: BeliefState
    traits: Tuple[str, ...] = ()
    intelligence: float = 0.7
    location: str = "TOWN"
    attention: float = 1.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.intelligence <= 1.0:
            raise ValueError(f"intelligence out of range [0, 1]: {self.intelligence}")
        if not 0.0 <= self.attention <= 1.0:
            raise ValueError(f"attention out of range [0, 1]: {self.attention}")

    def to_character_state(self) -> CharacterState:
        return CharacterState(
            id=self.id,
            needs=self.needs,
            traits=self.traits,
            intelligence=self.intelligence,
            location=self.location,
        )


@dataclass(frozen=True)
class GameState:
    world: WorldState
    characters: Dict[str, GameCharacter] = field(default_factory=dict)
    social_graph: SocialGraph = field(default_factory=SocialGraph)
