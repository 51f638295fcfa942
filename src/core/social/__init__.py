"""소셜 그래프 Core 패키지 — 공개 API"""

from src.core.social.models import (
    CharacterNode,
    Relationship,
    SocialGraph,
    create_relationship_id,
)
from src.core.social.calculations import (
    INTIMACY_DECAY_RATE,
    TRUST_DECAY_RATE,
    clamp_intimacy,
    clamp_trust,
)
from src.core.social.graph import (
    add_character_node,
    create_empty_social_graph,
    decay_relationships,
    get_all_relationships_for,
    get_bidirectional_relationship,
    get_relationship,
    upsert_relationship,
)
from src.core.social.centrality import (
    PAGERANK_DAMPING,
    calculate_degree_centrality,
    calculate_page_rank,
    detect_communities,
)
from src.core.social.queries import (
    find_least_trusted,
    find_most_intimate,
    find_most_trusted,
)

__all__ = [
    # models
    "CharacterNode",
    "Relationship",
    "SocialGraph",
    "create_relationship_id",
    # calculations
    "INTIMACY_DECAY_RATE",
    "TRUST_DECAY_RATE",
    "clamp_intimacy",
    "clamp_trust",
    # graph
    "add_character_node",
    "create_empty_social_graph",
    "decay_relationships",
    "get_all_relationships_for",
    "get_bidirectional_relationship",
    "get_relationship",
    "upsert_relationship",
    # centrality
    "PAGERANK_DAMPING",
    "calculate_degree_centrality",
    "calculate_page_rank",
    "detect_communities",
    # queries
    "find_least_trusted",
    "find_most_intimate",
    "find_most_trusted",
]
