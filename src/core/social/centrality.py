"""중심성과 커뮤니티

- PageRank (가중): PR(v) = (1-d)/N + d × Σ w(u→v) × PR(u) / L(u)
- 연결 중심성: (in + out) / (2 × (N-1))
- 커뮤니티: trust > 0 간선만 따라가는 연결 요소 탐색.
  모듈성 최적화(Louvain)의 단순화 버전이며 Louvain 구현이 아니다.
"""

from collections import deque
from typing import Dict, Set

from src.core.logging import get_logger
from src.core.social.calculations import authority_weight
from src.core.social.models import SocialGraph

logger = get_logger(__name__)

PAGERANK_DAMPING = 0.85
PAGERANK_ITERATIONS = 20
PAGERANK_TOLERANCE = 1e-6


def calculate_page_rank(graph: SocialGraph) -> Dict[str, float]:
    """가중 PageRank.

    Returns:
        character_id → 점수. 빈 그래프면 빈 dict (반복 없음).
        간선 없는 그래프는 균등값 (1-d)/N으로 수렴.
    """
    node_ids = list(graph.nodes.keys())
    n = len(node_ids)
    if n == 0:
        return {}

    ranks: Dict[str, float] = {node_id: 1.0 / n for node_id in node_ids}

    for iteration in range(PAGERANK_ITERATIONS):
        new_ranks: Dict[str, float] = {}
        max_diff = 0.0

        for node_id in node_ids:
            node = graph.nodes[node_id]

            total = 0.0
            for rel_id in node.incoming_relations:
                rel = graph.relationships.get(rel_id)
                if rel is None:
                    continue
                source = graph.nodes.get(rel.source_id)
                if source is None or not source.outgoing_relations:
                    continue
                out_degree = len(source.outgoing_relations)
                total += (
                    authority_weight(rel.trust) * ranks[rel.source_id] / out_degree
                )

            new_rank = (1 - PAGERANK_DAMPING) / n + PAGERANK_DAMPING * total
            new_ranks[node_id] = new_rank
            max_diff = max(max_diff, abs(new_rank - ranks[node_id]))

        ranks = new_ranks
        if max_diff < PAGERANK_TOLERANCE:
            logger.debug(f"PageRank 수렴: {iteration + 1}회 반복")
            break

    return ranks


def calculate_degree_centrality(graph: SocialGraph) -> Dict[str, float]:
    """정규화 연결 중심성. 노드 1개 이하면 전부 0."""
    n = len(graph.nodes)
    if n <= 1:
        return {node_id: 0.0 for node_id in graph.nodes}

    return {
        node_id: (len(node.incoming_relations) + len(node.outgoing_relations))
        / (2 * (n - 1))
        for node_id, node in graph.nodes.items()
    }


def detect_communities(graph: SocialGraph) -> Dict[str, str]:
    """긍정 관계(trust > 0)로 연결된 노드를 같은 커뮤니티로 묶는다.

    간선 방향은 무시한다. 커뮤니티 ID는 노드 삽입 순서대로
    "community-0", "community-1", ...

    Returns:
        character_id → community_id
    """
    communities: Dict[str, str] = {}
    visited: Set[str] = set()
    counter = 0

    for start in graph.nodes:
        if start in visited:
            continue

        community_id = f"community-{counter}"
        counter += 1
        queue = deque([start])

        while queue:
            current = queue.popleft()
            if current in visited:
                continue
            visited.add(current)
            communities[current] = community_id

            node = graph.nodes.get(current)
            if node is None:
                continue

            for rel_id in node.outgoing_relations + node.incoming_relations:
                rel = graph.relationships.get(rel_id)
                if rel is None or rel.trust <= 0:
                    continue
                neighbor = rel.target_id if rel.source_id == current else rel.source_id
                if neighbor not in visited:
                    queue.append(neighbor)

    return communities
