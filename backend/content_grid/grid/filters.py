# backend/content_grid/grid/filters.py

"""
Post 一覧からフィルタ候補（FilterSet）を集計するモジュール。
"""

from typing import Dict, Iterable, List, Set

from .schemas import FilterSet, OwnerFacet, Post

# オーナー表示色。投稿数の多い順に先頭から割り当て、7 人目以降は循環する。
OWNER_PALETTE: List[str] = [
    "#F97316",
    "#3B82F6",
    "#10B981",
    "#A855F7",
    "#EF4444",
    "#EAB308",
]

# UI の並びを安定させるため、データからは集計しない固定リスト。
PLATFORMS: List[str] = [
    "Instagram",
    "Facebook",
    "TikTok",
    "LinkedIn",
    "YouTube",
    "X",
]


def owner_color(index: int) -> str:
    return OWNER_PALETTE[index % len(OWNER_PALETTE)]


def build_filters(posts: Iterable[Post]) -> FilterSet:
    """
    投稿一覧を 1 回走査してフィルタ候補を作る。

    - clients / projects / brands / statuses: 重複排除して辞書順
    - owners: 投稿数の降順。同数の場合は最初に出現した順（安定ソート）
    - platforms: 固定リスト
    """
    clients: Set[str] = set()
    projects: Set[str] = set()
    brands: Set[str] = set()
    statuses: Set[str] = set()
    owner_counts: Dict[str, int] = {}

    for post in posts:
        if post.client:
            clients.add(post.client)
        if post.project:
            projects.add(post.project)
        if post.brand:
            brands.add(post.brand)
        if post.status:
            statuses.add(post.status)
        if post.owner:
            owner_counts[post.owner] = owner_counts.get(post.owner, 0) + 1

    ranked = sorted(owner_counts.items(), key=lambda pair: pair[1], reverse=True)
    owners = [
        OwnerFacet(name=name, count=count, color=owner_color(index))
        for index, (name, count) in enumerate(ranked)
    ]

    return FilterSet(
        clients=sorted(clients),
        projects=sorted(projects),
        brands=sorted(brands),
        statuses=sorted(statuses),
        platforms=list(PLATFORMS),
        owners=owners,
    )
