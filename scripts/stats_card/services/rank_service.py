#------------------------------------------------------------
#                       rank_service.py
#         Scores activity volume into a rank tier.

from ..models import RankResult

PULL_REQUEST_WEIGHT = 5

# Thresholds are checked in order; the first one reached wins.
RANK_TIERS = (
    (2000, RankResult(label="S+", color="#ff00d4", shadow_color="#ff00d4")),
    (1000, RankResult(label="S", color="#00f0ff", shadow_color="#00f0ff")),
    (500, RankResult(label="A", color="#50fa7b", shadow_color="#50fa7b")),
    (200, RankResult(label="B", color="#f1fa8c", shadow_color="#f1fa8c")),
)
DEFAULT_RANK = RankResult(label="C", color="#8be9fd", shadow_color="#8be9fd")

def calculate_score(commits: int, pull_requests: int) -> int:
    return commits + pull_requests * PULL_REQUEST_WEIGHT

# This function does map commit and pull request counts to a rank tier.
def calculate_rank(commits: int, pull_requests: int) -> RankResult:
    score = calculate_score(commits, pull_requests)
    for threshold, rank in RANK_TIERS:
        if score >= threshold:
            return rank
    return DEFAULT_RANK
