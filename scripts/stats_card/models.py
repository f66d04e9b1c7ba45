#------------------------------------------------------------
#                          models.py
#     Defines dataclasses used by the stats card pipeline.

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set
from .errors import StatsCardError

@dataclass
class CardConfig:
    github_username: str
    github_token: str
    display_name: str
    subtitle: str
    ignored_languages: Set[str] = field(default_factory=set)

@dataclass
class LanguageEdge:
    size: int
    name: str
    color: Optional[str] = None

@dataclass
class ProfileStats:
    commits: int
    pull_requests: int
    repositories: List[List[LanguageEdge]]

@dataclass
class LanguageAggregate:
    size: int
    color: Optional[str]

@dataclass
class TopLanguage:
    name: str
    color: str
    percent: int
    size: int
    icon_url: str

@dataclass(frozen=True)
class RankResult:
    label: str
    color: str
    shadow_color: str

@dataclass
class CardResponse:
    status: int
    body: str
    content_type: str
    headers: Dict[str, str] = field(default_factory=dict)
    error: Optional[StatsCardError] = None
