import yaml
import os
import logging
from typing import Optional, Tuple
from pydantic import BaseModel, Field, ValidationError, field_validator

from jobmatch.exceptions import ConfigError, InvalidOptionsError

logger = logging.getLogger(__name__)


class ScoreWeights(BaseModel):
    """
    Points each dimension contributes to the 0-100 total.

    Salary points are only earned when both sides carry salary data;
    otherwise they are left unused rather than redistributed.
    """
    skills: float = 40.0
    experience: float = 20.0
    location: float = 15.0
    title: float = 10.0
    industry: float = 10.0
    salary: float = 5.0

    @field_validator('*')
    @classmethod
    def _non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("weights must be >= 0")
        return value

    @property
    def total(self) -> float:
        return self.skills + self.experience + self.location + self.title + self.industry + self.salary


class ExperienceLevelConfig(BaseModel):
    """Expected years-of-experience interval per posting level."""
    entry: Tuple[float, float] = (0.0, 2.0)
    mid: Tuple[float, float] = (2.0, 5.0)
    senior: Tuple[float, float] = (5.0, 10.0)
    executive: Tuple[float, float] = (10.0, 20.0)
    unknown: Tuple[float, float] = (0.0, 20.0)

    @field_validator('*')
    @classmethod
    def _ordered(cls, value: Tuple[float, float]) -> Tuple[float, float]:
        low, high = value
        if low < 0 or low > high:
            raise ValueError(f"invalid years interval {value!r}")
        return value


class SalaryConfig(BaseModel):
    """Annualisation factors (40h x 52w is an approximation kept on purpose)."""
    hours_per_week: float = 40.0
    weeks_per_year: float = 52.0
    months_per_year: float = 12.0
    partial_overlap_floor: float = 0.3


class ScorerConfig(BaseModel):
    """
    Configuration for the MatchScorer.

    Holds the dimension weights, the experience level intervals and the
    thresholds that decide which explanation strings are emitted.
    """
    weights: ScoreWeights = Field(default_factory=ScoreWeights)
    experience_levels: ExperienceLevelConfig = Field(default_factory=ExperienceLevelConfig)
    salary: SalaryConfig = Field(default_factory=SalaryConfig)

    # Neutral sub-scores when the candidate declared no preference
    neutral_title_score: float = 0.5
    neutral_industry_score: float = 0.5
    no_location_preference_remote_score: float = 1.0
    no_location_preference_onsite_score: float = 0.5
    remote_fallback_score: float = 0.8

    # Reason thresholds
    experience_match_threshold: float = 0.7
    experience_partial_threshold: float = 0.3
    title_reason_threshold: float = 0.5
    salary_reason_threshold: float = 0.7


class RankOptions(BaseModel):
    """Per-call ranking options.

    Location/remote filters are applied to the posting pool before scoring.
    Bad values raise InvalidOptionsError; inside a config file they surface
    as ConfigError through load_config.
    """
    limit: int = 50
    min_score: float = 0.3
    location_filter: Optional[str] = None
    remote_only: bool = False

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidOptionsError(str(e)) from e

    @field_validator('limit')
    @classmethod
    def _limit_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("limit must be >= 1")
        return value

    @field_validator('min_score')
    @classmethod
    def _min_score_range(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("min_score must be within [0, 1]")
        return value


class RankingConfig(BaseModel):
    """
    Configuration for ranking and the match service.
    """
    defaults: RankOptions = Field(default_factory=RankOptions)
    max_workers: int = 1  # 1 = score sequentially
    candidate_pool_size: int = 200  # postings pulled from the store per request


class AppConfig(BaseModel):
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load AppConfig from YAML, falling back to defaults if the file is absent."""
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        fallback = os.path.join(base_dir, "..", "config.yaml")
        if os.path.exists(fallback):
            config_path = fallback
        else:
            logger.info(f"No config file at {config_path}, using defaults")
            config_path = None

    data = {}
    if config_path:
        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read config {config_path}: {e}") from e

    # Allow env var overrides for ranking defaults
    ranking = data.setdefault('ranking', {}) or {}
    data['ranking'] = ranking
    defaults = ranking.setdefault('defaults', {}) or {}
    ranking['defaults'] = defaults

    env_min_score = os.environ.get("JOBMATCH_MIN_SCORE")
    if env_min_score:
        defaults['min_score'] = env_min_score

    env_limit = os.environ.get("JOBMATCH_LIMIT")
    if env_limit:
        defaults['limit'] = env_limit

    env_workers = os.environ.get("JOBMATCH_MAX_WORKERS")
    if env_workers:
        ranking['max_workers'] = env_workers

    try:
        return AppConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
