from __future__ import annotations

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

Category = Literal["safe", "warning", "danger"]
RiskLevel = Literal["safe", "low", "medium", "high", "critical"]


class Indicator(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: Category
    title: str
    description: str
    weight: int = Field(0, ge=0)


class UrlParts(BaseModel):
    """Parsed pieces of a normalized URL that the rules look at."""

    model_config = ConfigDict(frozen=True)

    url: str
    scheme: str
    hostname: str = ""
    port: Optional[int] = None


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    normalized_url: str
    raw_score: int
    score: int = Field(..., ge=0, le=100)
    risk_level: RiskLevel
    risk_label: str
    recommendation: str
    indicators: Tuple[Indicator, ...]
