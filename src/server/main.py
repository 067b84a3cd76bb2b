#!/usr/bin/env python3
"""
Idea Submission Validation MCP Server

Exposes the submission validator as MCP tools:
- Full draft validation with tagged errors and warnings
- Quality scoring with a per-section breakdown
- Individual spam, privacy and duplicate checks
- Draft progression for a user's project
"""

import dataclasses
import json
import logging
import os
from typing import Any, Dict, List, Optional

from fastmcp import FastMCP

from idea_validation import (
    IdeaValidationError,
    Submission,
    SubmissionValidator,
    ValidationPolicy,
)
from idea_validation.data_models import FINAL_DRAFT
from idea_validation.drafts import next_draft_number as compute_next_draft_number
from idea_validation.drafts import score_divergence
from idea_validation.duplicates import DuplicateDetector
from idea_validation.insights import check_market_understanding, check_technical_feasibility
from idea_validation.patterns import PATTERN_TABLE_VERSION
from idea_validation.privacy import PrivacyDetector
from idea_validation.quality import QualityScorer
from idea_validation.spam import SpamDetector

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP("Idea Submission Validator")

# Global instances
validator: Optional[SubmissionValidator] = None


def get_validator_instance() -> SubmissionValidator:
    """Get the singleton validator, building its policy from the environment."""
    global validator
    if validator is None:
        validator = SubmissionValidator(ValidationPolicy.from_env())
        logger.info(f"Submission validator initialized (patterns {PATTERN_TABLE_VERSION})")
    return validator


def _failure(error: Exception) -> str:
    payload: Dict[str, Any] = {"success": False, "error": str(error)}
    if isinstance(error, IdeaValidationError):
        payload["details"] = error.to_dict()
    return json.dumps(payload, indent=2)


@mcp.tool
async def validate_submission(
    submission: Dict[str, Any],
    existing_ideas: Optional[List[Dict[str, Any]]] = None,
    draft_number: int = 1,
    ai_score: Optional[float] = None,
) -> str:
    """Validate an idea submission for a draft stage (1-3)."""
    try:
        result = get_validator_instance().validate(submission, existing_ideas or [], draft_number)
        response: Dict[str, Any] = {
            "success": True,
            "result": result.to_dict(),
            "pattern_version": PATTERN_TABLE_VERSION,
        }
        if ai_score is not None:
            response["score_divergence"] = dataclasses.asdict(
                score_divergence(result.quality_score, ai_score)
            )
        return json.dumps(response, indent=2)

    except Exception as e:
        logger.error(f"Submission validation failed: {e}")
        return _failure(e)


@mcp.tool
async def score_submission(submission: Dict[str, Any], draft_number: Optional[int] = None) -> str:
    """Compute the 0-100 quality score with its section breakdown."""
    try:
        parsed = Submission.from_dict(submission)
        breakdown = QualityScorer().breakdown(parsed, draft_number)
        return json.dumps({
            "success": True,
            "quality_score": breakdown.total,
            "breakdown": dataclasses.asdict(breakdown),
            "feasibility": dataclasses.asdict(check_technical_feasibility(parsed)),
            "market": dataclasses.asdict(check_market_understanding(parsed)),
        }, indent=2)

    except Exception as e:
        logger.error(f"Quality scoring failed: {e}")
        return _failure(e)


@mcp.tool
async def check_spam(text: str) -> str:
    """Check a piece of text for promotional or low-quality content."""
    try:
        check = SpamDetector().check(text)
        return json.dumps({"success": True, "check": dataclasses.asdict(check)}, indent=2)
    except Exception as e:
        logger.error(f"Spam check failed: {e}")
        return _failure(e)


@mcp.tool
async def check_privacy(text: str) -> str:
    """Check a piece of text for personal information."""
    try:
        check = PrivacyDetector().check(text)
        return json.dumps({"success": True, "check": dataclasses.asdict(check)}, indent=2)
    except Exception as e:
        logger.error(f"Privacy check failed: {e}")
        return _failure(e)


@mcp.tool
async def check_duplicates(submission: Dict[str, Any], existing_ideas: List[Dict[str, Any]]) -> str:
    """Compare a submission against published ideas."""
    try:
        parsed = Submission.from_dict(submission)
        threshold = get_validator_instance().policy.duplicate_threshold
        check = DuplicateDetector(threshold=threshold).check(parsed, existing_ideas)
        return json.dumps({"success": True, "check": dataclasses.asdict(check)}, indent=2)
    except Exception as e:
        logger.error(f"Duplicate check failed: {e}")
        return _failure(e)


@mcp.tool
async def next_draft_number(drafts: List[Dict[str, Any]]) -> str:
    """Work out which draft number a project's next submission carries."""
    try:
        number = compute_next_draft_number(drafts)
        return json.dumps({
            "success": True,
            "draft_number": number,
            "is_final": number == FINAL_DRAFT,
            "closed": number > FINAL_DRAFT,
        }, indent=2)
    except Exception as e:
        logger.error(f"Draft number lookup failed: {e}")
        return _failure(e)


if __name__ == "__main__":
    logger.info("Starting Idea Submission Validator MCP Server")
    mcp.run()
