import unittest
from unittest.mock import patch
import asyncio
import json
import sys
import os

# Add the 'src' directory to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from server import main as server_main
from sample_submissions import UNRELATED_IDEA, draft_one, final_draft


def call_tool(tool, **kwargs):
    """Run an MCP tool's underlying coroutine and decode its JSON reply."""
    fn = getattr(tool, "fn", tool)
    return json.loads(asyncio.run(fn(**kwargs)))


class TestValidationServer(unittest.TestCase):
    """Test suite for the MCP tool layer."""

    def setUp(self):
        server_main.validator = None

    def test_validate_submission(self):
        reply = call_tool(server_main.validate_submission, submission=draft_one(), draft_number=1)
        self.assertTrue(reply["success"])
        self.assertTrue(reply["result"]["passed"])
        self.assertEqual(reply["result"]["qualityScore"], 86)
        self.assertIn("pattern_version", reply)

    def test_validate_reports_score_divergence(self):
        reply = call_tool(
            server_main.validate_submission,
            submission=final_draft(),
            existing_ideas=[UNRELATED_IDEA],
            draft_number=3,
            ai_score=70,
        )
        self.assertTrue(reply["success"])
        self.assertTrue(reply["score_divergence"]["diverged"])
        self.assertEqual(reply["score_divergence"]["local_score"], 100)

    def test_invalid_submission_is_reported(self):
        reply = call_tool(server_main.validate_submission, submission={"product_idea": ["not", "text"]})
        self.assertFalse(reply["success"])
        self.assertEqual(reply["details"]["error_type"], "InvalidSubmissionError")

    def test_unexpected_errors_are_reported(self):
        with patch.object(server_main, "get_validator_instance", side_effect=RuntimeError("boom")):
            reply = call_tool(server_main.validate_submission, submission=draft_one())
        self.assertFalse(reply["success"])
        self.assertEqual(reply["error"], "boom")

    def test_score_submission(self):
        reply = call_tool(server_main.score_submission, submission=final_draft(), draft_number=3)
        self.assertTrue(reply["success"])
        self.assertEqual(reply["quality_score"], 100)
        self.assertEqual(reply["breakdown"]["stage_bonus"], 25)
        self.assertIn("feasibility_score", reply["feasibility"])

    def test_spam_and_privacy_tools(self):
        reply = call_tool(server_main.check_spam, text="Click here for a free trial")
        self.assertTrue(reply["check"]["is_spam"])
        reply = call_tool(server_main.check_privacy, text="Write to me at someone@example.com")
        self.assertTrue(reply["check"]["has_private_info"])

    def test_check_duplicates(self):
        reply = call_tool(
            server_main.check_duplicates,
            submission=draft_one(),
            existing_ideas=[UNRELATED_IDEA, draft_one()],
        )
        self.assertTrue(reply["check"]["is_duplicate"])
        self.assertEqual(reply["check"]["matched_index"], 1)

    def test_next_draft_number(self):
        drafts = [dict(draft_one(), version=1)]
        reply = call_tool(server_main.next_draft_number, drafts=drafts)
        self.assertEqual(reply["draft_number"], 2)
        self.assertFalse(reply["is_final"])
        self.assertFalse(reply["closed"])

    def test_closed_project(self):
        drafts = [dict(draft_one(), version=n) for n in (1, 2, 3)]
        reply = call_tool(server_main.next_draft_number, drafts=drafts)
        self.assertEqual(reply["draft_number"], 4)
        self.assertFalse(reply["is_final"])
        self.assertTrue(reply["closed"])

        reply = call_tool(server_main.next_draft_number, drafts=drafts[:2])
        self.assertTrue(reply["is_final"])

    def test_malformed_draft_version_is_reported(self):
        reply = call_tool(server_main.next_draft_number, drafts=[dict(draft_one(), version="v1")])
        self.assertFalse(reply["success"])
        self.assertEqual(reply["details"]["error_type"], "InvalidSubmissionError")


if __name__ == '__main__':
    unittest.main()
