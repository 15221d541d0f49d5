"""Tests for FakeUserFeedback test infrastructure."""

from tests.fakes.user_feedback import FakeUserFeedback


def test_fake_user_feedback_records_levels_in_order() -> None:
    feedback = FakeUserFeedback()

    feedback.info("Begin create the new project: demo")
    feedback.success("Project: demo created")
    feedback.info("Begin run composer install for init project")

    assert feedback.messages == [
        ("info", "Begin create the new project: demo"),
        ("success", "Project: demo created"),
        ("info", "Begin run composer install for init project"),
    ]
    assert feedback.info_messages == [
        "Begin create the new project: demo",
        "Begin run composer install for init project",
    ]
    assert feedback.success_messages == ["Project: demo created"]
