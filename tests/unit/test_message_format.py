from release_announcer.rendering.slack_format import (
    CAUTION_SUFFIX,
    append_caution,
    compose_message,
    extract_last_commit_body,
    format_download_link,
    render_error_reply,
    render_updated_message,
)
from release_announcer.schemas.plugin_config import EffectiveConfig
from release_announcer.schemas.release import Commit, ReleaseContext


def _config(**overrides) -> EffectiveConfig:
    values = dict(
        message_template="New release: ${nextRelease.version}",
        include_changelog=True,
        include_last_commit_text=True,
        last_line="",
        assets={},
        prerelease_enabled=False,
    )
    values.update(overrides)
    return EffectiveConfig(**values)


def test_commit_body_drops_subject_blank_lines_and_trailers():
    """
    WHY: The announcement should only show the human-written commit body.
    HOW: Commit with subject, blank lines and trailers in mixed case and indentation.
    EXPECTED: Only the body lines survive, joined by newlines.
    """
    message = (
        "feat: new exporter\n"
        "\n"
        "Adds CSV export.\n"
        "   \n"
        "Handles unicode.\n"
        "  SIGNED-OFF-BY: Dev <dev@example.com>\n"
        "Co-Authored-By: Other <o@example.com>\n"
        "co-authored-by:someone\n"
    )
    assert extract_last_commit_body([Commit(message=message)]) == "Adds CSV export.\nHandles unicode."


def test_commit_body_uses_newest_commit_only():
    commits = [Commit(message="fix: a\n\nnewest"), Commit(message="fix: b\n\nolder")]
    assert extract_last_commit_body(commits) == "newest"


def test_commit_body_empty_cases():
    assert extract_last_commit_body([]) == ""
    assert extract_last_commit_body([Commit(message="chore: subject only")]) == ""
    assert extract_last_commit_body([Commit(message="fix: x\n\nSigned-off-by: X")]) == ""


def test_compose_full_message_order():
    release = ReleaseContext(version="1.2.0", notes="fix bug")
    text = compose_message(_config(), release, "Details here")
    assert text == (
        "New release: 1.2.0\n\n"
        "📖 Description:\nDetails here\n\n"
        "📝 Changelog:\nfix bug\n\n"
    )


def test_compose_omits_disabled_or_empty_sections():
    release = ReleaseContext(version="1.2.0", notes="fix bug")

    text = compose_message(_config(include_last_commit_text=False), release, "Details here")
    assert "Description" not in text
    assert "Changelog:\nfix bug" in text

    text = compose_message(_config(), release, "")
    assert "Description" not in text

    text = compose_message(_config(include_changelog=False), release, "Details here")
    assert "Changelog" not in text

    text = compose_message(_config(), ReleaseContext(version="1.2.0"), "Details here")
    assert "Changelog" not in text


def test_compose_always_starts_with_template():
    release = ReleaseContext(version="0.9.0", notes="n")
    text = compose_message(_config(message_template="*${nextRelease.version}* is out"), release, "body")
    assert text.startswith("*0.9.0* is out\n\n")


def test_updated_message_appends_links_and_last_line():
    body = "New release: 1.2.0\n\n"
    links = [format_download_link("Binary", "https://x/app.bin"), format_download_link("Docs", "https://x/d.zip")]

    text = render_updated_message(body, links, "Thanks everyone!")
    assert text == (
        "New release: 1.2.0\n\n"
        "📥 Download Links:\n"
        "• *Binary*: <https://x/app.bin|Download>\n"
        "• *Docs*: <https://x/d.zip|Download>"
        "\n\nThanks everyone!"
    )
    assert render_updated_message(body, links[:1]).endswith("<https://x/app.bin|Download>")


def test_failure_texts():
    assert render_error_reply(RuntimeError("boom")) == ":x: An error occurred during the release process:\n`boom`"
    assert append_caution("hello") == "hello" + CAUTION_SUFFIX
    assert "NOT to use this version" in CAUTION_SUFFIX
