"""Release Announcer - posts release announcements with build artifacts to Slack.

Given a finished release (version, notes, commits, branch), the publisher posts
an announcement to a channel, uploads the resolved build artifacts as threaded
replies and rewrites the announcement with download links. When something goes
wrong the thread and the announcement are annotated before the error propagates.

Components:
- main_publish: command line entry point
- pipeline: publish orchestration
- assets: glob-based asset resolution
- rendering: placeholder interpolation and message composition
- slack: Slack API integration
"""
