from .app import create_app, create_slack_app

__all__ = ["create_app", "create_slack_app"]
