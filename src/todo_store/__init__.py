"""
In-memory task list with theme and notification flags.

Entry points:
- core.dispatcher.TodoStore: the single owner of state (dispatch/subscribe)
- cli.main.main: interactive console front-end
"""

__version__ = "0.1.0"
