"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskId, TaskList)
- task_store.py: pure reducer functions over the task list
- task_api.py: small high-level helpers used by the rest of the app
"""
