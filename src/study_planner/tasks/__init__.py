"""
Task subsystem.

Components:
- task_models.py: data structures (Task, NoReminder, ReminderAt) and the serialized form
- task_errors.py: ValidationError / NotFoundError / StorageError
- task_store.py: in-process task store + reminders-enabled flag
- task_repo_memory.py: in-memory TaskRepository
- task_queries.py: date queries (today, on a date, calendar highlighting)
- reminders.py: stateless "which reminders are due now" evaluator
- task_scheduler.py: polling loop that hands due reminders to a notifier
- task_api.py: small high-level helpers used by the rest of the app
"""
